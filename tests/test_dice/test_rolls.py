"""Tests for rolls and roll sets."""

from unittest.mock import patch

import pytest

from xander.dice.die import D4, D6, D20, Die
from xander.dice.modifiers import Add, Advantage, Expression, Mul, Sub
from xander.dice.rolls import Roll, RollSet
from xander.exceptions import UnresolvedRollSet


def make_rolls(die, *faces) -> RollSet:
    """RollSet with fixed faces for one die."""
    return RollSet().add(die, faces)


class TestRoll:
    """Tests for a single roll."""

    def test_visible_value(self):
        """A visible roll counts its face."""
        assert Roll(5).value == 5

    def test_hidden_value_is_zero(self):
        """A hidden roll counts as zero."""
        roll = Roll(5)
        roll.hide()
        assert roll.hidden is True
        assert roll.value == 0
        assert roll.raw == 5

    def test_show_restores_value(self):
        """Showing a hidden roll restores its value."""
        roll = Roll(5, hidden=True)
        roll.show()
        assert roll.value == 5

    def test_repr(self):
        """Hidden rolls render as an underscore."""
        assert repr(Roll(5)) == "Roll(5)"
        assert repr(Roll(5, hidden=True)) == "Roll(_)"


class TestRollSetAccumulation:
    """Tests for adding rolls."""

    def test_empty_total_is_zero(self):
        """An empty set totals 0."""
        assert RollSet().total() == 0

    def test_k_rolls_of_v(self):
        """k rolls of v total k * v."""
        assert make_rolls(D6, *[4] * 5).total() == 20

    def test_add_accepts_raw_ints(self):
        """Raw faces are wrapped as visible rolls."""
        rolls = RollSet().add(D20, [7])
        assert rolls.get(D20) == (Roll(7),)

    def test_add_returns_self(self):
        """add supports chaining."""
        rolls = RollSet()
        assert rolls.add(D20, [1]) is rolls

    def test_groups_keyed_by_sides(self):
        """Different D20 instances share a group."""
        rolls = RollSet().add(D20, [3]).add(Die(20), [17]).add(D4, [2])
        assert [roll.raw for roll in rolls.get(D20)] == [3, 17]
        assert set(rolls.groups) == {20, 4}

    def test_insertion_order_preserved(self):
        """Rolls within a group stay in insertion order."""
        rolls = RollSet().add(D6, [6, 1]).add(D6, [3])
        assert [roll.raw for roll in rolls[D6]] == [6, 1, 3]

    def test_missing_group_is_empty(self):
        """Asking for an unrolled die returns no rolls, not an error."""
        assert make_rolls(D20, 10).get(D4) == ()
        assert make_rolls(D20, 10)[D4] == ()

    def test_hidden_rolls_do_not_count(self):
        """A visible 5 and a hidden 100 total 5."""
        rolls = RollSet().add(Die(100), [Roll(5), Roll(100, hidden=True)])
        assert rolls.total() == 5

    def test_len_and_iter(self):
        """len counts every roll; iteration visits them all."""
        rolls = RollSet().add(D20, [1, 2]).add(D4, [3])
        assert len(rolls) == 3
        assert sorted(roll.raw for roll in rolls) == [1, 2, 3]

    def test_natural_is_first_visible(self):
        """natural reports the first visible face of a die."""
        rolls = RollSet().add(D20, [Roll(3, hidden=True), Roll(17)])
        assert rolls.natural(D20) == 17
        assert rolls.natural(D4) is None


class TestRollSetModifiers:
    """Tests for the modifier chain."""

    def test_then_returns_same_set(self):
        """then appends and returns the same set."""
        rolls = make_rolls(D20, 10)
        assert rolls.then(Add(1)) is rolls

    def test_then_preserves_order(self):
        """Modifiers are kept in attachment order."""
        first, second = Advantage(D20), Add(3)
        rolls = make_rolls(D20, 10).then(first).then(second)
        assert rolls.modifiers == (first, second)

    def test_first_scalar_wins(self):
        """Evaluation stops at the first scalar-producing modifier."""
        rolls = make_rolls(D20, 10).then(Add(5)).then(Add(100))
        assert rolls.apply() == 15

    def test_then_accepts_callable(self):
        """Plain callables become scalar modifiers of the subtotal."""
        rolls = make_rolls(D20, 4).then(lambda subtotal: max(subtotal, 10))
        assert rolls.apply() == 10

    def test_then_rejects_non_callable(self):
        """Anything else is a type error."""
        with pytest.raises(TypeError):
            make_rolls(D20, 4).then(5)

    def test_apply_without_scalar_raises(self):
        """apply reports an unresolved chain, carrying the set back."""
        rolls = make_rolls(D20, 3, 17).then(Advantage(D20))
        with pytest.raises(UnresolvedRollSet) as exc_info:
            rolls.apply()
        assert exc_info.value.rolls is rolls

    def test_unresolved_set_can_be_recovered(self):
        """The caller can attach a scalar modifier and apply again."""
        rolls = make_rolls(D20, 3, 17).then(Advantage(D20))
        try:
            rolls.apply()
        except UnresolvedRollSet as exc:
            recovered = exc.rolls.then(Add(2))
        assert recovered.apply() == 19

    def test_empty_apply_raises(self):
        """An empty set with no modifiers is unresolved."""
        with pytest.raises(UnresolvedRollSet):
            RollSet().apply()

    def test_apply_keeps_visibility_changes(self):
        """apply mutates the set's own rolls."""
        rolls = make_rolls(D20, 3, 17).then(Advantage(D20)).then(Add(0))
        rolls.apply()
        assert [roll.hidden for roll in rolls[D20]] == [True, False]

    def test_peek_is_non_destructive(self):
        """peek leaves the rolls untouched and is repeatable."""
        rolls = make_rolls(D20, 3, 17).then(Advantage(D20))
        assert rolls.peek() == 17
        assert rolls.peek() == 17
        assert all(not roll.hidden for roll in rolls[D20])

    def test_total_falls_back_to_visible_sum(self):
        """total sums visible rolls when nothing resolves the chain."""
        rolls = make_rolls(D20, 3, 17).then(Advantage(D20))
        assert rolls.total() == 17

    def test_preview_applies_visibility_to_copy(self):
        """preview shows the chain's effect without touching the set."""
        rolls = make_rolls(D20, 3, 17).then(Advantage(D20))
        preview = rolls.preview()
        assert [roll.hidden for roll in preview[D20]] == [True, False]
        assert all(not roll.hidden for roll in rolls[D20])

    def test_copy_is_independent(self):
        """Copies do not share Roll objects."""
        rolls = make_rolls(D20, 8)
        duplicate = rolls.copy()
        duplicate[D20][0].hide()
        assert rolls.total() == 8


class TestRollSetExtend:
    """Tests for merging roll sets."""

    def test_extend_merges_groups(self):
        """Groups are unioned; shared dice are concatenated in order."""
        left = RollSet().add(D20, [1]).add(D4, [2])
        right = RollSet().add(D20, [3]).add(D6, [4])
        left.extend(right)
        assert [roll.raw for roll in left[D20]] == [1, 3]
        assert left.total() == 10

    def test_extend_appends_modifiers(self):
        """The other set's modifiers run after this set's."""
        left = make_rolls(D20, 1).then(Advantage(D20))
        right = make_rolls(D20, 2).then(Add(1))
        left.extend(right)
        assert [modifier.id for modifier in left.modifiers] == ["5E::ADVANTAGE", "OPERATIONS::ADD"]

    def test_extend_takes_ownership(self):
        """The other set is emptied."""
        left, right = make_rolls(D20, 1), make_rolls(D20, 2).then(Add(1))
        left.extend(right)
        assert len(right) == 0
        assert right.modifiers == ()

    def test_extend_with_itself_rejected(self):
        """A set cannot absorb itself."""
        rolls = make_rolls(D20, 1)
        with pytest.raises(ValueError):
            rolls.extend(rolls)

    def test_extend_order_does_not_change_total(self):
        """Group merging is order-independent for totals."""
        a = lambda: RollSet().add(D20, [5]).add(D4, [1])
        b = lambda: RollSet().add(D20, [7])
        c = lambda: RollSet().add(D6, [3])
        assert a().extend(b()).extend(c()).total() == c().extend(a().extend(b())).total() == 16

    def test_plus_roll_set_extends(self):
        """+ between roll sets is extend."""
        rolls = make_rolls(D20, 5) + make_rolls(D4, 3)
        assert rolls.total() == 8


class TestRollSetOperators:
    """Tests for arithmetic operators."""

    def test_single_operator(self):
        """One operator attaches one arithmetic modifier."""
        rolls = make_rolls(D20, 12) + 5
        assert rolls.modifiers == (Add(5),)
        assert rolls.apply() == 17

    def test_chained_operators_all_count(self):
        """Chained operators fold into one expression, left to right."""
        rolls = make_rolls(D20, 12) + 5 + 2
        assert len(rolls.modifiers) == 1
        assert isinstance(rolls.modifiers[0], Expression)
        assert rolls.apply() == 19

    def test_mixed_operators_evaluate_left_to_right(self):
        """(12 - 2) * 3 + 1 = 31."""
        assert ((make_rolls(D20, 12) - 2) * 3 + 1).apply() == 31

    def test_floor_division_of_negative_total(self):
        """(3 - 10) // 2 rounds toward negative infinity: -4."""
        assert ((make_rolls(D20, 3) - 10) // 2).apply() == -4

    def test_operator_after_in_place_modifier(self):
        """Arithmetic after advantage applies to the kept roll."""
        rolls = make_rolls(D20, 3, 17).then(Advantage(D20)) + 5
        assert rolls.apply() == 22

    def test_operator_folds_into_explicit_arithmetic(self):
        """An operator after then(Add) extends that step."""
        rolls = make_rolls(D20, 10).then(Sub(1)) * 2
        (expression,) = rolls.modifiers
        assert expression.steps == (Sub(1), Mul(2))
        assert rolls.apply() == 18

    def test_operators_modify_left_operand(self):
        """Operators extend the left set in place and return it."""
        base = make_rolls(D20, 10)
        bonus = base + 5
        assert bonus is base
        assert base.total() == 15

    def test_copy_keeps_original_unmodified(self):
        base = make_rolls(D20, 10)
        bonus = base.copy() + 5
        assert base.total() == 10
        assert bonus.total() == 15

    def test_unsupported_operand(self):
        """Non-integer operands are rejected."""
        with pytest.raises(TypeError):
            make_rolls(D20, 10) + 1.5


class TestRollSetDescribe:
    """Tests for human-readable output."""

    def test_describe_empty(self):
        assert RollSet().describe() == "0"

    def test_describe_marks_hidden_rolls(self):
        """Hidden rolls are prefixed with ~."""
        rolls = RollSet().add(D20, [Roll(3, hidden=True), Roll(17)]) + 5
        assert rolls.describe() == "d20[~3, 17] + 5"

    def test_describe_multiple_groups(self):
        rolls = RollSet().add(D20, [10]).add(D4, [2])
        assert rolls.describe() == "d20[10] + d4[2]"

    @patch("xander.dice.die.random.randint", return_value=4)
    def test_repr(self, _mock_randint):
        assert repr(D6(2) - 1) == "RollSet(d6[4, 4] - 1)"
