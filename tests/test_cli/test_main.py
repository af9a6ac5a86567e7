"""Tests for the xander command-line interface."""

from unittest.mock import patch

from typer.testing import CliRunner

from xander.cli.main import _advantage, app
from xander.dice import AdvantageType

runner = CliRunner()


class TestRollCommand:
    """Tests for 'xander roll'."""

    @patch("xander.dice.die.random.randint", return_value=4)
    def test_roll_notation(self, _mock_randint):
        result = runner.invoke(app, ["roll", "2d6+3"])
        assert result.exit_code == 0
        assert "2d6+3" in result.stdout
        assert "= 11" in result.stdout

    @patch("xander.dice.die.random.randint")
    def test_roll_keep_highest(self, mock_randint):
        mock_randint.side_effect = [5, 15]
        result = runner.invoke(app, ["roll", "2d20kh1"])
        assert result.exit_code == 0
        assert "= 15" in result.stdout

    @patch("xander.dice.die.random.randint", return_value=2)
    def test_roll_times(self, mock_randint):
        result = runner.invoke(app, ["roll", "d4", "--times", "3"])
        assert result.exit_code == 0
        assert result.stdout.count("= 2") == 3
        assert mock_randint.call_count == 3

    def test_roll_invalid_notation(self):
        result = runner.invoke(app, ["roll", "banana"])
        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestCheckCommand:
    """Tests for 'xander check'."""

    @patch("xander.dice.die.random.randint", return_value=10)
    def test_stealth_with_expertise(self, _mock_randint):
        result = runner.invoke(app, ["check", "stealth", "-s", "dex=20", "-e", "stealth", "-b", "2"])
        assert result.exit_code == 0
        assert "Stealth check" in result.stdout
        assert "= 19" in result.stdout

    @patch("xander.dice.die.random.randint", return_value=10)
    def test_check_against_dc(self, _mock_randint):
        result = runner.invoke(app, ["check", "stealth", "-s", "dex=14", "--dc", "15"])
        assert result.exit_code == 0
        assert "Failure" in result.stdout
        assert "DC 15" in result.stdout

    @patch("xander.dice.die.random.randint", return_value=20)
    def test_natural_twenty_reported(self, _mock_randint):
        result = runner.invoke(app, ["check", "athletics", "-s", "str=10", "--dc", "10"])
        assert result.exit_code == 0
        assert "Natural 20" in result.stdout
        assert "Success" in result.stdout

    @patch("xander.dice.die.random.randint")
    def test_advantage(self, mock_randint):
        mock_randint.side_effect = [3, 17]
        result = runner.invoke(app, ["check", "dex", "-s", "dex=10", "-a"])
        assert result.exit_code == 0
        assert "= 17" in result.stdout

    def test_missing_score(self):
        result = runner.invoke(app, ["check", "stealth"])
        assert result.exit_code == 1
        assert "No score recorded" in result.stdout

    def test_unknown_skill(self):
        result = runner.invoke(app, ["check", "juggling", "-s", "dex=10"])
        assert result.exit_code == 1
        assert "juggling" in result.stdout

    def test_malformed_score(self):
        result = runner.invoke(app, ["check", "stealth", "-s", "dex"])
        assert result.exit_code == 1
        assert "ABILITY=SCORE" in result.stdout


class TestSaveCommand:
    """Tests for 'xander save'."""

    @patch("xander.dice.die.random.randint", return_value=10)
    def test_proficient_save(self, _mock_randint):
        result = runner.invoke(app, ["save", "con", "-s", "con=16", "-p", "con", "-b", "3"])
        assert result.exit_code == 0
        assert "Constitution save" in result.stdout
        assert "= 16" in result.stdout

    def test_save_rejects_skill(self):
        result = runner.invoke(app, ["save", "stealth", "-s", "dex=10"])
        assert result.exit_code == 1


class TestSkillsCommand:
    """Tests for 'xander skills'."""

    def test_lists_skills(self):
        result = runner.invoke(app, ["skills"])
        assert result.exit_code == 0
        assert "Stealth" in result.stdout
        assert "Namespace: 5E" in result.stdout


class TestAdvantageFlags:
    """Tests for combining advantage flags."""

    def test_flags(self):
        assert _advantage(False, False) == AdvantageType.NORMAL
        assert _advantage(True, False) == AdvantageType.ADVANTAGE
        assert _advantage(False, True) == AdvantageType.DISADVANTAGE

    def test_both_cancel(self):
        assert _advantage(True, True) == AdvantageType.NORMAL
