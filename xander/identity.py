"""Identity tagging for rule entities.

Every ability, skill, proficiency category and proficiency type carries a
stable string identity, minted from a namespace. The identity is only
ever compared and hashed, never parsed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Namespace:
    """Prefix for the identities of one rule set.

    Passed explicitly to whatever declares entities; there is no
    process-wide "current" namespace.

    Examples:
        >>> Namespace("5E").tag("SKILL", "Sleight of Hand")
        '5E::SKILL::SLEIGHT_OF_HAND'
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name or "::" in self.name:
            raise ValueError(f"Invalid namespace name: {self.name!r}")

    def tag(self, kind: str, name: str) -> str:
        """Mint the identity for an entity of `kind` called `name`."""
        key = name.strip().upper().replace(" ", "_").replace("-", "_")
        return f"{self.name}::{kind.upper()}::{key}"


DEFAULT_NAMESPACE = Namespace("5E")


class Identity:
    """Mixin giving entities equality and hashing by their `id`."""

    id: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
