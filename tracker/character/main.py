"""
Character model module for the tracker.

Defines the Character class: one combatant in the initiative order, with its
armor class, hit-point pool, temporary hit points and initiative score.
"""

from tracker.core.constants import MAX_AC, MAX_HP, MAX_SCORE
from tracker.core.validation import require_in_range


class Character:
    """
    Represents one combatant tracked in the initiative order.

    Attributes:
        name (str):
            The name of the character, used to look it up in the roster.
        ac (int):
            The armor class of the character.
        current_hp (int):
            The current hit points, between 0 and `max_hp`.
        max_hp (int):
            The maximum hit points of the character.
        score (int):
            The initiative score, higher acts first.
        temp_hp (int):
            Temporary hit points, consumed before `current_hp`.

    """

    name: str
    ac: int
    current_hp: int
    max_hp: int
    score: int
    temp_hp: int

    def __init__(self, name: str, ac: int, max_hp: int, score: int) -> None:
        context = {"name": name}
        self.name = name
        self.ac = require_in_range(ac, "ac", MAX_AC, context)
        self.max_hp = require_in_range(max_hp, "max_hp", MAX_HP, context)
        self.score = require_in_range(score, "score", MAX_SCORE, context)
        self.current_hp = self.max_hp
        self.temp_hp = 0

    def damage(self, amount: int) -> None:
        """
        Deals damage to the character, draining temporary hit points first.

        Args:
            amount (int):
                The amount of damage to deal.

        """
        if self.temp_hp > amount:
            self.temp_hp -= amount
            return
        amount -= self.temp_hp
        self.temp_hp = 0
        self.current_hp = max(0, self.current_hp - amount)

    def heal(self, amount: int) -> None:
        """
        Heals the character, never above its maximum hit points.

        Args:
            amount (int):
                The amount of hit points to restore.

        """
        self.current_hp = min(self.current_hp + amount, self.max_hp)

    def grant_temp(self, amount: int) -> None:
        """
        Replaces the character's temporary hit points (they do not stack).

        Args:
            amount (int):
                The new amount of temporary hit points.

        """
        self.temp_hp = amount

    @property
    def is_down(self) -> bool:
        """Returns True if the character has no hit points left."""
        return self.current_hp == 0

    def __repr__(self) -> str:
        return (
            f"Character(name={self.name!r}, ac={self.ac}, "
            f"hp={self.current_hp}/{self.max_hp}, temp={self.temp_hp}, "
            f"score={self.score})"
        )
