"""
Roster module for the tracker.

Defines the Roster: the characters of an encounter kept in initiative order,
together with the cursor marking whose turn it is.
"""

from collections.abc import Callable, Iterator

from catchery import log_debug

from tracker.character import (
    Character,
    CharacterRecord,
    character_from_record,
    record_from_character,
)
from tracker.core.errors import EmptyRosterError


class Roster:
    """
    Keeps characters sorted by descending initiative score and tracks the
    current turn.

    Characters with equal scores stay in the order they were added. The turn
    cursor is an index into the list; every operation that shifts the list
    also moves the cursor so it keeps pointing at the same character, or at
    its successor when that character is removed.

    Attributes:
        characters (list[Character]):
            The characters, head (highest score) first.
        cursor (int | None):
            Index of the character whose turn it is, None if the roster is
            empty.

    """

    def __init__(self) -> None:
        """Initialize an empty roster."""
        self.characters: list[Character] = []
        self.cursor: int | None = None

    def __len__(self) -> int:
        return len(self.characters)

    def __iter__(self) -> Iterator[Character]:
        return iter(self.characters)

    def __bool__(self) -> bool:
        return bool(self.characters)

    def names(self) -> list[str]:
        """Returns the names of all characters, in initiative order."""
        return [character.name for character in self.characters]

    # ============================================================================
    # ORDERING AND LOOKUP
    # ============================================================================

    def insert(self, character: Character) -> None:
        """
        Adds a character right before the first one with a lower score.

        Args:
            character (Character):
                The character to add.

        """
        index = next(
            (
                i
                for i, other in enumerate(self.characters)
                if other.score < character.score
            ),
            len(self.characters),
        )
        self.characters.insert(index, character)
        if self.cursor is None:
            self.cursor = 0
        elif index <= self.cursor:
            # Keep the cursor on the character it was pointing at.
            self.cursor += 1

    def index_of(self, name: str) -> int | None:
        """
        Finds the position of the first character with the given name.

        Args:
            name (str):
                The exact, case-sensitive name to look for.

        Returns:
            int | None:
                The index of the character, or None if there is none.

        """
        return next(
            (i for i, character in enumerate(self.characters) if character.name == name),
            None,
        )

    def find(self, name: str) -> Character | None:
        """
        Finds the first character with the given name.

        Args:
            name (str):
                The exact, case-sensitive name to look for.

        Returns:
            Character | None:
                The character, or None if there is none.

        """
        index = self.index_of(name)
        if index is None:
            return None
        return self.characters[index]

    def remove(self, name: str) -> Character | None:
        """
        Removes the first character with the given name.

        If it was the current character, the turn passes to the next one (or
        back to the head when it was the last).

        Args:
            name (str):
                The exact, case-sensitive name of the character to remove.

        Returns:
            Character | None:
                The removed character, or None if no character has that name.

        Raises:
            EmptyRosterError:
                If the roster has no characters at all.

        """
        if not self.characters:
            raise EmptyRosterError()
        index = self.index_of(name)
        if index is None:
            log_debug(
                f"Cannot remove '{name}': not in the initiative order.",
                {"name": name, "context": "roster_remove"},
            )
            return None
        removed = self.characters.pop(index)
        assert self.cursor is not None
        if not self.characters:
            self.cursor = None
        elif index < self.cursor:
            self.cursor -= 1
        elif index == self.cursor and index == len(self.characters):
            # The removed character was the tail, wrap around.
            self.cursor = 0
        return removed

    # ============================================================================
    # TURN CURSOR
    # ============================================================================

    def current(self) -> Character | None:
        """Returns the character whose turn it is, or None if the roster is empty."""
        if self.cursor is None:
            return None
        return self.characters[self.cursor]

    def advance(self) -> None:
        """Passes the turn to the next character, wrapping back to the head."""
        if not self.characters:
            return
        if self.cursor is None or self.cursor + 1 >= len(self.characters):
            self.cursor = 0
        else:
            self.cursor += 1

    def reset_to_head(self) -> None:
        """Gives the turn to the character with the highest score."""
        if self.characters:
            self.cursor = 0

    # ============================================================================
    # CHARACTER MUTATION BY NAME
    # ============================================================================

    def _apply(
        self, name: str, operation: Callable[[Character], None], action: str
    ) -> Character | None:
        """Applies an operation to the named character, if present."""
        target = self.find(name)
        if target is None:
            log_debug(
                f"Cannot {action} '{name}': not in the initiative order.",
                {"name": name, "context": f"roster_{action}"},
            )
            return None
        operation(target)
        return target

    def damage(self, name: str, amount: int) -> Character | None:
        """
        Deals damage to the named character.

        Returns:
            Character | None:
                The damaged character, or None if no character has that name.

        """
        return self._apply(name, lambda c: c.damage(amount), "damage")

    def heal(self, name: str, amount: int) -> Character | None:
        """
        Heals the named character.

        Returns:
            Character | None:
                The healed character, or None if no character has that name.

        """
        return self._apply(name, lambda c: c.heal(amount), "heal")

    def grant_temp(self, name: str, amount: int) -> Character | None:
        """
        Replaces the temporary hit points of the named character.

        Returns:
            Character | None:
                The character, or None if no character has that name.

        """
        return self._apply(name, lambda c: c.grant_temp(amount), "grant_temp")

    # ============================================================================
    # IMPORT / EXPORT
    # ============================================================================

    def import_records(
        self,
        records: list[CharacterRecord],
        score_for: Callable[[CharacterRecord], int],
    ) -> list[Character]:
        """
        Adds the characters described by file records.

        Records carry no initiative score, so `score_for` is asked for one,
        record by record in file order. All characters are built before any
        is inserted: if `score_for` raises, the roster is left untouched.

        Args:
            records (list[CharacterRecord]):
                The records read from file.
            score_for (Callable[[CharacterRecord], int]):
                Returns the initiative score of a record.

        Returns:
            list[Character]:
                The added characters, in file order.

        """
        characters = [
            character_from_record(record, score_for(record)) for record in records
        ]
        for character in characters:
            self.insert(character)
        return characters

    def export_records(self) -> list[CharacterRecord]:
        """
        Converts the roster to file records, in initiative order.

        Returns:
            list[CharacterRecord]:
                One record per character.

        Raises:
            EmptyRosterError:
                If the roster has no characters.

        """
        if not self.characters:
            raise EmptyRosterError()
        return [record_from_character(character) for character in self.characters]
