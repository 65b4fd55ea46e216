"""
Character serialization and deserialization functions.

The on-disk format is a JSON array of `{"name", "ac", "hp"}` objects. It has
no initiative score, so parsing produces `CharacterRecord` objects and the
score is attached afterwards, when the record becomes a `Character`.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from tracker.core.constants import EXPORT_INDENT, MAX_AC, MAX_HP

from .main import Character


class CharacterRecord(BaseModel):
    """A character as stored in an import/export file."""

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str = Field(description="The name of the character.")
    ac: int = Field(ge=0, le=MAX_AC, description="The armor class.")
    hp: int = Field(ge=0, le=MAX_HP, description="The maximum hit points.")


_RECORD_LIST = TypeAdapter(list[CharacterRecord])


def parse_records(text: str | bytes) -> list[CharacterRecord]:
    """
    Parses the content of a roster file.

    Args:
        text (str | bytes):
            The JSON text of the file.

    Returns:
        list[CharacterRecord]:
            The records, in file order.

    Raises:
        pydantic.ValidationError:
            If the text is not JSON or does not match the record schema.

    """
    return _RECORD_LIST.validate_json(text)


def dump_records(records: list[CharacterRecord]) -> str:
    """
    Serializes records to the pretty-printed JSON stored on disk.

    Args:
        records (list[CharacterRecord]):
            The records to serialize.

    Returns:
        str:
            The JSON text.

    """
    return _RECORD_LIST.dump_json(records, indent=EXPORT_INDENT).decode()


def record_from_character(character: Character) -> CharacterRecord:
    """
    Creates the file record of a character.

    Only the maximum hit points are kept; current HP, temporary HP and the
    initiative score are not part of the file format.

    Args:
        character (Character):
            The character to convert.

    Returns:
        CharacterRecord:
            The record to store.

    """
    return CharacterRecord(name=character.name, ac=character.ac, hp=character.max_hp)


def character_from_record(record: CharacterRecord, score: int) -> Character:
    """
    Creates a fresh, fully healed Character from a file record.

    Args:
        record (CharacterRecord):
            The record read from file.
        score (int):
            The initiative score to give the character.

    Returns:
        Character:
            The created Character instance.

    """
    return Character(name=record.name, ac=record.ac, max_hp=record.hp, score=score)
