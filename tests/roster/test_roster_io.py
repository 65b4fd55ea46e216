"""
Tests for reading and writing JSON roster files.
"""

import json

import pytest
from tracker.character import Character
from tracker.core.errors import EmptyRosterError, RosterIOError
from tracker.roster import Roster, export_file, import_file, load_records, save_records


@pytest.fixture
def roster():
    roster = Roster()
    roster.insert(Character(name="Goblin", ac=15, max_hp=7, score=12))
    roster.insert(Character(name="Ogre", ac=11, max_hp=59, score=8))
    roster.insert(Character(name="Paladin", ac=18, max_hp=44, score=17))
    return roster


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "party.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Rogue", "ac": 14, "hp": 27},
                {"name": "Cleric", "ac": 18, "hp": 31, "notes": "ignored"},
            ]
        )
    )
    return path


def test_load_records(roster_file):
    """
    Test that a valid file is read in file order.
    """
    records = load_records(roster_file)
    assert [(r.name, r.ac, r.hp) for r in records] == [
        ("Rogue", 14, 27),
        ("Cleric", 18, 31),
    ]


def test_load_records_missing_file(tmp_path):
    """
    Test that an unreadable path is reported as invalid.
    """
    with pytest.raises(RosterIOError, match="Provided path is not valid"):
        load_records(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        '{"name": "Rogue", "ac": 14, "hp": 27}',
        '[{"name": "Rogue", "ac": 14}]',
        '[{"name": "Rogue", "ac": 256, "hp": 27}]',
        '[{"name": "Rogue", "ac": 14, "hp": -1}]',
        '[{"name": "Rogue", "ac": "14", "hp": 27}]',
        '[{"name": 7, "ac": 14, "hp": 27}]',
    ],
)
def test_load_records_bad_format(tmp_path, content):
    """
    Test that content not matching the schema is rejected.
    """
    path = tmp_path / "bad.json"
    path.write_text(content)
    with pytest.raises(RosterIOError, match="not in the expected format"):
        load_records(path)


def test_import_file_asks_score_per_record(roster, roster_file):
    """
    Test that imported characters are merged in initiative order.
    """
    scores = {"Rogue": 20, "Cleric": 10}
    import_file(roster, roster_file, lambda record: scores[record.name])
    assert roster.names() == ["Rogue", "Paladin", "Goblin", "Cleric", "Ogre"]
    assert roster.current().name == "Goblin"


def test_import_bad_file_leaves_roster_unchanged(roster, tmp_path, mocker):
    """
    Test that a malformed file adds nobody and asks nothing.
    """
    path = tmp_path / "bad.json"
    path.write_text('[{"name": "Rogue", "ac": 14, "hp": 27}, {"name": "Broken"}]')
    score_for = mocker.Mock(return_value=5)
    with pytest.raises(RosterIOError):
        import_file(roster, path, score_for)
    score_for.assert_not_called()
    assert roster.names() == ["Paladin", "Goblin", "Ogre"]


def test_export_file_writes_pretty_json(roster, tmp_path):
    """
    Test the exported file content.
    """
    roster.damage("Ogre", 20)
    path = tmp_path / "out.json"
    export_file(roster, path)
    assert json.loads(path.read_text()) == [
        {"name": "Paladin", "ac": 18, "hp": 44},
        {"name": "Goblin", "ac": 15, "hp": 7},
        {"name": "Ogre", "ac": 11, "hp": 59},
    ]
    assert path.read_text().startswith('[\n  {\n    "name": "Paladin"')


def test_export_refuses_to_overwrite(roster, tmp_path):
    """
    Test that an existing file is never overwritten.
    """
    path = tmp_path / "out.json"
    path.write_text("keep me")
    with pytest.raises(RosterIOError, match="already exists"):
        export_file(roster, path)
    assert path.read_text() == "keep me"


def test_export_to_invalid_directory(roster, tmp_path):
    """
    Test that a path in a missing directory is reported.
    """
    with pytest.raises(RosterIOError, match="Path is invalid"):
        export_file(roster, tmp_path / "missing" / "out.json")


def test_export_empty_roster_writes_nothing(tmp_path):
    """
    Test that exporting an empty roster fails before creating a file.
    """
    path = tmp_path / "out.json"
    with pytest.raises(EmptyRosterError):
        export_file(Roster(), path)
    assert not path.exists()


def test_save_records_write_failure(roster, tmp_path, mocker):
    """
    Test that a failed write is reported as such.
    """
    path = tmp_path / "out.json"
    mocker.patch("tracker.roster.roster_io.dump_records", return_value="[]")
    handle = mocker.mock_open()
    handle.return_value.write.side_effect = OSError("disk full")
    mocker.patch("tracker.roster.roster_io.open", handle, create=True)
    with pytest.raises(RosterIOError, match="Could not save to file"):
        save_records(path, roster.export_records())


def test_round_trip(roster, tmp_path):
    """
    Test that AC and HP survive an export followed by an import.
    """
    path = tmp_path / "round.json"
    roster.damage("Goblin", 3)
    export_file(roster, path)

    original = {c.name: c for c in roster}
    restored = Roster()
    import_file(restored, path, lambda record: original[record.name].score)

    assert restored.names() == roster.names()
    for character in restored:
        assert character.ac == original[character.name].ac
        assert character.max_hp == original[character.name].max_hp
        assert character.current_hp == character.max_hp
