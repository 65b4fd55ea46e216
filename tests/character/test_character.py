"""
Tests for the character model and its panel rendering.
"""

import pytest
from tracker.character import Character, panel_width, render_panel


@pytest.fixture
def fighter():
    return Character(name="Fighter", ac=16, max_hp=10, score=12)


def test_new_character_is_fully_healed(fighter):
    """
    Test that a new character starts at maximum HP without temporary HP.
    """
    assert fighter.current_hp == 10
    assert fighter.max_hp == 10
    assert fighter.temp_hp == 0
    assert fighter.ac == 16
    assert fighter.score == 12


@pytest.mark.parametrize(
    "field, kwargs",
    [
        ("ac", {"ac": 256, "max_hp": 10, "score": 1}),
        ("max_hp", {"ac": 10, "max_hp": 65536, "score": 1}),
        ("score", {"ac": 10, "max_hp": 10, "score": -1}),
        ("score", {"ac": 10, "max_hp": 10, "score": True}),
    ],
)
def test_out_of_range_fields_are_rejected(field, kwargs):
    """
    Test that numeric fields outside their range raise ValueError.
    """
    with pytest.raises(ValueError, match=field):
        Character(name="Broken", **kwargs)


def test_damage_floors_at_zero(fighter):
    """
    Test that damage reduces HP and never takes it below zero.
    """
    fighter.damage(3)
    assert fighter.current_hp == 7
    fighter.damage(7)
    assert fighter.current_hp == 0
    fighter.damage(1)
    assert fighter.current_hp == 0
    assert fighter.is_down


def test_temp_hp_absorbs_damage_first(fighter):
    """
    Test that temporary HP absorbs damage and the excess spills over.
    """
    fighter.grant_temp(5)

    fighter.damage(3)
    assert fighter.temp_hp == 2
    assert fighter.current_hp == 10

    fighter.damage(4)
    assert fighter.temp_hp == 0
    assert fighter.current_hp == 8


def test_damage_equal_to_temp_hp_consumes_it(fighter):
    """
    Test that damage equal to the temporary HP drains it without touching HP.
    """
    fighter.grant_temp(4)
    fighter.damage(4)
    assert fighter.temp_hp == 0
    assert fighter.current_hp == 10


def test_heal_is_clamped_to_max(fighter):
    """
    Test that healing never exceeds maximum HP.
    """
    fighter.damage(5)
    fighter.heal(100)
    assert fighter.current_hp == 10


def test_heal_does_not_restore_temp_hp(fighter):
    """
    Test that healing leaves temporary HP alone.
    """
    fighter.grant_temp(3)
    fighter.damage(6)
    fighter.heal(2)
    assert fighter.temp_hp == 0
    assert fighter.current_hp == 9


def test_grant_temp_overwrites(fighter):
    """
    Test that a new temporary HP grant replaces the remaining buffer.
    """
    fighter.grant_temp(8)
    fighter.grant_temp(3)
    assert fighter.temp_hp == 3
    fighter.grant_temp(6)
    assert fighter.temp_hp == 6


def test_render_panel_minimum_width():
    """
    Test the panel of a character with short values.
    """
    goblin = Character(name="Goblin", ac=15, max_hp=7, score=12)
    assert render_panel(goblin) == (
        "┌───────────────┐\n"
        "│    Goblin     │\n"
        "│ HP 7/7        │\n"
        "│ AC 15         │\n"
        "│ Init 12       │\n"
        "└───────────────┘\n"
    )


def test_render_panel_with_temp_hp():
    """
    Test that temporary HP are shown on the HP line.
    """
    orc = Character(name="Orc", ac=13, max_hp=15, score=9)
    orc.grant_temp(4)
    lines = render_panel(orc).splitlines()
    assert lines[2] == "│ HP 15/15 + 4  │"


def test_render_panel_grows_with_long_name():
    """
    Test that a long name widens the panel.
    """
    dragon = Character(name="Ancient Red Dragon", ac=22, max_hp=546, score=20)
    assert panel_width(dragon) == 20
    lines = render_panel(dragon).splitlines()
    assert lines[1] == "│ Ancient Red Dragon │"
    assert all(len(line) == 22 for line in lines)


def test_render_panel_grows_with_hp_line():
    """
    Test that a long HP line widens the panel.
    """
    titan = Character(name="Titan", ac=25, max_hp=65535, score=1)
    titan.grant_temp(65535)
    # " HP 65535/65535 + 65535" is 23 characters, plus one column of margin.
    assert panel_width(titan) == 24
