"""
Character display module for the tracker.

Renders a character as a fixed-format boxed panel showing its name, hit
points, armor class and initiative score.
"""

from tracker.core.constants import MIN_PANEL_WIDTH

from .main import Character


def _hp_text(character: Character) -> str:
    """Returns the HP line content, including temporary hit points if any."""
    hp = f" HP {character.current_hp}/{character.max_hp}"
    if character.temp_hp > 0:
        hp += f" + {character.temp_hp}"
    return hp


def panel_width(character: Character) -> int:
    """
    Computes the inner width of the character panel.

    Args:
        character (Character): The character to render.

    Returns:
        int: The number of columns between the two vertical borders.

    """
    return max(
        MIN_PANEL_WIDTH,
        len(character.name) + 2,
        len(_hp_text(character)) + 1,
    )


def render_panel(character: Character) -> str:
    """
    Renders the character as a boxed text panel.

    Example:
        ┌───────────────┐
        │    Goblin     │
        │ HP 7/7        │
        │ AC 15         │
        │ Init 12       │
        └───────────────┘

    Args:
        character (Character): The character to render.

    Returns:
        str: The panel lines, ending with a newline.

    """
    width = panel_width(character)
    # Centre the name, an odd leftover column goes to the right.
    left = (width - len(character.name)) // 2
    right = width - len(character.name) - left

    rows = [
        " " * left + character.name + " " * right,
        _hp_text(character),
        f" AC {character.ac}",
        f" Init {character.score}",
    ]
    lines = ["┌" + "─" * width + "┐"]
    lines += [f"│{row:<{width}}│" for row in rows]
    lines.append("└" + "─" * width + "┘")
    return "\n".join(lines) + "\n"
