"""Big block-digit rendering for the countdown display."""

from __future__ import annotations

GLYPH_HEIGHT = 5
GLYPH_WIDTH = 9

_GLYPHS: dict[str, tuple[str, ...]] = {
    "0": (
        " ██████  ",
        "██    ██ ",
        "██    ██ ",
        "██    ██ ",
        " ██████  ",
    ),
    "1": (
        "   ██    ",
        " ████    ",
        "   ██    ",
        "   ██    ",
        " ██████  ",
    ),
    "2": (
        " ██████  ",
        "      ██ ",
        " ██████  ",
        "██       ",
        "████████ ",
    ),
    "3": (
        " ██████  ",
        "      ██ ",
        " ██████  ",
        "      ██ ",
        " ██████  ",
    ),
    "4": (
        "██    ██ ",
        "██    ██ ",
        "████████ ",
        "      ██ ",
        "      ██ ",
    ),
    "5": (
        "████████ ",
        "██       ",
        "███████  ",
        "      ██ ",
        "███████  ",
    ),
    "6": (
        " ██████  ",
        "██       ",
        "███████  ",
        "██    ██ ",
        " ██████  ",
    ),
    "7": (
        "████████ ",
        "      ██ ",
        "    ██   ",
        "  ██     ",
        "██       ",
    ),
    "8": (
        " ██████  ",
        "██    ██ ",
        " ██████  ",
        "██    ██ ",
        " ██████  ",
    ),
    "9": (
        " ██████  ",
        "██    ██ ",
        " ███████ ",
        "      ██ ",
        " ██████  ",
    ),
    ":": (
        "         ",
        "   ██    ",
        "         ",
        "   ██    ",
        "         ",
    ),
}

_FALLBACK = _GLYPHS[":"]


def format_time(total_seconds: int) -> str:
    """Format seconds as MM:SS. Minutes are not capped at two digits."""
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def render(time_string: str) -> list[str]:
    """Render a clock string as GLYPH_HEIGHT rows of block characters.

    Characters without a glyph are drawn as a colon.
    """
    rows = [""] * GLYPH_HEIGHT
    for char in time_string:
        glyph = _GLYPHS.get(char, _FALLBACK)
        for i, line in enumerate(glyph):
            rows[i] += line
    return rows
