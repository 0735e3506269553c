"""
Quake III color codes

Names and server variables may embed ``^N`` escapes that the game client
renders as colors. ``^^`` is not an escape.
"""

import re

COLOR_NAMES = {
    "0": "black",
    "1": "red",
    "2": "green",
    "3": "yellow",
    "4": "blue",
    "5": "cyan",
    "6": "magenta",
    "7": "white",
}

_COLOR_CODE = re.compile(r"\^[^^]")


def strip_colors(text: str) -> str:
    """Remove every color escape from ``text``."""
    return _COLOR_CODE.sub("", text)


def has_colors(text: str) -> bool:
    return _COLOR_CODE.search(text) is not None
