"""Face identifiers shared by pairs of memory cards."""

from __future__ import annotations

from enum import Enum


class Face(str, Enum):
    """Symbolic identifier printed on the hidden side of a card."""

    RED = "red"
    GREEN = "green"
    CYAN = "cyan"
    YELLOW = "yellow"
    ORANGE = "orange"
    PURPLE = "purple"
    LIME = "lime"
    MAGENTA = "magenta"

    @property
    def color(self) -> str:
        """Return the hex color used when the face is drawn."""

        return FACE_COLORS[self]


FACE_COLORS: dict[Face, str] = {
    Face.RED: "#ff0000",
    Face.GREEN: "#008000",
    Face.CYAN: "#00ffff",
    Face.YELLOW: "#ffff00",
    Face.ORANGE: "#ffa500",
    Face.PURPLE: "#800080",
    Face.LIME: "#00ff00",
    Face.MAGENTA: "#ff00ff",
}
