"""Theme colors and color utilities for the UI."""

from typing import Optional


class GridColors:
    """Light theme palette for the board and its tiles."""

    BG_TOP = "#e0f7fa"
    BG_BOTTOM = "#80deea"

    PRIMARY = "#00838f"
    PRIMARY_DARK = "#005662"

    TILE = "#f8fcfd"
    TILE_BORDER = "#b0bec5"
    TILE_HOVER = "#e6f0f0"

    ACTIVE = "#ffb74d"
    CORRECT = "#69f0ae"
    WRONG = "#ff5252"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"
    TEXT_MUTED = "#78909c"


HIGHLIGHT_COLORS = {
    "active": GridColors.ACTIVE,
    "correct": GridColors.CORRECT,
    "wrong": GridColors.WRONG,
}


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"


def tile_color(highlight: Optional[str]) -> str:
    """Fill color for a tile in the given highlight state (None = plain)."""
    if highlight is None:
        return GridColors.TILE
    return HIGHLIGHT_COLORS.get(highlight, GridColors.TILE)
