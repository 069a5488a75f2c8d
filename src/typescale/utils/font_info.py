"""Font file helpers. The family name is only used for display."""

from pathlib import Path
from typing import Optional

from fontTools.ttLib import TTFont, TTLibError

from .logging import TypeScaleLogger

FONT_SUFFIXES = (".ttf", ".otf", ".woff", ".woff2", ".ttc")


def read_family_name(path: str) -> Optional[str]:
    """Return the best family name from a font's name table, or None"""
    font_path = Path(path)
    if font_path.suffix.lower() not in FONT_SUFFIXES:
        TypeScaleLogger.warning(f"{font_path.name} does not look like a font file")

    try:
        with TTFont(str(font_path), lazy=True, fontNumber=0) as font:
            if "name" not in font:
                return None
            family = font["name"].getBestFamilyName()
    except (OSError, TTLibError) as e:
        TypeScaleLogger.warning(f"Could not read font {font_path}: {e}")
        return None

    TypeScaleLogger.debug(f"Font family for {font_path.name}: {family}")
    return family
