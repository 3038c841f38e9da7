"""
Font I/O utilities for loading and traversing font files.
"""

from collections.abc import Iterator
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

FONT_PATTERNS = ("*.ttf", "*.otf")


class FontLoadError(Exception):
    """Raised when a font file cannot be read."""


def iter_fonts(
    directory: Path,
    patterns: tuple[str, ...] = FONT_PATTERNS,
    exclude_patterns: list[str] | None = None,
) -> Iterator[Path]:
    """
    Iterate over font files matching patterns, sorted by name.

    Args:
        directory: Directory to search
        patterns: Glob patterns to match
        exclude_patterns: Substrings to exclude from filenames

    Yields:
        Paths to matching font files
    """
    fonts = sorted({f for pattern in patterns for f in directory.glob(pattern)})
    if exclude_patterns:
        fonts = [f for f in fonts if not any(p in f.name for p in exclude_patterns)]
    return iter(fonts)


def load_font(path: Path, font_number: int = 0) -> TTFont:
    """
    Load a font file fully into memory.

    Args:
        path: Path to a TrueType/OpenType font or collection
        font_number: Index inside a font collection

    Returns:
        TTFont instance detached from the file

    Raises:
        FontLoadError: If the file is missing or not a font
    """
    try:
        return TTFont(path, fontNumber=font_number, lazy=False)
    except (OSError, TTLibError) as e:
        raise FontLoadError(f"Cannot read font {path}: {e}") from e

