"""
Main CLI entry point for fontpoint.
"""

import sys
from pathlib import Path

import click

from fontpoint import __version__
from fontpoint.config.palettes import CUSTOM, PALETTES, PaletteError, hex_to_rgb
from fontpoint.core.font_io import FontLoadError, iter_fonts
from fontpoint.core.metrics import DEFAULT_DPI
from fontpoint.utils.logging import logger

FONT_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)
FONT_OR_DIR = click.Path(exists=True, path_type=Path)

size_option = click.option(
    "--size",
    type=float,
    default=12.0,
    show_default=True,
    help="Nominal font size in points.",
)
dpi_option = click.option(
    "--dpi",
    type=int,
    default=DEFAULT_DPI,
    show_default=True,
    help="Screen resolution used for pixel metrics.",
)


def load_faces(paths, size: float, dpi: int) -> dict:
    """Load each distinct font path once, exiting on unreadable files."""
    from fontpoint.host.memory import FontFace

    faces = {}
    for path in paths:
        if path in faces:
            continue
        try:
            faces[path] = FontFace.from_path(path, size, dpi)
        except FontLoadError as e:
            logger.error(str(e))
            sys.exit(1)
    return faces


def expand_font_paths(paths) -> list[Path]:
    """Replace directories with the font files they contain."""
    fonts: list[Path] = []
    for path in paths:
        if path.is_dir():
            fonts.extend(iter_fonts(path))
        else:
            fonts.append(path)
    return fonts


@click.group()
@click.version_option(version=__version__)
def cli():
    """Font-at-cursor debugging tools."""
    pass


@cli.command()
@click.argument("fonts", nargs=-1, required=True, type=FONT_OR_DIR)
@size_option
@dpi_option
def label(fonts, size, dpi):
    """Print the status-line label of each font file or font in a directory."""
    from fontpoint.core.label import format_font_label

    fonts = expand_font_paths(fonts)
    if not fonts:
        logger.warning("No .ttf or .otf files found")
        return

    faces = load_faces(fonts, size, dpi)
    for path in fonts:
        click.echo(f"{format_font_label(faces[path].metrics)}  {path.name}")


@cli.command()
@click.argument("font", type=FONT_PATH)
@size_option
@dpi_option
def describe(font, size, dpi):
    """Print every metric of a font."""
    from fontpoint.core.label import describe_font

    face = load_faces([font], size, dpi)[font]
    click.echo(describe_font(face.metrics))


@cli.command()
@click.option(
    "--run",
    "runs",
    type=(FONT_PATH, str),
    multiple=True,
    required=True,
    help="Font file and the text displayed with it. Repeatable.",
)
@click.option(
    "--palette",
    "palette_name",
    type=click.Choice([*PALETTES, CUSTOM]),
    default="default",
    show_default=True,
    help="Palette used to color font families.",
)
@click.option(
    "--color",
    "colors",
    multiple=True,
    help="Color of the custom palette (#rrggbb). Repeatable.",
)
@size_option
@dpi_option
def overlay(runs, palette_name, colors, size, dpi):
    """Tint text by the family of the font of each character."""
    from fontpoint.config.settings import Settings
    from fontpoint.host.memory import MemoryHost
    from fontpoint.operations.overlay import FontOverlay

    try:
        settings = Settings(
            palette_name=palette_name,
            custom_palette=list(colors) if palette_name == CUSTOM else None,
        )
    except PaletteError as e:
        logger.error(str(e))
        sys.exit(1)

    faces = load_faces([path for path, _ in runs], size, dpi)

    host = MemoryHost()
    buffer = host.create_buffer("*overlay*", "".join(text for _, text in runs))
    offset = 0
    for path, text in runs:
        buffer.set_font(offset, offset + len(text), faces[path])
        offset += len(text)
    host.create_window(buffer)

    font_overlay = FontOverlay(host, settings=settings)
    colors_at = {span[0]: color for span, color in font_overlay.apply_overlay(buffer)}

    pieces = []
    for i, char in enumerate(buffer.text):
        rgb = hex_to_rgb(colors_at[i]) if i in colors_at else None
        pieces.append(click.style(char, fg=rgb) if rgb else char)
    click.echo("".join(pieces))

    for family, color in font_overlay.session.known_fonts.items():
        rgb = hex_to_rgb(color)
        swatch = click.style("██", fg=rgb) if rgb else "  "
        click.echo(f"{swatch} {color}  {family}")


@cli.command()
def palettes():
    """List the built-in palettes."""
    for name, colors in PALETTES.items():
        click.echo(f"{name}: {' '.join(colors)}")


if __name__ == "__main__":
    cli()
