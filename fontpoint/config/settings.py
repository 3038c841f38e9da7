"""
User-settable configuration.

The palette selector is resolved to concrete colors whenever the settings
are built or updated, so a bad palette fails here rather than on first use.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, fields, replace

from fontpoint.config.palettes import resolve_palette
from fontpoint.core.label import format_font_label
from fontpoint.core.metrics import FontMetrics

LabelFormatter = Callable[[FontMetrics | None], str]


@dataclass(frozen=True)
class Settings:
    """fontpoint configuration."""

    label_formatter: LabelFormatter = format_font_label
    palette_name: str = "default"
    custom_palette: Sequence[str] | None = None
    palette: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not callable(self.label_formatter):
            raise TypeError("label_formatter must be callable")
        resolved = resolve_palette(self.palette_name, self.custom_palette)
        object.__setattr__(self, "palette", resolved)

    def update(self, **values) -> "Settings":
        """
        Return a copy with the given fields changed.

        Args:
            **values: label_formatter, palette_name or custom_palette

        Returns:
            New Settings with the palette resolved again

        Raises:
            PaletteError: If the new palette setting is unusable
            TypeError: If an unknown field is given
        """
        settable = {f.name for f in fields(self) if f.init}
        unknown = set(values) - settable
        if unknown:
            raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")
        return replace(self, **values)
