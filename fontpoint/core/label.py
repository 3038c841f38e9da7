"""
Status-line label formatting.
"""

from fontpoint.core.metrics import FontMetrics

# Shown when no font is resolved at the position
PLACEHOLDER = "--"


def label_width(metrics: FontMetrics) -> int:
    """Average width, or the space width when the font reports no average."""
    return metrics.avg_width or metrics.space_width


def format_font_label(metrics: FontMetrics | None) -> str:
    """
    Format a resolved font as «{width}x{height}px {family}:{size}».

    Args:
        metrics: Metrics of the font at point, or None

    Returns:
        Label text, or PLACEHOLDER when there is no font
    """
    if metrics is None:
        return PLACEHOLDER

    width = label_width(metrics)
    return f"«{width}x{metrics.height}px {metrics.family}:{metrics.size:g}»"


def describe_font(metrics: FontMetrics | None) -> str:
    """Multi-line description of every metric."""
    if metrics is None:
        return PLACEHOLDER

    rows = [
        ("family", metrics.family),
        ("size", f"{metrics.size:g}"),
        ("ascent", f"{metrics.ascent}px"),
        ("descent", f"{metrics.descent}px"),
        ("height", f"{metrics.height}px"),
        ("max width", f"{metrics.max_width}px"),
        ("avg width", f"{metrics.avg_width}px"),
        ("space width", f"{metrics.space_width}px"),
    ]
    pad = max(len(name) for name, _ in rows)
    return "\n".join(f"{name.ljust(pad)}  {value}" for name, value in rows)
