"""
Display formatting for the price table.

Pure functions: every formatter renders None as "-" so a partially
populated provider response still yields a complete row.
"""

from typing import Iterable, Optional

MISSING = "-"

_COMPACT_SUFFIXES = ("K", "M", "B", "T")


def _trim_decimals(value: float, places: int = 2) -> str:
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_usd(value: Optional[float]) -> str:
    """Format a price in US dollars.

    Prices of one dollar or more get 2 decimals, smaller ones 4.
    """
    if value is None:
        return MISSING
    places = 2 if value >= 1 else 4
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{places}f}"


def format_compact(value: Optional[float]) -> str:
    """Format a large number with a K/M/B/T suffix (e.g. ``72.4B``)."""
    if value is None:
        return MISSING
    scaled = float(value)
    suffix = ""
    for next_suffix in _COMPACT_SUFFIXES:
        if abs(round(scaled, 2)) < 1000:
            break
        scaled /= 1000
        suffix = next_suffix
    return f"{_trim_decimals(scaled)}{suffix}"


def format_percent(value: Optional[float]) -> str:
    """Format a percentage change with an explicit sign (``+3.24%``)."""
    if value is None:
        return MISSING
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def sparkline_points(
    values: Iterable[float], width: int = 120, height: int = 32
) -> Optional[str]:
    """Return the SVG polyline ``points`` attribute for a sparkline.

    Args:
        values: Price series, oldest first.
        width: Chart width in pixels.
        height: Chart height in pixels.

    Returns:
        Space-separated ``x,y`` pairs, or None when fewer than two
        values are available.
    """
    data = list(values)
    if len(data) < 2:
        return None

    low = min(data)
    high = max(data)
    span = (high - low) or 1
    padding = 2
    inner_height = height - padding * 2

    points = []
    for index, value in enumerate(data):
        x = (index / (len(data) - 1)) * width
        y = padding + inner_height - ((value - low) / span) * inner_height
        points.append(f"{x:.1f},{y:.1f}")
    return " ".join(points)
