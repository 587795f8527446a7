"""Assorted utility helpers."""
from __future__ import annotations

import math

_MISSING_TOKENS = {"", "none", "-", "n/a", "nan"}


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Market data feeds report absent figures as ``None``, ``"None"`` or ``"-"``
    and calculators receive blanks from forms.  This helper mirrors the
    spreadsheet ``NZ()`` function so later math never breaks on a missing
    value; it never raises.
    """

    if x is None:
        return default
    if isinstance(x, str) and x.strip().lower() in _MISSING_TOKENS:
        return default
    try:
        value = float(x)
    except (TypeError, ValueError):
        return default
    if math.isnan(value):
        return default
    return value


def parse_growth_rate(x) -> float:
    """Normalize a growth figure to a decimal fraction.

    Feeds mix ``"15.5"`` (percent) and ``"0.155"`` (fraction); anything with a
    magnitude above 1 is treated as a percentage.
    """

    value = nz(x)
    if abs(value) > 1:
        return value / 100
    return value


def round_to(value, places: int = 2) -> float:
    """Round half up, so ``0.125`` becomes ``0.13`` rather than banker's ``0.12``."""

    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def round_whole(value) -> int:
    return int(math.floor(value + 0.5))


def format_currency(value, cents: bool = False) -> str:
    """Render ``value`` as US dollars, e.g. ``$350,000``."""

    places = 2 if cents else 0
    amount = round_to(abs(value), places)
    sign = "-" if value < 0 and amount else ""
    return f"{sign}${amount:,.{places}f}"


def format_percent(value, places: int = 1) -> str:
    """Render a percentage expressed in points, e.g. ``6.5`` -> ``6.5%``."""

    return f"{round_to(value, places):.{places}f}%"
