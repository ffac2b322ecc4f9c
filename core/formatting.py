"""Display formatting and liberal parsing for calculator fields."""
from __future__ import annotations

import math
import re

from core.calculators import nz, round_whole
from core.presets import CURRENCY_SYMBOL, MAX_PRICE

_NON_DIGITS = re.compile(r"[^0-9]")


def format_number(amount) -> str:
    """Whole number with thousands separators, e.g. ``4,400,000``."""
    return f"{round_whole(amount):,}"


def format_currency(amount) -> str:
    """Exact currency with no cents, e.g. ``$28,345`` or ``-$1,200``."""
    value = round_whole(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,}"


def format_currency_short(amount) -> str:
    """Abbreviate large amounts: ``$4.4M``, ``$880K``, else exact currency.

    Halves round up, so ``1,250,000`` is ``$1.3M`` and ``2,500`` is ``$3K``.
    """
    value = nz(amount)
    if value >= 1000000:
        return f"{CURRENCY_SYMBOL}{round_whole(value / 100000) / 10:.1f}M"
    if value >= 1000:
        return f"{CURRENCY_SYMBOL}{round_whole(value / 1000)}K"
    return format_currency(value)


def format_delta(amount) -> str:
    """Signed currency for differences; only increases get an explicit ``+``."""
    prefix = "+" if nz(amount) > 0 else ""
    return prefix + format_currency(amount)


def parse_digits(raw) -> int:
    """Keep only the digits in ``raw``; nothing left means ``0``.

    ``"$3,400,000"`` becomes ``3400000`` and ``"abc"`` becomes ``0``.
    Values above ``MAX_PRICE`` are clamped to it.
    """

    digits = _NON_DIGITS.sub("", str(raw or "")).lstrip("0")
    if not digits:
        return 0
    if len(digits) > len(str(MAX_PRICE)):
        return MAX_PRICE
    return min(int(digits), MAX_PRICE)


def parse_float(raw, default=0.0) -> float:
    """Parse a rate or percentage field, falling back to ``default``."""
    if isinstance(raw, (int, float)):
        value = nz(raw, default)
    else:
        text = str(raw or "").strip().replace(",", "").rstrip("%").strip()
        try:
            value = nz(float(text), default)
        except ValueError:
            return default
    return value if math.isfinite(value) else default
