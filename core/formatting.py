"""Formatting helpers for SubTrack cards and summaries."""

from __future__ import annotations

from datetime import date
from typing import Final

from core.models import BillingCycle

__all__ = [
    "CURRENCY_SYMBOLS",
    "cycle_suffix",
    "format_billing_date",
    "format_currency",
    "monogram",
]

CURRENCY_SYMBOLS: Final[dict[str, str]] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "CA$",
    "AUD": "A$",
}

# JPY has no minor unit.
_ZERO_DECIMAL_CURRENCIES: Final[frozenset[str]] = frozenset({"JPY"})

_CYCLE_SUFFIXES: Final[dict[BillingCycle, str]] = {
    BillingCycle.WEEKLY: "/wk",
    BillingCycle.MONTHLY: "/mo",
    BillingCycle.QUARTERLY: "/qtr",
    BillingCycle.YEARLY: "/yr",
}


def format_currency(amount: float, currency: str, *, max_decimals: int = 2) -> str:
    """Format an amount in its own currency, e.g. ``$1,234.5`` or ``€9.99``.

    Amounts are never converted. Fraction digits are trimmed down to zero when
    the value is whole.
    """

    code = currency.upper()
    decimals = 0 if code in _ZERO_DECIMAL_CURRENCIES else max(max_decimals, 0)
    number = f"{abs(amount):,.{decimals}f}"
    if "." in number:
        number = number.rstrip("0").rstrip(".")

    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    sign = "-" if amount < 0 and float(number.replace(",", "")) != 0 else ""
    return f"{sign}{symbol}{number}"


def format_billing_date(value: date) -> str:
    """Return a short month and day label such as ``Oct 26``."""

    return f"{value:%b} {value.day}"


def cycle_suffix(cycle: BillingCycle | str) -> str:
    return _CYCLE_SUFFIXES[BillingCycle(cycle)]


def monogram(name: str) -> str:
    stripped = name.strip()
    return stripped[0].upper() if stripped else "?"
