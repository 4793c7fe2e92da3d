"""
Brazilian Portuguese (pt-BR) display formatting.

Currency follows the BRL conventions: "R$" symbol, period as thousands
separator, comma as decimal separator, two decimal places.

Dates are parsed by splitting the YYYY-MM-DD string into integers and
building a naive calendar date from them. Nothing here goes through a
timezone-aware conversion, so "2024-01-05" is always the 5th of January
whatever the offset of the machine evaluating it.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CURRENCY_SYMBOL = "R$"

MONTH_ABBREVIATIONS = [
    "jan", "fev", "mar", "abr", "mai", "jun",
    "jul", "ago", "set", "out", "nov", "dez",
]

MONTH_NAMES = [
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
]

_CENTS = Decimal("0.01")


def format_currency(amount: float) -> str:
    """
    Format an amount as BRL currency, e.g. 1234.5 -> "R$ 1.234,50".

    Negative amounts carry a leading minus: -600 -> "-R$ 600,00".
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        return f"{CURRENCY_SYMBOL} {amount}"
    if not value.is_finite():
        return f"{CURRENCY_SYMBOL} {amount}"
    value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    # US grouping first, then swap the separators
    grouped = f"{abs(value):,.2f}"
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_SYMBOL} {localized}"


def format_signed_currency(amount: float, is_income: bool) -> str:
    """Prefix a transaction amount with its direction: "+ R$ 10,00"."""
    return f"{'+' if is_income else '-'} {format_currency(amount)}"


def parse_date(value: str) -> date | None:
    """Split a YYYY-MM-DD string into a naive date, None when malformed."""
    try:
        year, month, day = (int(part) for part in value.split("-"))
        return date(year, month, day)
    except (AttributeError, TypeError, ValueError):
        return None


def format_date(value: str) -> str:
    """
    Format a YYYY-MM-DD date as "DD mon", e.g. "2024-01-05" -> "05 jan".

    Malformed input is returned unchanged.
    """
    parsed = parse_date(value)
    if parsed is None:
        return value
    return f"{parsed.day:02d} {MONTH_ABBREVIATIONS[parsed.month - 1]}"


def format_month_label(month: str) -> str:
    """Format a YYYY-MM key as "outubro de 2026"."""
    parsed = parse_date(f"{month}-01")
    if parsed is None:
        return month
    return f"{MONTH_NAMES[parsed.month - 1]} de {parsed.year}"


def format_month_short(month: str) -> str:
    """Format a YYYY-MM key as "out/26" for chart axes."""
    parsed = parse_date(f"{month}-01")
    if parsed is None:
        return month
    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]}/{parsed.year % 100:02d}"
