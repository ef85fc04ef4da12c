"""Locale-aware number formatting for chart ticks, tooltips and tier prices."""
from decimal import ROUND_HALF_UP, Decimal

from config import CONFIG


def format_number(value: float, lang: str = "en", max_fraction_digits: int = 3) -> str:
    """Group thousands and trim trailing zeros, e.g. 348678.44 -> '348,678.44'.

    Halves round away from zero: 0.5 -> '1'.
    """
    thousands, decimal = CONFIG['locale_separators'].get(lang, (',', '.'))
    quantum = Decimal(1).scaleb(-max_fraction_digits)
    rounded = Decimal(str(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    text = f"{rounded:,.{max_fraction_digits}f}"
    if max_fraction_digits > 0:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return text.translate(str.maketrans({',': thousands, '.': decimal}))


def format_currency(amount: float, lang: str = "en") -> str:
    return f"{format_number(amount, lang)} {CONFIG['currency_suffix']}"


def format_supply_millions(value: float, lang: str = "en") -> str:
    """Axis tick text for a raw supply value: 900000000 -> '900M'."""
    return format_number(value / 1e6, lang) + 'M'
