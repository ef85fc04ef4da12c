"""Test locale-aware number formatting."""

from formatting import format_currency, format_number, format_supply_millions


def test_thousands_grouping_and_trimmed_fraction():
    """Whole numbers drop the fraction; others keep at most three digits."""
    assert format_number(150) == "150"
    assert format_number(10000) == "10,000"
    assert format_number(348.6784401) == "348.678"
    assert format_number(1234.5, "th") == "1,234.5"


def test_zero_fraction_digits_rounds():
    """Tooltip amounts are shown without decimals."""
    assert format_number(348678440.1, "zh", max_fraction_digits=0) == "348,678,440"
    assert format_number(-0.0001) == "0"


def test_currency_and_supply_ticks():
    """Tier prices carry the currency suffix; supply ticks are in millions."""
    assert format_currency(2500, "en") == "2,500 USDT"
    assert format_supply_millions(900_000_000, "en") == "900M"
    assert format_supply_millions(1_000_000_000, "th") == "1,000M"


def test_halves_round_away_from_zero():
    """Halves round up in magnitude rather than to the nearest even digit."""
    assert format_number(0.5, max_fraction_digits=0) == "1"
    assert format_number(2.5, max_fraction_digits=0) == "3"
    assert format_number(-1.5, max_fraction_digits=0) == "-2"
    assert format_number(1.0005) == "1.001"
