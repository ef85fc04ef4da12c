"""Test the NFT tier table and selector."""

from tiers import NFT_TIERS, TierSelector


def test_tier_table():
    """Thirteen tiers, each returning four times its cost."""
    assert len(NFT_TIERS) == 13
    assert NFT_TIERS["Flash 1"].cost == 10
    assert NFT_TIERS["Flash 13"].cost == 10000
    assert all(tier.return_ == tier.cost * 4 for tier in NFT_TIERS.values())


def test_select_flash_5():
    """Selecting Flash 5 shows its formatted cost and return."""
    selector = TierSelector()
    selector.select("Flash 5")

    assert selector.cost_text == "150 USDT"
    assert selector.return_text == "600 USDT"
    assert [level for level in NFT_TIERS if selector.is_active(level)] == ["Flash 5"]


def test_thousands_separator():
    """Large tiers are grouped by thousands."""
    selector = TierSelector()
    selector.select("Flash 13", "th")
    assert selector.cost_text == "10,000 USDT"
    assert selector.return_text == "40,000 USDT"


def test_unknown_tier_is_ignored():
    """An unknown level leaves the display untouched."""
    selector = TierSelector()
    selector.select("Flash 2")
    assert selector.select("Flash 99") is None

    assert selector.active == "Flash 2"
    assert selector.cost_text == "20 USDT"


def test_button_classes():
    """Exactly one button carries the active style."""
    selector = TierSelector()
    assert selector.button_classes("Flash 1") == ("bg-gray-200", "text-gray-800")

    selector.select("Flash 3")
    selector.select("Flash 4")
    active = [level for level in NFT_TIERS if selector.button_classes(level) == ("bg-indigo-600", "text-white")]
    assert active == ["Flash 4"]
