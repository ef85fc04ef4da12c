"""
NFT tier table and the tier selector state.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from config import CONFIG
from formatting import format_currency


@dataclass(frozen=True)
class NftTier:
    name: str
    cost: int
    return_: int


NFT_TIERS: Dict[str, NftTier] = {
    name: NftTier(name, cost, cost * 4)
    for name, cost in [
        ("Flash 1", 10), ("Flash 2", 20), ("Flash 3", 40), ("Flash 4", 80),
        ("Flash 5", 150), ("Flash 6", 250), ("Flash 7", 450), ("Flash 8", 800),
        ("Flash 9", 1400), ("Flash 10", 2500), ("Flash 11", 3500), ("Flash 12", 5000),
        ("Flash 13", 10000),
    ]
}


class TierSelector:
    """Cost/return display plus the single active button of the tier group."""

    def __init__(self, tiers: Dict[str, NftTier] = NFT_TIERS):
        self.tiers = tiers
        self.active: Optional[str] = None
        self.cost_text = ""
        self.return_text = ""

    def select(self, level: str, lang: str = "en") -> Optional[NftTier]:
        tier = self.tiers.get(level)
        if tier is None:
            return None
        self.cost_text = format_currency(tier.cost, lang)
        self.return_text = format_currency(tier.return_, lang)
        self.active = level
        return tier

    def is_active(self, level: str) -> bool:
        return self.active == level

    def button_classes(self, level: str) -> Tuple[str, ...]:
        styles = CONFIG['nft_button_classes']
        return styles['active'] if self.is_active(level) else styles['inactive']
