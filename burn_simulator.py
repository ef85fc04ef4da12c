"""
FlashMint - Token Burn Simulation Engine
"""
import logging
from dataclasses import dataclass, field
from typing import List

import pandas as pd

from config import CONFIG

logger = logging.getLogger(__name__)

BURN_DEFAULTS = CONFIG['burn']


@dataclass
class BurnParams:
    initial_supply: float = BURN_DEFAULTS['initial_supply']
    years: int = BURN_DEFAULTS['years']
    rate: float = BURN_DEFAULTS['rate']


@dataclass
class BurnSeries:
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)

    def __len__(self):
        return len(self.values)


def compute_burn_series(initial_supply: float = BURN_DEFAULTS['initial_supply'],
                        years: int = BURN_DEFAULTS['years'],
                        rate: float = BURN_DEFAULTS['rate'],
                        full: bool = False,
                        year0_label: str = "Year 0",
                        year_label: str = "Year") -> BurnSeries:
    """
    Remaining supply per year under a fixed-rate annual burn.

    With full=False only the starting point is returned. Values are kept as
    floats; rounding happens at display time.
    """
    series = BurnSeries(labels=[year0_label], values=[initial_supply])
    if not full:
        return series

    supply = initial_supply
    for i in range(1, years + 1):
        supply *= rate
        series.labels.append(f"{year_label} {i}")
        series.values.append(supply)
    logger.debug("Simulated %d burn years at rate %.2f: %.0f -> %.0f", years, rate, initial_supply, supply)
    return series


def burn_schedule_frame(series: BurnSeries, supply_column: str = "Remaining Supply",
                        burned_column: str = "Burned That Year") -> pd.DataFrame:
    """Tabulate a series: remaining supply and the amount burned in each step."""
    df = pd.DataFrame({supply_column: series.values}, index=series.labels)
    df[burned_column] = (-df[supply_column].diff()).fillna(0.0)
    return df
