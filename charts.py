"""
Chart slots for the distribution doughnut and the burn bar chart.

Each slot owns at most one live figure. Rendering always destroys the
previous handle before a new figure is built.
"""
import logging
from typing import Optional

import numpy as np
import plotly.graph_objects as go

from burn_simulator import BurnSeries
from config import CONFIG
from formatting import format_number, format_supply_millions
from translations import lookup

logger = logging.getLogger(__name__)

STYLE = CONFIG['chart_style']
DISTRIBUTION = CONFIG['distribution']

DISTRIBUTION_FALLBACK_LABELS = ['Community / Airdrop', 'Initial Liquidity', 'Team / Development', 'Ecosystem']


class ChartHandle:
    """A single live figure. After destroy() the figure is released."""

    def __init__(self, figure: go.Figure):
        self.figure = figure
        self.destroyed = False

    def destroy(self):
        self.figure = None
        self.destroyed = True


class ChartSlot:
    element_id = None

    def __init__(self, lang_data: dict):
        self.lang_data = lang_data
        self.handle: Optional[ChartHandle] = None
        self.teardowns = 0

    @property
    def figure(self) -> Optional[go.Figure]:
        return self.handle.figure if self.handle else None

    def replace(self, figure: go.Figure) -> ChartHandle:
        if self.handle is not None:
            self.handle.destroy()
            self.teardowns += 1
        self.handle = ChartHandle(figure)
        logger.debug("Rendered %s (teardowns=%d)", self.element_id, self.teardowns)
        return self.handle

    def render(self, data, lang: str) -> ChartHandle:
        return self.replace(self.build_figure(data, lang))

    def build_figure(self, data, lang: str) -> go.Figure:
        """Subclasses build the figure for their slot."""
        raise NotImplementedError

    def label(self, lang: str, key: str, default: str) -> str:
        return lookup(self.lang_data, lang, key) or default


class DistributionChart(ChartSlot):
    element_id = 'distributionChart'

    def build_figure(self, data, lang: str) -> go.Figure:
        shares = DISTRIBUTION['shares'] if data is None else data
        labels = [self.label(lang, key, default)
                  for key, default in zip(DISTRIBUTION['label_keys'], DISTRIBUTION_FALLBACK_LABELS)]
        fig = go.Figure(data=[go.Pie(
            labels=labels, values=shares, hole=.5, sort=False, direction='clockwise',
            marker=dict(colors=DISTRIBUTION['colors'], line=dict(color='#ffffff', width=2)),
            textinfo='percent', hovertemplate="%{label}: %{value}%<extra></extra>", name='Token Allocation'
        )])
        fig.update_layout(
            showlegend=True,
            legend=dict(orientation='h', yanchor='top', y=-0.05, xanchor='center', x=0.5,
                        font=dict(color=STYLE['text_color'], family=STYLE['font_family'])),
            margin=dict(t=20, b=20, l=20, r=20)
        )
        return fig


SUPPLY_TICK_STEP = 1e8


def supply_tick_values(values, step: float = SUPPLY_TICK_STEP) -> np.ndarray:
    """Evenly spaced tick positions covering the series, snapped to `step`."""
    lo = np.floor(min(values) / step) * step
    hi = np.ceil(max(values) / step) * step
    return np.arange(lo, hi + step / 2, step)


class BurnChart(ChartSlot):
    element_id = 'burnChart'

    def build_figure(self, data: BurnSeries, lang: str) -> go.Figure:
        dataset_label = self.label(lang, 'burnLabel', 'Remaining Supply')
        tooltip_text = self.label(lang, 'burnTooltipText', 'Supply')
        symbol = CONFIG['token_symbol']
        hover_values = [f"{tooltip_text}: {format_number(v, lang, max_fraction_digits=0)} {symbol}" for v in data.values]
        tick_values = supply_tick_values(data.values)

        fig = go.Figure(go.Bar(
            x=data.labels, y=data.values, name=dataset_label, customdata=hover_values,
            marker=dict(color=STYLE['burn_bar_color'], line=dict(color=STYLE['burn_border_color'], width=1)),
            hovertemplate="%{customdata}<extra></extra>"
        ))
        fig.update_layout(
            showlegend=False, margin=dict(t=20, b=20, l=20, r=20),
            font=dict(family=STYLE['font_family'], color=STYLE['text_color'])
        )
        fig.update_yaxes(
            tickvals=list(tick_values), ticktext=[format_supply_millions(v, lang) for v in tick_values],
            range=[tick_values[0] - SUPPLY_TICK_STEP, tick_values[-1]], gridcolor=STYLE['grid_color'], tickfont=dict(color=STYLE['text_color'])
        )
        fig.update_xaxes(gridcolor=STYLE['grid_color'], tickfont=dict(color=STYLE['text_color'], family=STYLE['font_family']))
        return fig
