"""
Application state for the FlashMint page and the handlers that mutate it.

Everything the page shows is derived from an AppState: the tagged text
elements, the language picker, both chart slots, the tier selector and the
menu toggles. Handlers are plain functions taking the state as their first
argument so they can be exercised without a running Streamlit server.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from burn_simulator import BurnParams, BurnSeries, compute_burn_series
from charts import BurnChart, DistributionChart
from chrome import (LANG_DROPDOWN_BUTTON, LANG_OPTION, MOBILE_MENU_BUTTON, NAV_LINK, NFT_BUTTON,
                    SIMULATE_BURN_BUTTON, LanguageDropdown, MobileMenu, parse_target)
from config import CONFIG
from tiers import NftTier, TierSelector
from translations import LANG_DATA, apply_chart_label_defaults, is_rich_text, lookup, to_rich_text

logger = logging.getLogger(__name__)


@dataclass
class TaggedElement:
    key: str
    kind: str = 'text'
    content: str = ''
    rich: bool = False

    def set_text(self, text: str):
        if is_rich_text(text):
            self.content = to_rich_text(text)
            self.rich = True
        else:
            self.content = text
            self.rich = False


@dataclass
class Section:
    id: str
    nav_key: Optional[str] = None
    elements: List[Tuple[str, str]] = field(default_factory=list)
    charts: List[str] = field(default_factory=list)


PAGE_SECTIONS = [
    Section('header', elements=[('appTitle', 'meta'), ('langMenuLabel', 'label')]),
    Section('home', 'navHome', [('heroTitle', 'title'), ('heroSubtitle', 'text'), ('heroCta', 'button')]),
    Section('tokenomics', 'navTokenomics',
            [('tokenomicsTitle', 'header'), ('tokenomicsDesc', 'text'), ('tokenomicsNote', 'caption')],
            charts=['distributionChart']),
    Section('income', 'navIncome',
            [('incomeTitle', 'header'), ('incomeDesc', 'text'), ('nftSelectPrompt', 'subheader'),
             ('nftCostLabel', 'label'), ('nftReturnLabel', 'label'), ('nftNote', 'caption')]),
    Section('burn', 'navBurn',
            [('burnTitle', 'header'), ('burnDesc', 'text'), ('simulateBurnBtn', 'button'),
             ('burnTableTitle', 'subheader')],
            charts=['burnChart']),
    Section('roadmap', 'navRoadmap',
            [('roadmapTitle', 'header'), ('roadmapPhase1', 'text'), ('roadmapPhase2', 'text'),
             ('roadmapPhase3', 'text'), ('roadmapPhase4', 'text')]),
    Section('footer', elements=[('footerText', 'caption'), ('disclaimer', 'caption')]),
]


@dataclass
class AppState:
    lang_data: dict
    sections: List[Section]
    elements: Dict[str, List[TaggedElement]]
    distribution_chart: DistributionChart
    burn_chart: BurnChart
    current_lang: str = CONFIG['default_lang']
    html_lang: str = ''
    document_title: str = ''
    lang_button_text: str = ''
    flag_url: str = ''
    flag_alt: str = ''
    option_flags: Dict[str, str] = field(default_factory=dict)
    burn_series: Optional[BurnSeries] = None
    tiers: TierSelector = field(default_factory=TierSelector)
    mobile_menu: MobileMenu = field(default_factory=MobileMenu)
    lang_dropdown: LanguageDropdown = field(default_factory=LanguageDropdown)
    scroll_target: Optional[str] = None
    scroll_requests: int = 0
    burn_params: BurnParams = field(default_factory=BurnParams)

    def find(self, key: str, kind: Optional[str] = None) -> Optional[TaggedElement]:
        for element in self.elements.get(key, []):
            if kind is None or element.kind == kind:
                return element
        return None

    def nav_links(self) -> List[Tuple[str, str]]:
        return [(f"#{s.id}", s.nav_key) for s in self.sections if s.nav_key]


def build_elements(sections: List[Section]) -> Dict[str, List[TaggedElement]]:
    """One element per tagged node; nav labels exist in both the desktop and mobile menus."""
    elements: Dict[str, List[TaggedElement]] = {}
    for section in sections:
        tagged = list(section.elements)
        if section.nav_key:
            tagged += [(section.nav_key, 'nav'), (section.nav_key, 'nav-mobile')]
        for key, kind in tagged:
            elements.setdefault(key, []).append(TaggedElement(key, kind))
    return elements


def build_state(lang_data: dict, sections: List[Section]) -> AppState:
    declared = {chart_id for section in sections for chart_id in section.charts}
    for slot in (DistributionChart, BurnChart):
        if slot.element_id not in declared:
            raise KeyError(slot.element_id)
    return AppState(
        lang_data=lang_data, sections=sections, elements=build_elements(sections),
        distribution_chart=DistributionChart(lang_data), burn_chart=BurnChart(lang_data)
    )


# --- LANGUAGE AND CONTENT ---

def set_language(state: AppState, lang: str):
    """Switch every tagged element, the picker and both charts to `lang`.

    Unknown languages are ignored. Keys missing from the bundle leave their
    elements showing whatever they showed before.
    """
    if lang not in state.lang_data:
        return
    state.current_lang = lang
    state.html_lang = lang

    for key, elements in state.elements.items():
        text = lookup(state.lang_data, lang, key)
        if text is None:
            continue
        for element in elements:
            element.set_text(text)
        if key == 'appTitle':
            state.document_title = text

    update_language_dropdown_ui(state, lang)
    update_all_charts(state)
    logger.info("Language set to %s", lang)


def update_language_dropdown_ui(state: AppState, lang: str):
    button_text = CONFIG['lang_button_text'].get(lang)
    flag_url = CONFIG['lang_flag_urls'].get(lang)
    if button_text and flag_url:
        state.lang_button_text = button_text
        state.flag_url = flag_url
        state.flag_alt = f"{lang} flag"


# --- CHARTS ---

def calculate_burn_data(state: AppState, full: bool = False) -> BurnSeries:
    lang = state.current_lang
    params = state.burn_params
    return compute_burn_series(
        params.initial_supply, params.years, params.rate, full=full,
        year0_label=lookup(state.lang_data, lang, 'burnYear0') or 'Year 0',
        year_label=lookup(state.lang_data, lang, 'burnYear') or 'Year'
    )


def render_burn_chart(state: AppState, series: BurnSeries):
    state.burn_chart.render(series, state.current_lang)
    state.burn_series = series


def update_all_charts(state: AppState):
    state.distribution_chart.render(None, state.current_lang)
    render_burn_chart(state, calculate_burn_data(state, full=False))


def simulate_burn(state: AppState) -> BurnSeries:
    series = calculate_burn_data(state, full=True)
    render_burn_chart(state, series)
    return series


# --- TIERS AND CHROME ---

def select_tier(state: AppState, level: str) -> Optional[NftTier]:
    return state.tiers.select(level, state.current_lang)


def navigate(state: AppState, href: str):
    if not state.mobile_menu.hidden:
        state.mobile_menu.close()
    state.scroll_target = href.lstrip('#')
    state.scroll_requests += 1


def consume_scroll_target(state: AppState) -> Optional[str]:
    target, state.scroll_target = state.scroll_target, None
    return target


def choose_language(state: AppState, lang: str):
    set_language(state, lang)
    state.lang_dropdown.close()


def dispatch_click(state: AppState, target: str):
    """Deliver a click: the document-level dropdown listener first, then the target's handler."""
    state.lang_dropdown.on_document_click(target)

    kind, value = parse_target(target)
    if kind == MOBILE_MENU_BUTTON:
        state.mobile_menu.toggle()
    elif kind == NAV_LINK and value:
        navigate(state, value)
    elif kind == LANG_DROPDOWN_BUTTON:
        state.lang_dropdown.toggle()
    elif kind == LANG_OPTION and value:
        choose_language(state, value)
    elif kind == NFT_BUTTON and value:
        select_tier(state, value)
    elif kind == SIMULATE_BURN_BUTTON:
        simulate_burn(state)


# --- INITIALIZATION ---

def initialize_app(lang_data: dict = LANG_DATA, sections: List[Section] = PAGE_SECTIONS,
                   default_lang: str = CONFIG['default_lang']) -> AppState:
    if default_lang not in lang_data:
        raise ValueError(f"No translations for default language: {default_lang}")

    apply_chart_label_defaults(lang_data)
    state = build_state(lang_data, sections)
    state.option_flags = {lang: url for lang, url in CONFIG['lang_flag_urls'].items() if lang in lang_data}
    set_language(state, default_lang)
    return state
