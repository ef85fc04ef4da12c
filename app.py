import copy
import logging
import sys

import streamlit as st
import streamlit.components.v1 as components

from burn_simulator import burn_schedule_frame
from chrome import (LANG_DROPDOWN_BUTTON, LANG_OPTION, MOBILE_MENU_BUTTON, NAV_LINK, NFT_BUTTON,
                    SIMULATE_BURN_BUTTON, scroll_script, target_id)
from config import CONFIG
from page_state import consume_scroll_target, dispatch_click, initialize_app
from tiers import NFT_TIERS
from translations import LANG_DATA, t

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

RICH_TAGS = {'title': 'h1', 'header': 'h2', 'subheader': 'h3', 'caption': 'small', 'text': 'p', 'label': 'span'}
PLAIN_WRITERS = {'title': st.title, 'header': st.header, 'subheader': st.subheader, 'caption': st.caption}
TIER_COLUMNS = 5
# Tier button styles rendered as Streamlit button types
TIER_BUTTON_TYPES = {
    CONFIG['nft_button_classes']['active']: 'primary',
    CONFIG['nft_button_classes']['inactive']: 'secondary',
}

if 'page' not in st.session_state:
    # Each session gets its own bundles; the chart-label merge mutates them.
    st.session_state['page'] = initialize_app(copy.deepcopy(LANG_DATA))
    logger.info("New page session started")
state = st.session_state['page']

st.set_page_config(layout="wide", page_title=state.document_title)


def text(key, kind=None):
    element = state.find(key, kind)
    return element.content if element else key


def show(key, kind=None):
    element = state.find(key, kind)
    if element is None:
        return
    if element.rich:
        tag = RICH_TAGS.get(element.kind, 'div')
        st.markdown(f"<{tag}>{element.content}</{tag}>", unsafe_allow_html=True)
    else:
        PLAIN_WRITERS.get(element.kind, st.write)(element.content)


def click_button(label, target, key=None, **kwargs):
    return st.button(label, key=key or target, on_click=dispatch_click, args=(state, target), **kwargs)


def anchor(section_id):
    st.markdown(f'<div id="{section_id}"></div>', unsafe_allow_html=True)


def sync_document():
    """Apply the html lang attribute and any pending smooth scroll to the host page."""
    script = f"<script>window.parent.document.documentElement.lang = {state.html_lang!r};</script>"
    section_id = consume_scroll_target(state)
    if section_id:
        script += scroll_script(section_id, state.scroll_requests)
    components.html(script, height=0)


# --- HEADER ---

brand_col, nav_col, lang_col, menu_col = st.columns([2, 6, 2, 1])
with brand_col:
    st.markdown("### ⚡ FlashMint")
with nav_col:
    nav_links = state.nav_links()
    for col, (href, nav_key) in zip(st.columns(len(nav_links)), nav_links):
        with col:
            click_button(text(nav_key, 'nav'), target_id(NAV_LINK, href), key=f"nav-{href}")
with lang_col:
    flag_col, button_col = st.columns([1, 4])
    with flag_col:
        st.image(state.flag_url, width=28)
    with button_col:
        click_button(state.lang_button_text, LANG_DROPDOWN_BUTTON, help=text('langMenuLabel'))
    if not state.lang_dropdown.hidden:
        with st.container(border=True):
            for lang in CONFIG['languages']:
                if lang not in state.option_flags:
                    continue
                option_flag, option_button = st.columns([1, 4])
                with option_flag:
                    st.image(state.option_flags[lang], width=24)
                with option_button:
                    click_button(CONFIG['lang_button_text'][lang], target_id(LANG_OPTION, lang))
with menu_col:
    click_button("☰", MOBILE_MENU_BUTTON)

if not state.mobile_menu.hidden:
    with st.container(border=True):
        for href, nav_key in state.nav_links():
            click_button(text(nav_key, 'nav-mobile'), target_id(NAV_LINK, href), key=f"nav-mobile-{href}",
                         use_container_width=True)

# --- HERO ---

anchor('home')
show('heroTitle')
show('heroSubtitle')
click_button(text('heroCta'), target_id(NAV_LINK, '#income'), key='hero-cta', type='primary')

st.write("---")

# --- TOKENOMICS ---

anchor('tokenomics')
show('tokenomicsTitle')
desc_col, chart_col = st.columns(2)
with desc_col:
    show('tokenomicsDesc')
    show('tokenomicsNote')
with chart_col:
    st.plotly_chart(state.distribution_chart.figure, use_container_width=True, key=state.distribution_chart.element_id)

st.write("---")

# --- INCOME ENGINE ---

anchor('income')
show('incomeTitle')
show('incomeDesc')
show('nftSelectPrompt')
levels = list(NFT_TIERS)
for row_start in range(0, len(levels), TIER_COLUMNS):
    row = levels[row_start:row_start + TIER_COLUMNS]
    for col, level in zip(st.columns(TIER_COLUMNS), row):
        with col:
            click_button(level, target_id(NFT_BUTTON, level), use_container_width=True,
                         type=TIER_BUTTON_TYPES[state.tiers.button_classes(level)])

cost_col, return_col = st.columns(2)
with cost_col:
    st.metric(text('nftCostLabel'), state.tiers.cost_text or "-")
with return_col:
    st.metric(text('nftReturnLabel'), state.tiers.return_text or "-")
show('nftNote')

st.write("---")

# --- BURN ---

anchor('burn')
show('burnTitle')
show('burnDesc')
click_button(text('simulateBurnBtn'), SIMULATE_BURN_BUTTON, type='primary')
st.plotly_chart(state.burn_chart.figure, use_container_width=True, key=state.burn_chart.element_id)

if state.burn_series is not None and len(state.burn_series) > 1:
    show('burnTableTitle')
    supply_col = t("burnLabel", state.current_lang, state.lang_data)
    burned_col = t("burnedLabel", state.current_lang, state.lang_data)
    schedule_df = burn_schedule_frame(state.burn_series, supply_col, burned_col)
    st.dataframe(schedule_df.style.format({supply_col: "{:,.0f}", burned_col: "{:,.0f}"}), use_container_width=True)

st.write("---")

# --- ROADMAP ---

anchor('roadmap')
show('roadmapTitle')
for phase in range(1, 5):
    show(f'roadmapPhase{phase}')

st.write("---")
show('footerText')
show('disclaimer')

sync_document()
