"""Test menu toggles and click dispatch."""

from chrome import (LANG_DROPDOWN_BUTTON, LANG_OPTION, MOBILE_MENU_BUTTON, NAV_LINK, NFT_BUTTON,
                    SIMULATE_BURN_BUTTON, LanguageDropdown, MobileMenu, parse_target, scroll_script, target_id)
from page_state import consume_scroll_target, dispatch_click


def test_parse_target():
    """Targets split into kind and optional value."""
    assert parse_target("nft-button:Flash 5") == ("nft-button", "Flash 5")
    assert parse_target("nav-link:#burn") == ("nav-link", "#burn")
    assert parse_target("simulateBurnBtn") == ("simulateBurnBtn", None)
    assert target_id(LANG_OPTION, "en") == "lang-option:en"


def test_mobile_menu_toggle():
    """The mobile menu starts hidden and toggles on each click."""
    menu = MobileMenu()
    assert menu.hidden
    menu.toggle()
    assert not menu.hidden
    menu.close()
    assert menu.hidden


def test_dropdown_outside_click_closes():
    """Clicks outside the trigger and menu close the dropdown."""
    dropdown = LanguageDropdown()
    dropdown.toggle()

    dropdown.on_document_click(LANG_DROPDOWN_BUTTON)
    assert not dropdown.hidden
    dropdown.on_document_click(target_id(LANG_OPTION, "zh"))
    assert not dropdown.hidden
    dropdown.on_document_click(SIMULATE_BURN_BUTTON)
    assert dropdown.hidden


def test_dispatch_dropdown_trigger_toggles(state):
    """The trigger opens and closes the dropdown."""
    dispatch_click(state, LANG_DROPDOWN_BUTTON)
    assert not state.lang_dropdown.hidden
    dispatch_click(state, LANG_DROPDOWN_BUTTON)
    assert state.lang_dropdown.hidden


def test_dispatch_language_option(state):
    """Choosing an option switches language and closes the menu."""
    dispatch_click(state, LANG_DROPDOWN_BUTTON)
    dispatch_click(state, target_id(LANG_OPTION, "en"))

    assert state.current_lang == "en"
    assert state.lang_dropdown.hidden
    assert state.flag_url == "https://flagcdn.com/w160/gb.png"
    assert state.flag_alt == "en flag"


def test_dispatch_outside_click_closes_dropdown(state):
    """Any other click closes the dropdown before its own handler runs."""
    dispatch_click(state, LANG_DROPDOWN_BUTTON)
    dispatch_click(state, target_id(NFT_BUTTON, "Flash 5"))

    assert state.lang_dropdown.hidden
    assert state.tiers.cost_text == "150 USDT"
    assert state.tiers.return_text == "600 USDT"


def test_nav_link_closes_mobile_menu_and_scrolls(state):
    """Nav links close the open mobile menu and queue a smooth scroll."""
    dispatch_click(state, MOBILE_MENU_BUTTON)
    assert not state.mobile_menu.hidden

    dispatch_click(state, target_id(NAV_LINK, "#burn"))
    assert state.mobile_menu.hidden
    assert consume_scroll_target(state) == "burn"
    assert consume_scroll_target(state) is None


def test_simulate_button(state):
    """The simulate button draws the full ten-year burn."""
    dispatch_click(state, SIMULATE_BURN_BUTTON)

    assert len(state.burn_series) == 11
    assert state.burn_chart.teardowns == 1


def test_unknown_target_only_closes_dropdown(state):
    """Unknown targets change nothing but the dropdown."""
    dispatch_click(state, LANG_DROPDOWN_BUTTON)
    dispatch_click(state, "logo")

    assert state.lang_dropdown.hidden
    assert state.current_lang == "th"
    assert state.tiers.active is None


def test_scroll_script_targets_section():
    """The scroll script looks up the section and scrolls smoothly."""
    script = scroll_script("tokenomics")
    assert "getElementById('tokenomics')" in script
    assert "behavior: 'smooth'" in script


def test_repeated_nav_clicks_produce_new_scroll_scripts(state):
    """Clicking the same link twice yields two distinct scroll scripts."""
    scripts = []
    for _ in range(2):
        dispatch_click(state, target_id(NAV_LINK, "#burn"))
        scripts.append(scroll_script(consume_scroll_target(state), state.scroll_requests))

    assert state.scroll_requests == 2
    assert scripts[0] != scripts[1]
    assert all("getElementById('burn')" in script for script in scripts)
