"""Test the Streamlit page end to end."""

import pytest
from streamlit.testing.v1 import AppTest

pytestmark = pytest.mark.filterwarnings("ignore::DeprecationWarning")


@pytest.fixture
def at():
    app = AppTest.from_file("../app.py", default_timeout=30)
    app.run()
    assert not app.exception
    return app


def scroll_frame(at):
    return at.get("iframe")[-1].proto.srcdoc


def test_page_starts_in_thai(at):
    """The first render shows the default language and an empty tier display."""
    page = at.session_state["page"]
    assert page.current_lang == "th"
    assert [metric.value for metric in at.metric] == ["-", "-"]


def test_same_nav_link_scrolls_every_time(at):
    """Each click on one nav link renders a fresh scroll script."""
    at.button(key="nav-#burn").click().run()
    first = scroll_frame(at)
    at.button(key="nav-#burn").click().run()
    second = scroll_frame(at)

    assert "getElementById('burn')" in first
    assert "getElementById('burn')" in second
    assert first != second


def test_language_option_switches_page(at):
    """Opening the dropdown and picking English rewrites the page."""
    at.button(key="lang-dropdown-btn").click().run()
    at.button(key="lang-option:en").click().run()

    page = at.session_state["page"]
    assert not at.exception
    assert page.current_lang == "en"
    assert page.lang_dropdown.hidden
    assert page.document_title == "FlashMint | The Future of Digital Income"


def test_tier_button_selects_and_highlights(at):
    """Clicking a tier fills the metrics and marks only that button primary."""
    at.button(key="nft-button:Flash 5").click().run()

    assert [metric.value for metric in at.metric] == ["150 USDT", "600 USDT"]
    assert at.button(key="nft-button:Flash 5").proto.type == "primary"
    assert at.button(key="nft-button:Flash 4").proto.type == "secondary"


def test_simulate_burn_shows_schedule(at):
    """The simulate button draws ten years and the schedule table."""
    at.button(key="simulateBurnBtn").click().run()

    assert not at.exception
    assert len(at.session_state["page"].burn_series) == 11
    assert len(at.dataframe) == 1
