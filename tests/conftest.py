import copy

import pytest

from page_state import initialize_app
from translations import LANG_DATA


@pytest.fixture
def lang_data():
    return copy.deepcopy(LANG_DATA)


@pytest.fixture
def state(lang_data):
    return initialize_app(lang_data)
