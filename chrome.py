"""
Page chrome: mobile menu, language dropdown and click targets.

Click targets are plain strings naming the element that was clicked, e.g.
'mobile-menu-button', 'nav-link:#burn', 'lang-option:en' or
'nft-button:Flash 5'.
"""
from typing import Optional, Tuple

MOBILE_MENU_BUTTON = 'mobile-menu-button'
LANG_DROPDOWN_BUTTON = 'lang-dropdown-btn'
LANG_DROPDOWN_MENU = 'lang-dropdown-menu'
SIMULATE_BURN_BUTTON = 'simulateBurnBtn'

NAV_LINK = 'nav-link'
LANG_OPTION = 'lang-option'
NFT_BUTTON = 'nft-button'


def target_id(kind: str, value: str) -> str:
    return f"{kind}:{value}"


def parse_target(target: str) -> Tuple[str, Optional[str]]:
    kind, sep, value = target.partition(':')
    return kind, (value if sep else None)


class MobileMenu:
    def __init__(self):
        self.hidden = True

    def toggle(self):
        self.hidden = not self.hidden

    def close(self):
        self.hidden = True


class LanguageDropdown:
    def __init__(self):
        self.hidden = True

    def toggle(self):
        self.hidden = not self.hidden

    def close(self):
        self.hidden = True

    def contains(self, target: str) -> bool:
        """True for the trigger button and anything inside the menu region."""
        kind, _ = parse_target(target)
        return kind in (LANG_DROPDOWN_BUTTON, LANG_DROPDOWN_MENU, LANG_OPTION)

    def on_document_click(self, target: str):
        if not self.contains(target):
            self.close()


def scroll_script(section_id: str, request: int = 0) -> str:
    """JS run inside the components iframe to smooth-scroll the host page.

    `request` numbers each scroll so repeated clicks on one link produce a new
    iframe and the script runs again.
    """
    return (
        f"<script>// scroll request {request}\n"
        f"const el = window.parent.document.getElementById({section_id!r});"
        "if (el) { el.scrollIntoView({behavior: 'smooth'}); }"
        "</script>"
    )
