"""Page Shell: consistent container wrapper for all pages.

Every page content is rendered inside the same container with consistent
padding, width and background.
"""
import logging
from typing import Callable, Optional

from nicegui import ui

from .. import ui_compat as uic
from ..theme.styles import css
from ..theme.tokens import TOKENS

logger = logging.getLogger(__name__)

PAGE_TITLE_CLASS = css(
    font_size="1.875rem",
    font_weight=700,
    border_bottom=f"2px solid {TOKENS['accents']['purple']}",
    padding_bottom=TOKENS["spacing"]["2"],
)


def page_shell(title: Optional[str], content_fn: Callable[[], None]) -> None:
    """Render page content inside the shell.

    Args:
        title: Optional page title (displayed as heading if provided)
        content_fn: Function that renders the actual page content
    """
    with ui.element("div").classes("page-fill"):
        with ui.element("div").classes("page-content"):
            if title:
                uic.label(title, classes=PAGE_TITLE_CLASS)
            content_fn()
    logger.debug("Page shell rendered (title: %s)", title)
