"""Integrations page.

Lists the integrations from the registry, featured ones first, each on its
own card with a category badge and a Connect link.
"""
import logging

from nicegui import ui

from .. import ui_compat as uic
from ..config.integrations import IntegrationSpec, load_integrations
from ..layout.cards import render_card
from ..layout.page_shell import page_shell
from ..theme.styles import css
from ..theme.tokens import TOKENS

logger = logging.getLogger(__name__)

PAGE_TITLE = "Integrations"

INTRO_CLASS = css(color=TOKENS["text"]["secondary"], margin_bottom=TOKENS["spacing"]["4"])
SECTION_CLASS = css(
    color=TOKENS["text"]["muted"],
    font_size="0.75rem",
    letter_spacing="0.08em",
    text_transform="uppercase",
)
DESCRIPTION_CLASS = css(color=TOKENS["text"]["secondary"], font_size="0.875rem")

_CATEGORY_LABELS = {
    "source_control": "Source control",
    "chat": "Chat",
    "issue_tracking": "Issue tracking",
    "ci": "CI",
    "monitoring": "Monitoring",
    "storage": "Storage",
}


def _render_integration_card(spec: IntegrationSpec) -> None:
    def body() -> None:
        uic.badge(_CATEGORY_LABELS.get(spec.category.value, spec.category.value), color="purple")
        uic.label(spec.description, classes=DESCRIPTION_CLASS)
        uic.link_button("Connect", spec.url)

    render_card(spec.name, body, icon=spec.icon, width="w-72", selected=spec.featured)


def _render_section(title: str, specs) -> None:
    if not specs:
        return
    uic.label(title, classes=SECTION_CLASS)
    with ui.row().classes("w-full gap-4 flex-wrap"):
        for spec in specs:
            _render_integration_card(spec)


def render() -> None:
    """Render the Integrations page."""
    registry = load_integrations()
    logger.debug("Rendering %d integrations", len(registry.integrations))

    def content() -> None:
        uic.label(
            "Connect your tools to get run reports where your team already works.",
            classes=INTRO_CLASS,
        )
        _render_section("Featured", registry.featured())
        _render_section("All integrations", registry.others())

    page_shell(PAGE_TITLE, content)
