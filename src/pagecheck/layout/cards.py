"""Card helpers."""
from typing import Any, Callable, Optional

from nicegui import ui

from .. import ui_compat as uic
from ..theme.styles import css
from ..theme.tokens import TOKENS

CARD_CLASS = css(
    background_color=TOKENS["backgrounds"]["panel_dark"],
    border=f"1px solid {TOKENS['border']}",
    border_radius=TOKENS["radii"]["md"],
    padding=TOKENS["spacing"]["4"],
)

CARD_SELECTED_CLASS = css(
    border=f"1px solid {TOKENS['accents']['purple']}",
    box_shadow=f"0 0 15px {TOKENS['accents']['purple']}",
)

TITLE_CLASS = css(font_weight=600, color=TOKENS["text"]["primary"])


def render_card(
    title: str,
    content: Optional[Callable[[], None]] = None,
    *,
    icon: Optional[str] = None,
    width: str = "w-full",
    selected: bool = False,
) -> Any:
    """Render a card with a title row and optional body.

    Args:
        title: Card title.
        content: Callable rendering the card body inside the card.
        icon: Optional material icon shown before the title.
        width: CSS width class.
        selected: Whether the card gets the accent border.

    Returns:
        The card element.
    """
    classes = " ".join(c for c in (CARD_CLASS, width, CARD_SELECTED_CLASS if selected else "") if c)
    card = ui.card().classes(classes)
    uic.register_element("cards", label=title, classes=classes)
    with card:
        with ui.row().classes("items-center gap-2 mb-2"):
            if icon:
                uic.icon(icon, classes="text-lg")
            uic.label(title, classes=TITLE_CLASS)
        if content is not None:
            content()
    return card
