"""
UI Compat Contract Layer.

Provides stable wrappers for NiceGUI widgets. All page code in
`pagecheck.pages` MUST use these wrappers (or the `layout` helpers built on
them) instead of calling `ui.button`, `ui.label`, etc. directly, so that
every element is counted and its styling recorded for render probes.

Invariants:
  - No unstable kwargs (size=) passed to underlying NiceGUI constructors;
    sizing is expressed with CSS classes only.
"""
from __future__ import annotations

from typing import Any, Optional

from nicegui import ui

from .shared_registry import increment_count, record_style


def register_element(
    element_type: str,
    *,
    label: Optional[str] = None,
    classes: str = "",
    style: str = "",
) -> None:
    """Register a UI element for render diagnostics."""
    increment_count(element_type)
    record_style(element_type, label, classes, style)


def _join(*parts: str) -> str:
    return " ".join(p for p in parts if p)


LINK_BUTTON_CLASSES = "text-sm px-3 py-1"


# -----------------------------------------------------------------------------
# Core Widget Wrappers
# -----------------------------------------------------------------------------

def link_button(text: str, target: str, *, classes: str = "", new_tab: bool = True) -> Any:
    """Flat button that opens `target`; rendered as a link for crawlers."""
    applied = _join("no-underline", classes)
    with ui.link(target=target, new_tab=new_tab).classes(applied) as link:
        ui.button(text).props("flat dense").classes(LINK_BUTTON_CLASSES)
    register_element("links", label=target, classes=applied)
    register_element("buttons", label=text, classes=LINK_BUTTON_CLASSES)
    return link


def label(text: str, *, classes: str = "") -> Any:
    lbl = ui.label(text)
    if classes:
        lbl.classes(classes)
    register_element("labels", label=text, classes=classes)
    return lbl


def badge(text: str, *, color: Optional[str] = None, classes: str = "") -> Any:
    bdg = ui.badge(text, color=color)
    if classes:
        bdg.classes(classes)
    register_element("badges", label=text, classes=classes)
    return bdg


def icon(name: str, *, color: Optional[str] = None, classes: str = "") -> Any:
    """
    Contract:
    - Map size to CSS class, do not pass size= to ui.icon
    """
    ic = ui.icon(name, color=color)
    if classes:
        ic.classes(classes)
    register_element("icons", label=name, classes=classes)
    return ic
