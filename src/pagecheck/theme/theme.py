"""Theme injection for NiceGUI.

Applies global CSS, fonts and the generated stylesheet to the page head.
"""
import logging
import os

from nicegui import ui

from .styles import stylesheet_css
from .tokens import SHADOW_ELEVATED, TOKENS

logger = logging.getLogger(__name__)
THEME_VERSION = "v1"
_THEME_APPLIED = False
_THEME_APPLY_COUNT = 0


def build_global_css() -> str:
    """Build global CSS as a string (pure function).

    Returns:
        CSS string ready for injection
    """
    css = f"""
    :root {{
        --bg-primary: {TOKENS['backgrounds']['primary']};
        --bg-panel-dark: {TOKENS['backgrounds']['panel_dark']};
        --bg-panel-medium: {TOKENS['backgrounds']['panel_medium']};
        --text-primary: {TOKENS['text']['primary']};
        --text-secondary: {TOKENS['text']['secondary']};
        --text-muted: {TOKENS['text']['muted']};
        --accent-purple: {TOKENS['accents']['purple']};
        --accent-cyan: {TOKENS['accents']['cyan']};
        --accent-blue: {TOKENS['accents']['blue']};
        --border-color: {TOKENS['border']};
        --font-ui: {TOKENS['fonts']['ui']};
        --radius-md: {TOKENS['radii']['md']};
        --shadow-elevated: {SHADOW_ELEVATED};
    }}

    html, body {{
        background-color: var(--bg-primary) !important;
        color: var(--text-primary) !important;
        font-family: var(--font-ui);
        margin: 0;
        min-height: 100vh;
    }}

    #q-app, .q-layout, .q-page, .q-page-container,
    .nicegui-content, .nicegui-page {{
        background-color: var(--bg-primary) !important;
        color: var(--text-primary) !important;
        min-height: 100vh;
    }}

    .page-fill {{
        width: 100%;
        min-height: 100vh;
        background-color: var(--bg-primary);
    }}

    .page-content {{
        max-width: 1200px;
        margin: 0 auto;
        padding: 24px;
    }}
    """
    return css


def inject_global_css() -> None:
    """Inject global CSS and the generated stylesheet as one shared style tag.

    Shared head HTML is served by every client, including the ones each
    `@ui.page` route creates per request.
    """
    css = build_global_css() + "\n" + stylesheet_css()
    ui.add_head_html(f"<style>{css}</style>", shared=True)


def inject_fonts() -> None:
    """Inject the Inter font from Google Fonts for every page."""
    font_html = """
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap" rel="stylesheet">
    """
    ui.add_head_html(font_html, shared=True)


def inject_theme() -> None:
    """Inject theme CSS globally, once per process.

    Page modules must be imported first so their generated classes are
    part of the stylesheet.
    """
    global _THEME_APPLIED, _THEME_APPLY_COUNT
    if _THEME_APPLIED:
        logger.debug("Theme already applied, skipping")
        return
    _THEME_APPLY_COUNT += 1
    logger.info("Injecting theme %s (pid=%d, call #%d)", THEME_VERSION, os.getpid(), _THEME_APPLY_COUNT)
    inject_fonts()
    inject_global_css()
    _THEME_APPLIED = True
