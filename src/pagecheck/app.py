"""UI root for the pagecheck app.

Responsibilities:
- Import every contract page so its generated styles are registered
- Apply the theme once
- Register one route per contract page
"""
import importlib
import logging
import os
from typing import Callable, Dict

from nicegui import ui

from .contract.ui_contract import PAGE_IDS, PAGE_MODULES, PAGE_ROUTES, UI_CONTRACT
from .theme.theme import inject_theme

logger = logging.getLogger(__name__)

# Bootstrap guard
_UI_BOOTSTRAPPED: bool = False
_BOOTSTRAP_COUNT: int = 0

_REGISTERED_ROUTES: Dict[str, str] = {}


def _load_page_renderers() -> Dict[str, Callable[[], None]]:
    renderers = {}
    for page_id in PAGE_IDS:
        module = importlib.import_module(PAGE_MODULES[page_id])
        renderers[page_id] = module.render
    return renderers


def _register_routes(renderers: Dict[str, Callable[[], None]]) -> None:
    for page_id, render in renderers.items():
        path = PAGE_ROUTES[page_id]
        ui.page(path, title=UI_CONTRACT["titles"][page_id])(render)
        _REGISTERED_ROUTES[page_id] = path
        logger.debug("Registered route %s -> %s", path, page_id)


def bootstrap_app() -> None:
    """Bootstrap theme and page routes exactly once per process."""
    global _UI_BOOTSTRAPPED, _BOOTSTRAP_COUNT
    if _UI_BOOTSTRAPPED:
        logger.debug("UI already bootstrapped, skipping bootstrap")
        return
    _BOOTSTRAP_COUNT += 1
    logger.info("Starting UI bootstrap (pid=%d, count=%d)", os.getpid(), _BOOTSTRAP_COUNT)

    renderers = _load_page_renderers()
    inject_theme()
    _register_routes(renderers)
    _UI_BOOTSTRAPPED = True


def registered_routes() -> Dict[str, str]:
    return dict(_REGISTERED_ROUTES)


def main() -> None:
    """Run the NiceGUI server."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host = os.environ.get("PAGECHECK_HOST", "127.0.0.1")
    port = int(os.environ.get("PAGECHECK_PORT", "8080"))
    reload = os.environ.get("PAGECHECK_RELOAD", "0") == "1"

    bootstrap_app()
    logger.info("Serving on http://%s:%d%s", host, port, PAGE_ROUTES[PAGE_IDS[0]])
    ui.run(host=host, port=port, reload=reload, title="pagecheck", dark=True, show=False)


if __name__ in {"__main__", "__mp_main__"}:
    main()
