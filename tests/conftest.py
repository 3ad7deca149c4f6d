"""
Pytest configuration and fixtures.

Ensures src/ is importable and provides UI fixtures that run pages without
a NiceGUI client.
"""
from __future__ import annotations

import importlib
import sys
from contextlib import ExitStack
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add src/ to Python path if not already present
repo_root = Path(__file__).parent.parent
src_path = repo_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pagecheck.shared_registry import registry_reset  # noqa: E402
from pagecheck.smoke.snapshot import register_style_snapshot_support  # noqa: E402

# Modules that bind `ui` from nicegui at import time
UI_MODULES = [
    "pagecheck.ui_compat",
    "pagecheck.layout.cards",
    "pagecheck.layout.page_shell",
    "pagecheck.pages.integrations",
    "pagecheck.smoke.mount",
]


@pytest.fixture(autouse=True)
def _reset_ui_registry():
    """Every test starts with empty element counts."""
    registry_reset()
    yield
    registry_reset()


@pytest.fixture(scope="session")
def style_snapshot_support():
    """Register the style serializer and matchers once per session."""
    return register_style_snapshot_support()


@pytest.fixture
def offline_ui():
    """Replace nicegui.ui in the page stack with a MagicMock.

    Pages render, count and record styles exactly as with NiceGUI, but no
    client or server is needed.
    """
    fake_ui = MagicMock(name="ui")
    with ExitStack() as stack:
        for module_name in UI_MODULES:
            importlib.import_module(module_name)
            stack.enter_context(patch(f"{module_name}.ui", fake_ui))
        yield fake_ui
