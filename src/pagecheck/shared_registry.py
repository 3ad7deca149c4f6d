"""
Shared UI registry state (singleton across all UI modules).
This module holds the mutable state for UI element counting, scoping and
style recording, ensuring that all imports of ui_compat share the same data.
"""
from __future__ import annotations

import copy
import logging
import os
from typing import Any, Dict, List, Optional

from .contract.ui_contract import ELEMENT_TYPES, PAGE_IDS

logger = logging.getLogger(__name__)


def _zero_counts() -> Dict[str, int]:
    return {element_type: 0 for element_type in ELEMENT_TYPES}


def _fresh_registry() -> Dict[str, Any]:
    return {
        "pages": list(PAGE_IDS),
        "global": _zero_counts(),
        "by_page": {page_id: _zero_counts() for page_id in PAGE_IDS},
        "totals": _zero_counts(),
        "styles": {"global": []},
    }


_UI_REGISTRY_SCOPED: Dict[str, Any] = _fresh_registry()
_current_scope_stack: List[str] = ["global"]


def _forensics() -> bool:
    return bool(os.environ.get("PAGECHECK_UI_FORENSICS"))


def registry_reset() -> None:
    """Reset the scoped registry (for probe)."""
    global _UI_REGISTRY_SCOPED
    if _forensics():
        logger.debug("registry_reset stack=%s", _current_scope_stack)
    _UI_REGISTRY_SCOPED = _fresh_registry()
    # Mutate in place so modules holding a reference see the reset
    _current_scope_stack[:] = ["global"]


def registry_begin_scope(scope: str) -> None:
    """Start a new scope (push onto stack)."""
    _current_scope_stack.append(scope)
    if _forensics():
        logger.debug("registry_begin_scope %s stack=%s", scope, _current_scope_stack)
    if scope != "global":
        # A scope always starts from zero so a mount sees only its own elements
        _UI_REGISTRY_SCOPED["by_page"][scope] = _zero_counts()
        _UI_REGISTRY_SCOPED["styles"][scope] = []


def registry_end_scope() -> None:
    """End the current scope (pop stack). The global scope is never popped."""
    if len(_current_scope_stack) > 1:
        _current_scope_stack.pop()
    if _forensics():
        logger.debug("registry_end_scope stack=%s", _current_scope_stack)


def current_scope() -> str:
    """Return the current active scope."""
    return _current_scope_stack[-1]


def _ensure_page_bucket(page_id: str) -> None:
    """Ensure a by_page entry exists for the given page."""
    if page_id not in _UI_REGISTRY_SCOPED["by_page"]:
        _UI_REGISTRY_SCOPED["by_page"][page_id] = _zero_counts()


def _bucket_for(scope: str) -> Dict[str, int]:
    if scope == "global":
        return _UI_REGISTRY_SCOPED["global"]
    _ensure_page_bucket(scope)
    return _UI_REGISTRY_SCOPED["by_page"][scope]


def increment_count(element_type: str) -> None:
    """Increment counts for current scope and totals."""
    scope = current_scope()
    bucket = _bucket_for(scope)
    bucket[element_type] = bucket.get(element_type, 0) + 1
    totals = _UI_REGISTRY_SCOPED["totals"]
    totals[element_type] = totals.get(element_type, 0) + 1
    if _forensics():
        logger.debug("increment_count scope=%s %s=%d", scope, element_type, bucket[element_type])


def record_style(element_type: str, label: Optional[str], classes: str, style: str = "") -> None:
    """Append a style record for the current scope."""
    scope = current_scope()
    records = _UI_REGISTRY_SCOPED["styles"].setdefault(scope, [])
    records.append({
        "element": element_type,
        "label": label,
        "classes": classes.split(),
        "style": style,
    })


def registry_counts_for_scope(scope: str) -> dict:
    """Return counts for a specific scope."""
    if scope == "global":
        return _UI_REGISTRY_SCOPED["global"].copy()
    return _UI_REGISTRY_SCOPED["by_page"].get(scope, {}).copy()


def registry_styles_for_scope(scope: str) -> List[dict]:
    """Return style records for a specific scope."""
    return copy.deepcopy(_UI_REGISTRY_SCOPED["styles"].get(scope, []))

