"""
Render probe – smoke test every contract page.

Probes import each page module, mount its ``render`` function, collect
element counts and markers, and compare them against minimal expectations.

Probes are deterministic, work with the backend offline, and never raise.
"""

import importlib
import logging
import os
import traceback
from typing import Any, Callable, Dict, List, Optional

from ..contract.render_expectations import RENDER_EXPECTATIONS
from ..contract.ui_contract import ELEMENT_TYPES, PAGE_IDS, PAGE_MODULES
from ..shared_registry import registry_counts_for_scope, registry_reset, registry_styles_for_scope
from .attempt import attempt_render
from .mount import Mounter

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Environment configuration
# -----------------------------------------------------------------------------

def _configure_probe_environment() -> None:
    """Set environment variables to enforce offline/deterministic behavior."""
    os.environ["PAGECHECK_OFFLINE"] = "1"
    os.environ["PAGECHECK_RELOAD"] = "0"


# -----------------------------------------------------------------------------
# Markers
# -----------------------------------------------------------------------------

def _has_label(text: str) -> Callable[[List[dict]], bool]:
    def check(records: List[dict]) -> bool:
        return any(r["element"] == "labels" and r["label"] == text for r in records)
    return check


MARKER_RULES: Dict[str, Callable[[List[dict]], bool]] = {
    "has_featured_section": _has_label("Featured"),
}


def detect_markers(page_id: str) -> List[str]:
    """Return the markers whose rule holds for the page's recorded elements."""
    records = registry_styles_for_scope(page_id)
    return [name for name, rule in MARKER_RULES.items() if rule(records)]


def _empty_counts() -> Dict[str, int]:
    return {key: 0 for key in ELEMENT_TYPES}


def _failed_result(page_id: str, module_path: Optional[str], errors: List[str], tb_text: Optional[str]) -> Dict[str, Any]:
    return {
        "page_id": page_id,
        "module": module_path,
        "render_ok": False,
        "errors": errors,
        "traceback": tb_text,
        "counts": _empty_counts(),
        "markers": [],
        "style_snapshot": None,
    }


# -----------------------------------------------------------------------------
# Page render probe
# -----------------------------------------------------------------------------

def probe_page(
    page_id: str,
    *,
    capture_styles: bool = False,
    mounter: Optional[Mounter] = None,
) -> Dict[str, Any]:
    """
    Probe a single page. Never raises.

    Args:
        page_id: one of PAGE_IDS
        capture_styles: include the serialized style snapshot
        mounter: mount collaborator override

    Returns:
        Dictionary with keys:
          - page_id
          - module
          - render_ok (bool)
          - errors (list of strings)
          - traceback (str or None)
          - counts (dict of element type -> int)
          - markers (list of strings)
          - style_snapshot (str or None)
    """
    _configure_probe_environment()

    module_path = PAGE_MODULES.get(page_id)
    if not module_path:
        return _failed_result(page_id, None, [f"No module mapping for page_id {page_id}"], None)

    registry_reset()

    try:
        module = importlib.import_module(module_path)
    except Exception as e:
        return _failed_result(
            page_id, module_path, [f"Could not import module {module_path}: {e}"], traceback.format_exc()
        )

    render_func = getattr(module, "render", None)
    if not callable(render_func):
        return _failed_result(page_id, module_path, [f"Module {module_path} has no 'render' function"], None)

    attempt = attempt_render(render_func, mounter=mounter, capture_styles=capture_styles, scope=page_id)
    errors = []
    if not attempt.succeeded:
        errors.append(f"Render raised exception: {attempt.error}")

    counts = registry_counts_for_scope(page_id)
    for key in ELEMENT_TYPES:
        counts.setdefault(key, 0)

    return {
        "page_id": page_id,
        "module": module_path,
        "render_ok": attempt.succeeded,
        "errors": errors,
        "traceback": attempt.traceback,
        "counts": counts,
        "markers": detect_markers(page_id),
        "style_snapshot": attempt.style_snapshot,
    }


def probe_all_pages(
    page_ids: Optional[List[str]] = None,
    *,
    capture_styles: bool = False,
    mounter: Optional[Mounter] = None,
) -> Dict[str, Any]:
    """
    Returns a deterministic dict keyed by page_id with per-page probe results.
    """
    _configure_probe_environment()
    results = {}
    for page_id in page_ids or PAGE_IDS:
        results[page_id] = probe_page(page_id, capture_styles=capture_styles, mounter=mounter)
    return results


# -----------------------------------------------------------------------------
# Diff report builder
# -----------------------------------------------------------------------------

def build_render_diff_report(results: Dict[str, Any]) -> Dict[str, Any]:
    """
    Compare probe results vs RENDER_EXPECTATIONS; produce anomalies list and per-page diff.

    Args:
        results: output from probe_all_pages (or a dict of page_id -> probe result)

    Returns:
        Dictionary with keys:
          - anomalies: list of anomaly records
          - per_page: dict page_id -> diff dict
          - summary: dict with counts of passed/failed pages
    """
    anomalies = []
    per_page = {}
    passed_pages = 0
    failed_pages = 0

    for page_id, result in results.items():
        if not isinstance(result, dict):
            anomalies.append({
                "page_id": page_id,
                "severity": "P0",
                "reason": f"probe result is not a dict: {type(result)}",
                "suggestion": "Check probe_page implementation.",
            })
            failed_pages += 1
            continue

        render_ok = result.get("render_ok", False)
        counts = result.get("counts", {})
        errors = result.get("errors", [])
        markers = result.get("markers", [])

        if not render_ok:
            anomalies.append({
                "page_id": page_id,
                "severity": "P0",
                "reason": errors[0] if errors else "render failed",
                "suggestion": "Run the page render in isolation and fix the raised error.",
            })

        total_elements = sum(counts.values())
        if total_elements == 0:
            anomalies.append({
                "page_id": page_id,
                "severity": "P0",
                "reason": "total elements all zero",
                "suggestion": "Page render created zero UI elements. Ensure ui_compat wrappers are used inside render().",
            })

        expected = RENDER_EXPECTATIONS.get(page_id, {})
        diff = {}
        for elem_type, min_count in expected.get("min", {}).items():
            actual = counts.get(elem_type, 0)
            if actual < min_count:
                diff[elem_type] = {"expected": min_count, "actual": actual}
                anomalies.append({
                    "page_id": page_id,
                    "severity": "P1",
                    "reason": f"min.{elem_type} expected >= {min_count}, got {actual}",
                    "suggestion": f"Page missing required {elem_type}. Check that render() creates at least {min_count} {elem_type}.",
                })

        missing_markers = [m for m in expected.get("markers", []) if m not in markers]
        for marker in missing_markers:
            anomalies.append({
                "page_id": page_id,
                "severity": "P2",
                "reason": f"marker {marker} not detected",
                "suggestion": "Check MARKER_RULES against the page content.",
            })

        per_page[page_id] = {
            "render_ok": render_ok,
            "total_elements": total_elements,
            "errors": errors,
            "diff": diff,
            "missing_markers": missing_markers,
        }

        if render_ok and not diff and total_elements > 0:
            passed_pages += 1
        else:
            failed_pages += 1

    summary = {
        "passed": passed_pages,
        "failed": failed_pages,
        "total": len(results),
    }

    return {
        "anomalies": anomalies,
        "per_page": per_page,
        "summary": summary,
    }
