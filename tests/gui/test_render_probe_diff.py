"""
Test render probe diff and anomaly detection.
"""
import importlib

from pagecheck.contract.render_expectations import RENDER_EXPECTATIONS
from pagecheck.contract.ui_contract import ELEMENT_TYPES, PAGE_MODULES
from pagecheck.smoke.probe import build_render_diff_report, probe_page

PAGE_ID = "integrations"


def _page_module():
    return importlib.import_module(PAGE_MODULES[PAGE_ID])


def test_empty_page_simulation_produces_p0_anomaly(offline_ui, monkeypatch):
    """A render that creates zero elements succeeds but is flagged P0."""
    monkeypatch.setattr(_page_module(), "render", lambda: None)

    result = probe_page(PAGE_ID)
    assert result["render_ok"] is True
    assert sum(result["counts"].values()) == 0

    report = build_render_diff_report({PAGE_ID: result})
    p0 = [a for a in report["anomalies"] if a["severity"] == "P0"]
    assert any("zero" in a["reason"] for a in p0)
    assert report["summary"]["failed"] == 1


def test_missing_counts_produce_p1_anomaly():
    """A result below the minimum counts yields one P1 anomaly per missing type."""
    expected_min = RENDER_EXPECTATIONS[PAGE_ID]["min"]
    fake_counts = {key: 0 for key in ELEMENT_TYPES}
    fake_counts["icons"] = 3

    fake_result = {
        "page_id": PAGE_ID,
        "module": PAGE_MODULES[PAGE_ID],
        "render_ok": True,
        "errors": [],
        "traceback": None,
        "counts": fake_counts,
        "markers": RENDER_EXPECTATIONS[PAGE_ID]["markers"],
    }

    report = build_render_diff_report({PAGE_ID: fake_result})
    p1 = [a for a in report["anomalies"] if a["severity"] == "P1"]
    assert len(p1) == len(expected_min)
    for anomaly in p1:
        assert anomaly["page_id"] == PAGE_ID
        assert "expected" in anomaly["reason"]
    assert set(report["per_page"][PAGE_ID]["diff"]) == set(expected_min)


def test_probe_page_with_exception(offline_ui, monkeypatch):
    """A raising render gives render_ok False and the message verbatim."""
    def raising_render():
        raise RuntimeError("Simulated render error")

    monkeypatch.setattr(_page_module(), "render", raising_render)

    result = probe_page(PAGE_ID)
    assert result["render_ok"] is False
    assert result["errors"] == ["Render raised exception: Simulated render error"]
    assert "RuntimeError: Simulated render error" in result["traceback"]

    report = build_render_diff_report({PAGE_ID: result})
    reasons = [a["reason"] for a in report["anomalies"] if a["severity"] == "P0"]
    assert "Render raised exception: Simulated render error" in reasons


def test_missing_marker_is_p2_and_does_not_fail_page(offline_ui, monkeypatch):
    from pagecheck.smoke import probe

    monkeypatch.setattr(probe, "MARKER_RULES", {"has_featured_section": lambda records: False})
    result = probe_page(PAGE_ID)
    report = build_render_diff_report({PAGE_ID: result})

    assert [a["severity"] for a in report["anomalies"]] == ["P2"]
    assert report["summary"]["passed"] == 1
