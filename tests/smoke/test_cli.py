"""
CLI exit codes and output.
"""
import importlib
import json

from pagecheck.contract.ui_contract import PAGE_MODULES
from pagecheck.smoke.cli import main


def test_all_pages_pass(offline_ui, capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "[PASS] integrations" in out
    assert "[SUMMARY] 1/1 pages passed" in out


def test_unknown_page_is_usage_error(capsys):
    assert main(["--page", "nope"]) == 2
    assert "Unknown page id(s): nope" in capsys.readouterr().err


def test_failing_page_exits_non_zero(offline_ui, monkeypatch, capsys):
    def raising_render():
        raise RuntimeError("Integrations backend missing")

    module = importlib.import_module(PAGE_MODULES["integrations"])
    monkeypatch.setattr(module, "render", raising_render)

    assert main(["--page", "integrations"]) == 1
    out = capsys.readouterr().out
    assert "[FAIL] integrations" in out
    assert "Render raised exception: Integrations backend missing" in out


def test_json_report_with_styles(offline_ui, capsys):
    assert main(["--json", "--styles"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["report"]["summary"]["passed"] == 1
    assert "cards 'GitHub'" in payload["results"]["integrations"]["style_snapshot"]
