"""
Command line entry point for page smoke tests.

Usage:
    python -m pagecheck.smoke [--page ID ...] [--json] [--styles] [-v]

Exit codes:
    0  every probed page rendered and produced elements
    1  at least one page failed (P0 anomaly)
    2  usage error (unknown page id)
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from ..contract.ui_contract import PAGE_IDS
from .probe import build_render_diff_report, probe_all_pages
from .snapshot import register_style_snapshot_support

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagecheck-smoke",
        description="Mount each UI page and report whether it renders without raising.",
    )
    parser.add_argument(
        "--page",
        dest="pages",
        action="append",
        metavar="ID",
        help=f"Page to probe (repeatable). Default: all of {', '.join(PAGE_IDS)}",
    )
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    parser.add_argument("--styles", action="store_true", help="Include serialized style snapshots")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def _print_text_report(results: dict, report: dict) -> None:
    for page_id, result in results.items():
        status = "PASS" if result["render_ok"] and report["per_page"][page_id]["total_elements"] > 0 else "FAIL"
        print(f"[{status}] {page_id} ({report['per_page'][page_id]['total_elements']} elements)")
        for error in result["errors"]:
            print(f"    {error}")
        if result.get("style_snapshot"):
            for line in result["style_snapshot"].splitlines():
                print(f"    | {line}")
    for anomaly in report["anomalies"]:
        if anomaly["severity"] != "P0":
            print(f"[{anomaly['severity']}] {anomaly['page_id']}: {anomaly['reason']}")
    summary = report["summary"]
    print(f"[SUMMARY] {summary['passed']}/{summary['total']} pages passed")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    unknown = [p for p in args.pages or [] if p not in PAGE_IDS]
    if unknown:
        print(f"[ERROR] Unknown page id(s): {', '.join(unknown)}", file=sys.stderr)
        return 2

    register_style_snapshot_support()
    results = probe_all_pages(args.pages, capture_styles=args.styles)
    report = build_render_diff_report(results)

    if args.json:
        print(json.dumps({"results": results, "report": report}, indent=2, sort_keys=True))
    else:
        _print_text_report(results, report)

    failed = any(a["severity"] == "P0" for a in report["anomalies"])
    return 1 if failed else 0
