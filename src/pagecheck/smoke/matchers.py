"""Style matchers for captured snapshots."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Union

from ..theme.styles import is_generated_class, resolve_class
from .models import StyleCapture


@dataclass(frozen=True)
class MatchResult:
    passed: bool
    message: str


def _declared_values(capture: StyleCapture, prop: str, label: Optional[str]) -> List[str]:
    values = []
    for record in capture.records:
        if label is not None and record.label != label:
            continue
        for name in record.classes:
            if not is_generated_class(name):
                continue
            for rule_prop, rule_value in resolve_class(name) or []:
                if rule_prop == prop:
                    values.append(rule_value)
    return values


def to_have_style_rule(
    capture: StyleCapture,
    prop: str,
    value: Union[str, int, float, Pattern[str]],
    *,
    label: Optional[str] = None,
) -> MatchResult:
    """Check that a generated rule in `capture` sets `prop` to `value`.

    `prop` accepts either ``border_radius`` or ``border-radius``; `value`
    may be a compiled regex. With `label`, only elements with that label
    are considered.
    """
    prop = prop.replace("_", "-")
    where = f" on {label!r}" if label is not None else ""
    if label is not None and not any(r.label == label for r in capture.records):
        return MatchResult(False, f"No element labelled {label!r} in style snapshot of {capture.scope}")

    found = _declared_values(capture, prop, label)
    if not found:
        return MatchResult(False, f"No style rule for property {prop!r}{where}")

    if isinstance(value, re.Pattern):
        passed = any(value.search(v) for v in found)
        expected = f"/{value.pattern}/"
    else:
        passed = str(value) in found
        expected = repr(str(value))
    if passed:
        return MatchResult(True, f"{prop!r}{where} matches {expected}")
    return MatchResult(False, f"Expected {prop!r}{where} to match {expected}, found {found!r}")


STYLE_MATCHERS = {
    "to_have_style_rule": to_have_style_rule,
}
