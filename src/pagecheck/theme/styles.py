"""Generated style classes.

`css(...)` turns a set of declarations into a stable class name of the form
``css-<8 hex>`` and records the rule in a process-wide stylesheet. The same
declarations always yield the same name, so classes are safe to compute at
module import time.
"""
from __future__ import annotations

import hashlib
import re
from typing import Dict, List, Optional

CLASS_PREFIX = "css-"
CLASS_PATTERN = re.compile(r"^css-[0-9a-f]{8}$")

# class name -> ordered (property, value) declarations
_STYLESHEET: Dict[str, List[tuple]] = {}


def _normalize(declarations: Dict[str, object]) -> List[tuple]:
    return [(prop.replace("_", "-"), str(value)) for prop, value in sorted(declarations.items())]


def css(**declarations: object) -> str:
    """Register a rule and return its generated class name.

    >>> css(padding="1rem") == css(padding="1rem")
    True
    """
    if not declarations:
        raise ValueError("css() requires at least one declaration")
    normalized = _normalize(declarations)
    body = ";".join(f"{prop}:{value}" for prop, value in normalized)
    name = CLASS_PREFIX + hashlib.sha256(body.encode("utf-8")).hexdigest()[:8]
    _STYLESHEET.setdefault(name, normalized)
    return name


def is_generated_class(name: str) -> bool:
    return bool(CLASS_PATTERN.match(name))


def resolve_class(name: str) -> Optional[List[tuple]]:
    """Return the declarations behind a generated class, or None."""
    rule = _STYLESHEET.get(name)
    return list(rule) if rule is not None else None


def stylesheet_css() -> str:
    """Render every registered rule as CSS text (sorted by class name)."""
    blocks = []
    for name in sorted(_STYLESHEET):
        decls = " ".join(f"{prop}: {value};" for prop, value in _STYLESHEET[name])
        blocks.append(f".{name} {{ {decls} }}")
    return "\n".join(blocks)

