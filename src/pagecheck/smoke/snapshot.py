"""
Snapshot serializer and matcher registry.

Serializers turn captured values into stable, human-readable text;
matchers are named assertion helpers over those values. Both live in a
process-wide registry. Registration is idempotent: adding the same
serializer or matcher mapping again leaves the registry unchanged, so
every test module may register without coordinating with the others.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Protocol

from ..theme.styles import is_generated_class, resolve_class
from .models import StyleCapture

logger = logging.getLogger(__name__)


class SnapshotSerializer(Protocol):
    def test(self, value: Any) -> bool:
        ...

    def serialize(self, value: Any) -> str:
        ...


@dataclass(frozen=True)
class StyleSnapshotSerializer:
    """Render a StyleCapture with generated class names resolved to rules.

    Example output::

        cards 'GitHub'
          .css-1a2b3c4d {
            border: 1px solid #334155;
          }
          classes: w-72
    """

    indent: str = "  "

    def test(self, value: Any) -> bool:
        return isinstance(value, StyleCapture)

    def serialize(self, value: StyleCapture) -> str:
        pad = self.indent
        lines: List[str] = []
        for record in value.records:
            header = record.element if record.label is None else f"{record.element} {record.label!r}"
            lines.append(header)
            plain = []
            for name in record.classes:
                rule = resolve_class(name) if is_generated_class(name) else None
                if rule is None:
                    plain.append(name)
                    continue
                lines.append(f"{pad}.{name} {{")
                lines.extend(f"{pad}{pad}{prop}: {val};" for prop, val in rule)
                lines.append(f"{pad}}}")
            if plain:
                lines.append(f"{pad}classes: {' '.join(plain)}")
            if record.style:
                lines.append(f"{pad}style: {record.style}")
        return "\n".join(lines)


class SnapshotRegistry:
    """Ordered serializers plus named matchers."""

    def __init__(self) -> None:
        self._serializers: List[SnapshotSerializer] = []
        self._matchers: Dict[str, Callable[..., Any]] = {}

    @property
    def serializers(self) -> List[SnapshotSerializer]:
        return list(self._serializers)

    @property
    def matchers(self) -> Dict[str, Callable[..., Any]]:
        return dict(self._matchers)

    def add_serializer(self, serializer: SnapshotSerializer) -> bool:
        """Register a serializer. Returns False if it was already registered."""
        if any(existing is serializer or existing == serializer for existing in self._serializers):
            logger.debug("Serializer %r already registered, skipping", serializer)
            return False
        # Most recently added is consulted first
        self._serializers.insert(0, serializer)
        return True

    def extend(self, matchers: Mapping[str, Callable[..., Any]]) -> None:
        """Merge named matchers. Existing names are replaced only by a different callable."""
        for name, fn in matchers.items():
            current = self._matchers.get(name)
            if current is fn:
                continue
            if current is not None:
                logger.warning("Matcher %r replaced by %r", name, fn)
            self._matchers[name] = fn

    def serialize(self, value: Any) -> str:
        for serializer in self._serializers:
            if serializer.test(value):
                return serializer.serialize(value)
        return repr(value)

    def matcher(self, name: str) -> Callable[..., Any]:
        try:
            return self._matchers[name]
        except KeyError:
            raise KeyError(f"No matcher registered under {name!r}") from None

    def assert_match(self, name: str, *args: Any, **kwargs: Any) -> None:
        """Run a registered matcher and raise AssertionError with its message on failure."""
        result = self.matcher(name)(*args, **kwargs)
        if not result.passed:
            raise AssertionError(result.message)

    def clear(self) -> None:
        self._serializers.clear()
        self._matchers.clear()


_REGISTRY = SnapshotRegistry()

STYLE_SERIALIZER = StyleSnapshotSerializer()

_SUPPORT_REGISTERED = False
_SUPPORT_REGISTER_COUNT = 0


def get_registry() -> SnapshotRegistry:
    return _REGISTRY


def add_snapshot_serializer(serializer: SnapshotSerializer) -> bool:
    return _REGISTRY.add_serializer(serializer)


def extend_matchers(matchers: Mapping[str, Callable[..., Any]]) -> None:
    _REGISTRY.extend(matchers)


def serialize(value: Any) -> str:
    return _REGISTRY.serialize(value)


def assert_match(name: str, *args: Any, **kwargs: Any) -> None:
    _REGISTRY.assert_match(name, *args, **kwargs)


def register_style_snapshot_support() -> SnapshotRegistry:
    """Register the style serializer and matchers, once per process."""
    global _SUPPORT_REGISTERED, _SUPPORT_REGISTER_COUNT
    if _SUPPORT_REGISTERED:
        logger.debug("Style snapshot support already registered, skipping")
        return _REGISTRY
    from .matchers import STYLE_MATCHERS

    _SUPPORT_REGISTER_COUNT += 1
    add_snapshot_serializer(STYLE_SERIALIZER)
    extend_matchers(STYLE_MATCHERS)
    _SUPPORT_REGISTERED = True
    logger.info("Style snapshot support registered (pid=%d, call #%d)", os.getpid(), _SUPPORT_REGISTER_COUNT)
    return _REGISTRY
