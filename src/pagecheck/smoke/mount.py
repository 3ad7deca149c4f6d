"""
Mount collaborator.

Mounting calls a zero-argument component inside a scoped UI registry so
the elements it creates are counted and their styles recorded. Whatever the
component raises propagates unchanged to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Protocol

from nicegui import ui

from ..shared_registry import (
    registry_begin_scope,
    registry_counts_for_scope,
    registry_end_scope,
    registry_styles_for_scope,
)
from .models import StyleCapture

logger = logging.getLogger(__name__)

Component = Callable[[], Any]

MOUNT_ROOT_CLASSES = "smoke-mount"


def component_name(target: Component) -> str:
    """Dotted name used to identify a component in reports."""
    module = getattr(target, "__module__", None) or "<unknown>"
    qualname = getattr(target, "__qualname__", None) or type(target).__qualname__
    return f"{module}.{qualname}"


@dataclass
class MountHandle:
    """Result of a successful mount."""
    scope: str
    root: Any = None
    counts: Dict[str, int] = field(default_factory=dict)
    styles: Optional[StyleCapture] = None

    @property
    def total_elements(self) -> int:
        return sum(self.counts.values())


class Mounter(Protocol):
    def mount(self, target: Component, *, scope: Optional[str] = None) -> MountHandle:
        ...


class RegistryMounter:
    """Call components inside a registry scope without a UI container.

    Suitable for components that create no NiceGUI elements themselves
    or when the caller already provides a UI context.
    """

    def _call(self, target: Component) -> Any:
        target()
        return None

    def mount(self, target: Component, *, scope: Optional[str] = None) -> MountHandle:
        scope = scope or component_name(target)
        registry_begin_scope(scope)
        try:
            root = self._call(target)
        finally:
            registry_end_scope()
        handle = MountHandle(
            scope=scope,
            root=root,
            counts=registry_counts_for_scope(scope),
            styles=StyleCapture.from_registry(scope, registry_styles_for_scope(scope)),
        )
        logger.debug("Mounted %s (%d elements)", scope, handle.total_elements)
        return handle


class NiceGuiMounter(RegistryMounter):
    """Mount components into a throwaway NiceGUI container.

    Args:
        keep_mounted: leave the root element in the client after mounting
            (default deletes it so repeated mounts do not accumulate).
    """

    def __init__(self, keep_mounted: bool = False):
        self.keep_mounted = keep_mounted

    def _call(self, target: Component) -> Any:
        root = None
        try:
            with ui.element("div").classes(MOUNT_ROOT_CLASSES) as root:
                target()
        finally:
            if root is not None and not self.keep_mounted:
                root.delete()
        return root if self.keep_mounted else None


_DEFAULT_MOUNTER: Optional[Mounter] = None


def default_mounter() -> Mounter:
    global _DEFAULT_MOUNTER
    if _DEFAULT_MOUNTER is None:
        _DEFAULT_MOUNTER = NiceGuiMounter()
    return _DEFAULT_MOUNTER


def mount(target: Component, *, scope: Optional[str] = None) -> MountHandle:
    """Mount `target` with the default mounter. Raises whatever `target` raises."""
    return default_mounter().mount(target, scope=scope)
