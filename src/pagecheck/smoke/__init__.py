"""Render smoke-test harness."""

from .attempt import RenderAttemptError, assert_renders, attempt_render
from .models import RenderAttempt, RenderOutcome, StyleCapture, StyleRecord
from .mount import MountHandle, Mounter, NiceGuiMounter, RegistryMounter, mount
from .snapshot import (
    add_snapshot_serializer,
    assert_match,
    extend_matchers,
    register_style_snapshot_support,
    serialize,
)

__all__ = [
    "RenderAttempt",
    "RenderAttemptError",
    "RenderOutcome",
    "StyleCapture",
    "StyleRecord",
    "MountHandle",
    "Mounter",
    "NiceGuiMounter",
    "RegistryMounter",
    "mount",
    "attempt_render",
    "assert_renders",
    "add_snapshot_serializer",
    "extend_matchers",
    "register_style_snapshot_support",
    "serialize",
    "assert_match",
]
