"""
Render attempt runner.

`attempt_render` mounts a component once and returns a RenderAttempt
describing the outcome; it records errors raised by the component instead
of propagating them. `assert_renders` is the assertion form used in tests:
it raises RenderAttemptError, chained to the original exception, when the
attempt did not succeed.
"""
from __future__ import annotations

import logging
import traceback
from typing import Optional

from .models import RenderAttempt, RenderOutcome
from .mount import Component, Mounter, component_name, default_mounter
from .snapshot import serialize

logger = logging.getLogger(__name__)


class RenderAttemptError(AssertionError):
    """A render attempt raised an error."""

    def __init__(self, attempt: RenderAttempt):
        self.attempt = attempt
        super().__init__(f"Rendering {attempt.target} raised {attempt.error_type}: {attempt.error}")


def attempt_render(
    target: Component,
    *,
    mounter: Optional[Mounter] = None,
    capture_styles: bool = False,
    scope: Optional[str] = None,
) -> RenderAttempt:
    """
    Mount `target` once and report what happened. Never raises for errors
    raised by `target`.

    Args:
        target: zero-argument component
        mounter: mount collaborator; defaults to the NiceGUI mounter
        capture_styles: serialize the captured styles into `style_snapshot`
        scope: registry scope name; defaults to the component's dotted name

    Returns:
        RenderAttempt with outcome SUCCEEDED or RAISED_ERROR
    """
    name = component_name(target)
    mounter = mounter or default_mounter()
    try:
        handle = mounter.mount(target, scope=scope)
    except Exception as e:
        logger.warning("Render attempt for %s raised %s: %s", name, type(e).__name__, e)
        return RenderAttempt(
            target=name,
            outcome=RenderOutcome.RAISED_ERROR,
            error=str(e),
            error_type=type(e).__name__,
            traceback=traceback.format_exc(),
            exception=e,
        )

    snapshot = None
    if capture_styles and handle.styles is not None:
        snapshot = serialize(handle.styles)
    return RenderAttempt(
        target=name,
        outcome=RenderOutcome.SUCCEEDED,
        style_snapshot=snapshot,
        counts=dict(handle.counts),
    )


def assert_renders(
    target: Component,
    *,
    mounter: Optional[Mounter] = None,
    capture_styles: bool = False,
) -> RenderAttempt:
    """Assert that mounting `target` does not raise.

    Raises:
        RenderAttemptError: the component raised; the original exception
            is chained as ``__cause__``.
    """
    attempt = attempt_render(target, mounter=mounter, capture_styles=capture_styles)
    if attempt.outcome is RenderOutcome.RAISED_ERROR:
        raise RenderAttemptError(attempt) from attempt.exception
    return attempt
