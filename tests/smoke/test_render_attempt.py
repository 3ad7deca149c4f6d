"""
Render attempt outcomes: pass on a clean render, fail loudly on a raise.
"""
import pytest

from pagecheck import ui_compat as uic
from pagecheck.smoke import (
    RegistryMounter,
    RenderAttemptError,
    RenderOutcome,
    assert_renders,
    attempt_render,
    register_style_snapshot_support,
)


def static_placeholder():
    """Renders a static placeholder with no children."""


def card_requiring_title(title):
    uic.label(title)


def always_raises():
    raise ValueError("boom: component exploded")


@pytest.fixture
def mounter():
    return RegistryMounter()


def test_static_placeholder_succeeds(mounter):
    attempt = attempt_render(static_placeholder, mounter=mounter)
    assert attempt.outcome is RenderOutcome.SUCCEEDED
    assert attempt.succeeded
    assert attempt.error is None
    assert attempt.traceback is None
    assert attempt.target.endswith("static_placeholder")


def test_missing_required_prop_is_recorded(mounter):
    attempt = attempt_render(card_requiring_title, mounter=mounter)
    assert attempt.outcome is RenderOutcome.RAISED_ERROR
    assert attempt.error_type == "TypeError"
    assert "missing 1 required positional argument: 'title'" in attempt.error
    assert "TypeError" in attempt.traceback


def test_assert_renders_surfaces_error_verbatim(mounter):
    with pytest.raises(RenderAttemptError) as excinfo:
        assert_renders(card_requiring_title, mounter=mounter)

    err = excinfo.value
    assert isinstance(err, AssertionError)
    assert err.attempt.error in str(err)
    assert isinstance(err.__cause__, TypeError)
    assert str(err.__cause__) == err.attempt.error


def test_unconditional_raise_is_never_a_silent_pass(mounter):
    with pytest.raises(RenderAttemptError, match="boom: component exploded"):
        assert_renders(always_raises, mounter=mounter)


def test_registration_does_not_change_outcome(mounter):
    register_style_snapshot_support()
    register_style_snapshot_support()
    assert assert_renders(static_placeholder, mounter=mounter).succeeded
    assert not attempt_render(always_raises, mounter=mounter).succeeded


def test_keyboard_interrupt_is_not_recorded(mounter):
    def interrupted():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        attempt_render(interrupted, mounter=mounter)


def test_attempt_is_immutable(mounter):
    attempt = attempt_render(static_placeholder, mounter=mounter)
    with pytest.raises(Exception):
        attempt.outcome = RenderOutcome.RAISED_ERROR


def test_exception_not_in_dump(mounter):
    dumped = attempt_render(always_raises, mounter=mounter).model_dump(mode="json")
    assert "exception" not in dumped
    assert dumped["outcome"] == "raised-error"
