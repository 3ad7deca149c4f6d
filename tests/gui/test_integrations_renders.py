"""
Smoke test for the Integrations page.

Mounts the page with no inputs and asserts that doing so does not raise.
"""
from pagecheck.pages import integrations
from pagecheck.smoke import assert_renders


def test_renders(style_snapshot_support):
    assert_renders(integrations.render)


def test_renders_twice_in_one_process(style_snapshot_support):
    """Mount roots are deleted after each attempt, so repeated mounts stay independent."""
    first = assert_renders(integrations.render)
    second = assert_renders(integrations.render)
    assert first.counts == second.counts
