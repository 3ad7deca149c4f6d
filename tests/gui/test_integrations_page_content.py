"""
Integrations page content, rendered offline.
"""
import re

import pytest

from pagecheck.config.integrations import load_integrations
from pagecheck.layout.cards import CARD_CLASS, CARD_SELECTED_CLASS
from pagecheck.pages import integrations
from pagecheck.smoke import RegistryMounter, assert_match, attempt_render


@pytest.fixture
def handle(offline_ui):
    return RegistryMounter().mount(integrations.render, scope="integrations")


def test_one_card_per_integration(handle):
    registry = load_integrations()
    n = len(registry.integrations)
    assert handle.counts["cards"] == n
    assert handle.counts["buttons"] == n
    assert handle.counts["links"] == n
    assert handle.counts["badges"] == n


def test_featured_cards_come_first(handle):
    registry = load_integrations()
    card_labels = [r.label for r in handle.styles.records if r.element == "cards"]
    featured = [spec.name for spec in registry.featured()]
    assert card_labels[: len(featured)] == featured


def test_featured_cards_use_selected_class(handle):
    registry = load_integrations()
    by_label = {r.label: r for r in handle.styles.records if r.element == "cards"}
    for spec in registry.integrations:
        classes = by_label[spec.name].classes
        assert CARD_CLASS in classes
        assert (CARD_SELECTED_CLASS in classes) is spec.featured


def test_page_title_and_sections(handle):
    labels = [r.label for r in handle.styles.records if r.element == "labels"]
    assert labels[0] == "Integrations"
    assert "Featured" in labels
    assert "All integrations" in labels


def test_style_snapshot_resolves_generated_classes(offline_ui, style_snapshot_support):
    attempt = attempt_render(integrations.render, mounter=RegistryMounter(), capture_styles=True)
    assert attempt.succeeded
    snapshot = attempt.style_snapshot
    assert "cards 'GitHub'" in snapshot
    assert f".{CARD_CLASS} {{" in snapshot
    assert "border-radius: 0.5rem;" in snapshot
    assert "classes: w-72" in snapshot


def test_style_rule_matcher_on_featured_card(handle, style_snapshot_support):
    assert_match("to_have_style_rule", handle.styles, "border_radius", "0.5rem", label="GitHub")
    assert_match("to_have_style_rule", handle.styles, "box-shadow", re.compile("#a855f7"), label="GitHub")
    with pytest.raises(AssertionError, match="No style rule for property 'box-shadow'"):
        assert_match("to_have_style_rule", handle.styles, "box-shadow", re.compile("#a855f7"), label="GitLab")
