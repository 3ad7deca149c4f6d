"""
Generated class names are stable and resolvable.
"""
import pytest

from pagecheck.theme.styles import css, is_generated_class, resolve_class, stylesheet_css


def test_same_declarations_same_class():
    assert css(padding="1rem", margin=0) == css(margin=0, padding="1rem")


def test_class_name_shape():
    name = css(padding="2rem")
    assert is_generated_class(name)
    assert not is_generated_class("w-full")


def test_underscores_become_hyphens():
    name = css(font_weight=600)
    assert resolve_class(name) == [("font-weight", "600")]
    assert f".{name} {{ font-weight: 600; }}" in stylesheet_css()


def test_unknown_class_resolves_to_none():
    assert resolve_class("css-00000000") is None
    assert resolve_class("w-full") is None


def test_empty_declarations_rejected():
    with pytest.raises(ValueError):
        css()
