"""Unit tests for linkhook.api.link.AnchorAttributes and render_anchor."""

import pytest

from linkhook.api.link.AnchorAttributes import AnchorAttributes
from linkhook.api.link.render_anchor import render_anchor

pytestmark = pytest.mark.link


def test_to_dict_omits_empty_values():
    assert AnchorAttributes(href="/a/").to_dict() == {"href": "/a/"}


def test_to_dict_keeps_empty_href():
    assert AnchorAttributes(href="").to_dict() == {"href": ""}


def test_to_dict_all_attributes():
    attrs = AnchorAttributes(href="/x", rel="external", css_class="broken", title="T")
    assert attrs.to_dict() == {"href": "/x", "rel": "external", "class": "broken", "title": "T"}


def test_render_anchor_escapes_href_and_text():
    html = render_anchor(AnchorAttributes(href="/a/?x=1&y=2"), "<b>")
    assert html == '<a href="/a/?x=1&amp;y=2">&lt;b&gt;</a>'


def test_render_anchor_does_not_double_escape_title():
    html = render_anchor(AnchorAttributes(href="/a/", title="A &amp; B"), "a")
    assert html == '<a href="/a/" title="A &amp; B">a</a>'


def test_render_anchor_external():
    html = render_anchor(AnchorAttributes(href="https://e.com", rel="external"), "e")
    assert html == '<a href="https://e.com" rel="external">e</a>'
