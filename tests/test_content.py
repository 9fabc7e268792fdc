"""Tests for inline SVG extraction."""

import pytest

from svg_opti_detector.content import extract_inline_svgs
from svg_opti_detector.errors import ParseError
from svg_opti_detector.models import SvgAttributes
from svg_opti_detector.utils import hash_svg


def test_extracts_svgs_with_attributes(page_html):
    svgs = extract_inline_svgs(page_html)

    assert len(svgs) == 2
    assert svgs[0].attributes.class_ == "icon"
    assert svgs[0].attributes.width == "24"
    assert svgs[0].attributes.height == "24"
    assert svgs[1].attributes.id == "logo"
    assert svgs[1].attributes.view_box == "0 0 100 100"


def test_serializes_full_subtree(page_html):
    svgs = extract_inline_svgs(page_html)

    assert svgs[0].html.startswith("<svg")
    assert svgs[0].html.endswith("</svg>")
    assert "<path" in svgs[0].html
    assert "<circle" in svgs[1].html
    assert 'viewBox="0 0 100 100"' in svgs[1].html


def test_no_svgs():
    assert extract_inline_svgs("<html><body><div>No SVGs here</div></body></html>") == []


def test_missing_attributes_are_none():
    svgs = extract_inline_svgs('<svg><circle cx="10" cy="10" r="5"/></svg>')

    assert len(svgs) == 1
    assert svgs[0].attributes == SvgAttributes(
        class_=None, id=None, width=None, height=None, view_box=None
    )


def test_empty_attribute_treated_as_absent():
    svgs = extract_inline_svgs('<svg class="" id="x"></svg>')
    assert svgs[0].attributes.class_ is None
    assert svgs[0].attributes.id == "x"


def test_multi_valued_class_is_joined():
    svgs = extract_inline_svgs('<svg class="icon  icon-lg"></svg>')
    assert svgs[0].attributes.class_ == "icon icon-lg"


def test_document_order_includes_nested():
    html = """
    <div><svg id="outer"><g><svg id="inner"></svg></g></svg></div>
    <section><p><svg id="last"></svg></p></section>
    """
    ids = [svg.attributes.id for svg in extract_inline_svgs(html)]
    assert ids == ["outer", "inner", "last"]


def test_tolerates_unclosed_tags():
    html = '<div><p>unclosed <span>text <svg id="a"><circle r="1"/></svg><li>more'
    svgs = extract_inline_svgs(html)

    assert [svg.attributes.id for svg in svgs] == ["a"]
    assert "<circle" in svgs[0].html


def test_non_text_input_raises_parse_error():
    with pytest.raises(ParseError):
        extract_inline_svgs(None)


def test_attribute_order_survives_extraction():
    html = (
        '<svg id="x" width="1" viewBox="0 0 1 1"><rect y="1" x="2"/></svg>'
        '<svg viewBox="0 0 1 1" width="1" id="x"><rect x="2" y="1"/></svg>'
    )
    first, second = extract_inline_svgs(html)

    assert first.html.startswith('<svg id="x" width="1" viewBox="0 0 1 1">')
    assert '<rect y="1" x="2">' in first.html
    assert second.html.startswith('<svg viewBox="0 0 1 1" width="1" id="x">')
    assert '<rect x="2" y="1">' in second.html
    assert hash_svg(first.html) != hash_svg(second.html)
