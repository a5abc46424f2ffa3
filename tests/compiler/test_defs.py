"""Tests for shared definition extraction."""

import xml.etree.ElementTree as ET

import pytest

from svg_icon_sprite.compiler.defs import extract_defs


class TestExtractDefs:
    """Test extract_defs."""

    def test_no_defs(self):
        markup = '<path d="M0 0" />'

        assert extract_defs(markup) == ("", markup)

    def test_single_block(self):
        result = extract_defs('<defs><linearGradient id="a" /></defs><path d="M0 0" />')

        assert result.defs_markup == '<linearGradient id="a" />'
        assert result.markup_without_defs == '<path d="M0 0" />'

    def test_nested_block(self):
        """Test blocks below the top level are extracted too."""
        result = extract_defs(
            '<g><defs><clipPath id="c"><rect width="1" height="1" /></clipPath></defs>'
            '<path d="M0 0" /></g>'
        )

        assert result.defs_markup == '<clipPath id="c"><rect width="1" height="1" /></clipPath>'
        assert result.markup_without_defs == '<g><path d="M0 0" /></g>'

    def test_multiple_blocks_in_document_order(self):
        result = extract_defs(
            '<defs><mask id="m" /></defs><g><defs><filter id="f" /></defs></g>'
            '<defs>  </defs><path d="M0 0" />'
        )

        assert result.defs_markup == '<mask id="m" />\n<filter id="f" />'
        assert result.markup_without_defs == '<g /><path d="M0 0" />'

    def test_defs_inside_defs_travels_with_outer_block(self):
        result = extract_defs('<defs><defs><circle r="1" /></defs></defs><path d="M0 0" />')

        assert result.defs_markup == '<defs><circle r="1" /></defs>'
        assert result.markup_without_defs == '<path d="M0 0" />'

    def test_contents_are_trimmed(self):
        result = extract_defs('<defs>\n  <linearGradient id="a" />\n</defs>')

        assert result.defs_markup == '<linearGradient id="a" />'
        assert result.markup_without_defs == ""

    def test_idempotent(self):
        first = extract_defs('<defs><mask id="m" /></defs><g><path d="M0 0" /></g>')
        second = extract_defs(first.markup_without_defs)

        assert second.defs_markup == ""
        assert second.markup_without_defs == first.markup_without_defs

    def test_text_around_removed_block_is_kept(self):
        result = extract_defs('<text>a<defs><mask id="m" /></defs>b</text>')

        assert result.markup_without_defs == "<text>ab</text>"

    def test_malformed(self):
        with pytest.raises(ET.ParseError):
            extract_defs("<defs><path></defs>")
