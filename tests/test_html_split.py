"""Tests for the HTML tag/text splitter."""
from __future__ import annotations

import pytest

from editormd.markdown.postprocessors.utils import (
    TAG,
    TEXT,
    Segment,
    join_segments,
    split_html,
)


class TestSplitHtml:
    """Segment boundaries and lossless reconstruction."""

    def test_plain_text_is_one_segment(self) -> None:
        """Text without tags comes back as a single text segment."""
        assert split_html("just $x$ text") == [Segment("just $x$ text", TEXT)]

    def test_empty_string(self) -> None:
        assert split_html("") == []

    def test_tags_and_text_alternate(self) -> None:
        """Each tag is its own segment."""
        segments = split_html('<p class="a">one <em>two</em></p>')
        assert [s.text for s in segments] == [
            '<p class="a">',
            "one ",
            "<em>",
            "two",
            "</em>",
            "</p>",
        ]
        assert [s.kind for s in segments] == [TAG, TEXT, TAG, TEXT, TAG, TAG]

    def test_comment_with_markup_inside(self) -> None:
        """A comment containing ">" stays one tag segment."""
        segments = split_html("a<!-- <b>$x$</b> -->b")
        assert [s.text for s in segments] == ["a", "<!-- <b>$x$</b> -->", "b"]
        assert segments[1].is_tag

    def test_cdata_section(self) -> None:
        segments = split_html("<![CDATA[ a > b ]]>$y$")
        assert [s.text for s in segments] == ["<![CDATA[ a > b ]]>", "$y$"]

    def test_unterminated_tag_runs_to_end(self) -> None:
        """A stray "<" opens a tag that swallows the rest of the string."""
        segments = split_html("a < b and $x$")
        assert [s.text for s in segments] == ["a ", "< b and $x$"]
        assert segments[1].is_tag

    @pytest.mark.parametrize(
        "html",
        [
            "<div><p>Hello</p></div>",
            "a<!-- unterminated comment",
            "<pre>$x$</pre> and <code>y</code>",
            "x > y < z",
            "<br/><img src='a.png'>tail",
            "<![CDATA[ no end",
        ],
    )
    def test_join_reconstructs_input(self, html: str) -> None:
        """Joining the segments gives back the input unchanged."""
        assert join_segments(split_html(html)) == html

    def test_segment_predicates(self) -> None:
        assert Segment("<p>", TAG).is_tag
        assert not Segment("<p>", TAG).is_text
        assert Segment("p", TEXT).is_text
