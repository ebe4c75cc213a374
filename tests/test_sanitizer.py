"""Tests for the bleach sanitizer postprocessor."""
from __future__ import annotations

import logging

from editormd.markdown.postprocessors import sanitizer
from editormd.markdown.postprocessors.sanitizer import sanitize_html


class TestSanitizeHtml:
    """Content and comment rules."""

    def test_script_is_escaped(self) -> None:
        html = sanitize_html("<p>hi</p><script>alert(1)</script>", {})
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_content_keeps_tables(self) -> None:
        html = "<table><tbody><tr><td>$x$</td></tr></tbody></table>"
        assert sanitize_html(html, {}) == html

    def test_comments_do_not_keep_tables(self) -> None:
        html = sanitize_html("<table><tr><td>x</td></tr></table>", {"is_comment": True})
        assert "<table>" not in html

    def test_katex_span_class_survives(self) -> None:
        html = '<p><span class="katex math inline">x</span></p>'
        assert sanitize_html(html, {"is_comment": True}) == html

    def test_failure_returns_input(self, monkeypatch, caplog) -> None:
        def broken_clean(*args, **kwargs):
            raise ValueError("bad markup")

        monkeypatch.setattr(sanitizer.bleach, "clean", broken_clean)
        with caplog.at_level(logging.ERROR, logger=sanitizer.__name__):
            assert sanitize_html("<p>x</p>", {}) == "<p>x</p>"
        assert "Bleach sanitization failed" in caplog.text
