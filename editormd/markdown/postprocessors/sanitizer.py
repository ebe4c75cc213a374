# editormd/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)

# Tags allowed in comments. Post content additionally gets CONTENT_TAGS.
COMMENT_TAGS = {
    "p",
    "br",
    "span",
    "sup",
    "sub",
    "em",
    "strong",
    "del",
    "blockquote",
    "ul",
    "ol",
    "li",
    # code
    "pre",
    "code",
    "kbd",
    "a",
}

CONTENT_TAGS = {
    "div",
    "section",
    "article",
    "cite",
    "mark",
    "ins",
    "hr",
    "dl",
    "dt",
    "dd",
    # headings
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    # code
    "samp",
    "var",
    # tables
    "table",
    "thead",
    "tbody",
    "tfoot",
    "tr",
    "th",
    "td",
    "caption",
    # media
    "img",
    "figure",
    "figcaption",
    # forms (for task lists)
    "input",
    "label",
    "abbr",
}


@lru_cache(maxsize=2)
def _get_bleach_config(is_comment=False):
    """Cache bleach configuration for content and for comments."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(COMMENT_TAGS)
    if not is_comment:
        allowed_tags |= CONTENT_TAGS

    allowed_attrs = {
        "*": ["class", "id", "title"],
        "a": ["href", "title", "rel"],
        "code": ["class"],
        "pre": ["class"],
        "span": ["class"],
        "ol": ["start", "type", "class"],
    }
    if not is_comment:
        allowed_attrs.update(
            {
                "img": ["src", "alt", "title", "width", "height", "loading"],
                "th": ["colspan", "rowspan", "scope"],
                "td": ["colspan", "rowspan"],
                "input": ["type", "checked", "disabled"],
                "abbr": ["title"],
            }
        )

    allowed_protocols = ["http", "https", "mailto"]

    return frozenset(allowed_tags), allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.

    Runs before the KaTeX markup postprocessor: bleach escapes a bare "<" in a
    formula as "&lt;", which the KaTeX postprocessor decodes again when the
    author padded it with spaces. Comments (``context["is_comment"]``) get a
    smaller set of tags.
    """
    is_comment = bool(context.get("is_comment"))
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config(is_comment)

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=False,  # Escape disallowed tags instead of dropping them
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        return html
