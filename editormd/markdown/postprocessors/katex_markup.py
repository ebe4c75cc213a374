# editormd/markdown/postprocessors/katex_markup.py
"""
Postprocessor that marks up ``$...$`` and ``$$...$$`` math for KaTeX.

Every accepted formula becomes::

    <span class="katex math inline">...</span>       for $...$
    <span class="katex math multi-line">...</span>   for $$...$$

and is rendered later in the browser by the footer script
(see ``templates/editormd/katex_footer_scripts.html``).

Rules:
- Text inside <pre>, <code>, <style> and <script> is left alone
- A delimiter must touch the formula: "$ x$" and "$x $" stay literal text,
  which keeps prices like "$5 and $10" out of KaTeX
- Space-padded HTML entities (" &lt; ") are turned back into LaTeX characters,
  a decoded "<" or ">" is escaped again so formulas never become markup
- Underscores that Markdown rendered as <em>...</em> are restored
- Tags and text outside formulas are returned byte-for-byte
"""

import logging
import re

from .utils import join_segments, split_html

logger = logging.getLogger(__name__)

# Elements whose content is never treated as math
PASSTHROUGH_TAGS = frozenset({"pre", "code", "style", "script"})

_PASSTHROUGH_TAG_RE = re.compile(
    r"<(/)?(?:%s)(?=[\s/>])[^>]*>" % "|".join(sorted(PASSTHROUGH_TAGS)),
    re.IGNORECASE,
)

_EMPHASIS_TAG_RE = re.compile(r"</?em>")

# Display math is tried first so "$$x$$" is never read as two inline spans.
# Inside a formula a "$" is allowed as long as it does not follow another "$".
_MATH_RE = re.compile(
    r"""
    (?P<display>
        \$\$
        (?P<display_body>
            (?: [^$] | \$(?<!\$\$) )+?
        )
        \$\$
    )
    |
    (?P<inline>
        \$
        (?P<inline_body>
            (?: [^$] | \$(?<!\$\$) )+?
        )
        \$
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)

_ASCII_WHITESPACE = " \t\n\r\x0b\x0c"

# Characters removed from both ends of a finished formula
_TRIM_CHARACTERS = " \t\n\r\0\x0b"

# Editor.md writes LaTeX control characters as HTML entities padded with one
# space on each side.  Only the padded forms are decoded, so entities in
# ordinary prose keep their meaning.
ENTITY_TRANSLATIONS = (
    (" &lt; ", "<"),
    (" &gt; ", ">"),
    (" &quot; ", '"'),
    (" &#039; ", "\\'"),
    (" &#038; ", "&"),
    (" &amp; ", "&"),
    (" \n ", " "),
    (" \r ", " "),
    (" &#60; ", "<"),
    (" &#62; ", ">"),
    (" &#40; ", "("),
    (" &#41; ", ")"),
    (" &#95; ", "_"),
    (" &#33; ", "!"),
    (" &#123; ", "{"),
    (" &#125; ", "}"),
    (" &#94; ", "^"),
    (" &#43; ", "+"),
    (" &#92; ", "\\\\"),
)


def track_passthrough(segments):
    """
    Yield ``(segment, suppressed)`` for each segment.

    ``suppressed`` is the state after the segment has been read: a start tag of
    a passthrough element switches it on, the matching end tag switches it off.
    Nesting is not tracked, any passthrough end tag clears the state.
    """
    suppressed = False
    for segment in segments:
        if segment.is_tag:
            match = _PASSTHROUGH_TAG_RE.match(segment.text)
            if match:
                suppressed = match.group(1) is None
        yield segment, suppressed


def decode_entities(formula: str) -> str:
    """Reverse the space-padded entity encoding of LaTeX control characters."""
    for entity, char in ENTITY_TRANSLATIONS:
        formula = formula.replace(entity, char)
    return formula


def restore_underscores(value) -> str:
    """Turn <em> and </em> back into the underscores Markdown consumed."""
    if not isinstance(value, str):
        return ""
    return value.replace("<em>", "_").replace("</em>", "_")


def _is_padded(body: str) -> bool:
    return body[0] in _ASCII_WHITESPACE or body[-1] in _ASCII_WHITESPACE


def clean_formula(body: str) -> str:
    """
    Turn the raw text between the delimiters into the span's HTML body.

    Entities are decoded first, so an "<em>" spelled with padded entities is
    restored to underscores as well. Decoding can produce "<" and ">", which
    are escaped again: the formula reaches KaTeX as the span's text and never
    becomes markup. Other entities still in the body are left as they are.
    """
    formula = restore_underscores(decode_entities(body)).strip(_TRIM_CHARACTERS)
    return formula.replace("<", "&lt;").replace(">", "&gt;")


def render_math_span(match: re.Match) -> str:
    """Replacement callback for a single ``$``/``$$`` match."""
    if match.group("display"):
        kind, body = "multi-line", match.group("display_body")
    elif match.group("inline"):
        kind, body = "inline", match.group("inline_body")
    else:
        return match.group(0)

    if _is_padded(body):
        logger.debug(f"Leaving whitespace-padded math as text: {match.group(0)!r}")
        return match.group(0)

    return f'<span class="katex math {kind}">{clean_formula(body)}</span>'


def _rewrite_run(text: str) -> str:
    if "$" not in text:
        return text
    try:
        return _MATH_RE.sub(render_math_span, text)
    except Exception as e:
        logger.error(f"KaTeX markup failed, leaving text unchanged: {e}", exc_info=True)
        return text


def _rewrite_segments(segments):
    # Text runs are joined with the <em>/</em> tags between them so that a
    # formula split by emphasis markup can still be matched as one span.
    run = []
    for segment, suppressed in track_passthrough(segments):
        if not suppressed and (
            segment.is_text or _EMPHASIS_TAG_RE.fullmatch(segment.text)
        ):
            run.append(segment.text)
            continue
        if run:
            yield _rewrite_run("".join(run))
            run = []
        yield segment.text
    if run:
        yield _rewrite_run("".join(run))


def katex_markup(html: str) -> str:
    """
    Replace math delimited by ``$`` or ``$$`` with KaTeX span markup.

    Args:
        html: Content or comment HTML

    Returns:
        The HTML with every accepted formula wrapped in a ``katex math`` span.
        Never raises; a run that cannot be processed is returned unchanged.
    """
    if not isinstance(html, str):
        return ""
    if "$" not in html:
        return html
    return join_segments(_rewrite_segments(split_html(html)))


def katex_markup_default(html: str, context: dict) -> str:
    """Default instance of the KaTeX markup postprocessor"""
    return katex_markup(html)
