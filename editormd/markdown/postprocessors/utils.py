"""Utilities for postprocessors that work on raw HTML strings.

Postprocessors that must preserve the document byte-for-byte cannot go through
BeautifulSoup, which re-serialises everything it parses.  These helpers split
the HTML into tag and text segments instead, so a postprocessor can rewrite
text runs and join the pieces back together without touching anything else.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

TAG = "tag"
TEXT = "text"

# A tag is "<" followed by a comment, a CDATA section, or anything up to the
# next ">".  Unterminated comments and tags run to the end of the string.
_HTML_SPLIT_RE = re.compile(
    r"""
    (
        <
        (?:
            !--                         # comment
            (?: [^-] | -(?!->) )*
            (?: --> )?
        |
            !\[CDATA\[                  # CDATA section
            (?: [^\]] | \](?!\]>) )*
            (?: \]\]> )?
        |
            [^>]* >?                    # any other tag
        )
    )
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class Segment:
    """A piece of an HTML string: either one tag or one run of text."""

    text: str
    kind: str

    @property
    def is_tag(self) -> bool:
        return self.kind == TAG

    @property
    def is_text(self) -> bool:
        return self.kind == TEXT


def split_html(html: str) -> list[Segment]:
    """Split HTML into alternating text and tag segments.

    The split is permissive: nothing is validated, a "<" always opens a tag.
    Joining the ``text`` of the returned segments gives back ``html`` exactly.
    """
    segments = []
    for piece in _HTML_SPLIT_RE.split(html):
        if not piece:
            continue
        kind = TAG if piece.startswith("<") else TEXT
        segments.append(Segment(piece, kind))
    return segments


def join_segments(segments) -> str:
    """Concatenate segments (or plain strings) back into an HTML string."""
    return "".join(s.text if isinstance(s, Segment) else s for s in segments)
