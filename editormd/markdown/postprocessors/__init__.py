# editormd/markdown/postprocessors/__init__.py

from .katex_markup import katex_markup_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    katex_markup_default,  # Wrap $...$ / $$...$$ math in KaTeX spans
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
