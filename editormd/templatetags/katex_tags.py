# editormd/templatetags/katex_tags.py

from django import template
from django.utils.safestring import mark_safe

from editormd.conf import asset_url, get_option, get_version
from editormd.markdown.postprocessors.katex_markup import katex_markup
from editormd.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="katex")
def katex_filter(value):
    """Mark up $...$ / $$...$$ math in already rendered post or comment HTML"""
    return mark_safe(katex_markup(value))


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="markdown_comment")
def markdown_comment_filter(value):
    """Render markdown for comments (restricted sanitizer rules)"""
    return mark_safe(render_markdown(value, context={"is_comment": True}))


@register.inclusion_tag("editormd/katex_assets.html")
def katex_assets():
    """
    Stylesheet and scripts needed by the KaTeX footer script.
    Usage:
      {% katex_assets %}
    """
    version = get_version()
    bundled_jquery = get_option("jquery_compatible", "editor_advanced") == "off"

    if bundled_jquery:
        jquery_src = f"{asset_url('jQuery/jquery.min.js')}?ver={version}"
    else:
        jquery_src = get_option("jquery_url", "editor_advanced")

    return {
        "jquery_src": jquery_src,
        "katex_css": f"{asset_url('KaTeX/katex.min.css')}?ver={version}",
        "katex_js": f"{asset_url('KaTeX/katex.min.js')}?ver={version}",
    }


@register.inclusion_tag("editormd/katex_footer_scripts.html", takes_context=True)
def katex_footer_scripts(context):
    """
    Script that renders the katex spans in the browser.
    Not emitted on pages listed in the ``excluded_paths`` option.
    """
    request = context.get("request")
    path = getattr(request, "path", None)
    excluded = get_option("excluded_paths", "katex") or []
    return {"enabled": path not in excluded}
