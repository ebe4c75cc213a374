"""
Settings lookups for the editormd app.

Options live in the ``EDITORMD`` Django setting, grouped by section::

    EDITORMD = {
        "editor_style": {"asset_base_url": "https://cdn.example.com/editormd"},
        "editor_advanced": {"jquery_compatible": "off"},
    }

Anything not configured falls back to ``DEFAULTS``.
"""

from django.conf import settings

DEFAULTS = {
    "editor_style": {
        "asset_base_url": "/static/editormd",
    },
    "editor_advanced": {
        # "off" loads the bundled jQuery instead of the site's own
        "jquery_compatible": "on",
        "jquery_url": None,
    },
    "katex": {
        # No footer script on these pages
        "excluded_paths": ["/accounts/login/", "/accounts/register/"],
    },
}

DEFAULT_VERSION = "1.0"


def get_option(name, section, default=None):
    """Return option ``name`` from ``section`` of ``settings.EDITORMD``."""
    configured = getattr(settings, "EDITORMD", None) or {}
    options = configured.get(section) or {}
    if name in options:
        return options[name]
    return DEFAULTS.get(section, {}).get(name, default)


def get_version():
    """Version string appended to asset URLs for cache busting."""
    return getattr(settings, "EDITORMD_VERSION", DEFAULT_VERSION)


def asset_url(path):
    """Absolute URL of a file under the configured asset base."""
    base = (get_option("asset_base_url", "editor_style") or "").rstrip("/")
    return f"{base}/assets/{path.lstrip('/')}"
