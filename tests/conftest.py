"""Pytest configuration for tests."""
from __future__ import annotations

import django
from django.conf import settings


def pytest_configure(config) -> None:
    """Configure a minimal Django project with the editormd app installed."""
    if settings.configured:
        return
    settings.configure(
        DEBUG=False,
        SECRET_KEY="editormd-tests",
        INSTALLED_APPS=["editormd"],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": True,
            }
        ],
        EDITORMD_VERSION="2.0.0",
    )
    django.setup()
