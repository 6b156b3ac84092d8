"""Shared fixtures. Django is configured once per session without a database."""

import django
import pytest
from bs4 import BeautifulSoup
from django.conf import settings


def pytest_configure():
    if settings.configured:
        return
    settings.configure(
        INSTALLED_APPS=["blocks"],
        DATABASES={},
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": True,
            }
        ],
        BLOCKS_DOUBLE_ESCAPE=True,
        BLOCKS_PAGE_DOUBLE_ESCAPE=False,
        BLOCKS_PATTERN_DOUBLE_ESCAPE=True,
    )
    django.setup()


@pytest.fixture
def registry():
    from blocks.conversion.registry import get_default_registry

    return get_default_registry()


@pytest.fixture
def element():
    """Parse a snippet and return its first element."""

    def _element(markup):
        return BeautifulSoup(markup, "html.parser").find()

    return _element
