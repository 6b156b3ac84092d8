"""
Django settings for BlockBridge.

Only what the conversion commands need: no database, no web front end.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "blockbridge-local-only")

DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"

INSTALLED_APPS = [
    "blocks",
]

DATABASES = {}

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "blocks": {
            "handlers": ["console"],
            "level": os.environ.get("BLOCKS_LOG_LEVEL", "INFO"),
        },
    },
}

# Block conversion
BLOCKS_THEME_DIR = os.environ.get("BLOCKS_THEME_DIR") or None
BLOCKS_CUSTOM_ELEMENTS = [
    "blocks.conversion.elements.PartHandler",
    "blocks.conversion.elements.PatternHandler",
    "blocks.conversion.elements.ContentHandler",
]
BLOCKS_DOUBLE_ESCAPE = True
BLOCKS_PAGE_DOUBLE_ESCAPE = False
BLOCKS_PATTERN_DOUBLE_ESCAPE = True
BLOCKS_PATTERN_NAMESPACE = os.environ.get("BLOCKS_PATTERN_NAMESPACE") or None
BLOCKS_PATTERN_VIEWPORT_WIDTH = 1280
