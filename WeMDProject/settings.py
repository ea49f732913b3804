"""
Django settings for WeMDProject.

Only what the typesetting engine needs: the ``wemd`` app (template filters and
management commands), template configuration, logging and the ``WEMD_*``
pipeline settings.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "wemd-insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "wemd",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    },
]

DATABASES = {}

USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "wemd": {
            "handlers": ["console"],
            "level": os.environ.get("WEMD_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}

# ---------------------------------------------------------------------------
# WeMD pipeline
# ---------------------------------------------------------------------------

WEMD_ROOT_ID = "wemd"
WEMD_HIGHLIGHT_FALLBACK_LANGUAGE = "bash"
WEMD_DIAGRAM_LANGUAGE = "mermaid"
WEMD_TOC_MARKER = r"^\[toc\]"
WEMD_TOC_LEVELS = (2, 3)
WEMD_MATH_THROW_ON_ERROR = False
WEMD_DATA_TOOL = ("data-tool", "mdnice编辑器")
WEMD_DEFAULT_THEME = "default"
WEMD_CLIPBOARD_TIMEOUT = 10
