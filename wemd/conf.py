# wemd/conf.py
"""
Settings access for the WeMD pipeline.

Every tunable is read from Django settings with a ``WEMD_`` prefix. The
pipeline is also usable as a plain library, so when Django settings have not
been configured the built-in defaults below are used instead.
"""

from django.conf import settings

DEFAULTS = {
    # id of the themed root container; theme CSS selectors hang off it
    "WEMD_ROOT_ID": "wemd",
    # Code highlighting
    "WEMD_HIGHLIGHT_FALLBACK_LANGUAGE": "bash",
    "WEMD_DIAGRAM_LANGUAGE": "mermaid",
    # Table of contents marker and heading levels it lists
    "WEMD_TOC_MARKER": r"^\[toc\]",
    "WEMD_TOC_LEVELS": (2, 3),
    # Raise instead of falling back to literal TeX
    "WEMD_MATH_THROW_ON_ERROR": False,
    # Provenance attribute the WeChat editor expects on pasted blocks
    "WEMD_DATA_TOOL": ("data-tool", "mdnice编辑器"),
    # Literal values for variables themes commonly reference without declaring
    "WEMD_CSS_VARIABLE_DEFAULTS": {
        "--md-primary-color": "#3f3f3f",
        "--md-font-color": "#3f3f3f",
        "--md-blockquote-bg": "rgba(0, 0, 0, 0.05)",
    },
    "WEMD_CHECKBOX_GLYPHS": ("☑", "☐"),
    "WEMD_DEFAULT_THEME": "default",
    "WEMD_CLIPBOARD_TIMEOUT": 10,
}


def get_setting(name):
    """
    Return the configured value for ``name``.

    Falls back to ``DEFAULTS`` when the setting is missing or when Django has
    not been configured at all.
    """
    default = DEFAULTS[name]
    if not settings.configured:
        return default
    return getattr(settings, name, default)
