"""
WeMD: Markdown to WeChat Official Account article HTML.

The pipeline is render (``render_markdown``), theme (``apply_theme``) and
copy (``write_to_clipboard``).
"""

from .clipboard import ClipboardError, ClipboardPayload, build_clipboard_payload, write_to_clipboard
from .markdown import (
    FootnoteInsertion,
    FootnoteSyncResult,
    create_parser,
    insert_footnote,
    next_footnote_number,
    render_markdown,
    sync_footnotes,
)
from .markdown.extensions import MathRenderError
from .scheduling import Debouncer
from .theme import ThemeNotFoundError, apply_theme, list_themes, load_theme_css

__all__ = [
    "ClipboardError",
    "ClipboardPayload",
    "Debouncer",
    "FootnoteInsertion",
    "FootnoteSyncResult",
    "MathRenderError",
    "ThemeNotFoundError",
    "apply_theme",
    "build_clipboard_payload",
    "create_parser",
    "insert_footnote",
    "list_themes",
    "load_theme_css",
    "next_footnote_number",
    "render_markdown",
    "sync_footnotes",
    "write_to_clipboard",
]
