"""Markdown parsing for WeMD: markdown-it plugin chain plus preprocessors."""

from .preprocessors.footnote_sync import (
    FootnoteInsertion,
    FootnoteSyncResult,
    insert_footnote,
    next_footnote_number,
    sync_footnotes,
)
from .renderer import create_parser, parse_markdown, render_markdown

__all__ = [
    "FootnoteInsertion",
    "FootnoteSyncResult",
    "create_parser",
    "insert_footnote",
    "next_footnote_number",
    "parse_markdown",
    "render_markdown",
    "sync_footnotes",
]
