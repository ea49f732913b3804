# wemd/markdown/extensions/__init__.py
"""markdown-it plugins used by the WeMD parser."""

from .emoji import emoji_plugin
from .heading_wrapper import heading_wrapper_plugin
from .implicit_figures import implicit_figures_plugin
from .inline_spans import mark_plugin, sub_plugin, sup_plugin
from .math import MathRenderError, math_plugin
from .multiquote import multiquote_plugin
from .ruby import ruby_plugin
from .table_container import table_container_plugin
from .toc import toc_plugin

__all__ = [
    "MathRenderError",
    "emoji_plugin",
    "heading_wrapper_plugin",
    "implicit_figures_plugin",
    "mark_plugin",
    "math_plugin",
    "multiquote_plugin",
    "ruby_plugin",
    "sub_plugin",
    "sup_plugin",
    "table_container_plugin",
    "toc_plugin",
]
