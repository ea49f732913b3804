# wemd/markdown/renderer.py

import logging
from html import escape

from markdown_it import MarkdownIt

from .config import get_parser_config
from .extensions import MathRenderError
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def create_parser(throw_on_error=None) -> MarkdownIt:
    """
    Build a fresh markdown-it parser with the full plugin chain.

    Called once per render: plugins keep no state on the parser between
    calls, so identical input always yields identical output.
    """
    config = get_parser_config(throw_on_error=throw_on_error)

    md = MarkdownIt(config["preset"], config["options"])
    for plugin, options in config["plugins"]:
        md.use(plugin, **options)
    return md


def parse_markdown(text, throw_on_error=None):
    """
    Convert Markdown to semantic HTML.

    Never raises unless strict math mode is requested; a failure of the whole
    parse degrades to the escaped source in a ``<pre>`` block.
    """
    md = create_parser(throw_on_error=throw_on_error)
    try:
        return md.render(text or "")
    except MathRenderError:
        raise
    except Exception as e:
        logger.error(f"Markdown rendering failed: {e}", exc_info=True)
        return f"<pre>{escape(text or '', quote=False)}</pre>\n"


def render_markdown(text, context=None):
    """
    Main rendering function with the pre-processing pipeline

    Args:
        text: Raw markdown text
        context: Optional dict shared with the preprocessors; after the call
            it holds ``footnotes_changed`` from the footnote sync
    """
    if context is None:
        context = {}

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text or "", context)

    return parse_markdown(text, throw_on_error=context.get("throw_on_error"))
