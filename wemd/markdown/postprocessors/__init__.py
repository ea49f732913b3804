# wemd/markdown/postprocessors/__init__.py

import logging

from .anchor_styles import anchor_styles_default
from .checkbox_glyphs import checkbox_glyphs_default
from .code_overflow import code_overflow_default
from .code_whitespace import code_whitespace_default
from .css_variables import css_variables_default
from .data_tool import data_tool_default
from .footnote_anchors import footnote_anchors_default
from .footnote_words import footnote_words_default
from .root_wrapper import root_wrapper_default
from .top_offset import top_offset_default
from .utils import clear_shared_soup

logger = logging.getLogger(__name__)

EXPORT_POSTPROCESSORS = [
    code_whitespace_default,  # Tabs and spaces inside code.hljs become &nbsp;
    top_offset_default,  # top:<N>em becomes transform: translateY(<N>em)
    css_variables_default,  # Resolve var() references, drop custom properties
    checkbox_glyphs_default,  # Task list checkboxes become ☑ / ☐
    anchor_styles_default,  # Move link decoration onto a solid-underlined span
    footnote_anchors_default,  # Neutralise links inside footnote items
    footnote_words_default,  # Dashed-underline span for footnoted words
    code_overflow_default,  # Horizontal scrolling pre, non-wrapping code
    data_tool_default,  # Provenance attribute on top-level blocks
    root_wrapper_default,  # Transparent background on the root container
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """
    Apply all export postprocessors in order.

    A postprocessor that raises is logged and skipped; the HTML it was given
    is passed on to the next one.
    """
    for processor in EXPORT_POSTPROCESSORS:
        try:
            html = processor(html, context)
        except Exception as e:
            logger.error(f"Export step {processor.__name__} failed: {e}", exc_info=True)
            # The cached tree may be half-mutated; reparse from the last good HTML
            clear_shared_soup(context)
    clear_shared_soup(context)
    return html
