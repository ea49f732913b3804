from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from wemd.conf import get_setting

from .extensions import (
    emoji_plugin,
    heading_wrapper_plugin,
    implicit_figures_plugin,
    mark_plugin,
    math_plugin,
    multiquote_plugin,
    ruby_plugin,
    sub_plugin,
    sup_plugin,
    table_container_plugin,
    toc_plugin,
)
from .highlight import highlight_code


def get_parser_config(throw_on_error=None):
    """
    Configuration for the markdown-it parser.

    The plugin chain is applied in list order and the order is significant:
    later plugins see the tokens and renderer rules installed by earlier ones.
    The heading wrapper replaces the heading renderers, so it must stay last.

    Task list items are rendered with the label wrapping the text rather than
    a trailing ``<label for=...>``; the latter gets a random id per render.
    """
    if throw_on_error is None:
        throw_on_error = get_setting("WEMD_MATH_THROW_ON_ERROR")

    return {
        # Same rule set as markdown-it's JavaScript default (tables, strikethrough)
        "preset": "js-default",
        "options": {
            "html": True,
            "linkify": True,
            "typographer": True,
            "highlight": highlight_code,
        },
        "plugins": [
            (math_plugin, {"throw_on_error": throw_on_error}),
            (table_container_plugin, {}),
            (footnote_plugin, {}),
            (
                toc_plugin,
                {
                    "marker": get_setting("WEMD_TOC_MARKER"),
                    "levels": tuple(get_setting("WEMD_TOC_LEVELS")),
                },
            ),
            (ruby_plugin, {}),
            (implicit_figures_plugin, {"figcaption": True}),
            (deflist_plugin, {}),
            (multiquote_plugin, {}),
            (mark_plugin, {}),
            (sub_plugin, {}),
            (sup_plugin, {}),
            (emoji_plugin, {}),
            (tasklists_plugin, {"enabled": True, "label": True}),
            (heading_wrapper_plugin, {}),
        ],
    }
