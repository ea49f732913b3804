# wemd/markdown/postprocessors/data_tool.py
"""
Postprocessor that stamps a provenance attribute on top-level blocks.

The WeChat editor keeps ``data-tool`` on pasted blocks; it marks the article
as produced by a Markdown editor. Existing values are left alone.
"""

from typing import Tuple

from bs4 import Tag

from wemd.conf import get_setting

from .utils import get_root, get_shared_soup, soup_to_html

BLOCK_TAGS = {
    "blockquote",
    "dl",
    "div",
    "figure",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "ol",
    "p",
    "pre",
    "section",
    "table",
    "ul",
}


def data_tool(html: str, context: dict, attribute: Tuple[str, str] = ("data-tool", "mdnice编辑器")) -> str:
    """
    Args:
        html: HTML string to process
        context: Shared rendering context; ``root_id`` names the container
        attribute: (name, value) to add to each top-level block element

    Returns:
        HTML with the attribute on every direct block child of the root
    """
    name, value = attribute
    soup = get_shared_soup(html, context)
    root = get_root(soup, context.get("root_id"))

    for child in root.children:
        if isinstance(child, Tag) and child.name in BLOCK_TAGS and not child.has_attr(name):
            child[name] = value

    return soup_to_html(context, soup)


def data_tool_default(html: str, context: dict) -> str:
    return data_tool(html, context, attribute=tuple(get_setting("WEMD_DATA_TOOL")))
