"""Utilities to support efficient BeautifulSoup usage in postprocessors."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

_SHARED_SOUP_KEY = "__shared_soup"
_SHARED_SOURCE_KEY = "__shared_soup_source"

Declaration = Tuple[str, str]


def _substitute_export_entities(text: str) -> str:
    # The WeChat editor collapses raw U+00A0 runs on paste; the entity survives
    return EntitySubstitution.substitute_xml(text).replace("\xa0", "&nbsp;")


EXPORT_FORMATTER = HTMLFormatter(entity_substitution=_substitute_export_entities)


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """Return the parsed tree for ``html``, reusing the one cached in ``context``.
    Every export step rewrites the same document, so the tree is parsed once
    and handed from step to step. A step that receives HTML other than what
    the previous step serialised gets a fresh parse.
    """
    soup = context.get(_SHARED_SOUP_KEY)
    source = context.get(_SHARED_SOURCE_KEY)
    if soup is None or source != html:
        soup = BeautifulSoup(html, "html.parser")
        context[_SHARED_SOUP_KEY] = soup
        context[_SHARED_SOURCE_KEY] = html
    return soup


def soup_to_html(context: dict, soup: BeautifulSoup | None = None) -> str:
    """Serialise the tree with the export formatter and remember the result."""
    if soup is None:
        soup = context.get(_SHARED_SOUP_KEY)
    html = soup.decode(formatter=EXPORT_FORMATTER) if soup is not None else ""
    context[_SHARED_SOURCE_KEY] = html
    context[_SHARED_SOUP_KEY] = soup
    return html


def clear_shared_soup(context: dict) -> None:
    """Remove any cached soup information from the context."""
    context.pop(_SHARED_SOUP_KEY, None)
    context.pop(_SHARED_SOURCE_KEY, None)


# ---------------------------------------------------------------------------
# Inline style helpers
# ---------------------------------------------------------------------------


def _split_declarations(style: str) -> List[str]:
    """Split on ``;`` outside parentheses and quotes (``url(data:...;base64,...)``)."""
    parts = []
    depth = 0
    quote = None
    current = []

    for char in style:
        if quote:
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == ";" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)

    parts.append("".join(current))
    return parts


def parse_style(style: str | None) -> List[Declaration]:
    """
    Parse an inline ``style`` attribute into ordered (property, value) pairs.

    Property names are lower-cased; custom property names are kept as written.
    Malformed declarations without a colon are dropped.
    """
    declarations = []
    for part in _split_declarations(style or ""):
        if ":" not in part:
            continue
        prop, value = part.split(":", 1)
        prop = prop.strip()
        value = value.strip()
        if not prop or not value:
            continue
        if not prop.startswith("--"):
            prop = prop.lower()
        declarations.append((prop, value))
    return declarations


def serialize_style(declarations: Iterable[Declaration]) -> str:
    return "".join(f"{prop}:{value};" for prop, value in declarations)


def set_style(tag: Tag, declarations: Iterable[Declaration]) -> None:
    """Write declarations back to ``tag``; an empty list removes the attribute."""
    style = serialize_style(declarations)
    if style:
        tag["style"] = style
    elif "style" in tag.attrs:
        del tag["style"]


def update_style(tag: Tag, updates: Iterable[Declaration]) -> None:
    """
    Set properties on ``tag``'s inline style.

    Existing declarations of an updated property are dropped and the new
    value is appended, so it wins over anything earlier in the attribute.
    """
    updates = list(updates)
    updated = {prop for prop, _ in updates}
    declarations = [d for d in parse_style(tag.get("style")) if d[0] not in updated]
    set_style(tag, declarations + updates)


def property_matches(prop: str, families: Iterable[str]) -> bool:
    """True if ``prop`` is one of ``families`` or a longhand of one (``margin-top``)."""
    return any(prop == family or prop.startswith(f"{family}-") for family in families)


def get_root(soup: BeautifulSoup, root_id: str | None) -> Tag | BeautifulSoup:
    """Return the themed root container, or the whole document when it is missing."""
    if root_id:
        root = soup.find(id=root_id)
        if root is not None:
            return root
    return soup
