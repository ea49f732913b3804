# wemd/markdown/postprocessors/css_variables.py
"""
Postprocessor that resolves CSS custom properties in inline styles.

This postprocessor:
- Collects ``--name: value`` definitions from the theme CSS
- Falls back to configured defaults for well-known theme variables
- Replaces ``var(--name)`` / ``var(--name, fallback)`` in every inline style
- Drops a declaration whose reference cannot be resolved and has no fallback
- Deletes every ``--name: value`` declaration afterwards

Inline styles are the only styles that survive a paste into the WeChat editor,
and the editor does not understand custom properties.
"""

import logging
import re
from typing import Dict, Optional

from wemd.conf import get_setting

from .utils import get_shared_soup, parse_style, set_style, soup_to_html

logger = logging.getLogger(__name__)

DEFINITION_PATTERN = re.compile(r"(--[\w-]+)\s*:\s*([^;}]+)")
COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)

MAX_RESOLVE_DEPTH = 10


class UnresolvedVariable(Exception):
    """A ``var()`` reference with no definition and no fallback."""


def collect_css_variables(theme_css: str, defaults: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Build the variable table for a theme.

    Theme definitions win over defaults; later definitions in the stylesheet
    win over earlier ones.
    """
    variables = dict(defaults or {})
    for name, value in DEFINITION_PATTERN.findall(COMMENT_PATTERN.sub("", theme_css or "")):
        value = value.strip()
        if value:
            variables[name] = value
    return variables


def _find_closing_paren(value: str, start: int) -> int:
    depth = 0
    for index in range(start, len(value)):
        if value[index] == "(":
            depth += 1
        elif value[index] == ")":
            depth -= 1
            if depth == 0:
                return index
    return -1


def resolve_value(value: str, variables: Dict[str, str], depth: int = 0) -> str:
    """
    Substitute every ``var()`` reference in ``value``.

    Raises:
        UnresolvedVariable: if a reference is unknown and has no fallback, or
            definitions refer to each other in a cycle
    """
    if depth > MAX_RESOLVE_DEPTH:
        raise UnresolvedVariable(value)

    result = []
    position = 0
    while True:
        start = value.find("var(", position)
        if start == -1:
            result.append(value[position:])
            break

        end = _find_closing_paren(value, start + 3)
        if end == -1:
            # Unbalanced; keep the remainder as written
            result.append(value[position:])
            break

        result.append(value[position:start])
        inner = value[start + 4 : end]
        name, _, fallback = inner.partition(",")
        name = name.strip()

        if name in variables:
            replacement = resolve_value(variables[name], variables, depth + 1)
        elif fallback.strip():
            replacement = resolve_value(fallback.strip(), variables, depth + 1)
        else:
            raise UnresolvedVariable(name)

        result.append(replacement)
        position = end + 1

    return "".join(result)


def css_variables(html: str, context: dict, defaults: Optional[Dict[str, str]] = None) -> str:
    """
    Resolve CSS custom properties against the theme in ``context["theme_css"]``.

    Args:
        html: HTML string to process
        context: Shared rendering context; ``theme_css`` holds the theme text
        defaults: Values for variables the theme does not define

    Returns:
        HTML with no ``var()`` references and no custom property declarations
    """
    variables = collect_css_variables(context.get("theme_css", ""), defaults)
    soup = get_shared_soup(html, context)
    dropped = 0

    for tag in soup.find_all(style=True):
        declarations = []
        for prop, value in parse_style(tag["style"]):
            if prop.startswith("--"):
                continue
            if "var(" in value:
                try:
                    value = resolve_value(value, variables)
                except UnresolvedVariable as e:
                    dropped += 1
                    logger.debug(f"Dropping '{prop}' with unresolved variable {e}")
                    continue
            declarations.append((prop, value))
        set_style(tag, declarations)

    if dropped:
        logger.info(f"Dropped {dropped} declaration(s) with unresolved CSS variables")

    return soup_to_html(context, soup)


def css_variables_default(html: str, context: dict) -> str:
    return css_variables(html, context, defaults=get_setting("WEMD_CSS_VARIABLE_DEFAULTS"))
