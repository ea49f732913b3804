# wemd/markdown/extensions/toc.py
"""
markdown-it plugin rendering a table of contents at a marker paragraph.

A paragraph starting with the marker (``[toc]`` by default) is replaced by a
nested list of the document's headings:

    <div class="table-of-contents">
        <ul>
            <li><a href="">Section</a>
                <ul><li><a href="">Subsection</a></li></ul>
            </li>
        </ul>
    </div>

Link targets are left empty: the WeChat editor drops in-page anchors, so the
list is a visual outline only. Headings are collected into the render ``env``
so nothing is shared between renders.
"""

import re
from typing import List, Sequence, Tuple

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

ENV_KEY = "toc_headings"


def _collect_headings(state) -> None:
    headings = []
    tokens = state.tokens
    for idx, token in enumerate(tokens):
        if token.type != "heading_open" or idx + 1 >= len(tokens):
            continue
        inline = tokens[idx + 1]
        text = "".join(
            child.content
            for child in (inline.children or [])
            if child.type in ("text", "code_inline", "emoji")
        )
        headings.append((int(token.tag[1:]), text))
    state.env[ENV_KEY] = headings


def _render_toc_list(headings: List[Tuple[int, str]], levels: Sequence[int]) -> str:
    wanted = [(level, text) for level, text in headings if level in levels]
    if not wanted:
        return ""

    parts = []
    stack = []  # open list levels
    for level, text in wanted:
        if not stack or level > stack[-1]:
            parts.append("<ul>")
            stack.append(level)
        else:
            while len(stack) > 1 and level < stack[-1]:
                parts.append("</li></ul>")
                stack.pop()
            parts.append("</li>")
        parts.append(f'<li><a href="">{escapeHtml(text)}</a>')

    parts.append("</li></ul>" * len(stack))
    return "".join(parts)


def toc_plugin(md: MarkdownIt, marker: str = r"^\[toc\]", levels: Sequence[int] = (2, 3)) -> None:
    marker_pattern = re.compile(marker, re.IGNORECASE | re.MULTILINE)

    def toc_rule(state, silent):
        if state.src[state.pos] != "[":
            return False
        if silent:
            return False

        match = marker_pattern.match(state.src[state.pos:state.posMax])
        if not match:
            return False

        state.push("toc_open", "div", 1)
        state.push("toc_body", "", 0)
        state.push("toc_close", "div", -1)

        state.pos += len(match.group(0))
        return True

    def render_toc_open(self, tokens, idx, options, env):
        return '<div class="table-of-contents">'

    def render_toc_body(self, tokens, idx, options, env):
        return _render_toc_list(env.get(ENV_KEY, []), levels)

    def render_toc_close(self, tokens, idx, options, env):
        return "</div>"

    md.inline.ruler.after("emphasis", "toc", toc_rule)
    md.core.ruler.push("toc_headings", _collect_headings)
    md.add_render_rule("toc_open", render_toc_open)
    md.add_render_rule("toc_body", render_toc_body)
    md.add_render_rule("toc_close", render_toc_close)
