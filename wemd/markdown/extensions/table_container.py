# wemd/markdown/extensions/table_container.py
"""
markdown-it plugin that wraps every table in a scroll container.

Output:
    <div class="table-container">
        <table>...</table>
    </div>

Themes style ``.table-container`` with ``overflow-x: auto`` so wide tables
scroll horizontally instead of overflowing the article column.
"""

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from markdown_it.token import Token

CONTAINER_CLASS = "table-container"


def _wrap_tables(state) -> None:
    tokens = []
    in_table = False

    for token in state.tokens:
        if token.type == "table_open":
            in_table = True
            tokens.append(Token("container_div_open", "div", 1, attrs={"class": CONTAINER_CLASS}))
            tokens.append(token)
            continue

        if token.type == "table_close" and in_table:
            in_table = False
            tokens.append(token)
            tokens.append(Token("container_div_close", "div", -1))
            continue

        tokens.append(token)

    state.tokens = tokens


def table_container_plugin(md: MarkdownIt) -> None:
    md.core.ruler.push("table_container", _wrap_tables)

    def render_open(self, tokens, idx, options, env):
        class_name = tokens[idx].attrGet("class") or ""
        return f'<div class="{escapeHtml(str(class_name))}">'

    def render_close(self, tokens, idx, options, env):
        return "</div>"

    md.add_render_rule("container_div_open", render_open)
    md.add_render_rule("container_div_close", render_close)
