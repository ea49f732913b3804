# wemd/markdown/extensions/heading_wrapper.py
"""
markdown-it plugin that wraps heading content in decoration spans.

    ## Title

renders as

    <h2><span class="prefix"></span><span class="content">Title</span><span class="suffix"></span></h2>

Themes put counters or icons on ``.prefix`` / ``.suffix`` through CSS
``content`` without touching the Markdown. Register it last: it replaces the
heading renderers, and nothing after it should see the decorated structure.
"""

from markdown_it import MarkdownIt


def heading_wrapper_plugin(md: MarkdownIt) -> None:
    def render_heading_open(self, tokens, idx, options, env):
        return f'<{tokens[idx].tag}><span class="prefix"></span><span class="content">'

    def render_heading_close(self, tokens, idx, options, env):
        return f'</span><span class="suffix"></span></{tokens[idx].tag}>\n'

    md.add_render_rule("heading_open", render_heading_open)
    md.add_render_rule("heading_close", render_heading_close)
