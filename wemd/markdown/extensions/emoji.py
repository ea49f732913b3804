# wemd/markdown/extensions/emoji.py
"""
markdown-it plugin that turns ``:shortcode:`` into emoji characters.

Shortcodes are resolved with the ``emoji`` package (GitHub style aliases,
e.g. ``:smile:``, ``:+1:``). Unknown shortcodes are left as typed.
"""

import re

import emoji
from markdown_it import MarkdownIt

_SHORTCODE = re.compile(r":([a-zA-Z0-9_+\-]+):")


def _emoji_rule(state, silent):
    if state.src[state.pos] != ":":
        return False

    match = _SHORTCODE.match(state.src, state.pos, state.posMax)
    if not match:
        return False

    shortcode = match.group(0)
    char = emoji.emojize(shortcode, language="alias")
    if char == shortcode:
        return False

    if not silent:
        token = state.push("emoji", "", 0)
        token.markup = match.group(1)
        token.content = char

    state.pos = match.end()
    return True


def emoji_plugin(md: MarkdownIt) -> None:
    def render_emoji(self, tokens, idx, options, env):
        return tokens[idx].content

    md.inline.ruler.after("emphasis", "emoji", _emoji_rule)
    md.add_render_rule("emoji", render_emoji)
