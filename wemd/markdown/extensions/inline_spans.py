# wemd/markdown/extensions/inline_spans.py
"""
markdown-it plugins for inline ``<mark>``, ``<sub>`` and ``<sup>``.

    ==highlighted==   -> <mark>highlighted</mark>
    H~2~O             -> H<sub>2</sub>O
    29^th^            -> 29<sup>th</sup>

``mark`` content is parsed as inline Markdown. ``sub``/``sup`` content is
plain text and may not contain unescaped whitespace (``a ~ b ~ c`` is not a
subscript).
"""

import re

from markdown_it import MarkdownIt

_UNESCAPED_SPACE = re.compile(r"(^|[^\\])(\\\\)*\s")
_UNESCAPE = re.compile(r"\\([ \\!\"#$%&'()*+,./:;<=>?@\[\]^_`{|}~-])")


def _make_script_rule(marker: str, tag: str):
    """Rule for single-character wrapped text such as ``~sub~`` or ``^sup^``."""

    def rule(state, silent):
        start = state.pos
        maximum = state.posMax

        if state.src[start] != marker:
            return False
        # Don't run any pairs in validation mode
        if silent:
            return False
        if start + 2 >= maximum:
            return False

        state.pos = start + 1
        found = False
        while state.pos < maximum:
            if state.src[state.pos] == marker:
                found = True
                break
            state.md.inline.skipToken(state)

        if not found or start + 1 == state.pos:
            state.pos = start
            return False

        content = state.src[start + 1:state.pos]
        if _UNESCAPED_SPACE.search(content):
            state.pos = start
            return False

        end = state.pos
        token = state.push(f"{tag}_open", tag, 1)
        token.markup = marker
        token = state.push("text", "", 0)
        token.content = _UNESCAPE.sub(r"\1", content)
        token = state.push(f"{tag}_close", tag, -1)
        token.markup = marker

        state.pos = end + 1
        return True

    return rule


def _mark_rule(state, silent):
    start = state.pos
    maximum = state.posMax

    if state.src[start:start + 2] != "==":
        return False
    if silent:
        return False

    end = state.src.find("==", start + 2, maximum)
    if end == -1:
        return False

    content = state.src[start + 2:end]
    if not content.strip() or "\n" in content:
        return False

    state.push("mark_open", "mark", 1).markup = "=="
    state.pos = start + 2
    state.posMax = end
    state.md.inline.tokenize(state)
    state.push("mark_close", "mark", -1).markup = "=="

    state.pos = end + 2
    state.posMax = maximum
    return True


def mark_plugin(md: MarkdownIt) -> None:
    md.inline.ruler.before("emphasis", "mark", _mark_rule)


def sub_plugin(md: MarkdownIt) -> None:
    md.inline.ruler.after("emphasis", "sub", _make_script_rule("~", "sub"))


def sup_plugin(md: MarkdownIt) -> None:
    md.inline.ruler.after("emphasis", "sup", _make_script_rule("^", "sup"))
