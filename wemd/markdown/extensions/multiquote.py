# wemd/markdown/extensions/multiquote.py
"""
markdown-it plugin that tags nested blockquote groups with their depth.

The outermost blockquote of each group receives ``multiquote-N`` where N is
the deepest nesting reached inside it:

    > a
    >> b
    >>> c

renders as ``<blockquote class="multiquote-3">`` on the outer quote, so themes
can style each quote level without extra wrapper elements. Inner
blockquotes are left untouched.
"""

from markdown_it import MarkdownIt


def _tag_blockquote_groups(state) -> None:
    depth = 0
    deepest = 0
    outer_token = None

    for token in state.tokens:
        if token.type == "blockquote_open":
            if depth == 0:
                outer_token = token
                deepest = 0
            depth += 1
            deepest = max(deepest, depth)
        elif token.type == "blockquote_close":
            depth -= 1
            if depth == 0 and outer_token is not None:
                outer_token.attrSet("class", f"multiquote-{deepest}")
                outer_token = None


def multiquote_plugin(md: MarkdownIt) -> None:
    md.core.ruler.push("blockquote_class", _tag_blockquote_groups)
