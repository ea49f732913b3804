# wemd/markdown/extensions/ruby.py
"""
markdown-it plugin for ruby annotations.

    {漢字|kan.ji}   -> <ruby>漢<rt>kan</rt>字<rt>ji</rt></ruby>
    {北京|Beijing}  -> <ruby>北京<rt>Beijing</rt></ruby>

When the annotation splits on ``.`` into exactly as many parts as the base
has characters, each character is annotated on its own; otherwise the whole
annotation sits over the whole base.
"""

from markdown_it import MarkdownIt


def _ruby_rule(state, silent):
    start = state.pos
    maximum = state.posMax

    if state.src[start] != "{":
        return False

    end = state.src.find("}", start + 1, maximum)
    if end == -1:
        return False

    content = state.src[start + 1:end]
    if "|" not in content or "\n" in content:
        return False

    base, annotation = content.split("|", 1)
    if not base or not annotation:
        return False

    if not silent:
        parts = annotation.split(".")
        if len(parts) > 1 and len(parts) == len(base):
            pairs = list(zip(base, parts))
        else:
            pairs = [(base, annotation)]

        state.push("ruby_open", "ruby", 1).markup = "{"
        for text, rt in pairs:
            state.push("text", "", 0).content = text
            state.push("rt_open", "rt", 1)
            state.push("text", "", 0).content = rt
            state.push("rt_close", "rt", -1)
        state.push("ruby_close", "ruby", -1).markup = "}"

    state.pos = end + 1
    return True


def ruby_plugin(md: MarkdownIt) -> None:
    md.inline.ruler.before("text", "ruby", _ruby_rule)
