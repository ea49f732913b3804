# wemd/markdown/extensions/math.py
"""
markdown-it plugin for ``$inline$`` and ``$$block$$`` math.

``$`` is not a Markdown delimiter, so both forms are scanned by dedicated
rules instead of the emphasis delimiter machinery:

- An opening ``$`` cannot be followed by a space or tab
- A closing ``$`` cannot be preceded by a space or tab, nor followed by a digit
  (so ``$5 and $6`` stays text)
- A ``$`` preceded by an odd number of backslashes does not close
- ``$$`` with nothing between, seen by the inline rule, is literal text
- Block math starts with ``$$`` at the beginning of a line and ends on the
  first line whose trimmed text ends with ``$$`` (single line ``$$x$$`` works)

TeX is converted to MathML with Pandoc. When conversion fails the escaped TeX
source is emitted inside the same wrapper, unless ``throw_on_error`` is set.

Output:
    <span class="inline-equation"><math>...</math></span>
    <div class="block-equation"><math display="block">...</math></div>
"""

import logging
import re
from functools import lru_cache

import pypandoc
from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

logger = logging.getLogger(__name__)

_MATH_ELEMENT = re.compile(r"<math\b.*?</math>", re.DOTALL)


class MathRenderError(Exception):
    """Raised for TeX that cannot be converted when strict mode is on."""


@lru_cache(maxsize=512)
def tex_to_mathml(tex: str, display: bool) -> str:
    """
    Convert a TeX expression to a MathML ``<math>`` element using Pandoc.

    Raises:
        MathRenderError: Pandoc is unavailable or produced no MathML
    """
    source = f"\\[{tex}\\]" if display else f"\\({tex}\\)"
    try:
        html = pypandoc.convert_text(source, "html", format="latex", extra_args=["--mathml"])
    except (OSError, RuntimeError) as e:
        raise MathRenderError(f"Pandoc could not convert {tex!r}: {e}") from e

    match = _MATH_ELEMENT.search(html)
    if not match:
        raise MathRenderError(f"No MathML produced for {tex!r}")
    return match.group(0)


def _is_valid_delim(state, pos):
    """Whether the ``$`` at ``pos`` may open and/or close an inline equation."""
    src = state.src
    prev_char = src[pos - 1] if pos > 0 else ""
    next_char = src[pos + 1] if pos + 1 < len(src) and pos + 1 <= state.posMax else ""

    can_open = True
    can_close = True

    if prev_char in (" ", "\t") or (next_char and next_char in "0123456789"):
        can_close = False
    if next_char in (" ", "\t"):
        can_open = False

    return can_open, can_close


def math_inline(state, silent):
    if state.src[state.pos] != "$":
        return False

    can_open, _ = _is_valid_delim(state, state.pos)
    if not can_open:
        if not silent:
            state.pending += "$"
        state.pos += 1
        return True

    start = state.pos + 1
    match = start

    # Find a closing $ that is not escaped by an odd number of backslashes
    while True:
        match = state.src.find("$", match)
        if match == -1:
            break
        pos = match - 1
        while pos >= 0 and state.src[pos] == "\\":
            pos -= 1
        if (match - pos) % 2 == 1:
            break
        match += 1

    if match == -1:
        if not silent:
            state.pending += "$"
        state.pos = start
        return True

    if match == start:
        if not silent:
            state.pending += "$$"
        state.pos = start + 1
        return True

    _, can_close = _is_valid_delim(state, match)
    if not can_close:
        if not silent:
            state.pending += "$"
        state.pos = start
        return True

    if not silent:
        token = state.push("math_inline", "math", 0)
        token.markup = "$"
        token.content = state.src[start:match]

    state.pos = match + 1
    return True


def math_block(state, start_line, end_line, silent):
    pos = state.bMarks[start_line] + state.tShift[start_line]
    maximum = state.eMarks[start_line]

    if pos + 2 > maximum:
        return False
    if state.src[pos:pos + 2] != "$$":
        return False

    pos += 2
    first_line = state.src[pos:maximum]

    if silent:
        return True

    found = False
    if first_line.strip()[-2:] == "$$":
        # Single line expression
        first_line = first_line.strip()[:-2]
        found = True

    next_line = start_line
    last_line = ""

    while not found:
        next_line += 1
        if next_line >= end_line:
            break

        pos = state.bMarks[next_line] + state.tShift[next_line]
        maximum = state.eMarks[next_line]

        if pos < maximum and state.tShift[next_line] < state.blkIndent:
            # Non-empty line with negative indent ends the block
            break

        if state.src[pos:maximum].strip()[-2:] == "$$":
            last_pos = state.src[:maximum].rfind("$$")
            last_line = state.src[pos:last_pos]
            found = True

    state.line = next_line + 1

    token = state.push("math_block", "math", 0)
    token.block = True
    token.content = (
        (first_line + "\n" if first_line and first_line.strip() else "")
        + state.getLines(start_line + 1, next_line, state.tShift[start_line], True)
        + (last_line if last_line and last_line.strip() else "")
    )
    token.map = [start_line, state.line]
    token.markup = "$$"
    return True


def math_plugin(md: MarkdownIt, throw_on_error: bool = False) -> None:
    """Register the math rules and their renderers on ``md``."""

    def render_tex(tex, display):
        try:
            return tex_to_mathml(tex, display)
        except MathRenderError:
            if throw_on_error:
                raise
            logger.warning("Falling back to literal TeX for %r", tex)
            return escapeHtml(tex)

    def render_math_inline(self, tokens, idx, options, env):
        return f'<span class="inline-equation">{render_tex(tokens[idx].content, False)}</span>'

    def render_math_block(self, tokens, idx, options, env):
        return f'<div class="block-equation">{render_tex(tokens[idx].content, True)}</div>\n'

    md.inline.ruler.after("escape", "math_inline", math_inline)
    md.block.ruler.after(
        "blockquote",
        "math_block",
        math_block,
        {"alt": ["paragraph", "reference", "blockquote", "list"]},
    )
    md.add_render_rule("math_inline", render_math_inline)
    md.add_render_rule("math_block", render_math_block)
