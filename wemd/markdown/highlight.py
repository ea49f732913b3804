# wemd/markdown/highlight.py
"""
Fenced code block highlighting.

Code is tokenized with Pygments, but the emitted markup uses highlight.js
class names (``hljs-keyword``, ``hljs-string`` ...) because the bundled and
user-written themes are highlight.js stylesheets.

- Empty or unknown languages are highlighted as the fallback language
- The diagram language (``mermaid``) is passed through untouched inside
  ``<pre class="mermaid">`` for client-side rendering
"""

import logging
from html import escape

from pygments.lexers import get_lexer_by_name
from pygments.token import Comment, Keyword, Literal, Name, Number, Operator, Punctuation, String
from pygments.util import ClassNotFound

from wemd.conf import get_setting

logger = logging.getLogger(__name__)

# Most specific token types first; the first ancestor match wins
HLJS_CLASSES = [
    (Comment.Preproc, "hljs-meta"),
    (Comment, "hljs-comment"),
    (Keyword.Constant, "hljs-literal"),
    (Keyword.Type, "hljs-type"),
    (Keyword, "hljs-keyword"),
    (String.Doc, "hljs-comment"),
    (String.Regex, "hljs-regexp"),
    (String.Interpol, "hljs-subst"),
    (String.Escape, "hljs-char escape_"),
    (String, "hljs-string"),
    (Number, "hljs-number"),
    (Literal, "hljs-literal"),
    (Name.Builtin.Pseudo, "hljs-variable language_"),
    (Name.Builtin, "hljs-built_in"),
    (Name.Function, "hljs-title function_"),
    (Name.Class, "hljs-title class_"),
    (Name.Decorator, "hljs-meta"),
    (Name.Tag, "hljs-name"),
    (Name.Attribute, "hljs-attr"),
    (Name.Variable, "hljs-variable"),
    (Name.Constant, "hljs-variable constant_"),
    (Name.Exception, "hljs-title class_"),
    (Name.Namespace, "hljs-title class_"),
    (Operator.Word, "hljs-keyword"),
    (Operator, "hljs-operator"),
    (Punctuation, "hljs-punctuation"),
]


def _hljs_class(token_type):
    for ancestor, css_class in HLJS_CLASSES:
        if token_type in ancestor:
            return css_class
    return None


def _get_lexer(lang: str):
    fallback = get_setting("WEMD_HIGHLIGHT_FALLBACK_LANGUAGE")
    try:
        return get_lexer_by_name(lang or fallback, stripnl=False, ensurenl=False)
    except ClassNotFound:
        return get_lexer_by_name(fallback, stripnl=False, ensurenl=False)


def highlight_to_hljs(code: str, lang: str) -> str:
    """
    Return ``code`` as escaped HTML with hljs-classed spans.

    Adjacent tokens sharing a class are merged into one span.
    """
    lexer = _get_lexer(lang)
    parts = []
    current_class = None
    buffer = []

    def flush():
        if not buffer:
            return
        text = escape("".join(buffer), quote=False)
        if current_class:
            parts.append(f'<span class="{current_class}">{text}</span>')
        else:
            parts.append(text)
        buffer.clear()

    for token_type, value in lexer.get_tokens(code):
        css_class = _hljs_class(token_type)
        if css_class != current_class:
            flush()
            current_class = css_class
        buffer.append(value)
    flush()

    return "".join(parts)


def highlight_code(code: str, lang: str, attrs: str = "") -> str:
    """
    markdown-it ``highlight`` option.

    Returns a complete ``<pre>`` block; markdown-it uses it verbatim when it
    starts with ``<pre``.
    """
    lang = (lang or "").strip().lower()

    if lang == get_setting("WEMD_DIAGRAM_LANGUAGE"):
        return f'<pre class="{lang}">\n{escape(code, quote=False)}\n</pre>\n'

    try:
        formatted = highlight_to_hljs(code, lang)
    except Exception as e:
        # Unexpected lexer failure: degrade to plain escaped code
        logger.warning(f"Highlighting failed for language {lang!r}: {e}")
        formatted = escape(code, quote=False)

    return f'<pre class="custom"><code class="hljs">{formatted}</code></pre>'
