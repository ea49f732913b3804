# wemd/markdown/postprocessors/code_overflow.py
"""
Postprocessor that hardens code blocks for the mobile article view.

This postprocessor:
- Makes ``<pre>`` scroll horizontally with momentum scrolling
- Forces ``white-space:pre`` on ``<code>`` inside ``<pre>`` (``pre-wrap``
  from themes wraps long lines on phones)
- Resets text alignment and letter/word spacing that article themes apply
  to body text
"""

from .utils import get_shared_soup, soup_to_html, update_style

PRE_DECLARATIONS = [
    ("overflow-x", "auto"),
    ("-webkit-overflow-scrolling", "touch"),
]

CODE_DECLARATIONS = [
    ("white-space", "pre"),
    ("text-align", "left"),
    ("letter-spacing", "0"),
    ("word-spacing", "0"),
]


def code_overflow(html: str, context: dict) -> str:
    soup = get_shared_soup(html, context)

    for pre in soup.find_all("pre"):
        update_style(pre, PRE_DECLARATIONS)
        for code in pre.find_all("code"):
            update_style(code, CODE_DECLARATIONS)

    return soup_to_html(context, soup)


def code_overflow_default(html: str, context: dict) -> str:
    return code_overflow(html, context)
