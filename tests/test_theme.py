import re

import css_inline
import pytest

from wemd.markdown import render_markdown
from wemd.theme import ThemeNotFoundError, apply_theme, inline_theme_css, list_themes, load_theme_css
from wemd.theme.registry import CSS_DIR

CUSTOM_PROPERTY = re.compile(r"--[A-Za-z-]+:")


def test_preview_only_wraps():
    assert apply_theme("<p>a</p>") == '<div id="wemd"><p>a</p></div>'


def test_preview_ignores_theme_css():
    assert apply_theme("<p>a</p>", theme_css="p { color: red; }") == '<div id="wemd"><p>a</p></div>'


def test_export_resolves_and_removes_css_variables():
    html = apply_theme("<p>a</p>", export_mode=True, theme_css="#wemd p { --x: red; color: var(--x); }")

    assert not CUSTOM_PROPERTY.search(html)
    assert "var(" not in html
    assert "color:red;" in html


def test_export_without_theme_still_runs_rewrites():
    html = apply_theme("<p>a</p>", export_mode=True)

    assert html == '<div id="wemd" style="background:transparent;"><p data-tool="mdnice编辑器">a</p></div>'


def test_export_drops_style_elements():
    html = apply_theme("<p>a</p>", export_mode=True, theme_css="p { margin: 0; }")

    assert "<style" not in html
    assert 'style="margin:0;"' in html


def test_inlining_failure_is_logged_and_pipeline_continues(monkeypatch, caplog):
    class BrokenInliner:
        def __init__(self, **kwargs):
            pass

        def inline(self, html):
            raise ValueError("bad css")

    monkeypatch.setattr(css_inline, "CSSInliner", BrokenInliner)

    html = apply_theme("<p>a</p>", export_mode=True, theme_css="p { color: red; }")

    assert html == '<div id="wemd" style="background:transparent;"><p data-tool="mdnice编辑器">a</p></div>'
    assert "CSS inlining failed" in caplog.text


def test_inline_theme_css_returns_body_contents():
    html = inline_theme_css('<div id="wemd"><p>a</p></div>', "#wemd p { color: red; }")

    assert html.startswith('<div id="wemd">')
    assert "<body" not in html
    assert "red" in html


def test_list_themes():
    themes = list_themes()

    assert "default" in themes
    assert themes == sorted(themes)


def test_theme_is_composed_base_first_code_last():
    css = load_theme_css("default")
    base = (CSS_DIR / "basic.css").read_text(encoding="utf-8")
    code = (CSS_DIR / "code-github.css").read_text(encoding="utf-8")

    assert css.startswith(base)
    assert css.endswith(code)
    assert "#35b378" in css


def test_unknown_theme_raises():
    with pytest.raises(ThemeNotFoundError) as excinfo:
        load_theme_css("no-such-theme")

    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.name == "no-such-theme"


@pytest.mark.parametrize("theme", list_themes())
def test_packaged_themes_export_cleanly(theme):
    markdown = (
        "## Heading\n\n"
        "A [link](https://example.com) and `code`.\n\n"
        "```python\ndef f():\n\treturn 1\n```\n\n"
        "- [x] done\n\n"
        "> quote\n"
    )
    html = apply_theme(render_markdown(markdown), export_mode=True, theme_css=load_theme_css(theme))

    assert html.startswith('<div id="wemd" style="')
    assert "background:transparent;" in html
    assert not CUSTOM_PROPERTY.search(html)
    assert "var(" not in html
    assert "<style" not in html
    assert "<input" not in html
    assert "☑" in html
    assert "text-decoration-style:solid;" in html
    assert "&nbsp;&nbsp;&nbsp;&nbsp;" in html
    assert 'data-tool="mdnice编辑器"' in html


def test_default_theme_link_colour_moves_to_span():
    html = apply_theme(
        render_markdown("[link](https://example.com)"),
        export_mode=True,
        theme_css=load_theme_css("default"),
    )

    assert re.search(r'<span style="text-decoration:underline;text-decoration-style:solid;color:\s*#35b378;', html)
