import pytest
from django.template import Context, Template

from wemd.theme import ThemeNotFoundError


def render(template, **context):
    return Template("{% load markdown_tags %}" + template).render(Context(context))


def test_markdown_filter_renders_preview():
    html = render("{{ text|markdown }}", text="**hi**")

    assert html == '<div id="wemd"><p><strong>hi</strong></p>\n</div>'


def test_wemd_export_filter_uses_default_theme():
    html = render("{{ text|wemd_export }}", text="**hi**")

    assert html.startswith('<div id="wemd" style="')
    assert "background:transparent;" in html
    assert 'data-tool="mdnice编辑器"' in html
    assert "var(" not in html


def test_wemd_export_filter_takes_theme_name():
    html = render('{{ text|wemd_export:"academic-paper" }}', text="para")

    assert "Times New Roman" in html


def test_wemd_export_filter_unknown_theme():
    with pytest.raises(ThemeNotFoundError):
        render('{{ text|wemd_export:"nope" }}', text="para")


def test_theme_css_tag():
    css = render('{% wemd_theme_css "default" %}')

    assert "#wemd" in css
    assert ".hljs-keyword" in css
