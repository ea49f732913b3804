import emoji
import pytest

from wemd.markdown import create_parser, render_markdown
from wemd.markdown import renderer


def test_render_is_deterministic():
    text = "# Title\n\n- [x] done\n- [ ] todo\n\nText[^1] with ==mark==\n\n[^1]: note\n"
    assert render_markdown(text) == render_markdown(text)


def test_create_parser_returns_fresh_instances():
    assert create_parser() is not create_parser()


def test_heading_is_wrapped_in_decoration_spans():
    html = render_markdown("## Title")

    assert html == (
        '<h2><span class="prefix"></span><span class="content">Title</span>'
        '<span class="suffix"></span></h2>\n'
    )


def test_nested_blockquotes_tag_outermost_with_depth():
    html = render_markdown("> a\n>> b\n>>> c")

    assert html.startswith('<blockquote class="multiquote-3">')
    assert html.count("multiquote-") == 1


def test_single_blockquote_gets_depth_one():
    assert render_markdown("> quote").startswith('<blockquote class="multiquote-1">')


def test_table_is_wrapped_in_container():
    html = render_markdown("| a | b |\n| - | - |\n| 1 | 2 |")

    assert '<div class="table-container"><table>' in html
    assert "</table>\n</div>" in html


def test_toc_lists_second_and_third_level_headings():
    html = render_markdown("[toc]\n\n# Top\n\n## One\n\n### Two\n\n## Three\n")

    assert (
        '<div class="table-of-contents"><ul><li><a href="">One</a>'
        '<ul><li><a href="">Two</a></li></ul></li>'
        '<li><a href="">Three</a></li></ul></div>'
    ) in html
    assert '<a href="">Top</a>' not in html


def test_ruby_splits_annotation_per_character():
    html = render_markdown("{漢字|kan.ji}")

    assert "<ruby>漢<rt>kan</rt>字<rt>ji</rt></ruby>" in html


def test_ruby_keeps_whole_annotation_when_counts_differ():
    html = render_markdown("{北京|Beijing}")

    assert "<ruby>北京<rt>Beijing</rt></ruby>" in html


def test_stand_alone_image_becomes_figure():
    html = render_markdown("![A cat](cat.png)")

    assert '<figure><img src="cat.png" alt="A cat"><figcaption>A cat</figcaption></figure>' in html


def test_image_inside_text_is_not_a_figure():
    html = render_markdown("Look ![A cat](cat.png) here")

    assert "<figure>" not in html


@pytest.mark.parametrize(
    "source, expected",
    [
        ("==hi==", "<mark>hi</mark>"),
        ("H~2~O", "H<sub>2</sub>O"),
        ("29^th^", "29<sup>th</sup>"),
        ("==**bold** mark==", "<mark><strong>bold</strong> mark</mark>"),
    ],
)
def test_inline_spans(source, expected):
    assert expected in render_markdown(source)


def test_sub_rejects_unescaped_whitespace():
    assert "<sub>" not in render_markdown("a ~ b ~ c")


def test_emoji_shortcodes():
    html = render_markdown(":smile: and :not_an_emoji_code:")

    assert emoji.emojize(":smile:", language="alias") in html
    assert ":not_an_emoji_code:" in html
    assert ":smile:" not in html


def test_task_list_checkboxes():
    html = render_markdown("- [x] done\n- [ ] todo")

    assert html.count('type="checkbox"') == 2
    assert html.count('checked="checked"') == 1
    assert "<label>" in html


def test_footnotes_render():
    html = render_markdown("Text[^1]\n\n[^1]: Note")

    assert 'class="footnote-ref"' in html
    assert 'class="footnote-item"' in html


def test_definition_list():
    html = render_markdown("Term\n: Definition")

    assert "<dl>" in html
    assert "<dt>Term</dt>" in html


def test_bare_urls_are_linked():
    assert '<a href="https://example.com">' in render_markdown("see https://example.com")


def test_raw_html_passes_through():
    assert '<span class="footnote-word">term</span>' in render_markdown('<span class="footnote-word">term</span>')


def test_parse_failure_falls_back_to_escaped_source(monkeypatch):
    class BrokenParser:
        def render(self, text):
            raise RuntimeError("boom")

    monkeypatch.setattr(renderer, "create_parser", lambda throw_on_error=None: BrokenParser())

    assert renderer.parse_markdown("<b>x</b>") == "<pre>&lt;b&gt;x&lt;/b&gt;</pre>\n"
