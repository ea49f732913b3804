import re

from wemd.markdown import insert_footnote, next_footnote_number, render_markdown, sync_footnotes

REFERENCE = re.compile(r"\[\^(\d+)\](?!:)")
DEFINITION = re.compile(r"\[\^(\d+)\]:")


def test_orphaned_reference_is_removed():
    result = sync_footnotes("A[^1] B[^2]\n\n[^1]: one\n")

    assert result.changed is True
    assert result.text == "A[^1] B\n\n[^1]: one\n"


def test_unused_definition_is_removed_with_its_line():
    result = sync_footnotes("Text[^1]\n\n[^1]: one\n[^2]: two\n")

    assert result.changed is True
    assert result.text == "Text[^1]\n\n[^1]: one\n"


def test_matching_footnotes_are_not_renumbered():
    text = "A[^3] and B[^7]\n\n[^3]: three\n[^7]: seven"
    result = sync_footnotes(text)

    assert result.changed is False
    assert result.text == text


def test_removal_cascades_until_stable():
    # Definition 1 is the only place referencing 2
    result = sync_footnotes("[^1]: see[^2]\n[^2]: two\nBody")

    assert result.text == "Body"
    assert sync_footnotes(result.text).changed is False


def test_unused_definition_containing_orphaned_reference():
    text = "Body[^1]\n\n[^1]: one\n[^3]: see [^2] here\nTail paragraph"
    result = sync_footnotes(text)

    assert result.text == "Body[^1]\n\n[^1]: one\nTail paragraph"


def test_sync_is_idempotent():
    samples = [
        "",
        "no footnotes here",
        "A[^1][^2][^9]\n\n[^2]: two\n[^4]: four\n",
        "[^5]: lonely",
        "x[^1] y[^1]\n\n[^1]: shared",
    ]
    for sample in samples:
        once = sync_footnotes(sample).text
        assert sync_footnotes(once).changed is False


def test_references_and_definitions_match_after_sync():
    text = sync_footnotes("a[^1] b[^2] c[^3]\n\n[^1]: x\n[^3]: z\n[^8]: q\n").text

    references = set(REFERENCE.findall(text))
    definitions = set(DEFINITION.findall(text))
    assert references == definitions == {"1", "3"}


def test_next_footnote_number():
    assert next_footnote_number("plain") == 1
    assert next_footnote_number("a[^2] b[^7]\n\n[^2]: x\n[^7]: y") == 8


def test_insert_footnote_uses_selection_as_body():
    insertion = insert_footnote("Hello world", 0, 5)

    assert insertion.number == 1
    assert insertion.text == "Hello[^1] world\n\n[^1]: Hello"
    start, end = insertion.selection
    assert insertion.text[start:end] == "Hello"


def test_insert_footnote_placeholder_for_empty_selection():
    insertion = insert_footnote("A[^1]\n\n[^1]: one", 1, 1)

    assert insertion.number == 2
    assert insertion.text.endswith("\n\n[^2]: 脚注内容")
    start, end = insertion.selection
    assert insertion.text[start:end] == "脚注内容"


def test_render_markdown_reports_sync_in_context():
    context = {}
    html = render_markdown("Text[^1]\n\n[^2]: unused", context)

    assert context["footnotes_changed"] is True
    assert "unused" not in html
    assert "footnote-ref" not in html
