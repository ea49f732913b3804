# wemd/markdown/preprocessors/footnote_sync.py
"""
Preprocessor that keeps footnote references and definitions paired.

Editing a document by hand easily leaves a ``[^3]`` reference behind after
its definition was deleted, or a ``[^3]: ...`` definition nobody points to
anymore. Before every render this preprocessor:

- Deletes references whose number has no definition
- Deletes definitions (whole line, including its newline) whose number is
  never referenced
- Never renumbers: surviving footnotes keep their numbers, gaps stay gaps

Markup that does not match the two patterns below is left alone.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Tuple

logger = logging.getLogger(__name__)

DEFINITION_PATTERN = re.compile(r"\[\^(\d+)\]:.*(?:\n|$)")
REFERENCE_PATTERN = re.compile(r"\[\^(\d+)\](?!:)")
NUMBER_PATTERN = re.compile(r"\[\^(\d+)\]")

DEFAULT_PLACEHOLDER = "脚注内容"


@dataclass(frozen=True)
class FootnoteSyncResult:
    text: str
    changed: bool


@dataclass(frozen=True)
class FootnoteInsertion:
    text: str
    number: int
    # Span of the definition body, so an editor can select it for typing
    selection: Tuple[int, int]


def _find_removals(text: str) -> Tuple[List[Tuple[int, int]], int, int]:
    """
    Return the (start, end) spans to delete plus the count of orphaned
    references and unused definitions found in ``text``.
    """
    definitions = list(DEFINITION_PATTERN.finditer(text))
    references = list(REFERENCE_PATTERN.finditer(text))

    defined = {match.group(1) for match in definitions}
    referenced = {match.group(1) for match in references}

    orphaned = [m for m in references if m.group(1) not in defined]
    unused = [m for m in definitions if m.group(1) not in referenced]

    spans = [m.span() for m in orphaned] + [m.span() for m in unused]
    return spans, len(orphaned), len(unused)


def _merge_spans(spans: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """Fold overlapping spans together; an unused definition can contain an orphaned reference."""
    merged: List[Tuple[int, int]] = []
    for start, end in sorted(spans):
        if merged and start < merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def _apply_removals(text: str, spans: List[Tuple[int, int]]) -> str:
    # Back to front so earlier offsets stay valid
    for start, end in reversed(_merge_spans(spans)):
        text = text[:start] + text[end:]
    return text


def sync_footnotes(markdown: str) -> FootnoteSyncResult:
    """
    Remove orphaned footnote references and unused footnote definitions.

    Each scan collects every removal first and applies them in one backward
    pass. Scanning repeats until the text is stable, since deleting an
    unused definition can remove the last reference to another footnote.

    Args:
        markdown: Raw editor content

    Returns:
        FootnoteSyncResult with the synced text and whether anything changed
    """
    text = markdown or ""
    changed = False

    while True:
        spans, orphaned_count, unused_count = _find_removals(text)
        if not spans:
            break

        text = _apply_removals(text, spans)
        changed = True

        if orphaned_count:
            logger.info("Removed %d orphaned footnote reference(s)", orphaned_count)
        if unused_count:
            logger.info("Removed %d unused footnote definition(s)", unused_count)

    return FootnoteSyncResult(text=text, changed=changed)


def next_footnote_number(markdown: str) -> int:
    """Highest footnote number in use plus one, or 1 for a document without footnotes."""
    numbers = [int(match.group(1)) for match in NUMBER_PATTERN.finditer(markdown or "")]
    return max(numbers) + 1 if numbers else 1


def insert_footnote(
    markdown: str,
    start: int,
    end: int,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> FootnoteInsertion:
    """
    Insert a new footnote for the selection ``markdown[start:end]``.

    The reference goes right after the selected text, the definition is
    appended to the end of the document using the selected text (or the
    placeholder) as its body.
    """
    number = next_footnote_number(markdown)
    selected = markdown[start:end]

    text = markdown[:start] + selected + f"[^{number}]" + markdown[end:]
    text += f"\n\n[^{number}]: {selected or placeholder}"

    body_start = text.rfind(": ") + 2
    return FootnoteInsertion(text=text, number=number, selection=(body_start, len(text)))


def footnote_sync_default(text: str, context: dict) -> str:
    """
    Default configuration for footnote sync.

    This is the function that should be registered in PREPROCESSORS. The
    sync result is recorded in the context so callers can write the cleaned
    text back to the editor.
    """
    result = sync_footnotes(text)
    context["footnotes_changed"] = result.changed
    return result.text
