# wemd/markdown/preprocessors/__init__.py

from .footnote_sync import footnote_sync_default

PREPROCESSORS = [
    footnote_sync_default,  # Must run before parsing so footnote numbering is consistent
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
