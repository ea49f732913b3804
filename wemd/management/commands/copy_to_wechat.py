"""
Management command to copy a Markdown file to the clipboard as WeChat HTML.
"""

import asyncio
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from wemd.clipboard import ClipboardError, build_clipboard_payload, write_to_clipboard

from ._options import add_theme_arguments, read_markdown, resolve_theme_css


class Command(BaseCommand):
    help = 'Render a Markdown file with a theme and copy the result for pasting into WeChat'

    def add_arguments(self, parser):
        parser.add_argument('path', type=Path, help='Markdown file to copy')
        add_theme_arguments(parser)

    def handle(self, *args, **options):
        markdown = read_markdown(options['path'])
        payload = build_clipboard_payload(markdown, resolve_theme_css(options))

        try:
            asyncio.run(write_to_clipboard(payload.html, payload.plain_text))
        except ClipboardError as e:
            raise CommandError(f'Copy failed: {e}') from e

        self.stdout.write(self.style.SUCCESS(f"Copied {options['path']} - paste it into the WeChat editor"))
