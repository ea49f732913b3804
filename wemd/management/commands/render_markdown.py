"""
Management command to render a Markdown file to preview or export HTML.
"""

import asyncio
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from wemd.markdown import render_markdown, sync_footnotes
from wemd.scheduling import Debouncer
from wemd.theme import apply_theme

from ._options import add_theme_arguments, read_markdown, resolve_theme_css


class Command(BaseCommand):
    help = 'Render a Markdown file to WeMD preview HTML or WeChat export HTML'

    def add_arguments(self, parser):
        parser.add_argument('path', type=Path, help='Markdown file to render')
        parser.add_argument(
            '--export',
            action='store_true',
            help='Inline the theme and apply the WeChat export rewrites',
        )
        add_theme_arguments(parser)
        parser.add_argument(
            '-o',
            '--output',
            type=Path,
            help='Write HTML to this file instead of stdout',
        )
        parser.add_argument(
            '--sync-footnotes',
            action='store_true',
            help='Write renumbered footnotes back to the Markdown file',
        )
        parser.add_argument(
            '--watch',
            action='store_true',
            help='Re-render whenever the file changes (requires --output)',
        )
        parser.add_argument(
            '--delay',
            type=float,
            default=0.3,
            help='Seconds of quiet before re-rendering in watch mode',
        )
        parser.add_argument(
            '--interval',
            type=float,
            default=0.5,
            help='Seconds between file checks in watch mode',
        )

    def handle(self, *args, **options):
        path = options['path']
        if options['watch'] and not options.get('output'):
            raise CommandError('--watch needs --output')

        theme_css = resolve_theme_css(options) if options['export'] else None

        self._render(path, options, theme_css)

        if options['watch']:
            try:
                asyncio.run(self._watch(path, options, theme_css))
            except KeyboardInterrupt:
                self.stdout.write('\nStopped watching.')

    def _render(self, path, options, theme_css):
        markdown = read_markdown(path)

        if options['sync_footnotes']:
            result = sync_footnotes(markdown)
            if result.changed:
                path.write_text(result.text, encoding='utf-8')
                self.stdout.write(self.style.WARNING(f'Removed unmatched footnotes in {path}'))
            markdown = result.text

        html = apply_theme(render_markdown(markdown), export_mode=options['export'], theme_css=theme_css)

        output = options.get('output')
        if output:
            output.write_text(html, encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f'Rendered {path} -> {output}'))
        else:
            self.stdout.write(html)

    async def _watch(self, path, options, theme_css):
        self.stdout.write(f'Watching {path} (Ctrl+C to stop)')
        debouncer = Debouncer(options['delay'], lambda: self._render(path, options, theme_css))
        last_mtime = path.stat().st_mtime

        try:
            while True:
                await asyncio.sleep(options['interval'])
                try:
                    mtime = path.stat().st_mtime
                except FileNotFoundError:
                    continue
                if mtime != last_mtime:
                    last_mtime = mtime
                    debouncer.trigger()
        finally:
            debouncer.cancel()
