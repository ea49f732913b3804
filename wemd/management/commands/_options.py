# wemd/management/commands/_options.py
"""Argument handling shared by the WeMD management commands."""

from pathlib import Path

from django.core.management.base import CommandError

from wemd.conf import get_setting
from wemd.theme import ThemeNotFoundError, list_themes, load_theme_css


def add_theme_arguments(parser):
    parser.add_argument(
        '--theme',
        help=f"Packaged theme to export with ({', '.join(list_themes())})",
    )
    parser.add_argument(
        '--theme-css',
        type=Path,
        help='Path to a CSS file to export with instead of a packaged theme',
    )


def resolve_theme_css(options):
    """Return theme CSS text from ``--theme-css``, ``--theme`` or the default theme."""
    css_path = options.get('theme_css')
    if css_path:
        try:
            return css_path.read_text(encoding='utf-8')
        except OSError as e:
            raise CommandError(f'Cannot read theme CSS {css_path}: {e}') from e

    try:
        return load_theme_css(options.get('theme') or get_setting('WEMD_DEFAULT_THEME'))
    except ThemeNotFoundError as e:
        raise CommandError(str(e)) from e


def read_markdown(path):
    try:
        return Path(path).read_text(encoding='utf-8')
    except OSError as e:
        raise CommandError(f'Cannot read {path}: {e}') from e
