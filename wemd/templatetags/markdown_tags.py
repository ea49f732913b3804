# wemd/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from wemd.conf import get_setting
from wemd.markdown.renderer import render_markdown
from wemd.theme import apply_theme, load_theme_css

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    """Preview HTML; the page stylesheet themes the ``#wemd`` container"""
    return mark_safe(apply_theme(render_markdown(value)))


@register.filter(name="wemd_export")
def wemd_export_filter(value, theme=None):
    """Paste-ready export HTML with the named packaged theme inlined"""
    theme_css = load_theme_css(theme or get_setting("WEMD_DEFAULT_THEME"))
    return mark_safe(apply_theme(render_markdown(value), export_mode=True, theme_css=theme_css))


@register.simple_tag
def wemd_theme_css(theme=None):
    """Composed CSS of a packaged theme, for a ``<style>`` block in preview pages"""
    return mark_safe(load_theme_css(theme or get_setting("WEMD_DEFAULT_THEME")))
