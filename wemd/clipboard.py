"""
Write exported HTML to the system clipboard.

Two strategies are tried in order:

1. ``copy_with_system_tool``: the platform clipboard tool. On Windows the
   HTML is written as ``CF_HTML`` through pywin32; on Linux ``wl-copy``
   (Wayland) or ``xclip`` (X11) is fed a staged temporary file.
2. ``copy_with_qt``: a Qt ``QMimeData`` payload with both ``text/html`` and
   ``text/plain``, so editors that only take plain text get the Markdown
   source. Only available when PySide6 is installed.

The second strategy runs as a fallback when the first fails. After a
successful system copy it only adds its plain text flavour when a Qt
application is already running; otherwise taking clipboard ownership from a
short-lived process would leave the clipboard empty once it exits. The copy
fails only if every strategy fails.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import os
import shutil
import subprocess
import sys
import tempfile
from dataclasses import dataclass

from wemd.conf import get_setting

logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """Raised when HTML could not be placed on the clipboard."""


@dataclass(frozen=True)
class ClipboardPayload:
    """Paste-ready HTML plus the plain-text flavour offered alongside it."""

    html: str
    plain_text: str


# ── CF_HTML builder ───────────────────────────────────────────────────────────

_CF_HTML_HEADER_TEMPLATE = (
    "Version:0.9\r\n"
    "StartHTML:{sh:09d}\r\n"
    "EndHTML:{eh:09d}\r\n"
    "StartFragment:{sf:09d}\r\n"
    "EndFragment:{ef:09d}\r\n"
)

_OPEN_TAG = b"<html><body><!--StartFragment-->"
_CLOSE_TAG = b"<!--EndFragment--></body></html>"


def make_cf_html(fragment: str) -> bytes:
    """Wrap an HTML fragment in a CF_HTML blob; offsets are UTF-8 byte positions."""
    # Every offset is 9 digits, so the header length does not depend on the values
    header_len = len(_CF_HTML_HEADER_TEMPLATE.format(sh=0, eh=0, sf=0, ef=0).encode("utf-8"))

    frag_bytes = fragment.encode("utf-8")

    sh = header_len
    sf = sh + len(_OPEN_TAG)
    ef = sf + len(frag_bytes)
    eh = ef + len(_CLOSE_TAG)

    header = _CF_HTML_HEADER_TEMPLATE.format(sh=sh, eh=eh, sf=sf, ef=ef)
    return header.encode("utf-8") + _OPEN_TAG + frag_bytes + _CLOSE_TAG


# ── Strategies ────────────────────────────────────────────────────────────────


def _copy_windows(html: str) -> None:
    import win32clipboard

    cf_html = win32clipboard.RegisterClipboardFormat("HTML Format")
    win32clipboard.OpenClipboard()
    try:
        win32clipboard.EmptyClipboard()
        win32clipboard.SetClipboardData(cf_html, make_cf_html(html))
    finally:
        win32clipboard.CloseClipboard()


def _linux_command():
    """Return the clipboard command for the current session, or None."""
    if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
        return ["wl-copy", "--type", "text/html"]
    if os.environ.get("DISPLAY") and shutil.which("xclip"):
        return ["xclip", "-selection", "clipboard", "-t", "text/html"]
    return None


def _copy_with_command(command, html: str) -> None:
    fd, path = tempfile.mkstemp(prefix="wemd-", suffix=".html")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as staged:
            staged.write(html)
        with open(path, "rb") as source:
            # The tools fork a server process that keeps inherited pipes open,
            # so output must not be captured
            subprocess.run(
                command,
                stdin=source,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=get_setting("WEMD_CLIPBOARD_TIMEOUT"),
            )
    finally:
        os.unlink(path)


def copy_with_system_tool(html: str, plain_text: str) -> None:
    """
    Copy HTML with the platform clipboard tool.

    Raises:
        ClipboardError: if no tool is available for this platform
        subprocess.SubprocessError: if the tool fails or times out
    """
    if sys.platform == "win32":
        _copy_windows(html)
        return

    command = _linux_command()
    if command is None:
        raise ClipboardError("No clipboard tool found (install wl-clipboard or xclip)")
    _copy_with_command(command, html)


async def copy_with_qt(html: str, plain_text: str) -> None:
    """
    Copy HTML and plain text as one Qt mime payload.

    Raises:
        ClipboardError: if PySide6 is missing or there is no display to attach to
    """
    try:
        from PySide6.QtCore import QMimeData
        from PySide6.QtWidgets import QApplication
    except ImportError as e:
        raise ClipboardError("PySide6 not installed - Qt clipboard unavailable") from e

    if sys.platform.startswith("linux") and not (
        os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
    ):
        raise ClipboardError("No display available for the Qt clipboard")

    app = QApplication.instance() or QApplication([])
    mime_data = QMimeData()
    mime_data.setHtml(html)
    mime_data.setText(plain_text)
    app.clipboard().setMimeData(mime_data)
    app.processEvents()
    # Let the clipboard owner serve the first paste request
    await asyncio.sleep(0)


# Qt takes clipboard ownership, which is only safe while a Qt app outlives the copy
copy_with_qt.needs_running_host = True


def qt_app_running() -> bool:
    """True if a ``QApplication`` already exists in this process."""
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError:
        return False
    return QApplication.instance() is not None


DEFAULT_STRATEGIES = (copy_with_system_tool, copy_with_qt)


async def write_to_clipboard(html, plain_text_fallback, strategies=None):
    """
    Put ``html`` on the clipboard.

    Strategies run one after another, never concurrently. A strategy may be
    a plain function or a coroutine function taking ``(html, plain_text)``;
    plain functions run in a worker thread so a slow clipboard tool does not
    block the event loop. A strategy marked ``needs_running_host`` is skipped
    after an earlier success unless a Qt application is already running.

    Args:
        html: Export HTML from ``apply_theme(..., export_mode=True)``
        plain_text_fallback: Text offered to targets that refuse HTML
        strategies: Strategies to try, defaults to ``DEFAULT_STRATEGIES``

    Raises:
        ClipboardError: if every strategy failed
    """
    if strategies is None:
        strategies = DEFAULT_STRATEGIES

    succeeded = []
    for strategy in strategies:
        name = getattr(strategy, "__name__", repr(strategy))
        if succeeded and getattr(strategy, "needs_running_host", False) and not qt_app_running():
            logger.debug(f"Skipping clipboard strategy {name}: no running Qt application")
            continue
        try:
            if inspect.iscoroutinefunction(strategy):
                await strategy(html, plain_text_fallback)
            else:
                result = await asyncio.to_thread(strategy, html, plain_text_fallback)
                if inspect.isawaitable(result):
                    await result
        except Exception as e:
            logger.warning(f"Clipboard strategy {name} failed: {e}")
            continue
        succeeded.append(name)

    if not succeeded:
        raise ClipboardError("copy failed")

    logger.info(f"Copied {len(html)} characters of HTML via {', '.join(succeeded)}")


def build_clipboard_payload(markdown, theme_css):
    """
    Run the whole pipeline for a copy: footnote sync, render, export theme.

    The plain-text flavour is the Markdown source as given.
    """
    from wemd.markdown import render_markdown
    from wemd.theme import apply_theme

    html = render_markdown(markdown)
    exported = apply_theme(html, export_mode=True, theme_css=theme_css)
    return ClipboardPayload(html=exported, plain_text=markdown)
