import asyncio
import os
import re
import subprocess
import sys
import time

import pytest

from wemd import clipboard
from wemd.clipboard import (
    ClipboardError,
    ClipboardPayload,
    build_clipboard_payload,
    copy_with_qt,
    copy_with_system_tool,
    make_cf_html,
    write_to_clipboard,
)


def test_all_strategies_failing_raises():
    def fails(html, text):
        raise OSError("no clipboard")

    async def fails_async(html, text):
        raise ClipboardError("no qt")

    with pytest.raises(ClipboardError, match="copy failed"):
        asyncio.run(write_to_clipboard("<p>a</p>", "a", strategies=[fails, fails_async]))


def test_partial_success_is_success():
    calls = []

    def fails(html, text):
        calls.append("primary")
        raise subprocess.CalledProcessError(1, ["xclip"])

    async def succeeds(html, text):
        calls.append(("secondary", html, text))

    asyncio.run(write_to_clipboard("<p>a</p>", "a", strategies=[fails, succeeds]))

    assert calls == ["primary", ("secondary", "<p>a</p>", "a")]


def test_strategies_run_sequentially_in_order():
    events = []

    async def slow(html, text):
        events.append("slow-start")
        await asyncio.sleep(0.01)
        events.append("slow-end")

    def fast(html, text):
        events.append("fast")

    asyncio.run(write_to_clipboard("<p>a</p>", "a", strategies=[slow, fast]))

    assert events == ["slow-start", "slow-end", "fast"]


def test_secondary_runs_after_primary_success():
    calls = []

    asyncio.run(
        write_to_clipboard(
            "<p>a</p>",
            "a",
            strategies=[lambda html, text: calls.append("primary"), lambda html, text: calls.append("secondary")],
        )
    )

    assert calls == ["primary", "secondary"]


def test_cf_html_offsets_point_at_fragment():
    fragment = "<p>中文 text</p>"
    blob = make_cf_html(fragment)
    header = blob.split(b"<html>", 1)[0].decode("ascii")
    offsets = {key: int(value) for key, value in re.findall(r"(\w+):(\d{9})", header)}

    assert blob[offsets["StartFragment"]:offsets["EndFragment"]] == fragment.encode("utf-8")
    assert blob[offsets["StartHTML"]:].startswith(b"<html>")
    assert offsets["EndHTML"] == len(blob)


def test_system_tool_missing_raises(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
    monkeypatch.delenv("DISPLAY", raising=False)

    with pytest.raises(ClipboardError):
        copy_with_system_tool("<p>a</p>", "a")


def test_staged_file_is_fed_to_tool_and_removed(monkeypatch):
    seen = {}

    def fake_run(command, stdin, **kwargs):
        seen["command"] = command
        seen["path"] = stdin.name
        seen["payload"] = stdin.read()

    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("WAYLAND_DISPLAY", "wayland-0")
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)

    copy_with_system_tool("<p>中</p>", "中")

    assert seen["command"] == ["wl-copy", "--type", "text/html"]
    assert seen["payload"] == "<p>中</p>".encode("utf-8")
    assert not os.path.exists(seen["path"])


def test_staged_file_is_removed_when_tool_fails(monkeypatch):
    seen = {}

    def fake_run(command, stdin, **kwargs):
        seen["path"] = stdin.name
        raise subprocess.CalledProcessError(1, command)

    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
    monkeypatch.setenv("DISPLAY", ":0")
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)

    with pytest.raises(subprocess.CalledProcessError):
        copy_with_system_tool("<p>a</p>", "a")

    assert not os.path.exists(seen["path"])


def test_qt_strategy_without_pyside(monkeypatch):
    monkeypatch.setitem(sys.modules, "PySide6", None)

    with pytest.raises(ClipboardError, match="PySide6"):
        asyncio.run(copy_with_qt("<p>a</p>", "a"))


def test_build_clipboard_payload():
    markdown = "Hello **world**[^1]\n\n[^1]: note\n[^2]: unused\n"
    payload = build_clipboard_payload(markdown, "strong { color: red; }")

    assert isinstance(payload, ClipboardPayload)
    assert payload.plain_text == markdown
    assert payload.html.startswith('<div id="wemd"')
    assert "color:red;" in payload.html
    assert "unused" not in payload.html


def _qt_like(calls):
    async def copy_rich(html, text):
        calls.append("qt")

    copy_rich.needs_running_host = True
    return copy_rich


def test_host_strategy_skipped_after_system_copy_without_qt_app(monkeypatch):
    calls = []
    monkeypatch.setattr(clipboard, "qt_app_running", lambda: False)

    asyncio.run(
        write_to_clipboard("<p>a</p>", "a", strategies=[lambda html, text: calls.append("system"), _qt_like(calls)])
    )

    assert calls == ["system"]


def test_host_strategy_supplements_when_qt_app_running(monkeypatch):
    calls = []
    monkeypatch.setattr(clipboard, "qt_app_running", lambda: True)

    asyncio.run(
        write_to_clipboard("<p>a</p>", "a", strategies=[lambda html, text: calls.append("system"), _qt_like(calls)])
    )

    assert calls == ["system", "qt"]


def test_host_strategy_is_fallback_when_system_copy_fails(monkeypatch):
    calls = []
    monkeypatch.setattr(clipboard, "qt_app_running", lambda: False)

    def fails(html, text):
        raise ClipboardError("no tool")

    asyncio.run(write_to_clipboard("<p>a</p>", "a", strategies=[fails, _qt_like(calls)]))

    assert calls == ["qt"]


def test_qt_strategy_needs_running_host():
    assert copy_with_qt.needs_running_host is True


def test_blocking_strategy_does_not_stall_event_loop():
    ticks = []

    def slow_tool(html, text):
        time.sleep(0.2)

    async def ticker():
        for _ in range(5):
            ticks.append(1)
            await asyncio.sleep(0.01)

    async def main():
        ticking = asyncio.ensure_future(ticker())
        await write_to_clipboard("<p>a</p>", "a", strategies=[slow_tool])
        during_copy = len(ticks)
        ticking.cancel()
        return during_copy

    assert asyncio.run(main()) >= 3
