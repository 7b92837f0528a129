"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``KeyEvent`` values.
Handles ESC-sequence timing, modifier combos, and multi-byte UTF-8 input.
"""

from __future__ import annotations

import os
import select

from .events import KeyEvent

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_NAMES = {
    b"A": "up",
    b"B": "down",
    b"C": "right",
    b"D": "left",
    b"H": "home",
    b"F": "end",
}
_CSI_TILDE_NAMES = {
    "1": "home",
    "2": "insert",
    "3": "delete",
    "4": "end",
    "5": "pageup",
    "6": "pagedown",
    "7": "home",
    "8": "end",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _next_byte(fd: int) -> bytes:
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    return os.read(fd, 1)


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _modifiers(code: int) -> dict[str, bool]:
    """Decode xterm modifier parameter (``1 + shift|alt<<1|ctrl<<2``)."""
    bits = max(0, code - 1)
    return {"shift": bool(bits & 1), "meta": bool(bits & 2), "ctrl": bool(bits & 4)}


def _decode_single(ch: bytes) -> KeyEvent:
    text = ch.decode("utf-8", errors="replace")
    if ch == b"\r":
        return KeyEvent("return", sequence=text, raw=text)
    if ch == b"\n":
        return KeyEvent("enter", sequence=text, raw=text)
    if ch == b"\t":
        return KeyEvent("tab", sequence=text, raw=text)
    if ch in {b"\x08", b"\x7f"}:
        return KeyEvent("backspace", sequence=text, raw=text)
    if ch == b" ":
        return KeyEvent("space", sequence=text, raw=text)
    if ch == b"\x00":
        return KeyEvent("space", ctrl=True, sequence=text, raw=text)
    code = ch[0]
    if 1 <= code <= 26:
        return KeyEvent(chr(code + ord("a") - 1), ctrl=True, sequence=text, raw=text)
    return KeyEvent(text.lower(), shift=text != text.lower(), sequence=text, raw=text)


def read_key_event(fd: int, timeout_ms: int | None = None) -> KeyEvent | None:
    """Read and decode one key from ``fd``.

    Returns ``None`` on end of input or when ``timeout_ms`` elapses first.
    """
    if not _PENDING_BYTES and timeout_ms is not None:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return None

    ch = _next_byte(fd)
    if not ch:
        return None

    if ch != b"\x1b":
        extra = _utf8_length(ch[0]) - 1
        if extra:
            tail = b""
            for _ in range(extra):
                part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
                if part is None:
                    break
                tail += part
            ch += tail
            text = ch.decode("utf-8", errors="replace")
            return KeyEvent(text.lower(), shift=text != text.lower(), sequence=text, raw=text)
        return _decode_single(ch)

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KeyEvent("escape", sequence="\x1b", raw="\x1b")
    if seq == b"\x1b":
        _PENDING_BYTES.append(seq)
        return KeyEvent("escape", sequence="\x1b", raw="\x1b")
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None or final not in _CSI_FINAL_NAMES:
            return KeyEvent("escape", sequence="\x1b", raw="\x1bO")
        raw = "\x1bO" + final.decode("ascii")
        return KeyEvent(_CSI_FINAL_NAMES[final], sequence=raw, raw=raw)
    if seq != b"[":
        inner = _decode_single(seq)
        raw = "\x1b" + inner.raw
        return KeyEvent(inner.name, ctrl=inner.ctrl, meta=True, shift=inner.shift, sequence=raw, raw=raw)

    payload = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return KeyEvent("escape", sequence="\x1b", raw="\x1b[" + payload.decode("ascii", "replace"))
        if 0x40 <= part[0] <= 0x7E:
            break
        payload += part
        if len(payload) > 16:
            return KeyEvent("escape", sequence="\x1b", raw="\x1b[")
    raw = "\x1b[" + payload.decode("ascii", "replace") + part.decode("ascii", "replace")
    params = payload.decode("ascii", "replace").split(";") if payload else []

    if part == b"Z":
        return KeyEvent("tab", shift=True, sequence=raw, raw=raw)
    mods = _modifiers(int(params[1])) if len(params) >= 2 and params[1].isdigit() else {}
    if part in _CSI_FINAL_NAMES:
        return KeyEvent(_CSI_FINAL_NAMES[part], sequence=raw, raw=raw, **mods)
    if part == b"~" and params and params[0] in _CSI_TILDE_NAMES:
        return KeyEvent(_CSI_TILDE_NAMES[params[0]], sequence=raw, raw=raw, **mods)
    return KeyEvent("undefined", sequence=raw, raw=raw)
