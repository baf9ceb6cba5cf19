"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens:
``UP``, ``DOWN``, ``LEFT``, ``RIGHT``, ``ENTER``, ``ESC``, ``BACKSPACE``,
``DELETE``, ``TAB``, ``CTRL_C``, ``EOF`` (stdin closed), or a single decoded
character.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
EOF_KEY = "EOF"
_PENDING_BYTES: list[bytes] = []

_ARROW_KEYS = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}
_CONTROL_BYTES = {
    b"\x03": "CTRL_C",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_sequence_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_char(fd: int, first: bytes) -> str:
    data = first
    for _ in range(_utf8_sequence_length(first[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _read_csi(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _ARROW_KEYS:
        return _ARROW_KEYS[seq]
    if seq == b"3":
        tail = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        return "DELETE" if tail == b"~" else "ESC"
    # Swallow the rest of an unknown sequence up to its final byte.
    while seq is not None and not (b"@" <= seq <= b"~"):
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    return "ESC"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Return the next key token, or ``""`` when ``timeout_ms`` elapses first.

    A closed stdin reads as ``EOF`` on every call.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return EOF_KEY

    if ch in _CONTROL_BYTES:
        return _CONTROL_BYTES[ch]
    if ch != b"\x1b":
        return _decode_char(fd, ch)

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final in _ARROW_KEYS:
            return _ARROW_KEYS[final]
        return "ESC"
    _PENDING_BYTES.append(seq)
    return "ESC"
