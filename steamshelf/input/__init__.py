"""Keyboard input decoding."""

from __future__ import annotations

from .keys import read_key

__all__ = ["read_key"]
