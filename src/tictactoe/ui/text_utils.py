"""Helpers for measuring and padding text that may carry ANSI colors."""

from __future__ import annotations

import re

__all__ = ["display_width", "truncate_to_width", "pad_to_width", "strip_ansi"]

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    return len(strip_ansi(text))


def truncate_to_width(text: str, max_width: int) -> str:
    """Cut plain ``text`` down to ``max_width`` characters."""

    if max_width <= 0:
        return ""
    return text[:max_width]


def pad_to_width(text: str, width: int, pad_char: str = " ") -> str:
    current = display_width(text)
    if current >= width:
        return text
    return text + pad_char * (width - current)
