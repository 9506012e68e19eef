"""Status box rendering helpers for the terminal UI."""

from __future__ import annotations

from typing import List

from .text_utils import pad_to_width, truncate_to_width

MIN_WIDTH: int = 20


def render_status_box(message: str, width: int) -> List[str]:
    """Return a bordered one-line box holding ``message``, cut to fit."""

    inner_width = max(MIN_WIDTH, width)
    text = pad_to_width(truncate_to_width(message, inner_width), inner_width)
    border = "+" + "-" * inner_width + "+"
    return [border, f"|{text}|", border]
