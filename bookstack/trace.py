"""Human-readable trace of cart contents during a careful move."""

from __future__ import annotations

import sys
from typing import TextIO

from .render import render
from .transfer import CartState, MoveEvent

COLUMN_WIDTH = 23
TITLE_WIDTH = 20
MARGIN = " " * 21


def shorten_title(title: str) -> str:
    """Clip long titles to ``TITLE_WIDTH`` characters, ending in ``...``."""
    if len(title) > TITLE_WIDTH:
        return title[: TITLE_WIDTH - 3] + "..."
    return title


def _rows(carts: tuple[CartState, ...]) -> list[str]:
    # Stacks are drawn standing up: each cart's bottom book is on the last row.
    tallest = max((len(c.books) for c in carts), default=0)
    rows = []
    for height in range(tallest, 0, -1):
        cells = []
        for cart in carts:
            depth = len(cart.books) - height
            if depth >= 0:
                cells.append(shorten_title(cart.books[depth].title).ljust(COLUMN_WIDTH))
            else:
                cells.append(" " * COLUMN_WIDTH)
        rows.append("".join(cells).rstrip())
    return rows


def format_move(event: MoveEvent) -> str:
    return render(
        "trace.txt.j2",
        move_number=event.move_number,
        header="".join(c.label.ljust(COLUMN_WIDTH) for c in event.carts).rstrip(),
        margin=MARGIN,
        width=COLUMN_WIDTH * len(event.carts),
        lines=_rows(event.carts),
    )


class CartTrace:
    """Move observer that writes each cart state to a stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def __call__(self, event: MoveEvent) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(format_move(event))
