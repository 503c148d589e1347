"""
nhmoon.engines.viewport
-----------------------
The window of consecutive dates mapped onto terminal rows.

All movement is done on ordinals and clamped to the supported range before
converting back, so DateMath's OutOfRangeError never fires from here.
"""

from __future__ import annotations

import logging
from typing import Tuple

from ..core.dates import MAX_ORDINAL, MIN_ORDINAL, clamp_ordinal, from_ordinal, to_ordinal
from ..core.types import CalendarDate, Direction, ViewportState

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7


class Viewport:
    def __init__(self, center: CalendarDate, rows: int):
        self._check_rows(rows)
        self.center = center
        self.rows = rows

    @staticmethod
    def _check_rows(rows: int) -> None:
        if rows <= 0:
            raise ValueError(f"rows must be positive, got {rows}")

    def state(self) -> ViewportState:
        return ViewportState(center=self.center, rows=self.rows)

    @property
    def center_row(self) -> int:
        """Row index of the center date; the extra row of an uneven split goes above."""
        spare = self.rows - 1
        return spare - spare // 2

    # ---------------------------------------------------------
    # Movement. Each returns False when already pinned at a boundary.
    # ---------------------------------------------------------

    def _move_to_ordinal(self, o: int) -> bool:
        target = from_ordinal(clamp_ordinal(o))
        if target == self.center:
            return False
        self.center = target
        return True

    def _shift(self, days: int) -> bool:
        moved = self._move_to_ordinal(to_ordinal(self.center) + days)
        if not moved:
            logger.debug("viewport pinned at %s", self.center)
        return moved

    def scroll_week(self, direction: Direction) -> bool:
        return self._shift(direction.value * DAYS_IN_WEEK)

    def scroll_page(self, direction: Direction) -> bool:
        return self._shift(direction.value * self.rows)

    def jump_to_today(self, today: CalendarDate) -> bool:
        return self.jump_to(today)

    def jump_to(self, date: CalendarDate) -> bool:
        if date == self.center:
            return False
        self.center = date
        return True

    def resize(self, rows: int) -> None:
        self._check_rows(rows)
        self.rows = rows

    # ---------------------------------------------------------
    # Rendering support
    # ---------------------------------------------------------

    def first_ordinal(self) -> int:
        start = to_ordinal(self.center) - self.center_row
        # keep the whole window inside the range near the limits
        start = min(start, MAX_ORDINAL - self.rows + 1)
        return max(start, MIN_ORDINAL)

    def visible_dates(self) -> Tuple[CalendarDate, ...]:
        start = self.first_ordinal()
        stop = min(start + self.rows, MAX_ORDINAL + 1)
        return tuple(from_ordinal(o) for o in range(start, stop))
