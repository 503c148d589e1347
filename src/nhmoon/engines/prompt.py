"""
nhmoon.engines.prompt
---------------------
"Jump to" prompt: a two-state machine (CLOSED, EDITING) that collects an
optional sign and eight digits, YYYYMMDD, and turns them into a date.

    .┌─ Jump To… ──┐.
    .│ -YYYY-MM-DD │.
    .│   [ENTER]   │.
    .└─────────────┘.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.dates import make_date
from ..core.errors import InvalidDateError
from ..core.types import CalendarDate, Command, Digit, Input, PromptMode, PromptState

logger = logging.getLogger(__name__)

DIGIT_COUNT = 8

# (placeholder, number of cells) per field of the overlay
_FIELDS = (("Y", 4), ("M", 2), ("D", 2))


class OutcomeKind(Enum):
    PENDING = "pending"        # input accepted, still editing
    IGNORED = "ignored"        # no effect
    CANCELLED = "cancelled"
    COMMITTED = "committed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class PromptOutcome:
    kind: OutcomeKind
    date: Optional[CalendarDate] = None
    error: Optional[InvalidDateError] = None


_PENDING = PromptOutcome(OutcomeKind.PENDING)
_IGNORED = PromptOutcome(OutcomeKind.IGNORED)
_CANCELLED = PromptOutcome(OutcomeKind.CANCELLED)


class InputPrompt:
    def __init__(self) -> None:
        self.mode = PromptMode.CLOSED
        self.digits = ""
        self.sign_positive = True

    @property
    def editing(self) -> bool:
        return self.mode is PromptMode.EDITING

    @property
    def ready(self) -> bool:
        return self.editing and len(self.digits) == DIGIT_COUNT

    def state(self) -> PromptState:
        return PromptState(mode=self.mode, digits=self.digits, sign_positive=self.sign_positive)

    def open(self) -> None:
        self.mode = PromptMode.EDITING
        self.digits = ""
        self.sign_positive = True
        logger.debug("prompt opened")

    def close(self) -> None:
        self.mode = PromptMode.CLOSED
        self.digits = ""
        self.sign_positive = True

    def handle(self, cmd: Input) -> PromptOutcome:
        if not self.editing:
            return _IGNORED

        if isinstance(cmd, Digit):
            if len(self.digits) >= DIGIT_COUNT:
                return _IGNORED
            self.digits += str(cmd.value)
            return _PENDING

        if cmd in (Command.CANCEL, Command.OPEN_PROMPT):
            self.close()
            logger.debug("prompt cancelled")
            return _CANCELLED

        if cmd is Command.TOGGLE_SIGN:
            if self.digits:
                return _IGNORED
            self.sign_positive = not self.sign_positive
            return _PENDING

        if cmd is Command.POSITIVE_SIGN:
            if self.digits:
                return _IGNORED
            self.sign_positive = True
            return _PENDING

        if cmd is Command.BACKSPACE:
            if not self.digits:
                return _IGNORED
            self.digits = self.digits[:-1]
            return _PENDING

        if cmd is Command.COMMIT:
            if len(self.digits) != DIGIT_COUNT:
                return _IGNORED
            return self._commit()

        return _IGNORED

    def _commit(self) -> PromptOutcome:
        year = int(self.digits[:4])
        if not self.sign_positive:
            year = -year
        month = int(self.digits[4:6])
        day = int(self.digits[6:8])
        self.close()
        try:
            date = make_date(year, month, day)
        except InvalidDateError as e:
            logger.warning("rejected jump target: %s", e)
            return PromptOutcome(OutcomeKind.REJECTED, error=e)
        logger.debug("prompt committed %s", date)
        return PromptOutcome(OutcomeKind.COMMITTED, date=date)

    def text(self) -> str:
        """Overlay line, e.g. '-2025-0M-DD' while typing."""
        out = [" " if self.sign_positive else "-"]
        pos = 0
        for i, (placeholder, width) in enumerate(_FIELDS):
            if i:
                out.append("-")
            for _ in range(width):
                out.append(self.digits[pos] if pos < len(self.digits) else placeholder)
                pos += 1
        return "".join(out)
