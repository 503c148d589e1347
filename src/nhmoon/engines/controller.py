"""
nhmoon.engines.controller
-------------------------
Routes logical commands to the Viewport or the InputPrompt and produces one
immutable Frame per event. The only clock the engine knows is the `today`
it is handed.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from ..core.dates import to_ordinal
from ..core.types import CalendarDate, Command, DayRow, Direction, Frame, Input
from .moon import DEFAULT_MODEL, PhaseClassifier, build_registry
from .prompt import InputPrompt, OutcomeKind
from .viewport import Viewport

logger = logging.getLogger(__name__)


class Mode(Enum):
    CALENDAR = "calendar"
    HELP = "help"
    PROMPT = "prompt"
    QUIT = "quit"


class Controller:
    def __init__(
        self,
        viewport: Viewport,
        *,
        today: CalendarDate,
        phase_model: Optional[PhaseClassifier] = None,
    ):
        self.viewport = viewport
        self.today = today
        self.phase_model = phase_model if phase_model is not None else build_registry().get(DEFAULT_MODEL)
        self.prompt = InputPrompt()
        self.mode = Mode.CALENDAR
        self._bell = False
        self._message: Optional[str] = None

    @property
    def quitting(self) -> bool:
        return self.mode is Mode.QUIT

    def dispatch(self, cmd: Optional[Input], *, today: Optional[CalendarDate] = None) -> Frame:
        """
        Apply one command and return the resulting frame. `None` stands for a
        key with no binding; it rings the bell unless it dismisses the help.
        """
        if today is not None:
            self.today = today
        self._bell = False
        self._message = None

        if self.mode is Mode.QUIT:
            pass
        elif self.mode is Mode.HELP:
            # any key dismisses the help overlay
            self.mode = Mode.CALENDAR
        elif cmd is None:
            self._bell = True
        elif self.mode is Mode.PROMPT:
            self._handle_prompt(cmd)
        else:
            self._bell = not self._handle_calendar(cmd)

        return self.frame()

    # Returns False for a command that had no effect
    def _handle_calendar(self, cmd: Input) -> bool:
        vp = self.viewport
        if cmd is Command.SCROLL_WEEK_UP:
            return vp.scroll_week(Direction.UP)
        if cmd is Command.SCROLL_WEEK_DOWN:
            return vp.scroll_week(Direction.DOWN)
        if cmd is Command.SCROLL_PAGE_UP:
            return vp.scroll_page(Direction.UP)
        if cmd is Command.SCROLL_PAGE_DOWN:
            return vp.scroll_page(Direction.DOWN)
        if cmd is Command.JUMP_TODAY:
            vp.jump_to_today(self.today)
            return True
        if cmd is Command.OPEN_PROMPT:
            self.prompt.open()
            self.mode = Mode.PROMPT
            return True
        if cmd is Command.SHOW_HELP:
            self.mode = Mode.HELP
            return True
        if cmd is Command.QUIT:
            logger.debug("quit requested")
            self.mode = Mode.QUIT
            return True
        return False

    def _handle_prompt(self, cmd: Input) -> None:
        outcome = self.prompt.handle(cmd)
        if outcome.kind is OutcomeKind.IGNORED:
            self._bell = True
        elif outcome.kind is OutcomeKind.COMMITTED:
            self.viewport.jump_to(outcome.date)
        elif outcome.kind is OutcomeKind.REJECTED:
            self._bell = True
            self._message = f"Invalid date: {outcome.error}"
        if not self.prompt.editing:
            self.mode = Mode.CALENDAR

    def frame(self) -> Frame:
        rows = tuple(
            DayRow(date=d, phase=self.phase_model.phase_of(to_ordinal(d)), is_today=(d == self.today))
            for d in self.viewport.visible_dates()
        )
        editing = self.mode is Mode.PROMPT
        return Frame(
            rows=rows,
            center=self.viewport.center,
            prompt=self.prompt.state(),
            prompt_text=self.prompt.text() if editing else None,
            help_visible=self.mode is Mode.HELP,
            quit=self.quitting,
            bell=self._bell,
            message=self._message,
        )
