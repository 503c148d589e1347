from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Proleptic Gregorian date, astronomical year numbering (year 0 exists)."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        from .dates import check_ymd
        check_ymd(self.year, self.month, self.day)

    def __str__(self) -> str:
        from .dates import format_ymd
        return format_ymd(self)


class MoonPhase(Enum):
    NONE = "none"
    NEW = "new"
    FULL = "full"


class Direction(Enum):
    UP = -1    # towards the past
    DOWN = 1   # towards the future


class Command(Enum):
    SCROLL_WEEK_UP = "scroll-week-up"
    SCROLL_WEEK_DOWN = "scroll-week-down"
    SCROLL_PAGE_UP = "scroll-page-up"
    SCROLL_PAGE_DOWN = "scroll-page-down"
    JUMP_TODAY = "jump-today"
    OPEN_PROMPT = "open-prompt"
    SHOW_HELP = "show-help"
    QUIT = "quit"
    # prompt-only
    TOGGLE_SIGN = "toggle-sign"
    POSITIVE_SIGN = "positive-sign"
    BACKSPACE = "backspace"
    COMMIT = "commit"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Digit:
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 9:
            raise ValueError(f"digit must be 0..9, got {self.value}")


Input = Union[Command, Digit]


@dataclass(frozen=True)
class ViewportState:
    center: CalendarDate
    rows: int


class PromptMode(Enum):
    CLOSED = "closed"
    EDITING = "editing"


@dataclass(frozen=True)
class PromptState:
    mode: PromptMode
    digits: str = ""
    sign_positive: bool = True


@dataclass(frozen=True)
class DayRow:
    date: CalendarDate
    phase: MoonPhase
    is_today: bool = False


@dataclass(frozen=True)
class Frame:
    """Read-only snapshot handed to a renderer after every event."""
    rows: Tuple[DayRow, ...]
    center: CalendarDate
    prompt: PromptState = PromptState(PromptMode.CLOSED)
    prompt_text: Optional[str] = None
    help_visible: bool = False
    quit: bool = False
    bell: bool = False
    message: Optional[str] = None

    def dates(self) -> Tuple[CalendarDate, ...]:
        return tuple(r.date for r in self.rows)
