from __future__ import annotations

from typing import List

from .core.dates import format_ymd, weekday
from .core.types import DayRow, Frame, MoonPhase
from .engines.prompt import DIGIT_COUNT
from .keymap import HELP_TEXT

WEEKDAYS = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

PHASE_MARKS = {
    MoonPhase.NONE: " ",
    MoonPhase.NEW: "o",
    MoonPhase.FULL: "*",
}


def row_line(row: DayRow) -> str:
    d = row.date
    left, right = ("[", "]") if row.is_today else (" ", " ")
    line = f"{left}{format_ymd(d):>11}{right} {WEEKDAYS[weekday(d)]}  {PHASE_MARKS[row.phase]}"
    if d.day == 1:
        line += f"   {MONTH_NAMES[d.month - 1]}"
    return line.rstrip()


def help_lines() -> List[str]:
    w = max(len(k) for k, _ in HELP_TEXT)
    out = ["Commands:"]
    out += [f"  {k.ljust(w)}   {desc}" for k, desc in HELP_TEXT]
    out.append("Press any key to dismiss.")
    return out


def render_frame(frame: Frame) -> List[str]:
    lines = [row_line(r) for r in frame.rows]
    if frame.help_visible:
        lines.append("")
        lines += help_lines()
    if frame.prompt_text is not None:
        ready = len(frame.prompt.digits) == DIGIT_COUNT
        lines.append("")
        lines.append(f"Jump to: {frame.prompt_text}" + ("   [ENTER]" if ready else ""))
    if frame.message:
        lines.append("")
        lines.append(frame.message)
    return lines
