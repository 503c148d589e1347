# tests/test_render.py

from nhmoon.core.types import CalendarDate, DayRow, Frame, MoonPhase, PromptMode, PromptState
from nhmoon.render import help_lines, render_frame, row_line


def test_row_line():
    assert row_line(DayRow(CalendarDate(2025, 1, 16), MoonPhase.FULL, is_today=True)) == "[ 2025-01-16] Th  *"
    assert row_line(DayRow(CalendarDate(2025, 1, 29), MoonPhase.NEW)) == "  2025-01-29  We  o"
    assert row_line(DayRow(CalendarDate(2025, 3, 1), MoonPhase.NONE)) == "  2025-03-01  Sa      March"
    assert row_line(DayRow(CalendarDate(-44, 3, 15), MoonPhase.NONE)).startswith(" -0044-03-15 ")


def test_render_overlays():
    rows = (DayRow(CalendarDate(2025, 1, 1), MoonPhase.NONE),)
    frame = Frame(
        rows=rows,
        center=CalendarDate(2025, 1, 1),
        prompt=PromptState(PromptMode.EDITING, "2025", True),
        prompt_text=" 2025-MM-DD",
        message="Invalid date: oops",
    )
    lines = render_frame(frame)
    assert lines[0] == "  2025-01-01  We      January"
    assert "Jump to:  2025-MM-DD" in lines
    assert lines[-1] == "Invalid date: oops"


def test_help_lines():
    lines = help_lines()
    assert lines[0] == "Commands:"
    assert lines[-1] == "Press any key to dismiss."
    assert len(lines) == 10
