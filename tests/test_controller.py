# tests/test_controller.py

import dataclasses

import pytest

import nhmoon
from nhmoon.core.dates import MAX_DATE, to_ordinal
from nhmoon.core.types import CalendarDate, Command, Digit, MoonPhase, PromptMode
from nhmoon.engines.controller import Controller, Mode
from nhmoon.engines.viewport import Viewport

TODAY = CalendarDate(2025, 1, 22)


def make(center=CalendarDate(2025, 2, 4), rows=7, **kw):
    return Controller(Viewport(center, rows), today=TODAY, **kw)


def type_date(ctl, digits):
    ctl.dispatch(Command.OPEN_PROMPT)
    frame = None
    for ch in digits:
        frame = ctl.dispatch(Digit(int(ch)))
    return frame


def test_end_to_end_scroll():
    ctl = make()
    f0 = ctl.frame()
    assert f0.center == CalendarDate(2025, 2, 4)
    f1 = ctl.dispatch(Command.SCROLL_WEEK_DOWN)
    assert f1.center == CalendarDate(2025, 2, 11)
    assert [to_ordinal(d) for d in f1.dates()] == [to_ordinal(d) + 7 for d in f0.dates()]
    f2 = ctl.dispatch(Command.SCROLL_PAGE_UP)
    assert f2.center == CalendarDate(2025, 2, 4)
    assert f2.dates() == f0.dates()
    assert not f2.bell and not f2.quit


def test_frame_phases_and_today():
    ctl = make(center=CalendarDate(2025, 1, 22), rows=21)
    frame = ctl.frame()
    model = nhmoon.get_phase_model("periodic")
    assert len(frame.rows) == 21
    for row in frame.rows:
        assert row.phase is model.phase_of(to_ordinal(row.date))
        assert row.is_today == (row.date == TODAY)
    assert sum(r.is_today for r in frame.rows) == 1
    assert frame.prompt.mode is PromptMode.CLOSED
    assert frame.prompt_text is None


def test_frame_is_immutable():
    frame = make().frame()
    with pytest.raises(dataclasses.FrozenInstanceError):
        frame.quit = True
    assert isinstance(frame.rows, tuple)


def test_injected_phase_model():
    class AlwaysNew:
        def phase_of(self, ordinal):
            return MoonPhase.NEW

    ctl = make(phase_model=AlwaysNew())
    assert {r.phase for r in ctl.frame().rows} == {MoonPhase.NEW}


def test_prompt_commit_jumps():
    ctl = make()
    frame = type_date(ctl, "20250101")
    assert frame.prompt.mode is PromptMode.EDITING
    assert frame.prompt_text == " 2025-01-01"
    frame = ctl.dispatch(Command.COMMIT)
    assert frame.center == CalendarDate(2025, 1, 1)
    assert frame.prompt.mode is PromptMode.CLOSED
    assert ctl.mode is Mode.CALENDAR
    assert frame.message is None


def test_prompt_rejects_and_closes():
    ctl = make()
    type_date(ctl, "20251301")
    frame = ctl.dispatch(Command.COMMIT)
    assert frame.center == CalendarDate(2025, 2, 4)
    assert frame.bell
    assert frame.message.startswith("Invalid date")
    assert ctl.mode is Mode.CALENDAR
    # the notice lasts one frame
    assert ctl.dispatch(Command.SCROLL_WEEK_DOWN).message is None


def test_viewport_frozen_while_editing():
    ctl = make()
    ctl.dispatch(Command.OPEN_PROMPT)
    frame = ctl.dispatch(Command.SCROLL_WEEK_DOWN)
    assert frame.bell
    assert frame.center == CalendarDate(2025, 2, 4)
    frame = ctl.dispatch(Command.QUIT)
    assert not frame.quit
    assert ctl.mode is Mode.PROMPT


def test_cancel_leaves_date():
    ctl = make()
    type_date(ctl, "1999")
    frame = ctl.dispatch(Command.CANCEL)
    assert frame.center == CalendarDate(2025, 2, 4)
    assert frame.prompt_text is None
    ctl.dispatch(Command.OPEN_PROMPT)
    frame = ctl.dispatch(Command.OPEN_PROMPT)
    assert ctl.mode is Mode.CALENDAR


def test_help_dismissed_by_any_key():
    ctl = make()
    assert ctl.dispatch(Command.SHOW_HELP).help_visible
    frame = ctl.dispatch(Command.SCROLL_WEEK_DOWN)
    assert not frame.help_visible
    assert frame.center == CalendarDate(2025, 2, 4)
    ctl.dispatch(Command.SHOW_HELP)
    frame = ctl.dispatch(None)
    assert not frame.help_visible and not frame.bell


def test_jump_today_uses_supplied_date():
    ctl = make()
    frame = ctl.dispatch(Command.JUMP_TODAY)
    assert frame.center == TODAY
    frame = ctl.dispatch(Command.JUMP_TODAY, today=CalendarDate(2026, 10, 19))
    assert frame.center == CalendarDate(2026, 10, 19)
    assert ctl.today == CalendarDate(2026, 10, 19)


def test_bell_on_unbound_key_and_boundary():
    ctl = make()
    assert ctl.dispatch(None).bell
    assert ctl.dispatch(Command.COMMIT).bell
    ctl = make(center=MAX_DATE)
    frame = ctl.dispatch(Command.SCROLL_PAGE_DOWN)
    assert frame.bell
    assert frame.center == MAX_DATE
    assert frame.dates()[-1] == MAX_DATE


def test_quit_is_terminal():
    ctl = make()
    frame = ctl.dispatch(Command.QUIT)
    assert frame.quit and ctl.quitting
    frame = ctl.dispatch(Command.SCROLL_WEEK_DOWN)
    assert frame.quit
    assert frame.center == CalendarDate(2025, 2, 4)


def test_make_controller_api():
    ctl = nhmoon.make_controller(TODAY, rows=5, model="nethack")
    assert ctl.viewport.center == TODAY
    assert isinstance(ctl.phase_model, nhmoon.engines.moon.NetHackPhaseModel)
    ctl = nhmoon.make_controller(TODAY, start=CalendarDate(2000, 1, 1))
    assert len(ctl.frame().rows) == nhmoon.api.DEFAULT_ROWS
    with pytest.raises(nhmoon.UnknownPhaseModelError):
        nhmoon.make_controller(TODAY, model="nope")


def test_phase_of_api():
    assert nhmoon.phase_of(CalendarDate(2025, 1, 16)) is MoonPhase.FULL
    assert nhmoon.phase_of(CalendarDate(2025, 1, 14), model="nethack") is MoonPhase.FULL
    assert nhmoon.list_phase_models() == ["nethack", "periodic"]
