from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys

_DATE_RE = re.compile(r"^[+-]?\d{4,}-\d{2}-\d{2}$")

# options whose value may itself look like a negative date
_VALUE_OPTIONS = ("--today",)

_DIAG_TOOLS = {
    "round-trip": "nhmoon.diagnostics.round_trip",
    "phase-agreement": "nhmoon.diagnostics.phase_agreement",
}


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _split_date_arg(argv: list[str]) -> tuple[list[str], str | None]:
    """
    Pull the positional date out of argv. argparse would treat '-0044-03-15'
    as an unknown option, so it never gets to see it.
    """
    rest: list[str] = []
    found = None
    prev = None
    for a in argv:
        if found is None and prev not in _VALUE_OPTIONS and _DATE_RE.match(a):
            found = a
        else:
            rest.append(a)
        prev = a
    return rest, found


def _today_from_clock():
    from .core.types import CalendarDate

    d = date.today()
    return CalendarDate(d.year, d.month, d.day)


def cmd_diag(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="nhmoon diag", description="Diagnostics tools")
    p.add_argument("tool", choices=sorted(_DIAG_TOOLS), help="Which diagnostic to run")
    args, rest = p.parse_known_args(argv)
    return _run_module_main(_DIAG_TOOLS[args.tool], rest)


def cmd_show(argv: list[str]) -> int:
    import nhmoon
    from .core.errors import InvalidDateError
    from .keymap import translate
    from .render import render_frame

    argv, date_arg = _split_date_arg(argv)

    p = argparse.ArgumentParser(
        prog="nhmoon",
        description="Scrollable terminal calendar highlighting NetHack's new & full moons",
        epilog="Negative (astronomical) years need an explicit sign, e.g. -0044-03-15.",
    )
    p.add_argument("date", nargs="?", help="[-]YYYY-MM-DD to center on (default: today)")
    p.add_argument("--rows", type=int, default=nhmoon.api.DEFAULT_ROWS, help="Number of visible days")
    p.add_argument("--phase-model", default="periodic", choices=nhmoon.list_phase_models())
    p.add_argument("--today", help="Override today's date ([-]YYYY-MM-DD; use --today=-YYYY-MM-DD for negative years)")
    p.add_argument("--keys", default="", help="Comma-separated key names to replay, e.g. 'j,j,g,2,0,2,5,0,1,0,1,enter'")
    p.add_argument("-v", "--verbose", action="store_true", help="Log engine state transitions to stderr")
    p.add_argument("-V", "--version", action="version", version=f"nhmoon {nhmoon.__version__}")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.rows <= 0:
        p.error("--rows must be positive")
    if date_arg and args.date:
        p.error("only one date may be given")

    try:
        today = nhmoon.parse_ymd(args.today) if args.today else _today_from_clock()
        date_arg = date_arg or args.date
        start = nhmoon.parse_ymd(date_arg) if date_arg else None
    except InvalidDateError as e:
        p.error(str(e))

    ctl = nhmoon.make_controller(today, start=start, rows=args.rows, model=args.phase_model)
    frame = ctl.frame()
    for key in (k.strip() for k in args.keys.split(",")):
        if not key:
            continue
        frame = ctl.dispatch(translate(key, editing=ctl.prompt.editing))
        if frame.quit:
            break

    for line in render_frame(frame):
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "diag":
        return cmd_diag(argv[1:])

    return cmd_show(argv)


if __name__ == "__main__":
    raise SystemExit(main())
