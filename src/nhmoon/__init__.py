"""nhmoon public API.

Scrollable calendar engine that highlights NetHack's new and full moons.
Keep this surface small: users should mostly interact with names re-exported here.
"""

__version__ = "0.1.0"

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_phase_models,
    get_phase_model,
    register_phase_model,
    phase_of,
    make_controller,
)
from .core.dates import (
    MIN_DATE,
    MAX_DATE,
    is_leap_year,
    days_in_month,
    make_date,
    to_ordinal,
    from_ordinal,
    add_days,
    parse_ymd,
    format_ymd,
)
from .core.errors import NhmoonError, InvalidDateError, OutOfRangeError, UnknownPhaseModelError
from .core.types import CalendarDate, Command, Digit, Direction, Frame, MoonPhase

__all__ = [
    "list_phase_models",
    "get_phase_model",
    "register_phase_model",
    "phase_of",
    "make_controller",
    "MIN_DATE",
    "MAX_DATE",
    "is_leap_year",
    "days_in_month",
    "make_date",
    "to_ordinal",
    "from_ordinal",
    "add_days",
    "parse_ymd",
    "format_ymd",
    "NhmoonError",
    "InvalidDateError",
    "OutOfRangeError",
    "UnknownPhaseModelError",
    "CalendarDate",
    "Command",
    "Digit",
    "Direction",
    "Frame",
    "MoonPhase",
]
