"""
nhmoon.engines.moon
-------------------
Day classifiers for the highlighted events (new and full moon).

Every classifier maps an ordinal (Julian Day Number) to a MoonPhase. The
Controller only ever sees the PhaseClassifier protocol, so alternate
criteria can be registered without touching the Viewport or the prompt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Dict, List, Protocol

from ..core.dates import day_of_year, from_ordinal, to_ordinal
from ..core.errors import UnknownPhaseModelError
from ..core.types import CalendarDate, MoonPhase


class PhaseClassifier(Protocol):
    def phase_of(self, ordinal: int) -> MoonPhase: ...


@dataclass(frozen=True)
class PeriodicPhaseModel:
    """
    Fixed-epoch periodic model.

    epoch:  ordinal of a full-moon day
    period: synodic period in days (exact rational)
    window: half-width of the highlighted window around full and new moon

    x = (ordinal - epoch) mod period lies in [0, period). FULL covers the
    window around x = 0, NEW the window around x = period/2.
    """
    epoch: int
    period: Fraction
    window: Fraction

    def __post_init__(self) -> None:
        if self.period <= 0:
            raise ValueError("period must be positive")
        if not 0 < self.window <= self.period / 4:
            raise ValueError("window must be in (0, period/4]")

    @property
    def cycle_days(self) -> int:
        """Smallest whole number of days after which the classification repeats."""
        return Fraction(self.period).numerator

    def offset(self, ordinal: int) -> Fraction:
        return Fraction(ordinal - self.epoch) % self.period

    def phase_of(self, ordinal: int) -> MoonPhase:
        x = self.offset(ordinal)
        if x < self.window or x >= self.period - self.window:
            return MoonPhase.FULL
        half = self.period / 2
        if half - self.window <= x < half + self.window:
            return MoonPhase.NEW
        return MoonPhase.NONE


# NetHack works in sixths of a day on a 177-unit (29.5 day) cycle and lights
# 22 units (11/3 days) around each event.
NETHACK_PERIOD = Fraction(177, 6)
NETHACK_WINDOW = Fraction(11, 6)
# Full moon in NetHack's cycle, January 2025.
NETHACK_EPOCH = to_ordinal(CalendarDate(2025, 1, 16))


def default_periodic_model() -> PeriodicPhaseModel:
    return PeriodicPhaseModel(epoch=NETHACK_EPOCH, period=NETHACK_PERIOD, window=NETHACK_WINDOW)


@dataclass(frozen=True)
class NetHackPhaseModel:
    """
    NetHack's phase_of_the_moon(): golden number and epact of the year plus
    the zero-based day of year. Index 0 is new, 4 is full.

    The cycle restarts every year, so unlike PeriodicPhaseModel this is not
    a purely periodic function of the ordinal. Years before 1900 use floored
    modulo, which keeps the golden number in 1..19.
    """

    @staticmethod
    def phase_index(ordinal: int) -> int:
        d = from_ordinal(ordinal)
        goldn = (d.year - 1900) % 19 + 1
        epact = (11 * goldn + 18) % 30
        if (epact == 25 and goldn > 11) or epact == 24:
            epact += 1
        return ((((day_of_year(d) - 1 + epact) * 6) + 11) % 177 // 22) & 7

    def phase_of(self, ordinal: int) -> MoonPhase:
        i = self.phase_index(ordinal)
        if i == 0:
            return MoonPhase.NEW
        if i == 4:
            return MoonPhase.FULL
        return MoonPhase.NONE


@dataclass
class PhaseModelRegistry:
    _models: Dict[str, PhaseClassifier] = field(default_factory=dict)

    def get(self, name: str) -> PhaseClassifier:
        if name not in self._models:
            raise UnknownPhaseModelError(f"Unknown phase model '{name}'. Available: {sorted(self._models)}")
        return self._models[name]

    def list(self) -> List[str]:
        return sorted(self._models.keys())

    def register(self, name: str, model: PhaseClassifier, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._models):
            raise KeyError(f"Phase model '{name}' already exists. Use overwrite=True to replace.")
        self._models[name] = model


DEFAULT_MODEL = "periodic"


def build_registry() -> PhaseModelRegistry:
    reg = PhaseModelRegistry()
    reg.register("periodic", default_periodic_model())
    reg.register("nethack", NetHackPhaseModel())
    return reg
