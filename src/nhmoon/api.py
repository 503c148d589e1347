from __future__ import annotations

from typing import List, Optional

from .core.dates import to_ordinal
from .core.types import CalendarDate, MoonPhase
from .engines.controller import Controller
from .engines.moon import DEFAULT_MODEL, PhaseClassifier, PhaseModelRegistry
from .engines.viewport import Viewport

DEFAULT_ROWS = 24
_registry: Optional[PhaseModelRegistry] = None

def set_registry(reg: PhaseModelRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> PhaseModelRegistry:
    if _registry is None:
        raise RuntimeError("Phase model registry not initialized")
    return _registry

def list_phase_models() -> List[str]:
    return _reg().list()

def get_phase_model(name: str = DEFAULT_MODEL) -> PhaseClassifier:
    return _reg().get(name)

def register_phase_model(name: str, model: PhaseClassifier, *, overwrite: bool = False) -> None:
    _reg().register(name, model, overwrite=overwrite)

def phase_of(d: CalendarDate, *, model: str = DEFAULT_MODEL) -> MoonPhase:
    return _reg().get(model).phase_of(to_ordinal(d))

def make_controller(
    today: CalendarDate,
    *,
    start: Optional[CalendarDate] = None,
    rows: int = DEFAULT_ROWS,
    model: str = DEFAULT_MODEL,
) -> Controller:
    """Controller centered on `start` (default: `today`)."""
    viewport = Viewport(start if start is not None else today, rows)
    return Controller(viewport, today=today, phase_model=_reg().get(model))
