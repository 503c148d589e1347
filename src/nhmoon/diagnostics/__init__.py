"""Diagnostics package.

- round_trip: always available, stdlib only
- phase_agreement: needs the diagnostics extra (numpy, matplotlib for --plot)
"""

__all__ = ["round_trip", "phase_agreement"]
