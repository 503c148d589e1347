# tests/test_diagnostics.py

import pytest

from nhmoon.diagnostics import phase_agreement, round_trip


def test_round_trip_tool():
    assert round_trip.edge_test() == 0
    assert round_trip.main(["--N", "500", "--seed", "1"]) == 0


def test_phase_agreement_series():
    np = pytest.importorskip("numpy")
    years, agree, lit_p, lit_n = phase_agreement.build_series(np, 2024, 2026)
    assert list(years) == [2024, 2025, 2026]
    assert np.all((agree > 0.5) & (agree <= 1.0))
    # roughly two highlighted events of 3-4 days per lunation
    assert np.all((lit_p > 70) & (lit_p < 110))
    assert np.all((lit_n > 70) & (lit_n < 110))


def test_phase_agreement_main(capsys):
    pytest.importorskip("numpy")
    assert phase_agreement.main(["--start-year", "2025", "--end-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "mean agreement" in out
