"""
Tests for timing utilities and tolerance tiers.
"""

import pytest

from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.compute.tolerances import (
    EXACT,
    FP64,
    FP64_SERIES,
    select_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:
    """Timer records a total and per-phase times."""

    def test_result_has_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section('compute'):
            sum(range(100))
        timer.stop()
        result = timer.result()
        assert result['total_seconds'] >= 0.0
        assert 'compute' in result

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('decode'):
            pass
        first = timer.phases['decode']
        with timer.section('decode'):
            pass
        timer.stop()
        assert timer.result()['decode'] >= first

    def test_section_recorded_on_exception(self):
        timer = Timer()
        with pytest.raises(ValueError):
            with timer.section('compute'):
                raise ValueError("boom")
        assert 'compute' in timer.phases

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context_manager(self):
        with timed() as timer:
            pass
        assert timer.result()['total_seconds'] >= 0.0


# ═══════════════════════════════════════════════════════════════════════
# Tolerances
# ═══════════════════════════════════════════════════════════════════════


class TestTolerances:
    """Tolerance tiers and their selection per kind."""

    def test_exact_tier_is_zero(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0

    def test_series_looser_than_direct(self):
        assert FP64_SERIES.rtol > FP64.rtol

    def test_select_rational(self):
        assert select_tolerance('rational') is EXACT
        assert select_tolerance('rational', is_series=True) is EXACT

    def test_select_float(self):
        assert select_tolerance('float64') is FP64
        assert select_tolerance('float64', is_series=True) is FP64_SERIES
