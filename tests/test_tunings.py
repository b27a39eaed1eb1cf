import numpy as np
import pytest

from nano_tuning import (
    TuningSystem, get_tuning_ratios, ratios_to_cents, cents_deviation_from_equal,
    EQUAL_TEMPERAMENT_RATIOS, JUST_INTONATION_RATIOS, PYTHAGOREAN_RATIOS,
    QUARTER_COMMA_MEANTONE_RATIOS,
)


@pytest.mark.parametrize("tuning", list(TuningSystem))
def test_every_tuning_spans_one_octave(tuning):
    ratios = get_tuning_ratios(tuning)
    assert len(ratios) == 12
    assert ratios[0] == 1.0
    assert all(1.0 <= r < 2.0 for r in ratios)


@pytest.mark.parametrize("tuning", list(TuningSystem))
def test_ratios_strictly_increase(tuning):
    ratios = get_tuning_ratios(tuning)
    assert all(a < b for a, b in zip(ratios, ratios[1:]))


@pytest.mark.parametrize("tuning", [
    TuningSystem.CUSTOM_FRACTION,
    TuningSystem.CUSTOM_DECIMAL,
    TuningSystem.CUSTOM_SEMITONE,
])
def test_custom_tunings_fall_back_to_equal_temperament(tuning):
    assert get_tuning_ratios(tuning) is EQUAL_TEMPERAMENT_RATIOS


def test_unknown_value_falls_back_to_equal_temperament():
    assert get_tuning_ratios(42) is EQUAL_TEMPERAMENT_RATIOS


def test_raw_int_selects_table():
    assert get_tuning_ratios(2) is PYTHAGOREAN_RATIOS


def test_literal_constants_are_kept():
    # Rounded table values, not recomputed from the exact ratios
    assert JUST_INTONATION_RATIOS[2] == 1.111
    assert JUST_INTONATION_RATIOS[10] == 1.750
    assert PYTHAGOREAN_RATIOS[6] == 1.424
    assert QUARTER_COMMA_MEANTONE_RATIOS[4] == 1.250
    assert EQUAL_TEMPERAMENT_RATIOS[7] == 1.498


def test_lookup_is_stable():
    for tuning in TuningSystem:
        first = get_tuning_ratios(tuning)
        for _ in range(3):
            assert get_tuning_ratios(tuning) == first


def test_ratios_to_cents():
    cents = ratios_to_cents([1.0, 1.5, 2.0])
    assert cents[0] == 0.0
    assert cents[1] == pytest.approx(701.955, abs=1e-3)
    assert cents[2] == pytest.approx(1200.0)


def test_equal_temperament_deviation_is_rounding_only():
    deviation = cents_deviation_from_equal(TuningSystem.EQUAL_TEMPERAMENT)
    assert deviation.shape == (12,)
    assert np.all(np.abs(deviation) < 1.5)


def test_just_major_third_is_flat_of_equal():
    deviation = cents_deviation_from_equal(TuningSystem.JUST_INTONATION)
    assert deviation[4] == pytest.approx(-13.69, abs=0.01)
