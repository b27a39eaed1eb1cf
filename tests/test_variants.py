import dataclasses

import pytest

from nano_tuning import TuningSystem, IntervalVariant, get_interval_variants, has_variants


def variant_positions(tuning):
    return [i for i, options in enumerate(get_interval_variants(tuning)) if options]


def test_pythagorean_tritone_variants():
    variants = get_interval_variants(TuningSystem.PYTHAGOREAN)
    assert len(variants) == 12
    assert variant_positions(TuningSystem.PYTHAGOREAN) == [6]
    assert [v.display_name for v in variants[6]] == ["Aug 4th", "Dim 5th"]
    assert [v.ratio for v in variants[6]] == [1.424, 1.405]
    assert variants[6][1].origin == "2^10:3^6"


def test_just_intonation_variants():
    variants = get_interval_variants(TuningSystem.JUST_INTONATION)
    assert variant_positions(TuningSystem.JUST_INTONATION) == [2, 10]
    assert len(variants[2]) == 2
    assert len(variants[10]) == 2
    assert variants[2][0] == IntervalVariant("Lesser Maj 2nd", 1.111, "10:9")
    assert variants[2][1] == IntervalVariant("Greater Maj 2nd", 1.125, "9:8")
    assert variants[10][0] == IntervalVariant("Harm Min 7th", 1.778, "16:9")
    assert variants[10][1] == IntervalVariant("Grave Min 7th", 1.800, "9:5")


@pytest.mark.parametrize("tuning", [
    TuningSystem.EQUAL_TEMPERAMENT,
    TuningSystem.QUARTER_COMMA_MEANTONE,
    TuningSystem.CUSTOM_FRACTION,
    TuningSystem.CUSTOM_DECIMAL,
    TuningSystem.CUSTOM_SEMITONE,
])
def test_other_tunings_have_no_variants(tuning):
    variants = get_interval_variants(tuning)
    assert len(variants) == 12
    assert all(options == [] for options in variants)


def test_each_call_returns_fresh_lists():
    first = get_interval_variants(TuningSystem.PYTHAGOREAN)
    first[6].clear()
    first[0].append("junk")

    second = get_interval_variants(TuningSystem.PYTHAGOREAN)
    assert len(second[6]) == 2
    assert second[0] == []


def test_variants_are_immutable():
    variant = get_interval_variants(TuningSystem.PYTHAGOREAN)[6][0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        variant.ratio = 2.0


def test_has_variants():
    assert has_variants(TuningSystem.JUST_INTONATION, 10)
    assert not has_variants(TuningSystem.JUST_INTONATION, 6)
    assert not has_variants(TuningSystem.EQUAL_TEMPERAMENT, 6)
