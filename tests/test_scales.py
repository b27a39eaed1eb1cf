import pytest

from nano_tuning import Scale, get_scale_notes, scale_positions
from nano_tuning.scales import (
    AEOLIAN_SCALE, NATURAL_MINOR_SCALE, CHROMATIC_SCALE,
)


@pytest.mark.parametrize("scale", list(Scale))
def test_every_scale_contains_root(scale):
    mask = get_scale_notes(scale)
    assert len(mask) == 12
    assert mask[0] is True


def test_aeolian_matches_natural_minor():
    assert get_scale_notes(Scale.AEOLIAN) == get_scale_notes(Scale.NATURAL_MINOR)
    assert AEOLIAN_SCALE is NATURAL_MINOR_SCALE


def test_custom_and_unknown_fall_back_to_chromatic():
    assert get_scale_notes(Scale.CUSTOM) is CHROMATIC_SCALE
    assert get_scale_notes(99) is CHROMATIC_SCALE
    assert all(get_scale_notes(Scale.CUSTOM))


@pytest.mark.parametrize("scale, positions", [
    (Scale.MAJOR, [0, 2, 4, 5, 7, 9, 11]),
    (Scale.NATURAL_MINOR, [0, 2, 3, 5, 7, 8, 10]),
    (Scale.MAJOR_PENTATONIC, [0, 2, 4, 7, 9]),
    (Scale.MINOR_PENTATONIC, [0, 3, 5, 7, 10]),
    (Scale.DORIAN, [0, 2, 3, 5, 7, 9, 10]),
    (Scale.PHRYGIAN, [0, 1, 3, 5, 7, 8, 10]),
    (Scale.LYDIAN, [0, 2, 4, 6, 7, 9, 11]),
    (Scale.MIXOLYDIAN, [0, 2, 4, 5, 7, 9, 10]),
    (Scale.LOCRIAN, [0, 1, 3, 5, 6, 8, 10]),
    (Scale.HARMONIC_MINOR, [0, 2, 3, 5, 7, 8, 11]),
    (Scale.MELODIC_MINOR, [0, 2, 3, 5, 7, 9, 11]),
    (Scale.WHOLE_TONE, [0, 2, 4, 6, 8, 10]),
    (Scale.DIMINISHED, [0, 1, 3, 4, 6, 7, 9, 10]),
])
def test_scale_positions(scale, positions):
    assert scale_positions(scale) == positions


def test_chromatic_has_all_positions():
    assert scale_positions(Scale.CHROMATIC) == list(range(12))
