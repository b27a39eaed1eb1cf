"""
Interval variants for historically ambiguous positions.

Some tuning systems have two competing ratios at one semitone position
(e.g. the Pythagorean augmented 4th vs diminished 5th). For those
positions the caller offers a choice, and the chosen variant's ratio
replaces the table value. Every other position has no variants.
"""

from dataclasses import dataclass

from .enums import TuningSystem


@dataclass(frozen=True)
class IntervalVariant:
    """A single interval option at one position."""
    display_name: str      # Short label for a selector, e.g. "Aug 4th"
    ratio: float           # Frequency ratio relative to the root
    origin: str            # Mathematical origin, e.g. "3^6:2^9"


# position -> variants, per tuning system
_VARIANT_DATA = {
    TuningSystem.PYTHAGOREAN: {
        # F#/Gb: augmented 4th vs diminished 5th
        6: (
            IntervalVariant("Aug 4th", 1.424, "3^6:2^9"),
            IntervalVariant("Dim 5th", 1.405, "2^10:3^6"),
        ),
    },
    TuningSystem.JUST_INTONATION: {
        # D: lesser vs greater major second
        2: (
            IntervalVariant("Lesser Maj 2nd", 1.111, "10:9"),
            IntervalVariant("Greater Maj 2nd", 1.125, "9:8"),
        ),
        # A#/Bb: harmonic vs grave minor seventh
        10: (
            IntervalVariant("Harm Min 7th", 1.778, "16:9"),
            IntervalVariant("Grave Min 7th", 1.800, "9:5"),
        ),
    },
}


def get_interval_variants(tuning: TuningSystem) -> list[list[IntervalVariant]]:
    """
    Get the interval variants for each of the 12 positions.

    Returns a new list on every call. An empty list at a position means
    the tuning table ratio applies; a non-empty list means the caller
    must pick one of the variants.
    """
    by_position = _VARIANT_DATA.get(tuning, {})
    return [list(by_position.get(i, ())) for i in range(12)]


def has_variants(tuning: TuningSystem, position: int) -> bool:
    """True if the position offers a choice of ratios under this tuning."""
    return position in _VARIANT_DATA.get(tuning, {})
