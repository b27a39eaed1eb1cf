"""
Enumerations for the nano rate section.

Integer values are what presets and host parameters store, so members
must never be renumbered or reordered.
"""

from enum import IntEnum


class NanoBase(IntEnum):
    """Root of the nano rate: tempo-synced, or one of the 12 pitch classes."""
    BPM_SYNCED = 0
    C = 1
    C_SHARP = 2
    D = 3
    D_SHARP = 4
    E = 5
    F = 6
    F_SHARP = 7
    G = 8
    G_SHARP = 9
    A = 10
    A_SHARP = 11
    B = 12

    @property
    def pitch_class(self) -> int:
        """Semitone index 0-11 (C = 0), or -1 for BPM_SYNCED."""
        return int(self) - 1


class TuningSystem(IntEnum):
    """Tuning systems. The three custom kinds hold user-entered ratios."""
    EQUAL_TEMPERAMENT = 0
    JUST_INTONATION = 1
    PYTHAGOREAN = 2
    QUARTER_COMMA_MEANTONE = 3
    CUSTOM_FRACTION = 4
    CUSTOM_DECIMAL = 5
    CUSTOM_SEMITONE = 6

    @property
    def is_custom(self) -> bool:
        return self in (TuningSystem.CUSTOM_FRACTION,
                        TuningSystem.CUSTOM_DECIMAL,
                        TuningSystem.CUSTOM_SEMITONE)


class Scale(IntEnum):
    """Scales that filter which nano rate positions are selectable."""
    CHROMATIC = 0
    MAJOR = 1
    NATURAL_MINOR = 2
    MAJOR_PENTATONIC = 3
    MINOR_PENTATONIC = 4
    DORIAN = 5
    PHRYGIAN = 6
    LYDIAN = 7
    MIXOLYDIAN = 8
    AEOLIAN = 9
    LOCRIAN = 10
    HARMONIC_MINOR = 11
    MELODIC_MINOR = 12
    WHOLE_TONE = 13
    DIMINISHED = 14
    CUSTOM = 15
