"""
Scale definitions for the nano rate section.

A scale is a 12-entry mask over semitone positions above the root;
True marks a position that belongs to the scale. The root (position 0)
is a member of every scale.
"""

from .enums import Scale


# =============================================================================
# Scale masks
# =============================================================================

CHROMATIC_SCALE = (True,) * 12

# W-W-H-W-W-W-H (C D E F G A B)
MAJOR_SCALE = (
    True, False, True, False, True, True, False, True, False, True, False, True
)

# W-H-W-W-H-W-W (C D D# F G G# A#)
NATURAL_MINOR_SCALE = (
    True, False, True, True, False, True, False, True, True, False, True, False
)

# C D E G A
MAJOR_PENTATONIC_SCALE = (
    True, False, True, False, True, False, False, True, False, True, False, False
)

# C D# F G A#
MINOR_PENTATONIC_SCALE = (
    True, False, False, True, False, True, False, True, False, False, True, False
)

# W-H-W-W-W-H-W (C D D# F G A A#)
DORIAN_SCALE = (
    True, False, True, True, False, True, False, True, False, True, True, False
)

# H-W-W-W-H-W-W (C C# D# F G G# A#)
PHRYGIAN_SCALE = (
    True, True, False, True, False, True, False, True, True, False, True, False
)

# W-W-W-H-W-W-H (C D E F# G A B)
LYDIAN_SCALE = (
    True, False, True, False, True, False, True, True, False, True, False, True
)

# W-W-H-W-W-H-W (C D E F G A A#)
MIXOLYDIAN_SCALE = (
    True, False, True, False, True, True, False, True, False, True, True, False
)

# Same mode as natural minor; must stay the same object
AEOLIAN_SCALE = NATURAL_MINOR_SCALE

# H-W-W-H-W-W-W (C C# D# F F# G# A#)
LOCRIAN_SCALE = (
    True, True, False, True, False, True, True, False, True, False, True, False
)

# W-H-W-W-H-W+H-H (C D D# F G G# B)
HARMONIC_MINOR_SCALE = (
    True, False, True, True, False, True, False, True, True, False, False, True
)

# W-H-W-W-W-W-H (C D D# F G A B)
MELODIC_MINOR_SCALE = (
    True, False, True, True, False, True, False, True, False, True, False, True
)

# C D E F# G# A#
WHOLE_TONE_SCALE = (
    True, False, True, False, True, False, True, False, True, False, True, False
)

# Half-whole: C C# D# E F# G A A#
DIMINISHED_SCALE = (
    True, True, False, True, True, False, True, True, False, True, True, False
)

SCALE_MASKS = {
    Scale.CHROMATIC: CHROMATIC_SCALE,
    Scale.MAJOR: MAJOR_SCALE,
    Scale.NATURAL_MINOR: NATURAL_MINOR_SCALE,
    Scale.MAJOR_PENTATONIC: MAJOR_PENTATONIC_SCALE,
    Scale.MINOR_PENTATONIC: MINOR_PENTATONIC_SCALE,
    Scale.DORIAN: DORIAN_SCALE,
    Scale.PHRYGIAN: PHRYGIAN_SCALE,
    Scale.LYDIAN: LYDIAN_SCALE,
    Scale.MIXOLYDIAN: MIXOLYDIAN_SCALE,
    Scale.AEOLIAN: AEOLIAN_SCALE,
    Scale.LOCRIAN: LOCRIAN_SCALE,
    Scale.HARMONIC_MINOR: HARMONIC_MINOR_SCALE,
    Scale.MELODIC_MINOR: MELODIC_MINOR_SCALE,
    Scale.WHOLE_TONE: WHOLE_TONE_SCALE,
    Scale.DIMINISHED: DIMINISHED_SCALE,
}


def get_scale_notes(scale: Scale) -> tuple[bool, ...]:
    """Get the membership mask for a scale (Custom and unknown -> Chromatic)."""
    return SCALE_MASKS.get(scale, CHROMATIC_SCALE)


def scale_positions(scale: Scale) -> list[int]:
    """Semitone positions (0-11) that belong to the scale."""
    return [i for i, active in enumerate(get_scale_notes(scale)) if active]
