"""
Note names and frequency helpers for the nano rate section.

Root placement always uses 12-tone equal temperament from A1 = 55 Hz,
whatever tuning system is selected; tuning tables only shape the
intervals above the chosen root.
"""

import numpy as np

from .enums import NanoBase, TuningSystem, Scale


# =============================================================================
# Display names
# =============================================================================

NOTE_NAMES = ['C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B']

NANO_BASE_NAMES = {
    NanoBase.BPM_SYNCED: "BPM Synced",
    **{NanoBase(i + 1): name for i, name in enumerate(NOTE_NAMES)},
}

TUNING_SYSTEM_NAMES = {
    TuningSystem.EQUAL_TEMPERAMENT: "Equal Temperament",
    TuningSystem.JUST_INTONATION: "Just Intonation",
    TuningSystem.PYTHAGOREAN: "Pythagorean",
    TuningSystem.QUARTER_COMMA_MEANTONE: "Quarter-comma Meantone",
    TuningSystem.CUSTOM_FRACTION: "Custom (Fraction)",
    TuningSystem.CUSTOM_DECIMAL: "Custom (Decimal)",
    TuningSystem.CUSTOM_SEMITONE: "Custom (Semitone)",
}

SCALE_NAMES = {
    Scale.CHROMATIC: "Chromatic",
    Scale.MAJOR: "Major",
    Scale.NATURAL_MINOR: "Natural Minor",
    Scale.MAJOR_PENTATONIC: "Major Pentatonic",
    Scale.MINOR_PENTATONIC: "Minor Pentatonic",
    Scale.DORIAN: "Dorian",
    Scale.PHRYGIAN: "Phrygian",
    Scale.LYDIAN: "Lydian",
    Scale.MIXOLYDIAN: "Mixolydian",
    Scale.AEOLIAN: "Aeolian",
    Scale.LOCRIAN: "Locrian",
    Scale.HARMONIC_MINOR: "Harmonic Minor",
    Scale.MELODIC_MINOR: "Melodic Minor",
    Scale.WHOLE_TONE: "Whole Tone",
    Scale.DIMINISHED: "Diminished",
    Scale.CUSTOM: "Custom",
}


def get_nano_base_name(base: NanoBase) -> str:
    return NANO_BASE_NAMES.get(base, "BPM Synced")


def get_tuning_system_name(tuning: TuningSystem) -> str:
    return TUNING_SYSTEM_NAMES.get(tuning, "Equal Temperament")


def get_scale_name(scale: Scale) -> str:
    return SCALE_NAMES.get(scale, "Chromatic")


def get_note_name(semitone_index: int) -> str:
    """Sharp-spelled name for a semitone index 0-11, "?" outside that range."""
    if 0 <= semitone_index < 12:
        return NOTE_NAMES[semitone_index]
    return "?"


# =============================================================================
# Root frequency
# =============================================================================

A1_FREQ = 55.0           # Reference for nano roots (two octaves below A3)
A_INDEX = NOTE_NAMES.index('A')


def get_note_frequency(base: NanoBase) -> float:
    """
    Frequency of the nano root in Hz, in the octave starting at C1.

    Returns 0.0 for BPM_SYNCED: the frequency then comes from the tempo.
    C is 9 semitones below A1, so C -> 55 * 2^(-9/12) ~ 32.70 Hz.
    """
    if base == NanoBase.BPM_SYNCED:
        return 0.0

    semitones_from_a1 = (int(base) - 1) - A_INDEX
    return A1_FREQ * 2 ** (semitones_from_a1 / 12)


# =============================================================================
# Octave-qualified note strings (A4 = 440 Hz, i.e. A1 = 55 Hz)
# =============================================================================

def note_to_frequency(note: str) -> float:
    """
    Convert note name to frequency.

    Examples: 'A4' = 440 Hz, 'A1' = 55 Hz, 'F#3' = 185 Hz, 'Bb2' = 116.54 Hz
    """
    note = note.strip()
    letter = note[:1].upper()
    if letter not in NOTE_NAMES:
        raise ValueError(f"Invalid note '{note}'. Expected e.g. 'A4', 'C#3', 'Bb2'")

    idx = NOTE_NAMES.index(letter)
    rest = note[1:]
    if rest.startswith('#'):
        idx += 1
        rest = rest[1:]
    elif rest.startswith('b') and len(rest) > 1:
        idx -= 1
        rest = rest[1:]

    try:
        octave = int(rest)
    except ValueError:
        raise ValueError(f"Invalid octave in note '{note}'") from None

    semitones = idx - A_INDEX + (octave - 4) * 12
    return 440.0 * (2 ** (semitones / 12))


def frequency_to_note(freq: float) -> tuple[str, float]:
    """
    Convert frequency to nearest note name and cents deviation.

    Returns:
        (note_name, cents_off) - e.g. ('A1', -5.2)
    """
    if freq <= 0:
        raise ValueError(f"Frequency must be positive, got {freq}")

    semitones = 12 * np.log2(freq / 440.0)
    semitones_rounded = int(round(semitones))
    cents = float((semitones - semitones_rounded) * 100)

    total_idx = A_INDEX + semitones_rounded
    octave = 4 + total_idx // 12
    note_idx = total_idx % 12

    return f"{NOTE_NAMES[note_idx]}{octave}", cents


# =============================================================================
# Lookup by name
# =============================================================================

def _key(name: str) -> str:
    return (name.strip().lower()
            .replace("(", "").replace(")", "")
            .replace(" ", "_").replace("-", "_"))


TUNING_SYSTEM_ALIASES = {
    **{member.name.lower(): member for member in TuningSystem},
    **{_key(label): member for member, label in TUNING_SYSTEM_NAMES.items()},
    "et": TuningSystem.EQUAL_TEMPERAMENT,
    "12edo": TuningSystem.EQUAL_TEMPERAMENT,
    "12_edo": TuningSystem.EQUAL_TEMPERAMENT,
    "ji": TuningSystem.JUST_INTONATION,
    "just": TuningSystem.JUST_INTONATION,
    "pythag": TuningSystem.PYTHAGOREAN,
    "meantone": TuningSystem.QUARTER_COMMA_MEANTONE,
}

SCALE_ALIASES = {
    **{member.name.lower(): member for member in Scale},
    **{_key(label): member for member, label in SCALE_NAMES.items()},
    "minor": Scale.NATURAL_MINOR,
    "ionian": Scale.MAJOR,
    "half_whole": Scale.DIMINISHED,
}

_FLATS = {'db': 'c#', 'eb': 'd#', 'gb': 'f#', 'ab': 'g#', 'bb': 'a#'}

NANO_BASE_ALIASES = {
    **{member.name.lower(): member for member in NanoBase},
    **{_key(label): member for member, label in NANO_BASE_NAMES.items()},
    **{flat: NanoBase(NOTE_NAMES.index(sharp.upper()) + 1)
       for flat, sharp in _FLATS.items()},
    "bpm": NanoBase.BPM_SYNCED,
    "sync": NanoBase.BPM_SYNCED,
}


def _lookup(name: str, aliases: dict, kind: str):
    key = _key(name)
    if key not in aliases:
        available = ", ".join(sorted(aliases))
        raise ValueError(f"Unknown {kind} '{name}'. Available: {available}")
    return aliases[key]


def parse_tuning_system(name: str) -> TuningSystem:
    """Get tuning system by enum name, display name or alias (case-insensitive)."""
    return _lookup(name, TUNING_SYSTEM_ALIASES, "tuning system")


def parse_scale(name: str) -> Scale:
    """Get scale by enum name, display name or alias (case-insensitive)."""
    return _lookup(name, SCALE_ALIASES, "scale")


def parse_nano_base(name: str) -> NanoBase:
    """Get nano base by note name ('C#', 'Db'), enum name or 'bpm'."""
    return _lookup(name, NANO_BASE_ALIASES, "nano base")
