"""
Nano Tuning

Tuning systems, scales and interval variants for the nano rate section
of a stutter effect. Maps the 12 nano rate positions above a root to
frequency ratios (Equal Temperament, Just Intonation, Pythagorean,
Quarter-comma Meantone), filters them through scales, and places the
root at an absolute frequency.

Quick start:
    from nano_tuning import TuningSystem, Scale, NanoBase
    from nano_tuning import get_tuning_ratios, get_scale_notes, get_note_frequency

    ratios = get_tuning_ratios(TuningSystem.JUST_INTONATION)
    print(ratios[7])                          # 1.5

    print(get_scale_notes(Scale.MAJOR))
    print(get_note_frequency(NanoBase.A))     # 55.0

    # Full nano rate selection
    from nano_tuning import NanoRateConfig
    config = NanoRateConfig.from_names('pythagorean', 'major', 'A',
                                       variant_choices={6: 1})
    print(config.summary())
"""

from .enums import (
    NanoBase,
    TuningSystem,
    Scale
)

from .tunings import (
    get_tuning_ratios,
    ratios_to_cents,
    cents_deviation_from_equal,
    TUNING_TABLES,
    EQUAL_TEMPERAMENT_RATIOS, JUST_INTONATION_RATIOS,
    PYTHAGOREAN_RATIOS, QUARTER_COMMA_MEANTONE_RATIOS
)

from .scales import (
    get_scale_notes,
    scale_positions,
    SCALE_MASKS
)

from .variants import (
    IntervalVariant,
    get_interval_variants,
    has_variants
)

from .notes import (
    NOTE_NAMES,
    get_note_name,
    get_nano_base_name,
    get_tuning_system_name,
    get_scale_name,
    get_note_frequency,
    note_to_frequency,
    frequency_to_note,
    parse_tuning_system,
    parse_scale,
    parse_nano_base
)

from .nano_rate import (
    NanoRateConfig,
    DEFAULT_NANO_RATIOS
)

__version__ = '0.1.0'

__all__ = [
    # Enumerations
    'NanoBase', 'TuningSystem', 'Scale',

    # Tuning catalog
    'get_tuning_ratios', 'ratios_to_cents', 'cents_deviation_from_equal',
    'TUNING_TABLES', 'EQUAL_TEMPERAMENT_RATIOS', 'JUST_INTONATION_RATIOS',
    'PYTHAGOREAN_RATIOS', 'QUARTER_COMMA_MEANTONE_RATIOS',

    # Scale catalog
    'get_scale_notes', 'scale_positions', 'SCALE_MASKS',

    # Interval variants
    'IntervalVariant', 'get_interval_variants', 'has_variants',

    # Notes and frequencies
    'NOTE_NAMES', 'get_note_name', 'get_nano_base_name',
    'get_tuning_system_name', 'get_scale_name', 'get_note_frequency',
    'note_to_frequency', 'frequency_to_note',
    'parse_tuning_system', 'parse_scale', 'parse_nano_base',

    # Nano rate
    'NanoRateConfig', 'DEFAULT_NANO_RATIOS',
]
