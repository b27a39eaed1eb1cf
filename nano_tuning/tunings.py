"""
Tuning ratio tables for the nano rate section.

Each table holds 12 frequency ratios, one per semitone above the root
(index 0 = unison). The values are literal constants rounded to three
decimals; they are not derived from 2^(n/12) or from the underlying
integer ratios, so Just Intonation and Pythagorean keep their published
rounding.
"""

import numpy as np
from numpy.typing import ArrayLike

from .enums import TuningSystem


# =============================================================================
# Ratio tables (12 ratios per tuning system)
# =============================================================================

# Equal Temperament: 2^(n/12), rounded
EQUAL_TEMPERAMENT_RATIOS = (
    1.0,        # C  (unison)
    1.059,      # C# (minor 2nd)
    1.122,      # D  (major 2nd)
    1.189,      # D# (minor 3rd)
    1.260,      # E  (major 3rd)
    1.335,      # F  (perfect 4th)
    1.414,      # F# (tritone)
    1.498,      # G  (perfect 5th)
    1.587,      # G# (minor 6th)
    1.682,      # A  (major 6th)
    1.782,      # A# (minor 7th)
    1.888,      # B  (major 7th)
)

# Just Intonation: 5-limit ratios with the lesser 2nd and harmonic 7th
JUST_INTONATION_RATIOS = (
    1.0,        # 1/1
    1.067,      # 16/15
    1.111,      # 10/9  (lesser major second)
    1.200,      # 6/5
    1.250,      # 5/4
    1.333,      # 4/3
    1.406,      # 45/32
    1.500,      # 3/2
    1.600,      # 8/5
    1.667,      # 5/3
    1.750,      # 7/4   (minor seventh)
    1.875,      # 15/8
)

# Pythagorean: stacked perfect fifths (3/2)
PYTHAGOREAN_RATIOS = (
    1.0,        # 1/1
    1.054,      # 2^8:3^5
    1.125,      # 3^2:2^3
    1.185,      # 2^5:3^3
    1.266,      # 3^4:2^6
    1.333,      # 2^2:3
    1.424,      # 3^6:2^9 (augmented 4th, default)
    1.500,      # 3:2
    1.580,      # 2^7:3^4
    1.688,      # 3^3:2^4
    1.778,      # 2^4:3^2
    1.898,      # 3^5:2^7
)

# Quarter-comma Meantone: fifths narrowed by 1/4 syntonic comma
QUARTER_COMMA_MEANTONE_RATIOS = (
    1.0,
    1.070,
    1.118,
    1.196,
    1.250,      # pure major third
    1.337,
    1.430,
    1.495,
    1.600,
    1.671,
    1.788,
    1.869,
)

# Custom kinds have no entry; they resolve to Equal Temperament until the
# caller substitutes its own table (see NanoRateConfig.custom_ratios).
TUNING_TABLES = {
    TuningSystem.EQUAL_TEMPERAMENT: EQUAL_TEMPERAMENT_RATIOS,
    TuningSystem.JUST_INTONATION: JUST_INTONATION_RATIOS,
    TuningSystem.PYTHAGOREAN: PYTHAGOREAN_RATIOS,
    TuningSystem.QUARTER_COMMA_MEANTONE: QUARTER_COMMA_MEANTONE_RATIOS,
}


def get_tuning_ratios(tuning: TuningSystem) -> tuple[float, ...]:
    """
    Get the 12 ratios for a tuning system.

    Never fails: custom kinds and unknown values get the Equal
    Temperament table.
    """
    return TUNING_TABLES.get(tuning, EQUAL_TEMPERAMENT_RATIOS)


# =============================================================================
# Cents utilities
# =============================================================================

def ratios_to_cents(ratios: ArrayLike) -> np.ndarray:
    """Convert frequency ratios to cents above the root."""
    return 1200.0 * np.log2(np.asarray(ratios, dtype=float))


def cents_deviation_from_equal(tuning: TuningSystem) -> np.ndarray:
    """
    Deviation of each position from 12-tone equal temperament, in cents.

    Measured against exact 100-cent steps, not against the rounded
    EQUAL_TEMPERAMENT_RATIOS table.
    """
    cents = ratios_to_cents(get_tuning_ratios(tuning))
    return cents - 100.0 * np.arange(12)
