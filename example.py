"""
Example: Build a nano rate table with all available controls.

This file demonstrates every selection the nano rate section offers.
Adjust the values below to suit your patch.
"""

from nano_tuning import (
    NanoRateConfig, TuningSystem, Scale, NanoBase,
    get_interval_variants, get_tuning_system_name, DEFAULT_NANO_RATIOS
)


# =========================================================================
# Tuning system
# =========================================================================
# Built-in: equal_temperament, just_intonation, pythagorean,
#           quarter_comma_meantone
# Custom:   custom_fraction, custom_decimal, custom_semitone
#           (use custom_ratios below; Equal Temperament otherwise)

tuning = TuningSystem.JUST_INTONATION


# =========================================================================
# Interval variants
# =========================================================================
# Some positions have two historical ratios.  Pick one by index:
#   Just Intonation  pos 2:  0 = Lesser Maj 2nd (10:9), 1 = Greater Maj 2nd (9:8)
#                    pos 10: 0 = Harm Min 7th (16:9),   1 = Grave Min 7th (9:5)
#   Pythagorean      pos 6:  0 = Aug 4th (3^6:2^9),     1 = Dim 5th (2^10:3^6)
# Positions left out keep the tuning table value.

variant_choices = {2: 1, 10: 0}


# =========================================================================
# Scale and root
# =========================================================================
# The scale only restricts which positions are selectable.
# The root is either a pitch class (C1 octave, A = 55 Hz) or BPM_SYNCED,
# in which case the base rate comes from the tempo and nano_tune.

scale = Scale.DORIAN
base = NanoBase.D

config = NanoRateConfig(
    tuning=tuning,
    scale=scale,
    base=base,
    variant_choices=variant_choices,
)


if __name__ == '__main__':
    print(config.summary())

    # Options available in the chosen tuning
    print(f"\nVariants in {get_tuning_system_name(tuning)}:")
    for position, options in enumerate(get_interval_variants(tuning)):
        for i, v in enumerate(options):
            print(f"  pos {position} [{i}] {v.display_name:<16} {v.ratio:.3f}  {v.origin}")

    # Tempo-synced with a custom table seeded from the defaults
    custom = list(DEFAULT_NANO_RATIOS)
    custom[7] = 1.5                     # pure fifth
    synced = NanoRateConfig(
        tuning=TuningSystem.CUSTOM_DECIMAL,
        scale=Scale.MAJOR_PENTATONIC,
        base=NanoBase.BPM_SYNCED,
        nano_tune=1.25,
        custom_ratios=tuple(custom),
    )
    print("\n" + synced.summary(bpm=120.0))
    print("Slice denominators at 120 BPM:")
    for position in synced.selectable_positions():
        print(f"  pos {position}: 1/{synced.equivalent_denominators(120.0)[position]:.2f}")
