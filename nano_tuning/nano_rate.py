"""
Nano rate configuration.

Combines a tuning system, a scale, a root and the per-position variant
choices into the set of ratios the stutter engine picks from, and turns
those ratios into frequencies and slice durations.

Tempo-synced roots derive their base rate from the host tempo: one
nano step is a 64th note at nano_tune = 1, i.e. 16 * bpm / 60 Hz.
"""

import warnings
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .enums import NanoBase, TuningSystem, Scale
from .tunings import get_tuning_ratios, ratios_to_cents
from .scales import get_scale_notes
from .variants import IntervalVariant, get_interval_variants
from .notes import (
    get_note_frequency, get_note_name, get_nano_base_name,
    get_tuning_system_name, get_scale_name, frequency_to_note,
    parse_tuning_system, parse_scale, parse_nano_base,
)


# =============================================================================
# Parameter ranges
# =============================================================================

NANO_TUNE_MIN = 0.75
NANO_TUNE_MAX = 2.0
CUSTOM_RATIO_MIN = 0.1
CUSTOM_RATIO_MAX = 2.0

NANO_STEPS_PER_BEAT = 16     # 64th notes

# Seed values for the editable ratio parameters
DEFAULT_NANO_RATIOS = tuple(2.0 ** (i / 12) for i in range(12))


@dataclass
class NanoRateConfig:
    """User selections for the nano rate section."""
    tuning: TuningSystem = TuningSystem.EQUAL_TEMPERAMENT
    scale: Scale = Scale.CHROMATIC
    base: NanoBase = NanoBase.BPM_SYNCED
    nano_tune: float = 1.0                  # Tempo base multiplier (0.75-2.0)
    variant_choices: dict[int, int] = field(default_factory=dict)  # position -> variant index
    custom_ratios: Optional[tuple[float, ...]] = None  # Only used by custom tunings

    def __post_init__(self):
        self.tuning = TuningSystem(self.tuning)
        self.scale = Scale(self.scale)
        self.base = NanoBase(self.base)

        if not NANO_TUNE_MIN <= self.nano_tune <= NANO_TUNE_MAX:
            raise ValueError(
                f"nano_tune must be between {NANO_TUNE_MIN} and {NANO_TUNE_MAX}, "
                f"got {self.nano_tune}"
            )

        if self.custom_ratios is not None:
            ratios = tuple(float(r) for r in self.custom_ratios)
            if len(ratios) != 12:
                raise ValueError(f"custom_ratios needs 12 values, got {len(ratios)}")
            for i, r in enumerate(ratios):
                if not CUSTOM_RATIO_MIN <= r <= CUSTOM_RATIO_MAX:
                    raise ValueError(
                        f"custom ratio {i} ({get_note_name(i)}) = {r} is outside "
                        f"{CUSTOM_RATIO_MIN}-{CUSTOM_RATIO_MAX}"
                    )
            self.custom_ratios = ratios
            if not self.tuning.is_custom:
                warnings.warn(
                    f"custom_ratios ignored for {get_tuning_system_name(self.tuning)}",
                    UserWarning,
                )

        variants = get_interval_variants(self.tuning)
        for position in self.variant_choices:
            if 0 <= position < 12 and not variants[position]:
                warnings.warn(
                    f"{get_tuning_system_name(self.tuning)} has no variants at "
                    f"position {position} ({get_note_name(position)}); choice ignored",
                    UserWarning,
                )
        self.chosen_variants()

    @classmethod
    def from_names(cls, tuning: str = "equal_temperament", scale: str = "chromatic",
                   base: str = "bpm", **kwargs) -> 'NanoRateConfig':
        """Create config from tuning, scale and base names."""
        return cls(
            tuning=parse_tuning_system(tuning),
            scale=parse_scale(scale),
            base=parse_nano_base(base),
            **kwargs
        )

    # -------------------------------------------------------------------------
    # Ratios
    # -------------------------------------------------------------------------

    def base_ratios(self) -> tuple[float, ...]:
        """Ratio table before variant choices are applied."""
        if self.tuning.is_custom and self.custom_ratios is not None:
            return self.custom_ratios
        return get_tuning_ratios(self.tuning)

    def chosen_variants(self) -> dict[int, IntervalVariant]:
        """
        Variants picked in variant_choices, by position.

        Choices at positions without variants are skipped. Checked on
        every call, since variant_choices is a plain mutable dict.
        """
        variants = get_interval_variants(self.tuning)
        chosen = {}
        for position, choice in self.variant_choices.items():
            if not 0 <= position < 12:
                raise ValueError(f"Variant position must be 0-11, got {position}")
            options = variants[position]
            if not options:
                continue
            if not 0 <= choice < len(options):
                raise ValueError(
                    f"Variant index {choice} out of range for position {position}; "
                    f"choose 0-{len(options) - 1}"
                )
            chosen[position] = options[choice]
        return chosen

    def effective_ratios(self) -> np.ndarray:
        """
        Ratios actually used at each position.

        A chosen variant replaces the table value at its position; every
        other position keeps the table value.
        """
        ratios = np.array(self.base_ratios(), dtype=float)
        for position, variant in self.chosen_variants().items():
            ratios[position] = variant.ratio
        return ratios

    def selectable_positions(self) -> list[int]:
        """Positions the scale allows."""
        return [i for i, active in enumerate(get_scale_notes(self.scale)) if active]

    # -------------------------------------------------------------------------
    # Frequencies and timing
    # -------------------------------------------------------------------------

    def root_frequency(self) -> float:
        """Root frequency in Hz (0.0 when tempo-synced)."""
        return get_note_frequency(self.base)

    def tempo_frequency(self, bpm: float) -> float:
        """Base nano rate for tempo-synced mode, in Hz."""
        if bpm <= 0:
            raise ValueError(f"bpm must be positive, got {bpm}")
        return NANO_STEPS_PER_BEAT * bpm / 60.0 * self.nano_tune

    def nano_frequencies(self, bpm: Optional[float] = None) -> np.ndarray:
        """Nano rate in Hz for each of the 12 positions."""
        if self.base == NanoBase.BPM_SYNCED:
            if bpm is None:
                raise ValueError("bpm is required when the nano base is BPM synced")
            root = self.tempo_frequency(bpm)
        else:
            root = self.root_frequency()
        return root * self.effective_ratios()

    def slice_durations(self, bpm: Optional[float] = None) -> np.ndarray:
        """Length of one stutter slice in seconds for each position."""
        return 1.0 / self.nano_frequencies(bpm)

    def equivalent_denominators(self, bpm: float) -> np.ndarray:
        """
        Note-value denominators matching each slice (whole note = 1).

        A slice of a 64th note gives 64; fixed-pitch roots generally give
        non-integer values.
        """
        if bpm <= 0:
            raise ValueError(f"bpm must be positive, got {bpm}")
        return 240.0 / (bpm * self.slice_durations(bpm))

    def summary(self, bpm: Optional[float] = None) -> str:
        """Generate a human-readable summary."""
        lines = []
        lines.append("=" * 72)
        lines.append("NANO RATE")
        lines.append("=" * 72)
        lines.append(f"Tuning: {get_tuning_system_name(self.tuning)}")
        lines.append(f"Scale:  {get_scale_name(self.scale)}")
        if self.base == NanoBase.BPM_SYNCED:
            lines.append(f"Base:   {get_nano_base_name(self.base)} (nano tune {self.nano_tune:.3f})")
        else:
            lines.append(f"Base:   {get_nano_base_name(self.base)} ({self.root_frequency():.2f} Hz)")
        lines.append("")

        ratios = self.effective_ratios()
        cents = ratios_to_cents(ratios)
        in_scale = get_scale_notes(self.scale)
        variants = get_interval_variants(self.tuning)
        chosen = self.chosen_variants()

        show_freq = self.base != NanoBase.BPM_SYNCED or bpm is not None
        if show_freq:
            freqs = self.nano_frequencies(bpm)
            durations_ms = 1000.0 / freqs

        header = f"  {'Pos':<4} {'Note':<5} {'Ratio':>7} {'Cents':>8}"
        rule = f"  {'-'*4} {'-'*5} {'-'*7} {'-'*8}"
        if show_freq:
            header += f" {'Freq (Hz)':>10} {'Slice ms':>9} {'Nearest':>12}"
            rule += f" {'-'*10} {'-'*9} {'-'*12}"
        lines.append(header)
        lines.append(rule)

        for i in range(12):
            row = f"  {i:<4} {get_note_name(i):<5} {ratios[i]:>7.3f} {cents[i]:>8.1f}"
            if show_freq:
                note, off = frequency_to_note(freqs[i])
                row += f" {freqs[i]:>10.2f} {durations_ms[i]:>9.3f} {note:>5} {off:>+5.0f}¢"
            if not in_scale[i]:
                row += "  (not in scale)"
            if i in chosen:
                row += f"  [{chosen[i].display_name} {chosen[i].origin}]"
            elif variants[i]:
                row += "  [table value; variants available]"
            lines.append(row)

        lines.append("")
        lines.append("=" * 72)
        return "\n".join(lines)
