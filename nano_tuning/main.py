#!/usr/bin/env python3
"""
Nano Tuning - CLI Interface

Inspect tuning systems, scales and nano rate tables.
"""

import argparse
import numpy as np

from .enums import TuningSystem, Scale, NanoBase
from .tunings import get_tuning_ratios, cents_deviation_from_equal
from .scales import scale_positions
from .variants import get_interval_variants
from .notes import (
    get_note_name, get_tuning_system_name, get_scale_name, get_nano_base_name,
    get_note_frequency,
)
from .nano_rate import NanoRateConfig


def systems_command(args):
    """List tuning systems and their ratio tables."""
    print("\nTUNING SYSTEMS:")
    print("=" * 60)

    for tuning in TuningSystem:
        ratios = get_tuning_ratios(tuning)
        print(f"\n{tuning.value}: {get_tuning_system_name(tuning)}")
        if tuning.is_custom:
            print("  (user-entered ratios; defaults to Equal Temperament)")
        print("  " + " ".join(f"{r:.3f}" for r in ratios))

        for position, options in enumerate(get_interval_variants(tuning)):
            if options:
                choices = ", ".join(f"{v.display_name} {v.ratio:.3f} ({v.origin})"
                                    for v in options)
                print(f"  {get_note_name(position)}: {choices}")


def scales_command(args):
    """List scales and their member notes."""
    print("\nSCALES:")
    print("=" * 60)

    for scale in Scale:
        positions = scale_positions(scale)
        notes = " ".join(get_note_name(p) for p in positions)
        print(f"  {scale.value:>2} {get_scale_name(scale):<18} {notes}")


def bases_command(args):
    """List nano bases and their root frequencies."""
    print("\nNANO BASES:")
    print("=" * 60)

    for base in NanoBase:
        freq = get_note_frequency(base)
        if freq == 0.0:
            print(f"  {base.value:>2} {get_nano_base_name(base):<12} (from tempo)")
        else:
            print(f"  {base.value:>2} {get_nano_base_name(base):<12} {freq:>8.2f} Hz")


def parse_choices(choices: list[str]) -> dict[int, int]:
    """Parse 'POS=IDX' strings into a variant choice dict."""
    result = {}
    for item in choices or []:
        try:
            pos, idx = item.split('=')
            result[int(pos)] = int(idx)
        except ValueError:
            raise ValueError(f"Invalid variant choice '{item}', expected POS=IDX (e.g. 6=1)") from None
    return result


def build_config(args) -> NanoRateConfig:
    return NanoRateConfig.from_names(
        tuning=args.tuning,
        scale=args.scale,
        base=args.base,
        nano_tune=args.nano_tune,
        variant_choices=parse_choices(args.choose),
    )


def table_command(args):
    """Print the nano rate table for a tuning, scale and base."""
    config = build_config(args)
    print("\n" + config.summary(bpm=args.bpm))

    if args.plot:
        try:
            plot_deviation(config.tuning)
        except ImportError:
            print("(matplotlib not available for plotting)")


def rate_command(args):
    """Show slice timing for each position at a given tempo."""
    config = build_config(args)
    freqs = config.nano_frequencies(args.bpm)
    durations = config.slice_durations(args.bpm)
    denominators = config.equivalent_denominators(args.bpm)
    selectable = set(config.selectable_positions())

    print(f"\nNano rate at {args.bpm:.1f} BPM "
          f"({get_tuning_system_name(config.tuning)}, {get_nano_base_name(config.base)}):")
    print(f"  {'Pos':<4} {'Note':<5} {'Freq (Hz)':>10} {'Slice (ms)':>11} {'1/N note':>9}")
    print(f"  {'-'*4} {'-'*5} {'-'*10} {'-'*11} {'-'*9}")
    for i in range(12):
        if i not in selectable:
            continue
        print(f"  {i:<4} {get_note_name(i):<5} {freqs[i]:>10.2f} "
              f"{durations[i] * 1000:>11.3f} {denominators[i]:>9.2f}")


def plot_deviation(tuning: TuningSystem):
    """Plot each position's deviation from equal temperament in cents."""
    import matplotlib.pyplot as plt

    deviation = cents_deviation_from_equal(tuning)
    positions = np.arange(12)

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.bar(positions, deviation, color=np.where(deviation >= 0, 'tab:blue', 'tab:red'))

    # Variant alternatives as markers
    for position, options in enumerate(get_interval_variants(tuning)):
        for v in options:
            ax.plot(position, 1200.0 * np.log2(v.ratio) - 100.0 * position,
                    'k_', markersize=14)
            ax.annotate(v.display_name, (position, 1200.0 * np.log2(v.ratio) - 100.0 * position),
                        textcoords='offset points', xytext=(8, 0), fontsize=7)

    ax.axhline(0, color='grey', linewidth=0.8)
    ax.set_xticks(positions)
    ax.set_xticklabels([get_note_name(i) for i in positions])
    ax.set_ylabel('Deviation from 12-TET (cents)')
    ax.set_title(get_tuning_system_name(tuning))
    ax.grid(True, axis='y', alpha=0.3)

    plt.tight_layout()
    filename = f"tuning_{tuning.name.lower()}.png"
    plt.savefig(filename, dpi=150)
    print(f"\nPlot saved to {filename}")
    plt.show()


def add_selection_arguments(parser):
    parser.add_argument('--tuning', type=str, default='equal_temperament',
                        help='Tuning system (e.g. just, pythagorean, meantone)')
    parser.add_argument('--scale', type=str, default='chromatic', help='Scale name')
    parser.add_argument('--base', type=str, default='bpm',
                        help='Nano base: a note (C, F#, Bb) or "bpm"')
    parser.add_argument('--nano-tune', type=float, default=1.0,
                        help='Tempo base multiplier (0.75-2.0)')
    parser.add_argument('--choose', type=str, nargs='*', metavar='POS=IDX',
                        help='Interval variant choices (e.g. 6=1)')


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Nano Tuning - tuning systems and scales for nano rates',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List tuning systems with their ratios and interval variants
  nano-tuning systems

  # List scales / nano bases
  nano-tuning scales
  nano-tuning bases

  # Just Intonation table on A, major scale, greater major second
  nano-tuning table --tuning just --scale major --base A --choose 2=1

  # Plot Pythagorean deviation from equal temperament
  nano-tuning table --tuning pythagorean --plot

  # Tempo-synced slice timing at 128 BPM
  nano-tuning rate --bpm 128 --tuning meantone --scale minor_pentatonic
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('systems', help='List tuning systems')
    subparsers.add_parser('scales', help='List scales')
    subparsers.add_parser('bases', help='List nano bases')

    table_parser = subparsers.add_parser('table', help='Show a nano rate table')
    add_selection_arguments(table_parser)
    table_parser.add_argument('--bpm', type=float, help='Host tempo (needed for frequencies when tempo-synced)')
    table_parser.add_argument('--plot', action='store_true', help='Plot deviation from equal temperament')

    rate_parser = subparsers.add_parser('rate', help='Show slice timing at a tempo')
    add_selection_arguments(rate_parser)
    rate_parser.add_argument('--bpm', type=float, required=True, help='Host tempo')

    args = parser.parse_args(argv)

    try:
        if args.command == 'systems':
            systems_command(args)
        elif args.command == 'scales':
            scales_command(args)
        elif args.command == 'bases':
            bases_command(args)
        elif args.command == 'table':
            table_command(args)
        elif args.command == 'rate':
            rate_command(args)
        else:
            parser.print_help()
    except ValueError as e:
        parser.error(str(e))


if __name__ == '__main__':
    main()
