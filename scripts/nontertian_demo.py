#!/usr/bin/env python3
"""
scripts/nontertian_demo.py — walk through quartal / quintal chord voicings.

Builds a stacked-fourth (or fifth) chord on a root, then prints its standard
and full first inversions and the effect of folding the full inversion down:

    Original 4-note quartal chord on C4: C4  -F4  -Bb4 -Eb5
    1st inversion (standard)           : F4  -Bb4 -Eb5 -C5
    1st inversion (full)               : F4  -Bb4 -Eb5 -C6
    ...

Usage:
    python scripts/nontertian_demo.py
    python scripts/nontertian_demo.py --root Eb3 --size 5 --unit quintal
    python scripts/nontertian_demo.py --compare     # quartal vs quintal, sizes 2-5
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from mahler.constants import MAX_CHORD_SIZE, MIN_CHORD_SIZE
from mahler.display import format_chord, parse_note, print_chord
from mahler.errors import get_error
from mahler.nontertian import (
    InversionMode,
    IntervalUnit,
    build_nontertian_chord,
    fold_chord,
    invert_chord,
)

_UNITS = {
    "quartal": IntervalUnit.PERFECT_FOURTH,
    "quintal": IntervalUnit.PERFECT_FIFTH,
}
_UNIT_LABEL = {
    IntervalUnit.PERFECT_FOURTH: "Quartal (P4)",
    IntervalUnit.PERFECT_FIFTH:  "Quintal (P5)",
}


def _build_or_exit(root, size, unit):
    res = build_nontertian_chord(root, size, unit)
    if not res.ok:
        print(f"Error creating chord: {get_error(res.error)}")
        sys.exit(1)
    return res.value


def show_voicings(root, size, unit, unit_name):
    """Original chord, both 1st inversions, then two successive 1-level folds."""
    chord = _build_or_exit(root, size, unit)
    print_chord(chord, f"Original {size}-note {unit_name} chord")

    invert_chord(chord, 1, InversionMode.STANDARD)
    print_chord(chord, "1st inversion (standard)")

    invert_chord(chord, 1, InversionMode.FULL)
    print_chord(chord, "1st inversion (full)")

    fold_chord(chord, 1)
    print_chord(chord, "Full inversion folded 1 level")
    fold_chord(chord, 1)
    print_chord(chord, "Full inversion folded twice")

    print(f"\n── Chord sizes ({unit_name}) " + "─" * 40)
    for n in range(MIN_CHORD_SIZE, MAX_CHORD_SIZE + 1):
        print_chord(_build_or_exit(root, n, unit), f"{n}-note {unit_name} chord")


def show_comparison(root):
    """Quartal and quintal stacks side by side, plus their inversions."""
    print("── Quartal vs Quintal " + "─" * 46)
    for n in range(MIN_CHORD_SIZE, MAX_CHORD_SIZE + 1):
        print(f"{n}-note chords:")
        for unit in (IntervalUnit.PERFECT_FOURTH, IntervalUnit.PERFECT_FIFTH):
            chord = _build_or_exit(root, n, unit)
            print(f"  {_UNIT_LABEL[unit]}: {format_chord(chord)}")

    print("\n── Inversions (3-note) " + "─" * 45)
    for inv in range(3):
        print(f"Inversion {inv} (standard):")
        for unit in (IntervalUnit.PERFECT_FOURTH, IntervalUnit.PERFECT_FIFTH):
            chord = _build_or_exit(root, 3, unit)
            invert_chord(chord, inv, InversionMode.STANDARD)
            print(f"  {_UNIT_LABEL[unit]}: {format_chord(chord)}")


def main():
    parser = argparse.ArgumentParser(description="Demonstrate quartal/quintal chord voicings.")
    parser.add_argument("--root", default="C4", help="Root note, e.g. C4, Bb3, F#4 (default: C4)")
    parser.add_argument("--size", type=int, default=4,
                        help=f"Notes in the chord, {MIN_CHORD_SIZE}-{MAX_CHORD_SIZE} (default: 4)")
    parser.add_argument("--unit", choices=sorted(_UNITS), default="quartal",
                        help="Stacked interval (default: quartal)")
    parser.add_argument("--compare", action="store_true",
                        help="Compare quartal and quintal chords instead")
    args = parser.parse_args()

    parsed = parse_note(args.root)
    if not parsed.ok:
        print(f"Error: cannot parse root {args.root!r}: {get_error(parsed.error)}")
        sys.exit(1)

    if args.compare:
        show_comparison(parsed.value)
    else:
        show_voicings(parsed.value, args.size, _UNITS[args.unit], args.unit)


if __name__ == "__main__":
    main()
