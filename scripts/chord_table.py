#!/usr/bin/env python3
"""
scripts/chord_table.py — visual validation of chord and inversion naming.

Spells every chord shape on every requested root, feeds each rotation of the
spelling back through the resolver and prints a table:

    [Input order]  →  [Resolved name]

The key goal: confirm that every rotation of the same chord names the same
root and quality, with the inversion matching how many notes were rotated.

Usage:
    python scripts/chord_table.py
    python scripts/chord_table.py --roots C F# Bb   # only these roots
    python scripts/chord_table.py --quality "dominant 7th"
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from notes2chord.constants import CHORD_SHAPES
from notes2chord.errors import ChordSolverError
from notes2chord.notes import parse_notes, spell_thirds
from notes2chord.resolver import ordinal, resolve

_NATURAL_ROOTS = ["C", "D", "E", "F", "G", "A", "B"]


def expected_name(root, quality, i):
    name = f"{root} {quality}"
    return name if i == 0 else f"{name} ({ordinal(i)} inversion)"


def check_shape(root, key, quality):
    """Yield (input_order, resolved_name, ok) for every rotation of one chord."""
    spelled = spell_thirds(root, [int(g) for g in key.split(",")])
    for i in range(len(spelled)):
        # Starting on the i-th chord tone puts the chord in its i-th inversion.
        order = spelled[i:] + spelled[:i]
        try:
            got = resolve(parse_notes(" ".join(order))).name
        except ChordSolverError as e:
            got = f"Error: {e}"
        yield order, got, got == expected_name(root, quality, i)


def main():
    parser = argparse.ArgumentParser(description="Print every chord shape in every inversion.")
    parser.add_argument("--roots", nargs="+", default=_NATURAL_ROOTS,
                        help="Root note names (default: C D E F G A B)")
    parser.add_argument("--quality", default=None,
                        help='Only this chord quality, e.g. "minor 7th"')
    args = parser.parse_args()

    shapes = {k: q for k, q in CHORD_SHAPES.items() if args.quality in (None, q)}
    if not shapes:
        sys.exit(f"Error: unknown chord quality: {args.quality}")

    failures = 0
    bar = "─" * 68
    for root in args.roots:
        print(f"\n── Root {root} {bar[:60 - len(root)]}")
        for key, quality in shapes.items():
            for order, got, ok in check_shape(root, key, quality):
                mark = " " if ok else "✗"
                print(f" {mark} {' '.join(order):<18}  →  {got}")
                failures += not ok
    print(f"\n{bar}\n  {failures} mismatches")
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
