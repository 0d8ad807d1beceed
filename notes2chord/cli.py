#!/usr/bin/env python3
"""
notes2chord/cli.py — Name a note, interval or chord from the command line.

    python -m notes2chord.cli E G C
    C major triad (1st inversion)
      Root     C
      Third    E
      Fifth    G

With --interactive, one query is read per line from stdin until EOF.
"""
import argparse
import sys

import numpy as np

from notes2chord.errors import ChordSolverError
from notes2chord.notes import parse_notes, pitch_class_vector, to_music21_chord
from notes2chord.resolver import explain, resolve


def format_resolution(res) -> str:
    """Render a Resolution as the name followed by a role/component table."""
    lines = [res.name]
    for role, name in res.roles():
        lines.append(f"  {role:<8} {name}")
    return "\n".join(lines)


def _print_trace(notes) -> None:
    if len(notes) < 3:
        return
    print("[notes2chord] rotation search:", file=sys.stderr)
    for row in explain(notes):
        verdict = "accept" if row["accepted"] else "reject"
        print(f"[notes2chord]   {row['rotation']}: {' '.join(row['order']):<16}"
              f" steps={row['letter_steps']}  key={row['key']:<6}"
              f" quality={row['quality']}  → {verdict}", file=sys.stderr)


def run_query(text, verbose=False, vector=False, musicxml=None) -> str:
    """
    Parse and resolve one query, returning the formatted result.
    Raises ChordSolverError on invalid input.
    """
    notes = parse_notes(text)
    if verbose:
        _print_trace(notes)
    res = resolve(notes)
    out = format_resolution(res)
    if vector:
        chroma = np.array2string(pitch_class_vector(notes).astype(int), separator=" ")
        out += f"\n  Chroma   {chroma}"
    if musicxml:
        to_music21_chord(notes).write("musicxml", fp=musicxml)
        print(f"Saved {musicxml}", file=sys.stderr)
    return out


def interactive(stream, verbose=False, vector=False) -> None:
    """Resolve one query per non-blank line; errors are reported and skipped."""
    for line in stream:
        text = line.strip()
        if not text:
            continue
        try:
            print(run_query(text, verbose=verbose, vector=vector))
        except ChordSolverError as e:
            print(f"Error: {e}", file=sys.stderr)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Identify a note, interval or chord from note names.")
    parser.add_argument("notes", nargs="*", help='Note names, e.g. C E G or "Bb D F Ab"')
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="Read one query per line from stdin")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print the chord rotation search to stderr")
    parser.add_argument("--vector", action="store_true",
                        help="Also print the 12-element pitch-class vector")
    parser.add_argument("--musicxml", metavar="PATH",
                        help="Write the notes as a chord to a MusicXML file")
    args = parser.parse_args(argv)

    if args.interactive:
        if args.musicxml:
            parser.error("--musicxml cannot be combined with --interactive")
        interactive(sys.stdin, verbose=args.verbose, vector=args.vector)
        return

    if not args.notes:
        parser.error("no notes given (pass notes or use --interactive)")

    try:
        print(run_query(" ".join(args.notes), verbose=args.verbose,
                        vector=args.vector, musicxml=args.musicxml))
    except ChordSolverError as e:
        sys.exit(f"Error: {e}")


if __name__ == "__main__":
    main()
