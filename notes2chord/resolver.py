"""
Interpret a sequence of 1-4 notes as a note, an interval or a chord.

Chords are recognised as stacked thirds: some rotation of the input must climb
by every-other letter (C-E-G-B) and its semitone gaps must match a known
chord shape.  The rotation index tells us the inversion.
"""
from dataclasses import dataclass
from typing import Optional

from notes2chord.constants import (
    CHORD_SHAPES,
    COMPONENT_ROLES,
    INTERVAL_NAMES,
    MAX_NOTES,
)
from notes2chord.errors import ChordError, NoteCountError
from notes2chord.notes import Note, parse_notes


@dataclass(frozen=True)
class Resolution:
    name: str
    components: Optional[tuple[str, ...]] = None
    inversion: Optional[int] = None  # rotations from root position; chords only

    @property
    def is_chord(self) -> bool:
        return self.components is not None

    def roles(self) -> list[tuple[str, str]]:
        """Pair each component with its role, e.g. [("Root", "C"), ("Third", "E"), ...]."""
        if self.components is None:
            return []
        return list(zip(COMPONENT_ROLES, self.components))


def ordinal(n: int) -> str:
    """1 → '1st', 2 → '2nd', 3 → '3rd', 4 → '4th', 11 → '11th', 22 → '22nd'."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def interval_name(a: Note, b: Note) -> str:
    return INTERVAL_NAMES[a.distance(b)]


def rotate(notes, i: int) -> tuple:
    """Move the last ``i`` notes to the front. Returns a new tuple."""
    notes = tuple(notes)
    i %= len(notes) or 1
    if i == 0:
        return notes
    return notes[-i:] + notes[:-i]


def letter_steps(notes) -> list[int]:
    """Diatonic letter distance between consecutive notes (0-6)."""
    return [(b.letter_index - a.letter_index) % 7 for a, b in zip(notes, notes[1:])]


def semitone_gaps(notes) -> list[int]:
    """Semitone distance between consecutive notes (0-11)."""
    return [a.distance(b) for a, b in zip(notes, notes[1:])]


def shape_key(notes) -> str:
    return ",".join(str(g) for g in semitone_gaps(notes))


def _stacks_in_thirds(notes) -> bool:
    return all(step == 2 for step in letter_steps(notes))


def explain(notes) -> list[dict]:
    """
    Trace the chord search: one row per rotation, in search order.

    Each row holds the rotated note names, their letter steps, the
    semitone-gap key, the matching quality (or None) and whether the rotation
    is accepted (stacked in thirds *and* a known shape).
    """
    rows = []
    for i in range(len(notes)):
        rotated = rotate(notes, i)
        stacked = _stacks_in_thirds(rotated)
        key = shape_key(rotated)
        quality = CHORD_SHAPES.get(key)
        rows.append({
            "rotation":     i,
            "order":        [n.name for n in rotated],
            "letter_steps": letter_steps(rotated),
            "stacked":      stacked,
            "key":          key,
            "quality":      quality,
            "accepted":     stacked and quality is not None,
        })
    return rows


def chord_info(notes) -> Resolution:
    """
    Interpret three or four notes as a triad or seventh chord.

    Rotations are tried in order starting from the input order; the first one
    that both stacks in thirds and matches a chord shape wins.

    Raises:
        ChordError: no rotation forms a known chord.
    """
    notes = tuple(notes)
    for row in explain(notes):
        if not row["accepted"]:
            continue
        i, order = row["rotation"], row["order"]
        name = f"{order[0]} {row['quality']}"
        if i:
            name += f" ({ordinal(i)} inversion)"
        return Resolution(name, tuple(order), i)
    raise ChordError("Invalid chord")


def resolve(notes) -> Resolution:
    """
    Interpret a sequence of notes according to its length:
      1    → the note name
      2    → the interval from the first note up to the second
      3, 4 → the triad / seventh chord, with inversion
    Raises:
        NoteCountError: zero notes or more than four.
        ChordError: three or four notes that are not a known chord.
    """
    notes = tuple(notes)
    if len(notes) == 1:
        return Resolution(notes[0].name)
    if len(notes) == 2:
        return Resolution(interval_name(notes[0], notes[1]))
    if 3 <= len(notes) <= MAX_NOTES:
        return chord_info(notes)
    raise NoteCountError("Only up to four notes (seventh chords) supported")


def identify(text: str) -> Resolution:
    """Parse whitespace-delimited notes and resolve them in one step."""
    return resolve(parse_notes(text))
