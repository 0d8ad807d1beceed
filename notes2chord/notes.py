"""
Note-name parsing.

A note token is one letter A-G followed by any number of ``#`` / ``b``
accidentals, e.g. ``"G#"``, ``"Bbb"``, ``"F"``.  Parsed notes keep the token
exactly as typed for display; only the pitch class is normalised.
"""
from dataclasses import dataclass

import music21
import numpy as np

from notes2chord.constants import ACCIDENTALS, LETTERS
from notes2chord.errors import ExportError, NoteSyntaxError

# music21 spells at most quadruple sharps / flats.
MAX_EXPORT_ACCIDENTALS = 4


@dataclass(frozen=True)
class Note:
    name: str          # verbatim input token
    letter_index: int  # 0-6, C..B
    base_class: int    # pitch class of the bare letter
    pitch_class: int   # 0-11, accidentals applied

    @classmethod
    def parse(cls, token: str) -> "Note":
        """
        Parse one note token.

        Raises:
            NoteSyntaxError: the letter is not A-G, or an accidental is not
                '#' or 'b'.
        """
        letter, accidentals = token[:1], token[1:]
        if letter not in LETTERS:
            raise NoteSyntaxError(f'Invalid note letter in "{token}"')
        if any(c not in ACCIDENTALS for c in accidentals):
            raise NoteSyntaxError(f'Invalid accidentals in "{token}"')

        base_class, letter_index = LETTERS[letter]
        pitch_class = (base_class + accidental_shift(accidentals)) % 12
        return cls(token, letter_index, base_class, pitch_class)

    @property
    def letter(self) -> str:
        return self.name[0]

    def distance(self, other: "Note") -> int:
        """Semitones upward from this note to ``other`` (0-11, directional)."""
        return (other.pitch_class - self.pitch_class) % 12


def accidental_shift(accidentals: str) -> int:
    """Net semitone shift of an accidental string ('#' = +1, 'b' = -1)."""
    return sum(ACCIDENTALS[c] for c in accidentals)


def parse_note(token: str) -> Note:
    return Note.parse(token)


def parse_notes(text: str) -> tuple[Note, ...]:
    """Parse whitespace-delimited note tokens, keeping their input order."""
    return tuple(Note.parse(token) for token in text.split())


# ── Representations used by the presentation layer ───────────────────────────

def pitch_class_vector(notes) -> np.ndarray:
    """12-element multi-hot chroma vector (float32) for a note sequence."""
    v = np.zeros(12, dtype=np.float32)
    for n in notes:
        v[n.pitch_class] = 1.0
    return v


def to_music21_pitch(note: Note, octave=None) -> music21.pitch.Pitch:
    """
    Build a music21 Pitch spelled like the note token.

    Accidentals are collapsed to their net shift, since music21 spells a
    pitch with either sharps or flats ('-'), never both, and at most
    four of them.

    Raises:
        ExportError: the net shift is more than four sharps or flats.
    """
    shift = accidental_shift(note.name[1:])
    if abs(shift) > MAX_EXPORT_ACCIDENTALS:
        raise ExportError(f'Cannot export "{note.name}": more than '
                          f'{MAX_EXPORT_ACCIDENTALS} sharps or flats')
    spelling = note.letter + ("#" * shift if shift > 0 else "-" * -shift)
    p = music21.pitch.Pitch(spelling)
    if octave is not None:
        p.octave = octave
    return p


def to_music21_chord(notes, start_octave: int = 4) -> music21.chord.Chord:
    """
    Voice the notes bottom-up in input order, each one above the previous,
    and return them as a music21 Chord.
    """
    pitches = []
    for n in notes:
        p = to_music21_pitch(n, octave=start_octave)
        if pitches:
            p.octave = pitches[-1].octave
            while p.ps <= pitches[-1].ps:
                p.octave += 1
        pitches.append(p)
    return music21.chord.Chord(pitches)


def spell_thirds(root: str, gaps) -> list[str]:
    """
    Spell notes stacked in thirds above ``root`` with the given semitone gaps,
    e.g. spell_thirds("D", [3, 4]) → ["D", "F", "A"].

    Each note takes the letter two steps above the previous one, with the
    accidentals needed to land on the right pitch class.
    """
    letters = sorted(LETTERS, key=lambda l: LETTERS[l][1])
    current = Note.parse(root)
    names = [root]
    for gap in gaps:
        letter = letters[(current.letter_index + 2) % 7]
        target = (current.pitch_class + gap) % 12
        shift = (target - LETTERS[letter][0]) % 12
        if shift > 6:
            shift -= 12
        name = letter + ("#" * shift if shift > 0 else "b" * -shift)
        current = Note.parse(name)
        names.append(name)
    return names
