# ── Note letter lookup table ──────────────────────────────────────────────────

# Letter → (base pitch class, letter index on the diatonic scale C..B).
LETTERS: dict[str, tuple[int, int]] = {
    "C": (0,  0),
    "D": (2,  1),
    "E": (4,  2),
    "F": (5,  3),
    "G": (7,  4),
    "A": (9,  5),
    "B": (11, 6),
}

# Accidental character → semitone shift.
ACCIDENTALS: dict[str, int] = {"#": 1, "b": -1}

# ── Interval names ────────────────────────────────────────────────────────────

# Directional semitone distance (0-11) → English interval name.
INTERVAL_NAMES: dict[int, str] = {
    0:  "Unison",
    1:  "Minor second",
    2:  "Major second",
    3:  "Minor third",
    4:  "Major third",
    5:  "Perfect fourth",
    6:  "Tritone",
    7:  "Perfect fifth",
    8:  "Minor sixth",
    9:  "Major sixth",
    10: "Minor seventh",
    11: "Major seventh",
}

# ── Chord shapes ──────────────────────────────────────────────────────────────

# Comma-joined semitone gaps between stacked thirds → chord quality.
CHORD_SHAPES: dict[str, str] = {
    # Triads
    "4,3":   "major triad",
    "3,4":   "minor triad",
    "3,3":   "diminished triad",
    "4,4":   "augmented triad",
    # Seventh chords
    "4,3,4": "major 7th",
    "4,3,3": "dominant 7th",
    "3,4,3": "minor 7th",
    "3,4,4": "minor major 7th",
    "3,3,3": "half diminished 7th",
    "3,3,2": "fully diminished 7th",
}

# Component labels, root first, in stacked-third order.
COMPONENT_ROLES: list[str] = ["Root", "Third", "Fifth", "Seventh"]

MAX_NOTES = len(COMPONENT_ROLES)
