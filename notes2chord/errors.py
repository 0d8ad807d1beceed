"""
Exceptions raised while identifying notes, intervals and chords.

Every error carries the exact message shown to the user, so callers can
simply display ``str(exc)``.
"""


class ChordSolverError(ValueError):
    """Base class for all user-facing identification errors."""


class NoteSyntaxError(ChordSolverError):
    """A note token has an invalid letter or accidental character."""


class NoteCountError(ChordSolverError):
    """Too few or too many notes were supplied."""


class ChordError(ChordSolverError):
    """Three or four notes that do not stack into a known chord."""


class ExportError(ChordSolverError):
    """A valid note that cannot be written out as notation."""
