"""
chordline.config
~~~~~~~~~~~~~~~~

Global constants for chord detection and text rewriting.
Centralises the symbol sets and magic numbers so they can be imported
once and shared across every submodule.
"""

import os
from typing import Final

# ── Text normalization ──────────────────────────────────────────────
LINE_SEPARATOR: Final[str] = os.linesep
"""Separator substituted for literal ``\\n`` escapes found in the input."""

ESCAPED_LINE_BREAKS: Final[tuple[str, ...]] = ("\\\\n", "\\n")
"""Literal escape sequences replaced by LINE_SEPARATOR, longest first."""

# ── Tokenizer ───────────────────────────────────────────────────────
OPEN_PAREN: Final[str] = "("
CLOSE_PAREN: Final[str] = ")"

PAREN_TOKENS: Final[frozenset[str]] = frozenset({OPEN_PAREN, CLOSE_PAREN})
"""Bracket tokens that never vote in the chord-line majority."""

# ── Classifier ──────────────────────────────────────────────────────
# "º" (ordinal indicator) and "°" (degree sign) are distinct code points.
DIMINISHED_SIGNS: Final[frozenset[str]] = frozenset({"º", "°"})

TWO_CHAR_SUFFIXES: Final[frozenset[str]] = frozenset({"m", "#", "b"}) | DIMINISHED_SIGNS
"""Second characters accepted for two-character chords (Cm, C#, Db, Cº)."""

MINOR_PREFIX_ACCIDENTALS: Final[frozenset[str]] = frozenset({"#", "b"}) | DIMINISHED_SIGNS
"""Second characters accepted before a third-position ``m`` (C#m, Ebm)."""

CHORD_MARKERS: Final[tuple[str, ...]] = ("add", "/", "º", "°", "sus")
"""Substrings that mark a capitalised token as a chord."""

# ── Line heuristic ──────────────────────────────────────────────────
MIN_CHORDS_TO_BEAT: Final[int] = 1
"""Floor of the majority threshold; a chord line needs more than this."""
