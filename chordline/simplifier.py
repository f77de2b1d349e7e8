"""
Chord simplification.

Extensions and alterations are reduced by a single substitution taken from an
ordered rule table. Several patterns are substrings of others ("9" inside
"7(9-)", "5" inside "m7(5-)"), so the first matching rule wins and the table
is a tuple rather than a dict.
"""

from dataclasses import replace
from typing import Final

from chordline.finder import find, normalize_text
from chordline.models import Chord

SIMPLIFICATION_RULES: Final[tuple[tuple[str, str], ...]] = (
    ("7(9-)", "7"),
    ("m7(5-)", "m7"),
    ("maj9", "maj7"),
    ("Δ9", "maj7"),
    ("7M(9)", "7M"),
    ("maj7", ""),
    ("Δ7", ""),
    ("7M", ""),
    ("add9", ""),
    ("13", "7"),
    ("11", "7"),
    ("9", "7"),
    ("7b9", "7"),
    ("7#9", "7"),
    ("7b5", "7"),
    ("7#5", "7"),
    ("m7b5", "m7"),
    ("m7(5b)", "m7"),
    ("ø7", "m7"),
    ("dim7", "m7"),
    ("º7", "m7"),
    ("m9", "m7"),
    ("m11", "m7"),
    ("m13", "m7"),
    ("mMaj7", "m"),
    ("mΔ7", "m"),
    ("m7M", "m"),
    ("sus2", ""),
    ("sus4", ""),
    ("6", ""),
    ("m6", "m"),
    ("aug", ""),
    ("+", ""),
    ("dim", "m"),
    ("º", "m"),
    ("5", ""),
)
"""(pattern, replacement) pairs, tried in order."""


def simplify_chord_string(chord: str) -> tuple[str, int]:
    """
    Apply the first matching simplification rule to a chord symbol.

    For example ``"Abm7(5-)"`` gives ``("Abm7", 4)`` and ``"Bm/A"``, which no
    rule matches, gives ``("Bm/A", 0)``.

    Args:
        chord: Chord symbol as written in the sheet.

    Returns:
        ``(simplified, removed)`` where *removed* is how many characters
        shorter the result is. It is negative for the one rule that spells a
        chord out longer ("CΔ9" -> "Cmaj7").
    """
    for pattern, simple in SIMPLIFICATION_RULES:
        if pattern in chord:
            simplified = chord.replace(pattern, simple)
            return simplified, len(chord) - len(simplified)
    return chord, 0


def simplify_chord(chord: Chord) -> Chord:
    """Simplify a found chord, pulling its end offset back accordingly."""
    simplified, removed = simplify_chord_string(chord.chord)
    return replace(chord, chord=simplified, end_index=chord.end_index - removed)


def simplify_chords_in_text(text: str) -> str:
    """
    Simplify every chord of a sheet without disturbing its layout.

    Each chord is overwritten in place and padded with spaces to its original
    width, so lyrics and the remaining chords keep their columns. For example
    ``"Cmaj7 G7 Am"`` becomes ``"C     G7 Am"``. A chord that grows pushes the
    rest of its line right; the running drift keeps later chords on target.

    The result is based on ``normalize_text(text)``.
    """
    simplified_text = normalize_text(text)
    drift = 0
    for chord in find(text):
        simplified, removed = simplify_chord_string(chord.chord)
        start, end = chord.start_index + drift, chord.end_index + drift
        padding = " " * max(removed, 0)
        simplified_text = simplified_text[:start] + simplified + padding + simplified_text[end:]
        drift += len(simplified) + len(padding) - (chord.end_index - chord.start_index)
    return simplified_text
