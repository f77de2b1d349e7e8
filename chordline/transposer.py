"""
Chord transposition.

Roots move along the 12-semitone circle and are always written with their
canonical spelling, so transposing C up to Eb yields "D#". Slash chords have
their bass note moved as well.
"""

import logging

from chordline.finder import find, normalize_text
from chordline.models import Chord, TransposeResult
from chordline.roots import ChordRoot, UnknownRootError

logger = logging.getLogger(__name__)

SLASH = "/"


class _NothingAfterSlash(LookupError):
    """The text after a slash holds no recognisable chord."""


def semitones_between(from_root: ChordRoot, to_root: ChordRoot) -> int:
    """Signed distance used to shift every root from *from_root* to *to_root*."""
    return to_root.ordinal - from_root.ordinal


def _shift_root(chord_text: str, delta: int) -> str:
    old_root = ChordRoot.resolve(chord_text)
    new_root = old_root.circular(delta)
    return new_root.root + chord_text[len(old_root.root) :]


def _transpose(chord_text: str, from_root: ChordRoot, to_root: ChordRoot) -> str:
    shifted = _shift_root(chord_text, semitones_between(from_root, to_root))
    if SLASH not in shifted:
        return shifted

    head, _, bass = shifted.partition(SLASH)
    bass_chords = find(bass)
    if not bass_chords:
        raise _NothingAfterSlash(f"No chord after '/' in '{chord_text}'.")
    return head + SLASH + _transpose(bass_chords[0].chord, from_root, to_root)


def try_transpose_chord(chord: Chord, from_root: ChordRoot, to_root: ChordRoot) -> TransposeResult:
    """
    Transpose one chord, reporting whether it could be transposed.

    Words that were taken for chords but cannot be transposed (no known root,
    nothing after a slash, slashes nested too deep to follow) are handed back
    untouched with ``transposed=False`` so a whole sheet never fails because
    of one symbol.
    """
    if from_root == to_root:
        return TransposeResult(chord.chord)
    try:
        return TransposeResult(_transpose(chord.chord, from_root, to_root))
    except (UnknownRootError, _NothingAfterSlash, RecursionError) as exc:
        logger.warning("Failed to transpose chord %r: %s", chord, exc)
        return TransposeResult(chord.chord, transposed=False)


def transpose_chord(chord: Chord, from_root: ChordRoot, to_root: ChordRoot) -> str:
    """
    Transpose one chord from the *from_root* key to the *to_root* key.

    Slash chords move both roots: "C/D" taken from C to Eb becomes "D#/F".

    Returns:
        The transposed chord, or the chord unchanged when it cannot be
        transposed.
    """
    return try_transpose_chord(chord, from_root, to_root).text


def transpose_text(text: str, from_root: ChordRoot, to_root: ChordRoot | None = None) -> str:
    """
    Transpose every chord found in a text.

    Transposed chords may be longer ("G" -> "G#") or shorter than the
    original, so each replacement shifts the chords after it; the running
    offset tracks that drift. Text is returned untouched when *to_root* is
    missing or equal to *from_root*; otherwise the result is based on
    ``normalize_text(text)``.
    """
    if to_root is None or from_root == to_root:
        return text

    transposed_text = normalize_text(text)
    drift = 0
    for chord in find(text):
        transposed = transpose_chord(chord, from_root, to_root)
        start, end = chord.start_index + drift, chord.end_index + drift
        transposed_text = transposed_text[:start] + transposed + transposed_text[end:]
        drift += len(transposed) - (chord.end_index - chord.start_index)
    return transposed_text
