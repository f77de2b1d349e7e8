"""
chordline
~~~~~~~~~

Chord detection, simplification and transposition for plain-text chord
sheets.

Quick-start::

    import chordline as cl

    cl.find("C#7M   Gm7(5b)")
    # [Chord(chord='C#7M', start_index=0, end_index=4),
    #  Chord(chord='Gm7(5b)', start_index=7, end_index=14)]

    cl.simplify_chords_in_text("Abm7(5-)   G")   # 'Abm7       G'
    cl.transpose_text("C   G/B", cl.ChordRoot.C, cl.ChordRoot.D)  # 'D   A/C#'
"""

from __future__ import annotations

__version__: str = "0.1.0"

# ── Data model ───────────────────────────────────────────────────────
from chordline.models import Chord, TextWord, TransposeResult
from chordline.roots import ChordRoot, UnknownRootError

# ── Detection ────────────────────────────────────────────────────────
from chordline.classifier import is_valid_chord
from chordline.finder import find, normalize_text
from chordline.tokenizer import split_into_words

# ── Rewriting ────────────────────────────────────────────────────────
from chordline.simplifier import simplify_chord, simplify_chord_string, simplify_chords_in_text
from chordline.transposer import transpose_chord, transpose_text, try_transpose_chord

__all__: list[str] = [
    # model
    "Chord",
    "ChordRoot",
    "TextWord",
    "TransposeResult",
    "UnknownRootError",
    # detection
    "find",
    "is_valid_chord",
    "normalize_text",
    "split_into_words",
    # rewriting
    "simplify_chord",
    "simplify_chord_string",
    "simplify_chords_in_text",
    "transpose_chord",
    "transpose_text",
    "try_transpose_chord",
]
