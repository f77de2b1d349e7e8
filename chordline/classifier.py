"""Per-word chord recognition."""

from chordline.config import CHORD_MARKERS, MINOR_PREFIX_ACCIDENTALS, TWO_CHAR_SUFFIXES
from chordline.roots import ALL_ALIASES


def _first_uppercase(word: str) -> str | None:
    return next((ch for ch in word if ch.isupper()), None)


def is_valid_chord(word: str) -> bool:
    """
    Decide whether a single word looks like a chord symbol.

    Rules are checked in order and the first applicable one decides:

    1. A lone root letter ("C", "G") is accepted. Plain capital letters are
       ambiguous, so the line heuristic has the final say.
    2. Two characters: the second must be ``m``, ``#``, ``b``, a diminished
       sign or a digit ("Cm", "F#", "Db", "C7").
    3. Three or more characters with ``m`` in third position: the second must
       be an accidental, a diminished sign or a digit ("C#m7", "Ebm").
    4. Anything else needs its first capital letter to be a root and either a
       digit or one of ``add``, ``/``, ``º``, ``°``, ``sus``.
    """
    if len(word) == 1 and word in ALL_ALIASES:
        return True

    if len(word) == 2:
        second = word[1]
        return second in TWO_CHAR_SUFFIXES or second.isdecimal()

    if len(word) >= 3 and word[2] == "m":
        second = word[1]
        return second in MINOR_PREFIX_ACCIDENTALS or second.isdecimal()

    if _first_uppercase(word) not in ALL_ALIASES:
        return False
    return any(marker in word for marker in CHORD_MARKERS) or any(ch.isdecimal() for ch in word)
