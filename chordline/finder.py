"""
Chord detection over whole texts.

A line is only mined for chords when it *looks like* a chord line: a strict
majority of its words must be chords, so prose that merely contains a word
such as "Em" or "E" is left alone.
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import replace

from chordline.classifier import is_valid_chord
from chordline.config import ESCAPED_LINE_BREAKS, LINE_SEPARATOR, MIN_CHORDS_TO_BEAT, PAREN_TOKENS
from chordline.models import Chord, TextWord
from chordline.roots import ALL_ALIASES
from chordline.tokenizer import split_into_words

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"(\r\n|\r|\n)")


def normalize_text(text: str) -> str:
    """
    Prepare raw input for detection.

    Double quotes are dropped and literal ``\\n`` escapes (backslash text, as
    found in JSON-ish dumps of song sheets) become real line separators. All
    offsets returned by :func:`find` refer to the normalized text.
    """
    text = text.replace('"', "")
    for escape in ESCAPED_LINE_BREAKS:
        text = text.replace(escape, LINE_SEPARATOR)
    return text


def _iter_lines(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(line, terminator)`` pairs; the last terminator may be empty."""
    parts = _LINE_BREAK_RE.split(text)
    for i in range(0, len(parts), 2):
        terminator = parts[i + 1] if i + 1 < len(parts) else ""
        yield parts[i], terminator


def detect_words_in_line(line: str) -> list[TextWord]:
    """Split a line into words and flag those starting with a root spelling."""
    return [
        replace(word, could_be_chord=word.word.startswith(ALL_ALIASES))
        for word in split_into_words(line)
    ]


def is_chord_line(words: list[TextWord]) -> bool:
    """
    Majority vote deciding whether a line of classified words holds chords.

    Bracket words do not vote. A lone word must itself be a chord; otherwise
    confirmed chords must outnumber half of the votes, and at least two are
    needed.
    """
    voters = [w for w in words if w.word not in PAREN_TOKENS]
    if len(voters) == 1:
        return voters[0].is_confirmed_chord
    confirmed = sum(1 for w in voters if w.is_confirmed_chord)
    return confirmed > max(len(voters) // 2, MIN_CHORDS_TO_BEAT)


def find(text: str, simplify: bool = False) -> list[Chord]:
    """
    Search a text for chord symbols.

    Args:
        text:     Free-form lyrics / chord sheet.
        simplify: Reduce each chord to its simple form ("Cmaj7" -> "C"). The
                  start offset is kept and the end offset moves back by the
                  number of characters removed.

    Returns:
        Chords in reading order, with offsets into ``normalize_text(text)``.
    """
    # imported here to avoid a cycle: the simplifier detects chords itself
    from chordline.simplifier import simplify_chord

    found: list[Chord] = []
    offset = 0

    for line, terminator in _iter_lines(normalize_text(text)):
        words = [
            replace(
                word,
                start_index=word.start_index + offset,
                end_index=word.end_index + offset,
                is_confirmed_chord=is_valid_chord(word.word),
            )
            for word in detect_words_in_line(line)
        ]

        if is_chord_line(words):
            found.extend(
                w.to_chord()
                for w in words
                if w.is_confirmed_chord and w.word not in PAREN_TOKENS
            )
        elif words:
            logger.debug("Skipping non-chord line at offset %d: %r", offset, line)

        offset += len(line) + len(terminator)

    if simplify:
        found = [simplify_chord(chord) for chord in found]
    return found
