"""Column-aware word splitting for chord sheet lines."""

import re

from chordline.config import CLOSE_PAREN, OPEN_PAREN
from chordline.models import TextWord

_WORD_RE = re.compile(r"\S+")


def _split_unpaired_paren(word: TextWord) -> list[TextWord]:
    """
    Detach a bracket that has no partner inside the same word.

    ``"(C"`` becomes ``"("`` + ``"C"`` and ``"G)"`` becomes ``"G"`` + ``")"``,
    while balanced words such as ``"Gm7(5b)"`` are returned whole.
    """
    text, start, end = word.word, word.start_index, word.end_index

    if text.startswith(OPEN_PAREN) and CLOSE_PAREN not in text:
        return [
            TextWord(OPEN_PAREN, start, start + 1),
            TextWord(text[1:], start + 1, end),
        ]
    if text.endswith(CLOSE_PAREN) and OPEN_PAREN not in text:
        return [
            TextWord(text[:-1], start, end - 1),
            TextWord(CLOSE_PAREN, end - 1, end),
        ]
    return [word]


def split_into_words(line: str) -> list[TextWord]:
    """
    Split a line into words, keeping their column spans.

    Offsets are relative to the start of *line*; ``end_index`` is exclusive.
    A bracket without a partner in its word becomes a word of its own, so
    ``"(C  G)"`` yields ``(``, ``C``, ``G`` and ``)`` at columns 0, 1, 4 and 5.

    Args:
        line: One line of text, without its terminator.

    Returns:
        Non-blank words in reading order.
    """
    words: list[TextWord] = []
    for match in _WORD_RE.finditer(line):
        words.extend(_split_unpaired_paren(TextWord(match.group(), match.start(), match.end())))
    return [w for w in words if w.word.strip()]
