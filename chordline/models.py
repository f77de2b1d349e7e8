"""Data models shared by the detection and rewriting pipelines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Chord:
    """
    A chord symbol found in a text.

    Attributes:
        chord:       The chord exactly as written, e.g. "Gm7(5b)".
        start_index: Offset of the first character in the normalized text.
        end_index:   Offset one past the last character.
    """

    chord: str
    start_index: int
    end_index: int


@dataclass(frozen=True)
class TextWord:
    """A whitespace-delimited word of one line, as seen by the classifier."""

    word: str
    start_index: int = 0
    end_index: int = 0
    could_be_chord: bool = False
    is_confirmed_chord: bool = False

    def to_chord(self) -> Chord:
        return Chord(self.word, self.start_index, self.end_index)


@dataclass(frozen=True)
class TransposeResult:
    """
    Outcome of transposing a single chord.

    Attributes:
        text:       The transposed chord, or the original chord text when
                    transposition was not possible.
        transposed: False when *text* is the untouched fallback.
    """

    text: str
    transposed: bool = True
