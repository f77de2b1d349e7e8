"""ChordRoot: the twelve chromatic chord roots and their enharmonic spellings."""

from __future__ import annotations

from enum import Enum
from typing import Final

SEMITONES_PER_OCTAVE = 12


class UnknownRootError(ValueError):
    """Raised when a string does not start with any known root spelling."""


class ChordRoot(Enum):
    """
    One of the 12 chromatic pitch classes a chord can be built on.

    Members are declared in chromatic order starting at C, so the declaration
    order doubles as each root's position on the circle of semitones.

    Attributes:
        root:    Canonical spelling written when a chord is transposed.
        aliases: Enharmonic spellings that resolve to the same root.
    """

    C = ("C",)
    Db = ("C#", "Db")
    D = ("D",)
    Eb = ("D#", "Eb")
    E = ("E",)
    F = ("F",)
    Gb = ("F#", "Gb")
    G = ("G",)
    Ab = ("G#", "Ab")
    A = ("A",)
    Bb = ("Bb", "A#")
    B = ("B",)

    def __init__(self, root: str, *aliases: str) -> None:
        self.root = root
        self.aliases: tuple[str, ...] = aliases

    @property
    def all_aliases(self) -> tuple[str, ...]:
        """Canonical spelling followed by every enharmonic alias."""
        return (self.root, *self.aliases)

    @property
    def ordinal(self) -> int:
        """Position of the root on the chromatic circle (C = 0 ... B = 11)."""
        return _ORDINALS[self]

    def circular(self, delta: int) -> ChordRoot:
        """
        Return the root *delta* semitones away, wrapping around the octave.

        Python's ``%`` is a true modulo for a positive divisor, so negative
        deltas wrap too: ``ChordRoot.C.circular(-1) is ChordRoot.B``.
        """
        return _CHROMATIC[(self.ordinal + delta) % SEMITONES_PER_OCTAVE]

    @classmethod
    def in_chromatic_order(cls) -> list[ChordRoot]:
        """The 12 roots from C to B."""
        return list(_CHROMATIC)

    @classmethod
    def resolve(cls, chord_text: str) -> ChordRoot:
        """
        Identify the root a chord string starts with.

        The first two characters are tried before the first one alone, so
        ``"Db7"`` resolves to C# rather than D.

        Raises:
            UnknownRootError: If the string starts with no known spelling.
        """
        root = _ALIAS_TO_ROOT.get(chord_text[:2]) or _ALIAS_TO_ROOT.get(chord_text[:1])
        if root is None:
            raise UnknownRootError(f"No chord root at the start of '{chord_text}'.")
        return root

    @classmethod
    def from_name(cls, name: str) -> ChordRoot:
        """
        Look a root up by member name or by any of its spellings.

        Raises:
            UnknownRootError: If *name* matches nothing.
        """
        if name in cls.__members__:
            return cls[name]
        try:
            return _ALIAS_TO_ROOT[name]
        except KeyError:
            raise UnknownRootError(f"Unknown root '{name}'.") from None


# ── Lookup tables (built once at import time) ─────────────────────────────────

_CHROMATIC: Final[tuple[ChordRoot, ...]] = tuple(ChordRoot)

_ORDINALS: Final[dict[ChordRoot, int]] = {
    root: idx for idx, root in enumerate(_CHROMATIC)
}

_ALIAS_TO_ROOT: Final[dict[str, ChordRoot]] = {
    alias: root for root in _CHROMATIC for alias in root.all_aliases
}

ALL_ALIASES: Final[tuple[str, ...]] = tuple(
    sorted(_ALIAS_TO_ROOT, key=len, reverse=True)
)
"""Every root spelling, longest first."""
