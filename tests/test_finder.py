"""Unit tests for chord-line detection and find()."""

import os

import pytest

from chordline.finder import detect_words_in_line, find, is_chord_line, normalize_text
from chordline.models import TextWord

SHEET = (
    "        C            F\n"
    "Sem ressalva, sem escalas\n"
    " D#m7-/G          F\n"
    "Demorei mas fui\n"
    "            Dm               F\n"
    "E da janela vejo a esfera azul Uh Uh Uuuuh"
)


def _chords(text: str, simplify: bool = False) -> list[str]:
    return [c.chord for c in find(text, simplify=simplify)]


def _spans(text: str, simplify: bool = False) -> list[tuple[int, int]]:
    return [(c.start_index, c.end_index) for c in find(text, simplify=simplify)]


# ---------------------------------------------------------------------------
# normalize_text
# ---------------------------------------------------------------------------

def test_normalize_removes_double_quotes() -> None:
    assert normalize_text('"C  G"') == "C  G"


def test_normalize_replaces_escaped_line_breaks() -> None:
    assert normalize_text("C\\nG") == f"C{os.linesep}G"
    assert normalize_text("C\\\\nG") == f"C{os.linesep}G"


def test_normalize_keeps_real_line_breaks() -> None:
    assert normalize_text("C\nG") == "C\nG"


# ---------------------------------------------------------------------------
# is_chord_line
# ---------------------------------------------------------------------------

def _words(*flags: tuple[str, bool]) -> list[TextWord]:
    return [TextWord(word, is_confirmed_chord=confirmed) for word, confirmed in flags]


def test_single_word_line_follows_the_word() -> None:
    assert is_chord_line(_words(("C", True)))
    assert not is_chord_line(_words(("Car", False)))


def test_parentheses_do_not_vote() -> None:
    assert is_chord_line(_words(("(", False), ("C", True), (")", False)))


def test_two_words_need_both_to_be_chords() -> None:
    assert is_chord_line(_words(("Gsus", True), ("G", True)))
    assert not is_chord_line(_words(("Em", True), ("nome", False)))


def test_strict_majority_required() -> None:
    assert is_chord_line(_words(("G", True), ("G", True), ("(test)", False)))
    assert not is_chord_line(_words(("A", True), ("B", True), ("x", False), ("y", False)))


def test_empty_line_is_not_a_chord_line() -> None:
    assert not is_chord_line([])


def test_detect_words_flags_root_prefixes() -> None:
    words = detect_words_in_line("Car tua")
    assert [w.could_be_chord for w in words] == [True, False]


# ---------------------------------------------------------------------------
# find
# ---------------------------------------------------------------------------

def test_finds_chords_of_a_sheet() -> None:
    assert _chords(SHEET) == ["C", "F", "D#m7-/G", "F", "Dm", "F"]


def test_offsets_point_into_the_text() -> None:
    for chord in find(SHEET):
        assert SHEET[chord.start_index:chord.end_index] == chord.chord


def test_sheet_offsets() -> None:
    assert _spans(SHEET) == [(8, 9), (21, 22), (50, 57), (67, 68), (97, 99), (114, 115)]


@pytest.mark.parametrize("text", ["Car", "\\nBuscai", "2a.vez,", "À tua cruz", "imensidao/"])
def test_invalid_chords_are_not_found(text: str) -> None:
    assert find(text) == []


@pytest.mark.parametrize("text", ["D/F#", "G#4", "G7M", "C#m7M"])
def test_valid_chords_are_found(text: str) -> None:
    assert _chords(text) == [text]


def test_prose_is_ignored() -> None:
    assert find("Em nome de Cristo, que e a nossa paz!") == []


def test_single_capitalised_word_in_prose_is_ignored() -> None:
    assert find("Só em Ti") == []


def test_empty_text() -> None:
    assert find("") == []


def test_chords_between_parentheses() -> None:
    assert _chords("(C F# G)") == ["C", "F#", "G"]
    assert _chords("(  F   G   C  )") == ["F", "G", "C"]


def test_chords_with_inner_parentheses() -> None:
    assert _chords("(  C#7M   Gm7(5b)   C7   Fm7  )") == ["C#7M", "Gm7(5b)", "C7", "Fm7"]


def test_slash_chords_between_parentheses() -> None:
    assert _chords("(  A/B  )  (  C/D  )") == ["A/B", "C/D"]


def test_balanced_parentheses_chord() -> None:
    assert _chords("G6(9)") == ["G6(9)"]


def test_parenthesised_text_is_not_a_chord() -> None:
    assert _chords("G6(9) G6(9) (test)") == ["G6(9)", "G6(9)"]


def test_sus_chords() -> None:
    assert _chords("Gsus G") == ["Gsus", "G"]
    assert _chords("Gsus") == ["Gsus"]


def test_offsets_are_kept_without_simplify() -> None:
    assert _spans("C#7M   Gm7(5b)") == [(0, 4), (7, 14)]


def test_simplify_updates_chords_and_end_offsets() -> None:
    assert _chords("(  C#7M   Gm7(5b)   C7   Fm7  )", simplify=True) == ["C#", "Gm7", "C7", "Fm7"]
    assert _spans("C#7M   Gm7(5b)", simplify=True) == [(0, 2), (7, 10)]


def test_escaped_line_breaks_split_lines() -> None:
    text = "C   G\\nVim buscar e vim salvar"
    chords = find(text)
    assert [c.chord for c in chords] == ["C", "G"]
    normalized = normalize_text(text)
    for chord in chords:
        assert normalized[chord.start_index:chord.end_index] == chord.chord


def test_offsets_across_windows_line_breaks() -> None:
    text = "Lyrics here\r\nC   G"
    assert [text[c.start_index:c.end_index] for c in find(text)] == ["C", "G"]


def test_long_chord_row_keeps_every_chord_word() -> None:
    row = (
        "C G Am F Dm Em A E D Bb Gm B C7 Fmaj7 G7 Am7 D7 B7 E7 Cmaj7 "
        "Fm Ab Gmaj7 Cm Eb A7 Dm7 Gm7 C#m F#m Bm E6 Cdim G#dim D#dim Adim"
    )
    expected = [w for w in row.split() if not w.endswith("dim")]
    assert _chords(row) == expected
