"""Tests for the chordline command-line interface."""

import pytest
from click.testing import CliRunner

from chordline import __version__
from chordline.cli import main

SHEET = "C   G/B   Am\nLetra da canção\n"


def _invoke(*args: str, stdin: str | None = None):
    return CliRunner().invoke(main, list(args), input=stdin)


def test_version_option() -> None:
    result = _invoke("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_subcommands() -> None:
    result = _invoke("-h")
    assert result.exit_code == 0
    for command in ("find", "simplify", "transpose"):
        assert command in result.output


def test_find_reads_stdin() -> None:
    result = _invoke("find", stdin="C#7M   Gm7(5b)")
    assert result.exit_code == 0
    assert result.output.splitlines() == ["0-4\tC#7M", "7-14\tGm7(5b)"]


def test_find_simplify_flag() -> None:
    result = _invoke("find", "--simplify", stdin="C#7M   Gm7(5b)")
    assert result.exit_code == 0
    assert result.output.splitlines() == ["0-2\tC#", "7-10\tGm7"]


def test_find_prints_nothing_for_prose() -> None:
    result = _invoke("find", stdin="Só em Ti")
    assert result.exit_code == 0
    assert result.output == ""


def test_simplify_keeps_layout() -> None:
    result = _invoke("simplify", stdin="Abm7(5-)   G")
    assert result.exit_code == 0
    assert result.output == "Abm7       G\n"


def test_output_keeps_a_single_final_newline() -> None:
    result = _invoke("transpose", "--from", "C", "--to", "D", stdin="C   G\n")
    assert result.exit_code == 0
    assert result.output == "D   A\n"


def test_transpose_accepts_any_spelling() -> None:
    sharp = _invoke("transpose", "--from", "C", "--to", "C#", stdin="C   F")
    flat = _invoke("transpose", "--from", "C", "--to", "Db", stdin="C   F")
    assert sharp.exit_code == flat.exit_code == 0
    assert sharp.output == flat.output == "C#   F#\n"


def test_transpose_unknown_key_is_usage_error() -> None:
    result = _invoke("transpose", "--from", "C", "--to", "H", stdin="C   F")
    assert result.exit_code == 2


def test_transpose_requires_both_keys() -> None:
    result = _invoke("transpose", "--from", "C", stdin="C   F")
    assert result.exit_code == 2


@pytest.mark.integration
def test_transpose_file_to_output(tmp_path) -> None:
    sheet = tmp_path / "song.txt"
    sheet.write_text(SHEET, encoding="utf-8")
    out = tmp_path / "song_d.txt"

    result = _invoke("transpose", str(sheet), "--from", "C", "--to", "D", "-o", str(out))

    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8") == "D   A/C#   Bm\nLetra da canção\n"


@pytest.mark.integration
def test_simplify_missing_file_fails(tmp_path) -> None:
    result = _invoke("simplify", str(tmp_path / "missing.txt"))
    assert result.exit_code == 2
