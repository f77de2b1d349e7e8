"""chordline CLI entry point."""

import logging
from typing import TextIO

import click

from chordline import __version__
from chordline.finder import find
from chordline.roots import ChordRoot, UnknownRootError
from chordline.simplifier import simplify_chords_in_text
from chordline.transposer import transpose_text


def _parse_root(ctx: click.Context, param: click.Parameter, value: str) -> ChordRoot:
    """Click callback turning a key spelling such as 'Db' or 'A#' into a ChordRoot."""
    try:
        return ChordRoot.from_name(value)
    except UnknownRootError:
        spellings = ", ".join(alias for root in ChordRoot for alias in root.all_aliases)
        raise click.BadParameter(f"'{value}' is not a key. Use one of: {spellings}.") from None


def _emit(text: str, output: str | None) -> None:
    """
    Print *text*, or write it to *output* when a path was given.

    Printed text gets a final newline only when it does not already end with one.
    """
    if output is None:
        click.echo(text, nl=not text.endswith("\n"))
        return
    with click.open_file(output, "w", encoding="utf-8") as f:
        f.write(text)
    click.echo(f"Wrote '{output}'.", err=True)


_input_argument = click.argument(
    "sheet",
    type=click.File("r", encoding="utf-8"),
    default="-",
)

_output_option = click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination file path. Defaults to standard output.",
)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="chordline")
@click.option("--verbose", "-v", is_flag=True, help="Log detection decisions to stderr.")
def main(verbose: bool) -> None:
    """chordline: find, simplify and transpose chords in plain-text chord sheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ── find subcommand ────────────────────────────────────────────────────────────

@main.command(name="find")
@_input_argument
@click.option(
    "--simplify",
    is_flag=True,
    help="Report chords in their simplified form (Cmaj7 → C).",
)
def find_command(sheet: TextIO, simplify: bool) -> None:
    """
    List the chords found in SHEET, one per line as START-END<TAB>CHORD.

    SHEET is a text file; reads standard input when omitted or '-'.

    \b
    Examples:
      chordline find song.txt
      cat song.txt | chordline find --simplify
    """
    for chord in find(sheet.read(), simplify=simplify):
        click.echo(f"{chord.start_index}-{chord.end_index}\t{chord.chord}")


# ── simplify subcommand ────────────────────────────────────────────────────────

@main.command()
@_input_argument
@_output_option
def simplify(sheet: TextIO, output: str | None) -> None:
    """
    Simplify every chord in SHEET, keeping the column layout intact.

    \b
    Examples:
      chordline simplify song.txt
      chordline simplify song.txt -o song_simple.txt
    """
    _emit(simplify_chords_in_text(sheet.read()), output)


# ── transpose subcommand ───────────────────────────────────────────────────────

@main.command()
@_input_argument
@click.option(
    "--from",
    "from_root",
    required=True,
    callback=_parse_root,
    metavar="KEY",
    help="Key the sheet is written in (C, C#, Db, ..., B).",
)
@click.option(
    "--to",
    "to_root",
    required=True,
    callback=_parse_root,
    metavar="KEY",
    help="Key to transpose into.",
)
@_output_option
def transpose(sheet: TextIO, from_root: ChordRoot, to_root: ChordRoot, output: str | None) -> None:
    """
    Transpose every chord in SHEET from one key to another.

    \b
    Examples:
      chordline transpose song.txt --from C --to D
      chordline transpose song.txt --from G --to Eb -o song_eb.txt
    """
    _emit(transpose_text(sheet.read(), from_root, to_root), output)
