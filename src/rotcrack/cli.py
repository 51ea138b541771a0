from __future__ import annotations

import json
import logging
import math
import sys
from typing import List, Optional

import typer

from rotcrack.classical.rotation import decipher, encipher
from rotcrack.core.config import RankOptions, validate_return_count, validate_workers
from rotcrack.core.ranking import rank_many
from rotcrack.core.results import Candidate
from rotcrack.core.scoring import list_scorers
from rotcrack.errors import InvalidArgumentError

app = typer.Typer(help="rotcrack: crack rotation (Caesar) ciphers by letter-frequency entropy.")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


@app.command()
def scorers():
    """List the available entropy scorers."""
    for name in list_scorers():
        typer.echo(name)


@app.command()
def decrypt(
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
    rotation: int = typer.Option(..., "--rotation", "-k", help="Rotation to undo (1..25)."),
):
    """Decrypt when you already know the rotation."""
    try:
        pt = decipher(text, rotation)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="--rotation")
    typer.echo(pt)


@app.command()
def encrypt(
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
    rotation: int = typer.Option(..., "--rotation", "-k", help="Rotation to apply (1..25)."),
):
    """Encrypt with a known rotation."""
    try:
        ct = encipher(text, rotation)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="--rotation")
    typer.echo(ct)


def _json_record(c: Candidate) -> dict:
    # JSON has no Infinity; a letterless candidate has no score to report
    rec = c.to_dict()
    if not math.isfinite(c.entropy):
        rec["Entropy"] = None
    return rec


def _read_stdin_messages() -> list[str]:
    return [line.rstrip("\r\n") for line in sys.stdin if line.strip()]


@app.command()
def crack(
    messages: Optional[List[str]] = typer.Argument(
        None, help="Ciphertext message(s). Read one per line from stdin when omitted."
    ),
    return_count: int = typer.Option(1, "--return", "-r", help="Candidates to show per message (1..25)."),
    strip: bool = typer.Option(False, "--strip", "-s", help="Remove whitespace before rotating."),
    bigrams: bool = typer.Option(False, "--bigrams", "-b", help="Score letter pairs instead of single letters."),
    workers: int = typer.Option(1, "--workers", "-w", help="Threads used to rank several messages."),
    as_json: bool = typer.Option(False, "--json", help="Print records as a JSON array."),
):
    """
    Try all 25 rotations of each message and print the lowest-entropy ones.

    Short messages hold little frequency information, so the correct
    rotation may rank below the top; raise --return to see more.
    """
    options = RankOptions(
        return_count=return_count,
        strip_whitespace=strip,
        use_bigrams=bigrams,
        workers=workers,
    )
    # Validate before reading stdin or deciphering anything
    try:
        validate_return_count(return_count)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="--return")
    try:
        validate_workers(workers)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="--workers")

    if not messages:
        messages = _read_stdin_messages()
    if not messages:
        typer.echo("No ciphertext given. Pass messages as arguments or pipe them on stdin.", err=True)
        raise typer.Exit(code=1)

    results = rank_many(messages, options)

    if as_json:
        typer.echo(json.dumps([_json_record(c) for c in results], indent=2, allow_nan=False))
        return

    # Every message yields exactly return_count candidates
    for i, c in enumerate(results):
        if i % return_count == 0:
            typer.echo(f"== {c.ciphertext}")
        typer.echo(f"#{i % return_count + 1}  rotation={c.rotation:2d}  entropy={c.entropy:.4f}")
        typer.echo(c.plaintext)
        typer.echo("-" * 60)


def main():
    app()


if __name__ == "__main__":
    main()
