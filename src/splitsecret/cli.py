"""
CLI application for splitsecret threshold secret sharing.

Commands:
    split          Split a secret into shares
    combine        Reconstruct a secret from shares
    random-secret  Generate a random secret of a valid size

Secrets and shares are passed as hex or base64 text and printed to stdout.
"""

import logging
import os
from typing import List

import typer

from .core.secret import combine as combine_secret
from .core.secret import create
from .crypto.chunks import CHUNK_SIZE
from .crypto.encoding import (
    Encoding,
    decode_secret,
    decode_shares,
    encode_secret,
    encode_shares,
)
from .errors import SSSError


app = typer.Typer(name="splitsecret", help="Threshold secret sharing over GF(p)")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Split secrets into shares and combine them back."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def split(
    secret: str = typer.Argument(..., help="Secret, length a multiple of 32 bytes"),
    min_shares: int = typer.Option(
        ..., "--min", "-m", help="Shares required to reconstruct"
    ),
    total_shares: int = typer.Option(..., "--total", "-n", help="Shares to create"),
    encoding: Encoding = typer.Option(
        Encoding.HEX, "--encoding", "-e", help="Text encoding of secret and shares"
    ),
) -> None:
    """
    Split a secret into shares.

    Prints one share per line. Any --min of them reconstruct the secret.

    Example:
        splitsecret split $(splitsecret random-secret) -m 3 -n 5
    """
    try:
        shares = create(min_shares, total_shares, decode_secret(secret, encoding))
    except SSSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for line in encode_shares(shares, encoding):
        typer.echo(line)


@app.command()
def combine(
    shares: List[str] = typer.Argument(..., help="Shares to combine"),
    encoding: Encoding = typer.Option(
        Encoding.HEX, "--encoding", "-e", help="Text encoding of secret and shares"
    ),
) -> None:
    """
    Reconstruct a secret from shares.

    The result is only correct when at least the threshold number of
    shares is given; fewer shares silently produce a wrong secret.
    """
    try:
        secret = combine_secret(decode_shares(shares, encoding))
    except SSSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(encode_secret(secret, encoding))


@app.command("random-secret")
def random_secret(
    size: int = typer.Option(CHUNK_SIZE, "--size", "-s", help="Secret size in bytes"),
    encoding: Encoding = typer.Option(Encoding.HEX, "--encoding", "-e"),
) -> None:
    """Print a random secret suitable for split."""
    if size <= 0 or size % CHUNK_SIZE != 0:
        typer.echo(
            f"Error: Size must be a positive multiple of {CHUNK_SIZE}", err=True
        )
        raise typer.Exit(1)

    secret = os.urandom(size)
    typer.echo(encode_secret(secret, encoding))


if __name__ == "__main__":
    app()
