"""
SSS CLI — Command-line interface
==================================

Commands:
  sss create          Split a secret into shares (one per line)
  sss combine         Recover a secret from shares
  sss check           Validate a single share

Shares and secrets travel over arguments, stdin and stdout only.

Copyright (c) 2026 CruxLabx — AGPL-3.0
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click
from pydantic import ValidationError

from sss import __version__
from sss.codec import ShareEncoding
from sss.config import SSSConfig
from sss.errors import SSSError
from sss.scheme import SecretSharer, share_fingerprint

logger = logging.getLogger("sss.cli")

_ENCODINGS = click.Choice([e.value for e in ShareEncoding], case_sensitive=False)


def _sharer(ctx, encoding: Optional[str]) -> SecretSharer:
    config: SSSConfig = ctx.obj["config"]
    return SecretSharer(
        encoding=ShareEncoding(encoding.lower()) if encoding else config.encoding,
        max_draw_attempts=config.max_draw_attempts,
    )


def _fail(err: SSSError) -> None:
    click.echo(f"Error: {err}", err=True)
    raise SystemExit(2)


# ─── Root Group ───────────────────────────────────────────────

@click.group(
    name="sss",
    help="Shamir's Secret Sharing over a 256-bit prime field",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="sss")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """Shamir's Secret Sharing"""
    try:
        config = SSSConfig()
    except ValidationError as e:
        click.echo(f"Error: invalid SSS_ configuration: {e}", err=True)
        raise SystemExit(2)
    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=level,
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose


# ─── create ───────────────────────────────────────────────────

@cli.command()
@click.option("--minimum", "-m", type=int, default=None, help="Shares required to recover (M)")
@click.option("--shares", "-n", type=int, default=None, help="Shares to produce (N)")
@click.option("--encoding", "-e", type=_ENCODINGS, default=None, help="Share text encoding")
@click.argument("secret", required=False)
@click.pass_context
def create(ctx, minimum: Optional[int], shares: Optional[int], encoding: Optional[str],
           secret: Optional[str]):
    """Split SECRET (or stdin) into shares."""
    config: SSSConfig = ctx.obj["config"]
    minimum = config.default_minimum if minimum is None else minimum
    shares = config.default_shares if shares is None else shares

    if secret is None:
        data = click.get_binary_stream("stdin").read()
        if data.endswith(b"\n"):
            data = data[:-1]
    else:
        data = secret.encode("utf-8")

    try:
        result = _sharer(ctx, encoding).create(minimum, shares, data)
    except SSSError as e:
        _fail(e)

    for share in result:
        logger.info("Issued share %s", share_fingerprint(share))
        click.echo(share)


# ─── combine ──────────────────────────────────────────────────

@cli.command()
@click.option("--encoding", "-e", type=_ENCODINGS, default=None, help="Share text encoding")
@click.argument("shares", nargs=-1)
@click.pass_context
def combine(ctx, encoding: Optional[str], shares: tuple):
    """Recover a secret from SHARES (or one share per stdin line)."""
    if not shares:
        stdin = click.get_text_stream("stdin")
        shares = tuple(line.strip() for line in stdin if line.strip())

    try:
        secret = _sharer(ctx, encoding).combine(list(shares))
    except SSSError as e:
        _fail(e)

    click.echo(secret)


# ─── check ────────────────────────────────────────────────────

@cli.command()
@click.option("--encoding", "-e", type=_ENCODINGS, default=None, help="Share text encoding")
@click.argument("share")
@click.pass_context
def check(ctx, encoding: Optional[str], share: str):
    """Validate SHARE; exit status 1 when invalid."""
    if _sharer(ctx, encoding).is_valid_share(share):
        click.echo("valid")
    else:
        click.echo("invalid")
        raise SystemExit(1)


# ─── Entry point ──────────────────────────────────────────────

def main():
    cli()


if __name__ == "__main__":
    main()
