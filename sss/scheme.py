"""
SSS Scheme — create / combine / validate
==========================================

The public face of the engine. Wires the components together:

    create  = split_secret -> generate_points -> ShareCodec.encode_share
    combine = ShareCodec.decode_share -> combine_points -> merge_secret

A ``SecretSharer`` holds only immutable settings (encoding, field, draw
limit); every call builds its own polynomials and ``UsedNumbers`` set, so
one instance can serve many threads at once.

Note: ``combine`` does not know the threshold the shares were created
with. Passing fewer than ``minimum`` shares returns wrong bytes, not an
error.

Copyright (c) 2026 CruxLabx
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import blake3

from sss.chunker import merge_secret, split_secret
from sss.codec import ShareCodec, ShareEncoding
from sss.config import SSSConfig
from sss.errors import ErrorKind, SSSError
from sss.field import DEFAULT_MAX_DRAW_ATTEMPTS, FIELD_256, PrimeField
from sss.polynomial import generate_points
from sss.reconstruct import combine_points

logger = logging.getLogger("sss.scheme")

FINGERPRINT_CHARS = 16


def share_fingerprint(share: str) -> str:
    """Short BLAKE3 digest of a share, safe to put in logs."""
    return blake3.blake3(share.encode("utf-8")).hexdigest()[:FINGERPRINT_CHARS]


def _check_count(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SSSError(
            ErrorKind.INVALID_PARAMETERS,
            f"{name} must be an integer, got {type(value).__name__}",
        )
    if value <= 0:
        raise SSSError(ErrorKind.INVALID_PARAMETERS, f"{name} must be >= 1, got {value}")
    return value


class SecretSharer:
    """
    Shamir's Secret Sharing over a prime field, with text-encoded shares.

    Usage:
        sharer = SecretSharer(ShareEncoding.HEX)
        shares = sharer.create(3, 6, b"correct horse battery staple")
        secret = sharer.combine(shares[1:4])
    """

    def __init__(
        self,
        encoding: ShareEncoding = ShareEncoding.BASE64,
        field: PrimeField = FIELD_256,
        max_draw_attempts: int = DEFAULT_MAX_DRAW_ATTEMPTS,
    ):
        self.field = field
        self.codec = ShareCodec(encoding, field)
        self.max_draw_attempts = max_draw_attempts

    @classmethod
    def from_config(cls, config: Optional[SSSConfig] = None) -> "SecretSharer":
        config = config or SSSConfig()
        return cls(encoding=config.encoding, max_draw_attempts=config.max_draw_attempts)

    @property
    def encoding(self) -> ShareEncoding:
        return self.codec.encoding

    def create(self, minimum: int, shares: int, secret: Union[bytes, str]) -> list[str]:
        """
        Split ``secret`` into ``shares`` strings, any ``minimum`` of which
        reconstruct it. ``str`` secrets are encoded as UTF-8.

        Time complexity: O(shares * chunks * minimum)
        """
        minimum = _check_count("minimum", minimum)
        shares = _check_count("shares", shares)
        if minimum > shares:
            raise SSSError(
                ErrorKind.INVALID_PARAMETERS,
                f"minimum ({minimum}) must be <= shares ({shares})",
            )
        if isinstance(secret, str):
            secret = secret.encode("utf-8")

        chunks = split_secret(secret, self.field)
        points = generate_points(
            minimum, shares, chunks, self.field, self.max_draw_attempts
        )
        result = [self.codec.encode_share(row) for row in points]

        logger.debug(
            "Created %d-of-%d shares over %d chunk(s) (%s)",
            minimum, shares, len(chunks), self.encoding.value,
        )
        return result

    def combine(self, shares: list[str]) -> bytes:
        """Reconstruct the secret bytes from encoded shares."""
        if not shares:
            raise SSSError(ErrorKind.EMPTY_SHARE_LIST, "No shares provided")

        points_by_share = []
        for index, share in enumerate(shares):
            try:
                points_by_share.append(self.codec.decode_share(share))
            except SSSError as e:
                if isinstance(share, str):
                    logger.debug("Rejected share %d (%s): %s", index, share_fingerprint(share), e)
                raise

        chunks = combine_points(points_by_share, self.field)
        logger.debug(
            "Combined %d share(s) into %d chunk(s)", len(shares), len(chunks)
        )
        return merge_secret(chunks, self.field)

    def combine_text(self, shares: list[str]) -> str:
        return self.combine(shares).decode("utf-8")

    def is_valid_share(self, text: str) -> bool:
        return self.codec.is_valid_share(text)


# ---------------------------------------------------------------------------
# Module-level shortcuts
# ---------------------------------------------------------------------------

def create(
    minimum: int,
    shares: int,
    secret: Union[bytes, str],
    encoding: ShareEncoding = ShareEncoding.BASE64,
) -> list[str]:
    return SecretSharer(encoding).create(minimum, shares, secret)


def combine(shares: list[str], encoding: ShareEncoding = ShareEncoding.BASE64) -> bytes:
    return SecretSharer(encoding).combine(shares)


def is_valid_share(text: str, encoding: ShareEncoding = ShareEncoding.BASE64) -> bool:
    return SecretSharer(encoding).is_valid_share(text)
