"""
SSS Secret Pool — one field element, fixed x-coordinates
==========================================================

The single-value form of the scheme: the secret is one element of a small
field (GF(2^127 - 1) by default), there is no chunking and no text
encoding, and shares are evaluated at x = 1, 2, ..., N.

Unlike ``combine`` on encoded shares, a pool remembers its own threshold
and refuses to recover from fewer points.

Usage:
    pool = SecretPool(minimum=3, shares=5)
    assert pool.recover_secret(pool.points[:3]) == pool.secret

Copyright (c) 2026 CruxLabx
"""

from __future__ import annotations

from typing import Optional

from sss.errors import ErrorKind, SSSError
from sss.field import FIELD_127, PrimeField
from sss.polynomial import Point, UsedNumbers, build_polynomials, evaluate
from sss.reconstruct import interpolate_at_zero


class SecretPool:
    """A random polynomial over ``field`` and its first ``shares`` points."""

    def __init__(
        self,
        minimum: int,
        shares: int,
        field: PrimeField = FIELD_127,
        secret: Optional[int] = None,
    ):
        if minimum < 1 or shares < 1:
            raise SSSError(
                ErrorKind.INVALID_PARAMETERS,
                f"minimum and shares must be >= 1, got {minimum} and {shares}",
            )
        if minimum > shares:
            raise SSSError(
                ErrorKind.INVALID_PARAMETERS,
                f"Pool secret would be irrecoverable: minimum ({minimum}) > shares ({shares})",
            )
        if shares >= field.prime:
            raise SSSError(
                ErrorKind.INVALID_PARAMETERS,
                f"shares ({shares}) must be below the field prime",
            )
        if secret is None:
            secret = field.random_element()
        elif not field.contains(secret):
            raise SSSError(ErrorKind.OUT_OF_RANGE_VALUE, "Secret does not fit in the field")

        self.minimum = minimum
        self.shares = shares
        self.field = field
        self._poly = build_polynomials(minimum, [secret], UsedNumbers(), field)[0]
        self.points = [
            Point(x, evaluate(self._poly, x, field)) for x in range(1, shares + 1)
        ]

    @property
    def secret(self) -> int:
        return self._poly[0]

    def recover_secret(self, points: list[Point]) -> int:
        if not points:
            raise SSSError(ErrorKind.EMPTY_SHARE_LIST, "No points provided")
        if len(points) < self.minimum:
            raise SSSError(
                ErrorKind.INVALID_PARAMETERS,
                f"Need at least {self.minimum} points, got {len(points)}",
            )
        return interpolate_at_zero(points, self.field)
