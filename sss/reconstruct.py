"""
SSS Reconstructor — Lagrange interpolation at x = 0
=====================================================

Given points (x_i, y_i) of one chunk polynomial, the chunk value is

    f(0) = sum_i  y_i * prod_{k != i} (0 - x_k) / (x_i - x_k)      (mod P)

Each chunk index is interpolated independently. The number of points is
never compared with the original threshold: with too few points the
result is simply some other polynomial's constant term.

Time complexity: O(shares^2 * chunks)

Copyright (c) 2026 CruxLabx
"""

from __future__ import annotations

from sss.errors import ErrorKind, SSSError
from sss.field import FIELD_256, PrimeField
from sss.polynomial import Point


def interpolate_at_zero(points: list[Point], field: PrimeField = FIELD_256) -> int:
    """Constant term of the polynomial through ``points``."""
    prime = field.prime
    secret = 0
    for i, origin in enumerate(points):
        numerator = 1
        denominator = 1
        for k, other in enumerate(points):
            if k == i:
                continue
            numerator = numerator * (-other.x % prime) % prime
            denominator = denominator * ((origin.x - other.x) % prime) % prime

        # Duplicate x-coordinates leave a zero denominator -> ARITHMETIC_FAILURE
        term = origin.y * numerator % prime
        term = term * field.inverse(denominator) % prime
        secret = (secret + term) % prime
    return secret


def combine_points(
    points_by_share: list[list[Point]],
    field: PrimeField = FIELD_256,
) -> list[int]:
    """
    Recover every chunk value from ``points_by_share[share][chunk]``.

    Raises SSSError if no shares are given or their chunk counts differ.
    """
    if not points_by_share:
        raise SSSError(ErrorKind.EMPTY_SHARE_LIST, "No shares provided")

    chunk_count = len(points_by_share[0])
    for index, row in enumerate(points_by_share):
        if len(row) != chunk_count:
            raise SSSError(
                ErrorKind.MALFORMED_SHARE,
                f"Share {index} carries {len(row)} chunks, expected {chunk_count}",
            )

    return [
        interpolate_at_zero([row[j] for row in points_by_share], field)
        for j in range(chunk_count)
    ]
