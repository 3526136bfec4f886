"""
SSS Polynomial Engine
======================

For a secret of C chunks and a threshold of M, one random polynomial of
degree M-1 is built per chunk:

    f_j(x) = chunk_j + a_j1 x + a_j2 x^2 + ... + a_j(M-1) x^(M-1)   (mod P)

Each of the N output shares then gets, for every chunk, a fresh random x
and the point (x, f_j(x)).

All random coefficients and all x-coordinates of one run are drawn from a
single ``UsedNumbers`` set seeded with 0, so:
  - no x is 0 (that point would be the secret itself)
  - no x equals a coefficient
  - no two x-coordinates collide, across shares or chunks

Copyright (c) 2026 CruxLabx
"""

from __future__ import annotations

from dataclasses import dataclass

from sss.field import DEFAULT_MAX_DRAW_ATTEMPTS, FIELD_256, PrimeField


@dataclass(frozen=True)
class Point:
    """One (x, y) sample of a chunk polynomial."""
    x: int
    y: int


class UsedNumbers(set):
    """Field elements already handed out during one ``create`` run."""

    def __init__(self, values=()):
        super().__init__(values)
        self.add(0)


def build_polynomials(
    minimum: int,
    chunks: list[int],
    used: UsedNumbers,
    field: PrimeField = FIELD_256,
    max_attempts: int = DEFAULT_MAX_DRAW_ATTEMPTS,
) -> list[list[int]]:
    """
    Build one coefficient list per chunk.

    coeffs[0] is the chunk value; coeffs[1:] are distinct random elements,
    each recorded in ``used``.
    """
    polynomials = []
    for chunk in chunks:
        coeffs = [chunk]
        for _ in range(minimum - 1):
            coeffs.append(field.random_distinct(used, max_attempts))
        polynomials.append(coeffs)
    return polynomials


def evaluate(coeffs: list[int], x: int, field: PrimeField = FIELD_256) -> int:
    """Evaluate a polynomial at x using Horner's method."""
    accum = coeffs[-1]
    for coeff in reversed(coeffs[:-1]):
        # y = (ax + b)x + c
        accum = (accum * x + coeff) % field.prime
    return accum % field.prime


def generate_points(
    minimum: int,
    shares: int,
    chunks: list[int],
    field: PrimeField = FIELD_256,
    max_attempts: int = DEFAULT_MAX_DRAW_ATTEMPTS,
) -> list[list[Point]]:
    """
    Produce ``points[share][chunk]`` for a fresh set of polynomials.

    Time complexity: O(shares * chunks * minimum)
    """
    used = UsedNumbers()
    polynomials = build_polynomials(minimum, chunks, used, field, max_attempts)

    points = []
    for _ in range(shares):
        row = []
        for coeffs in polynomials:
            x = field.random_distinct(used, max_attempts)
            row.append(Point(x, evaluate(coeffs, x, field)))
        points.append(row)
    return points
