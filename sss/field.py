"""
SSS Prime Field — modular arithmetic over GF(P)
=================================================

Every value handled by the engine is an element of a prime field GF(P).
A field is described by two numbers:

  prime       P, the field modulus
  chunk_bits  how many bits of secret one element carries

Two fields ship with the package:

  FIELD_256   P = 2^256 - 189, 32-byte chunks (multi-chunk secrets)
  FIELD_127   P = 2^127 - 1 (12th Mersenne prime), single-value pools

Random elements come from ``secrets`` (os.urandom) and are drawn by
rejection sampling: a raw draw >= P is thrown away and redrawn, since
reducing it mod P would bias the low end of the field.

Copyright (c) 2026 CruxLabx
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from sss.errors import ErrorKind, SSSError


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PRIME_256 = 2**256 - 189
PRIME_127 = 2**127 - 1

# Collisions in a 256-bit field are astronomically unlikely; hitting this
# many in a row means the random source is broken.
DEFAULT_MAX_DRAW_ATTEMPTS = 128


# ---------------------------------------------------------------------------
# Prime Field
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PrimeField:
    """GF(prime), carrying ``chunk_bits`` of secret per element."""
    prime: int
    chunk_bits: int

    def __post_init__(self) -> None:
        if self.prime < 3:
            raise ValueError(f"Field prime must be > 2, got {self.prime}")
        if not 8 <= self.chunk_bits <= self.prime.bit_length():
            raise ValueError(
                f"chunk_bits ({self.chunk_bits}) must be in "
                f"[8, {self.prime.bit_length()}]"
            )

    @property
    def bits(self) -> int:
        """Width of a raw random draw."""
        return self.prime.bit_length()

    @property
    def chunk_bytes(self) -> int:
        """Whole bytes of secret per chunk."""
        return self.chunk_bits // 8

    @property
    def chunk_hex(self) -> int:
        return self.chunk_bytes * 2

    @property
    def element_bytes(self) -> int:
        """Bytes needed to hold any element big-endian."""
        return (self.bits + 7) // 8

    def contains(self, value: int) -> bool:
        return 0 <= value < self.prime

    # ---- arithmetic ------------------------------------------------------

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.prime

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.prime

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.prime

    def neg(self, a: int) -> int:
        return -a % self.prime

    def inverse(self, a: int) -> int:
        """Multiplicative inverse by the extended Euclidean algorithm."""
        a %= self.prime
        if a == 0:
            raise SSSError(
                ErrorKind.ARITHMETIC_FAILURE,
                "0 has no multiplicative inverse (duplicate x-coordinate?)",
            )
        old_r, r = a, self.prime
        old_s, s = 1, 0
        while r:
            q = old_r // r
            old_r, r = r, old_r - q * r
            old_s, s = s, old_s - q * s
        # old_r == gcd(a, P) == 1 since P is prime and a != 0
        return old_s % self.prime

    # ---- sampling --------------------------------------------------------

    def random_element(self) -> int:
        """Uniform element of [0, P) by rejection sampling."""
        value = secrets.randbits(self.bits)
        while value >= self.prime:
            value = secrets.randbits(self.bits)
        return value

    def random_distinct(
        self,
        used: set[int],
        max_attempts: int = DEFAULT_MAX_DRAW_ATTEMPTS,
    ) -> int:
        """Draw an element not yet in ``used``, record it, and return it."""
        for _ in range(max_attempts):
            value = self.random_element()
            if value not in used:
                used.add(value)
                return value
        raise SSSError(
            ErrorKind.ARITHMETIC_FAILURE,
            f"No unused field element after {max_attempts} draws",
        )


FIELD_256 = PrimeField(prime=PRIME_256, chunk_bits=256)
FIELD_127 = PrimeField(prime=PRIME_127, chunk_bits=127)
