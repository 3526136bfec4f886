"""
SSS Chunker — secret bytes <-> field elements
===============================================

A secret longer than one field element is cut into fixed-width chunks,
each carried by its own polynomial:

    b"hello"  ->  "68656c6c6f"  ->  "68656c6c6f000...000"  ->  int(…, 16)
                  hex encode        right-pad to 64 nibbles    one chunk

Merging reverses the steps and strips every trailing 0x00 byte. Padding
and trimming both happen on the right, so a secret whose last byte is
itself 0x00 comes back without it:

    split(b"abc\\x00") -> merge(...) == b"abc"

This is a property of the share format and is kept as-is.

Copyright (c) 2026 CruxLabx
"""

from __future__ import annotations

from sss.errors import ErrorKind, SSSError
from sss.field import FIELD_256, PrimeField


def split_secret(secret: bytes, field: PrimeField = FIELD_256) -> list[int]:
    """Convert ``secret`` into an ordered list of chunk values."""
    if not secret:
        raise SSSError(ErrorKind.EMPTY_SECRET, "Secret must not be empty")

    width = field.chunk_hex
    hex_data = bytes(secret).hex()
    chunks = []
    for start in range(0, len(hex_data), width):
        window = hex_data[start:start + width].ljust(width, "0")
        value = int(window, 16)
        if not field.contains(value):
            # Only reachable with 0xFF-heavy binary input, never UTF-8 text
            raise SSSError(
                ErrorKind.OUT_OF_RANGE_VALUE,
                f"Chunk {start // width} does not fit in the field",
            )
        chunks.append(value)
    return chunks


def merge_secret(chunks: list[int], field: PrimeField = FIELD_256) -> bytes:
    """Reassemble chunk values into the secret, minus trailing nulls."""
    width = field.chunk_hex
    # Values recovered from too few shares can be wider than a chunk
    mask = (1 << width * 4) - 1
    hex_data = "".join(format(chunk & mask, "x").zfill(width) for chunk in chunks)
    return bytes.fromhex(hex_data).rstrip(b"\x00")


def merge_text(chunks: list[int], field: PrimeField = FIELD_256) -> str:
    return merge_secret(chunks, field).decode("utf-8")
