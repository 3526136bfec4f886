"""
SSS Test Suite — Chunker
==========================
"""

import pytest

from sss.chunker import merge_secret, merge_text, split_secret
from sss.errors import ErrorKind, SSSError
from sss.field import FIELD_256


class TestSplit:

    def test_short_secret_right_padded(self):
        chunks = split_secret(b"hello")
        assert chunks == [int("68656c6c6f".ljust(64, "0"), 16)]

    def test_exact_chunk_width(self):
        assert len(split_secret(b"a" * 32)) == 1
        assert len(split_secret(b"a" * 33)) == 2
        assert len(split_secret(b"a" * 64)) == 2

    def test_chunk_order(self):
        chunks = split_secret(b"A" * 32 + b"B")
        assert chunks[0] == int("41" * 32, 16)
        assert chunks[1] == int("42".ljust(64, "0"), 16)

    def test_empty_secret_rejected(self):
        with pytest.raises(SSSError) as exc:
            split_secret(b"")
        assert exc.value.kind is ErrorKind.EMPTY_SECRET

    def test_chunk_beyond_prime_rejected(self):
        with pytest.raises(SSSError) as exc:
            split_secret(b"\xff" * 32)
        assert exc.value.kind is ErrorKind.OUT_OF_RANGE_VALUE

    def test_all_chunks_in_field(self):
        for chunk in split_secret("ünïcødé ✓".encode("utf-8") * 20):
            assert FIELD_256.contains(chunk)


class TestMerge:

    def test_roundtrip(self):
        secret = b"The quick brown fox jumps over the lazy dog, twice over."
        assert merge_secret(split_secret(secret)) == secret

    def test_leading_zero_bytes_kept(self):
        secret = b"\x00\x00abc"
        assert merge_secret(split_secret(secret)) == secret

    def test_merge_text(self):
        text = "xin chào thế giới"
        assert merge_text(split_secret(text.encode("utf-8"))) == text

    def test_trailing_null_is_lost(self):
        """Right padding and right trimming cannot tell a real 0x00 from padding."""
        assert merge_secret(split_secret(b"abc\x00")) == b"abc"
        assert merge_secret(split_secret(b"abc\x00\x00\x00")) == b"abc"

    def test_small_field_chunks(self, small_field):
        chunks = split_secret(b"hi", small_field)
        assert chunks == [0x68, 0x69]
        assert merge_secret(chunks, small_field) == b"hi"
