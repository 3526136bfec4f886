"""
SSS Test Suite — create / combine
===================================

Tests for:
  - Round trips for every 1 <= m <= n on small grids
  - Threshold equivalence across share subsets
  - Share validation and re-encoding
  - Parameter and share-list errors
  - Randomization between runs
  - Corruption detection
  - Trailing-null secrets

Run: pytest tests/ -v
"""

import math
from concurrent.futures import ThreadPoolExecutor
from itertools import combinations

import pytest

import sss
from sss.codec import ShareEncoding
from sss.config import SSSConfig
from sss.errors import ErrorKind, SSSError
from sss.field import FIELD_127
from sss.scheme import SecretSharer, share_fingerprint


# ─── Round Trips ──────────────────────────────────────────────

class TestRoundTrip:

    @pytest.mark.parametrize("encoding", list(ShareEncoding))
    def test_all_thresholds(self, encoding):
        sharer = SecretSharer(encoding)
        secret = b"nghiatc" + b"x" * 100
        for n in range(1, 6):
            for m in range(1, n + 1):
                shares = sharer.create(m, n, secret)
                assert len(shares) == n
                assert sharer.combine(shares[:m]) == secret
                assert sharer.combine(shares) == secret

    def test_every_subset_of_threshold(self, sharer):
        secret = b"any subset works"
        shares = sharer.create(3, 5, secret)
        for subset in combinations(shares, 3):
            assert sharer.combine(list(subset)) == secret

    def test_threshold_equivalence(self, sharer, sample_text):
        shares = sharer.create(3, 6, sample_text)
        assert sharer.combine_text(shares[0:3]) == sample_text
        assert sharer.combine_text(shares[1:5]) == sample_text
        assert sharer.combine_text(shares[3:6]) == sample_text

    def test_share_order_irrelevant(self, sharer):
        shares = sharer.create(3, 4, b"order")
        assert sharer.combine([shares[3], shares[0], shares[2]]) == b"order"

    def test_unicode_text(self, hex_sharer):
        text = "mật khẩu bí mật ✓ 秘密 🔑"
        shares = hex_sharer.create(2, 3, text)
        assert hex_sharer.combine_text(shares[1:]) == text

    def test_str_and_bytes_equivalent(self, sharer):
        shares = sharer.create(2, 2, "plain text")
        assert sharer.combine(shares) == b"plain text"

    def test_share_length_tracks_chunks(self, sharer, hex_sharer):
        secret = b"z" * 1000
        chunks = math.ceil(len(secret) / 32)
        assert all(len(s) == 88 * chunks for s in sharer.create(2, 3, secret))
        assert all(len(s) == 128 * chunks for s in hex_sharer.create(2, 3, secret))

    def test_module_shortcuts(self):
        shares = sss.create(2, 4, b"shortcut", ShareEncoding.HEX)
        assert all(sss.is_valid_share(s, ShareEncoding.HEX) for s in shares)
        assert sss.combine(shares[2:], ShareEncoding.HEX) == b"shortcut"

    def test_from_config(self):
        sharer = SecretSharer.from_config(SSSConfig(encoding="hex"))
        assert sharer.encoding is ShareEncoding.HEX
        shares = sharer.create(2, 2, b"configured")
        assert len(shares[0]) == 128

    def test_concurrent_calls(self, sharer):
        def roundtrip(i):
            secret = f"thread-{i}-secret".encode()
            return sharer.combine(sharer.create(3, 5, secret)[1:4]) == secret

        with ThreadPoolExecutor(max_workers=8) as pool:
            assert all(pool.map(roundtrip, range(32)))


# ─── Validation ───────────────────────────────────────────────

class TestValidation:

    @pytest.mark.parametrize("encoding", list(ShareEncoding))
    def test_generated_shares_valid(self, encoding):
        sharer = SecretSharer(encoding)
        for share in sharer.create(3, 5, b"validate me" * 10):
            assert sharer.is_valid_share(share)
            points = sharer.codec.decode_share(share)
            assert sharer.codec.encode_share(points) == share

    def test_truncated_share(self, sharer):
        shares = sharer.create(2, 3, b"corrupt me")
        truncated = shares[0][:-1]
        assert not sharer.is_valid_share(truncated)
        with pytest.raises(SSSError) as exc:
            sharer.combine([truncated, shares[1]])
        assert exc.value.kind is ErrorKind.MALFORMED_SHARE

    def test_mixed_chunk_counts(self, sharer):
        short = sharer.create(2, 2, b"short")
        long = sharer.create(2, 2, b"l" * 40)
        with pytest.raises(SSSError) as exc:
            sharer.combine([short[0], long[1]])
        assert exc.value.kind is ErrorKind.MALFORMED_SHARE

    def test_duplicate_share(self, sharer):
        shares = sharer.create(2, 3, b"dup")
        with pytest.raises(SSSError) as exc:
            sharer.combine([shares[0], shares[0]])
        assert exc.value.kind is ErrorKind.ARITHMETIC_FAILURE


# ─── Errors ───────────────────────────────────────────────────

class TestErrors:

    def test_minimum_above_shares(self, sharer):
        with pytest.raises(SSSError) as exc:
            sharer.create(4, 3, b"secret")
        assert exc.value.kind is ErrorKind.INVALID_PARAMETERS

    @pytest.mark.parametrize("minimum,shares", [(0, 3), (-1, 3), (1, 0), (2, -5)])
    def test_non_positive_counts(self, sharer, minimum, shares):
        with pytest.raises(SSSError) as exc:
            sharer.create(minimum, shares, b"secret")
        assert exc.value.kind is ErrorKind.INVALID_PARAMETERS

    @pytest.mark.parametrize("minimum", [True, 2.0, "2"])
    def test_non_integer_counts(self, sharer, minimum):
        with pytest.raises(SSSError) as exc:
            sharer.create(minimum, 3, b"secret")
        assert exc.value.kind is ErrorKind.INVALID_PARAMETERS

    def test_empty_secret(self, sharer):
        for empty in (b"", ""):
            with pytest.raises(SSSError) as exc:
                sharer.create(2, 3, empty)
            assert exc.value.kind is ErrorKind.EMPTY_SECRET

    def test_empty_share_list(self, sharer):
        with pytest.raises(SSSError) as exc:
            sharer.combine([])
        assert exc.value.kind is ErrorKind.EMPTY_SHARE_LIST

    def test_error_message_carries_kind(self, sharer):
        with pytest.raises(SSSError) as exc:
            sharer.create(4, 3, b"secret")
        assert str(exc.value).startswith("invalid-parameters:")


# ─── Scheme Properties ────────────────────────────────────────

class TestProperties:

    def test_runs_are_randomized(self, sharer):
        secret = b"same secret both times"
        first = sharer.create(3, 6, secret)
        second = sharer.create(3, 6, secret)
        assert not set(first) & set(second)

        points_a = {p for s in first for p in sharer.codec.decode_share(s)}
        points_b = {p for s in second for p in sharer.codec.decode_share(s)}
        assert not points_a & points_b

    def test_x_coordinates_unique_within_run(self, sharer):
        shares = sharer.create(3, 6, b"x" * 100)
        xs = [p.x for s in shares for p in sharer.codec.decode_share(s)]
        assert len(set(xs)) == len(xs)

    def test_under_threshold_is_not_an_error(self, sharer):
        """Too few shares interpolate some other polynomial; no exception."""
        secret = b"needs three shares"
        shares = sharer.create(3, 5, secret)
        recovered = sharer.combine(shares[:2])
        assert recovered != secret

    def test_trailing_null_byte_dropped(self, sharer):
        """A secret ending in 0x00 comes back without it."""
        shares = sharer.create(2, 3, b"ends with null\x00")
        assert sharer.combine(shares[:2]) == b"ends with null"

    def test_under_threshold_small_field_returns_bytes(self):
        """Recovered values wider than a 15-byte chunk still merge."""
        sharer = SecretSharer(ShareEncoding.HEX, field=FIELD_127)
        secret = b"pool secret text"
        for _ in range(20):
            shares = sharer.create(3, 5, secret)
            recovered = sharer.combine(shares[:2])
            assert isinstance(recovered, bytes)
            assert len(recovered) <= 2 * FIELD_127.chunk_bytes
            assert sharer.combine(shares[2:]) == secret

    def test_fingerprint(self, sharer):
        share = sharer.create(1, 1, b"fp")[0]
        fp = share_fingerprint(share)
        assert len(fp) == 16
        assert fp == share_fingerprint(share)
        assert share not in fp
