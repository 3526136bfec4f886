"""conftest.py — shared fixtures for SSS tests."""

import pytest

from sss.codec import ShareEncoding
from sss.field import PrimeField
from sss.scheme import SecretSharer


@pytest.fixture
def sharer():
    return SecretSharer(ShareEncoding.BASE64)


@pytest.fixture
def hex_sharer():
    return SecretSharer(ShareEncoding.HEX)


@pytest.fixture
def small_field():
    """GF(257): small enough to check arithmetic by hand."""
    return PrimeField(prime=257, chunk_bits=8)


@pytest.fixture
def sample_text():
    return (
        "SSS splits a secret into shares using random polynomials over a "
        "256-bit prime field. Any threshold of shares rebuilds the secret "
        "through Lagrange interpolation; fewer reveal nothing about it."
    )
