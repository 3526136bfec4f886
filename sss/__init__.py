"""
SSS — Shamir's Secret Sharing over a 256-bit prime field
==========================================================

Splits a byte-string secret into N text shares, any M of which rebuild it
exactly while M-1 of them reveal nothing.

Architecture:
    create:   secret -> Chunker -> PolynomialEngine -> ShareCodec -> shares
    combine:  shares -> ShareCodec -> Reconstructor -> Chunker -> secret

    All arithmetic happens in PrimeField GF(2^256 - 189).

Copyright (c) 2026 CruxLabx — Mounesh Kodi
License: AGPL-3.0
"""

__version__ = "0.1.0"
__author__ = "Mounesh Kodi"
__org__ = "CruxLabx"

from sss.errors import ErrorKind, SSSError
from sss.field import FIELD_127, FIELD_256, PrimeField
from sss.codec import ShareCodec, ShareEncoding
from sss.config import SSSConfig
from sss.pool import SecretPool
from sss.scheme import SecretSharer, combine, create, is_valid_share, share_fingerprint

__all__ = [
    "ErrorKind",
    "SSSError",
    "PrimeField",
    "FIELD_256",
    "FIELD_127",
    "ShareCodec",
    "ShareEncoding",
    "SSSConfig",
    "SecretPool",
    "SecretSharer",
    "create",
    "combine",
    "is_valid_share",
    "share_fingerprint",
    "__version__",
]
