"""
SSS Errors — one exception type, many kinds
=============================================

Every domain failure raised by the package is an ``SSSError`` tagged with
an ``ErrorKind``. Callers branch on ``err.kind`` rather than on a class
hierarchy:

    try:
        secret = sss.combine(shares)
    except SSSError as err:
        if err.kind is ErrorKind.MALFORMED_SHARE:
            ...

Copyright (c) 2026 CruxLabx
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_PARAMETERS = "invalid-parameters"    # minimum/shares out of range
    EMPTY_SECRET = "empty-secret"
    EMPTY_SHARE_LIST = "empty-share-list"
    MALFORMED_SHARE = "malformed-share"          # length, alphabet, chunk count
    OUT_OF_RANGE_VALUE = "out-of-range-value"    # decoded element not in (0, P)
    ARITHMETIC_FAILURE = "arithmetic-failure"    # no inverse / draw exhaustion


class SSSError(Exception):
    """A secret sharing failure of a specific ``ErrorKind``."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    def __repr__(self) -> str:
        return f"SSSError({self.kind.name}, {self.message!r})"
