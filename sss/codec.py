"""
SSS Share Codec — fixed-width text encoding of share points
=============================================================

A share is the concatenation, in chunk order, of every chunk's point:

    [x_0][y_0][x_1][y_1] ... [x_{C-1}][y_{C-1}]

Each element is rendered from its big-endian byte form (32 bytes in the
default field) with a fixed width:

    Encoding   element   point   share
    base64       44        88     88 * C     URL-safe alphabet, "=" pad kept
    hex          64       128    128 * C     lowercase out, any case in

Decoding is strict: the length must be a positive multiple of the point
width, every token must be in the alphabet, and every value must lie in
(0, P). Zero is excluded because no x-coordinate is ever 0 and a zero y
is indistinguishable from a wiped share.

Copyright (c) 2026 CruxLabx
"""

from __future__ import annotations

import base64
import binascii
import re
from enum import Enum

from sss.errors import ErrorKind, SSSError
from sss.field import FIELD_256, PrimeField
from sss.polynomial import Point


class ShareEncoding(str, Enum):
    BASE64 = "base64"   # URL-safe Base64
    HEX = "hex"


_BASE64URL_TOKEN = re.compile(r"[A-Za-z0-9_-]+={0,2}")
_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]+")


class ShareCodec:
    """
    Encodes and decodes share strings for one (encoding, field) pair.

    Usage:
        codec = ShareCodec(ShareEncoding.HEX)
        text = codec.encode_share(points)
        assert codec.decode_share(text) == points
    """

    def __init__(
        self,
        encoding: ShareEncoding = ShareEncoding.BASE64,
        field: PrimeField = FIELD_256,
    ):
        self.encoding = ShareEncoding(encoding)
        self.field = field
        if self.encoding is ShareEncoding.BASE64:
            self.element_width = len(base64.urlsafe_b64encode(bytes(field.element_bytes)))
        else:
            self.element_width = field.element_bytes * 2

    @property
    def point_width(self) -> int:
        return self.element_width * 2

    # ---- elements --------------------------------------------------------

    def encode_element(self, value: int) -> str:
        raw = value.to_bytes(self.field.element_bytes, "big")
        if self.encoding is ShareEncoding.BASE64:
            return base64.urlsafe_b64encode(raw).decode("ascii")
        return raw.hex()

    def decode_element(self, token: str) -> int:
        """Decode one token; raises SSSError on bad alphabet or range."""
        if len(token) != self.element_width:
            raise SSSError(
                ErrorKind.MALFORMED_SHARE,
                f"Element token must be {self.element_width} chars, got {len(token)}",
            )

        if self.encoding is ShareEncoding.BASE64:
            if not _BASE64URL_TOKEN.fullmatch(token):
                raise SSSError(ErrorKind.MALFORMED_SHARE, "Invalid Base64URL characters")
            try:
                raw = base64.b64decode(token, altchars=b"-_", validate=True)
            except binascii.Error as e:
                raise SSSError(ErrorKind.MALFORMED_SHARE, f"Invalid Base64URL token: {e}") from e
            if len(raw) != self.field.element_bytes:
                raise SSSError(
                    ErrorKind.MALFORMED_SHARE,
                    f"Element must decode to {self.field.element_bytes} bytes, got {len(raw)}",
                )
            if base64.urlsafe_b64encode(raw).decode("ascii") != token:
                raise SSSError(ErrorKind.MALFORMED_SHARE, "Non-canonical Base64URL token")
            value = int.from_bytes(raw, "big")
        else:
            if not _HEX_TOKEN.fullmatch(token):
                raise SSSError(ErrorKind.MALFORMED_SHARE, "Invalid hex characters")
            value = int(token, 16)

        if not 0 < value < self.field.prime:
            raise SSSError(
                ErrorKind.OUT_OF_RANGE_VALUE,
                "Share element outside the open interval (0, P)",
            )
        return value

    # ---- shares ----------------------------------------------------------

    def encode_share(self, points: list[Point]) -> str:
        return "".join(
            self.encode_element(p.x) + self.encode_element(p.y) for p in points
        )

    def decode_share(self, text: str) -> list[Point]:
        """Split a share into per-chunk points, validating every element."""
        if not isinstance(text, str):
            raise SSSError(
                ErrorKind.MALFORMED_SHARE,
                f"Share must be a string, got {type(text).__name__}",
            )
        if not text or len(text) % self.point_width != 0:
            raise SSSError(
                ErrorKind.MALFORMED_SHARE,
                f"Share length {len(text)} is not a positive multiple of "
                f"{self.point_width} ({self.encoding.value})",
            )

        width = self.element_width
        points = []
        for start in range(0, len(text), self.point_width):
            x = self.decode_element(text[start:start + width])
            y = self.decode_element(text[start + width:start + 2 * width])
            points.append(Point(x, y))
        return points

    def is_valid_share(self, text: str) -> bool:
        """Same checks as ``decode_share`` without raising."""
        try:
            self.decode_share(text)
        except SSSError:
            return False
        return True
