# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=invalid-name

"""Helpers shared by the modular crypt format decoders."""

import base64
import binascii
import re
from typing import List, Tuple

from .errors import MalformedEncodingError

UINT32_MAX = 2**32 - 1

_RAW_B64_RE = re.compile(r"[A-Za-z0-9+/]+")
_STD_B64_RE = re.compile(r"[A-Za-z0-9+/]+={0,2}")


def as_password_bytes(password: bytes | str) -> bytes:
    """Get the raw bytes of a password (utf-8 for text).

    Lone surrogates are kept as their utf-8 style three byte sequences.
    """
    if isinstance(password, str):
        return password.encode("utf-8", errors="surrogatepass")
    return bytes(password)


def as_ascii_text(encoded: bytes | str) -> str:
    """Get an encoded hash as text.

    Parameters
    ----------
    encoded : bytes | str
        The stored encoded hash.

    Returns
    -------
    str
        The encoded hash as an ascii string.

    Raises
    ------
    MalformedEncodingError
        If the encoded hash is not ascii.
    """
    try:
        if isinstance(encoded, str):
            encoded.encode("ascii")
            return encoded
        return bytes(encoded).decode("ascii")
    except UnicodeError as exc:
        raise MalformedEncodingError("the encoded hash is not ascii") from exc


def split_fields(encoded: str, expected: int) -> List[str]:
    """Split an encoded hash on '$' and check the number of fields.

    Parameters
    ----------
    encoded : str
        The encoded hash.
    expected : int
        The exact number of fields, including the leading empty one.

    Returns
    -------
    List[str]
        The fields.

    Raises
    ------
    MalformedEncodingError
        If the number of fields is not the expected one.
    """
    parts = encoded.split("$")
    if len(parts) != expected:
        raise MalformedEncodingError(
            f"expected {expected} '$' separated fields, got {len(parts)}"
        )
    return parts


def scan_params(segment: str, keys: Tuple[str, ...]) -> Tuple[int, ...]:
    """Parse a ``k1=<int>,k2=<int>,...`` parameter segment.

    Keys must appear in the given order, are case-sensitive and every
    value must be an unsigned decimal integer that fits in 32 bits.

    Parameters
    ----------
    segment : str
        The parameter segment of the encoded hash.
    keys : Tuple[str, ...]
        The expected keys, in order.

    Returns
    -------
    Tuple[int, ...]
        The values, in the order of the keys.

    Raises
    ------
    MalformedEncodingError
        If the segment does not follow the expected grammar.
    """
    pattern = ",".join(f"{re.escape(key)}=([0-9]+)" for key in keys)
    match = re.fullmatch(pattern, segment)
    if match is None:
        raise MalformedEncodingError(
            f"parameters do not match {','.join(k + '=<int>' for k in keys)}"
        )
    values = tuple(int(group) for group in match.groups())
    if any(value > UINT32_MAX for value in values):
        raise MalformedEncodingError("parameter value out of range")
    return values


def _check_canonical(segment: str, decoded: bytes, padded: bool) -> None:
    # non-zero trailing bits decode fine but re-encode differently
    encoded = base64.b64encode(decoded).decode("ascii")
    if not padded:
        encoded = encoded.rstrip("=")
    if encoded != segment:
        raise MalformedEncodingError("non-canonical base64 segment")


def decode_raw_b64(segment: str) -> bytes:
    """Strictly decode unpadded standard base64.

    Parameters
    ----------
    segment : str
        The base64 segment, without padding.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    MalformedEncodingError
        If the segment is empty, padded, or not valid base64.
    """
    if (
        not segment
        or not _RAW_B64_RE.fullmatch(segment)
        or len(segment) % 4 == 1
    ):
        raise MalformedEncodingError("invalid unpadded base64 segment")
    try:
        decoded = base64.b64decode(
            segment + "=" * (-len(segment) % 4), validate=True
        )
    except binascii.Error as exc:
        raise MalformedEncodingError(
            "invalid unpadded base64 segment"
        ) from exc
    _check_canonical(segment, decoded, padded=False)
    return decoded


def decode_std_b64(segment: str) -> bytes:
    """Strictly decode padded standard base64.

    Parameters
    ----------
    segment : str
        The base64 segment, with padding.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    MalformedEncodingError
        If the segment is empty, wrongly padded, or not valid base64.
    """
    if not segment or not _STD_B64_RE.fullmatch(segment) or len(segment) % 4:
        raise MalformedEncodingError("invalid base64 segment")
    try:
        decoded = base64.b64decode(segment, validate=True)
    except binascii.Error as exc:
        raise MalformedEncodingError("invalid base64 segment") from exc
    _check_canonical(segment, decoded, padded=True)
    return decoded


__all__ = [
    "UINT32_MAX",
    "as_ascii_text",
    "as_password_bytes",
    "decode_raw_b64",
    "decode_std_b64",
    "scan_params",
    "split_fields",
]
