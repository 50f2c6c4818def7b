# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Identify the scheme of an encoded hash by its prefix."""

import re
from enum import Enum
from typing import Callable, Tuple


class SchemeTag(str, Enum):
    """The known hash schemes."""

    BCRYPT = "bcrypt"
    ARGON2ID = "argon2id"
    ARGON2I = "argon2i"
    PBKDF2 = "pbkdf2"
    SCRYPT = "scrypt"
    SSHA = "ssha"
    SSHA256 = "ssha256"
    SSHA512 = "ssha512"
    UNKNOWN = "unknown"


_BCRYPT_RE = re.compile(rb"^\$2[abzy]?\$")
_ARGON2ID_RE = re.compile(rb"^\$argon2id\$")
_ARGON2I_RE = re.compile(rb"^\$argon2i\$")
_PBKDF2_RE = re.compile(rb"^\$pbkdf2-sha[0-9]{1,3}\$")
_SCRYPT_RE = re.compile(rb"^\$scrypt\$")
_SSHA_RE = re.compile(rb"^\{SSHA\}")
_SSHA256_RE = re.compile(rb"^\{SSHA256\}")
_SSHA512_RE = re.compile(rb"^\{SSHA512\}")


def _as_bytes(encoded: bytes | str) -> bytes:
    if isinstance(encoded, str):
        return encoded.encode("utf-8")
    return bytes(encoded)


def is_bcrypt_hash(encoded: bytes | str) -> bool:
    """Check for the bcrypt prefix ($2$, $2a$, $2b$, $2y$ or $2z$)."""
    return _BCRYPT_RE.match(_as_bytes(encoded)) is not None


def is_argon2id_hash(encoded: bytes | str) -> bool:
    """Check for the $argon2id$ prefix."""
    return _ARGON2ID_RE.match(_as_bytes(encoded)) is not None


def is_argon2i_hash(encoded: bytes | str) -> bool:
    """Check for the $argon2i$ prefix."""
    return _ARGON2I_RE.match(_as_bytes(encoded)) is not None


def is_pbkdf2_hash(encoded: bytes | str) -> bool:
    """Check for the $pbkdf2-sha<digits>$ prefix."""
    return _PBKDF2_RE.match(_as_bytes(encoded)) is not None


def is_scrypt_hash(encoded: bytes | str) -> bool:
    """Check for the $scrypt$ prefix."""
    return _SCRYPT_RE.match(_as_bytes(encoded)) is not None


def is_ssha_hash(encoded: bytes | str) -> bool:
    """Check for the {SSHA} prefix."""
    return _SSHA_RE.match(_as_bytes(encoded)) is not None


def is_ssha256_hash(encoded: bytes | str) -> bool:
    """Check for the {SSHA256} prefix."""
    return _SSHA256_RE.match(_as_bytes(encoded)) is not None


def is_ssha512_hash(encoded: bytes | str) -> bool:
    """Check for the {SSHA512} prefix."""
    return _SSHA512_RE.match(_as_bytes(encoded)) is not None


Predicate = Callable[[bytes | str], bool]

# checked in this order
SCHEME_PREDICATES: Tuple[Tuple[SchemeTag, Predicate], ...] = (
    (SchemeTag.BCRYPT, is_bcrypt_hash),
    (SchemeTag.ARGON2ID, is_argon2id_hash),
    (SchemeTag.ARGON2I, is_argon2i_hash),
    (SchemeTag.PBKDF2, is_pbkdf2_hash),
    (SchemeTag.SCRYPT, is_scrypt_hash),
    (SchemeTag.SSHA, is_ssha_hash),
    (SchemeTag.SSHA256, is_ssha256_hash),
    (SchemeTag.SSHA512, is_ssha512_hash),
)


def classify(encoded: bytes | str) -> SchemeTag:
    """Get the scheme of an encoded hash.

    Parameters
    ----------
    encoded : bytes | str
        The stored encoded hash.

    Returns
    -------
    SchemeTag
        The first matching scheme, or ``SchemeTag.UNKNOWN``.
    """
    raw = _as_bytes(encoded)
    for tag, predicate in SCHEME_PREDICATES:
        if predicate(raw):
            return tag
    return SchemeTag.UNKNOWN


def is_valid_hash_format(encoded: bytes | str) -> bool:
    """Check if the encoded hash belongs to any known scheme.

    Parameters
    ----------
    encoded : bytes | str
        The stored encoded hash.

    Returns
    -------
    bool
        True if the scheme is known, False otherwise.
    """
    return classify(encoded) is not SchemeTag.UNKNOWN


__all__ = [
    "SchemeTag",
    "SCHEME_PREDICATES",
    "classify",
    "is_valid_hash_format",
    "is_bcrypt_hash",
    "is_argon2id_hash",
    "is_argon2i_hash",
    "is_pbkdf2_hash",
    "is_scrypt_hash",
    "is_ssha_hash",
    "is_ssha256_hash",
    "is_ssha512_hash",
]
