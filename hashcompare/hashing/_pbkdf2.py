# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""PBKDF2 comparator.

Encoded format::

    $pbkdf2-<digest>$i=<iterations>,l=<key length>$<salt>$<key>

salt and key are unpadded standard base64. The key length used is the
length of the decoded key, the ``l`` value is only checked for syntax.
"""

import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import Tuple

from ._encoding import (
    as_ascii_text,
    as_password_bytes,
    decode_raw_b64,
    scan_params,
    split_fields,
)
from .errors import (
    ComputationError,
    MalformedEncodingError,
    MismatchError,
    UnsupportedDigestAlgorithmError,
)

LOG = logging.getLogger(__name__)

SUPPORTED_DIGESTS = ("sha1", "sha224", "sha256", "sha384", "sha512")


@dataclass(frozen=True)
class Pbkdf2Params:
    """PBKDF2 parameters decoded from an encoded hash."""

    algorithm: str
    iterations: int
    salt_length: int
    key_length: int


def decode_pbkdf2_hash(encoded: str) -> Tuple[Pbkdf2Params, bytes, bytes]:
    """Decode a pbkdf2 encoded hash.

    Parameters
    ----------
    encoded : str
        The encoded hash.

    Returns
    -------
    Tuple[Pbkdf2Params, bytes, bytes]
        The parameters, the salt and the derived key.

    Raises
    ------
    MalformedEncodingError
        If the hash does not follow the pbkdf2 format.
    """
    parts = split_fields(encoded, 5)
    digest_parts = parts[1].split("-", 1)
    if len(digest_parts) != 2:
        raise MalformedEncodingError("missing pbkdf2 digest name")
    iterations, _ = scan_params(parts[2], ("i", "l"))
    salt = decode_raw_b64(parts[3])
    key = decode_raw_b64(parts[4])
    params = Pbkdf2Params(
        algorithm=digest_parts[1],
        iterations=iterations,
        salt_length=len(salt),
        key_length=len(key),
    )
    return params, salt, key


def compare_pbkdf2(password: bytes | str, encoded: bytes | str) -> None:
    """Compare a password against a pbkdf2 encoded hash.

    Parameters
    ----------
    password : bytes | str
        The plain text password.
    encoded : bytes | str
        The stored encoded hash.

    Raises
    ------
    MalformedEncodingError
        If the hash does not follow the pbkdf2 format.
    UnsupportedDigestAlgorithmError
        If the digest is not one of sha1, sha224, sha256, sha384, sha512.
    ComputationError
        If the key derivation rejects the decoded parameters.
    MismatchError
        If the password does not match.
    """
    params, salt, key = decode_pbkdf2_hash(as_ascii_text(encoded))
    if params.algorithm not in SUPPORTED_DIGESTS:
        raise UnsupportedDigestAlgorithmError(
            f"unsupported pbkdf2 digest algorithm: {params.algorithm}"
        )
    try:
        other_key = hashlib.pbkdf2_hmac(
            params.algorithm,
            as_password_bytes(password),
            salt,
            params.iterations,
            dklen=params.key_length,
        )
    except (ValueError, OverflowError) as exc:
        LOG.warning("pbkdf2 key derivation failed: %s", exc)
        raise ComputationError("pbkdf2 key derivation failed") from exc
    if not hmac.compare_digest(key, other_key):
        raise MismatchError()


__all__ = [
    "SUPPORTED_DIGESTS",
    "Pbkdf2Params",
    "compare_pbkdf2",
    "decode_pbkdf2_hash",
]
