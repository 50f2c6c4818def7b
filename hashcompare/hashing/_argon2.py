# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2id and Argon2i comparators.

Encoded format::

    $argon2id$v=19$m=<memory KiB>,t=<iterations>,p=<parallelism>$<salt>$<key>

salt and key are unpadded standard base64.
"""

import hmac
import logging
from dataclasses import dataclass
from typing import Tuple

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from ._encoding import (
    as_ascii_text,
    as_password_bytes,
    decode_raw_b64,
    scan_params,
    split_fields,
)
from .errors import (
    ComputationError,
    IncompatibleVersionError,
    MalformedEncodingError,
    MismatchError,
)

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Argon2Params:
    """Argon2 parameters decoded from an encoded hash."""

    memory: int
    iterations: int
    parallelism: int
    salt_length: int
    key_length: int


def decode_argon2_hash(encoded: str) -> Tuple[Argon2Params, bytes, bytes]:
    """Decode an argon2 (id or i) encoded hash.

    Parameters
    ----------
    encoded : str
        The encoded hash.

    Returns
    -------
    Tuple[Argon2Params, bytes, bytes]
        The parameters, the salt and the derived key.

    Raises
    ------
    MalformedEncodingError
        If the hash does not follow the argon2 format.
    IncompatibleVersionError
        If the argon2 version is not the supported one.
    """
    parts = split_fields(encoded, 6)
    (version,) = scan_params(parts[2], ("v",))
    if version != ARGON2_VERSION:
        raise IncompatibleVersionError(
            f"incompatible version of argon2: {version}"
        )
    memory, iterations, parallelism = scan_params(parts[3], ("m", "t", "p"))
    salt = decode_raw_b64(parts[4])
    key = decode_raw_b64(parts[5])
    params = Argon2Params(
        memory=memory,
        iterations=iterations,
        parallelism=parallelism,
        salt_length=len(salt),
        key_length=len(key),
    )
    return params, salt, key


def _compare(
    password: bytes | str,
    encoded: bytes | str,
    variant: str,
) -> None:
    text = as_ascii_text(encoded)
    if not text.startswith(f"${variant}$"):
        raise MalformedEncodingError(f"not an {variant} hash")
    params, salt, key = decode_argon2_hash(text)
    argon2_type = Type.ID if variant == "argon2id" else Type.I
    try:
        other_key = hash_secret_raw(
            secret=as_password_bytes(password),
            salt=salt,
            time_cost=params.iterations,
            memory_cost=params.memory,
            parallelism=params.parallelism,
            hash_len=params.key_length,
            type=argon2_type,
            version=ARGON2_VERSION,
        )
    except HashingError as exc:
        LOG.warning("%s key derivation failed: %s", variant, exc)
        raise ComputationError(f"{variant} key derivation failed") from exc
    if not hmac.compare_digest(key, other_key):
        raise MismatchError()


def compare_argon2id(password: bytes | str, encoded: bytes | str) -> None:
    """Compare a password against an argon2id encoded hash.

    Parameters
    ----------
    password : bytes | str
        The plain text password.
    encoded : bytes | str
        The stored encoded hash.

    Raises
    ------
    MalformedEncodingError
        If the hash does not follow the argon2 format.
    IncompatibleVersionError
        If the argon2 version is not the supported one.
    ComputationError
        If argon2 rejects the decoded parameters.
    MismatchError
        If the password does not match.
    """
    _compare(password, encoded, "argon2id")


def compare_argon2i(password: bytes | str, encoded: bytes | str) -> None:
    """Compare a password against an argon2i encoded hash.

    Same rules as :func:`compare_argon2id`, using the argon2i variant.
    """
    _compare(password, encoded, "argon2i")


__all__ = [
    "ARGON2_VERSION",
    "Argon2Params",
    "compare_argon2i",
    "compare_argon2id",
    "decode_argon2_hash",
]
