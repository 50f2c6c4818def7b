# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Scrypt comparator.

Encoded format::

    $scrypt$ln=<cost>,r=<block size>,p=<parallelization>$<salt>$<key>

salt and key are padded standard base64. Despite its name, ``ln`` holds
the CPU/memory cost N itself (a power of two), not its logarithm.
"""

import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import Tuple

from ..config import DEFAULT_SCRYPT_MAX_MEMORY
from ._encoding import (
    as_ascii_text,
    as_password_bytes,
    decode_std_b64,
    scan_params,
    split_fields,
)
from .errors import ComputationError, MismatchError

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScryptParams:
    """Scrypt parameters decoded from an encoded hash."""

    cost: int
    block_size: int
    parallelization: int
    salt_length: int
    key_length: int


def decode_scrypt_hash(encoded: str) -> Tuple[ScryptParams, bytes, bytes]:
    """Decode a scrypt encoded hash.

    Parameters
    ----------
    encoded : str
        The encoded hash.

    Returns
    -------
    Tuple[ScryptParams, bytes, bytes]
        The parameters, the salt and the derived key.

    Raises
    ------
    MalformedEncodingError
        If the hash does not follow the scrypt format.
    """
    parts = split_fields(encoded, 5)
    cost, block_size, parallelization = scan_params(
        parts[2], ("ln", "r", "p")
    )
    salt = decode_std_b64(parts[3])
    key = decode_std_b64(parts[4])
    params = ScryptParams(
        cost=cost,
        block_size=block_size,
        parallelization=parallelization,
        salt_length=len(salt),
        key_length=len(key),
    )
    return params, salt, key


def compare_scrypt(
    password: bytes | str,
    encoded: bytes | str,
    max_memory: int = DEFAULT_SCRYPT_MAX_MEMORY,
) -> None:
    """Compare a password against a scrypt encoded hash.

    Parameters
    ----------
    password : bytes | str
        The plain text password.
    encoded : bytes | str
        The stored encoded hash.
    max_memory : int, optional
        Upper bound in bytes for the memory scrypt may use,
        by default 64 MiB.

    Raises
    ------
    MalformedEncodingError
        If the hash does not follow the scrypt format.
    ComputationError
        If scrypt rejects the decoded parameters (e.g. N not a power of
        two, or more memory needed than allowed).
    MismatchError
        If the password does not match.
    """
    params, salt, key = decode_scrypt_hash(as_ascii_text(encoded))
    try:
        other_key = hashlib.scrypt(
            as_password_bytes(password),
            salt=salt,
            n=params.cost,
            r=params.block_size,
            p=params.parallelization,
            maxmem=max_memory,
            dklen=params.key_length,
        )
    except (ValueError, OverflowError, MemoryError) as exc:
        LOG.warning("scrypt key derivation failed: %s", exc)
        raise ComputationError("scrypt key derivation failed") from exc
    if not hmac.compare_digest(key, other_key):
        raise MismatchError()


__all__ = [
    "DEFAULT_SCRYPT_MAX_MEMORY",
    "ScryptParams",
    "compare_scrypt",
    "decode_scrypt_hash",
]
