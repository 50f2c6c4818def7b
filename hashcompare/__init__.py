# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Verify passwords against stored hashes of several schemes."""

from ._version import __version__
from .hashing import (
    ComputationError,
    ErrorKind,
    HashCompareError,
    HashComparator,
    IncompatibleVersionError,
    MalformedEncodingError,
    MismatchError,
    PasswordTooLongError,
    SchemeTag,
    UnknownSchemeError,
    UnsupportedDigestAlgorithmError,
    acompare,
    classify,
    compare,
    compare_argon2i,
    compare_argon2id,
    compare_bcrypt,
    compare_pbkdf2,
    compare_scrypt,
    compare_ssha,
    compare_ssha256,
    compare_ssha512,
    is_valid_hash_format,
)

__all__ = [
    "__version__",
    "ComputationError",
    "ErrorKind",
    "HashCompareError",
    "HashComparator",
    "IncompatibleVersionError",
    "MalformedEncodingError",
    "MismatchError",
    "PasswordTooLongError",
    "SchemeTag",
    "UnknownSchemeError",
    "UnsupportedDigestAlgorithmError",
    "acompare",
    "classify",
    "compare",
    "compare_argon2i",
    "compare_argon2id",
    "compare_bcrypt",
    "compare_pbkdf2",
    "compare_scrypt",
    "compare_ssha",
    "compare_ssha256",
    "compare_ssha512",
    "is_valid_hash_format",
]
