# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Errors raised while comparing a password against an encoded hash.

Every failure carries an :class:`ErrorKind` so callers can tell data that
looks corrupt or foreign apart from a plain wrong password.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """The kind of a comparison failure."""

    UNKNOWN_SCHEME = "unknown_scheme"
    MALFORMED_ENCODING = "malformed_encoding"
    INCOMPATIBLE_VERSION = "incompatible_version"
    UNSUPPORTED_DIGEST_ALGORITHM = "unsupported_digest_algorithm"
    PASSWORD_TOO_LONG = "password_too_long"
    COMPUTATION_FAILURE = "computation_failure"
    MISMATCH = "mismatch"


class HashCompareError(Exception):
    """Base class for all comparison failures."""

    kind: ClassVar[ErrorKind]
    default_message: ClassVar[str] = "hash comparison failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class UnknownSchemeError(HashCompareError):
    """No known scheme matches the encoded hash."""

    kind = ErrorKind.UNKNOWN_SCHEME
    default_message = "unknown hash algorithm"


class MalformedEncodingError(HashCompareError, ValueError):
    """The encoded hash does not follow its scheme's grammar."""

    kind = ErrorKind.MALFORMED_ENCODING
    default_message = "the encoded hash is not in the correct format"


class IncompatibleVersionError(HashCompareError, ValueError):
    """The argon2 version of the encoded hash is not supported."""

    kind = ErrorKind.INCOMPATIBLE_VERSION
    default_message = "incompatible version of argon2"


class UnsupportedDigestAlgorithmError(HashCompareError):
    """The pbkdf2 digest named by the encoded hash is not supported."""

    kind = ErrorKind.UNSUPPORTED_DIGEST_ALGORITHM
    default_message = "unsupported pbkdf2 digest algorithm"


class PasswordTooLongError(HashCompareError):
    """The password exceeds the input limit of the scheme."""

    kind = ErrorKind.PASSWORD_TOO_LONG
    default_message = "password is too long"


class ComputationError(HashCompareError):
    """The key derivation function itself failed."""

    kind = ErrorKind.COMPUTATION_FAILURE
    default_message = "key derivation failed"


class MismatchError(HashCompareError):
    """The password does not match the encoded hash."""

    kind = ErrorKind.MISMATCH
    default_message = "hashedPassword is not the hash of the given password"


__all__ = [
    "ErrorKind",
    "HashCompareError",
    "UnknownSchemeError",
    "MalformedEncodingError",
    "IncompatibleVersionError",
    "UnsupportedDigestAlgorithmError",
    "PasswordTooLongError",
    "ComputationError",
    "MismatchError",
]
