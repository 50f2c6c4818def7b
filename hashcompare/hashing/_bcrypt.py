# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt comparator (the hash embeds its own salt and cost)."""

import bcrypt

from ._encoding import as_password_bytes
from .errors import MalformedEncodingError, MismatchError, PasswordTooLongError

BCRYPT_MAX_PASSWORD_LENGTH = 72


def validate_bcrypt_password_length(password: bytes) -> None:
    """Reject passwords bcrypt would silently truncate.

    Parameters
    ----------
    password : bytes
        The plain text password.

    Raises
    ------
    PasswordTooLongError
        If the password is longer than 72 bytes.
    """
    if len(password) > BCRYPT_MAX_PASSWORD_LENGTH:
        raise PasswordTooLongError(
            f"password is too long: bcrypt accepts at most "
            f"{BCRYPT_MAX_PASSWORD_LENGTH} bytes"
        )


def compare_bcrypt(password: bytes | str, encoded: bytes | str) -> None:
    """Compare a password against a bcrypt hash.

    Parameters
    ----------
    password : bytes | str
        The plain text password.
    encoded : bytes | str
        The stored hash.

    Raises
    ------
    PasswordTooLongError
        If the password is longer than 72 bytes.
    MalformedEncodingError
        If bcrypt cannot parse the stored hash.
    MismatchError
        If the password does not match.
    """
    password_bytes = as_password_bytes(password)
    validate_bcrypt_password_length(password_bytes)
    hashed = encoded.encode("utf-8") if isinstance(encoded, str) else encoded
    try:
        matches = bcrypt.checkpw(password_bytes, bytes(hashed))
    except ValueError as exc:
        raise MalformedEncodingError("invalid bcrypt hash") from exc
    if not matches:
        raise MismatchError()


__all__ = [
    "BCRYPT_MAX_PASSWORD_LENGTH",
    "compare_bcrypt",
    "validate_bcrypt_password_length",
]
