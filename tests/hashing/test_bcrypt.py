# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for the bcrypt comparator."""

import secrets
from unittest.mock import patch

import bcrypt
import pytest

from hashcompare.hashing._bcrypt import (
    BCRYPT_MAX_PASSWORD_LENGTH,
    compare_bcrypt,
    validate_bcrypt_password_length,
)
from hashcompare.hashing.classifier import SchemeTag, classify
from hashcompare.hashing.errors import (
    ErrorKind,
    MalformedEncodingError,
    MismatchError,
    PasswordTooLongError,
)

# cspell: disable
BCRYPT_HASH = "$2a$12$o6hx.Wog/wvFSkT/Bp/6DOxCtLRTDj7lm9on9suF/WaCGNVHbkfL6"
# cspell: enable
PASSWORD = "test"  # nosemgrep # nosec
CHECKPW = "hashcompare.hashing._bcrypt.bcrypt.checkpw"


def make_hash(password: bytes) -> bytes:
    """Create a cheap bcrypt hash of a password."""
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=4))


class TestCompareBcrypt:
    """Test bcrypt comparisons."""

    def test_match(self) -> None:
        """Test a known hash of 'test'."""
        compare_bcrypt(PASSWORD, BCRYPT_HASH)
        compare_bcrypt(PASSWORD.encode(), BCRYPT_HASH.encode())

    def test_altered_hash(self) -> None:
        """Test that a changed digest is a mismatch."""
        altered = BCRYPT_HASH[:-2] + "L7"
        with pytest.raises(MismatchError) as exc_info:
            compare_bcrypt(PASSWORD, altered)
        assert exc_info.value.kind is ErrorKind.MISMATCH

    def test_wrong_password(self) -> None:
        """Test that a wrong password is a mismatch."""
        with pytest.raises(MismatchError):
            compare_bcrypt("Test", BCRYPT_HASH)

    @pytest.mark.parametrize("prefix", [b"2a", b"2b"])
    def test_generated_hashes(self, prefix: bytes) -> None:
        """Test hashes created with bcrypt."""
        password = secrets.token_urlsafe(32).encode()
        encoded = bcrypt.hashpw(
            password, bcrypt.gensalt(rounds=4, prefix=prefix)
        )
        compare_bcrypt(password, encoded)
        with pytest.raises(MismatchError):
            compare_bcrypt(password + b"!", encoded)

    def test_max_length_password(self) -> None:
        """Test a password of exactly 72 bytes."""
        password = b"a" * BCRYPT_MAX_PASSWORD_LENGTH
        encoded = make_hash(password)
        compare_bcrypt(password, encoded)
        with pytest.raises(MismatchError):
            compare_bcrypt(password[:-1] + b"b", encoded)

    def test_password_too_long(self) -> None:
        """Test that the kdf is never reached with a long password."""
        password = b"a" * (BCRYPT_MAX_PASSWORD_LENGTH + 1)
        with patch(CHECKPW) as mock_checkpw:
            with pytest.raises(PasswordTooLongError) as exc_info:
                compare_bcrypt(password, BCRYPT_HASH)
        mock_checkpw.assert_not_called()
        assert exc_info.value.kind is ErrorKind.PASSWORD_TOO_LONG

    def test_length_counts_bytes(self) -> None:
        """Test that the limit applies to the utf-8 bytes."""
        validate_bcrypt_password_length("é".encode() * 36)
        with pytest.raises(PasswordTooLongError):
            compare_bcrypt("é" * 37, BCRYPT_HASH)

    @pytest.mark.parametrize(
        "encoded",
        ["$2a$12$short", "$2a$$o6hx.Wog/wvFSkT/Bp/6DOxCtLRTDj7lm9on9suF/W"],
    )
    def test_malformed(self, encoded: str) -> None:
        """Test hashes bcrypt cannot parse."""
        with pytest.raises(MalformedEncodingError) as exc_info:
            compare_bcrypt(PASSWORD, encoded)
        assert exc_info.value.kind is ErrorKind.MALFORMED_ENCODING

    @pytest.mark.parametrize("prefix", ["$2$", "$2z$"])
    def test_minor_versions_bcrypt_rejects(self, prefix: str) -> None:
        """Test prefixes that classify as bcrypt but bcrypt cannot parse."""
        encoded = prefix + BCRYPT_HASH[len("$2a$"):]
        assert classify(encoded) is SchemeTag.BCRYPT
        with pytest.raises(MalformedEncodingError):
            compare_bcrypt(PASSWORD, encoded)
