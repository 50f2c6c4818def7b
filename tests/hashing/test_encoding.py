# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for the shared decoding helpers."""

import pytest

from hashcompare.hashing._encoding import (
    UINT32_MAX,
    as_ascii_text,
    as_password_bytes,
    decode_raw_b64,
    decode_std_b64,
    scan_params,
    split_fields,
)
from hashcompare.hashing.errors import ErrorKind, MalformedEncodingError


class TestTextHelpers:
    """Test password and hash text conversions."""

    def test_password_bytes(self) -> None:
        """Test that text passwords are utf-8 encoded."""
        assert as_password_bytes("pässword") == "pässword".encode("utf-8")
        assert as_password_bytes(b"\x00\xff") == b"\x00\xff"
        assert as_password_bytes(bytearray(b"abc")) == b"abc"

    def test_password_with_lone_surrogate(self) -> None:
        """Test that a lone surrogate does not escape as a unicode error."""
        assert as_password_bytes("a\ud800") == b"a\xed\xa0\x80"

    def test_ascii_text(self) -> None:
        """Test that ascii hashes are returned as text."""
        assert as_ascii_text("$scrypt$") == "$scrypt$"
        assert as_ascii_text(b"$scrypt$") == "$scrypt$"

    @pytest.mark.parametrize("encoded", ["$årgon2$", b"$\xff$"])
    def test_non_ascii_text(self, encoded: bytes | str) -> None:
        """Test that non ascii hashes are malformed."""
        with pytest.raises(MalformedEncodingError) as exc_info:
            as_ascii_text(encoded)
        assert exc_info.value.kind is ErrorKind.MALFORMED_ENCODING


class TestSplitFields:
    """Test the '$' field splitting."""

    def test_exact_count(self) -> None:
        """Test splitting with the expected number of fields."""
        assert split_fields("$a$b$c", 4) == ["", "a", "b", "c"]

    @pytest.mark.parametrize("encoded", ["$a$b", "$a$b$c$d", "$a$b$c$"])
    def test_wrong_count(self, encoded: str) -> None:
        """Test that a different number of fields is malformed."""
        with pytest.raises(MalformedEncodingError):
            split_fields(encoded, 4)


class TestScanParams:
    """Test parameter segment parsing."""

    def test_valid(self) -> None:
        """Test well formed segments."""
        assert scan_params("m=32,t=2,p=4", ("m", "t", "p")) == (32, 2, 4)
        assert scan_params("v=19", ("v",)) == (19,)
        assert scan_params("i=0,l=007", ("i", "l")) == (0, 7)

    def test_uint32_bounds(self) -> None:
        """Test that values must fit in 32 bits."""
        assert scan_params(f"v={UINT32_MAX}", ("v",)) == (UINT32_MAX,)
        with pytest.raises(MalformedEncodingError):
            scan_params(f"v={UINT32_MAX + 1}", ("v",))

    @pytest.mark.parametrize(
        "segment",
        [
            "",
            "aaaa",
            "I=1,l=32",
            "l=32,i=1",
            "i=1",
            "i=1,l=32,x=1",
            "i=-1,l=32",
            "i=1, l=32",
            "i=,l=32",
            "i=0x10,l=32",
            "i=1,l=32 ",
            "i=1,l=32\n",
        ],
    )
    def test_malformed(self, segment: str) -> None:
        """Test segments not matching the grammar."""
        with pytest.raises(MalformedEncodingError):
            scan_params(segment, ("i", "l"))


class TestBase64:
    """Test the strict base64 decoders."""

    def test_raw(self) -> None:
        """Test decoding unpadded base64."""
        assert decode_raw_b64("c2FsdA") == b"salt"
        assert decode_raw_b64("c2FsdHM") == b"salts"
        assert decode_raw_b64("c2FsdHNz") == b"saltss"
        assert decode_raw_b64("+/+/") == b"\xfb\xff\xbf"

    @pytest.mark.parametrize(
        "segment",
        [
            "",
            "c2FsdA==",
            "c2FsdA=",
            "c2Fsd",
            "c2Fs-A",
            "c2Fs_A",
            "c2F sdA",
            "c2FsdA\n",
            "c2FsdB",
        ],
    )
    def test_raw_malformed(self, segment: str) -> None:
        """Test that invalid unpadded base64 is rejected."""
        with pytest.raises(MalformedEncodingError):
            decode_raw_b64(segment)

    def test_std(self) -> None:
        """Test decoding padded base64."""
        assert decode_std_b64("c2FsdA==") == b"salt"
        assert decode_std_b64("c2FsdHM=") == b"salts"
        assert decode_std_b64("c2FsdHNz") == b"saltss"

    @pytest.mark.parametrize(
        "segment",
        [
            "",
            "c2FsdA",
            "c2FsdA=",
            "c2FsdA===",
            "c2Fs(A==",
            "c2F=dA==",
            "c2FsdB==",
            "c2FsdA==\n",
        ],
    )
    def test_std_malformed(self, segment: str) -> None:
        """Test that invalid padded base64 is rejected."""
        with pytest.raises(MalformedEncodingError):
            decode_std_b64(segment)
