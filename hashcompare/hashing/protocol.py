# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis,too-few-public-methods

"""Password comparison protocols."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Comparator(Protocol):  # pragma: no cover
    """Protocol for per-scheme password comparators."""

    def __call__(self, password: bytes | str, encoded: bytes | str) -> None:
        """Compare a plain text password against an encoded hash.

        Parameters
        ----------
        password : bytes | str
            The plain text password
        encoded : bytes | str
            The stored encoded hash

        Raises
        ------
        HashCompareError
            If the password does not match or the hash cannot be used.
        """
        ...


@runtime_checkable
class SaltedDigestValidator(Protocol):  # pragma: no cover
    """Protocol for validators of the salted digest family ({SSHA...})."""

    def validate(self, password: bytes, encoded: str) -> bool:
        """Check a plain text password against a salted digest.

        Parameters
        ----------
        password : bytes
            The plain text password
        encoded : str
            The full encoded hash, including its {SSHA...} prefix
        """
        ...


__all__ = ["Comparator", "SaltedDigestValidator"]
