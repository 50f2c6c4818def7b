# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password comparison dispatcher supporting multiple hash formats."""

import functools
import logging
from types import MappingProxyType
from typing import Mapping

import anyio
import anyio.to_thread

from ..config import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_SCRYPT_MAX_MEMORY,
    Settings,
)
from ._argon2 import compare_argon2i, compare_argon2id
from ._bcrypt import compare_bcrypt
from ._pbkdf2 import compare_pbkdf2
from ._scrypt import compare_scrypt
from ._ssha import compare_ssha, compare_ssha256, compare_ssha512
from .classifier import SchemeTag, classify, is_valid_hash_format
from .errors import (
    ErrorKind,
    HashCompareError,
    MismatchError,
    UnknownSchemeError,
)
from .protocol import Comparator

LOG = logging.getLogger(__name__)

COMPARATORS: Mapping[SchemeTag, Comparator] = MappingProxyType(
    {
        SchemeTag.BCRYPT: compare_bcrypt,
        SchemeTag.ARGON2ID: compare_argon2id,
        SchemeTag.ARGON2I: compare_argon2i,
        SchemeTag.PBKDF2: compare_pbkdf2,
        SchemeTag.SCRYPT: compare_scrypt,
        SchemeTag.SSHA: compare_ssha,
        SchemeTag.SSHA256: compare_ssha256,
        SchemeTag.SSHA512: compare_ssha512,
    }
)
"""The comparator of every known scheme."""

_KNOWN_SCHEMES = set(SchemeTag) - {SchemeTag.UNKNOWN}
if set(COMPARATORS) != _KNOWN_SCHEMES:  # pragma: no cover
    raise RuntimeError("Every known scheme needs a comparator")


def get_comparator(tag: SchemeTag) -> Comparator:
    """Get the comparator of a scheme.

    Parameters
    ----------
    tag : SchemeTag
        The scheme.

    Returns
    -------
    Comparator
        The scheme's comparator.

    Raises
    ------
    UnknownSchemeError
        If the scheme is ``SchemeTag.UNKNOWN``.
    """
    try:
        return COMPARATORS[tag]
    except KeyError as exc:
        raise UnknownSchemeError() from exc


def _log_failure(tag: SchemeTag, error: HashCompareError) -> None:
    if error.kind is ErrorKind.MISMATCH:
        LOG.debug("Password does not match the %s hash", tag.value)
    else:
        LOG.warning(
            "Could not compare against the %s hash (%s): %s",
            tag.value,
            error.kind.value,
            error,
        )


def compare(
    password: bytes | str,
    encoded: bytes | str,
    scrypt_max_memory: int = DEFAULT_SCRYPT_MAX_MEMORY,
) -> None:
    """Compare a password against an encoded hash of any known scheme.

    Parameters
    ----------
    password : bytes | str
        The plain text password.
    encoded : bytes | str
        The stored encoded hash.
    scrypt_max_memory : int, optional
        Upper bound in bytes for the memory of scrypt hashes,
        by default 64 MiB.

    Raises
    ------
    UnknownSchemeError
        If the scheme of the hash is not recognized.
    HashCompareError
        The scheme comparator's error (e.g. ``MismatchError``).
    """
    tag = classify(encoded)
    if tag is SchemeTag.UNKNOWN:
        LOG.warning("Unknown hash algorithm")
        raise UnknownSchemeError()
    LOG.debug("Comparing against a %s hash", tag.value)
    comparator = get_comparator(tag)
    if tag is SchemeTag.SCRYPT:
        comparator = functools.partial(
            comparator, max_memory=scrypt_max_memory
        )
    try:
        comparator(password, encoded)
    except HashCompareError as error:
        _log_failure(tag, error)
        raise


async def acompare(
    password: bytes | str,
    encoded: bytes | str,
    limiter: anyio.CapacityLimiter | None = None,
    scrypt_max_memory: int = DEFAULT_SCRYPT_MAX_MEMORY,
) -> None:
    """Compare in a worker thread so the event loop is not blocked.

    The comparison is not cancelled if the awaiting task is.

    Parameters
    ----------
    password : bytes | str
        The plain text password.
    encoded : bytes | str
        The stored encoded hash.
    limiter : anyio.CapacityLimiter | None, optional
        Bounds the number of concurrent comparisons, by default anyio's
        default thread limiter.
    scrypt_max_memory : int, optional
        Upper bound in bytes for the memory of scrypt hashes,
        by default 64 MiB.

    Raises
    ------
    HashCompareError
        Same as :func:`compare`.
    """
    await anyio.to_thread.run_sync(
        functools.partial(
            compare,
            password,
            encoded,
            scrypt_max_memory=scrypt_max_memory,
        ),
        limiter=limiter,
    )


class HashComparator:
    """Configured entry point for password comparisons."""

    def __init__(
        self,
        scrypt_max_memory: int = DEFAULT_SCRYPT_MAX_MEMORY,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Initialize the comparator.

        Parameters
        ----------
        scrypt_max_memory : int, optional
            Upper bound in bytes for the memory of scrypt hashes,
            by default 64 MiB.
        max_workers : int, optional
            The maximum number of concurrent async comparisons, by default 4.
        """
        self.scrypt_max_memory = scrypt_max_memory
        self.max_workers = max_workers
        self._limiter: anyio.CapacityLimiter | None = None

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None
    ) -> "HashComparator":
        """Create a comparator from the settings.

        Parameters
        ----------
        settings : Settings | None, optional
            The settings to use, by default loaded from the environment.

        Returns
        -------
        HashComparator
            The configured comparator.
        """
        if settings is None:
            settings = Settings.load()
        return cls(
            scrypt_max_memory=settings.scrypt_max_memory,
            max_workers=settings.max_workers,
        )

    @property
    def limiter(self) -> anyio.CapacityLimiter:
        """The limiter of async comparisons, created on first use."""
        # anyio limiters need a running event loop
        if self._limiter is None:
            self._limiter = anyio.CapacityLimiter(self.max_workers)
        return self._limiter

    def compare(self, password: bytes | str, encoded: bytes | str) -> None:
        """Compare a password against an encoded hash.

        Parameters
        ----------
        password : bytes | str
            The plain text password.
        encoded : bytes | str
            The stored encoded hash.
        """
        compare(password, encoded, scrypt_max_memory=self.scrypt_max_memory)

    async def acompare(
        self, password: bytes | str, encoded: bytes | str
    ) -> None:
        """Compare a password against an encoded hash in a worker thread.

        Parameters
        ----------
        password : bytes | str
            The plain text password.
        encoded : bytes | str
            The stored encoded hash.
        """
        await acompare(
            password,
            encoded,
            limiter=self.limiter,
            scrypt_max_memory=self.scrypt_max_memory,
        )

    def verify(self, password: bytes | str, encoded: bytes | str) -> bool:
        """Check a password against an encoded hash.

        Only a mismatch is reported as False, any other failure
        (unknown scheme, malformed hash, ...) is raised.

        Parameters
        ----------
        password : bytes | str
            The plain text password.
        encoded : bytes | str
            The stored encoded hash.

        Returns
        -------
        bool
            True if the password matches, False otherwise.
        """
        try:
            self.compare(password, encoded)
        except MismatchError:
            return False
        return True

    @staticmethod
    def identify(encoded: bytes | str) -> SchemeTag:
        """Get the scheme of an encoded hash."""
        return classify(encoded)

    @staticmethod
    def is_valid_hash_format(encoded: bytes | str) -> bool:
        """Check if the encoded hash belongs to a known scheme."""
        return is_valid_hash_format(encoded)


__all__ = [
    "COMPARATORS",
    "HashComparator",
    "acompare",
    "compare",
    "get_comparator",
]
