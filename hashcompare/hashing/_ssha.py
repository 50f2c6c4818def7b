# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Salted digest ({SSHA}, {SSHA256}, {SSHA512}) comparators.

These hashes carry no parameter section: ``{SSHA...}base64(digest + salt)``.
Parsing and hashing are left to a validator, by default the passlib
``ldap_salted_sha*`` handlers.
"""

import logging
import re
from typing import Any

from passlib.hash import (  # type: ignore[import-untyped]
    ldap_salted_sha1,
    ldap_salted_sha256,
    ldap_salted_sha512,
)

from ._encoding import as_password_bytes
from .errors import MismatchError
from .protocol import SaltedDigestValidator

LOG = logging.getLogger(__name__)


def widen_salt_range(handler: Any) -> Any:
    """Subclass a passlib ldap handler to accept any salt of 1+ bytes.

    The stock handlers only accept salts of 4 to 16 bytes, while LDAP
    servers append salts of any length after the fixed size digest.

    Parameters
    ----------
    handler : Any
        The passlib handler (e.g. ``passlib.hash.ldap_salted_sha1``).

    Returns
    -------
    Any
        A handler class with the same name and digest.
    """
    prefix = re.escape(handler.ident)
    return type(
        handler.__name__,
        (handler,),
        {
            "min_salt_size": 1,
            "max_salt_size": None,
            "_hash_regex": re.compile(
                rf"^{prefix}(?P<tmp>[+/a-zA-Z0-9]+={{0,2}})$"
            ),
        },
    )


class PasslibSaltedDigestValidator:
    """Salted digest validator backed by a passlib handler."""

    def __init__(self, handler: Any) -> None:
        """Initialize the validator.

        Parameters
        ----------
        handler : Any
            The passlib handler (e.g. ``passlib.hash.ldap_salted_sha1``).
        """
        self._handler = handler

    def validate(self, password: bytes, encoded: str) -> bool:
        """Check a plain text password against a salted digest.

        Parameters
        ----------
        password : bytes
            The plain text password.
        encoded : str
            The full encoded hash.

        Returns
        -------
        bool
            True if the password matches, False otherwise (including
            hashes the handler cannot parse).
        """
        try:
            return bool(self._handler.verify(password, encoded))
        except (ValueError, TypeError) as exc:
            LOG.debug("%s rejected the hash: %s", self._handler.name, exc)
            return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._handler.name})"


SSHA_VALIDATOR: SaltedDigestValidator = PasslibSaltedDigestValidator(
    widen_salt_range(ldap_salted_sha1)
)
SSHA256_VALIDATOR: SaltedDigestValidator = PasslibSaltedDigestValidator(
    widen_salt_range(ldap_salted_sha256)
)
SSHA512_VALIDATOR: SaltedDigestValidator = PasslibSaltedDigestValidator(
    widen_salt_range(ldap_salted_sha512)
)


def _compare(
    password: bytes | str,
    encoded: bytes | str,
    validator: SaltedDigestValidator,
) -> None:
    if isinstance(encoded, (bytes, bytearray)):
        encoded = bytes(encoded).decode("utf-8", errors="replace")
    if not validator.validate(as_password_bytes(password), encoded):
        raise MismatchError()


def compare_ssha(
    password: bytes | str,
    encoded: bytes | str,
    validator: SaltedDigestValidator | None = None,
) -> None:
    """Compare a password against an {SSHA} (salted sha1) hash.

    Parameters
    ----------
    password : bytes | str
        The plain text password.
    encoded : bytes | str
        The stored encoded hash.
    validator : SaltedDigestValidator | None, optional
        The validator to use, by default the passlib one.

    Raises
    ------
    MismatchError
        If the validator does not accept the password.
    """
    _compare(password, encoded, validator or SSHA_VALIDATOR)


def compare_ssha256(
    password: bytes | str,
    encoded: bytes | str,
    validator: SaltedDigestValidator | None = None,
) -> None:
    """Compare a password against an {SSHA256} (salted sha256) hash.

    Parameters
    ----------
    password : bytes | str
        The plain text password.
    encoded : bytes | str
        The stored encoded hash.
    validator : SaltedDigestValidator | None, optional
        The validator to use, by default the passlib one.

    Raises
    ------
    MismatchError
        If the validator does not accept the password.
    """
    _compare(password, encoded, validator or SSHA256_VALIDATOR)


def compare_ssha512(
    password: bytes | str,
    encoded: bytes | str,
    validator: SaltedDigestValidator | None = None,
) -> None:
    """Compare a password against an {SSHA512} (salted sha512) hash.

    Parameters
    ----------
    password : bytes | str
        The plain text password.
    encoded : bytes | str
        The stored encoded hash.
    validator : SaltedDigestValidator | None, optional
        The validator to use, by default the passlib one.

    Raises
    ------
    MismatchError
        If the validator does not accept the password.
    """
    _compare(password, encoded, validator or SSHA512_VALIDATOR)


__all__ = [
    "PasslibSaltedDigestValidator",
    "SSHA_VALIDATOR",
    "SSHA256_VALIDATOR",
    "SSHA512_VALIDATOR",
    "compare_ssha",
    "compare_ssha256",
    "compare_ssha512",
    "widen_salt_range",
]
