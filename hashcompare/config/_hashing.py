# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Comparison related configuration.

Environment variables (with prefix HASHCOMPARE_)
------------------------------------------------
SCRYPT_MAX_MEMORY (int) # default: 67108864 (64 MiB)
MAX_WORKERS (int) # default: 4

Command line arguments (no prefix)
----------------------------------
--scrypt-max-memory (int)
"""

from ._common import get_value

DEFAULT_SCRYPT_MAX_MEMORY = 64 * 1024 * 1024
DEFAULT_MAX_WORKERS = 4


def get_scrypt_max_memory() -> int:
    """Get the memory limit (bytes) for scrypt key derivations.

    Returns
    -------
    int
        The memory limit in bytes.
    """
    return get_value(
        "--scrypt-max-memory",
        "SCRYPT_MAX_MEMORY",
        int,
        DEFAULT_SCRYPT_MAX_MEMORY,
    )


def get_max_workers() -> int:
    """Get the maximum number of concurrent async comparisons.

    Only read from the environment, the command line has no async path.

    Returns
    -------
    int
        The maximum number of worker threads to use.
    """
    return get_value(None, "MAX_WORKERS", int, DEFAULT_MAX_WORKERS)
