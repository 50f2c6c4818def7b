# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for hashcompare."""

from ._common import ENV_PREFIX
from ._hashing import DEFAULT_MAX_WORKERS, DEFAULT_SCRYPT_MAX_MEMORY
from .settings import Settings

__all__ = [
    "Settings",
    "ENV_PREFIX",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_SCRYPT_MAX_MEMORY",
]
