# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

ENV_KEY_PREFIX = "HASHCOMPARE_"
DOT_ENV_PATH_DOTTED = "hashcompare.config.settings.DOT_ENV_PATH"


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path) -> Generator[None, None, None]:
    """Run every test without HASHCOMPARE_* variables or a .env file."""
    cleaned = {
        key: value
        for key, value in os.environ.items()
        if not key.startswith(ENV_KEY_PREFIX)
    }
    with patch.dict(os.environ, cleaned, clear=True):
        with patch(DOT_ENV_PATH_DOTTED, tmp_path / ".env"):
            yield
