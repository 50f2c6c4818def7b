# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Common configuration constants and functions."""

import os
import sys
from pathlib import Path
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

ENV_PREFIX = "HASHCOMPARE_"
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()
DOT_ENV_PATH = ROOT_DIR / ".env"
if DOT_ENV_PATH.exists():
    load_dotenv(DOT_ENV_PATH, override=True)

T = TypeVar("T")


def get_value(
    cli_key: Optional[str],
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
) -> T:
    """Get a value from CLI args, env vars, or fallback, with type casting.

    Parameters
    ----------
    cli_key : Optional[str]
        The CLI argument key, None for environment only values
    env_key : str
        The environment variable key (without the prefix)
    cast : Callable[[str], T]
        The casting function
    fallback : T
        The fallback value

    Returns
    -------
    T
        The value
    """
    value_str: Optional[str] = None

    if cli_key and cli_key in sys.argv:
        cli_index = sys.argv.index(cli_key) + 1
        if cli_index < len(sys.argv):
            value_str = sys.argv[cli_index]

    if not value_str:
        from_env = os.environ.get(f"{ENV_PREFIX}{env_key}")
        if from_env:
            value_str = from_env

    if value_str:
        try:
            return cast(value_str)
        except (ValueError, TypeError):
            pass

    return fallback

