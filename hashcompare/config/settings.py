# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hashcompare settings module."""

from typing import Any, get_args

from dotenv import load_dotenv
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from .._logging import LogLevelType, get_log_level
from ._common import DOT_ENV_PATH, ENV_PREFIX
from ._hashing import get_max_workers, get_scrypt_max_memory

MIN_SCRYPT_MAX_MEMORY = 1024 * 1024
# hashlib.scrypt rejects a maxmem above INT_MAX
MAX_SCRYPT_MAX_MEMORY = 2**31 - 1


class Settings(BaseSettings):
    """Settings class."""

    log_level: str = get_log_level()
    scrypt_max_memory: Annotated[
        int, Field(ge=MIN_SCRYPT_MAX_MEMORY, le=MAX_SCRYPT_MAX_MEMORY)
    ] = get_scrypt_max_memory()
    max_workers: Annotated[int, Field(ge=1, le=256)] = get_max_workers()

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        return cls()

    # pylint: disable=unused-argument
    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any, info: ValidationInfo) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        LogLevelType
            The log level

        Raises
        ------
        ValueError
            If the value is not a known log level
        """
        if isinstance(value, str):
            value = value.upper()
            if value not in get_args(LogLevelType):
                raise ValueError(f"Invalid log level: {value}")
        return value
