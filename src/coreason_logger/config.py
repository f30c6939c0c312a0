# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from coreason_logger.schemas import Transport, parse_level
from coreason_logger.severity import Severity
from coreason_logger.utils.logger import logger

_FALSY = {"", "0", "false", "no", "off"}


def _flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() not in _FALSY


class LoggerSettings(BaseModel):
    """
    Process-level defaults, read once from the environment.

    LOG_LEVEL     initial threshold name (default: info)
    DEBUG         truthy flag; selects console by default and enables line info
    LOG_TRANSPORT console or syslog; overrides the DEBUG-based default
    LINE_INFO     truthy flag; enables line info outside debug mode
    """

    model_config = ConfigDict(frozen=True)

    level: Severity = Severity.INFO
    debug: bool = False
    transport: Optional[Transport] = None
    line_info: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, value: Any) -> Any:
        return parse_level(value)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerSettings":
        env = os.environ if environ is None else environ

        level = Severity.INFO
        raw_level = env.get("LOG_LEVEL")
        if raw_level:
            try:
                level = Severity.parse(raw_level)
            except ValueError:
                logger.warning(f"Ignoring invalid LOG_LEVEL '{raw_level}', using 'info'")

        transport: Optional[Transport] = None
        raw_transport = env.get("LOG_TRANSPORT")
        if raw_transport:
            try:
                transport = Transport(raw_transport.strip().lower())
            except ValueError:
                logger.warning(f"Ignoring invalid LOG_TRANSPORT '{raw_transport}'")

        return cls(
            level=level,
            debug=_flag(env.get("DEBUG")),
            transport=transport,
            line_info=_flag(env.get("LINE_INFO")),
        )

    @property
    def wants_line_info(self) -> bool:
        return self.debug or self.line_info


_settings: Optional[LoggerSettings] = None


def get_settings() -> LoggerSettings:
    """Returns the process settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = LoggerSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Forgets cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
