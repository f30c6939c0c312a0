# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from enum import Enum
from typing import Any, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coreason_logger.severity import Severity
from coreason_logger.syslog import DEFAULT_SYSLOG_FACILITY, DEFAULT_SYSLOG_PATH


class Transport(str, Enum):
    CONSOLE = "console"
    SYSLOG = "syslog"


def parse_level(value: Any) -> Any:
    if value is None or isinstance(value, Severity):
        return value
    if isinstance(value, str):
        return Severity.parse(value)
    return value


class LoggerOptions(BaseModel):
    """
    Constructor options for a Logger.

    Unset fields fall back to the process settings (level, transport) or to
    the defaults below.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    prefix: Optional[str] = None
    prefixes: List[str] = Field(default_factory=list)
    prefix_separator: str = "/"
    syslog_tag: Optional[str] = None
    syslog_path: str = DEFAULT_SYSLOG_PATH
    syslog_facility: int = Field(default=DEFAULT_SYSLOG_FACILITY, ge=0, le=23)
    console: Optional[Any] = None
    level: Optional[Severity] = None
    transport: Optional[Transport] = None
    redact_keys: FrozenSet[str] = frozenset()
    redact_values: FrozenSet[str] = frozenset()

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, value: Any) -> Any:
        return parse_level(value)

    def segments(self) -> List[str]:
        """Prefix segments in order: prefix first, then prefixes."""
        seeds = [self.prefix] if self.prefix else []
        return seeds + [p for p in self.prefixes if p]
