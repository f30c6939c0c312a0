# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

"""
The fixed, ordered severity scale.

Rank 0 is the most severe. A message is admitted when its rank is less than
or equal to the active threshold rank.
"""

from enum import IntEnum
from typing import Tuple, Union

__all__ = ["Severity", "LEVELS", "rank", "compare", "cycle"]

# Numeric syslog severities (RFC 5424): 0=emergency ... 7=debug
SYSLOG_LABELS = {
    0: "emergency",
    1: "alert",
    2: "critical",
    3: "error",
    4: "warning",
    5: "notice",
    6: "info",
    7: "debug",
}


class Severity(IntEnum):
    """
    A logical severity. The enum value is the rank on the scale.
    """

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4
    SILLY = 5

    @property
    def label(self) -> str:
        """Lower-case name used in rendered output and configuration."""
        return self.name.lower()

    @property
    def syslog_priority(self) -> int:
        """Numeric syslog severity this level is sent at."""
        return _SYSLOG_PRIORITIES[self]

    @classmethod
    def parse(cls, value: Union["Severity", str]) -> "Severity":
        """
        Resolves a severity from an enum member or a case-insensitive name.
        Raises ValueError for unknown names.
        """
        if isinstance(value, Severity):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid log level: {value!r}")
        try:
            return cls[value.strip().upper()]
        except KeyError as e:
            raise ValueError(f"Invalid log level: {value!r}. Expected one of {', '.join(LEVELS)}") from e


_SYSLOG_PRIORITIES = {
    Severity.ERROR: 3,
    Severity.WARN: 4,
    Severity.INFO: 6,
    Severity.DEBUG: 7,
    Severity.TRACE: 7,
    Severity.SILLY: 7,
}

LEVELS: Tuple[str, ...] = tuple(s.label for s in Severity)


def rank(level: Union[Severity, str]) -> int:
    return int(Severity.parse(level))


def compare(message_rank: int, threshold_rank: int) -> bool:
    """True iff a message at message_rank passes a threshold at threshold_rank."""
    return message_rank <= threshold_rank


def cycle(current_rank: int) -> int:
    """Next rank on the scale, wrapping from the last level back to error."""
    return (current_rank + 1) % len(Severity)
