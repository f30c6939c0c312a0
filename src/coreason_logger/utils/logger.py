# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import sys
from typing import Any, Dict

from loguru import logger as _logger

__all__ = ["logger", "console_logger"]

# Remove default handler
_logger.remove()


def _is_console_record(record: Dict[str, Any]) -> bool:
    return bool(record["extra"].get("console"))


# Sink 1: Stderr (Human-readable diagnostics for the library itself)
# Records emitted by the console transport are routed to their own sinks below.
_logger.add(
    sys.stderr,
    level="INFO",
    filter=lambda record: not _is_console_record(record),
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ),
)

# Sinks 2 and 3: Console transport output, already rendered by the caller.
# Streams are looked up per write so redirected stdout/stderr are honoured.
_logger.add(
    lambda message: sys.stdout.write(message),
    level="DEBUG",
    filter=lambda record: _is_console_record(record) and record["level"].no < 30,
    format="{message}",
)
_logger.add(
    lambda message: sys.stderr.write(message),
    level="DEBUG",
    filter=lambda record: _is_console_record(record) and record["level"].no >= 30,
    format="{message}",
)

logger: Any = _logger
console_logger: Any = _logger.bind(console=True)
