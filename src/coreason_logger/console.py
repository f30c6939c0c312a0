# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import time
from typing import Any, Dict

from coreason_logger.formatting import format_message
from coreason_logger.interfaces import ConsoleSink
from coreason_logger.utils.logger import console_logger, logger


class LoguruConsole(ConsoleSink):
    """
    Default console sink. Writes rendered lines through loguru's console sinks:
    info and debug go to stdout, warn and error to stderr.
    """

    def __init__(self) -> None:
        self._timers: Dict[str, float] = {}

    def _write(self, loguru_level: str, message: str, args: tuple[Any, ...]) -> None:
        console_logger.log(loguru_level, format_message(message, *args))

    def error(self, message: str, *args: Any) -> None:
        self._write("ERROR", message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._write("WARNING", message, args)

    def info(self, message: str, *args: Any) -> None:
        self._write("INFO", message, args)

    def debug(self, message: str, *args: Any) -> None:
        self._write("DEBUG", message, args)

    def time(self, label: str) -> None:
        if label in self._timers:
            logger.warning(f"Timer '{label}' already exists")
            return
        self._timers[label] = time.perf_counter()

    def time_end(self, label: str) -> None:
        started = self._timers.pop(label, None)
        if started is None:
            logger.warning(f"No such timer: '{label}'")
            return
        elapsed_ms = (time.perf_counter() - started) * 1000
        self.info("%s: %sms", label, f"{elapsed_ms:.3f}")
