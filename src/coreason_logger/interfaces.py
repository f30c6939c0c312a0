# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from typing import Any, Protocol


class ConsoleSink(Protocol):
    """
    Protocol for interactive console output.

    The first argument of each leveled method is a printf-style template;
    the remaining arguments are substituted into it.
    """

    def error(self, message: str, *args: Any) -> None: ...

    def warn(self, message: str, *args: Any) -> None: ...

    def info(self, message: str, *args: Any) -> None: ...

    def debug(self, message: str, *args: Any) -> None: ...

    def time(self, label: str) -> None:
        """
        Starts an elapsed-time measurement under label.
        """
        ...

    def time_end(self, label: str) -> None:
        """
        Stops the measurement under label and reports the elapsed time.
        """
        ...
