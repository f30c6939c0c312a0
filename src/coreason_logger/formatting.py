# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import json
import os
import re
import sys
from typing import Any

from coreason_logger.colors import LINE_INFO_COLOR, colorize

_PLACEHOLDER = re.compile(r"%[sdifjoO%]")


def _convert(token: str, arg: Any) -> str:
    if token == "%s":
        return str(arg)
    if token == "%d":
        try:
            number = float(arg)
        except (TypeError, ValueError, OverflowError):
            return "NaN"
        return str(int(number)) if number.is_integer() else str(number)
    if token == "%i":
        try:
            return str(int(float(arg)))
        except (TypeError, ValueError, OverflowError):
            return "NaN"
    if token == "%f":
        try:
            return str(float(arg))
        except (TypeError, ValueError):
            return "NaN"
    if token == "%j":
        try:
            return json.dumps(arg, default=str)
        except (TypeError, ValueError):
            return "[Circular]"
    # %o / %O
    return repr(arg)


def format_message(template: Any, *args: Any) -> str:
    """
    Printf-style substitution of args into template.

    Supports %s, %d, %i, %f, %j, %o, %O and the %% escape. Placeholders
    without a matching argument are left as-is; surplus arguments are
    appended separated by spaces. Mismatches are never an error.
    """
    if not isinstance(template, str):
        return " ".join(str(part) for part in (template, *args))

    remaining = list(args)

    def _substitute(match: "re.Match[str]") -> str:
        token = match.group(0)
        if token == "%%":
            return "%"
        if not remaining:
            return token
        return _convert(token, remaining.pop(0))

    rendered = _PLACEHOLDER.sub(_substitute, template)
    if remaining:
        rendered = " ".join([rendered, *(str(arg) for arg in remaining)])
    return rendered


def caller_location(depth: int = 1) -> str:
    """
    Returns a colored "[./path/to/file.py:LINE]" annotation for a caller.

    depth=1 is the caller of the function that calls caller_location.
    Paths under the working directory are shown relative to it.
    """
    frame = sys._getframe(depth + 1)
    file_path = frame.f_code.co_filename
    cwd = os.getcwd()
    if file_path.startswith(cwd):
        file_path = "." + file_path[len(cwd) :]
    return f"[{colorize(LINE_INFO_COLOR, f'{file_path}:{frame.f_lineno}')}]"
