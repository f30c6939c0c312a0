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
Deterministic terminal colors for level tags and prefix segments.
"""

import colorsys
import hashlib

ANSI_FOREGROUND_RESET = "\033[39m"
LINE_INFO_COLOR = "#FF4500"


def hex_for_fraction(fraction: float) -> str:
    """
    Maps a fraction in [0, 1) onto the hue wheel and returns a hex color.
    """
    hue = fraction % 1.0
    red, green, blue = colorsys.hsv_to_rgb(hue, 0.85, 1.0)
    return "#{:02X}{:02X}{:02X}".format(round(red * 255), round(green * 255), round(blue * 255))


def hex_for_text(text: str) -> str:
    """
    Derives a stable color from a piece of text.
    The same text maps to the same color in every run.
    """
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return hex_for_fraction(int(digest[:8], 16) / 0x100000000)


def colorize(hex_color: str, text: str) -> str:
    """Wraps text in a 24-bit ANSI foreground escape."""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    red, green, blue = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return f"\033[38;2;{red};{green};{blue}m{text}{ANSI_FOREGROUND_RESET}"
