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
coreason-logger
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .config import LoggerSettings, get_settings, reset_settings
from .control import SignalDispatcher
from .logger import Logger
from .prefix import PrefixChain
from .redaction import REDACTED, RedactionFilter, RedactionRules
from .schemas import LoggerOptions, Transport
from .severity import LEVELS, Severity
from .syslog import SyslogConnection, SyslogPool, TransportUnavailableError

__all__ = [
    "Logger",
    "LoggerOptions",
    "LoggerSettings",
    "get_settings",
    "reset_settings",
    "Severity",
    "LEVELS",
    "Transport",
    "TransportUnavailableError",
    "PrefixChain",
    "RedactionFilter",
    "RedactionRules",
    "REDACTED",
    "SignalDispatcher",
    "SyslogConnection",
    "SyslogPool",
]
