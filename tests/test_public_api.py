# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import coreason_logger


def test_public_api_exposure() -> None:
    """
    Verify that the core classes and functions are exposed at the package level.
    """
    expected_symbols = [
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

    for symbol in expected_symbols:
        assert hasattr(coreason_logger, symbol), f"{symbol} not exposed in coreason_logger"
        assert symbol in coreason_logger.__all__


def test_logger_callable() -> None:
    """Verify Logger is constructible."""
    assert callable(coreason_logger.Logger)


def test_version_exposure() -> None:
    """Verify version is exposed."""
    assert hasattr(coreason_logger, "__version__")
    assert isinstance(coreason_logger.__version__, str)
