# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import pytest

from coreason_logger.utils.logger import console_logger, logger


def test_logger_interface() -> None:
    # Verify logger is accessible
    logger.info("Test log")
    assert True


def test_console_records_bypass_diagnostics(capsys: pytest.CaptureFixture[str]) -> None:
    console_logger.info("rendered line")
    console_logger.error("rendered failure")

    captured = capsys.readouterr()
    assert captured.out == "rendered line\n"
    assert captured.err == "rendered failure\n"
