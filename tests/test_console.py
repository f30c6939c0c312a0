# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import re

import pytest

from coreason_logger.console import LoguruConsole


def test_info_and_debug_go_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    console = LoguruConsole()
    console.info("hello %s", "world")
    console.debug("count=%d", 3)

    captured = capsys.readouterr()
    assert captured.out == "hello world\ncount=3\n"


def test_warn_and_error_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    console = LoguruConsole()
    console.warn("careful")
    console.error("broken %s", "pipe")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "careful\n" in captured.err
    assert "broken pipe\n" in captured.err


def test_braces_are_not_formatted(capsys: pytest.CaptureFixture[str]) -> None:
    LoguruConsole().info("{not} a <format>")
    assert capsys.readouterr().out == "{not} a <format>\n"


def test_timer_reports_elapsed(capsys: pytest.CaptureFixture[str]) -> None:
    console = LoguruConsole()
    console.time("load")
    console.time_end("load")

    out = capsys.readouterr().out
    assert re.fullmatch(r"load: \d+\.\d{3}ms\n", out)


def test_timer_end_without_start(capsys: pytest.CaptureFixture[str]) -> None:
    LoguruConsole().time_end("never")
    assert capsys.readouterr().out == ""


def test_timer_start_twice_keeps_first(capsys: pytest.CaptureFixture[str]) -> None:
    console = LoguruConsole()
    console.time("x")
    console.time("x")
    console.time_end("x")
    console.time_end("x")
    assert len(capsys.readouterr().out.splitlines()) == 1
