# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import os
import shutil
import signal
import socket
import tempfile
from typing import Any, Dict, Generator, List, Tuple

import pytest

from coreason_logger import control
from coreason_logger.config import LoggerSettings, reset_settings
from coreason_logger.control import SignalDispatcher
from coreason_logger.syslog import SyslogPool

# --- Mocks ---


class RecordingConsole:
    """
    Console sink that records every call instead of printing.
    Each entry is (method, message, args).
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str, Tuple[Any, ...]]] = []
        self.timers: Dict[str, int] = {}

    def error(self, message: str, *args: Any) -> None:
        self.calls.append(("error", message, args))

    def warn(self, message: str, *args: Any) -> None:
        self.calls.append(("warn", message, args))

    def info(self, message: str, *args: Any) -> None:
        self.calls.append(("info", message, args))

    def debug(self, message: str, *args: Any) -> None:
        self.calls.append(("debug", message, args))

    def time(self, label: str) -> None:
        self.calls.append(("time", label, ()))

    def time_end(self, label: str) -> None:
        self.calls.append(("time_end", label, ()))


# --- Fixtures ---


@pytest.fixture(autouse=True)
def isolated_process_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clears logging env vars, forgets cached settings and restores the SIGUSR2 handler around each test."""
    for name in ("LOG_LEVEL", "DEBUG", "LOG_TRANSPORT", "LINE_INFO"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    has_signal = hasattr(signal, "SIGUSR2")
    previous = signal.getsignal(signal.SIGUSR2) if has_signal else None
    installed = control.dispatcher._installed

    yield

    reset_settings()
    if has_signal and previous is not None:
        signal.signal(signal.SIGUSR2, previous)
    control.dispatcher._installed = installed


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def settings() -> LoggerSettings:
    return LoggerSettings()


@pytest.fixture
def dispatcher() -> SignalDispatcher:
    return SignalDispatcher()


@pytest.fixture
def pool() -> SyslogPool:
    return SyslogPool()


@pytest.fixture
def missing_socket_path(tmp_path: Any) -> str:
    return str(tmp_path / "missing" / "log")


@pytest.fixture
def syslog_server() -> Generator[Tuple[str, socket.socket], None, None]:
    """
    A unix datagram socket standing in for the system log daemon.
    Lives under a short temp dir to stay within the AF_UNIX path limit.
    """
    if not hasattr(socket, "AF_UNIX"):
        pytest.skip("AF_UNIX sockets not supported")

    directory = tempfile.mkdtemp(prefix="cl")
    path = os.path.join(directory, "log")
    server = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
    server.bind(path)
    server.settimeout(2)

    yield path, server

    server.close()
    shutil.rmtree(directory, ignore_errors=True)
