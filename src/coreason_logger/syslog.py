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
import socket
import sys
import threading
from typing import Dict, Tuple

from coreason_logger.severity import SYSLOG_LABELS
from coreason_logger.utils.logger import logger

DEFAULT_SYSLOG_PATH = "/dev/log"
DEFAULT_SYSLOG_FACILITY = 1  # user-level messages


def default_syslog_tag() -> str:
    """Program name, as openlog(3) would use."""
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "python"


class TransportUnavailableError(RuntimeError):
    """Raised when a log record cannot be delivered through the active transport."""


class SyslogConnection:
    """
    A datagram connection to the local syslog socket.

    Each message is framed as "<PRI>tag [label]: message" where
    PRI = facility * 8 + severity.
    """

    def __init__(self, tag: str, path: str = DEFAULT_SYSLOG_PATH, facility: int = DEFAULT_SYSLOG_FACILITY):
        self.tag = tag
        self.path = path
        self.facility = facility
        self._sock = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
        try:
            self._sock.connect(path)
        except OSError:
            self._sock.close()
            raise
        self.closed = False

    def compose(self, message: str, priority: int) -> bytes:
        return f"<{self.facility * 8 + priority}>{self.tag} [{SYSLOG_LABELS[priority]}]: {message}".encode("utf-8")

    def send(self, message: str, priority: int) -> None:
        if self.closed:
            raise TransportUnavailableError(f"Syslog connection to {self.path} is closed")
        try:
            self._sock.send(self.compose(message, priority))
        except OSError as e:
            raise TransportUnavailableError(f"Failed to send to syslog at {self.path}: {e}") from e

    def close(self) -> None:
        if not self.closed:
            self._sock.close()
            self.closed = True


PoolKey = Tuple[str, str, int]


class SyslogPool:
    """
    Shares one SyslogConnection per (tag, path, facility), reference-counted
    by the loggers holding it. The connection closes with its last holder.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[PoolKey, Tuple[SyslogConnection, int]] = {}

    def acquire(self, tag: str, path: str, facility: int = DEFAULT_SYSLOG_FACILITY) -> SyslogConnection:
        """
        Returns a shared connection, opening it on first use.
        Raises OSError when the socket cannot be opened; failures are not cached.
        """
        key = (tag, path, facility)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                connection, count = entry
                self._entries[key] = (connection, count + 1)
                return connection
            connection = SyslogConnection(tag, path, facility)
            self._entries[key] = (connection, 1)
            logger.debug(f"Opened syslog connection to {path} with tag '{tag}'")
            return connection

    def release(self, connection: SyslogConnection) -> None:
        key = (connection.tag, connection.path, connection.facility)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry[0] is not connection:
                return
            _, count = entry
            if count > 1:
                self._entries[key] = (connection, count - 1)
                return
            del self._entries[key]
        connection.close()
        logger.debug(f"Closed syslog connection to {connection.path}")

    def refcount(self, tag: str, path: str, facility: int = DEFAULT_SYSLOG_FACILITY) -> int:
        with self._lock:
            entry = self._entries.get((tag, path, facility))
        return entry[1] if entry else 0


syslog_pool = SyslogPool()
