# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from typing import Any, Callable, Optional, Sequence

from coreason_logger.colors import colorize, hex_for_fraction
from coreason_logger.config import LoggerSettings
from coreason_logger.formatting import format_message
from coreason_logger.interfaces import ConsoleSink
from coreason_logger.prefix import PrefixChain
from coreason_logger.redaction import RedactionFilter
from coreason_logger.schemas import Transport
from coreason_logger.severity import Severity
from coreason_logger.syslog import SyslogConnection, SyslogPool, TransportUnavailableError, syslog_pool
from coreason_logger.utils.logger import logger


def select_transport(explicit: Optional[Transport], settings: LoggerSettings) -> Transport:
    """
    Explicit option wins, then LOG_TRANSPORT, then console in debug mode,
    otherwise syslog.
    """
    if explicit is not None:
        return explicit
    if settings.transport is not None:
        return settings.transport
    if settings.debug:
        return Transport.CONSOLE
    return Transport.SYSLOG


def level_color(severity: Severity) -> str:
    return hex_for_fraction(int(severity) / len(Severity))


def _console_method(console: ConsoleSink, severity: Severity) -> Callable[..., None]:
    # Consoles expose four leveled methods; trace and silly share debug's.
    if severity is Severity.ERROR:
        return console.error
    if severity is Severity.WARN:
        return console.warn
    if severity is Severity.INFO:
        return console.info
    return console.debug


class TransportRouter:
    """
    Holds the single transport binding of a Logger and emits rendered
    records through it.
    """

    def __init__(
        self,
        transport: Transport,
        console: ConsoleSink,
        prefix_chain: PrefixChain,
        redaction: RedactionFilter,
        prefix_separator: str = "/",
        syslog_tag: str = "",
        syslog_path: str = "",
        syslog_facility: int = 1,
        pool: SyslogPool = syslog_pool,
    ):
        self.transport = transport
        self.console = console
        self.prefix_chain = prefix_chain
        self.prefix_separator = prefix_separator
        self.redaction = redaction
        self.pool = pool
        self.syslog: Optional[SyslogConnection] = None
        self.error: Optional[BaseException] = None

        if transport is Transport.SYSLOG:
            try:
                self.syslog = pool.acquire(syslog_tag, syslog_path, syslog_facility)
            except Exception as e:
                # Non-fatal at construction; emission reports the failure.
                self.error = e
                logger.warning(f"Syslog unavailable at {syslog_path}: {e}")

    @property
    def available(self) -> bool:
        if self.transport is Transport.CONSOLE:
            return True
        return self.syslog is not None and not self.syslog.closed

    def render_console(self, severity: Severity, message: str) -> str:
        """
        "[level] [a/b/c]: message", omitting the prefix bracket when the chain is empty.
        """
        text = f"[{colorize(level_color(severity), severity.label)}] "
        if self.prefix_chain:
            text += f"[{self.prefix_chain.render(self.prefix_separator)}]: "
        return text + message

    def emit(self, severity: Severity, message: str, args: Sequence[Any] = ()) -> None:
        redacted = self.redaction.sanitize(args)

        if self.transport is Transport.CONSOLE:
            _console_method(self.console, severity)(self.render_console(severity, message), *redacted)
            return

        if not self.available or self.syslog is None:
            reason = self.error or "connection closed"
            raise TransportUnavailableError(f"Syslog transport unavailable: {reason}") from self.error
        self.syslog.send(format_message(message, *redacted), severity.syslog_priority)

    def close(self) -> None:
        if self.syslog is not None:
            self.pool.release(self.syslog)
            self.syslog = None
