# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import threading
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from coreason_logger.config import LoggerSettings, get_settings
from coreason_logger.console import LoguruConsole
from coreason_logger.control import SignalDispatcher, dispatcher
from coreason_logger.formatting import caller_location
from coreason_logger.interfaces import ConsoleSink
from coreason_logger.prefix import PrefixChain
from coreason_logger.redaction import RedactionFilter, RedactionRules
from coreason_logger.schemas import LoggerOptions, Transport
from coreason_logger.severity import LEVELS, Severity, compare, cycle
from coreason_logger.syslog import SyslogPool, TransportUnavailableError, default_syslog_tag, syslog_pool
from coreason_logger.transport import TransportRouter, select_transport
from coreason_logger.utils.logger import logger as diagnostics

LevelLike = Union[Severity, str]


class Logger:
    """
    Leveled logging facade with console and syslog transports.

    Messages below the active threshold are dropped. Admitted messages have
    their arguments redacted and are emitted through the logger's single
    transport binding. Sending SIGUSR2 to the process advances the threshold
    of every live logger by one level, wrapping from silly back to error.
    """

    LEVELS: Tuple[str, ...] = LEVELS
    TRANSPORTS: Tuple[str, ...] = tuple(t.value for t in Transport)

    def __init__(
        self,
        settings: Optional[LoggerSettings] = None,
        signal_dispatcher: SignalDispatcher = dispatcher,
        pool: SyslogPool = syslog_pool,
        **options: Any,
    ):
        self.options = LoggerOptions(**options)
        self.settings = settings or get_settings()
        self._lock = threading.RLock()
        self._threshold = self.options.level if self.options.level is not None else self.settings.level
        self.timers: Dict[str, bool] = {}
        self._pending_notice: Optional[Severity] = None
        self.closed = False

        self.prefix_chain = PrefixChain(self.options.segments())
        self.redaction = RedactionFilter(
            RedactionRules(keys=self.options.redact_keys, values=self.options.redact_values)
        )
        self.console: ConsoleSink = self.options.console if self.options.console is not None else LoguruConsole()
        self.syslog_tag = self.options.syslog_tag or default_syslog_tag()

        self.router = TransportRouter(
            transport=select_transport(self.options.transport, self.settings),
            console=self.console,
            prefix_chain=self.prefix_chain,
            redaction=self.redaction,
            prefix_separator=self.options.prefix_separator,
            syslog_tag=self.syslog_tag,
            syslog_path=self.options.syslog_path,
            syslog_facility=self.options.syslog_facility,
            pool=pool,
        )
        self._pool = pool
        self._dispatcher = signal_dispatcher
        self._dispatcher.subscribe(self)

    # --- State ---

    @property
    def threshold(self) -> Severity:
        with self._lock:
            return self._threshold

    @property
    def level(self) -> str:
        return self.threshold.label

    def set_level(self, level: LevelLike) -> None:
        severity = Severity.parse(level)
        with self._lock:
            self._threshold = severity

    @property
    def transport(self) -> Transport:
        return self.router.transport

    @property
    def transport_available(self) -> bool:
        """False when the syslog binding could not be opened or has been closed."""
        return self.router.available

    @property
    def transport_error(self) -> Optional[BaseException]:
        return self.router.error

    @property
    def prefix(self) -> str:
        """Plain-text prefix chain, e.g. "@app/core"."""
        return self.prefix_chain.render(self.options.prefix_separator, colorize_segments=False)

    def is_enabled(self, level: LevelLike) -> bool:
        return compare(int(Severity.parse(level)), int(self.threshold))

    # --- Emission ---

    def log(self, level: LevelLike, message: str, args: Sequence[Any] = ()) -> None:
        """
        Emits message at level if the level passes the current threshold.
        """
        severity = Severity.parse(level)
        self._flush_level_notice()
        if self.is_enabled(severity):
            self.router.emit(severity, message, args)

    def _with_line_info(self, args: Tuple[Any, ...]) -> Tuple[Any, ...]:
        if not self.settings.wants_line_info:
            return args
        # Frames: caller_location <- _with_line_info <- debug/error <- caller
        return args + (caller_location(depth=2),)

    def error(self, message: Union[str, BaseException, Any], *args: Any) -> None:
        if isinstance(message, BaseException):
            self.log(Severity.ERROR, str(message), self._with_line_info(()))
        else:
            text = message if isinstance(message, str) else str(message)
            self.log(Severity.ERROR, text, self._with_line_info(args))

    def warn(self, message: str, *args: Any) -> None:
        self.log(Severity.WARN, message, args)

    def info(self, message: str, *args: Any) -> None:
        self.log(Severity.INFO, message, args)

    def debug(self, message: str, *args: Any) -> None:
        self.log(Severity.DEBUG, message, self._with_line_info(args))

    def trace(self, message: str, *args: Any) -> None:
        self.log(Severity.TRACE, message, args)

    def silly(self, message: str, *args: Any) -> None:
        self.log(Severity.SILLY, message, args)

    def timer(self, name: str) -> None:
        """
        First call starts a timer under name; the next call stops it and
        reports the elapsed time through the console.
        """
        if self.timers.get(name):
            del self.timers[name]
            self.console.time_end(name)
        else:
            self.timers[name] = True
            self.console.time(name)

    # --- Runtime control ---

    def cycle_level(self, defer: bool = False) -> Severity:
        """
        Advances the threshold one level (wrapping) and reports the new level
        at debug, subject to the new threshold.

        With defer=True the report is held until the next log call. The signal
        handler uses this so it never writes to a sink it may have interrupted.
        """
        with self._lock:
            self._threshold = Severity(cycle(int(self._threshold)))
            new_level = self._threshold
            if defer:
                self._pending_notice = new_level
                return new_level
            self._pending_notice = None
        self._report_level(new_level)
        return new_level

    def _flush_level_notice(self) -> None:
        with self._lock:
            pending, self._pending_notice = self._pending_notice, None
        if pending is not None:
            self._report_level(pending)

    def _report_level(self, level: Severity) -> None:
        try:
            self.log(Severity.DEBUG, "Log level updated to %s.", [level.label])
        except TransportUnavailableError as e:
            diagnostics.warning(f"Could not report log level change: {e}")

    # --- Hierarchy ---

    def create_child(
        self,
        prefix: Optional[str] = None,
        prefixes: Optional[Sequence[str]] = None,
        **overrides: Any,
    ) -> "Logger":
        """
        Returns a logger whose prefix chain extends this one's.

        The child shares this logger's transport, console, syslog settings and
        redaction rules, and starts at this logger's current level unless
        overridden. It subscribes to the level-cycling signal on its own.
        """
        child_segments = ([prefix] if prefix else []) + list(prefixes or [])
        chain = self.prefix_chain.append(*child_segments)
        inherited: Dict[str, Any] = {
            "prefixes": list(chain.segments),
            "prefix_separator": self.options.prefix_separator,
            "syslog_tag": self.syslog_tag,
            "syslog_path": self.options.syslog_path,
            "syslog_facility": self.options.syslog_facility,
            "console": self.console,
            "level": self.threshold,
            "transport": self.transport,
            "redact_keys": self.redaction.rules.keys,
            "redact_values": self.redaction.rules.values,
        }
        inherited.update(overrides)
        return Logger(settings=self.settings, signal_dispatcher=self._dispatcher, pool=self._pool, **inherited)

    # --- Lifecycle ---

    def close(self) -> None:
        """Unsubscribes from level cycling and releases the syslog connection."""
        if self.closed:
            return
        self._dispatcher.unsubscribe(self)
        self.router.close()
        self.closed = True

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Logger(prefix={self.prefix!r}, level={self.level!r}, transport={self.transport.value!r})"
