# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import signal
import threading
import weakref
from types import FrameType
from typing import Any, Optional, Protocol

from coreason_logger.utils.logger import logger


class Cyclable(Protocol):
    def cycle_level(self, defer: bool = ...) -> Any: ...


class SignalDispatcher:
    """
    Process-wide fan-out of the verbosity signal.

    A single handler is installed for all loggers. Subscribers are held
    weakly, so loggers that are dropped without close() stop receiving the
    signal once collected.
    """

    def __init__(self, signal_name: str = "SIGUSR2"):
        self.signal_name = signal_name
        self._subscribers: "weakref.WeakSet[Any]" = weakref.WeakSet()
        self._lock = threading.RLock()
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def subscribe(self, subscriber: Cyclable) -> None:
        with self._lock:
            self._subscribers.add(subscriber)
            if not self._installed:
                self._install()

    def unsubscribe(self, subscriber: Cyclable) -> None:
        with self._lock:
            self._subscribers.discard(subscriber)

    def subscribers(self) -> list[Any]:
        with self._lock:
            return list(self._subscribers)

    def dispatch(self) -> None:
        """
        Advances the level of every live subscriber. Level-change notices are
        deferred to each subscriber's next log call, since this may run from a
        signal handler that interrupted a sink.
        """
        for subscriber in self.subscribers():
            subscriber.cycle_level(defer=True)

    def _handle(self, signum: int, frame: Optional[FrameType]) -> None:
        self.dispatch()

    def _install(self) -> None:
        signum = getattr(signal, self.signal_name, None)
        if signum is None:
            logger.warning(f"{self.signal_name} is not available on this platform; runtime level cycling disabled")
            return
        if threading.current_thread() is not threading.main_thread():
            # Retried on the next subscribe.
            logger.warning(f"Cannot install {self.signal_name} handler outside the main thread")
            return
        signal.signal(signum, self._handle)
        self._installed = True
        logger.debug(f"Installed {self.signal_name} handler for log level cycling")


dispatcher = SignalDispatcher()
