# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import gc
import signal
import threading

import pytest

from coreason_logger.control import SignalDispatcher


class Counter:
    def __init__(self) -> None:
        self.cycles = 0
        self.deferred: list[bool] = []

    def cycle_level(self, defer: bool = False) -> None:
        self.cycles += 1
        self.deferred.append(defer)


requires_sigusr2 = pytest.mark.skipif(not hasattr(signal, "SIGUSR2"), reason="SIGUSR2 not available")


def test_dispatch_fans_out(dispatcher: SignalDispatcher) -> None:
    first, second = Counter(), Counter()
    dispatcher.subscribe(first)
    dispatcher.subscribe(second)

    dispatcher.dispatch()

    assert first.cycles == 1
    assert second.cycles == 1
    assert first.deferred == [True]


def test_subscribe_is_idempotent(dispatcher: SignalDispatcher) -> None:
    counter = Counter()
    dispatcher.subscribe(counter)
    dispatcher.subscribe(counter)
    dispatcher.dispatch()
    assert counter.cycles == 1


def test_unsubscribe(dispatcher: SignalDispatcher) -> None:
    kept, dropped = Counter(), Counter()
    dispatcher.subscribe(kept)
    dispatcher.subscribe(dropped)
    dispatcher.unsubscribe(dropped)
    dispatcher.unsubscribe(dropped)

    dispatcher.dispatch()

    assert kept.cycles == 1
    assert dropped.cycles == 0
    assert dispatcher.subscribers() == [kept]


def test_collected_subscribers_are_dropped(dispatcher: SignalDispatcher) -> None:
    counter = Counter()
    dispatcher.subscribe(counter)
    del counter
    gc.collect()
    assert dispatcher.subscribers() == []


@requires_sigusr2
def test_handler_installed_once(dispatcher: SignalDispatcher) -> None:
    assert not dispatcher.installed
    dispatcher.subscribe(Counter())
    assert dispatcher.installed
    assert signal.getsignal(signal.SIGUSR2) == dispatcher._handle


@requires_sigusr2
def test_real_signal_cycles_subscribers(dispatcher: SignalDispatcher) -> None:
    counter = Counter()
    dispatcher.subscribe(counter)

    signal.raise_signal(signal.SIGUSR2)

    assert counter.cycles == 1


def test_no_install_outside_main_thread(dispatcher: SignalDispatcher) -> None:
    counter = Counter()
    worker = threading.Thread(target=dispatcher.subscribe, args=(counter,))
    worker.start()
    worker.join()

    assert not dispatcher.installed
    assert dispatcher.subscribers() == [counter]


def test_unknown_signal_disables_install() -> None:
    dispatcher = SignalDispatcher(signal_name="SIGDOESNOTEXIST")
    dispatcher.subscribe(Counter())
    assert not dispatcher.installed
