import asyncio

import pytest

from userprefs.ticker import Ticker

from helpers import FakeLoop


def test_ticker_reschedules_each_tick() -> None:
    loop = FakeLoop()
    calls: list[int] = []
    ticker = Ticker(lambda: calls.append(1), interval=1.0, loop=loop)

    ticker.start()
    loop.advance(3)

    assert len(calls) == 3
    assert ticker.ticks == 3
    assert loop.delays == [1.0, 1.0, 1.0, 1.0]


def test_stop_cancels_pending_tick() -> None:
    loop = FakeLoop()
    calls: list[int] = []
    ticker = Ticker(lambda: calls.append(1), loop=loop)

    ticker.start()
    loop.advance()
    ticker.stop()
    loop.advance(5, ignore_cancel=True)

    assert calls == [1]
    assert ticker.running is False
    assert loop.pending == [] or all(h.cancelled for h in loop.pending)


def test_stop_is_idempotent_and_start_twice_is_noop() -> None:
    loop = FakeLoop()
    ticker = Ticker(lambda: None, loop=loop)
    ticker.start()
    ticker.start()
    assert len(loop.pending) == 1
    ticker.stop()
    ticker.stop()


def test_context_manager_stops_on_error() -> None:
    loop = FakeLoop()
    calls: list[int] = []
    ticker = Ticker(lambda: calls.append(1), loop=loop)

    with pytest.raises(RuntimeError):
        with ticker:
            loop.advance()
            raise RuntimeError("boom")

    loop.advance(3, ignore_cancel=True)
    assert calls == [1]
    assert ticker.running is False


def test_callback_error_keeps_ticking() -> None:
    loop = FakeLoop()

    def explode() -> None:
        raise ValueError("bad tick")

    ticker = Ticker(explode, loop=loop)
    ticker.start()
    with pytest.raises(ValueError):
        loop.advance()
    assert ticker.running is True
    assert len(loop.pending) == 1


def test_invalid_interval() -> None:
    with pytest.raises(ValueError):
        Ticker(lambda: None, interval=0)


def test_start_without_running_loop() -> None:
    with pytest.raises(RuntimeError):
        Ticker(lambda: None).start()


def test_real_event_loop() -> None:
    calls: list[int] = []

    async def main() -> None:
        ticker = Ticker(lambda: calls.append(1), interval=0.01)
        ticker.start()
        await asyncio.sleep(0.055)
        ticker.stop()
        seen = len(calls)
        await asyncio.sleep(0.05)
        assert len(calls) == seen

    asyncio.run(main())
    assert len(calls) >= 2
