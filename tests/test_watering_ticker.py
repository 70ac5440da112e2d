"""
Tests for the cancellable periodic ticker.
"""

import asyncio

import pytest

from plant_tracker.modules.plant_management.domain.services.watering_ticker import (
    StopTicker,
    WateringTicker,
    elapsed_ticker,
)

from tests.factories import fern_form


def test_ticks_until_stopped():
    calls = []

    async def scenario():
        ticker = WateringTicker(lambda: calls.append(1), interval=0.01)
        ticker.start()
        await asyncio.sleep(0.05)
        await ticker.stop()
        stopped_at = len(calls)
        await asyncio.sleep(0.03)
        return ticker, stopped_at

    ticker, stopped_at = asyncio.run(scenario())

    assert stopped_at >= 2
    assert len(calls) == stopped_at
    assert ticker.ticks == stopped_at
    assert not ticker.running


def test_first_tick_is_immediate():
    calls = []

    async def scenario():
        async with WateringTicker(lambda: calls.append(1), interval=10):
            await asyncio.sleep(0.01)

    asyncio.run(scenario())
    assert calls == [1]


def test_delayed_first_tick():
    calls = []

    async def scenario():
        async with WateringTicker(lambda: calls.append(1), interval=10, run_immediately=False):
            await asyncio.sleep(0.01)

    asyncio.run(scenario())
    assert calls == []


def test_async_callbacks_are_awaited():
    calls = []

    async def tick():
        await asyncio.sleep(0)
        calls.append(1)

    async def scenario():
        async with WateringTicker(tick, interval=10):
            await asyncio.sleep(0.01)

    asyncio.run(scenario())
    assert calls == [1]


def test_callback_errors_do_not_stop_the_ticker():
    calls = []

    def tick():
        calls.append(1)
        raise RuntimeError("boom")

    async def scenario():
        async with WateringTicker(tick, interval=0.01):
            await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert len(calls) >= 2


def test_stop_ticker_ends_the_loop():
    calls = []

    def tick():
        calls.append(1)
        if len(calls) == 3:
            raise StopTicker()

    async def scenario():
        ticker = WateringTicker(tick, interval=0.01)
        ticker.start()
        await asyncio.wait_for(ticker.wait(), timeout=1)
        running = ticker.running
        await ticker.stop()
        return running

    assert asyncio.run(scenario()) is False
    assert len(calls) == 3


def test_start_and_stop_are_idempotent():
    async def scenario():
        ticker = WateringTicker(lambda: None, interval=10)
        ticker.start()
        task = ticker._task
        ticker.start()
        same_task = ticker._task is task
        await ticker.stop()
        await ticker.stop()
        return same_task, ticker.running

    assert asyncio.run(scenario()) == (True, False)


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        WateringTicker(lambda: None, interval=0)


def test_elapsed_ticker_follows_the_plant(store, clock):
    fern = store.add_plant(fern_form())
    clock.advance(days=1, hours=2, minutes=3, seconds=4)
    updates = []

    async def scenario():
        async with elapsed_ticker(store, fern.id, lambda plant, elapsed: updates.append(elapsed), interval=10):
            await asyncio.sleep(0.01)

    asyncio.run(scenario())
    assert [tuple(u) for u in updates] == [(1, 2, 3, 4)]


def test_elapsed_ticker_ends_when_plant_is_deleted(store):
    fern = store.add_plant(fern_form())
    updates = []

    def on_update(plant, elapsed):
        updates.append(plant.id)
        store.delete_plant(plant.id)

    async def scenario():
        ticker = elapsed_ticker(store, fern.id, on_update, interval=0.01)
        ticker.start()
        await asyncio.wait_for(ticker.wait(), timeout=1)
        await ticker.stop()

    asyncio.run(scenario())
    assert updates == [fern.id]
