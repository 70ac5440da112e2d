# 📄 File: plant_tracker/modules/plant_management/domain/services/watering_ticker.py
# 🧭 Purpose (Layman Explanation):
# A small clock that ticks every second while a plant's detail view is open, so the
# "time since last watering" counter keeps moving, and that stops when the view closes.
# 🧪 Purpose (Technical Summary):
# Cancellable asyncio periodic task owned by a single consumer (detail view, websocket,
# application lifespan). Sync or async callbacks; callback errors are logged, not fatal.
# 🔗 Dependencies:
# asyncio, inspect, time_math.py, care_record_store.py, app logging
# 🔄 Connected Modules / Calls From:
# plant_tracker.main lifespan (undo expiry), plant detail websocket endpoint

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Optional, Union

from plant_tracker.shared.core.exceptions import NotFoundError
from plant_tracker.shared.utils.logging import get_logger

from ..models.plant import Plant
from .care_record_store import CareRecordStore
from .time_math import Elapsed, elapsed_since

logger = get_logger(__name__)

TickCallback = Callable[[], Union[Any, Awaitable[Any]]]


class StopTicker(Exception):
    """Raised by a tick callback to end the ticker from inside."""


class WateringTicker:
    """
    Periodic tick bound to the lifetime of its owner.

    The owner calls ``start()`` when it becomes active and ``await stop()``
    when it goes away; ``async with`` does both. The first tick fires
    immediately, then one every ``interval`` seconds.
    """

    def __init__(
        self,
        callback: TickCallback,
        interval: float = 1.0,
        name: str = "watering-ticker",
        run_immediately: bool = True,
    ):
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self._callback = callback
        self.interval = interval
        self.name = name
        self.run_immediately = run_immediately
        self.ticks = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the tick loop on the running event loop. No-op if already running."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name=self.name)
        logger.debug(f"Ticker {self.name} started", interval=self.interval)

    async def stop(self) -> None:
        """Cancel the tick loop and wait for it to finish. Safe to call repeatedly."""
        task, self._task = self._task, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug(f"Ticker {self.name} stopped", ticks=self.ticks)

    async def wait(self) -> None:
        """Wait until the tick loop ends, by StopTicker or by stop()."""
        task = self._task
        if task is not None:
            await asyncio.wait({task})

    async def __aenter__(self) -> "WateringTicker":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    async def _run(self) -> None:
        if not self.run_immediately:
            await asyncio.sleep(self.interval)
        while True:
            try:
                await self._tick()
            except StopTicker:
                logger.debug(f"Ticker {self.name} ended by its callback")
                return
            await asyncio.sleep(self.interval)

    async def _tick(self) -> None:
        self.ticks += 1
        try:
            result = self._callback()
            if inspect.isawaitable(result):
                await result
        except StopTicker:
            raise
        except Exception as e:
            logger.error(f"Ticker {self.name} callback failed: {e}", exc_info=True)


def elapsed_ticker(
    store: CareRecordStore,
    plant_id: str,
    on_update: Callable[[Plant, Elapsed], Union[Any, Awaitable[Any]]],
    interval: float = 1.0,
) -> WateringTicker:
    """
    Ticker pushing the time since a plant's last watering to ``on_update``.

    The plant is looked up again on every tick, so edits and waterings show
    up immediately; once the plant is gone the ticker ends by itself.
    """

    async def tick() -> None:
        try:
            plant = store.get_plant(plant_id)
        except NotFoundError:
            raise StopTicker() from None
        result = on_update(plant, elapsed_since(plant.last_watered, store.now()))
        if inspect.isawaitable(result):
            await result

    return WateringTicker(tick, interval=interval, name=f"elapsed-{plant_id}")
