"""Periodic dashboard refresh"""

import asyncio
import traceback
from typing import Awaitable, Callable, Optional

from config import settings


class RefreshScheduler:
    """Runs a refresh callback on a fixed wall-clock interval"""

    def __init__(
        self,
        callback: Callable[[], Awaitable],
        interval: Optional[float] = None
    ):
        self.callback = callback
        self.interval = interval if interval is not None else settings.REFRESH_INTERVAL_SECONDS
        self._task: Optional[asyncio.Task] = None
        self.runs = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the refresh loop on the running event loop"""
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())
        print(f"🔄 Auto-refresh every {self.interval:g}s", flush=True)

    async def stop(self) -> None:
        """Cancel the refresh loop"""
        if not self._task:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            await self._tick()

    async def _tick(self) -> None:
        self.runs += 1
        try:
            await self.callback()
        except Exception as e:
            print(f"❌ Refresh failed: {e}", flush=True)
            print(traceback.format_exc(), flush=True)
