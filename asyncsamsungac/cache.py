"""
Short-lived cache of the air conditioner state.

Every property read goes through :class:`DeviceStateCache`. A snapshot younger
than the TTL is served without I/O; an older one is revalidated with a single
shared fetch no matter how many readers are waiting. When the device cannot be
reached the last good snapshot is served instead of an error.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional, Set, Dict, Any

from asyncsamsungac.api.transport import Transport
from asyncsamsungac.exceptions import SamsungACException
from asyncsamsungac.exceptions.api import DeviceNotFoundError, StateUnavailableError
from asyncsamsungac.exceptions.network import NetworkTimeoutError
from asyncsamsungac.models.device import CacheEntry, DeviceState

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL = 3.0

StateListener = Callable[[DeviceState], Awaitable[None]]


class DeviceStateCache:
    """Single source of truth for the last known device state."""

    def __init__(
        self,
        transport: Transport,
        device_index: int = 0,
        ttl: float = DEFAULT_CACHE_TTL,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the cache.

        Args:
            transport: Object providing ``fetch_all()``
            device_index: Position of the unit in the ``Devices`` list
            ttl: Seconds a fetched state is considered fresh (0 disables caching)
            clock: Monotonic time source
        """
        self._transport = transport
        self.device_index = device_index
        self.ttl = ttl
        self._clock = clock

        self._entry = CacheEntry()
        # Last successfully fetched state, kept across invalidation as fallback
        self._last_good: Optional[DeviceState] = None

        self._inflight: Optional[asyncio.Task] = None
        # Fetch detached by invalidate(); the next fetch waits for it to finish
        self._superseded: Optional[asyncio.Task] = None
        # Bumped by invalidate(); a fetch started under an older generation
        # must not repopulate the entry.
        self._generation = 0

        self._listeners: Set[StateListener] = set()

    # ------------------------------------------------------------------
    # Inspection

    @property
    def is_fresh(self) -> bool:
        """Whether the cached entry can be served without a fetch."""
        if self._entry.state is None or self._entry.fetched_at is None:
            return False
        return self._clock() - self._entry.fetched_at < self.ttl

    @property
    def fetch_in_progress(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    def peek(self) -> Optional[DeviceState]:
        """Return the cached state without any I/O (``None`` if empty)."""
        return self._entry.state

    # ------------------------------------------------------------------
    # Listeners

    def add_listener(self, callback: StateListener) -> None:
        """Register a coroutine called with every freshly fetched state."""
        self._listeners.add(callback)

    def remove_listener(self, callback: StateListener) -> None:
        self._listeners.discard(callback)

    async def _notify(self, state: DeviceState) -> None:
        for callback in list(self._listeners):
            try:
                await callback(state)
            except Exception as exc:
                logger.error(f"State listener {callback!r} failed: {exc}")

    # ------------------------------------------------------------------
    # Core operations

    async def get(self) -> DeviceState:
        """Return the current device state.

        Raises:
            StateUnavailableError: If the fetch failed and nothing was ever cached
            NetworkTimeoutError: If the fetch timed out and nothing was ever cached
        """
        if self.is_fresh:
            return self._entry.state  # type: ignore[return-value]

        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.create_task(
                self._refresh(self._generation, after=self._superseded)
            )
            self._inflight.add_done_callback(_consume_exception)

        # Shielded so a cancelled reader does not abort the fetch for the others
        return await asyncio.shield(self._inflight)

    def invalidate(self) -> None:
        """Discard the cached entry so the next ``get()`` fetches live data."""
        if self._entry.empty and not self.fetch_in_progress:
            return
        self._entry = CacheEntry()
        self._generation += 1
        # A fetch already on the wire may predate the invalidation; later
        # readers must not attach to it, and must not overlap it either.
        if self.fetch_in_progress:
            self._superseded = self._inflight
        self._inflight = None

    async def _refresh(
        self, generation: int, after: Optional[asyncio.Task] = None
    ) -> DeviceState:
        if after is not None and not after.done():
            await asyncio.wait([after])
        if self._superseded is after:
            self._superseded = None

        logger.info(f"Fetching latest state of device {self.device_index}")
        try:
            devices = await self._transport.fetch_all()
            state = self._select(devices)
        except SamsungACException as exc:
            return self._fallback(exc)

        if generation == self._generation:
            self._entry = CacheEntry(state=state, fetched_at=self._clock())
            self._last_good = state
            await self._notify(state)
        else:
            logger.debug("Discarding state fetched before invalidation")
        return state

    def _select(self, devices: List[Dict[str, Any]]) -> DeviceState:
        if not 0 <= self.device_index < len(devices):
            raise DeviceNotFoundError(self.device_index, len(devices))
        return DeviceState.from_dict(devices[self.device_index])

    def _fallback(self, exc: SamsungACException) -> DeviceState:
        """Serve the last good state, or fail if there has never been one."""
        if self._last_good is not None:
            logger.warning(f"Failed to fetch device state ({exc}); returning stale data")
            return self._last_good

        logger.error(f"Failed to fetch device state: {exc}")
        if isinstance(exc, NetworkTimeoutError):
            raise exc
        raise StateUnavailableError(f"Could not fetch device state: {exc}") from exc


def _consume_exception(task: asyncio.Task) -> None:
    """Mark a finished fetch's exception as retrieved when every reader left."""
    if not task.cancelled():
        task.exception()
