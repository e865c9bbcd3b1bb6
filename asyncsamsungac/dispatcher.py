"""
Outbound commands to the air conditioner.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from asyncsamsungac.api.transport import Transport
from asyncsamsungac.cache import DeviceStateCache
from asyncsamsungac.exceptions import SamsungACException
from asyncsamsungac.exceptions.command import CommandFailedError
from asyncsamsungac.exceptions.network import NetworkTimeoutError
from asyncsamsungac.models.device import PendingWrite

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Sends partial updates to the device and keeps the cache honest.

    Commands are delivered one at a time in the order ``send()`` was called.
    Unlike reads, a failed command is always reported to the caller.
    """

    def __init__(
        self,
        transport: Transport,
        cache: DeviceStateCache,
        device_index: int = 0,
        *,
        eager_refresh: bool = True,
    ) -> None:
        self._transport = transport
        self._cache = cache
        self.device_index = device_index
        self.eager_refresh = eager_refresh
        self._write_lock = asyncio.Lock()

    def resolve(self, path: str) -> str:
        """Return the absolute resource for a device-relative ``path``."""
        if path and not path.startswith("/"):
            path = f"/{path}"
        return f"/devices/{self.device_index}{path}"

    async def send(self, path: str, payload: Dict[str, Any]) -> None:
        """Deliver ``payload`` to ``path`` on the configured device.

        Args:
            path: Device-relative path such as ``/temperatures/0`` (``""`` for the device itself)
            payload: Partial update body

        Raises:
            CommandFailedError: If the transport reported an error
            NetworkTimeoutError: If the device did not answer in time
        """
        write = PendingWrite(path=self.resolve(path), payload=payload)

        async with self._write_lock:
            logger.info(f"Sending {write.payload} to {write.path}")
            try:
                await self._transport.write(write.path, write.payload)
            except NetworkTimeoutError as exc:
                logger.error(f"Command to {write.path} timed out: {exc}")
                raise
            except SamsungACException as exc:
                logger.error(f"Failed to send command to {write.path}: {exc}")
                raise CommandFailedError(write.path, str(exc)) from exc

            self._cache.invalidate()

        if self.eager_refresh:
            await self._refresh()

    async def _refresh(self) -> None:
        """Warm the cache after a command; the command already succeeded."""
        try:
            await self._cache.get()
        except SamsungACException as exc:
            logger.warning(f"Post-command refresh failed: {exc}")
