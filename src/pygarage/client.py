"""High-level async client over a single garage."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from pygarage.config import GarageConfig
from pygarage.engine.garage import Garage
from pygarage.exceptions import GarageClientClosedError
from pygarage.models.machine import Machine, MachineKind
from pygarage.models.results import LevelAvailability, Location, Placement, Release

_logger = logging.getLogger(__name__)


class GarageClient:
    """Async front end for a :class:`Garage`.

    Requests from concurrent tasks are queued on one :class:`asyncio.Lock`
    and handed to the garage one at a time. The garage keeps its own
    thread lock, so the same instance may also be shared with threaded
    callers. Garage calls are synchronous: while a thread holds the garage
    lock, the event loop waits for it. Every operation is a bounded scan
    over a fixed number of slots, so that wait is short.

    Usage::

        async with GarageClient(GarageConfig(levels=2, slots_per_level=10)) as client:
            placement = await client.park("ABC123", MachineKind.CAR)
            await client.unpark("ABC123")
    """

    def __init__(
        self,
        config: GarageConfig | None = None,
        *,
        garage: Garage | None = None,
        on_parked: Callable[[Placement], None] | None = None,
        on_unparked: Callable[[Release], None] | None = None,
    ) -> None:
        if garage is not None and config is not None and garage.config != config:
            raise ValueError("config does not match the supplied garage")
        self._garage = garage if garage is not None else Garage(config)
        self._lock: asyncio.Lock | None = None
        self._on_parked = on_parked
        self._on_unparked = on_unparked

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GarageClient:
        self._lock = asyncio.Lock()
        return self

    async def __aexit__(self, *args: object) -> None:
        self._lock = None

    @property
    def garage(self) -> Garage:
        return self._garage

    def _require_open(self) -> asyncio.Lock:
        if self._lock is None:
            raise GarageClientClosedError("GarageClient must be used inside 'async with'")
        return self._lock

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def store(self, machine: Machine) -> Placement:
        """Park *machine*. See :meth:`Garage.store`."""
        async with self._require_open():
            placement = self._garage.store(machine)
        if self._on_parked is not None:
            try:
                self._on_parked(placement)
            except Exception:
                _logger.debug("on_parked callback failed", exc_info=True)
        return placement

    async def park(self, machine_id: str, kind: MachineKind | str = MachineKind.CAR) -> Placement:
        """Shorthand for ``store(Machine(identifier=machine_id, kind=kind))``."""
        return await self.store(Machine(identifier=machine_id, kind=kind))

    async def unpark(self, machine_id: str) -> Release:
        """Remove a parked machine. See :meth:`Garage.unpark`."""
        async with self._require_open():
            release = self._garage.unpark(machine_id)
        if self._on_unparked is not None:
            try:
                self._on_unparked(release)
            except Exception:
                _logger.debug("on_unparked callback failed", exc_info=True)
        return release

    async def availability(self) -> list[LevelAvailability]:
        async with self._require_open():
            return self._garage.availability()

    async def is_full(self) -> bool:
        async with self._require_open():
            return self._garage.is_full()

    async def locate(self, machine_id: str) -> Location:
        async with self._require_open():
            return self._garage.locate(machine_id)
