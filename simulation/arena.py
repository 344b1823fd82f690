"""The arena keeps every racer of one race and serializes access to them."""

import asyncio
import random
import uuid

from core.errors import ArenaError
from internal.logging import get_logger
from simulation.entities import Racer


class Arena:
    """Ordered racers behind an asyncio lock.

    Racer identity is its index in insertion order. Racers are never removed.
    Every racer draws its steps from the arena's single generator.
    """

    def __init__(self, seed=None):
        self.id = uuid.uuid4().hex[:8]
        self.racers = []
        self._rng = random.Random(seed)
        self._lock = asyncio.Lock()
        self._closed = False
        self._log = get_logger()

    @classmethod
    def open(cls, seed=None):
        return cls(seed=seed)

    @property
    def closed(self):
        return self._closed

    @property
    def racer_count(self):
        return len(self.racers)

    def _ensure_open(self, operation):
        if self._closed:
            raise ArenaError(f"arena {self.id} is stopped, cannot {operation}", arena_id=self.id)

    async def add_racers(self, count):
        async with self._lock:
            self._ensure_open("add racers")
            for _ in range(max(count, 0)):
                self.racers.append(Racer())
            self._log.debug("racers added", arena=self.id, added=max(count, 0), total=len(self.racers))

    async def get_positions(self):
        async with self._lock:
            self._ensure_open("read positions")
            return [racer.get_progress() for racer in self.racers]

    async def update(self):
        """Advance every racer once and return the new positions."""
        async with self._lock:
            self._ensure_open("update")
            for racer in self.racers:
                racer.advance(self._rng)
            return [racer.get_progress() for racer in self.racers]

    async def check_winners(self, goal_line):
        """Indices of racers strictly past `goal_line`, in insertion order."""
        positions = await self.get_positions()
        return [index for index, progress in enumerate(positions) if progress > goal_line]

    async def stop(self):
        async with self._lock:
            if self._closed:
                return
            self._closed = True
            self._log.debug("arena stopped", arena=self.id, racers=len(self.racers))
