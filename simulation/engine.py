import asyncio
import sys
import uuid

from config import load_config
from internal.logging import get_logger
from simulation.arena import Arena
from simulation.state import RaceSnapshot
from ui.terminal import TerminalScreen
from utils.timestamp import delay_seconds


class EngineState:
    READY = "ready"
    RUNNING = "running"
    FINISHED = "finished"
    STOPPED = "stopped"


class RaceEngine:
    """Drives one race: wait, draw, tick, check winners, until someone crosses the goal."""

    def __init__(self, config=None, bus=None, out=None, clear=True):
        self.config = config or load_config().race
        self.bus = bus
        self.screen = TerminalScreen(out or sys.stdout, clear=clear)
        self.race_id = uuid.uuid4().hex
        self.arena = None
        self.tick = 0
        self.winners = []
        self._state = EngineState.READY
        self._stop = asyncio.Event()
        self._log = get_logger()

    @property
    def state(self):
        return self._state

    async def stop(self):
        """Cut the current wait short and end the race without a winner."""
        self._stop.set()
        if self._state != EngineState.FINISHED:
            self._state = EngineState.STOPPED

    async def run(self):
        """Run the race to completion and return the winning racer indices."""
        config = self.config
        self.arena = Arena.open(seed=config.seed)
        await self.arena.add_racers(config.racer_count)
        self._state = EngineState.RUNNING
        self._log.info("race start", race=self.race_id, racers=config.racer_count,
                       goal=config.goal_line, delay_ms=config.tick_delay)

        delay = delay_seconds(config.tick_delay)
        try:
            while not self._stop.is_set():
                try:
                    await asyncio.wait_for(self._stop.wait(), timeout=delay)
                    break
                except asyncio.TimeoutError:
                    pass

                self.screen.draw(await self.arena.get_positions(), config.goal_line)
                positions = await self.arena.update()
                self.tick += 1
                winners = await self.arena.check_winners(config.goal_line)
                self._log.debug("tick", race=self.race_id, tick=self.tick, leader=max(positions, default=0))
                await self._publish(RaceSnapshot(self.race_id, self.tick, positions, winners), "state")

                if winners:
                    self.winners = winners
                    self._state = EngineState.FINISHED
                    self.screen.announce(winners)
                    break
        finally:
            await self.arena.stop()

        if self._state == EngineState.FINISHED:
            self._log.info("race finished", race=self.race_id, tick=self.tick, winners=self.winners)
            await self._publish({"kind": "race_finished", "race_id": self.race_id,
                                 "tick": self.tick, "winners": self.winners}, "event")
        else:
            self._state = EngineState.STOPPED
            self._log.info("race stopped", race=self.race_id, tick=self.tick)
        return self.winners

    async def _publish(self, item, topic):
        if self.bus is not None:
            await self.bus.publish(item, topic=topic)
