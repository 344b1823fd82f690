"""Terminal Race - Entry Point.

    python race.py --racers 20 --goal 10

Options: racers (default 10), delay between frames in ms (default 50),
goal = number of columns to the goal line (default 80). Needs a terminal
that can print UTF-8.
"""

import argparse
import asyncio
import sys

from communication.bus import EventBus
from config import load_config
from core.errors import ConfigError
from internal.logging import AsyncFileLogger, LogLevel, StructuredLogger, get_logger
from simulation.engine import RaceEngine
from simulation.state import RaceSnapshot
from utils.crash import configure as configure_crash, create_async_handler, install_crash_handler


def start_race(options=None, config=None, out=None, clear=True):
    """Run one race in the terminal and return the winning racer indices.

    `options` may hold racers, delay, goal and seed; anything else raises ConfigError.
    """
    config = config or load_config()
    race_config = config.race.with_options(options).validate()
    StructuredLogger.configure(min_level=LogLevel.from_name(config.logging.level))
    return asyncio.run(_run(race_config, config.logging, out, clear))


async def _log_worker(subscriber, file_logger):
    while True:
        _record(await subscriber.queue.get(), file_logger)


def _record(item, file_logger):
    if isinstance(item, RaceSnapshot):
        file_logger.try_log("state", item.to_dict())
    else:
        file_logger.try_log("event", item)


async def _run(race_config, logging_config, out, clear):
    logger = get_logger()
    asyncio.get_running_loop().set_exception_handler(create_async_handler(logger))

    bus = EventBus(queue_size=100)
    engine = RaceEngine(config=race_config, bus=bus, out=out, clear=clear)

    file_logger = subscriber = worker = None
    if logging_config.file:
        file_logger = AsyncFileLogger(file_path=logging_config.file)
        await file_logger.start()
        subscriber = await bus.subscribe("race-log", max_queue_size=200)
        worker = asyncio.create_task(_log_worker(subscriber, file_logger))

    try:
        return await engine.run()
    finally:
        if worker:
            worker.cancel()
            try:
                await worker
            except asyncio.CancelledError:
                pass
            while not subscriber.queue.empty():
                _record(subscriber.queue.get_nowait(), file_logger)
            await bus.unsubscribe("race-log")
            await file_logger.stop()
            logger.debug("race log closed", path=logging_config.file, **file_logger.get_stats())


def build_parser():
    parser = argparse.ArgumentParser(description="Run a terminal race.")
    parser.add_argument("--racers", type=int, help="Number of racers in the race.")
    parser.add_argument("--delay", type=int, help="Delay between updates in ms.")
    parser.add_argument("--goal", type=int, help="Number of columns to the goal line.")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible race.")
    parser.add_argument("--config", help="Path to a config.json.")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between frames.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        get_logger().error("bad config file", error=exc, **exc.context)
        return 2

    configure_crash(config.logging.crash_file)
    install_crash_handler()

    options = {name: getattr(args, name) for name in ("racers", "delay", "goal", "seed")
               if getattr(args, name) is not None}
    try:
        start_race(options, config=config, clear=not args.no_clear)
    except ConfigError as exc:
        get_logger().error("invalid race option", error=exc, **exc.context)
        return 2
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
