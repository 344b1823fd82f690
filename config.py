import json
from pathlib import Path

from core.errors import ConfigError

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"

# start_race option name -> RaceConfig attribute
OPTION_NAMES = {
    "racers": "racer_count",
    "delay": "tick_delay",
    "goal": "goal_line",
    "seed": "seed",
}


class RaceConfig:
    """Settings for one race. tick_delay is in milliseconds."""

    __slots__ = ("racer_count", "tick_delay", "goal_line", "seed")

    def __init__(self, racer_count=10, tick_delay=50, goal_line=80, seed=None):
        self.racer_count = racer_count
        self.tick_delay = tick_delay
        self.goal_line = goal_line
        self.seed = seed

    def with_options(self, options):
        """Copy of this config with `start_race` options applied."""
        values = {name: getattr(self, name) for name in self.__slots__}
        for key, value in (options or {}).items():
            if key not in OPTION_NAMES:
                raise ConfigError(f"unknown race option {key!r}", option=key)
            values[OPTION_NAMES[key]] = value
        return RaceConfig(**values)

    def validate(self):
        if not _is_int(self.racer_count) or self.racer_count < 1:
            raise ConfigError(f"racers must be a positive integer, got {self.racer_count!r}", option="racers")
        if not _is_int(self.goal_line) or self.goal_line < 1:
            raise ConfigError(f"goal must be a positive integer, got {self.goal_line!r}", option="goal")
        if isinstance(self.tick_delay, bool) or not isinstance(self.tick_delay, (int, float)) or self.tick_delay < 0:
            raise ConfigError(f"delay must be a non-negative number of ms, got {self.tick_delay!r}", option="delay")
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}", option="seed")
        return self


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/race.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class Config:
    __slots__ = ("race", "logging")

    def __init__(self, race=None, logging=None):
        self.race = race or RaceConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            RaceConfig(**d.get("race", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        try:
            return Config.from_dict(json.load(file))
        except (ValueError, TypeError, AttributeError) as exc:
            raise ConfigError(f"cannot load {config_path}", context={"path": str(config_path)}, cause=exc) from exc
