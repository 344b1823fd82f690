import uuid

from utils.timestamp import format_timestamp


class RaceSnapshot:
    """Immutable view of a race after one tick, published on the bus."""

    __slots__ = ("id", "timestamp", "race_id", "tick", "positions", "winners")

    def __init__(self, race_id, tick, positions, winners=(), id=None, timestamp=None):
        self.id = id or uuid.uuid4().hex
        self.timestamp = timestamp or format_timestamp()
        self.race_id = race_id
        self.tick = tick
        self.positions = tuple(positions)
        self.winners = tuple(winners)

    @property
    def finished(self):
        return bool(self.winners)

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "race_id": self.race_id,
            "tick": self.tick,
            "positions": list(self.positions),
            "winners": list(self.winners),
        }
