MIN_STEP = 1
MAX_STEP = 3


class Racer:
    """A racer with a progress counter that only moves forward."""

    __slots__ = ("progress",)

    def __init__(self):
        self.progress = 0

    def advance(self, rng):
        """Move forward 1..3 steps drawn from `rng`; returns the step taken."""
        steps = rng.randint(MIN_STEP, MAX_STEP)
        self.progress += steps
        return steps

    def get_progress(self):
        return self.progress
