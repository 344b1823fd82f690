"""Track geometry: the goal line sets the width, one lane per racer."""


class Track:
    """Grid bounds for a race, borders included."""

    __slots__ = ("goal_line", "lanes")

    def __init__(self, goal_line, lanes):
        self.goal_line = goal_line
        self.lanes = lanes

    @property
    def right(self):
        return self.goal_line

    @property
    def bottom(self):
        return self.lanes + 1

    def cell_for(self, index, progress):
        """(column, row) of racer `index`. Columns count down towards the goal."""
        return self.goal_line - progress, index + 1

    def is_border(self, x, y):
        return x in (0, self.right) or y in (0, self.bottom)
