"""Terminal rendering: box-drawn track, racer glyphs and the winner line."""

from simulation.track import Track

CLEAR_SCREEN = "\x1b[H\x1b[2J"

HORIZONTAL = "━"
VERTICAL = "┃"
TOP_LEFT = "┏"
TOP_RIGHT = "┓"
BOTTOM_LEFT = "┗"
BOTTOM_RIGHT = "┛"

# glyph for display number n is chr(GLYPH_BASE + n), display numbers start at 1
GLYPH_BASE = 0x1F420


def racer_glyph(index):
    """Glyph for the racer at 0-based `index`."""
    return chr(GLYPH_BASE + index + 1)


def _border_char(x, y, track):
    if not track.is_border(x, y):
        return " "
    top, bottom = y == 0, y == track.bottom
    left, right = x == 0, x == track.right
    if top and left:
        return TOP_LEFT
    if bottom and left:
        return BOTTOM_LEFT
    if top and right:
        return TOP_RIGHT
    if bottom and right:
        return BOTTOM_RIGHT
    if top or bottom:
        return HORIZONTAL
    return VERTICAL


def render_frame(positions, goal_line):
    """Render one frame for `positions` (progress per racer, insertion order).

    Racers are drawn over the border; racers past the goal (negative column)
    are not drawn.
    """
    track = Track(goal_line, len(positions))
    cells = {track.cell_for(index, progress): index for index, progress in enumerate(positions)}

    rows = []
    for y in range(track.bottom + 1):
        row = []
        for x in range(track.right + 1):
            if (x, y) in cells:
                row.append(racer_glyph(cells[(x, y)]))
            else:
                row.append(_border_char(x, y, track))
        rows.append("".join(row))
    return "\n".join(rows)


def announce_winners(winners):
    glyphs = [racer_glyph(index) for index in winners]
    if len(glyphs) == 1:
        return f"The winner is: {glyphs[0]} !"
    return f"The winners are: {', '.join(glyphs)} !"


class TerminalScreen:
    """Writes frames and announcements to a text stream."""

    def __init__(self, out, clear=True):
        self.out = out
        self.clear = clear
        self.frames = 0

    def draw(self, positions, goal_line):
        frame = render_frame(positions, goal_line)
        self.out.write((CLEAR_SCREEN if self.clear else "") + frame + "\n")
        self.out.flush()
        self.frames += 1
        return frame

    def announce(self, winners):
        line = announce_winners(winners)
        self.out.write(line + "\n")
        self.out.flush()
        return line
