# hands.py: vertex lists for the clock hands and the tick marks.
#
# Every shape is a list of (offset, radius) pairs. The offset is added to
# the hand's direction and each pair is projected onto the dial, so a
# table describes the hand pointing at 12 and gets rotated for free.

from dataclasses import dataclass
from typing import List, Optional, Tuple

from config import default_config
from radial import project, translate

HOURS = 12
MINUTES = 60

# tapered hour hand, tail first
hour_hand_table = [
    (0, -20),
    (-4, 20),
    (-0.1, 100),
    (0.1, 100),
    (4, 20),
    (0, -20),
]

# same shape as the hour hand but longer, and over a 60 minute dial
minute_hand_table = [
    (0, -25),
    (-4, 25),
    (-0.3, 160),
    (0, 170),
    (0.3, 160),
    (4, 25),
    (0, -25),
]

tick_table = [
    (-0.02, 240),
    (-0.02, 270),
    (0.02, 270),
    (0.02, 240),
]

Point = Tuple[int, int]


# fill and stroke name Palette fields; the shape is filled first, then the
# same points are stroked.
@dataclass(frozen=True)
class HandShape:
    points: List[Point]
    closed: bool
    fill: Optional[str] = None
    stroke: Optional[str] = None
    hub_radius: int = 0

    def __post_init__(self):
        if not (self.fill or self.stroke):
            raise ValueError("shape needs a fill or a stroke colour")

    # the hub takes the stroke colour, or the fill if there is no stroke
    @property
    def hub_colour(self):
        return self.stroke or self.fill


@dataclass(frozen=True)
class ClockFace:
    ticks: List[HandShape]
    hour_hand: HandShape
    minute_hand: HandShape
    second_hand: HandShape

    # shapes in the order they should be drawn
    def shapes(self):
        return self.ticks + [self.hour_hand, self.minute_hand, self.second_hand]


# outline - project every row of a table around direction
def outline(direction, period, table, center):
    return translate(center, [project(direction + offset, period, radius)
                              for (offset, radius) in table])


def hour_hand(hours, center):
    return HandShape(outline(hours, HOURS, hour_hand_table, center), True,
                     fill="dark", stroke="highlight")


def minute_hand(minutes, center, style=default_config.minute_hand,
                length=default_config.minute_hand_length):
    if style == "line":
        points = translate(center, [(0, 0), project(minutes, MINUTES, length)])
        return HandShape(points, False, stroke="foreground")
    return HandShape(outline(minutes, MINUTES, minute_hand_table, center), True,
                     fill="dark", stroke="highlight")


def second_hand(seconds, center, length=default_config.second_hand_length,
                hub_radius=default_config.hub_radius):
    points = translate(center, [(0, 0), project(seconds, MINUTES, length)])
    return HandShape(points, False, stroke="second_hand", hub_radius=hub_radius)


# ticks - one filled quad per hour mark, starting at 12 o'clock
def ticks(center, count=HOURS):
    return [HandShape(outline(h, HOURS, tick_table, center), True, fill="tick")
            for h in range(count)]


def build_face(decomposed, config):
    center = config.center
    return ClockFace(
        ticks=ticks(center, config.tick_count),
        hour_hand=hour_hand(decomposed.hours, center),
        minute_hand=minute_hand(decomposed.minutes, center,
                                config.minute_hand, config.minute_hand_length),
        second_hand=second_hand(decomposed.seconds, center,
                                config.second_hand_length, config.hub_radius),
    )
