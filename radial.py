# radial.py: positions on a circular dial as offsets from its centre.

import math


class InvalidPeriod(ValueError):
    pass


# project - offset of a point on a dial
# parameters:
#   direction - position along the dial, in the same units as period
#   period - value at which direction wraps around (12 for hours, 60 for
#            minutes and seconds); must be positive
#   radius - distance from the centre; negative puts the point on the
#            opposite side
# returns (dx, dy) as integers. 0 points straight up (negative y) and the
# angle grows clockwise, so 3 of 12 points right.
def project(direction, period, radius):
    if period <= 0:
        raise InvalidPeriod("period must be positive, got %r" % (period,))
    angle = 2 * math.pi * direction / period
    dx = round(radius * math.sin(angle))
    dy = round(-radius * math.cos(angle))
    return (dx, dy)


# translate - move a list of offsets so they are relative to center
def translate(center, offsets):
    (cx, cy) = center
    return [(cx + dx, cy + dy) for (dx, dy) in offsets]
