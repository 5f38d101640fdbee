"""Point-in-polygon tests by ray casting and a distance search for egg placement."""

import math
from typing import NamedTuple

COLLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = 2

RAY_END_X = 10000
SEARCH_LIMIT = 10000.0
PRECISION = 1e-6


class Point(NamedTuple):
    """A point in the plane."""

    x: int
    y: int


def orientation(p, q, r):
    """Return COLLINEAR, CLOCKWISE or COUNTERCLOCKWISE for the turn p -> q -> r."""
    value = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if value == 0:
        return COLLINEAR
    return CLOCKWISE if value > 0 else COUNTERCLOCKWISE


def on_segment(p, q, r):
    """Return True when ``r`` lies in the bounding box of segment ``p``-``q``."""
    return (
        min(p[0], q[0]) <= r[0] <= max(p[0], q[0])
        and min(p[1], q[1]) <= r[1] <= max(p[1], q[1])
    )


def do_intersect(p1, q1, p2, q2):
    """Return True when segment ``p1``-``q1`` meets segment ``p2``-``q2``."""
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)
    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == COLLINEAR and on_segment(p1, q1, p2))
        or (o2 == COLLINEAR and on_segment(p1, q1, q2))
        or (o3 == COLLINEAR and on_segment(p2, q2, p1))
        or (o4 == COLLINEAR and on_segment(p2, q2, q1))
    )


def is_inside(polygon, point):
    """Return True when ``point`` lies inside ``polygon``, counting ray crossings.

    Polygons with fewer than three vertices contain nothing.
    """
    vertices = [Point(*vertex) for vertex in polygon]
    point = Point(*point)
    if len(vertices) < 3:
        return False
    extreme = Point(RAY_END_X, point.y)
    crossings = 0
    for current, following in zip(vertices, vertices[1:] + vertices[:1]):
        if do_intersect(current, following, point, extreme):
            if orientation(current, point, following) == COLLINEAR:
                return on_segment(current, point, following)
            crossings += 1
    return crossings % 2 == 1


def can_place_eggs(blue, red, count, distance):
    """Return True when ``count`` blue/red pairs can be at least ``distance`` apart.

    Blue points are matched in order, each to the next red point far enough away.
    """
    if count > len(blue) or count > len(red):
        raise ValueError("count exceeds the number of blue or red points")
    placed = 0
    i = j = 0
    while i < count and j < count:
        if math.dist(blue[i], red[j]) >= distance:
            placed += 1
            i += 1
        j += 1
    return placed >= count


def max_egg_distance(blue, red, count):
    """Return the largest separation, up to 10000, for which the eggs can be placed."""
    low, high = 0.0, SEARCH_LIMIT
    while high - low > PRECISION:
        mid = (low + high) / 2
        if can_place_eggs(blue, red, count, mid):
            low = mid
        else:
            high = mid
    return low