"""Structural checks on a point set before it is handed to the wrapper."""
from giftwrap.geometry import as_point

MAX_POINTS = 20
MIN_COORDINATE = -50
MAX_COORDINATE = 50


class PreconditionError(ValueError):
    """Point set rejected before wrapping."""


class InsufficientPoints(PreconditionError):
    def __init__(self, count=0):
        super().__init__(f"Need at least 1 point, got {count}.")
        self.count = count


class TooManyPoints(PreconditionError):
    def __init__(self, count, limit=MAX_POINTS):
        super().__init__(f"At most {limit} points are allowed, got {count}.")
        self.count = count
        self.limit = limit


class CoordinateOutOfRange(PreconditionError):
    def __init__(self, index, point):
        super().__init__(
            f"Point #{index} {tuple(point)} lies outside "
            f"[{MIN_COORDINATE}, {MAX_COORDINATE}].")
        self.index = index
        self.point = point


def validate(points):
    """
    Checks that `points` can be wrapped and returns them as a tuple of Points.

    Raises InsufficientPoints for an empty sequence, TooManyPoints above
    MAX_POINTS and CoordinateOutOfRange for coordinates outside
    [MIN_COORDINATE, MAX_COORDINATE]. One or two points are accepted (the
    wrapper emits a degenerate trace for them) and duplicates are kept.
    """
    points = tuple(as_point(p) for p in points)
    if not points:
        raise InsufficientPoints(0)
    if len(points) > MAX_POINTS:
        raise TooManyPoints(len(points))
    for index, point in enumerate(points):
        if not all(MIN_COORDINATE <= c <= MAX_COORDINATE for c in point):
            raise CoordinateOutOfRange(index, point)
    return points
