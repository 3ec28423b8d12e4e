"""Producers of point sets: user text and random generation."""
import random
import re

from giftwrap.geometry import Point
from giftwrap.preconditions import MAX_COORDINATE, MAX_POINTS, MIN_COORDINATE, validate

DEFAULT_RANDOM_COUNT = 10

_POINT_LINE = re.compile(r'^(-?\d+),\s*(-?\d+)$')


class PointsFormatError(ValueError):
    pass


def parse_points(text):
    """
    Parse one "x,y" (or "x, y") pair per line into validated Points.
    Blank lines are ignored; between 1 and MAX_POINTS points are accepted.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise PointsFormatError("Enter at least one point in the form 'x,y'.")
    if len(lines) > MAX_POINTS:
        raise PointsFormatError(f"Enter at most {MAX_POINTS} points, got {len(lines)}.")

    points = []
    for lineno, line in enumerate(lines, 1):
        match = _POINT_LINE.match(line)
        if match is None:
            raise PointsFormatError(f"Line {lineno}: expected 'x,y' with integers, got {line!r}.")
        x, y = int(match.group(1)), int(match.group(2))
        if not (MIN_COORDINATE <= x <= MAX_COORDINATE and MIN_COORDINATE <= y <= MAX_COORDINATE):
            raise PointsFormatError(
                f"Line {lineno}: coordinates must lie in [{MIN_COORDINATE}, {MAX_COORDINATE}], got {line!r}.")
        points.append(Point(x, y))
    return validate(points)


def format_points(points):
    return '\n'.join(f'{p[0]},{p[1]}' for p in points)


def generate_random_points(count=DEFAULT_RANDOM_COUNT, low=MIN_COORDINATE, high=MAX_COORDINATE,
                           rng=None, seed=None):
    """Uniform integer points in [low, high]^2. Pass `rng` or `seed` for a reproducible set."""
    if count < 0:
        raise ValueError(f"Point count cannot be negative: {count}")
    if low > high:
        raise ValueError(f"Empty coordinate range [{low}, {high}]")
    if rng is None:
        rng = random.Random(seed)
    return tuple(Point(rng.randint(low, high), rng.randint(low, high)) for _ in range(count))
