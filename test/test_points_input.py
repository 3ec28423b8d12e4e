from giftwrap.geometry import Point
from giftwrap.points_input import (PointsFormatError, format_points,
                                   generate_random_points, parse_points)
import random
import pytest


def test_parse_points():
    text = "0,0\n10, 0\n  10,10 \n\n-5,-50\n"
    assert parse_points(text) == (Point(0, 0), Point(10, 0), Point(10, 10), Point(-5, -50))


def test_parse_roundtrip_text():
    points = (Point(1, -2), Point(50, 50))
    assert format_points(points) == "1,-2\n50,50"
    assert parse_points(format_points(points)) == points


@pytest.mark.parametrize('text', [
    "",
    "   \n  ",
    "1;2",
    "1.5,2",
    "a,b",
    "1,2,3",
    "0,51",
    "-51,0",
    "\n".join("1,1" for _ in range(21)),
])
def test_parse_rejects(text):
    with pytest.raises(PointsFormatError):
        parse_points(text)


def test_parse_error_names_line():
    with pytest.raises(PointsFormatError, match="Line 2"):
        parse_points("0,0\nnope")


def test_random_points_in_range():
    points = generate_random_points(20, seed=7)
    assert len(points) == 20
    assert all(-50 <= c <= 50 for p in points for c in p)
    assert all(isinstance(p, Point) for p in points)


def test_random_points_reproducible():
    assert generate_random_points(10, seed=3) == generate_random_points(10, seed=3)
    assert generate_random_points(5, rng=random.Random(1)) == generate_random_points(5, rng=random.Random(1))


def test_random_points_custom_range():
    points = generate_random_points(50, low=2, high=4, seed=0)
    assert {c for p in points for c in p} <= {2, 3, 4}


def test_random_points_bad_args():
    with pytest.raises(ValueError):
        generate_random_points(-1)
    with pytest.raises(ValueError):
        generate_random_points(3, low=5, high=4)
