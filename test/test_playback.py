from giftwrap.geometry import Point
from giftwrap.playback import (Frame, describe_step, frame_state, playback_frames,
                               to_canvas)
from giftwrap.wrapping import compute_hull_trace
import pytest


@pytest.fixture
def square_trace():
    return compute_hull_trace([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)])


def test_frames_walk_every_tried_point(square_trace):
    frames = list(playback_frames(square_trace))
    assert len(frames) == 4 * 3 + 1
    assert frames[0] == Frame(0, 0, False)
    assert frames[2] == Frame(0, 2, False)
    assert frames[3] == Frame(1, 0, False)
    assert frames[-1].is_complete
    assert not any(f.is_complete for f in frames[:-1])


def test_frames_replayable(square_trace):
    assert list(playback_frames(square_trace)) == list(playback_frames(square_trace))


def test_frames_empty_trace():
    assert list(playback_frames(())) == [Frame(-1, -1, True)]
    state = frame_state((), Frame(-1, -1, True))
    assert state['hull_path'] == []
    assert state['status'] == "No hull to trace."


def test_frame_state_scanning(square_trace):
    state = frame_state(square_trace, Frame(1, 2, False))
    assert state['hull_path'] == [Point(0, 0), Point(10, 0)]
    assert state['current_point'] == Point(10, 0)
    assert state['tried_point'] == square_trace[1].tried_points[2]
    assert state['status'].startswith("Step 2/4")


def test_frame_state_complete(square_trace):
    state = frame_state(square_trace, Frame(3, -1, True))
    assert state['hull_path'] == [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0)]
    assert state['current_point'] is None
    assert 'quadrilateral' in state['status']


def test_frame_state_collinear():
    trace = compute_hull_trace([Point(0, 0), Point(5, 0), Point(10, 0)])
    state = frame_state(trace, Frame(0, 0, False))
    assert state['collinear_points'] == [Point(5, 0)]


def test_describe_step():
    trace = compute_hull_trace([Point(0, 0), Point(5, 0), Point(10, 0)])
    assert describe_step(0, trace[0]) == \
        "1. (0, 0) -> (10, 0) after trying 2 points, collinear: (5, 0)"


@pytest.mark.parametrize('point, expected', [
    ((0, 0), (400, 300)),
    ((50, 50), (750, 50)),
    ((-50, -50), (50, 550)),
])
def test_to_canvas(point, expected):
    assert to_canvas(point) == pytest.approx(expected)
