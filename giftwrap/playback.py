"""
Replays a materialized trace at the consumer's own pace.

The wrapper has already finished by the time playback starts; frames only
index into the trace, so stopping early or replaying never touches the
computation.
"""
import collections

from giftwrap.wrapping import hull_shape, hull_vertices

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
CANVAS_MARGIN = 50
WORLD_SPAN = 100  # coordinates run from -50 to 50

Frame = collections.namedtuple('Frame', ('step_index', 'tried_index', 'is_complete'))


def playback_frames(trace):
    """One frame per examined point of every step, then a single completion frame."""
    for step_index, step in enumerate(trace):
        for tried_index in range(len(step.tried_points)):
            yield Frame(step_index, tried_index, False)
    yield Frame(len(trace) - 1, -1, True)


def frame_state(trace, frame):
    """
    Everything a renderer needs to draw `frame`:
        hull_path: hull vertices reached so far, closed once complete
        current_point: vertex being advanced from (None when complete)
        tried_point: point being examined (None when complete)
        collinear_points: points on the edge chosen by this step
        status: one line of text describing the frame
    """
    if frame.is_complete:
        vertices = list(hull_vertices(trace))
        path = vertices + vertices[:1] if len(vertices) > 1 else vertices
        status = (f"Hull complete! Found {len(vertices)} points "
                  f"({hull_shape(trace)}).") if trace else "No hull to trace."
        return {
            'hull_path': path,
            'current_point': None,
            'tried_point': None,
            'collinear_points': [],
            'status': status,
        }

    step = trace[frame.step_index]
    tried = step.tried_points[frame.tried_index]
    return {
        'hull_path': [s.current_point for s in trace[:frame.step_index + 1]],
        'current_point': step.current_point,
        'tried_point': tried,
        'collinear_points': list(step.collinear_points),
        'status': (f"Step {frame.step_index + 1}/{len(trace)}: checking "
                   f"{tuple(tried)} from {tuple(step.current_point)}"),
    }


def describe_step(index, step):
    line = (f"{index + 1}. {tuple(step.current_point)} -> {tuple(step.next_hull_point)}"
            f" after trying {len(step.tried_points)} points")
    if step.collinear_points:
        line += f", collinear: {', '.join(str(tuple(c)) for c in step.collinear_points)}"
    return line


def to_canvas(point, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, margin=CANVAS_MARGIN):
    """Map world coordinates to canvas pixels; canvas y grows downward."""
    x = width / 2 + (point[0] / WORLD_SPAN) * (width - 2 * margin)
    y = height / 2 - (point[1] / WORLD_SPAN) * (height - 2 * margin)
    return x, y
