"""
Gift wrapping (Jarvis march) that records every decision it makes.

Each accepted hull vertex produces one Step: the vertex we advance from,
every other point examined (in input order), the points found collinear
with the chosen edge, and the chosen successor. The steps are what an
animation replays, so their content is part of the contract, not only the
final hull.
"""
import collections

from giftwrap.geometry import (COLLINEAR, COUNTER_CLOCKWISE, as_point,
                               distance_sq, orientation)
from giftwrap.preconditions import InsufficientPoints
from giftwrap.shapes import classify_shape


Step = collections.namedtuple(
    'Step', ('current_point', 'tried_points', 'collinear_points', 'next_hull_point'))


def leftmost_index(points):
    '''
    Index of the point with the smallest x. Ties go to the first such point
    in input order, not to the lowest y.
    '''
    if not points:
        raise InsufficientPoints(0)
    start = 0
    for i in range(1, len(points)):
        if points[i][0] < points[start][0]:
            start = i
    return start


def _dot(p, a, b):
    return (a[0] - p[0]) * (b[0] - p[0]) + (a[1] - p[1]) * (b[1] - p[1])


def _beats_collinear(pivot, a, b):
    """Should `a` replace candidate `b`, both on one line through `pivot`?"""
    if _dot(pivot, a, b) < 0:
        # Opposite sides of the pivot: only a seed inside a vertical left edge
        # sees this, and the counter-clockwise walk heads down first.
        return a[1] < b[1]
    # Same ray: the farther point is the hull vertex, the nearer one lies on the edge
    return distance_sq(pivot, a) > distance_sq(pivot, b)


def _wrap_from(points, p):
    """Scan every other point from pivot `p`; return the Step and the chosen index."""
    n = len(points)
    pivot = points[p]
    q = (p + 1) % n  # initial candidate, never p itself
    tried = []
    collinear = []

    for i in range(n):
        if i == p:
            continue
        tried.append(points[i])
        if i == q:
            continue

        o = orientation(pivot, points[i], points[q])
        if o == COUNTER_CLOCKWISE:
            q = i
        elif o == COLLINEAR:
            if _beats_collinear(pivot, points[i], points[q]):
                passed_over, q = points[q], i
            else:
                passed_over = points[i]
            if passed_over != pivot:
                collinear.append(passed_over)

    chosen = points[q]
    # Candidates recorded before a counter-clockwise replacement may no
    # longer lie on the chosen edge.
    on_edge = tuple(
        c for c in collinear
        if c != chosen and orientation(pivot, chosen, c) == COLLINEAR and _dot(pivot, chosen, c) > 0
    ) if chosen != pivot else ()

    return Step(pivot, tuple(tried), on_edge, chosen), q


def jarvis_march_trace(points):
    """
    Computes the convex hull using Jarvis March and yields one Step per hull vertex.

    points: a sequence of (x, y) pairs with integer coordinates.

    Walks counter-clockwise (y up) from the leftmost point and stops once the
    chosen successor is a point already visited, normally the starting one.
    That closing step is the last one yielded. At most len(points) steps are
    produced, whatever the duplicates or collinear runs in the input.

    Degenerate input never raises: no points or a single point yield
    nothing, two points yield a single step joining them, and a set of
    identical points yields one step pointing back at itself.

    This is a generator function; call it again to replay from the start.
    """
    points = tuple(as_point(p) for p in points)
    n = len(points)
    if n < 2:
        return

    p = leftmost_index(points)
    visited = set()
    while True:
        visited.add(points[p])
        step, q = _wrap_from(points, p)
        yield step

        if n == 2 or points[q] in visited:  # wrapped around
            return
        p = q


def compute_hull_trace(points):
    """Materialized trace: a tuple of Steps, see jarvis_march_trace."""
    return tuple(jarvis_march_trace(points))


def hull_vertices(trace):
    """
    Ordered hull vertices described by a trace.

    A closed trace lists each vertex once as a `current_point`. When the
    leftmost seed sits inside a vertical edge the trace closes on a later
    vertex instead, and the seed is left out. A trace that never closes
    (the single step of a two point set) gets its end point appended.
    """
    if not trace:
        return ()
    visited = [step.current_point for step in trace]
    closing = trace[-1].next_hull_point
    if closing in visited:
        return tuple(visited[visited.index(closing):])
    return tuple(visited) + (closing, )


def hull_shape(trace):
    return classify_shape(len(hull_vertices(trace)))
