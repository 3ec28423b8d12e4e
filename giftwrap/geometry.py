import collections

# Point representation: immutable (x, y) pairs with integer coordinates

Point = collections.namedtuple('Point', ('x', 'y'))

COLLINEAR = 0
CLOCKWISE = 1
COUNTER_CLOCKWISE = -1


def as_point(p):
    """Coerce an (x, y) pair into a Point."""
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(x, y)


def orientation(p, q, r):
    """
    Finds the orientation of an ordered triplet (p, q, r).
    Returns:
        COLLINEAR (0): the three points lie on one line
        CLOCKWISE (1): clockwise turn from pq to qr (r is to the right of vector pq)
        COUNTER_CLOCKWISE (-1): counter-clockwise turn (r is to the left of vector pq)

    Axes are mathematical: y grows upward. A renderer working in screen
    space (y grows downward) sees every turn mirrored.
    """
    # (qy - py) * (rx - qx) - (qx - px) * (ry - qy)
    # > 0 clockwise, < 0 counter-clockwise, = 0 collinear
    # Python ints do not overflow, so this is exact for any integer input.
    val = (q[1] - p[1]) * (r[0] - q[0]) - \
          (q[0] - p[0]) * (r[1] - q[1])
    if val == 0:
        return COLLINEAR
    return CLOCKWISE if val > 0 else COUNTER_CLOCKWISE


def distance_sq(p1, p2):
    """Calculates the square of the distance between two points."""
    return (p1[0] - p2[0])**2 + (p1[1] - p2[1])**2
