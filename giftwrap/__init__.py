from giftwrap.geometry import (CLOCKWISE, COLLINEAR, COUNTER_CLOCKWISE, Point,
                               distance_sq, orientation)
from giftwrap.preconditions import (CoordinateOutOfRange, InsufficientPoints,
                                    PreconditionError, TooManyPoints, validate)
from giftwrap.shapes import classify_shape
from giftwrap.wrapping import (Step, compute_hull_trace, hull_shape, hull_vertices,
                               jarvis_march_trace, leftmost_index)
