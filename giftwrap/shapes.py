SHAPE_NAMES = (
    'point',          # 0
    'point',          # 1
    'segment',
    'triangle',
    'quadrilateral',
    'pentagon',
    'hexagon',
    'heptagon',
    'octagon',
    'nonagon',
    'decagon',
)


def classify_shape(vertex_count):
    "Name the polygon formed by `vertex_count` hull vertices."
    if vertex_count < 0:
        raise ValueError(f"Vertex count cannot be negative: {vertex_count}")
    if vertex_count < len(SHAPE_NAMES):
        return SHAPE_NAMES[vertex_count]
    return f"polygon with {vertex_count} sides"
