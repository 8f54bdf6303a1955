"""Axis-aligned rectangle collision tests used by every moving object."""


def inside_rect(x, y, x1, y1, w1, h1):
    """Return True if the point (x, y) lies in the rectangle, edges included."""
    return x1 <= x <= x1 + w1 and y1 <= y <= y1 + h1


def rect_collide(x1, y1, w1, h1, x2, y2, w2, h2):
    """Return True if any corner of the first rectangle lies in the second."""
    corners = (
        (x1, y1),
        (x1 + w1, y1),
        (x1, y1 + h1),
        (x1 + w1, y1 + h1),
    )
    return any(inside_rect(cx, cy, x2, y2, w2, h2) for cx, cy in corners)


def collide(x1, y1, w1, h1, x2, y2, w2, h2):
    """Return True if a corner of either rectangle lies inside the other."""
    return rect_collide(x1, y1, w1, h1, x2, y2, w2, h2) or rect_collide(
        x2, y2, w2, h2, x1, y1, w1, h1
    )