import math
import numpy as np

# 2^-52, float64 machine epsilon
EPSILON = math.pow(2, -52)
# relative error bounds for the plain float determinants below
ORIENT_ERRBOUND = (3.0 + 16.0 * EPSILON) * EPSILON
INCIRCLE_ERRBOUND = (10.0 + 96.0 * EPSILON) * EPSILON
# orient2d values below COLLINEAR_TOLERANCE * extent * scale count as collinear
COLLINEAR_TOLERANCE = 64 * EPSILON


def orient2d(px, py, qx, qy, rx, ry):
    """
    Cross product of (q - p) and (r - p).

          | px py 1 |
          | qx qy 1 | = (qx - px)*(ry - py) - (qy - py)*(rx - px)
          | rx ry 1 |

    > 0 : r lies left of p->q (p, q, r counter-clockwise)
    < 0 : r lies right of p->q (clockwise)
    = 0 : collinear, or the magnitude is below the rounding error bound
    """
    left = (qx - px) * (ry - py)
    right = (qy - py) * (rx - px)
    det = left - right
    if abs(det) >= ORIENT_ERRBOUND * abs(left + right):
        return det
    return 0.0


def orient(px, py, qx, qy, rx, ry):
    """
    orient2d with a second and third opinion: the same triangle is evaluated
    from each of its vertices and the first confident answer wins.
    """
    return (orient2d(px, py, qx, qy, rx, ry) or
            orient2d(qx, qy, rx, ry, px, py) or
            orient2d(rx, ry, px, py, qx, qy))


def in_circle(ax, ay, bx, by, cx, cy, px, py):
    """
    Lifted determinant for the circle through a, b, c (counter-clockwise).

    > 0 : p strictly inside the circumcircle
    < 0 : p strictly outside
    = 0 : cocircular within the error bound
    """
    dx = ax - px
    dy = ay - py
    ex = bx - px
    ey = by - py
    fx = cx - px
    fy = cy - py

    ap = dx * dx + dy * dy
    bp = ex * ex + ey * ey
    cp = fx * fx + fy * fy

    det = (dx * (ey * cp - bp * fy) -
           dy * (ex * cp - bp * fx) +
           ap * (ex * fy - ey * fx))
    permanent = ((abs(ey * cp) + abs(bp * fy)) * abs(dx) +
                 (abs(ex * cp) + abs(bp * fx)) * abs(dy) +
                 (abs(ex * fy) + abs(ey * fx)) * ap)
    if abs(det) > INCIRCLE_ERRBOUND * permanent:
        return det
    return 0.0


def dist(ax, ay, bx, by):
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def circumradius(ax, ay, bx, by, cx, cy):
    """Squared circumradius of abc; inf when the three points are collinear."""
    dx = bx - ax
    dy = by - ay
    ex = cx - ax
    ey = cy - ay

    bl = dx * dx + dy * dy
    cl = ex * ex + ey * ey
    denom = dx * ey - dy * ex
    if denom == 0:
        return math.inf
    d = 0.5 / denom

    x = (ey * bl - dy * cl) * d
    y = (dx * cl - ex * bl) * d
    return x * x + y * y


def circumcenter(ax, ay, bx, by, cx, cy):
    """
    Centre of the circle through a, b, c.

    Raises
    ------
    ValueError
        when the three points are collinear and no unique circle exists.
    """
    dx = bx - ax
    dy = by - ay
    ex = cx - ax
    ey = cy - ay

    bl = dx * dx + dy * dy
    cl = ex * ex + ey * ey
    denom = dx * ey - dy * ex
    if denom == 0:
        raise ValueError("Points are colinear; circumcenter is undefined.")
    d = 0.5 / denom

    x = ax + (ey * bl - dy * cl) * d
    y = ay + (dx * cl - ex * bl) * d
    return x, y


def pseudo_angle(dx, dy):
    """Monotonic in the real angle of (dx, dy), in [0, 1), without trigonometry."""
    denom = abs(dx) + abs(dy)
    if denom == 0:
        return 0.0
    p = dx / denom
    if dy > 0:
        return (3 - p) / 4
    return (1 + p) / 4


def circumcenters(pts):
    """
    Batch circumcenters.

    Parameters
    ----------
    pts : ndarray, shape (N, 3, 2)
        N triangles, three (x, y) vertices each.

    Returns
    -------
    centers : ndarray, shape (N, 2)
        Circumcenter of every triangle; NaN rows for (near) collinear ones.
    """
    pts = np.asarray(pts, dtype=float)
    if pts.ndim != 3 or pts.shape[-2:] != (3, 2):
        raise ValueError("expected an array shaped (N, 3, 2)")

    x = pts[..., 0]
    y = pts[..., 1]
    x2_y2 = x ** 2 + y ** 2

    d = 2 * (
        x[:, 0] * (y[:, 1] - y[:, 2]) +
        x[:, 1] * (y[:, 2] - y[:, 0]) +
        x[:, 2] * (y[:, 0] - y[:, 1])
    )
    d = np.where(np.abs(d) < 1e-12, np.nan, d)

    xc = (
        x2_y2[:, 0] * (y[:, 1] - y[:, 2]) +
        x2_y2[:, 1] * (y[:, 2] - y[:, 0]) +
        x2_y2[:, 2] * (y[:, 0] - y[:, 1])
    ) / d
    yc = (
        x2_y2[:, 0] * (x[:, 2] - x[:, 1]) +
        x2_y2[:, 1] * (x[:, 0] - x[:, 2]) +
        x2_y2[:, 2] * (x[:, 1] - x[:, 0])
    ) / d
    return np.stack([xc, yc], axis=-1)
