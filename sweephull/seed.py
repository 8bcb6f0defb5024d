import logging
import math

from sweephull.errors import DegenerateGeometry
from sweephull.geometry import COLLINEAR_TOLERANCE, circumradius, dist, orient

logger = logging.getLogger(__name__)


def select_seed(store):
    """
    Pick the three points the sweep starts from.

    i0 is the point nearest the centre of the bounding box, i1 the point
    nearest i0, and i2 the point forming the smallest circumcircle with them.
    Points collinear with i0, i1 are never chosen as i2. Collinearity is judged
    against a tolerance proportional to the size and magnitude of the input,
    so points lying on one line only up to rounding still count as collinear.

    Returns
    -------
    (i0, i1, i2) in counter-clockwise order.

    Raises
    ------
    DegenerateGeometry
        if all points coincide or all are collinear.
    """
    n = len(store)
    coords = store.flat
    if n < 3:
        raise DegenerateGeometry(f"need 3 points for a seed triangle, got {n}")

    min_x, min_y, max_x, max_y = store.bounds()
    cx = (min_x + max_x) / 2
    cy = (min_y + max_y) / 2

    # pick a seed point close to the center
    i0 = 0
    min_dist = math.inf
    for i in range(n):
        d = dist(cx, cy, coords[2 * i], coords[2 * i + 1])
        if d < min_dist:
            i0 = i
            min_dist = d
    i0x = coords[2 * i0]
    i0y = coords[2 * i0 + 1]

    # find the point closest to the seed
    i1 = -1
    min_dist = math.inf
    for i in range(n):
        if i == i0:
            continue
        d = dist(i0x, i0y, coords[2 * i], coords[2 * i + 1])
        if 0 < d < min_dist:
            i1 = i
            min_dist = d
    if i1 == -1:
        raise DegenerateGeometry("all points coincide")
    i1x = coords[2 * i1]
    i1y = coords[2 * i1 + 1]

    # find the third point which forms the smallest circumcircle with the first two
    tolerance = COLLINEAR_TOLERANCE * store.extent() * store.scale()
    i2 = -1
    min_radius = math.inf
    for i in range(n):
        if i == i0 or i == i1:
            continue
        x = coords[2 * i]
        y = coords[2 * i + 1]
        if abs(orient(i0x, i0y, i1x, i1y, x, y)) <= tolerance:
            continue
        r = circumradius(i0x, i0y, i1x, i1y, x, y)
        if r < min_radius:
            i2 = i
            min_radius = r
    if i2 == -1:
        raise DegenerateGeometry("all points are collinear")
    i2x = coords[2 * i2]
    i2y = coords[2 * i2 + 1]

    if orient(i0x, i0y, i1x, i1y, i2x, i2y) < 0:
        i1, i2 = i2, i1

    logger.debug("seed triangle (%d, %d, %d), squared circumradius %g", i0, i1, i2, min_radius)
    return i0, i1, i2
