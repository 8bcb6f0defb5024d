import logging

import numpy as np

from sweephull.mesh import EMPTY

logger = logging.getLogger(__name__)


def check_halfedges(result):
    """Every paired half-edge points back and runs between the same two points."""
    tri = result.triangles
    he = result.halfedges
    if len(tri) != len(he):
        logger.warning("triangles (%d) and halfedges (%d) differ in length", len(tri), len(he))
        return False
    for e in range(len(he)):
        f = int(he[e])
        if f == EMPTY:
            continue
        if int(he[f]) != e:
            logger.warning("halfedge %d -> %d is not symmetric (%d)", e, f, int(he[f]))
            return False
        e_next = e - 2 if e % 3 == 2 else e + 1
        f_next = f - 2 if f % 3 == 2 else f + 1
        if tri[e] != tri[f_next] or tri[f] != tri[e_next]:
            logger.warning("halfedges %d and %d do not share endpoints", e, f)
            return False
    return True


def check_orientation(result):
    """All triangles have positive (counter-clockwise) area."""
    if result.triangle_count == 0:
        return True
    pts = result.points[result.simplices]
    a, b, c = pts[:, 0], pts[:, 1], pts[:, 2]
    area = (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0])
    bad = np.flatnonzero(area <= 0)
    if len(bad):
        logger.warning("triangle %d is not counter-clockwise (area %g)", bad[0], area[bad[0]])
        return False
    return True


def check_delaunay(result, tolerance=1e-9):
    """
    Brute-force empty circumcircle test: no input point may lie strictly
    inside the circumcircle of any triangle. O(T * N), in chunks of triangles.
    """
    if result.triangle_count == 0:
        return True
    points = result.points
    simplices = result.simplices
    px = points[None, :, 0]
    py = points[None, :, 1]
    chunk = max(1, (1 << 20) // max(len(points), 1))

    for start in range(0, len(simplices), chunk):
        s = simplices[start:start + chunk]
        a = points[s[:, 0]]
        b = points[s[:, 1]]
        c = points[s[:, 2]]

        adx = a[:, None, 0] - px
        ady = a[:, None, 1] - py
        bdx = b[:, None, 0] - px
        bdy = b[:, None, 1] - py
        cdx = c[:, None, 0] - px
        cdy = c[:, None, 1] - py

        ad2 = adx * adx + ady * ady
        bd2 = bdx * bdx + bdy * bdy
        cd2 = cdx * cdx + cdy * cdy

        det = (adx * (bdy * cd2 - bd2 * cdy) -
               ady * (bdx * cd2 - bd2 * cdx) +
               ad2 * (bdx * cdy - bdy * cdx))
        permanent = ((np.abs(bdy * cd2) + np.abs(bd2 * cdy)) * np.abs(adx) +
                     (np.abs(bdx * cd2) + np.abs(bd2 * cdx)) * np.abs(ady) +
                     (np.abs(bdx * cdy) + np.abs(bdy * cdx)) * ad2)

        inside = det > tolerance * permanent
        if inside.any():
            t, p = np.argwhere(inside)[0]
            logger.warning("Triangle %s includes point %d", s[t].tolist(), p)
            return False
    return True


def check_hull(result, tolerance=1e-9):
    """
    The hull is a counter-clockwise convex polygon with every input point
    inside it or on its boundary.
    """
    hull = result.hull
    if len(hull) < 3:
        return True
    points = result.points
    a = points[hull]
    b = points[np.roll(hull, -1)]

    # signed area of the hull polygon
    area = np.sum(a[:, 0] * b[:, 1] - b[:, 0] * a[:, 1]) / 2
    if area <= 0:
        logger.warning("hull is not counter-clockwise (area %g)", area)
        return False

    ex = (b[:, 0] - a[:, 0])[:, None]
    ey = (b[:, 1] - a[:, 1])[:, None]
    qx = points[None, :, 0] - a[:, 0][:, None]
    qy = points[None, :, 1] - a[:, 1][:, None]
    cross = ex * qy - ey * qx
    scale = np.abs(ex * qy) + np.abs(ey * qx)
    outside = cross < -tolerance * np.maximum(scale, 1e-300)
    if outside.any():
        edge, p = np.argwhere(outside)[0]
        logger.warning("point %d lies outside hull edge %d -> %d", p, hull[edge], hull[(edge + 1) % len(hull)])
        return False
    return True


def check_triangle_count(result):
    """
    T == 2N - 2 - k for the N distinct input points and k hull points, so a
    point missing from the mesh shows up as a count mismatch.
    """
    if result.triangle_count == 0:
        return True
    distinct = len(np.unique(result.points, axis=0))
    expected = 2 * distinct - 2 - len(result.hull)
    if result.triangle_count != expected:
        logger.warning("expected %d triangles, got %d", expected, result.triangle_count)
        return False
    return True


def validate(result):
    return {
        "halfedges": check_halfedges(result),
        "orientation": check_orientation(result),
        "delaunay": check_delaunay(result),
        "hull": check_hull(result),
        "triangle_count": check_triangle_count(result),
    }
