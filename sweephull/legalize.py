import logging

from sweephull.geometry import in_circle
from sweephull.mesh import EMPTY

logger = logging.getLogger(__name__)

# flips allowed per legalize() call, as a multiple of the current triangle count
FLIP_FACTOR = 16
MIN_FLIP_BOUND = 64


class Legalizer:
    """
    Lawson edge flipping after each new triangle.

    Recursion is replaced by an explicit stack of half-edges. Every edge
    examined is opposite the point just inserted, so the walk only ever
    touches the fan around that point and its outer neighbours.
    """

    def __init__(self, mesh, hull, store, flip_factor=FLIP_FACTOR):
        self.mesh = mesh
        self.hull = hull
        self.coords = store.flat
        self.flip_factor = flip_factor
        self.flips = 0
        self.exhausted = False

    def bound(self):
        return max(self.flip_factor * self.mesh.triangle_count, MIN_FLIP_BOUND)

    def is_illegal(self, p0, pr, pl, p1):
        coords = self.coords
        return in_circle(
            coords[2 * p0], coords[2 * p0 + 1],
            coords[2 * pr], coords[2 * pr + 1],
            coords[2 * pl], coords[2 * pl + 1],
            coords[2 * p1], coords[2 * p1 + 1]) > 0

    def legalize(self, a):
        """
        Restore the Delaunay condition around half-edge a.

        Returns the half-edge leaving the new point along the boundary side of
        the last examined triangle, which is where the caller's hull edge ends
        up after all the flips.
        """
        triangles = self.mesh.triangles
        halfedges = self.mesh.halfedges
        stack = []
        bound = self.bound()
        flips = 0
        ar = 0

        # if the pair of triangles doesn't satisfy the Delaunay condition
        # (p1 is inside the circumcircle of [p0, pr, pl]), flip them,
        # then do the same check/flip for the new pair of triangles
        #
        #           pl                    pl
        #          /||\                  /  \
        #       al/ || \bl            al/    \a
        #        /  ||  \              /      \
        #       /  a||b  \    flip    /___ar___\
        #     p0\   ||   /p1   =>   p0\---bl---/p1
        #        \  ||  /              \      /
        #       ar\ || /br             b\    /br
        #          \||/                  \  /
        #           pr                    pr
        #
        while True:
            b = halfedges[a]
            a0 = a - a % 3
            ar = a0 + (a + 2) % 3

            if b == EMPTY:  # convex hull edge
                if not stack:
                    break
                a = stack.pop()
                continue

            b0 = b - b % 3
            al = a0 + (a + 1) % 3
            bl = b0 + (b + 2) % 3

            p0 = triangles[ar]
            pr = triangles[a]
            pl = triangles[al]
            p1 = triangles[bl]

            illegal = self.is_illegal(p0, pr, pl, p1)
            if illegal and flips >= bound:
                if not self.exhausted:
                    logger.debug("flip bound %d reached at half-edge %d", bound, a)
                self.exhausted = True
                illegal = False

            if illegal:
                flips += 1
                triangles[a] = p1
                triangles[b] = p0

                hbl = halfedges[bl]

                # edge swapped on the other side of the hull (rare); fix the halfedge reference
                if hbl == EMPTY:
                    self.hull.retarget(p1, bl, a)

                self.mesh.link(a, hbl)
                self.mesh.link(b, halfedges[ar])
                self.mesh.link(ar, bl)

                br = b0 + (b + 1) % 3
                stack.append(br)
            else:
                if not stack:
                    break
                a = stack.pop()

        self.flips += flips
        return ar
