import numpy as np

from sweephull.geometry import circumcenters

# halfedges[e] for an edge on the outer boundary
EMPTY = -1


def next_halfedge(e):
    return e - 2 if e % 3 == 2 else e + 1


def prev_halfedge(e):
    return e + 2 if e % 3 == 0 else e - 1


def triangle_of_edge(e):
    return e // 3


def edges_of_triangle(t):
    return [3 * t, 3 * t + 1, 3 * t + 2]


class TriangleMesh:
    """
    Triangles under construction.

    Triangle t owns slots 3t, 3t+1, 3t+2 of `triangles`; half-edge e runs from
    triangles[e] to triangles[next_halfedge(e)], and halfedges[e] is the
    opposite half-edge or EMPTY. Both lists are sized for the largest possible
    triangulation of n points up front.
    """

    def __init__(self, n):
        max_triangles = max(2 * n - 5, 0)
        self.triangles = [0] * (max_triangles * 3)
        self.halfedges = [EMPTY] * (max_triangles * 3)
        self.length = 0

    @property
    def triangle_count(self):
        return self.length // 3

    def link(self, a, b):
        self.halfedges[a] = b
        if b != EMPTY:
            self.halfedges[b] = a

    def add_triangle(self, i0, i1, i2, a, b, c):
        """Append triangle (i0, i1, i2) and pair its edges with a, b, c."""
        t = self.length

        self.triangles[t] = i0
        self.triangles[t + 1] = i1
        self.triangles[t + 2] = i2

        self.link(t, a)
        self.link(t + 1, b)
        self.link(t + 2, c)

        self.length += 3
        return t


class TriangulationResult:
    """
    Output of one run.

    Attributes
    ----------
    coords : ndarray (2N,)
        the input buffer as float64.
    triangles : ndarray (3T,)
        point indices, three per triangle, counter-clockwise.
    halfedges : ndarray (3T,)
        opposite half-edge of every edge, EMPTY on the boundary.
    hull : ndarray (K,)
        boundary point indices, counter-clockwise.
    degenerate : bool
        True when no triangle could be built (too few distinct or collinear
        points); hull then holds the extreme points only.
    """

    def __init__(self, coords, triangles, halfedges, hull, degenerate=False):
        self.coords = np.asarray(coords, dtype=np.float64)
        self.triangles = np.asarray(triangles, dtype=np.int32)
        self.halfedges = np.asarray(halfedges, dtype=np.int32)
        self.hull = np.asarray(hull, dtype=np.int32)
        self.degenerate = degenerate

    def __repr__(self):
        return (f"TriangulationResult(points={len(self.points)}, "
                f"triangles={self.triangle_count}, hull={len(self.hull)}, "
                f"degenerate={self.degenerate})")

    @property
    def triangle_count(self):
        return len(self.triangles) // 3

    @property
    def points(self):
        return self.coords.reshape(-1, 2)

    @property
    def simplices(self):
        """Triangles as a (T, 3) array, like scipy.spatial.Delaunay.simplices."""
        return self.triangles.reshape(-1, 3)

    def points_of_triangle(self, t):
        return [int(self.triangles[e]) for e in edges_of_triangle(t)]

    def triangles_adjacent_to_triangle(self, t):
        adjacent = []
        for e in edges_of_triangle(t):
            opposite = int(self.halfedges[e])
            if opposite != EMPTY:
                adjacent.append(triangle_of_edge(opposite))
        return adjacent

    def edges_around_point(self, start):
        """
        Half-edges ending at the point triangles[next_halfedge(start)], walked
        around that point until the walk closes or runs into the boundary.
        """
        result = []
        incoming = start
        while True:
            result.append(incoming)
            outgoing = next_halfedge(incoming)
            incoming = int(self.halfedges[outgoing])
            if incoming == EMPTY or incoming == start:
                break
        return result

    def edges(self):
        """Each undirected edge once, as (p, q) point index pairs."""
        out = []
        for e in range(len(self.triangles)):
            opposite = int(self.halfedges[e])
            if e > opposite:
                out.append((int(self.triangles[e]), int(self.triangles[next_halfedge(e)])))
        return out

    def circumcenters(self):
        """(T, 2) array of triangle circumcenters."""
        if self.triangle_count == 0:
            return np.zeros((0, 2))
        return circumcenters(self.points[self.simplices])
