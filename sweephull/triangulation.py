import logging
import warnings

import numpy as np

from sweephull.coords import CoordinateStore
from sweephull.errors import DegenerateGeometry, DegenerateGeometryWarning, InvalidInput
from sweephull.geometry import EPSILON, circumcenter
from sweephull.hull import Hull
from sweephull.legalize import FLIP_FACTOR, Legalizer
from sweephull.mesh import EMPTY, TriangleMesh, TriangulationResult
from sweephull.seed import select_seed
from sweephull.sort import sort_by_distance

logger = logging.getLogger(__name__)


class SweepHull:
    """
    One triangulation run over a validated CoordinateStore.

    Points are inserted in order of distance from the seed circumcenter. Each
    one lands outside the current hull, so it only has to be connected to the
    hull edges it can see, after which the new triangles are legalized.
    """

    def __init__(self, store: CoordinateStore, strict=False, flip_factor=FLIP_FACTOR):
        self.store = store
        self.strict = strict
        self.flip_factor = flip_factor
        self.hull = None
        self.mesh = None
        self.legalizer = None
        self.skipped = 0

    def run(self) -> TriangulationResult:
        store = self.store
        n = len(store)
        distinct = store.distinct()

        if len(distinct) < 3:
            if self.strict:
                raise InvalidInput(f"need at least 3 distinct points, got {len(distinct)}")
            logger.debug("only %d distinct points, nothing to triangulate", len(distinct))
            return self._degenerate(distinct)

        try:
            i0, i1, i2 = select_seed(store)
        except DegenerateGeometry as e:
            if self.strict:
                raise
            logger.debug("degenerate input (%s), returning hull only", e)
            return self._degenerate(distinct)

        coords = store.flat
        cx, cy = circumcenter(coords[2 * i0], coords[2 * i0 + 1],
                              coords[2 * i1], coords[2 * i1 + 1],
                              coords[2 * i2], coords[2 * i2 + 1])
        order = sort_by_distance(store, cx, cy)

        self.hull = Hull(store, cx, cy)
        self.hull.initialize(i0, i1, i2)
        self.mesh = TriangleMesh(n)
        self.mesh.add_triangle(i0, i1, i2, EMPTY, EMPTY, EMPTY)
        self.legalizer = Legalizer(self.mesh, self.hull, store, self.flip_factor)

        duplicate = store.duplicate_mask().tolist()
        near = EPSILON * store.scale()
        seeds = (i0, i1, i2)
        xp = yp = None

        for i in order:
            if duplicate[i]:
                continue
            x = coords[2 * i]
            y = coords[2 * i + 1]

            # skip near-duplicate points, within rounding of the input scale
            if xp is not None and abs(x - xp) <= near and abs(y - yp) <= near:
                logger.debug("point %d is a near-duplicate of its predecessor, skipped", i)
                self.skipped += 1
                continue
            xp = x
            yp = y

            if i in seeds:
                continue

            try:
                self.insert(i, x, y)
            except DegenerateGeometry as e:
                logger.debug("point %d skipped: %s", i, e)
                self.skipped += 1

        if self.legalizer.exhausted:
            msg = "edge legalization hit its flip bound; the mesh may not be fully Delaunay"
            if self.strict:
                raise DegenerateGeometry(msg)
            warnings.warn(msg, DegenerateGeometryWarning, stacklevel=3)

        length = self.mesh.length
        return TriangulationResult(store.array,
                                   self.mesh.triangles[:length],
                                   self.mesh.halfedges[:length],
                                   self.hull.walk())

    def insert(self, i, x, y):
        hull = self.hull
        mesh = self.mesh
        legalize = self.legalizer.legalize

        # find a visible edge on the convex hull using edge hash
        e, q, from_start = hull.find_visible_edge(x, y)

        # add the first triangle from the point
        t = mesh.add_triangle(e, i, q, EMPTY, EMPTY, hull.tri[e])

        # flip triangles from the point until they satisfy the Delaunay condition
        hull.tri[i] = legalize(t + 2)
        hull.tri[e] = t  # keep track of boundary triangles on the hull

        # walk forward through the hull, adding more triangles and flipping
        n = hull.next[e]
        while True:
            q = hull.next[n]
            if not hull.sees(x, y, n, q):
                break
            t = mesh.add_triangle(n, i, q, hull.tri[i], EMPTY, hull.tri[n])
            hull.tri[i] = legalize(t + 2)
            hull.remove(n)
            n = q

        # walk backward from the other side, adding more triangles and flipping
        if from_start:
            while True:
                q = hull.prev[e]
                if not hull.sees(x, y, q, e):
                    break
                t = mesh.add_triangle(q, i, e, EMPTY, hull.tri[e], hull.tri[q])
                legalize(t + 2)
                hull.tri[q] = t
                hull.remove(e)
                e = q

        hull.insert_after(e, i)

        # save the two new edges in the hash table
        hull.store(i)
        hull.store(e)

    def _degenerate(self, ids):
        """Empty mesh; the hull is the extreme points of whatever is there."""
        ids = np.asarray(ids, dtype=np.int64)
        if len(ids) > 1:
            pts = self.store.points[ids]
            ordered = ids[np.lexsort((pts[:, 1], pts[:, 0]))]
            ids = ordered[[0, -1]]
        return TriangulationResult(self.store.array, [], [], ids, degenerate=True)


class Delaunay:
    """
    Delaunay triangulation of a flat [x0, y0, x1, y1, ...] coordinate buffer.

    Example
    -------
    >>> d = Delaunay([0, 0, 1, 0, 0, 1])
    >>> d.triangles.tolist()
    [0, 1, 2]

    The buffer is kept by reference: after changing it in place, call
    update() to recompute everything from scratch.
    """

    def __init__(self, coords, strict=False, flip_factor=FLIP_FACTOR):
        self.coords = coords
        self.strict = strict
        self.flip_factor = flip_factor
        self.result = None
        self.update()

    @classmethod
    def from_points(cls, points, **kwargs):
        """Build from an (N, 2) array-like of points."""
        try:
            pts = np.asarray(points, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Expected points to be an (N, 2) array of numbers: {e}") from e
        if pts.size == 0:
            pts = pts.reshape(0, 2)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise InvalidInput(f"Expected points shaped (N, 2), got {pts.shape}")
        return cls(pts.reshape(-1), **kwargs)

    def update(self) -> TriangulationResult:
        store = CoordinateStore(self.coords)
        self.result = SweepHull(store, strict=self.strict, flip_factor=self.flip_factor).run()
        return self.result

    @property
    def triangles(self):
        return self.result.triangles

    @property
    def halfedges(self):
        return self.result.halfedges

    @property
    def hull(self):
        return self.result.hull

    def __repr__(self):
        return f"Delaunay({self.result!r})"


def triangulate(coords, strict=False, flip_factor=FLIP_FACTOR) -> TriangulationResult:
    """
    Triangulate a flat coordinate sequence.

    Raises InvalidInput for malformed buffers. Degenerate point sets give an
    empty result with `degenerate` set, unless strict=True.
    """
    return SweepHull(CoordinateStore(coords), strict=strict, flip_factor=flip_factor).run()
