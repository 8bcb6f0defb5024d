import logging
import math

from sweephull.errors import DegenerateGeometry
from sweephull.geometry import orient, pseudo_angle

logger = logging.getLogger(__name__)


class Hull:
    """
    Advancing convex hull of the points triangulated so far.

    The boundary is a circular doubly-linked list over point indices kept in
    two parallel lists (prev / next), counter-clockwise. tri[v] is the
    half-edge v -> next[v] of the boundary triangle on that edge. A removed
    point is marked by next[v] == v.

    The angular hash splits the directions around the seed circumcenter into
    ceil(sqrt(n)) buckets, each remembering the last hull point stored there.
    Entries go stale as points are removed; lookups skip them.
    """

    def __init__(self, store, cx, cy):
        n = len(store)
        self.coords = store.flat
        self.cx = cx
        self.cy = cy
        self.hash_size = max(int(math.ceil(math.sqrt(n))), 1)
        self.prev = [0] * n
        self.next = [0] * n
        self.tri = [0] * n
        self._hash = [-1] * self.hash_size
        self.start = 0
        self.size = 0

    def __len__(self):
        return self.size

    def hash_key(self, x, y):
        return int(math.floor(pseudo_angle(x - self.cx, y - self.cy) * self.hash_size)) % self.hash_size

    def store(self, i):
        self._hash[self.hash_key(self.coords[2 * i], self.coords[2 * i + 1])] = i

    def initialize(self, i0, i1, i2):
        self.start = i0
        self.size = 3

        self.next[i0] = self.prev[i2] = i1
        self.next[i1] = self.prev[i0] = i2
        self.next[i2] = self.prev[i1] = i0

        # half-edges of the seed triangle (i0, i1, i2)
        self.tri[i0] = 0
        self.tri[i1] = 1
        self.tri[i2] = 2

        for i in (i0, i1, i2):
            self.store(i)

    def is_removed(self, i):
        return self.next[i] == i

    def sees(self, x, y, a, b):
        """True if (x, y) lies strictly outside the hull edge a -> b."""
        coords = self.coords
        return orient(x, y, coords[2 * a], coords[2 * a + 1], coords[2 * b], coords[2 * b + 1]) < 0

    def find_visible_edge(self, x, y):
        """
        Find a hull edge visible from (x, y).

        Returns
        -------
        (e, q, from_start)
            the edge e -> q, and whether e is the first edge probed; only in
            that case can edges before e also be visible.

        Raises
        ------
        DegenerateGeometry
            when the point sees no edge, i.e. it lies inside or on the hull
            (near-duplicates end up here).
        """
        start = -1
        key = self.hash_key(x, y)
        for j in range(self.hash_size):
            candidate = self._hash[(key + j) % self.hash_size]
            if candidate != -1 and not self.is_removed(candidate):
                start = candidate
                break
        if start == -1:
            start = self.start

        start = self.prev[start]
        e = start
        while not self.sees(x, y, e, self.next[e]):
            e = self.next[e]
            if e == start:
                raise DegenerateGeometry(f"no visible hull edge from ({x!r}, {y!r})")
        return e, self.next[e], e == start

    def remove(self, i):
        """Unlink i from the boundary; its neighbours become adjacent."""
        p = self.prev[i]
        n = self.next[i]
        self.next[p] = n
        self.prev[n] = p
        self.next[i] = i
        self.size -= 1

    def insert_after(self, a, i):
        """Splice i in right after a, and make a the new walk start."""
        n = self.next[a]
        self.next[a] = i
        self.prev[i] = a
        self.next[i] = n
        self.prev[n] = i
        self.start = a
        self.size += 1

    def retarget(self, vertex, old, new):
        """
        A flip moved the boundary half-edge leaving `vertex` from `old` to `new`.
        """
        if self.tri[vertex] == old:
            self.tri[vertex] = new
            return
        # slow path: walk the live boundary
        e = self.start
        for _ in range(self.size + 1):
            if self.tri[e] == old:
                self.tri[e] = new
                return
            e = self.next[e]
        logger.warning("boundary half-edge %d not found on the hull; tri[] not updated to %d", old, new)

    def walk(self):
        """Boundary point indices, counter-clockwise from the walk start."""
        out = []
        e = self.start
        for _ in range(self.size):
            out.append(e)
            e = self.next[e]
        return out
