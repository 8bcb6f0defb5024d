import numpy as np

from sweephull.errors import InvalidInput


class CoordinateStore:
    """
    Flat [x0, y0, x1, y1, ...] buffer of input points.

    The array handed in is validated once; the engine reads coordinates from a
    plain list copy because per-element list access is much cheaper than numpy
    scalar indexing inside the insertion loop.
    """

    def __init__(self, coords):
        try:
            arr = np.asarray(coords, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Expected coords to contain numbers: {e}") from e

        if arr.ndim != 1:
            raise InvalidInput(f"Expected a flat coordinate sequence, got shape {arr.shape}")
        if arr.size % 2 != 0:
            raise InvalidInput(f"Coordinate sequence has odd length {arr.size}")
        if not np.all(np.isfinite(arr)):
            bad = int(np.flatnonzero(~np.isfinite(arr))[0])
            raise InvalidInput(f"Non-finite coordinate at position {bad} (point {bad // 2})")

        self.array = arr
        self.flat = arr.tolist()

    def __len__(self):
        return self.array.size >> 1

    def __repr__(self):
        return f"CoordinateStore(n={len(self)})"

    @property
    def points(self) -> np.ndarray:
        return self.array.reshape(-1, 2)

    def _check(self, i):
        if not 0 <= i < len(self):
            raise IndexError(f"point index {i} out of range for {len(self)} points")

    def x(self, i: int) -> float:
        self._check(i)
        return self.flat[2 * i]

    def y(self, i: int) -> float:
        self._check(i)
        return self.flat[2 * i + 1]

    def point(self, i: int):
        self._check(i)
        return self.flat[2 * i], self.flat[2 * i + 1]

    def bounds(self):
        pts = self.points
        min_x, min_y = pts.min(axis=0)
        max_x, max_y = pts.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)

    def extent(self):
        """Longer side of the bounding box."""
        min_x, min_y, max_x, max_y = self.bounds()
        return max(max_x - min_x, max_y - min_y)

    def scale(self):
        """Largest of the bounding-box extent and the magnitude of any coordinate."""
        min_x, min_y, max_x, max_y = self.bounds()
        return max(max_x - min_x, max_y - min_y,
                   abs(min_x), abs(min_y), abs(max_x), abs(max_y))

    def duplicate_mask(self) -> np.ndarray:
        """True for every point whose coordinates already appeared at a lower index."""
        n = len(self)
        if n == 0:
            return np.zeros(0, dtype=bool)
        _, first, inverse = np.unique(self.points, axis=0,
                                      return_index=True, return_inverse=True)
        return first[inverse.reshape(-1)] != np.arange(n)

    def distinct(self) -> np.ndarray:
        """Indices of first occurrences, ascending."""
        return np.flatnonzero(~self.duplicate_mask())
