import unittest

from ..coords import CoordinateStore
from ..errors import DegenerateGeometry
from ..geometry import orient2d
from ..seed import select_seed


class TestSelectSeed(unittest.TestCase):

    def _ccw(self, store, seed):
        i0, i1, i2 = seed
        return orient2d(*store.point(i0), *store.point(i1), *store.point(i2)) > 0

    def test_minimal_triangle(self):
        store = CoordinateStore([0, 0, 1, 0, 0, 1])
        self.assertEqual(select_seed(store), (0, 1, 2))

    def test_clockwise_input_is_normalized(self):
        store = CoordinateStore([0, 0, 0, 1, 1, 0])
        seed = select_seed(store)
        self.assertEqual(sorted(seed), [0, 1, 2])
        self.assertTrue(self._ccw(store, seed))

    def test_picks_central_point_first(self):
        store = CoordinateStore([0, 0, 10, 0, 10, 10, 0, 10, 5, 5, 6, 5, 5, 6.5])
        seed = select_seed(store)
        self.assertEqual(seed[0], 4)
        self.assertEqual(set(seed), {4, 5, 6})
        self.assertTrue(self._ccw(store, seed))

    def test_skips_collinear_candidates(self):
        # point 2 lies on the line through the first two seed points
        store = CoordinateStore([0, 0, 1, 0, 2, 0, 0.5, 3])
        seed = select_seed(store)
        self.assertIn(3, seed)
        self.assertTrue(self._ccw(store, seed))

    def test_collinear(self):
        with self.assertRaises(DegenerateGeometry):
            select_seed(CoordinateStore([0, 0, 1, 1, 2, 2, 3, 3]))

    def test_collinear_up_to_rounding(self):
        # 0.1 and 0.3 are not representable, so the points are only nearly on a line
        coords = []
        for k in range(10):
            coords += [k * 0.1, k * 0.3]
        with self.assertRaises(DegenerateGeometry):
            select_seed(CoordinateStore(coords))

    def test_thin_triangle_is_not_collinear(self):
        store = CoordinateStore([0, 0, 1, 0, 0.5, 1e-6])
        seed = select_seed(store)
        self.assertEqual(sorted(seed), [0, 1, 2])
        self.assertTrue(self._ccw(store, seed))

    def test_coincident(self):
        with self.assertRaises(DegenerateGeometry):
            select_seed(CoordinateStore([1, 1, 1, 1, 1, 1]))

    def test_too_few(self):
        with self.assertRaises(DegenerateGeometry):
            select_seed(CoordinateStore([0, 0, 1, 1]))


if __name__ == "__main__":
    unittest.main()
