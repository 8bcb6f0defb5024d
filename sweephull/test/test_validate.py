import unittest

from ..mesh import EMPTY, TriangulationResult
from ..validate import (check_delaunay, check_halfedges, check_hull,
                        check_orientation, check_triangle_count, validate)

# kite split along its long diagonal 0-2: a valid triangulation, but point 3
# sits inside the circumcircle of (0, 1, 2)
KITE = [0, 0, 2, -1, 4, 0, 2, 1]


class TestValidate(unittest.TestCase):

    def setUp(self):
        self.kite = TriangulationResult(KITE, [0, 1, 2, 0, 2, 3], [EMPTY, EMPTY, 3, 2, EMPTY, EMPTY], [0, 1, 2, 3])

    def test_good_square(self):
        square = TriangulationResult([0, 0, 1, 0, 0, 1, 1, 1], [0, 1, 2, 1, 3, 2],
                                     [EMPTY, 5, EMPTY, EMPTY, EMPTY, 1], [1, 3, 2, 0])
        self.assertTrue(all(validate(square).values()))

    def test_wrong_diagonal(self):
        self.assertTrue(check_halfedges(self.kite))
        self.assertTrue(check_orientation(self.kite))
        self.assertTrue(check_hull(self.kite))
        self.assertTrue(check_triangle_count(self.kite))
        with self.assertLogs("sweephull.validate", level="WARNING"):
            self.assertFalse(check_delaunay(self.kite))

    def test_flipped_diagonal_is_delaunay(self):
        flipped = TriangulationResult(KITE, [0, 1, 3, 1, 2, 3], [EMPTY, 5, EMPTY, EMPTY, EMPTY, 1], [0, 1, 2, 3])
        self.assertTrue(all(validate(flipped).values()))

    def test_asymmetric_halfedges(self):
        broken = TriangulationResult(KITE, [0, 1, 2, 0, 2, 3], [EMPTY, EMPTY, 3, EMPTY, EMPTY, EMPTY], [0, 1, 2, 3])
        with self.assertLogs("sweephull.validate", level="WARNING"):
            self.assertFalse(check_halfedges(broken))

    def test_clockwise_triangle(self):
        cw = TriangulationResult([0, 0, 0, 1, 1, 0], [0, 1, 2], [EMPTY] * 3, [0, 2, 1])
        with self.assertLogs("sweephull.validate", level="WARNING"):
            self.assertFalse(check_orientation(cw))

    def test_point_outside_hull(self):
        result = TriangulationResult([0, 0, 1, 0, 0, 1, 5, 5], [0, 1, 2], [EMPTY] * 3, [0, 1, 2])
        with self.assertLogs("sweephull.validate", level="WARNING"):
            self.assertFalse(check_hull(result))

    def test_clockwise_hull(self):
        result = TriangulationResult([0, 0, 1, 0, 0, 1], [0, 1, 2], [EMPTY] * 3, [0, 2, 1])
        with self.assertLogs("sweephull.validate", level="WARNING"):
            self.assertFalse(check_hull(result))

    def test_triangle_count_mismatch(self):
        result = TriangulationResult([0, 0, 1, 0, 0, 1, 1, 1], [0, 1, 2, 1, 3, 2],
                                     [EMPTY, 5, EMPTY, EMPTY, EMPTY, 1], [1, 3, 2])
        with self.assertLogs("sweephull.validate", level="WARNING"):
            self.assertFalse(check_triangle_count(result))

    def test_point_missing_from_mesh(self):
        # (0.5, 0.25) lies inside the square but no triangle uses it
        result = TriangulationResult([0, 0, 1, 0, 0, 1, 1, 1, 0.5, 0.25], [0, 1, 2, 1, 3, 2],
                                     [EMPTY, 5, EMPTY, EMPTY, EMPTY, 1], [1, 3, 2, 0])
        self.assertTrue(check_hull(result))
        with self.assertLogs("sweephull.validate", level="WARNING"):
            self.assertFalse(check_triangle_count(result))

    def test_duplicate_inputs_are_counted_once(self):
        result = TriangulationResult([0, 0, 1, 0, 0, 1, 1, 1, 1, 0], [0, 1, 2, 1, 3, 2],
                                     [EMPTY, 5, EMPTY, EMPTY, EMPTY, 1], [1, 3, 2, 0])
        self.assertTrue(check_triangle_count(result))

    def test_degenerate_results_pass(self):
        result = TriangulationResult([0, 0, 1, 1, 2, 2], [], [], [0, 2], degenerate=True)
        self.assertTrue(all(validate(result).values()))


if __name__ == "__main__":
    unittest.main()
