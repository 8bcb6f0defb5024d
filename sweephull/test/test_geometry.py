import math
import unittest

import numpy as np

from ..geometry import (circumcenter, circumcenters, circumradius, in_circle,
                        orient, orient2d, pseudo_angle)


class TestOrientation(unittest.TestCase):

    def test_counter_clockwise_is_positive(self):
        self.assertGreater(orient2d(0, 0, 1, 0, 0, 1), 0)
        self.assertLess(orient2d(0, 0, 0, 1, 1, 0), 0)

    def test_collinear_is_zero(self):
        self.assertEqual(orient2d(0, 0, 1, 1, 2, 2), 0.0)
        self.assertEqual(orient(0, 0, 1, 1, 2, 2), 0.0)

    def test_rotations_agree(self):
        a, b, c = (0.0, 0.0), (3.0, 1.0), (1.0, 2.0)
        first = orient(*a, *b, *c)
        self.assertGreater(first, 0)
        self.assertGreater(orient(*b, *c, *a), 0)
        self.assertGreater(orient(*c, *a, *b), 0)
        self.assertLess(orient(*a, *c, *b), 0)


class TestInCircle(unittest.TestCase):

    def test_inside_and_outside(self):
        # unit circle through (1,0), (0,1), (-1,0), counter-clockwise
        self.assertGreater(in_circle(1, 0, 0, 1, -1, 0, 0, 0), 0)
        self.assertLess(in_circle(1, 0, 0, 1, -1, 0, 5, 5), 0)

    def test_cocircular_is_zero(self):
        self.assertEqual(in_circle(0, 0, 1, 0, 1, 1, 0, 1), 0.0)


class TestCircles(unittest.TestCase):

    def test_circumcenter_of_right_triangle(self):
        x, y = circumcenter(0, 0, 2, 0, 0, 2)
        self.assertAlmostEqual(x, 1.0)
        self.assertAlmostEqual(y, 1.0)
        self.assertAlmostEqual(circumradius(0, 0, 2, 0, 0, 2), 2.0)

    def test_collinear(self):
        self.assertEqual(circumradius(0, 0, 1, 1, 2, 2), math.inf)
        with self.assertRaises(ValueError):
            circumcenter(0, 0, 1, 1, 2, 2)

    def test_batch_matches_scalar(self):
        pts = np.array([
            [[0, 0], [2, 0], [0, 2]],
            [[1, 1], [4, 1], [1, 5]],
            [[0, 0], [1, 1], [2, 2]],
        ], dtype=float)
        centers = circumcenters(pts)
        self.assertEqual(centers.shape, (3, 2))
        np.testing.assert_allclose(centers[0], circumcenter(0, 0, 2, 0, 0, 2))
        np.testing.assert_allclose(centers[1], circumcenter(1, 1, 4, 1, 1, 5))
        self.assertTrue(np.all(np.isnan(centers[2])))

    def test_batch_rejects_bad_shape(self):
        with self.assertRaises(ValueError):
            circumcenters(np.zeros((4, 2)))


class TestPseudoAngle(unittest.TestCase):

    def test_monotonic_over_the_circle(self):
        angles = np.linspace(-math.pi + 1e-6, math.pi - 1e-6, 200)
        values = [pseudo_angle(math.cos(a), math.sin(a)) for a in angles]
        for v in values:
            self.assertGreaterEqual(v, 0.0)
            self.assertLess(v, 1.0)
        # starts at the negative x axis and increases counter-clockwise
        self.assertTrue(all(b > a for a, b in zip(values, values[1:])))

    def test_origin(self):
        self.assertEqual(pseudo_angle(0.0, 0.0), 0.0)


if __name__ == "__main__":
    unittest.main()
