import numpy as np


def _rng(seed):
    return np.random.default_rng(seed)


def uniform_square(n, seed=42, low=0.0, high=1.0):
    """n points uniform in the square [low, high)^2, shape (n, 2)."""
    return _rng(seed).uniform(low, high, size=(n, 2))


def uniform_triangle(n, A, B, C, seed=42):
    """
    n points uniform inside triangle ABC.
    """
    rng = _rng(seed)
    A = np.asarray(A, dtype=float)
    B = np.asarray(B, dtype=float)
    C = np.asarray(C, dtype=float)
    u = rng.random(n)
    v = rng.random(n)
    # reflect (u, v) back into u + v <= 1
    mask = u + v > 1
    u[mask] = 1 - u[mask]
    v[mask] = 1 - v[mask]
    return A + u[:, None] * (B - A) + v[:, None] * (C - A)


def gaussian(n, mean=(0.5, 0.5), std=0.1, seed=42):
    return _rng(seed).standard_normal((n, 2)) * std + np.asarray(mean)


def gaussian_mixture(n_per_cluster, centers=None, std=0.05, seed=42):
    if centers is None:
        centers = np.array([
            [0.5, 0.5 + 0.3 / np.sqrt(3)],
            [0.5 - 0.15, 0.5 - 0.3 / (2 * np.sqrt(3))],
            [0.5 + 0.15, 0.5 - 0.3 / (2 * np.sqrt(3))]
        ])
    rng = _rng(seed)
    pts = [rng.standard_normal((n_per_cluster, 2)) * std + c for c in np.asarray(centers)]
    return np.vstack(pts)


def grid(nx, ny, spacing=1.0):
    """Regular nx * ny lattice, row by row."""
    xs, ys = np.meshgrid(np.arange(nx) * spacing, np.arange(ny) * spacing)
    return np.column_stack([xs.ravel(), ys.ravel()])


def collinear(n, start=(0.0, 0.0), direction=(1.0, 1.0), seed=42):
    """n points on one line, in random order."""
    t = _rng(seed).permutation(n).astype(float)
    return np.asarray(start) + t[:, None] * np.asarray(direction)


def flatten(points):
    """(N, 2) points -> flat [x0, y0, x1, y1, ...] buffer."""
    return np.ascontiguousarray(points, dtype=np.float64).reshape(-1)
