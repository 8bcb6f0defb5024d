import numpy as np


def sort_by_distance(store, cx, cy):
    """
    Point indices ordered by squared distance to (cx, cy), nearest first.

    A stable sort keeps equal distances in index order, so the insertion
    order (and with it the whole output) is deterministic.
    """
    pts = store.points
    d = (pts[:, 0] - cx) ** 2 + (pts[:, 1] - cy) ** 2
    return np.argsort(d, kind="stable").tolist()
