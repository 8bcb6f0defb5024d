class TriangulationError(Exception):
    """Base class for everything the triangulator raises on purpose."""


class InvalidInput(TriangulationError, ValueError):
    """Malformed coordinate buffer: odd length, non-finite values, wrong shape."""


class DegenerateGeometry(TriangulationError):
    """
    The point set admits no triangle (coincident or collinear points), or
    legalization gave up after too many flips.

    The engine normally catches this and returns a best-effort result; it only
    reaches the caller in strict mode.
    """


class DegenerateGeometryWarning(UserWarning):
    pass
