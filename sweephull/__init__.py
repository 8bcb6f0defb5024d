from sweephull.errors import (DegenerateGeometry, DegenerateGeometryWarning,
                              InvalidInput, TriangulationError)
from sweephull.mesh import (EMPTY, TriangulationResult, edges_of_triangle,
                            next_halfedge, prev_halfedge, triangle_of_edge)
from sweephull.triangulation import Delaunay, SweepHull, triangulate

__version__ = "0.1.0"
