import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.lines import Line2D


def draw(result, ax=None, show=True,
         draw_points=True,
         draw_edges=True,
         draw_hull=True,
         label_points=False):
    """
    Plot a TriangulationResult: triangle edges, convex hull and input points.

    Returns the matplotlib Axes so callers can keep decorating it.
    """
    if ax is None:
        plt.figure()
        ax = plt.gca()

    cmap = plt.get_cmap('tab10')
    edge_color = cmap(2)
    hull_color = cmap(1)
    point_color = cmap(0)
    points = result.points

    # 1) triangle edges at the bottom, zorder=1
    if draw_edges and result.triangle_count:
        lines = [points[[p, q]] for p, q in result.edges()]
        ax.add_collection(LineCollection(lines, colors=[edge_color], linewidths=0.8, zorder=1))

    # 2) hull boundary, zorder=2
    if draw_hull and len(result.hull) > 1:
        ring = list(result.hull) + [result.hull[0]]
        ax.plot(points[ring, 0], points[ring, 1], color=hull_color, linewidth=2, zorder=2)

    # 3) points on top, zorder=3
    if draw_points and len(points):
        ax.scatter(points[:, 0], points[:, 1], s=12, color=point_color, zorder=3)
        if label_points:
            for idx, (x, y) in enumerate(points):
                ax.text(x, y, f"{idx}", color="blue", fontsize=8)

    ax.autoscale_view()
    ax.set_aspect('equal')
    ax.set_title(f"Delaunay triangulation ({result.triangle_count} triangles)")

    legend_handles = []
    if draw_edges:
        legend_handles.append(Line2D([0], [0], color=edge_color, linewidth=1, label='Triangle edge'))
    if draw_hull:
        legend_handles.append(Line2D([0], [0], color=hull_color, linewidth=2, label='Convex hull'))
    if draw_points:
        legend_handles.append(Line2D([0], [0], marker='o', color=point_color, linestyle='None', label='Point'))
    if legend_handles:
        ax.legend(handles=legend_handles, loc='best')

    if show:
        plt.show()
    return ax
