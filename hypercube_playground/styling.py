"""
Axis labels and colors. Pure lookups, no geometry.
"""
from matplotlib import colormaps
from matplotlib.colors import to_hex

AXIS_LETTERS = "xyzwvutsrqpo"


def axis_label(i: int) -> str:
    if i < 0:
        raise ValueError(f"axis index must be >= 0, got {i}")
    if i < len(AXIS_LETTERS):
        return AXIS_LETTERS[i]
    return f"a{i}"


def axis_color(i: int, cmap_name: str = "tab10") -> str:
    """Hex color for axis i, cycling through a qualitative colormap."""
    cmap = colormaps[cmap_name]
    n_colors = getattr(cmap, "N", 10)
    return to_hex(cmap(i % n_colors))


def edge_alpha(axis: int, dimension: int, appear_amount: float, global_alpha: float) -> float:
    """
    Opacity of an edge running along `axis`.

    Edges along the newest axis fade in with appear_amount; every edge is
    scaled by the global alpha.
    """
    alpha = global_alpha
    if axis == dimension - 1:
        alpha *= appear_amount
    return min(max(alpha, 0.0), 1.0)
