"""
Drawing the projected hypercube.

Matplotlib for static frames and GIF export (PillowWriter, no ffmpeg
needed), plotly for the interactive Streamlit view. Edges are grouped by
the axis they run along so each axis gets one trace and one color.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
import plotly.graph_objects as go
from matplotlib.animation import PillowWriter

from .engine import DimensionalTransformEngine, FrameSnapshot
from .styling import axis_color, axis_label, edge_alpha
from .topology import edge_axis

logger = logging.getLogger(__name__)

C_VERTEX = "#444444"


# ---------- Geometry helpers ----------

def projection_extent(dimension: int, margin: float = 1.1) -> float:
    """
    Half-width of a square view that holds every projected vertex.

    The evenly spread basis satisfies B^T B = (n/2) I for n >= 2, so a
    vertex of norm sqrt(n) lands within n / sqrt(2) of the origin.
    """
    return margin * max(1.0, dimension / math.sqrt(2.0))


def edge_axes(snapshot: FrameSnapshot) -> np.ndarray:
    """Axis index of every edge, in snapshot.edges order."""
    V = snapshot.vertices
    return np.array([edge_axis(V[i], V[j]) for i, j in snapshot.edges], dtype=int)


def build_edge_lines(points_2d, edge_pairs, gap=None):
    """
    Build x, y arrays for line segments, separated by `gap`
    (None for plotly, NaN for matplotlib).
    """
    xs, ys = [], []
    for i, j in edge_pairs:
        xs.extend([points_2d[i, 0], points_2d[j, 0], gap])
        ys.extend([points_2d[i, 1], points_2d[j, 1], gap])
    return xs, ys


def group_edges_by_axis(snapshot: FrameSnapshot) -> Dict[int, List[Tuple[int, int]]]:
    groups: Dict[int, List[Tuple[int, int]]] = {}
    for (i, j), axis in zip(snapshot.edges, edge_axes(snapshot)):
        groups.setdefault(int(axis), []).append((i, j))
    return groups


# ---------- Matplotlib ----------

def draw_frame(ax,
               snapshot: FrameSnapshot,
               extent: Optional[float] = None,
               show_vertices: bool = False,
               show_legend: bool = True,
               title_suffix: str = ""):
    """
    Draw a single frame on an existing Matplotlib Axes.
    Used for every GIF frame.
    """
    ax.clear()

    if extent is None:
        extent = projection_extent(snapshot.dimension)

    points_2d = snapshot.projected_points()
    groups = group_edges_by_axis(snapshot)

    for axis in sorted(groups):
        xs, ys = build_edge_lines(points_2d, groups[axis], gap=np.nan)
        alpha = edge_alpha(axis, snapshot.dimension,
                           snapshot.appear_amount, snapshot.global_alpha)
        ax.plot(xs, ys,
                color=axis_color(axis),
                linewidth=1.5,
                alpha=alpha,
                label=f"{axis_label(axis)}-axis edges")

    if show_vertices and points_2d.shape[0] > 0:
        ax.scatter(points_2d[:, 0], points_2d[:, 1],
                   s=10, color=C_VERTEX, alpha=snapshot.global_alpha,
                   label="Vertices")

    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_aspect("equal", "box")
    ax.set_xticks([])
    ax.set_yticks([])

    base_title = f"{snapshot.fractional_dimension:.2f}-dimensional hypercube"
    if title_suffix:
        ax.set_title(f"{base_title} {title_suffix}")
    else:
        ax.set_title(base_title)

    if show_legend and groups:
        ax.legend(loc="upper left", fontsize="small")


def create_animation_gif(filename,
                         engine: DimensionalTransformEngine,
                         n_frames=120,
                         fps=30,
                         dpi=100,
                         show_vertices=False):
    """
    Generate a GIF covering one full period of the engine, starting from
    its current phase. The engine ends where it started.
    """
    if n_frames <= 0:
        raise ValueError(f"n_frames must be positive, got {n_frames}")

    dt = engine.config.period / n_frames
    extent = projection_extent(engine.config.max_dimension)

    logger.info("Writing %d frames to %s", n_frames, filename)
    fig, ax = plt.subplots(figsize=(6, 6))
    writer = PillowWriter(fps=fps)

    try:
        with writer.saving(fig, filename, dpi=dpi):
            for snapshot in engine.frames(dt, n_frames):
                draw_frame(ax, snapshot,
                           extent=extent,
                           show_vertices=show_vertices,
                           show_legend=False)
                writer.grab_frame()
    finally:
        plt.close(fig)


# ---------- Plotly ----------

def make_projection_figure(snapshot: FrameSnapshot,
                           extent: Optional[float] = None,
                           show_vertices: bool = True,
                           height: int = 700) -> go.Figure:
    if extent is None:
        extent = projection_extent(snapshot.dimension)

    points_2d = snapshot.projected_points()
    groups = group_edges_by_axis(snapshot)

    fig = go.Figure()
    fig.update_layout(template="plotly_white", showlegend=True)

    for axis in sorted(groups):
        xs, ys = build_edge_lines(points_2d, groups[axis])
        fig.add_trace(go.Scatter(
            x=xs, y=ys,
            mode="lines",
            line=dict(width=2, color=axis_color(axis)),
            opacity=edge_alpha(axis, snapshot.dimension,
                               snapshot.appear_amount, snapshot.global_alpha),
            name=f"{axis_label(axis)}-axis edges",
            hoverinfo="skip",
        ))

    if show_vertices and points_2d.shape[0] > 0:
        fig.add_trace(go.Scatter(
            x=points_2d[:, 0], y=points_2d[:, 1],
            mode="markers",
            marker=dict(size=5, color=C_VERTEX),
            name="Vertices",
            hovertemplate="x=%{x:.3f}<br>y=%{y:.3f}<extra></extra>",
        ))

    fig.update_layout(
        height=height,
        margin=dict(l=10, r=10, t=40, b=10),
        title=f"{snapshot.fractional_dimension:.2f}-dimensional hypercube "
              f"({len(snapshot.vertices)} vertices, {len(snapshot.edges)} edges)",
        xaxis=dict(range=[-extent, extent], showgrid=False, zeroline=False,
                   showticklabels=False),
        yaxis=dict(range=[-extent, extent], showgrid=False, zeroline=False,
                   showticklabels=False),
        legend=dict(x=0.02, y=0.98),
    )
    fig.update_yaxes(scaleanchor="x", scaleratio=1)
    return fig
