# -*- coding: utf-8 -*-
# pages/1_Hypercube_Projection.py
# Streamlit page: rotating n-cube with a fractional dimension count,
# phase slider, matrix readout and GIF export.
#
# Dependencies:
#   streamlit
#   numpy
#   plotly
#   matplotlib
#   pillow

import logging
import os

import numpy as np
import streamlit as st

from hypercube_playground.config import DIMENSION_CAP, EngineConfig
from hypercube_playground.engine import DimensionalTransformEngine
from hypercube_playground.errors import ConfigurationError
from hypercube_playground.logging_config import setup_logging
from hypercube_playground.render import (
    create_animation_gif,
    make_projection_figure,
    projection_extent,
)
from hypercube_playground.styling import axis_label

logger = logging.getLogger("hypercube_playground.pages.projection")

GIF_FILENAME = "hypercube_animation.gif"


# ---------- Helpers ----------

def matrix_latex(name, M, fmt="%.3f", max_size=6):
    """
    LaTeX bmatrix for a runtime-sized matrix. Larger matrices are cut to
    their top-left max_size x max_size block.
    """
    M = np.asarray(M, dtype=float)
    if M.size == 0:
        return rf"{name} = [\,]"
    rows, cols = M.shape
    shown = M[:max_size, :max_size]
    lines = []
    for r in range(shown.shape[0]):
        cells = [fmt % v for v in shown[r]]
        if cols > max_size:
            cells.append(r"\cdots")
        lines.append(" & ".join(cells))
    if rows > max_size:
        lines.append(" & ".join([r"\vdots"] * len(cells)))
    body = r" \\ ".join(lines)
    return rf"{name} = \begin{{bmatrix}} {body} \end{{bmatrix}}"


def sidebar_config():
    st.sidebar.header("Dimension range")
    min_dim, max_dim = st.sidebar.slider(
        "Dimensions swept", 0, DIMENSION_CAP, (1, 8), 1,
        help="The animation grows the cube from the low end up to the high end and back.",
    )

    st.sidebar.markdown("---")
    st.sidebar.header("Animation timing")
    period = st.sidebar.slider("Cycle length (seconds)", 0.5, 20.0, 3.0, 0.5)
    pivot = st.sidebar.slider("Turnaround point (share of cycle)", 0.05, 0.95, 0.85, 0.01)
    ease_power = st.sidebar.slider("Ease power", 1.0, 6.0, 3.0, 0.5)
    rotation_turns = st.sidebar.slider("Rotation turns per cycle", 0, 4, 1, 1)

    st.sidebar.markdown("---")
    st.sidebar.header("Fade")
    fade_fraction = st.sidebar.slider("Fade share of cycle", 0.01, 0.5, 0.05, 0.01)
    min_alpha = st.sidebar.slider("Minimum opacity", 0.0, 1.0, 0.0, 0.05)

    return EngineConfig(
        period=period,
        min_dimension=min_dim,
        max_dimension=max_dim,
        pivot=pivot,
        ease_power=ease_power,
        rotation_turns=rotation_turns,
        fade_fraction=fade_fraction,
        min_alpha=min_alpha,
    )


# ---------- Streamlit app ----------

def main():
    st.set_page_config(page_title="Hypercube Projection (Phase Slider + GIF)",
                       layout="wide")
    setup_logging()

    st.title("Rotating Hypercube with a Fractional Dimension Count")

    st.write(
        """
        The vertices of an **n-cube** are all vectors of ±1 coordinates. Two vertices share an
        edge when they differ in exactly one coordinate. Every frame:

        1. Scale the newest axis by the fractional part of the dimension count
        2. Rotate in every plane of neighbouring axes by the same angle
        3. Project onto the screen with one fixed direction per axis

        Sweeping the dimension count up and back makes each new axis grow out of the previous cube.
        """
    )

    try:
        config = sidebar_config().validate()
    except ConfigurationError as e:
        st.error(f"Invalid settings: {e}")
        st.stop()

    st.sidebar.markdown("---")
    st.sidebar.header("Frame")
    phase = st.sidebar.slider("Phase of the cycle", 0.0, 0.999, 0.5, 0.001)

    pin = st.sidebar.checkbox("Pin the dimension count", value=False)
    pinned = None
    if pin and config.min_dimension == config.max_dimension:
        pinned = float(config.min_dimension)
    elif pin:
        pinned = st.sidebar.slider(
            "Dimension count",
            float(config.min_dimension), float(config.max_dimension),
            float(config.min_dimension), 0.01,
        )

    engine = DimensionalTransformEngine(config)
    engine.seek(phase)
    if pinned is not None:
        try:
            engine.show_dimension(pinned)
        except ConfigurationError as e:
            st.error(f"Cannot show that dimension: {e}")
            st.stop()

    snapshot = engine.snapshot()
    logger.debug("Rendering phase %.3f at dimension %.3f",
                 snapshot.phase, snapshot.fractional_dimension)

    col1, col2 = st.columns([3, 2])

    with col1:
        st.subheader("Projection (slider controlled)")
        fig = make_projection_figure(
            snapshot,
            extent=projection_extent(config.max_dimension),
        )
        st.plotly_chart(fig, use_container_width=True)

    with col2:
        st.subheader("Frame state")
        m1, m2, m3 = st.columns(3)
        m1.metric("Dimension", f"{snapshot.fractional_dimension:.2f}")
        m2.metric("Appear amount", f"{snapshot.appear_amount:.2f}")
        m3.metric("Opacity", f"{snapshot.global_alpha:.2f}")
        st.caption(
            f"{len(snapshot.vertices)} vertices, {len(snapshot.edges)} edges, "
            f"rotation angle {np.degrees(engine.rotation_angle):.1f}°"
        )

        st.latex(matrix_latex("R", snapshot.rotation))
        st.latex(matrix_latex("S", snapshot.scale))

        if snapshot.dimension > 0:
            st.markdown("**Screen direction of each axis**")
            rows = [
                rf"{axis_label(i)} \mapsto ({b[0]:.3f},\ {b[1]:.3f})"
                for i, b in enumerate(snapshot.basis)
            ]
            st.latex(r",\quad ".join(rows[:6]) + (r",\ \dots" if len(rows) > 6 else ""))

    st.markdown("---")
    st.caption(
        "Drag the phase slider slowly: the dimension count rises until the turnaround point, "
        "then eases back down, so the loop never snaps."
    )

    # ---------- GIF generation ----------
    st.markdown("## GIF animation over one cycle")

    if st.button(f"Generate GIF animation ({GIF_FILENAME})"):
        with st.spinner("Generating GIF animation (this may take a bit)..."):
            try:
                gif_engine = DimensionalTransformEngine(config)
                create_animation_gif(
                    filename=GIF_FILENAME,
                    engine=gif_engine,
                    n_frames=min(int(round(30 * config.period)), 240),
                    fps=30,
                )
                st.success(f"Animation saved as {GIF_FILENAME}")
            except Exception as e:
                logger.exception("GIF export failed")
                st.error(f"Failed to create animation. Error: {e}")

    if os.path.exists(GIF_FILENAME):
        c1, c2, c3 = st.columns([1, 2, 1])
        with c2:
            st.image(GIF_FILENAME)


if __name__ == "__main__":
    main()
