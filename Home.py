# -*- coding: utf-8 -*-
# Home page for the Hypercube Playground

import streamlit as st


st.set_page_config(
    page_title="Hypercube Playground",
    layout="wide"
)

st.title("Hypercube Playground")

st.write(
    """
    A rotating projection of an n-dimensional cube whose dimension count changes smoothly.

    Choose a visualization mode:

    - **Hypercube Projection**: 2ⁿ vertices of ±1 coordinates, rotations in every plane of
      neighbouring axes, a flat projection onto the screen, and a dimension count that eases
      up and back down (plus a GIF of one full cycle).
    """
)

col1, col2 = st.columns(2)

with col1:
    st.subheader("Hypercube Projection")
    st.write(
        """
        Watch a point grow into a line, a square, a cube, a tesseract and beyond.
        The newest axis fades in as the fractional part of the dimension count rises.
        """
    )
    if st.button("Go to Hypercube Projection"):
        st.switch_page("pages/1_Hypercube_Projection.py")

with col2:
    st.subheader("How edges are found")
    st.write(
        """
        Two vertices are joined when their coordinates differ in exactly one place,
        i.e. when the sum of absolute coordinate differences is exactly 2.
        An n-cube therefore has n·2ⁿ⁻¹ edges.
        """
    )
