# -*- coding: utf-8 -*-
# OHGrid/ohgrid/post/plot_topology.py

"""
Project: OHGrid
Date: 3/9/2026

Purpose:
--------
Plotting utility for a quick visual check of an OH decomposition using matplotlib:
outer loop, core curves, spokes, centroid and region labels, projected on x/y.
"""

from typing import Optional
import numpy as np
import matplotlib.pyplot as plt


def _segment(kernel, curve) -> np.ndarray:
    begin, end = kernel.curve_nodes(curve)
    return np.vstack([kernel.node_point(begin), kernel.node_point(end)])


def plot_topology(kernel,
                  topo,
                  *,
                  show: bool = True,
                  save_path: Optional[str] = None,
                  ax=None) -> None:
    """
        Plot the curves of an OH run in the x/y plane.

        Parameters
        ----------
        kernel : GeometryKernel
            Backend holding the curves of `topo`.
        topo : OHTopology
            Result of `build_oh_grid`.
        show : bool
            If True and we created the figure, display it.
        save_path : Optional[str]
            If given, save the figure to this path.
        ax : Optional[matplotlib.axes.Axes]
            Existing Axes to draw on; if None, a figure is created.

        Notes
        -----
        Outer curves are drawn as straight segments between their end nodes.
        """
    created_fig = False
    if ax is None:
        plt.figure(figsize=(6, 6))
        ax = plt.gca()
        created_fig = True

    groups = (
        (topo.outer, 'k-', 1.8, "Outer"),
        (topo.core, 'b-', 1.2, "Core"),
        (topo.spokes, 'r--', 1.2, "Spokes"),
    )
    for curves, style, lw, label in groups:
        for i, c in enumerate(curves):
            seg = _segment(kernel, c)
            ax.plot(seg[:, 0], seg[:, 1], style, lw=lw, label=label if i == 0 else None)

    ax.plot(topo.centroid[0], topo.centroid[1], 'go', ms=5, label="Centroid")

    # Region labels at the mean of their edge end points
    label_style = dict(color='purple', fontsize=9, fontweight='bold', ha='center', va='center')
    for idx, r in enumerate(topo.regions):
        pts = np.vstack([_segment(kernel, c) for c in kernel.region_edges(r)])
        cx, cy = pts[:, 0].mean(), pts[:, 1].mean()
        ax.text(cx, cy, "H" if idx == 0 else "O{}".format(idx), **label_style)

    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title("OH topology")
    ax.grid(True)
    ax.legend()

    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
