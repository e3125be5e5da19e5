"""
Layout Layer - Tree Geometry

Converts tree snapshots (BST or heap) into non-overlapping 2D coordinates
for the renderer.
"""

from ds_visualizer.layout.tree_layout import LayoutGeometry, fit_canvas, layout_tree

__all__ = [
    "LayoutGeometry",
    "fit_canvas",
    "layout_tree",
]
