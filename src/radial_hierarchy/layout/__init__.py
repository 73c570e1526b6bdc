"""Radial layout engine: places a sibling set of labels on a ring.

Layout is a pure function of the ring state, the canvas size and the measured
label widths, so it can be recomputed every frame.
"""

from .alignment import LabelAlignment
from .coords import normal_to_screen, screen_to_normal
from .metrics import estimate_label_size, make_measure
from .radial import (
    LabelTransform,
    RadialViewState,
    apply_ring_rotation,
    compute_label_transform,
    label_opacity,
    label_scale,
    layout_labels,
    ring_radius_pixels,
    slot_angles,
)
from .render import render_frame

__all__ = [
    "LabelAlignment",
    "screen_to_normal",
    "normal_to_screen",
    "estimate_label_size",
    "make_measure",
    "LabelTransform",
    "RadialViewState",
    "slot_angles",
    "compute_label_transform",
    "layout_labels",
    "label_scale",
    "label_opacity",
    "apply_ring_rotation",
    "ring_radius_pixels",
    "render_frame",
]
