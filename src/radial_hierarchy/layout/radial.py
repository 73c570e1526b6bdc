"""Radial label placement for one sibling set."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .alignment import LabelAlignment
from .coords import canvas_center, normal_to_screen, rotate_about, safe_size
from .metrics import Measure, estimate_label_size

# Radius limits in normalized units; the sign encodes through-center inversion
MAX_RADIUS = 0.8
DEFAULT_RADIUS = 0.4

# Floor for |radius| in the scale formula
MIN_RADIUS = 0.01

HOVER_SCALE = 1.2


@dataclass
class RadialViewState:
    """Ring state shared between the gesture interpreter and the layout."""

    rotation: float = 0.0  # Degrees, accumulates without wraparound
    radius: float = DEFAULT_RADIUS
    alignment: LabelAlignment = LabelAlignment.LEADING


@dataclass(frozen=True)
class LabelTransform:
    """On-screen transform of one label, before ring rotation."""

    x: float
    y: float
    rotation: float  # Degrees
    scale: float
    opacity: float


def slot_angles(count: int) -> list[float]:
    """Return the base angle in degrees of every slot on a ring of count labels.

    The first slot sits one step before 180 degrees; the rest follow at even
    steps of 360 / count.
    """
    if count <= 0:
        return []
    angle_between = 360.0 / count
    return [180.0 - angle_between + i * angle_between for i in range(count)]


def label_scale(radius: float) -> float:
    """Label scale for a ring radius, clamped to [0.4, 2.0]."""
    safe_radius = max(abs(radius), MIN_RADIUS)
    return min(2.0, max(0.4, safe_radius / 0.4))


def label_opacity(radius: float) -> float:
    """Fade labels out while the ring passes close to the center."""
    magnitude = abs(radius)
    if magnitude < 0.1:
        return 0.0
    if magnitude < 0.2:
        return (magnitude - 0.1) * 10
    return 1.0


def ring_radius_pixels(radius: float, canvas_size: tuple[float, float]) -> float:
    """On-screen radius of the guide circle."""
    center_x, _ = canvas_center(canvas_size)
    return abs(radius) * center_x


def compute_label_transform(
    sibling_count: int,
    index: int,
    radius: float,
    alignment: LabelAlignment,
    label_half_width: float,
    canvas_size: tuple[float, float],
    labels_angle: float = 0.0,
    hovered: bool = False,
) -> LabelTransform:
    """Place one label of a sibling set on the ring.

    Args:
        sibling_count: Number of labels on the ring (at least 1).
        index: Position of this label within its siblings.
        radius: Signed ring radius in normalized units.
        alignment: Which edge of the label the ring passes through.
        label_half_width: Half the measured label width in pixels.
        canvas_size: Canvas (width, height) in pixels.
        labels_angle: Fixed angle added to every label's rotation.
        hovered: Whether the pointer is over this label.

    Returns:
        LabelTransform in canvas pixels.
    """
    angle_between = 360.0 / sibling_count
    base_angle = 180.0 - angle_between + index * angle_between
    rad_angle = math.radians(base_angle)

    width, height = safe_size(canvas_size)
    center_x, center_y = width / 2, height / 2

    # Shift the ring by half a label so a consistent edge sits on it
    width_offset = label_half_width / center_x * alignment.offset_multiplier
    adjusted_radius = radius + width_offset

    x = math.cos(rad_angle) * adjusted_radius
    y = math.sin(rad_angle) * adjusted_radius

    # Aspect ratio correction keeps the ring circular on non-square canvases
    aspect_ratio = center_x / center_y
    screen_x, screen_y = normal_to_screen((x, y * aspect_ratio), (width, height))

    scale = label_scale(radius)
    if hovered:
        scale *= HOVER_SCALE

    return LabelTransform(
        x=screen_x,
        y=screen_y,
        rotation=math.degrees(math.atan2(y, x)) + labels_angle,
        scale=scale,
        opacity=label_opacity(radius),
    )


def layout_labels(
    captions: Sequence[str],
    view: RadialViewState,
    canvas_size: tuple[float, float],
    measure: Measure | None = None,
    labels_angle: float = 0.0,
    hovered_index: int | None = None,
) -> list[LabelTransform]:
    """Lay out a whole sibling set.

    Every caption is measured first, then placed.

    Args:
        captions: Sibling captions in ring order.
        view: Current ring state (rotation is not applied here).
        canvas_size: Canvas (width, height) in pixels.
        measure: Label measurement function; defaults to estimate_label_size.
        labels_angle: Fixed angle added to every label's rotation.
        hovered_index: Index of the hovered label, if any.

    Returns:
        One LabelTransform per caption; empty for an empty sibling set.
    """
    if not captions:
        return []

    measure = measure or estimate_label_size
    widths = [measure(caption)[0] for caption in captions]

    return [
        compute_label_transform(
            sibling_count=len(captions),
            index=i,
            radius=view.radius,
            alignment=view.alignment,
            label_half_width=widths[i] / 2,
            canvas_size=canvas_size,
            labels_angle=labels_angle,
            hovered=i == hovered_index,
        )
        for i in range(len(captions))
    ]


def apply_ring_rotation(
    transform: LabelTransform,
    rotation: float,
    canvas_size: tuple[float, float],
) -> LabelTransform:
    """Compose the whole-ring rotation into a label transform.

    Args:
        transform: Label transform from compute_label_transform.
        rotation: Ring rotation in degrees.
        canvas_size: Canvas (width, height) in pixels.

    Returns:
        Transform with the position rotated around the canvas center and the
        ring rotation added to the label angle.
    """
    center = canvas_center(canvas_size)
    x, y = rotate_about((transform.x, transform.y), center, rotation)
    return LabelTransform(
        x=x,
        y=y,
        rotation=transform.rotation + rotation,
        scale=transform.scale,
        opacity=transform.opacity,
    )
