"""Continuous gesture handling for the radial ring.

Two independent tracks turn raw input into ring updates:

- RotationTrack: a drag around the canvas center rotates the ring by the
  signed angle between successive pointer vectors.
- ZoomTrack: a pinch scales the ring radius, lets it pass through the center
  to the mirrored side, and snaps it out of the faded zone on release.

Each track keeps only its own anchor, so a rotate and a pinch can run at the
same time without affecting each other.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from .animation import SpringAnimation
from .layout.coords import screen_to_normal
from .layout.radial import MAX_RADIUS, RadialViewState

logger = logging.getLogger(__name__)

# Floor for the previous pinch scale in divisions
MIN_PINCH_SCALE = 0.01

# Below this magnitude a sign change passes through the center
INVERSION_THRESHOLD = 0.05

# Radii below SNAP_THRESHOLD are moved to +/-SNAP_RADIUS on release
SNAP_THRESHOLD = 0.1
SNAP_RADIUS = 0.2


class GesturePhase(Enum):
    """Lifecycle phase of a gesture event."""

    START = "start"
    CHANGE = "change"
    END = "end"


@dataclass(frozen=True)
class DragEvent:
    phase: GesturePhase
    position: tuple[float, float]  # Canvas pixels


@dataclass(frozen=True)
class MagnifyEvent:
    phase: GesturePhase
    scale: float  # Cumulative since the gesture began, > 0


def resolve_radius(current: float, proposed: float) -> float:
    """Pick the next ring radius from a proposed value.

    A proposal that lands next to the center on the other side flips the
    current radius instead, so a continued pinch passes through the center.
    Any other proposal is clamped to [-MAX_RADIUS, MAX_RADIUS].

    Args:
        current: Current signed radius.
        proposed: Radius requested by the gesture.

    Returns:
        The radius to adopt.
    """
    crossed = math.copysign(1.0, proposed) != math.copysign(1.0, current)
    if abs(proposed) < INVERSION_THRESHOLD and crossed:
        return -current
    return min(max(proposed, -MAX_RADIUS), MAX_RADIUS)


@dataclass
class RotationTrack:
    """Drag-to-rotate state."""

    anchor: tuple[float, float] | None = None

    def on_start(self, position: tuple[float, float]) -> None:
        self.anchor = position

    def on_change(self, position: tuple[float, float], canvas_size: tuple[float, float]) -> float:
        """Return the rotation in degrees between the anchor and position.

        Both points are taken as vectors from the canvas center. The anchor
        then moves to position.
        """
        if self.anchor is None:
            self.anchor = position

        prev_x, prev_y = screen_to_normal(self.anchor, canvas_size)
        cur_x, cur_y = screen_to_normal(position, canvas_size)
        self.anchor = position

        dot = prev_x * cur_x + prev_y * cur_y
        cross = prev_x * cur_y - prev_y * cur_x

        # atan2(0, 0) is undefined
        if dot == 0 and cross == 0:
            dot = 1.0

        return math.degrees(math.atan2(cross, dot))

    def on_end(self) -> None:
        self.anchor = None


@dataclass
class ZoomTrack:
    """Pinch-to-zoom state."""

    last_scale: float | None = None

    @property
    def active(self) -> bool:
        return self.last_scale is not None

    def on_start(self, scale: float) -> None:
        self.last_scale = scale

    def on_change(self, scale: float, radius: float) -> float:
        """Return the new radius for a cumulative pinch scale."""
        if self.last_scale is None:
            self.on_start(scale)

        delta = scale / max(self.last_scale, MIN_PINCH_SCALE)
        self.last_scale = scale
        return resolve_radius(radius, radius * delta)

    def on_end(self, radius: float) -> float | None:
        """Finish the pinch.

        Returns:
            The radius to settle on when the ring rests in the faded zone,
            otherwise None.
        """
        self.last_scale = None
        if abs(radius) < SNAP_THRESHOLD:
            return math.copysign(SNAP_RADIUS, radius)
        return None


@dataclass
class GestureInterpreter:
    """Applies drag and magnify events to a RadialViewState."""

    view: RadialViewState = field(default_factory=RadialViewState)
    rotation_track: RotationTrack = field(default_factory=RotationTrack)
    zoom_track: ZoomTrack = field(default_factory=ZoomTrack)

    def on_drag(self, event: DragEvent, canvas_size: tuple[float, float]) -> float:
        """Apply a drag event.

        Returns:
            The rotation applied by this event in degrees.
        """
        if event.phase is GesturePhase.START:
            self.rotation_track.on_start(event.position)
            return 0.0
        if event.phase is GesturePhase.END:
            self.rotation_track.on_end()
            return 0.0

        delta = self.rotation_track.on_change(event.position, canvas_size)
        self.view.rotation += delta
        return delta

    def on_magnify(self, event: MagnifyEvent) -> SpringAnimation | None:
        """Apply a magnify event.

        Returns:
            On release inside the faded zone, the spring that carries the
            displayed radius to its settled value (the view already holds the
            settled value). Otherwise None.
        """
        if event.phase is GesturePhase.START:
            self.zoom_track.on_start(event.scale)
            return None

        if event.phase is GesturePhase.CHANGE:
            self.view.radius = self.zoom_track.on_change(event.scale, self.view.radius)
            return None

        target = self.zoom_track.on_end(self.view.radius)
        if target is None:
            return None

        logger.debug("snapping radius %.3f -> %.3f", self.view.radius, target)
        animation = SpringAnimation(start=self.view.radius, target=target)
        self.view.radius = target
        return animation
