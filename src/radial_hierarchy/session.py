"""Headless presentation controller tying navigation, layout and gestures together."""

import logging
from dataclasses import dataclass, field

from .animation import SpringAnimation
from .gesture import DragEvent, GestureInterpreter, GesturePhase, MagnifyEvent
from .hierarchy import Hierarchy, Node
from .layout.alignment import LabelAlignment
from .layout.coords import rotate_about
from .layout.metrics import Measure, estimate_label_size
from .layout.radial import (
    LabelTransform,
    RadialViewState,
    apply_ring_rotation,
    layout_labels,
    ring_radius_pixels,
)
from .navigation import NavigationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameLabel:
    """A sibling label as drawn in one frame."""

    node: Node
    transform: LabelTransform  # Before ring rotation
    width: float
    height: float
    hovered: bool = False


@dataclass
class Frame:
    """Everything the presentation layer needs to draw one frame."""

    labels: list[FrameLabel] = field(default_factory=list)
    breadcrumb: list[tuple[int, str]] = field(default_factory=list)
    can_ascend: bool = False
    rotation: float = 0.0
    radius: float = 0.0
    ring_radius: float = 0.0  # Pixels
    canvas_size: tuple[float, float] = (0.0, 0.0)
    alignment: LabelAlignment = LabelAlignment.LEADING


class RadialSession:
    """Interactive radial view over a hierarchy.

    The session owns the navigation state and the ring state, and feeds the
    ring state to the gesture interpreter. Rotation and radius persist when
    the user moves between sibling sets.
    """

    def __init__(
        self,
        hierarchy: Hierarchy,
        canvas_size: tuple[float, float],
        view: RadialViewState | None = None,
        measure: Measure | None = None,
        labels_angle: float = 0.0,
    ):
        self.hierarchy = hierarchy
        self.canvas_size = canvas_size
        self.navigation = NavigationState()
        self.interpreter = GestureInterpreter(view=view or RadialViewState())
        self.measure = measure or estimate_label_size
        self.labels_angle = labels_angle
        self.hovered_index: int | None = None
        self._animation: SpringAnimation | None = None
        self._animation_time = 0.0

    @property
    def view(self) -> RadialViewState:
        return self.interpreter.view

    @property
    def displayed_radius(self) -> float:
        """Radius on screen, following the snap-back spring while it plays."""
        if self._animation is None:
            return self.view.radius
        return self._animation.value_at(self._animation_time)

    @property
    def animating(self) -> bool:
        return self._animation is not None

    def siblings(self) -> list[Node]:
        return self.hierarchy.children_of(self.navigation.current_index)

    def frame(self) -> Frame:
        """Compute the current frame."""
        siblings = self.siblings()
        captions = [node.caption for node in siblings]
        sizes = [self.measure(caption) for caption in captions]

        radius = self.displayed_radius
        shown = RadialViewState(
            rotation=self.view.rotation, radius=radius, alignment=self.view.alignment
        )
        transforms = layout_labels(
            captions,
            shown,
            self.canvas_size,
            measure=self.measure,
            labels_angle=self.labels_angle,
            hovered_index=self.hovered_index,
        )

        labels = [
            FrameLabel(
                node=node,
                transform=transform,
                width=width,
                height=height,
                hovered=i == self.hovered_index,
            )
            for i, (node, transform, (width, height)) in enumerate(zip(siblings, transforms, sizes))
        ]
        breadcrumb = [
            (index, self.hierarchy.caption(index) or "")
            for index in self.navigation.breadcrumb()
        ]

        return Frame(
            labels=labels,
            breadcrumb=breadcrumb,
            can_ascend=self.navigation.can_ascend,
            rotation=self.view.rotation,
            radius=radius,
            ring_radius=ring_radius_pixels(radius, self.canvas_size),
            canvas_size=self.canvas_size,
            alignment=self.view.alignment,
        )

    def label_at(self, position: tuple[float, float]) -> Node | None:
        """Hit-test a canvas point against the visible labels.

        Args:
            position: (x, y) in canvas pixels.

        Returns:
            The node under the point; the last drawn label wins overlaps.
        """
        frame = self.frame()
        for label in reversed(frame.labels):
            if label.transform.opacity <= 0:
                continue
            placed = apply_ring_rotation(label.transform, frame.rotation, self.canvas_size)
            # Undo the label's own rotation around its center
            local_x, local_y = rotate_about(position, (placed.x, placed.y), -placed.rotation)
            half_w = label.width * placed.scale / 2
            half_h = label.height * placed.scale / 2
            if abs(local_x - placed.x) <= half_w and abs(local_y - placed.y) <= half_h:
                logger.debug("hit %r at %s", label.node.caption, position)
                return label.node
        return None

    def tap(self, position: tuple[float, float]) -> Node | None:
        """Descend into the label under position, if any."""
        node = self.label_at(position)
        if node is not None:
            self.open(node.index)
        return node

    def open(self, index: int) -> None:
        self.navigation.descend(index)
        self.hovered_index = None

    def hover(self, position: tuple[float, float] | None) -> Node | None:
        """Track the label under the pointer for the hover scale hint."""
        node = self.label_at(position) if position is not None else None
        if node is None:
            self.hovered_index = None
        else:
            siblings = self.siblings()
            self.hovered_index = next(
                (i for i, sibling in enumerate(siblings) if sibling.index == node.index), None
            )
        return node

    def back(self) -> None:
        self.navigation.ascend()
        self.hovered_index = None

    def jump_to(self, index: int) -> bool:
        jumped = self.navigation.jump_to(index)
        if jumped:
            self.hovered_index = None
        return jumped

    def set_alignment(self, alignment: LabelAlignment) -> None:
        self.view.alignment = alignment

    def resize(self, canvas_size: tuple[float, float]) -> None:
        self.canvas_size = canvas_size

    def handle_drag(self, event: DragEvent) -> float:
        return self.interpreter.on_drag(event, self.canvas_size)

    def handle_magnify(self, event: MagnifyEvent) -> None:
        if event.phase is not GesturePhase.END:
            # Any pinch input takes over from a running snap-back; the view
            # already holds the settled radius
            self._animation = None

        animation = self.interpreter.on_magnify(event)
        if animation is not None:
            self._animation = animation
            self._animation_time = 0.0

    def advance(self, dt: float) -> None:
        """Advance the snap-back animation clock by dt seconds."""
        if self._animation is None:
            return
        self._animation_time += max(dt, 0.0)
        if self._animation.is_finished(self._animation_time):
            self._animation = None
            self._animation_time = 0.0

