"""Label alignment relative to the ring."""

from enum import Enum


class LabelAlignment(Enum):
    """Which edge of a label the ring passes through."""

    LEADING = "leading"  # Outer edge anchors to the ring
    CENTERED = "centered"
    TRAILING = "trailing"  # Inner edge anchors to the ring

    @property
    def offset_multiplier(self) -> float:
        if self is LabelAlignment.LEADING:
            return 1.0
        if self is LabelAlignment.TRAILING:
            return -1.0
        return 0.0
