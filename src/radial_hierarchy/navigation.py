"""Navigation state: the selected node and the breadcrumb path to it."""

import logging
from dataclasses import dataclass, field

from .hierarchy import ROOT_INDEX

logger = logging.getLogger(__name__)


@dataclass
class NavigationState:
    """Current node plus the ordered stack of ancestors above it."""

    current_index: int = ROOT_INDEX
    ancestry: list[int] = field(default_factory=list)

    @property
    def can_ascend(self) -> bool:
        return self.current_index != ROOT_INDEX

    def descend(self, target: int) -> None:
        """Select a child of the current node.

        The target is not validated; it always comes from the sibling set on
        screen. An unknown index lands on an empty ring.
        """
        if self.current_index >= 0:
            self.ancestry.append(self.current_index)
        self.current_index = target
        logger.debug("descend -> %d (path %s)", target, self.ancestry)

    def ascend(self) -> None:
        """Return to the parent; a no-op at the root."""
        if self.ancestry:
            self.current_index = self.ancestry.pop()
        else:
            self.current_index = ROOT_INDEX
        logger.debug("ascend -> %d", self.current_index)

    def jump_to(self, target: int) -> bool:
        """Jump back to an ancestor on the breadcrumb path.

        Args:
            target: Index of an ancestor in the current path.

        Returns:
            True if the target was on the path and the jump happened.
        """
        try:
            position = self.ancestry.index(target)
        except ValueError:
            return False

        del self.ancestry[position:]
        self.current_index = target
        logger.debug("jump_to -> %d", target)
        return True

    def breadcrumb(self) -> list[int]:
        """Ancestry followed by the current node, without the root sentinel."""
        return [index for index in [*self.ancestry, self.current_index] if index != ROOT_INDEX]
