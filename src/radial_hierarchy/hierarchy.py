"""Flat node array with parent pointers, built from outline parser output."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import networkx as nx
import yaml

# Synthetic root index; its children are the top-level categories
ROOT_INDEX = -1


@dataclass(frozen=True)
class Node:
    """A labeled node of the hierarchy."""

    index: int  # Position in the flat array
    caption: str
    parent_index: int = ROOT_INDEX


@dataclass
class Hierarchy:
    """Static forest of nodes in depth-first pre-order.

    Parent/child relations are kept in a DiGraph rooted at ROOT_INDEX, so the
    successors of a node are its children in parse order.
    """

    nodes: tuple[Node, ...] = ()
    graph: nx.DiGraph = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.nodes = tuple(self.nodes)
        self.graph = nx.DiGraph()
        self.graph.add_node(ROOT_INDEX)

        for position, node in enumerate(self.nodes):
            if node.index != position:
                raise ValueError(
                    f"Node {node.caption!r} has index {node.index}, expected {position}"
                )
            # Parents must appear earlier, which also rules out cycles
            if node.parent_index != ROOT_INDEX and not 0 <= node.parent_index < position:
                raise ValueError(
                    f"Node {node.caption!r} references parent {node.parent_index} "
                    "which does not precede it"
                )
            self.graph.add_edge(node.parent_index, node.index)

    @classmethod
    def from_elements(cls, elements: Iterable[Mapping]) -> "Hierarchy":
        """Build a hierarchy from parser output.

        Each element carries a caption and a depth (0 = top level). The most
        recent node seen at each depth becomes the parent of the next deeper
        node.

        Args:
            elements: Mappings with "caption" and "depth" keys, in outline order.

        Returns:
            The constructed Hierarchy.
        """
        nodes: list[Node] = []
        stack: list[int] = []  # Indices of the open ancestors, one per depth

        for element in elements:
            depth = max(int(element.get("depth", 0)), 0)
            caption = str(element["caption"])

            # Pop stack to get to parent level
            while len(stack) > depth:
                stack.pop()

            parent = stack[-1] if stack else ROOT_INDEX
            node = Node(index=len(nodes), caption=caption, parent_index=parent)
            nodes.append(node)
            stack.append(node.index)

        return cls(tuple(nodes))

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def node(self, index: int) -> Node | None:
        """Return the node at index, or None when out of range."""
        if 0 <= index < len(self.nodes):
            return self.nodes[index]
        return None

    def caption(self, index: int) -> str | None:
        node = self.node(index)
        return node.caption if node else None

    def children_of(self, index: int) -> list[Node]:
        """Return the children of a node in parse order.

        Args:
            index: Node index, or ROOT_INDEX for the top-level nodes.

        Returns:
            Child nodes; empty for leaves and unknown indices.
        """
        if index not in self.graph:
            return []
        return [self.nodes[child] for child in self.graph.successors(index)]

    def ancestors_of(self, index: int) -> list[int]:
        """Return the ancestor chain of a node, top level first."""
        node = self.node(index)
        if node is None:
            return []

        chain: list[int] = []
        parent = node.parent_index
        while parent != ROOT_INDEX:
            chain.append(parent)
            parent = self.nodes[parent].parent_index
        chain.reverse()
        return chain


def load_elements(path: Path) -> list[dict]:
    """Load serialized parser output from a YAML or JSON file.

    Args:
        path: File holding a list of {caption, depth} mappings.

    Returns:
        List of element mappings.

    Raises:
        ValueError: If the file does not hold a list of mappings with captions.
    """
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of elements")

    elements = []
    for i, item in enumerate(data):
        if not isinstance(item, Mapping) or "caption" not in item:
            raise ValueError(f"{path}: element {i} has no caption")
        elements.append(dict(item))
    return elements
