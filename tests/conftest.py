"""Pytest fixtures for radial hierarchy tests."""

import pytest

from radial_hierarchy.hierarchy import Hierarchy
from radial_hierarchy.layout.alignment import LabelAlignment
from radial_hierarchy.layout.radial import RadialViewState
from radial_hierarchy.session import RadialSession


@pytest.fixture
def breakfast_elements() -> list[dict]:
    """breakfast (depth 0) with children cheese and eggs."""
    return [
        {"caption": "breakfast", "depth": 0},
        {"caption": "cheese", "depth": 1},
        {"caption": "eggs", "depth": 1},
    ]


@pytest.fixture
def menu_elements() -> list[dict]:
    """Three-level menu with two top-level categories."""
    return [
        {"caption": "breakfast", "depth": 0},  # 0
        {"caption": "cheese", "depth": 1},  # 1
        {"caption": "eggs", "depth": 1},  # 2
        {"caption": "fried", "depth": 2},  # 3
        {"caption": "boiled", "depth": 2},  # 4
        {"caption": "scrambled", "depth": 2},  # 5
        {"caption": "toast", "depth": 1},  # 6
        {"caption": "lunch", "depth": 0},  # 7
        {"caption": "soup", "depth": 1},  # 8
    ]


@pytest.fixture
def menu(menu_elements) -> Hierarchy:
    return Hierarchy.from_elements(menu_elements)


@pytest.fixture
def four_labels() -> Hierarchy:
    """Four top-level nodes and nothing below them."""
    return Hierarchy.from_elements(
        [{"caption": c, "depth": 0} for c in ("alpha", "beta", "gamma", "delta")]
    )


@pytest.fixture
def canvas() -> tuple[float, float]:
    return (800.0, 600.0)


@pytest.fixture
def centered_session(four_labels, canvas) -> RadialSession:
    """Session over four labels with centered alignment and radius 0.4."""
    view = RadialViewState(rotation=0.0, radius=0.4, alignment=LabelAlignment.CENTERED)
    return RadialSession(four_labels, canvas, view=view)
