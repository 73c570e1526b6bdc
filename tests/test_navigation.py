"""Tests for the navigation state machine."""

from radial_hierarchy.hierarchy import ROOT_INDEX
from radial_hierarchy.navigation import NavigationState


class TestNavigationState:
    """Tests for descend, ascend and jump_to."""

    def test_initial_state(self):
        """Navigation starts at the root with an empty path."""
        nav = NavigationState()
        assert nav.current_index == ROOT_INDEX
        assert nav.ancestry == []
        assert not nav.can_ascend

    def test_descend_from_root_does_not_push_sentinel(self):
        """The root sentinel never enters the ancestry."""
        nav = NavigationState()
        nav.descend(5)
        assert nav.current_index == 5
        assert nav.ancestry == []
        assert nav.can_ascend

    def test_descend_jump_ascend_scenario(self):
        """descend(5), descend(12), jump_to(5), ascend() ends at the root."""
        nav = NavigationState()
        nav.descend(5)
        nav.descend(12)
        assert nav.ancestry == [5]

        assert nav.jump_to(5)
        assert nav.ancestry == []
        assert nav.current_index == 5

        nav.ascend()
        assert nav.current_index == ROOT_INDEX

    def test_ascend_pops_path(self):
        nav = NavigationState()
        for index in (1, 2, 3):
            nav.descend(index)

        nav.ascend()
        assert nav.current_index == 2
        assert nav.ancestry == [1]

    def test_ascend_at_root_is_noop(self):
        """Repeated ascend at the root stays at the root."""
        nav = NavigationState()
        nav.ascend()
        nav.ascend()
        assert nav.current_index == ROOT_INDEX
        assert nav.ancestry == []

    def test_jump_to_unknown_is_noop(self):
        """Jumping to an index that is not an ancestor changes nothing."""
        nav = NavigationState()
        nav.descend(1)
        nav.descend(2)

        assert not nav.jump_to(7)
        assert not nav.jump_to(2)  # Current node is not on the ancestry
        assert nav.current_index == 2
        assert nav.ancestry == [1]

    def test_jump_truncates_deeper_path(self):
        """Jumping to the first ancestor drops everything after it."""
        nav = NavigationState()
        for index in (1, 2, 3, 4):
            nav.descend(index)

        nav.jump_to(2)
        assert nav.ancestry == [1]
        assert nav.current_index == 2

    def test_breadcrumb(self):
        """Breadcrumb is ancestry plus current, without the root sentinel."""
        nav = NavigationState()
        assert nav.breadcrumb() == []

        nav.descend(1)
        nav.descend(4)
        assert nav.breadcrumb() == [1, 4]

    def test_descend_unknown_index(self):
        """Descending into an unknown index is accepted without validation."""
        nav = NavigationState()
        nav.descend(999)
        assert nav.current_index == 999
