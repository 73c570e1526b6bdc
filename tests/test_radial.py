"""Tests for the radial layout engine."""

import math

import pytest

from radial_hierarchy.layout.alignment import LabelAlignment
from radial_hierarchy.layout.metrics import estimate_label_size, make_measure
from radial_hierarchy.layout.radial import (
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


class TestSlotAngles:
    """Tests for slot_angles."""

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 7, 12, 31])
    def test_even_spacing_sums_to_full_circle(self, count):
        """Adjacent slots are 360/count apart and wrap to a full circle."""
        angles = slot_angles(count)
        step = 360.0 / count

        gaps = [b - a for a, b in zip(angles, angles[1:])]
        gaps.append(angles[0] + 360.0 - angles[-1])

        assert gaps == pytest.approx([step] * count)
        assert sum(gaps) == pytest.approx(360.0)

    def test_starting_phase(self):
        """First slot is one step before 180 degrees."""
        assert slot_angles(4) == [90.0, 180.0, 270.0, 360.0]
        assert slot_angles(1) == [-180.0]

    def test_empty(self):
        assert slot_angles(0) == []


class TestScaleAndOpacity:
    """Tests for label_scale and label_opacity."""

    @pytest.mark.parametrize(
        "radius,expected",
        [(0.05, 0.0), (0.15, 0.5), (0.25, 1.0), (-0.05, 0.0), (-0.15, 0.5), (0.8, 1.0)],
    )
    def test_opacity_ramp(self, radius, expected):
        """Labels are hidden near the center and fade in up to 0.2."""
        assert label_opacity(radius) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "radius,expected",
        [(0.4, 1.0), (0.2, 0.5), (0.0, 0.4), (0.1, 0.4), (0.8, 2.0), (-0.6, 1.5)],
    )
    def test_scale_clamped(self, radius, expected):
        """Scale follows |radius| / 0.4 within [0.4, 2.0]."""
        assert label_scale(radius) == pytest.approx(expected)


class TestComputeLabelTransform:
    """Tests for compute_label_transform."""

    def test_four_labels_on_wide_canvas(self, canvas):
        """Positions are circular on a 4:3 canvas after aspect correction."""
        expected = [(400, 460, 90), (240, 300, 180), (400, 140, -90), (560, 300, 0)]
        for i, (x, y, rotation) in enumerate(expected):
            t = compute_label_transform(4, i, 0.4, LabelAlignment.CENTERED, 30, canvas)
            assert (t.x, t.y) == pytest.approx((x, y))
            assert t.rotation == pytest.approx(rotation, abs=1e-9)

    def test_single_label_at_base_angle(self, canvas):
        """One sibling sits at the left of the ring."""
        t = compute_label_transform(1, 0, 0.4, LabelAlignment.CENTERED, 0, canvas)
        assert (t.x, t.y) == pytest.approx((240, 300))
        assert abs(t.rotation) == pytest.approx(180)

    def test_screen_distance_is_radius_times_center_x(self, canvas):
        """Every label lies on a circle of |radius| * center_x pixels."""
        for i in range(7):
            t = compute_label_transform(7, i, 0.5, LabelAlignment.CENTERED, 0, canvas)
            distance = math.hypot(t.x - 400, t.y - 300)
            assert distance == pytest.approx(200)

    @pytest.mark.parametrize(
        "alignment,expected_x",
        [
            (LabelAlignment.LEADING, 600),
            (LabelAlignment.CENTERED, 560),
            (LabelAlignment.TRAILING, 520),
        ],
    )
    def test_alignment_shifts_by_half_width(self, canvas, alignment, expected_x):
        """A 40px half width moves the label by 0.1 of center_x."""
        t = compute_label_transform(4, 3, 0.4, alignment, 40, canvas)
        assert t.x == pytest.approx(expected_x)
        assert t.y == pytest.approx(300)

    def test_labels_angle_added(self, canvas):
        t = compute_label_transform(4, 0, 0.4, LabelAlignment.CENTERED, 0, canvas, labels_angle=15)
        assert t.rotation == pytest.approx(105)

    def test_inverted_ring_mirrors_positions(self, canvas):
        """A negative radius puts labels on the opposite side."""
        t = compute_label_transform(4, 0, -0.4, LabelAlignment.CENTERED, 0, canvas)
        assert (t.x, t.y) == pytest.approx((400, 140))
        assert t.rotation == pytest.approx(-90)
        assert t.scale == pytest.approx(1.0)

    def test_hover_multiplies_scale(self, canvas):
        plain = compute_label_transform(3, 1, 0.4, LabelAlignment.LEADING, 20, canvas)
        hovered = compute_label_transform(3, 1, 0.4, LabelAlignment.LEADING, 20, canvas, hovered=True)
        assert hovered.scale == pytest.approx(plain.scale * 1.2)
        assert (hovered.x, hovered.y) == (plain.x, plain.y)

    def test_pure(self, canvas):
        """Identical inputs give identical transforms."""
        args = (5, 2, 0.37, LabelAlignment.TRAILING, 23.5, canvas)
        assert compute_label_transform(*args) == compute_label_transform(*args)

    def test_zero_canvas(self):
        """A zero-sized canvas still yields finite numbers."""
        t = compute_label_transform(3, 0, 0.4, LabelAlignment.LEADING, 20, (0, 0))
        for value in (t.x, t.y, t.rotation, t.scale, t.opacity):
            assert math.isfinite(value)


class TestLayoutLabels:
    """Tests for layout_labels."""

    def test_empty_sibling_set(self, canvas):
        assert layout_labels([], RadialViewState(), canvas) == []

    def test_one_transform_per_caption(self, canvas):
        view = RadialViewState(radius=0.5, alignment=LabelAlignment.LEADING)
        captions = ["cheese", "eggs", "toast"]

        transforms = layout_labels(captions, view, canvas)

        assert len(transforms) == 3
        for i, (caption, t) in enumerate(zip(captions, transforms)):
            half_width = estimate_label_size(caption)[0] / 2
            assert t == compute_label_transform(
                3, i, 0.5, LabelAlignment.LEADING, half_width, canvas
            )

    def test_custom_measure(self, canvas):
        """Wider labels are pushed further out with leading alignment."""
        view = RadialViewState(radius=0.4, alignment=LabelAlignment.LEADING)
        small = layout_labels(["abc"], view, canvas, measure=make_measure(10))
        large = layout_labels(["abc"], view, canvas, measure=make_measure(30))

        assert math.hypot(large[0].x - 400, large[0].y - 300) > math.hypot(
            small[0].x - 400, small[0].y - 300
        )

    def test_hovered_index(self, canvas):
        view = RadialViewState()
        transforms = layout_labels(["a", "b"], view, canvas, hovered_index=1)
        assert transforms[1].scale == pytest.approx(transforms[0].scale * 1.2)


class TestRingRotation:
    """Tests for apply_ring_rotation and ring_radius_pixels."""

    def test_rotation_moves_position_and_angle(self, canvas):
        t = LabelTransform(x=560, y=300, rotation=0, scale=1, opacity=1)
        placed = apply_ring_rotation(t, 90, canvas)
        assert (placed.x, placed.y) == pytest.approx((400, 460))
        assert placed.rotation == pytest.approx(90)

    def test_unbounded_rotation(self, canvas):
        """Accumulated rotation beyond 360 behaves like its remainder."""
        t = LabelTransform(x=560, y=300, rotation=0, scale=1, opacity=1)
        a = apply_ring_rotation(t, 30, canvas)
        b = apply_ring_rotation(t, 30 + 720, canvas)
        assert (a.x, a.y) == pytest.approx((b.x, b.y))

    def test_ring_radius_pixels(self, canvas):
        assert ring_radius_pixels(-0.5, canvas) == pytest.approx(200)


class TestEstimateLabelSize:
    """Tests for estimate_label_size."""

    def test_strips_whitespace(self):
        assert estimate_label_size("  eggs ") == pytest.approx((41.6, 27.6))

    def test_font_size_scales(self):
        width, height = estimate_label_size("ab", font_size=20, padding=0)
        assert (width, height) == pytest.approx((24, 28))
