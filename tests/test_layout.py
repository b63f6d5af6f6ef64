"""Tests for spinner/layout.py: bearing positions and outline path."""
import math
import pytest
from shared.geometry import parse_path, path_vertices, poly_area, angle_of
from spinner.layout import (
    SchematicLayout, compute_schematic_layout, bearing_points, build_outline,
)


class TestDefaultLayout:
    def test_returns_schematic_layout(self, layout3):
        assert isinstance(layout3, SchematicLayout)

    def test_radii(self, layout3):
        assert layout3.bearing_radius == 9
        assert layout3.spinner_radius == 43.5

    def test_center(self, layout3):
        assert layout3.center == (53.5, 53.5)

    def test_first_bearing_on_x_axis(self, layout3):
        bp = layout3.bearing_points[0]
        assert bp.index == 0
        assert bp.angle == 0
        assert bp.center == (83.5, 53.5)

    def test_bearing_points_read_only(self, layout3):
        assert isinstance(layout3.bearing_points, tuple)
        with pytest.raises(AttributeError):
            layout3.bearing_points.append(None)
        assert len(layout3.bearing_points) == 3

    def test_outline_starts_move_then_line(self, layout3):
        tokens = layout3.outline.split(" ")
        assert tokens[0] == "M"
        assert tokens[3] == "L"
        assert layout3.outline.endswith(" Z")

    def test_outline_token_sequence(self, layout3):
        letters = [c for c, _ in parse_path(layout3.outline)]
        assert letters == ["M", "L", "L", "L"] + ["L", "L", "L", "L"] * 2 + ["Z"]

    def test_twelve_vertices(self, outline3_verts):
        assert len(outline3_verts) == 12

    def test_vertex_radii(self, layout3, outline3_verts):
        """Edges and tips lie on the spinner radius, waists at a third of it."""
        c = layout3.center
        for i, (x, y) in enumerate(outline3_verts):
            r = math.hypot(x - c[0], y - c[1])
            expected = layout3.spinner_radius / 3 if i % 4 == 3 else layout3.spinner_radius
            assert abs(r - expected) < 1e-9, f"vertex {i}: r={r}"

    def test_outline_area_positive(self, outline3_verts):
        assert poly_area(outline3_verts) > 0


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 12])
class TestBranchCountProperties:
    def test_one_move_and_one_close(self, n):
        layout = compute_schematic_layout(n, 30, 18)
        letters = [c for c, _ in parse_path(layout.outline)]
        assert letters.count("M") == 1
        assert letters[0] == "M"
        assert letters.count("Z") == 1
        assert letters[-1] == "Z"

    def test_bearing_count(self, n):
        layout = compute_schematic_layout(n, 30, 18)
        assert len(layout.bearing_points) == n
        assert [bp.index for bp in layout.bearing_points] == list(range(n))

    def test_rotational_symmetry(self, n):
        layout = compute_schematic_layout(n, 30, 18)
        step = 2 * math.pi / n
        assert abs(layout.angle_step - step) < 1e-15
        pts = layout.bearing_points
        for a, b in zip(pts, pts[1:]):
            d = (angle_of(layout.center, b.center) - angle_of(layout.center, a.center)) % (2 * math.pi)
            assert abs(d - step) < 1e-9

    def test_bearings_on_internal_radius(self, n):
        layout = compute_schematic_layout(n, 30, 18)
        cx, cy = layout.center
        for bp in layout.bearing_points:
            assert abs(math.hypot(bp.center[0] - cx, bp.center[1] - cy) - 30) < 1e-9

    def test_four_vertices_per_branch(self, n):
        layout = compute_schematic_layout(n, 30, 18)
        assert len(path_vertices(layout.outline)) == 4 * n


class TestEdgeCases:
    def test_single_branch(self):
        layout = compute_schematic_layout(1, 30, 18)
        assert layout.angle_step == 2 * math.pi
        assert len(layout.bearing_points) == 1
        assert layout.bearing_points[0].angle == 0
        assert layout.outline.count("Z") == 1
        assert len(layout.outline.split(" ")) == 3 * 4 + 1

    def test_zero_branches_is_degenerate_not_an_error(self):
        layout = compute_schematic_layout(0, 30, 18)
        assert not math.isfinite(layout.angle_step)
        assert layout.bearing_points == ()
        assert layout.outline == "Z"

    def test_zero_step_angles_are_non_finite(self):
        """A point placed with the infinite angle step has non-finite coordinates."""
        layout = compute_schematic_layout(0, 30, 18)
        pts = bearing_points(layout.center, 1, 30, layout.angle_step)
        assert math.isnan(pts[0].angle)
        x, y = pts[0].center
        assert math.isnan(x) and math.isnan(y)

    def test_negative_branches(self):
        layout = compute_schematic_layout(-3, 30, 18)
        assert layout.angle_step < 0
        assert layout.bearing_points == ()
        assert layout.outline == "Z"

    def test_zero_bearing_size(self):
        layout = compute_schematic_layout(3, 30, 0)
        assert layout.bearing_radius == 0
        assert layout.spinner_radius == 30

    def test_odd_bearing_size_true_division(self):
        layout = compute_schematic_layout(3, 30, 17)
        assert layout.bearing_radius == 8.5


class TestBuildOutline:
    def test_four_branch_tip(self):
        d = build_outline((53.5, 53.5), 4, 43.5, math.pi / 2)
        tokens = d.split(" ")
        assert tokens[3:6] == ["L", "97", "53.5"]

    def test_fresh_builder_per_call(self):
        a = build_outline((0, 0), 3, 10, 2 * math.pi / 3)
        b = build_outline((0, 0), 3, 10, 2 * math.pi / 3)
        assert a == b
        assert a.count("M") == 1
