"""
Tests for the open belt tangent solver.
"""

import math
import pytest

from pulleysim.core import BeltWrap, solve_belt_wrap, svg_path_data
from pulleysim.calculator import calculate_belt_length


def _dot(a, b):
    return a[0] * b[0] + a[1] * b[1]


def _sub(a, b):
    return (a[0] - b[0], a[1] - b[1])


class TestSolveBeltWrap:
    """Tests for solve_belt_wrap function."""

    def test_equal_radii(self):
        """Equal pulleys: parallel spans and half wraps."""
        wrap = solve_belt_wrap(100.0, 200.0, 50.0, 400.0, 200.0, 50.0)

        assert isinstance(wrap, BeltWrap)
        assert wrap.theta == pytest.approx(math.pi / 2)
        assert wrap.large_arc_1 == 0
        assert wrap.large_arc_2 == 0
        assert wrap.top_1 == pytest.approx((100.0, 150.0))
        assert wrap.top_2 == pytest.approx((400.0, 150.0))
        assert wrap.bottom_1 == pytest.approx((100.0, 250.0))
        assert wrap.bottom_2 == pytest.approx((400.0, 250.0))

    def test_top_points_above_centre_line(self):
        """Screen convention: y grows downward, so top means smaller y."""
        wrap = solve_belt_wrap(0.0, 0.0, 60.0, 300.0, 0.0, 20.0)

        assert wrap.top_1[1] < 0 < wrap.bottom_1[1]
        assert wrap.top_2[1] < 0 < wrap.bottom_2[1]

    @pytest.mark.parametrize("r1,r2", [
        (60.0, 20.0),
        (20.0, 60.0),
        (45.0, 85.0),
    ])
    def test_spans_are_tangent(self, r1, r2):
        """Each span is perpendicular to both radii at its tangent points."""
        wrap = solve_belt_wrap(0.0, 0.0, r1, 250.0, 0.0, r2)

        span = _sub(wrap.top_2, wrap.top_1)
        assert _dot(span, _sub(wrap.top_1, wrap.center_1)) == pytest.approx(0.0, abs=1e-9)
        assert _dot(span, _sub(wrap.top_2, wrap.center_2)) == pytest.approx(0.0, abs=1e-9)

        span = _sub(wrap.bottom_2, wrap.bottom_1)
        assert _dot(span, _sub(wrap.bottom_1, wrap.center_1)) == pytest.approx(0.0, abs=1e-9)
        assert _dot(span, _sub(wrap.bottom_2, wrap.center_2)) == pytest.approx(0.0, abs=1e-9)

    def test_tangent_points_on_circles(self):
        wrap = solve_belt_wrap(10.0, 5.0, 30.0, 210.0, 5.0, 70.0)

        for point in (wrap.top_1, wrap.bottom_1):
            assert math.dist(point, wrap.center_1) == pytest.approx(30.0)
        for point in (wrap.top_2, wrap.bottom_2):
            assert math.dist(point, wrap.center_2) == pytest.approx(70.0)

    def test_larger_pulley_gets_large_arc(self):
        """The belt wraps more than half way round the larger pulley."""
        wrap = solve_belt_wrap(0.0, 0.0, 80.0, 300.0, 0.0, 40.0)
        assert wrap.large_arc_1 == 1
        assert wrap.large_arc_2 == 0
        assert wrap.wrap_angle_1 > math.pi > wrap.wrap_angle_2

        wrap = solve_belt_wrap(0.0, 0.0, 40.0, 300.0, 0.0, 80.0)
        assert wrap.large_arc_1 == 0
        assert wrap.large_arc_2 == 1
        assert wrap.wrap_angle_2 > math.pi > wrap.wrap_angle_1

    def test_wrap_angles_sum_to_full_turn(self):
        wrap = solve_belt_wrap(0.0, 0.0, 80.0, 300.0, 0.0, 40.0)
        assert wrap.wrap_angle_1 + wrap.wrap_angle_2 == pytest.approx(2 * math.pi)
        assert wrap.wrap_angle_1_deg + wrap.wrap_angle_2_deg == pytest.approx(360.0)

    @pytest.mark.parametrize("x2,r1,r2", [
        (100.0, 100.0, 50.0),   # dist == |r1 - r2|: internally touching
        (30.0, 100.0, 50.0),    # nested
        (0.0, 50.0, 50.0),      # coincident
    ])
    def test_no_solution(self, x2, r1, r2):
        """No external tangent when dist <= |r1 - r2|."""
        assert solve_belt_wrap(0.0, 0.0, r1, x2, 0.0, r2) is None

    def test_just_solvable(self):
        assert solve_belt_wrap(0.0, 0.0, 100.0, 50.001, 0.0, 50.0) is not None

    @pytest.mark.parametrize("r1,r2", [
        (40.0, 80.0),
        (80.0, 40.0),
        (50.0, 50.0),
    ])
    def test_reversed_centres_are_tangent(self, r1, r2):
        """Pulley 2 left of pulley 1 gives a mirrored, still tangent wrap."""
        wrap = solve_belt_wrap(300.0, 0.0, r1, 0.0, 0.0, r2)

        span = _sub(wrap.top_2, wrap.top_1)
        assert _dot(span, _sub(wrap.top_1, wrap.center_1)) == pytest.approx(0.0, abs=1e-9)
        assert _dot(span, _sub(wrap.top_2, wrap.center_2)) == pytest.approx(0.0, abs=1e-9)

        span = _sub(wrap.bottom_2, wrap.bottom_1)
        assert _dot(span, _sub(wrap.bottom_1, wrap.center_1)) == pytest.approx(0.0, abs=1e-9)
        assert _dot(span, _sub(wrap.bottom_2, wrap.center_2)) == pytest.approx(0.0, abs=1e-9)

    def test_reversed_centres_mirror_forward_solution(self):
        """Mirroring about x = 150 maps one wrap onto the other."""
        forward = solve_belt_wrap(0.0, 0.0, 80.0, 300.0, 0.0, 40.0)
        reverse = solve_belt_wrap(300.0, 0.0, 80.0, 0.0, 0.0, 40.0)

        for a, b in ((forward.top_1, reverse.top_1), (forward.top_2, reverse.top_2),
                     (forward.bottom_1, reverse.bottom_1), (forward.bottom_2, reverse.bottom_2)):
            assert b == pytest.approx((300.0 - a[0], a[1]))
        assert reverse.length == pytest.approx(forward.length)
        assert reverse.large_arc_1 == forward.large_arc_1
        assert forward.sweep == 1
        assert reverse.sweep == 0


class TestBeltWrapLength:
    """Tests for BeltWrap.length."""

    def test_equal_radii_length(self):
        """2d + 2πr for equal pulleys."""
        wrap = solve_belt_wrap(0.0, 0.0, 75.0, 300.0, 0.0, 75.0)
        assert wrap.length == pytest.approx(600.0 + 2 * math.pi * 75.0)

    def test_matches_approximation_for_equal_pulleys(self):
        """The first-order belt length formula is exact for D1 == D2."""
        wrap = solve_belt_wrap(0.0, 0.0, 75.0, 300.0, 0.0, 75.0)
        assert wrap.length == pytest.approx(calculate_belt_length(150.0, 150.0, 300.0))

    def test_close_to_approximation_for_unequal_pulleys(self):
        """Approximation error stays small when C is large relative to D2 - D1."""
        wrap = solve_belt_wrap(0.0, 0.0, 50.0, 500.0, 0.0, 100.0)
        approx = calculate_belt_length(100.0, 200.0, 500.0)
        assert wrap.length == pytest.approx(approx, rel=1e-3)

    def test_span_length(self):
        """Span = sqrt(d² - (r1 - r2)²)."""
        wrap = solve_belt_wrap(0.0, 0.0, 80.0, 300.0, 0.0, 40.0)
        assert wrap.span_length == pytest.approx(math.sqrt(300.0 ** 2 - 40.0 ** 2))


class TestSvgPathData:
    """Tests for svg_path_data function."""

    def test_equal_radii_path(self):
        wrap = solve_belt_wrap(100.0, 200.0, 50.0, 400.0, 200.0, 50.0)
        d = svg_path_data(wrap)

        assert d == (
            "M 100 150 L 400 150 "
            "A 50 50 0 0 1 400 250 "
            "L 100 250 "
            "A 50 50 0 0 1 100 150"
        )

    def test_flags_in_path(self):
        """Large-arc flags follow the radii, sweep is always 1."""
        wrap = solve_belt_wrap(0.0, 0.0, 80.0, 300.0, 0.0, 40.0)
        parts = svg_path_data(wrap).split(" A ")

        arc_2 = parts[1].split()
        arc_1 = parts[2].split()
        assert arc_2[:5] == ["40", "40", "0", "0", "1"]
        assert arc_1[:5] == ["80", "80", "0", "1", "1"]

    def test_path_is_closed(self):
        """The final arc returns to the starting point."""
        wrap = solve_belt_wrap(0.0, 0.0, 33.3, 210.0, 0.0, 71.7)
        tokens = svg_path_data(wrap).split()

        assert tokens[0] == "M"
        assert tokens[1:3] == tokens[-2:]
