import math

import pytest

from radialcolor.core import (
    TAU, AlphaChanged, AlphaSlider, BandChanged, Channel, ColorBand, ColorTuple, Rect, Rgba, TupleType, deg_to_rad,
)
from radialcolor.core.math import polar_point

CENTER = (230.0, 262.0)


def make_band(begin_deg, end_deg, radius=100.0, width=20.0, tuple_type=TupleType.RGB, channel=Channel.A):
    return ColorBand(tuple_type, channel, CENTER, radius, deg_to_rad(begin_deg), deg_to_rad(end_deg), width)


def make_circle(radius=160.0):
    return ColorBand(TupleType.HSB, Channel.A, CENTER, radius, 0.0, TAU, 24.0)


# --- geometry


def test_band_normalizes_its_span():
    band = make_band(-55, 55)
    assert band.arc_begin == pytest.approx(deg_to_rad(305))
    assert band.arc_end == pytest.approx(deg_to_rad(55))
    assert band.sweep == pytest.approx(deg_to_rad(110))
    assert not band.is_circle


def test_full_circle_band():
    band = make_circle()
    assert band.is_circle
    assert band.sweep == TAU
    assert band.inner_radius == 148.0
    assert band.outer_radius == 172.0


def test_band_rejects_degenerate_size():
    with pytest.raises(ValueError):
        make_band(0, 90, radius=0.0)
    with pytest.raises(ValueError):
        make_band(0, 90, width=-1.0)


@pytest.mark.parametrize("theta_deg, inside", [
    (0, True),
    (355, True),
    (10, True),
    (350, True),
    (180, False),
    (20, False),
])
def test_contains_polar_on_wraparound_band(theta_deg, inside):
    band = make_band(350, 10)
    assert band.contains_polar(100.0, deg_to_rad(theta_deg)) is inside


def test_contains_polar_checks_distance():
    band = make_band(350, 10)
    assert band.contains_polar(90.0, 0.0)
    assert band.contains_polar(110.0, 0.0)
    assert not band.contains_polar(89.9, 0.0)
    assert not band.contains_polar(110.1, 0.0)


def test_contains_polar_simple_span():
    band = make_band(65, 175)
    assert band.contains_polar(100.0, deg_to_rad(120))
    assert not band.contains_polar(100.0, deg_to_rad(60))
    assert not band.contains_polar(100.0, deg_to_rad(300))


def test_circle_contains_any_angle_in_ring():
    band = make_circle()
    for deg in (0, 90, 181, 359):
        assert band.contains_polar(160.0, deg_to_rad(deg))
    assert not band.contains_polar(140.0, 1.0)


def test_contains_point_uses_world_coordinates():
    band = make_circle()
    assert band.contains_point(polar_point(CENTER, 160.0, 2.0))
    assert not band.contains_point(CENTER)


# --- pointer path


def test_circle_band_endpoints():
    band = make_circle()
    event = band.update_from_screen(0.0)
    assert event == BandChanged(TupleType.HSB, Channel.A, 0.0)
    assert band.update_from_screen(TAU).value == 1.0


def test_circle_band_midpoint_from_point():
    band = make_circle()
    event = band.update_from_point((CENTER[0] - 160.0, CENTER[1]))
    assert event.value == pytest.approx(0.5)
    assert band.theta == pytest.approx(math.pi)


def test_simple_band_clamps_to_bounds():
    band = make_band(65, 175)
    assert band.update_from_screen(deg_to_rad(10)).value == 0.0
    assert band.theta == band.arc_begin
    assert band.update_from_screen(deg_to_rad(200)).value == 1.0
    assert band.theta == band.arc_end
    assert band.update_from_screen(deg_to_rad(120)).value == pytest.approx(0.5)


def test_wraparound_band_value_across_zero():
    band = make_band(-55, 55)
    assert band.update_from_screen(0.0).value == pytest.approx(0.5)
    assert band.update_from_screen(deg_to_rad(330)).value == pytest.approx(25 / 110)


@pytest.mark.parametrize("theta_deg, expected_value", [
    (100, 1.0),   # closer to arc_end (55)
    (200, 0.0),   # closer to arc_begin (305)
    (290, 0.0),
    (60, 1.0),
])
def test_wraparound_gap_snaps_to_nearest_endpoint(theta_deg, expected_value):
    band = make_band(-55, 55)
    assert band.update_from_screen(deg_to_rad(theta_deg)).value == expected_value


def test_pointer_angle_outside_one_turn_is_normalized():
    circle = make_circle()
    assert circle.update_from_screen(-math.pi / 2).value == pytest.approx(0.75)
    assert circle.update_from_screen(TAU + math.pi / 2).value == pytest.approx(0.25)

    simple = make_band(65, 175)
    assert simple.update_from_screen(deg_to_rad(120) - TAU).value == pytest.approx(0.5)
    assert simple.update_from_screen(deg_to_rad(200) + 2 * TAU).value == 1.0


@pytest.mark.parametrize("theta, expected_value", [
    (-deg_to_rad(30), 25 / 110),          # 330 degrees, inside the span
    (TAU + deg_to_rad(100), 1.0),         # gap, closer to arc_end
    (deg_to_rad(200) - 2 * TAU, 0.0),     # gap, closer to arc_begin
])
def test_wraparound_band_normalizes_before_clamping(theta, expected_value):
    band = make_band(-55, 55)
    assert band.update_from_screen(theta).value == pytest.approx(expected_value)


def test_zero_sweep_band_maps_to_zero():
    band = make_band(30, 30)
    assert band.sweep == 0.0
    assert band.update_from_screen(deg_to_rad(45)).value == 0.0


# --- programmatic path


def test_update_places_handle_without_event():
    band = make_band(-55, 55)
    assert band.update(0.5) is None
    assert band.value == 0.5
    assert band.theta == pytest.approx(0.0, abs=1e-9) or band.theta == pytest.approx(TAU)


def test_update_clamps_ratio():
    band = make_circle()
    band.update(4.0)
    assert band.value == 1.0
    band.update(-1.0)
    assert band.value == 0.0
    assert band.theta == 0.0


def test_update_theta_stays_normalized():
    band = make_band(300, 100)
    band.update(1.0)
    assert 0.0 <= band.theta <= TAU
    assert band.theta == pytest.approx(deg_to_rad(100))


# --- rendering contract


def test_segments_follow_color_range():
    band = make_band(0, 90, tuple_type=TupleType.RGB)
    band.set_colors(ColorTuple(0.0, 0.0, 0.0), ColorTuple(1.0, 0.0, 0.0))
    segments = band.segments(step=3.0)
    assert len(segments) == round(band.arc_length / 3.0)
    assert segments[0].color == Rgba(0, 0, 0)
    assert segments[-1].color == Rgba(255, 0, 0)
    first = segments[0]
    assert first.inner == pytest.approx((CENTER[0] + band.inner_radius, CENTER[1]))
    assert first.outer == pytest.approx((CENTER[0] + band.outer_radius, CENTER[1]))


def test_segments_of_hsb_band_use_hsb_model():
    band = make_circle()
    band.set_colors(ColorTuple(0.0, 1.0, 1.0), ColorTuple(1.0, 1.0, 1.0))
    segments = band.segments()
    assert segments[0].color == Rgba(255, 0, 0)
    assert segments[-1].color == Rgba(255, 0, 0)


# --- alpha slider


@pytest.fixture
def slider():
    return AlphaSlider(Rect(40.0, 12.0, 380.0, 24.0))


def test_alpha_slider_maps_x_to_8bit(slider):
    assert slider.update_from_point((230.0, 24.0)) == AlphaChanged(128)
    assert slider.handle_offset == pytest.approx(190.0)


def test_alpha_slider_clamps_pointer(slider):
    assert slider.update_from_point((1000.0, 24.0)).value == 255
    assert slider.update_from_point((-5.0, 24.0)).value == 0
    assert slider.handle_offset == 0.0


def test_alpha_slider_contains_is_rectangle(slider):
    assert slider.contains_point((40.0, 12.0))
    assert slider.contains_point((420.0, 36.0))
    assert not slider.contains_point((39.0, 20.0))
    assert not slider.contains_point((100.0, 40.0))


def test_set_alpha_clamps_and_moves_handle(slider):
    slider.set_alpha(300)
    assert slider.value == 255
    assert slider.handle_offset == pytest.approx(380.0)
    slider.set_alpha(-3)
    assert slider.value == 0
    assert slider.handle_offset == 0.0


def test_alpha_slider_gradient_endpoints(slider):
    slider.set_color(Rgba(10, 20, 30, 99))
    start, end = slider.gradient
    assert start == Rgba(10, 20, 30, 0)
    assert end == Rgba(10, 20, 30, 255)


def test_zero_width_alpha_slider_degrades_to_zero():
    flat = AlphaSlider(Rect(40.0, 12.0, 0.0, 24.0))
    assert flat.update_from_point((100.0, 24.0)) == AlphaChanged(0)
    assert flat.handle_offset == 0.0
    flat.set_alpha(200)
    assert flat.handle_offset == 0.0
