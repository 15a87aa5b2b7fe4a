import pytest

from fractview.palette import Color
from fractview.render import (
    HEIGHT,
    WIDTH,
    FractalKind,
    FractalState,
    pixel_color,
    render,
)


def small_state(**kwargs):
    return FractalState(width=kwargs.pop("width", 21), height=kwargs.pop("height", 21), **kwargs)


def test_defaults_match_source():
    state = FractalState()
    assert state.width == WIDTH == 800
    assert state.height == HEIGHT == 800
    assert state.max_iteration == 42
    assert state.escape_value == 4
    assert state.zoom == 1.0
    assert (state.shift_x, state.shift_y) == (0.0, 0.0)


def test_reset_restores_view():
    state = FractalState(max_iteration=7, zoom=3.0, shift_x=1.0, shift_y=-2.0, escape_value=9.0)
    state.reset()
    fresh = FractalState()
    assert state == fresh


def test_reset_keeps_julia_parameters():
    state = FractalState(kind=FractalKind.JULIA, title="julia", julia_x=0.285, julia_y=0.01, zoom=2.0)
    state.reset()
    assert state.kind is FractalKind.JULIA
    assert (state.julia_x, state.julia_y) == (0.285, 0.01)


def test_origin_is_inside_mandelbrot():
    state = FractalState(width=801, height=801)
    assert pixel_color(state, 400, 400) == Color.TURQUOISE


def test_corner_escapes_immediately():
    state = FractalState()
    assert pixel_color(state, 0, 0) == Color.BLACK


def test_no_iterations_paints_everything_turquoise():
    state = small_state(max_iteration=0)
    image = render(state)
    assert image.getcolors() == [(21 * 21, Color.TURQUOISE.rgb())]


def test_julia_with_far_constant_is_all_black():
    state = small_state(kind=FractalKind.JULIA, title="julia", julia_x=10.0, julia_y=0.0)
    image = render(state)
    assert image.getcolors() == [(21 * 21, Color.BLACK.rgb())]


def test_julia_origin_with_zero_constant_stays_bounded():
    state = FractalState(kind=FractalKind.JULIA, title="julia", width=801, height=801)
    assert pixel_color(state, 400, 400) == Color.TURQUOISE


def test_render_size_follows_state():
    state = small_state(width=13, height=7)
    image = render(state)
    assert image.size == (13, 7)
    assert image.mode == "RGB"


def test_render_matches_pixel_color_at_center():
    state = small_state()
    image = render(state)
    assert image.getpixel((10, 10)) == Color.TURQUOISE.rgb()
    assert image.getpixel((0, 0)) == Color.BLACK.rgb()


@pytest.mark.parametrize("max_iteration", [1, 5, 42, 100])
def test_colors_stay_within_white(max_iteration):
    state = small_state(max_iteration=max_iteration)
    for y in range(state.height):
        for x in range(state.width):
            color = pixel_color(state, x, y)
            assert 0 <= color <= Color.WHITE


def test_mandelbrot_symmetric_about_real_axis():
    state = FractalState(width=801, height=801)
    for x in range(0, 801, 40):
        assert pixel_color(state, x, 100) == pixel_color(state, x, 700)


def test_shift_moves_view():
    state = FractalState(width=801, height=801, shift_x=-2.0, shift_y=-2.0)
    assert pixel_color(state, 800, 800) == Color.TURQUOISE