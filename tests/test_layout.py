from floodfill.ui.layout import (
    available_viewport,
    compute_surface_origin,
    compute_surface_size,
    window_to_surface,
)


def test_preferred_size_used_when_viewport_is_wide_enough():
    assert compute_surface_size(620) == 600
    assert compute_surface_size(1920) == 600


def test_narrow_viewport_shrinks_to_whole_tiles():
    # 500 - 20 margin = 480 -> largest multiple of 25 is 475
    assert compute_surface_size(500) == 475
    assert compute_surface_size(619) == 575


def test_tiny_viewport_gives_empty_surface():
    assert compute_surface_size(20) == 0
    assert compute_surface_size(5) == 0


def test_custom_tile_size_and_margin():
    assert compute_surface_size(100, tile_size=30, preferred=600, margin=5) == 90


def test_available_viewport_reserves_control_panel():
    assert available_viewport(800, 600, panel_height=56) == 544
    assert available_viewport(400, 900, panel_height=56) == 400


def test_surface_origin_centres_horizontally_below_panel():
    left, top = compute_surface_origin(800, 700, 600, panel_height=56, margin=10)
    assert left == 100
    assert top == 634


def test_window_to_surface_flips_y_axis():
    assert window_to_surface(110, 630, 100, 634) == (10, 4)


def test_preferred_size_is_rounded_down_to_whole_tiles():
    assert compute_surface_size(900, tile_size=25, preferred=610) == 600
    assert compute_surface_size(630, tile_size=25, preferred=610, margin=10) == 600
