from floodfill.components.board import Board
from floodfill.events.bus import EventBus, EVENT_GRID_REBUILT
from floodfill.systems.grid import GridSystem
from floodfill.world import create_world


def _grid(surface_size=30, tile_size=10):
    bus = EventBus()
    world = create_world()
    return bus, world, GridSystem(world, bus, surface_size=surface_size, tile_size=tile_size)


def test_board_component_exists():
    _, world, grid = _grid(60, 10)
    boards = list(world.get_component(Board))
    assert len(boards) == 1
    _, board = boards[0]
    assert board.rows == 6 and board.cols == 6
    assert board.surface_size == 60


def test_surface_size_truncates_to_whole_tiles():
    _, _, grid = _grid(35, 10)
    assert grid.rows == 3 and grid.cols == 3
    assert grid.board.surface_size == 30


def test_every_in_bounds_coordinate_maps_to_one_tile():
    _, _, grid = _grid(30, 10)
    seen = set()
    for r in range(3):
        for c in range(3):
            tile = grid.tile_at(r, c)
            assert tile is not None and tile.position == (r, c)
            seen.add(id(tile))
    assert len(seen) == 9
    assert len(list(grid.tiles())) == 9


def test_out_of_bounds_lookups_return_none():
    _, _, grid = _grid(30, 10)
    assert grid.tile_at(-1, 0) is None
    assert grid.tile_at(0, 3) is None
    assert grid.tile_at(3, 3) is None


def test_tile_at_point_maps_surface_coordinates():
    _, _, grid = _grid(30, 10)
    assert grid.tile_at_point(0, 0).position == (0, 0)
    assert grid.tile_at_point(29.9, 5).position == (0, 2)
    assert grid.tile_at_point(15, 25).position == (2, 1)
    assert grid.tile_at_point(-0.1, 5) is None
    assert grid.tile_at_point(5, 30) is None
    assert grid.tile_at_point(30, 5) is None


def test_neighbors_are_orthogonal_and_in_bounds():
    _, _, grid = _grid(30, 10)
    center = [t.position for t in grid.neighbors(grid.tile_at(1, 1))]
    assert center == [(0, 1), (2, 1), (1, 2), (1, 0)]
    corner = [t.position for t in grid.neighbors(grid.tile_at(0, 0))]
    assert corner == [(1, 0), (0, 1)]
    edge = [t.position for t in grid.neighbors(grid.tile_at(2, 1))]
    assert edge == [(1, 1), (2, 2), (2, 0)]


def test_reset_clears_every_flag():
    _, _, grid = _grid(30, 10)
    grid.tile_at(0, 0).mark_visited()
    grid.tile_at(1, 1).mark_painted()
    grid.tile_at(2, 2).pending_check = True
    grid.reset()
    assert all(not t.visited and not t.painted and not t.pending_check for t in grid.tiles())


def test_rebuild_replaces_tiles_and_announces_dimensions():
    bus, world, grid = _grid(30, 10)
    old = grid.tile_at(0, 0)
    old.mark_painted()
    rebuilt = {}
    bus.subscribe(EVENT_GRID_REBUILT, lambda sender, **kw: rebuilt.update(kw))
    grid.rebuild(50)
    assert rebuilt == {"rows": 5, "cols": 5, "surface_size": 50}
    assert grid.tile_at(4, 4) is not None
    fresh = grid.tile_at(0, 0)
    assert fresh is not old and not fresh.painted
    assert not grid.contains(old)
    assert len(list(grid.tiles())) == 25
