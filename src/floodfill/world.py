from __future__ import annotations

from dataclasses import dataclass

from esper import World

from floodfill.config import FloodFillConfig
from floodfill.events.bus import EventBus
from floodfill.rendering.tile_surface import TileSurface
from floodfill.systems.animation_queue import AnimationQueue
from floodfill.systems.controller import FloodFillController
from floodfill.systems.grid import GridSystem
from floodfill.systems.playback import PlaybackScheduler
from floodfill.utils.interval_timer import IntervalTimer


@dataclass(slots=True)
class Session:
    """Everything one visualizer instance owns. Sessions share nothing."""
    world: World
    event_bus: EventBus
    config: FloodFillConfig
    grid: GridSystem
    surface: TileSurface
    queue: AnimationQueue
    scheduler: PlaybackScheduler
    controller: FloodFillController


def create_world() -> World:
    return World()


def create_session(
    event_bus: EventBus,
    config: FloodFillConfig | None = None,
    *,
    surface_size: int | None = None,
    timer: IntervalTimer | None = None,
) -> Session:
    """Wire grid, surface, queue, scheduler and controller onto one bus.

    ``surface_size`` defaults to the preferred size; the window resizes the
    session afterwards through EVENT_SURFACE_RESIZED.
    """
    config = config or FloodFillConfig()
    if surface_size is None:
        surface_size = config.preferred_surface_size
    world = create_world()
    grid = GridSystem(world, event_bus, surface_size=surface_size, tile_size=config.tile_size)
    surface = TileSurface(grid.board.surface_size, config.tile_size)
    queue = AnimationQueue()
    scheduler = PlaybackScheduler(world, event_bus, queue, surface, config, timer=timer)
    controller = FloodFillController(world, event_bus, grid, surface, scheduler, config)
    return Session(
        world=world,
        event_bus=event_bus,
        config=config,
        grid=grid,
        surface=surface,
        queue=queue,
        scheduler=scheduler,
        controller=controller,
    )
