from __future__ import annotations

import logging
from typing import Sequence

from esper import World

from floodfill.components.draw_event import DrawEvent, DrawPhase
from floodfill.components.playback_state import PlaybackMode, PlaybackState
from floodfill.config import FloodFillConfig
from floodfill.events.bus import (
    EVENT_PHASE_ADVANCED,
    EVENT_PLAYBACK_STARTED,
    EVENT_PLAYBACK_STOPPED,
    EVENT_SPEED_CHANGED,
    EVENT_TICK,
    EventBus,
)
from floodfill.systems.animation_queue import AnimationQueue, FillRenderer
from floodfill.utils.interval_timer import IntervalTimer

logger = logging.getLogger(__name__)


class PlaybackScheduler:
    """Clocked consumer of the animation queue (IDLE <-> ACTIVE).

    Frame ticks (``EVENT_TICK``, dt in seconds) feed an IntervalTimer; every
    completed interval runs one queue phase. Tests may call ``tick`` directly
    to single-step.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        queue: AnimationQueue,
        renderer: FillRenderer,
        config: FloodFillConfig,
        *,
        timer: IntervalTimer | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.queue = queue
        self.renderer = renderer
        self.config = config
        self.timer = timer or IntervalTimer()
        self._levels = config.speed_levels()
        self._level = config.initial_level()
        self._mode = PlaybackMode.IDLE
        self.state_entity = self.world.create_entity(PlaybackState())
        self._sync_state()
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def mode(self) -> PlaybackMode:
        return self._mode

    @property
    def active(self) -> bool:
        return self._mode is PlaybackMode.ACTIVE

    @property
    def speed(self) -> float:
        return self._levels[self._level]

    @property
    def interval(self) -> int:
        return self.config.interval_for(self.speed)

    @property
    def can_increase(self) -> bool:
        return self._level < len(self._levels) - 1

    @property
    def can_decrease(self) -> bool:
        return self._level > 0

    def start(self, events: Sequence[DrawEvent]) -> bool:
        if self.active:
            logger.debug("fill ignored: playback already active")
            return False
        if not events:
            return False
        count = self.queue.load(events)
        self._mode = PlaybackMode.ACTIVE
        self.timer.start(self.interval)
        self._sync_state()
        logger.info("playback started: %d draw events every %dms", count, self.interval)
        self.event_bus.emit(EVENT_PLAYBACK_STARTED, events=count, interval=self.interval)
        return True

    def tick(self) -> bool:
        """Run one phase. Returns False when idle or when the drained queue stops playback."""
        if not self.active:
            return False
        step = self.queue.front_step
        phase = self.queue.front_phase
        before = len(self.queue)
        if not self.queue.advance(self.renderer):
            self._halt("drained", remaining=0)
            return False
        count = before - len(self.queue) if phase is DrawPhase.PENDING_COMMIT else self._group_size(step)
        self._sync_state()
        self.event_bus.emit(EVENT_PHASE_ADVANCED, step=step, phase=phase, count=count)
        return True

    def stop(self) -> bool:
        """Cancel playback now, discarding queued events; committed paints stay."""
        discarded = self.queue.clear()
        for event in discarded:
            if event.phase is DrawPhase.PENDING_COMMIT:
                self.renderer.unhighlight(event.tile)
        if not self.active:
            return False
        self._halt("cancelled", remaining=len(discarded))
        return True

    def increase_speed(self) -> bool:
        return self._change_level(+1)

    def decrease_speed(self) -> bool:
        return self._change_level(-1)

    def change_speed(self, increase: bool) -> bool:
        return self.increase_speed() if increase else self.decrease_speed()

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt')
        if dt is None or not self.active:
            return
        try:
            elapsed_ms = float(dt) * 1000.0
        except (TypeError, ValueError):
            return
        fired = self.timer.advance(elapsed_ms)
        for _ in range(fired):
            if not self.tick():
                break

    def _change_level(self, delta: int) -> bool:
        target = self._level + delta
        if target < 0 or target >= len(self._levels):
            logger.debug("speed change ignored at bound %.2fx", self.speed)
            return False
        self._level = target
        if self.active:
            self.timer.restart(self.interval)
        self._sync_state()
        self.event_bus.emit(
            EVENT_SPEED_CHANGED,
            speed=self.speed,
            interval=self.interval,
            can_increase=self.can_increase,
            can_decrease=self.can_decrease,
        )
        return True

    def _halt(self, reason: str, remaining: int) -> None:
        self.timer.stop()
        self._mode = PlaybackMode.IDLE
        self._sync_state()
        logger.info("playback stopped (%s)", reason)
        self.event_bus.emit(EVENT_PLAYBACK_STOPPED, reason=reason, remaining=remaining)

    def _group_size(self, step: int | None) -> int:
        size = 0
        for event in self.queue.events():
            if event.step != step:
                break
            size += 1
        return size

    def _sync_state(self) -> None:
        state = self.world.component_for_entity(self.state_entity, PlaybackState)
        state.mode = self._mode
        state.speed = self.speed
        state.can_increase = self.can_increase
        state.can_decrease = self.can_decrease
