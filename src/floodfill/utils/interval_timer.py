from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class IntervalTimer:
	"""Periodic timer advanced by explicit elapsed time.

	Nothing here reads a wall clock: the owner feeds elapsed milliseconds
	through ``advance`` (normally from the frame tick), which returns how
	many periods completed. Restarting discards the partial period, like
	clearing and re-arming a browser interval.
	"""

	interval: float = 0.0
	_elapsed: float = field(init=False, default=0.0, repr=False)
	_running: bool = field(init=False, default=False, repr=False)

	@property
	def running(self) -> bool:
		return self._running

	@property
	def elapsed(self) -> float:
		return self._elapsed

	def start(self, interval: float) -> None:
		if interval <= 0:
			raise ValueError(f"interval must be positive, got {interval}")
		self.interval = float(interval)
		self._elapsed = 0.0
		self._running = True

	def restart(self, interval: float) -> None:
		self.start(interval)

	def stop(self) -> None:
		self._running = False
		self._elapsed = 0.0

	def advance(self, elapsed: float) -> int:
		if not self._running or elapsed <= 0:
			return 0
		self._elapsed += float(elapsed)
		fired = int(self._elapsed // self.interval)
		if fired:
			self._elapsed -= fired * self.interval
		return fired
