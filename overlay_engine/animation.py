"""
Path Animation Module
=====================

Step-wise reveal of a polyline path ("animated route" example).

Design:
- Host-driven: the UI calls tick() every tick_interval_ms
- No timers, no threads
- State: revealed prefix of the full path + next index
"""

from typing import Optional, Sequence, Tuple

from overlay_engine.authoring.staging import Outcome, Rejection
from overlay_engine.geometry.shapes import Point
from overlay_engine.logging import LogEvent, StructuredLogger, create_logger


class PathAnimator:
    """
    Reveals a fixed path one point per tick.

    Lifecycle:
        start()  -> animated path = [p0], index = 1, animating
        tick()   -> append path[index] while index < len(path)
                    stops animating once every point is revealed
        reset()  -> empty, not animating

    Usage:
        animator = PathAnimator(config.animation.path, tick_interval_ms=800)
        animator.start()
        while animator.is_animating:
            animator.tick()
        animator.progress   # "7/7"
    """

    def __init__(
        self,
        path: Sequence[Point],
        tick_interval_ms: int = 800,
        logger: Optional[StructuredLogger] = None,
    ):
        self.full_path: Tuple[Point, ...] = tuple(path)
        self.tick_interval_ms = tick_interval_ms
        self._logger = logger or create_logger("animation")

        self._revealed: list[Point] = []
        self._index = 0
        self._animating = False

    @property
    def animated_path(self) -> Tuple[Point, ...]:
        return tuple(self._revealed)

    @property
    def is_animating(self) -> bool:
        return self._animating

    @property
    def is_finished(self) -> bool:
        return bool(self.full_path) and len(self._revealed) == len(self.full_path)

    @property
    def progress(self) -> str:
        return f"{len(self._revealed)}/{len(self.full_path)}"

    def start(self) -> Outcome:
        """Restart playback from the first point."""
        if not self.full_path:
            return Outcome.rejected(Rejection.EMPTY_PATH, "No path to animate")

        self._revealed = [self.full_path[0]]
        self._index = 1
        self._animating = len(self.full_path) > 1

        self._logger.info(
            event=LogEvent.ANIMATION_STARTED,
            message="Path animation started",
            metadata={'points': len(self.full_path), 'tick_interval_ms': self.tick_interval_ms},
        )
        if not self._animating:
            self._finished()
        return Outcome.ok(message=f"Progress: {self.progress}")

    def tick(self) -> Optional[Point]:
        """
        Reveal the next point.

        Returns:
            The revealed point, None when not animating
        """
        if not self._animating:
            return None

        point = self.full_path[self._index]
        self._revealed.append(point)
        self._index += 1

        if self._index >= len(self.full_path):
            self._animating = False
            self._finished()
        return point

    def reset(self) -> None:
        self._revealed = []
        self._index = 0
        self._animating = False
        self._logger.info(
            event=LogEvent.ANIMATION_RESET,
            message="Path animation reset",
        )

    def _finished(self) -> None:
        self._logger.info(
            event=LogEvent.ANIMATION_FINISHED,
            message="Path animation finished",
            metadata={'points': len(self._revealed)},
        )

    def __repr__(self) -> str:
        return f"PathAnimator(progress={self.progress}, animating={self._animating})"
