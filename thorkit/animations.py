"""Fade and frame animations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

from thorkit.graphics import IntRect, Vector2


def _set_alpha(target: Any, alpha: int) -> None:
    setter = getattr(target, "set_alpha", None)
    if callable(setter):
        setter(alpha)
    else:
        target.color = target.color.with_alpha(alpha)


class FadeAnimation:
    """Lets an object fade in at the start and/or out at the end of an animation.

    The animated object either offers ``set_alpha(alpha)`` or has a ``color``
    attribute holding a :class:`~thorkit.graphics.Color`.
    """

    def __init__(self, in_ratio: float, out_ratio: float) -> None:
        if not 0.0 <= in_ratio <= 1.0:
            raise ValueError("in_ratio must lie in [0, 1]")
        if not 0.0 <= out_ratio <= 1.0:
            raise ValueError("out_ratio must lie in [0, 1]")
        if in_ratio + out_ratio > 1.0:
            raise ValueError("in_ratio + out_ratio must not exceed 1")
        self.in_ratio = in_ratio
        self.out_ratio = out_ratio

    def __call__(self, animated: Any, progress: float) -> None:
        """Apply the alpha value belonging to progress in [0, 1]."""
        if progress < self.in_ratio:
            _set_alpha(animated, min(int(256 * progress / self.in_ratio), 255))
        elif progress > 1.0 - self.out_ratio:
            _set_alpha(animated, min(int(256 * (1.0 - progress) / self.out_ratio), 255))


@dataclass(frozen=True)
class Frame:
    """One frame: relative duration, texture rectangle and optional origin."""

    duration: float
    subrect: IntRect
    origin: Optional[Vector2] = None

    @property
    def applies_origin(self) -> bool:
        return self.origin is not None


class FrameAnimation:
    """Sequence of texture rectangles, each shown for a relative duration."""

    def __init__(self) -> None:
        self._frames: List[Frame] = []
        self._normalized = False

    def add_frame(
        self, relative_duration: float, subrect: IntRect, origin: Optional[Vector2] = None
    ) -> None:
        """Append a frame; durations are relative to each other."""
        self._frames.append(Frame(relative_duration, subrect, origin))
        self._normalized = False

    def _ensure_normalized(self) -> None:
        if self._normalized:
            return
        total = sum(frame.duration for frame in self._frames)
        if self._frames and total <= 0:
            raise ValueError("total frame duration must be positive")
        self._frames = [replace(frame, duration=frame.duration / total) for frame in self._frames]
        self._normalized = True

    def frames(self) -> Tuple[Frame, ...]:
        """The frames, with durations normalized to sum to one."""
        self._ensure_normalized()
        return tuple(self._frames)