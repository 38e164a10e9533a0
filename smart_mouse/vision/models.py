"""Data models for computer vision subsystem."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

import numpy as np


class Point(NamedTuple):
    """Integer screen coordinate."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle (x, y, width, height) in pixel coordinates."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rectangle size must be non-negative, got {self.width}x{self.height}")

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def center(self) -> Point:
        """Return the integer center point; inside the rectangle when non-empty."""
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Return rectangle as ``(x, y, width, height)`` tuple."""
        return self.x, self.y, self.width, self.height


class CandidateKind(str, Enum):
    """Which producer created a candidate."""

    TEXT = "text"
    BUTTON = "button"


@dataclass(frozen=True, slots=True)
class Candidate:
    """One detected, scorable region of the screen."""

    bounds: Rectangle
    text: str
    kind: CandidateKind
    confidence: float  # 0-100

    def center(self) -> Point:
        return self.bounds.center()


@dataclass(frozen=True, eq=False)
class Frame:
    """Immutable captured screen image.

    The wrapped BGR array is a read-only view, so downstream stages cannot
    modify the pixels in place. Use :meth:`crop` to derive sub-frames.
    """

    image: np.ndarray
    captured_at: float = field(default_factory=time.time)

    def __post_init__(self) -> None:
        view = np.asarray(self.image).view()
        if view.ndim not in (2, 3):
            raise ValueError(f"Frame image must be 2-D or 3-D, got shape {view.shape}")
        view.flags.writeable = False
        object.__setattr__(self, "image", view)

    @property
    def width(self) -> int:
        return int(self.image.shape[1])

    @property
    def height(self) -> int:
        return int(self.image.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def clamp(self, rect: Rectangle) -> Rectangle:
        """Intersect *rect* with the frame bounds."""
        x0 = min(max(rect.x, 0), self.width)
        y0 = min(max(rect.y, 0), self.height)
        x1 = min(max(rect.right, 0), self.width)
        y1 = min(max(rect.bottom, 0), self.height)
        return Rectangle(x0, y0, max(0, x1 - x0), max(0, y1 - y0))

    def crop(self, rect: Rectangle) -> Frame:
        """Return a new Frame over the sub-region *rect* (clamped to the frame)."""
        r = self.clamp(rect)
        return Frame(self.image[r.y : r.bottom, r.x : r.right], captured_at=self.captured_at)
