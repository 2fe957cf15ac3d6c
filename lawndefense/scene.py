"""Scene graph: items, frame animations and the tick loop that drives them."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator
from enum import IntEnum

TICK_MS = 33
USER_TYPE = 65536

Point = tuple[float, float]
Rect = tuple[float, float, float, float]


def ticks(seconds: float) -> int:
    """Return the number of whole game ticks that fit in ``seconds``."""
    return int(seconds * 1000 / TICK_MS)


class Kind(IntEnum):
    """Broad category of a scene item, used for collision filtering."""

    PLANT = USER_TYPE + 1
    ZOMBIE = USER_TYPE + 2
    OTHER = USER_TYPE + 3


class Animation:
    """A looping frame sequence that moves forward once per tick.

    ``speed`` is a percentage: 100 moves one frame per tick, 50 one frame
    every two ticks.
    """

    DEFAULT_FRAMES = 10

    def __init__(self, name: str, frame_count: int = DEFAULT_FRAMES, speed: int = 100) -> None:
        if frame_count < 1:
            raise ValueError("an animation needs at least one frame")
        self.name = name
        self.frame_count = frame_count
        self.speed = speed
        self._position = 0.0

    @property
    def frame(self) -> int:
        return int(self._position) % self.frame_count

    def advance(self) -> None:
        self._position = (self._position + self.speed / 100) % self.frame_count

    def at_last_frame(self) -> bool:
        return self.frame == self.frame_count - 1

    def __repr__(self) -> str:
        return f"Animation({self.name!r}, frame={self.frame}/{self.frame_count})"


def same_row(a: float, b: float) -> bool:
    """Compare two vertical positions the way lanes are matched."""
    return math.isclose(a, b, rel_tol=1e-12)


class Item:
    """Something that lives in a scene at a position and reacts to ticks."""

    kind: Kind = Kind.OTHER
    bounds: Rect = (0.0, 0.0, 0.0, 0.0)

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.scene: Scene | None = None
        self.movie: Animation | None = None

    @property
    def pos(self) -> Point:
        return (self.x, self.y)

    @pos.setter
    def pos(self, value: Point) -> None:
        self.x, self.y = float(value[0]), float(value[1])

    @property
    def bounding_rect(self) -> Rect:
        return self.bounds

    def _scene_rect(self) -> Rect:
        left, top, width, height = self.bounding_rect
        return (self.x + left, self.y + top, width, height)

    def _animations(self) -> Iterator[Animation]:
        if self.movie is not None:
            yield self.movie

    def advance(self) -> None:
        """Run one tick of behaviour; the base item does nothing."""

    def collides_with(self, other: Item) -> bool:
        """Default collision: the two bounding rectangles overlap."""
        ax, ay, aw, ah = self._scene_rect()
        bx, by, bw, bh = other._scene_rect()
        return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah

    def contains(self, point: Point) -> bool:
        left, top, width, height = self._scene_rect()
        px, py = point
        return left <= px < left + width and top <= py < top + height

    def remove(self) -> None:
        """Take the item out of its scene, if it is in one."""
        if self.scene is not None:
            self.scene.remove(self)


class Scene:
    """An ordered collection of items; later items are stacked on top."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._items: list[Item] = []

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def add(self, item: Item) -> Item:
        if item.scene is self:
            return item
        if item.scene is not None:
            item.scene.remove(item)
        self._items.append(item)
        item.scene = self
        return item

    def remove(self, item: Item) -> None:
        try:
            self._items.remove(item)
        except ValueError:
            raise ValueError("item is not in this scene") from None
        item.scene = None

    def items_at(self, point: Point) -> list[Item]:
        """Items whose area holds ``point``, topmost first."""
        return [item for item in reversed(self._items) if item.contains(point)]

    def colliding(self, item: Item) -> list[Item]:
        """Items that ``item`` collides with, topmost first."""
        return [
            other
            for other in reversed(self._items)
            if other is not item and item.collides_with(other)
        ]

    def advance(self) -> None:
        """Step every animation and run one tick for every item."""
        for item in list(self._items):
            if item.scene is not self:
                continue
            for animation in item._animations():
                animation.advance()
            item.advance()