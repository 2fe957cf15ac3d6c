"""Moving helpers on the lawn: peas, falling sun and lawn mowers."""

from __future__ import annotations

import random

from .scene import Animation, Item, Kind, Point, same_row, ticks

RIGHT_EDGE = 1069
SLOW_LIMIT = 0.55
SUN_VALUE = 25


class Pea(Item):
    """A projectile flying right along its lane; a snow pea slows its target."""

    bounds = (-12.0, -28.0, 24.0, 24.0)

    def __init__(self, atk: int = 0, snow: bool = False, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.atk = atk
        self.snow = snow
        self.speed = 360.0 * 33 / 1000

    @property
    def image(self) -> str:
        return "PeaSnow" if self.snow else "Pea"

    def collides_with(self, other: Item) -> bool:
        return (
            other.kind == Kind.ZOMBIE
            and same_row(other.y, self.y)
            and abs(other.x - self.x) < 15
        )

    def advance(self) -> None:
        hits = self.scene.colliding(self) if self.scene is not None else []
        if hits:
            zombie = hits[self.scene.rng.randrange(len(hits))]
            zombie.hp -= self.atk
            if self.snow and zombie.speed > SLOW_LIMIT:
                zombie.speed /= 2
            self.remove()
            return
        self.x += self.speed
        if self.x > RIGHT_EDGE:
            self.remove()


class Sun(Item):
    """Sun that drifts down to a resting spot and fades after a while.

    Without an origin it falls from the sky onto a random lawn cell area;
    with one it pops out next to the plant that produced it.
    """

    bounds = (-35.0, -35.0, 70.0, 70.0)

    def __init__(self, rng: random.Random | None = None, origin: Point | None = None) -> None:
        super().__init__()
        rng = rng if rng is not None else random.Random()
        if origin is None:
            self.dest = (290 + rng.randrange(82 * 7), 130 + rng.randrange(98 * 5))
            self.pos = (self.dest[0], 70)
        else:
            ox, oy = origin
            self.dest = (ox + rng.randrange(30) - 15, oy + rng.randrange(30) + 15)
            self.pos = (self.dest[0], oy)
        self.speed = 60.0 * 50 / 1000
        self.counter = 0
        self.time = ticks(10.0)
        self.movie = Animation("Sun")

    def collect(self) -> int:
        """Pick the sun up: return its value and let it vanish next tick."""
        self.counter = self.time
        return SUN_VALUE

    def advance(self) -> None:
        self.counter += 1
        if self.counter >= self.time:
            self.remove()
        elif self.y < self.dest[1]:
            self.y += self.speed


class Mower(Item):
    """Lawn mower that, once touched, clears its whole lane."""

    bounds = (-30.0, -30.0, 60.0, 60.0)
    image = "LawnMower"

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.triggered = False
        self.speed = 270.0 * 33 / 1000

    def collides_with(self, other: Item) -> bool:
        return (
            other.kind == Kind.ZOMBIE
            and same_row(other.y, self.y)
            and abs(other.x - self.x) < 15
        )

    def advance(self) -> None:
        hits = self.scene.colliding(self) if self.scene is not None else []
        if hits:
            self.triggered = True
            for zombie in hits:
                zombie.hp = 0
        if self.triggered:
            self.x += self.speed
        if self.x > RIGHT_EDGE:
            self.remove()