"""Plants: the defenders placed on lawn cells."""

from __future__ import annotations

import math

from .projectiles import Pea, Sun
from .scene import Animation, Item, Kind, Rect, same_row, ticks
from .zombies import State


class Plant(Item):
    """Shared plant behaviour; subclasses set stats and animation names."""

    kind = Kind.PLANT
    bounds = (-35.0, -35.0, 70.0, 70.0)

    name = "Plant"
    HP = 0
    ATTACK = 0
    TIME = 0
    MOVIE: str | None = None

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.hp = self.HP
        self.atk = self.ATTACK
        self.time = self.TIME
        self.counter = 0
        self.state = 0
        if self.MOVIE is not None:
            self.set_movie(self.MOVIE)

    def set_movie(self, name: str) -> None:
        self.movie = Animation(name)

    def collides_with(self, other: Item) -> bool:
        return (
            other.kind == Kind.ZOMBIE
            and same_row(other.y, self.y)
            and abs(other.x - self.x) < 30
        )

    def _wilted(self) -> bool:
        if self.hp <= 0:
            self.remove()
            return True
        return False

    def _movie_finished(self) -> bool:
        return self.movie is None or self.movie.at_last_frame()

    def advance(self) -> None:
        """A plain plant only disappears once it has been eaten."""
        self._wilted()


class SunFlower(Plant):
    """Produces a sun next to itself at a steady pace."""

    name = "SunFlower"
    HP = 300
    TIME = ticks(10.0)
    MOVIE = "SunFlower"

    def advance(self) -> None:
        if self._wilted():
            return
        self.counter += 1
        if self.counter >= self.time:
            self.counter = 0
            if self.scene is not None:
                self.scene.add(Sun(rng=self.scene.rng, origin=self.pos))


class _Shooter(Plant):
    """A plant that fires peas down its lane while a zombie is in it."""

    HP = 300
    ATTACK = 25
    TIME = ticks(1.4)
    SNOW = False
    OFFSETS: tuple[float, ...] = (32.0,)

    def collides_with(self, other: Item) -> bool:
        return other.kind == Kind.ZOMBIE and same_row(other.y, self.y)

    def advance(self) -> None:
        if self._wilted():
            return
        self.counter += 1
        if self.counter < self.time:
            return
        self.counter = 0
        if self.scene is not None and self.scene.colliding(self):
            for offset in self.OFFSETS:
                self.scene.add(Pea(self.atk, self.SNOW, x=self.x + offset, y=self.y))


class Peashooter(_Shooter):
    name = "Peashooter"
    MOVIE = "Peashooter"


class SnowPea(_Shooter):
    name = "SnowPea"
    MOVIE = "SnowPea"
    SNOW = True


class Repeater(_Shooter):
    name = "Repeater"
    MOVIE = "Repeater"
    OFFSETS = (32.0, 64.0)


class CherryBomb(Plant):
    """Explodes once its fuse animation ends, burning zombies around it."""

    name = "CherryBomb"
    HP = 300
    ATTACK = 1800
    MOVIE = "CherryBomb"
    RADIUS = 160

    @property
    def bounding_rect(self) -> Rect:
        return (-150.0, -150.0, 300.0, 300.0) if self.state else self.bounds

    def collides_with(self, other: Item) -> bool:
        return (
            other.kind == Kind.ZOMBIE
            and math.hypot(other.x - self.x, other.y - self.y) < self.RADIUS
        )

    def advance(self) -> None:
        if self._wilted():
            return
        if self.state == 0 and self._movie_finished():
            self.state = 1
            self.set_movie("Boom")
            targets = self.scene.colliding(self) if self.scene is not None else []
            for zombie in targets:
                zombie.hp -= self.atk
                if zombie.hp <= 0:
                    zombie.state = State.BURNT
                    zombie.set_movie("Burn")
        elif self.state == 1 and self._movie_finished():
            self.remove()


class WallNut(Plant):
    """A tough blocker whose look changes as it gets chewed."""

    name = "WallNut"
    HP = 4000
    MOVIE = "WallNut"

    def advance(self) -> None:
        if self._wilted():
            return
        if self.hp <= 1333 and self.state != 2:
            self.state = 2
            self.set_movie("WallNut2")
        elif 1333 < self.hp <= 2667 and self.state != 1:
            self.state = 1
            self.set_movie("WallNut1")


class PotatoMine(Plant):
    """Arms after a delay, then blows up the first zombies that step close."""

    name = "PotatoMine"
    HP = 300
    ATTACK = 1800
    TIME = ticks(15.0)
    MOVIE = "PotatoMine1"

    @property
    def bounding_rect(self) -> Rect:
        return (-75.0, -75.0, 150.0, 150.0) if self.state == 2 else self.bounds

    def collides_with(self, other: Item) -> bool:
        return (
            other.kind == Kind.ZOMBIE
            and same_row(other.y, self.y)
            and abs(other.x - self.x) < 50
        )

    def advance(self) -> None:
        if self._wilted():
            return
        if self.state == 0:
            self.counter += 1
            if self.counter >= self.time:
                self.state = 1
                self.counter = 0
                self.time = ticks(1.0)
                self.set_movie("PotatoMine")
        elif self.state == 1:
            self.counter += 1
            if self.counter >= self.time:
                self.counter = 0
                targets = self.scene.colliding(self) if self.scene is not None else []
                if targets:
                    self.state = 2
                    self.set_movie("PotatoMineBomb")
                    for zombie in targets:
                        zombie.hp -= self.atk
                        if zombie.hp <= 0:
                            zombie.remove()
        elif self.state == 2 and self._movie_finished():
            self.remove()


PLANT_TYPES: dict[str, type[Plant]] = {
    cls.name: cls
    for cls in (SunFlower, Peashooter, CherryBomb, WallNut, SnowPea, PotatoMine, Repeater)
}


def create_plant(name: str) -> Plant:
    """Build a fresh plant from its card name."""
    try:
        return PLANT_TYPES[name]()
    except KeyError:
        raise ValueError(f"unknown plant: {name!r}") from None