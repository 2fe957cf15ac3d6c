"""Zombies: walk left along a lane, chew plants, and die."""

from __future__ import annotations

import random
from collections.abc import Iterator
from enum import IntEnum

from .scene import Animation, Item, Kind, same_row

SLOW_LIMIT = 0.55
WALK_SPEED = 80.0 * 33 / 1000
BITE = 100 * 33 // 1000


class State(IntEnum):
    WALKING = 0
    ATTACKING = 1
    DYING = 2
    BURNT = 3


class Zombie(Item):
    """Shared zombie behaviour; subclasses set stats and animation names."""

    kind = Kind.ZOMBIE
    bounds = (-80.0, -100.0, 200.0, 140.0)

    HP = 0
    ATTACK = 0
    SPEED = 0.0
    WALK_MOVIES: tuple[str, ...] = ()
    ATTACK_MOVIE: str | None = None
    DIE_MOVIE = "ZombieDie"
    HEAD_MOVIE = "ZombieHead"

    def __init__(self, x: float = 0.0, y: float = 0.0, rng: random.Random | None = None) -> None:
        super().__init__(x, y)
        self.rng = rng if rng is not None else random.Random()
        self.hp = self.HP
        self.atk = self.ATTACK
        self.speed = self.SPEED
        self.state = State.WALKING
        self.head: Animation | None = None
        self._walk()

    @property
    def slowed(self) -> bool:
        return self.speed < SLOW_LIMIT

    def _walk(self) -> None:
        if len(self.WALK_MOVIES) > 1:
            self.set_movie(self.rng.choice(self.WALK_MOVIES))
        elif self.WALK_MOVIES:
            self.set_movie(self.WALK_MOVIES[0])

    def _animations(self) -> Iterator[Animation]:
        yield from super()._animations()
        if self.head is not None:
            yield self.head

    def set_movie(self, name: str) -> None:
        self.movie = Animation(name)

    def set_head(self, name: str) -> None:
        self.head = Animation(name)

    def collides_with(self, other: Item) -> bool:
        return (
            other.kind == Kind.PLANT
            and same_row(other.y, self.y)
            and abs(other.x - self.x) < 30
        )

    def advance(self) -> None:
        if self.slowed and self.state not in (State.DYING, State.BURNT) and self.movie is not None:
            self.movie.speed = 50

        if self.hp <= 0:
            if self.state < State.DYING:
                self.state = State.DYING
                self.set_movie(self.DIE_MOVIE)
                self.set_head(self.HEAD_MOVIE)
            elif self.movie is None or self.movie.at_last_frame():
                self.remove()
            return

        targets = self.scene.colliding(self) if self.scene is not None else []
        if targets:
            targets[0].hp -= self.atk
            if self.state != State.ATTACKING:
                self.state = State.ATTACKING
                if self.ATTACK_MOVIE is not None:
                    self.set_movie(self.ATTACK_MOVIE)
            return

        if self.state != State.WALKING:
            self.state = State.WALKING
            self._walk()
        self.x -= self.speed


class BasicZombie(Zombie):
    HP = 270
    ATTACK = BITE
    SPEED = WALK_SPEED / 4.7
    WALK_MOVIES = ("ZombieWalk1", "ZombieWalk2")
    ATTACK_MOVIE = "ZombieAttack"


class ConeZombie(Zombie):
    HP = 640
    ATTACK = BITE
    SPEED = WALK_SPEED / 4.7
    WALK_MOVIES = ("ConeZombieWalk",)
    ATTACK_MOVIE = "ConeZombieAttack"


class BucketZombie(Zombie):
    HP = 1370
    ATTACK = BITE
    SPEED = WALK_SPEED / 4.7
    WALK_MOVIES = ("BucketZombieWalk",)
    ATTACK_MOVIE = "BucketZombieAttack"


class ScreenZombie(Zombie):
    HP = 1370
    ATTACK = BITE
    SPEED = WALK_SPEED / 4.7
    WALK_MOVIES = ("ScreenZombieWalk",)
    ATTACK_MOVIE = "ScreenZombieAttack"


class FootballZombie(Zombie):
    HP = 1670
    ATTACK = BITE
    SPEED = WALK_SPEED / 2.5
    WALK_MOVIES = ("FootballZombieWalk",)
    ATTACK_MOVIE = "FootballZombieAttack"
    DIE_MOVIE = "FootballZombieDie"