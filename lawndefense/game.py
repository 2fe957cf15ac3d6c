"""The playing field: the lawn layout, the zombie spawner and the end-of-game check."""

from __future__ import annotations

import random

from .projectiles import Mower
from .scene import Item, Kind, Scene, ticks
from .shop import Lawn, Shop, Shovel
from .zombies import (
    BasicZombie,
    BucketZombie,
    ConeZombie,
    FootballZombie,
    ScreenZombie,
    Zombie,
)

LANES = 5
LANE_TOP = 130
LANE_HEIGHT = 98
SPAWN_X = 1028
MOWER_X = 210
HOUSE_LINE = 200


def lane_y(lane: int) -> float:
    """Vertical centre of lane ``lane`` (0 at the top)."""
    return float(LANE_TOP + LANE_HEIGHT * lane)


class Button(Item):
    """The pause / continue switch in the corner of the screen."""

    bounds = (-80.0, -20.0, 160.0, 40.0)

    def __init__(self, game: Game, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.game = game

    @property
    def label(self) -> str:
        return "PAUSE" if self.game.running else "CONTINUE"

    def press(self) -> bool:
        """Toggle the game clock; return whether the game now runs."""
        return self.game.toggle_pause()


class Game:
    """One round of lawn defence, advanced one tick at a time."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        if rng is None:
            rng = random.Random(seed)
        self.scene = Scene(rng)
        self.running = True
        self.over = False

        self.shop = self.scene.add(Shop(520, 45))
        self.shovel = self.scene.add(Shovel(830, 40))
        self.button = self.scene.add(Button(self, 970, 20))
        self.lawn = self.scene.add(Lawn(self.shop, self.shovel, 618, 326))
        self.mowers = [self.scene.add(Mower(MOWER_X, lane_y(i))) for i in range(LANES)]

        self._low = 4
        self._high = 8
        self._max_time = ticks(20.0)
        self._spawn_time = self._max_time // 2
        self._spawn_counter = 0

        self._check_time = ticks(1.0)
        self._check_counter = 0

    @property
    def rng(self) -> random.Random:
        return self.scene.rng

    @property
    def zombies(self) -> list[Zombie]:
        return [item for item in self.scene if item.kind == Kind.ZOMBIE]

    def tick(self) -> None:
        """Advance the whole game by one tick, unless it is paused."""
        if not self.running:
            return
        self.scene.advance()
        self.spawn_zombie()
        self.check()

    def spawn_zombie(self) -> Zombie | None:
        """Count towards the next zombie and send it in when the time has come."""
        self._spawn_counter += 1
        if self._spawn_counter < self._spawn_time:
            return None
        self._low += 1
        if self._low > self._high:
            self._max_time = int(self._max_time / 1.3)
            self._high *= 2
        self._spawn_counter = 0
        third = self._max_time // 3
        self._spawn_time = self.rng.randrange(2 * self._max_time // 3) + third
        roll = self.rng.randrange(100)
        lane = self.rng.randrange(LANES)
        if roll < 40:
            cls: type[Zombie] = BasicZombie
        elif roll < 70:
            cls = ConeZombie
        elif roll < 80:
            cls = BucketZombie
        elif roll < 90:
            cls = ScreenZombie
        else:
            cls = FootballZombie
        zombie = cls(SPAWN_X, lane_y(lane), rng=self.rng)
        self.scene.add(zombie)
        return zombie

    def check(self) -> bool:
        """Every second, see whether a zombie reached the house; return True if so."""
        self._check_counter += 1
        if self._check_counter < self._check_time:
            return False
        self._check_counter = 0
        if any(zombie.x < HOUSE_LINE for zombie in self.zombies):
            self.over = True
            self.scene.advance()
            self.running = False
            return True
        return False

    def toggle_pause(self) -> bool:
        """Stop a running game or resume a stopped one; return the new state."""
        self.running = not self.running
        return self.running