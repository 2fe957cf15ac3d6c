"""The seed shop, its cards, the shovel and the lawn that takes drops."""

from __future__ import annotations

from .plants import Plant, create_plant
from .projectiles import Sun
from .scene import Item, Kind, Point, ticks

START_SUN = 200


class Card(Item):
    """A seed packet that recharges after each planting."""

    bounds = (-50.0, -30.0, 100.0, 60.0)

    NAMES = ("SunFlower", "Peashooter", "CherryBomb", "WallNut", "SnowPea", "PotatoMine", "Repeater")
    COSTS = dict(zip(NAMES, (50, 100, 150, 50, 175, 25, 200)))
    COOLDOWNS = dict(zip(NAMES, (227, 227, 606, 606, 227, 606, 227)))

    def __init__(self, text: str, x: float = 0.0, y: float = 0.0) -> None:
        if text not in self.COSTS:
            raise ValueError(f"unknown card: {text!r}")
        super().__init__(x, y)
        self.text = text
        self.counter = 0

    @property
    def cost(self) -> int:
        return self.COSTS[self.text]

    @property
    def cool(self) -> int:
        return self.COOLDOWNS[self.text]

    @property
    def ready(self) -> bool:
        return self.counter >= self.cool

    def advance(self) -> None:
        if self.counter < self.cool:
            self.counter += 1

    def can_pick(self, sun: int) -> bool:
        """Whether the card is recharged and affordable with ``sun``."""
        return self.ready and self.cost <= sun


class Shop(Item):
    """Holds the sun bank and the cards, and drops sun from the sky."""

    bounds = (-270.0, -45.0, 540.0, 90.0)

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.sun = START_SUN
        self.counter = 0
        self.time = ticks(7.0)
        self.cards = [Card(name, -157 + 65 * i, -2) for i, name in enumerate(Card.NAMES)]

    def card(self, name: str) -> Card:
        for card in self.cards:
            if card.text == name:
                return card
        raise ValueError(f"unknown card: {name!r}")

    def advance(self) -> None:
        for card in self.cards:
            card.advance()
        self.counter += 1
        if self.counter >= self.time:
            self.counter = 0
            if self.scene is not None:
                self.scene.add(Sun(rng=self.scene.rng))

    def add_plant(self, name: str, pos: Point) -> Plant | None:
        """Plant ``name`` at ``pos``; return it, or None if the spot is taken."""
        if self.scene is None:
            raise RuntimeError("the shop is not in a scene")
        if name not in Card.COSTS:
            raise ValueError(f"unknown plant: {name!r}")
        if any(item.kind == Kind.PLANT for item in self.scene.items_at(pos)):
            return None
        self.sun -= Card.COSTS[name]
        plant = create_plant(name)
        plant.pos = pos
        self.scene.add(plant)
        for card in self.cards:
            if card.text == name:
                card.counter = 0
        self.counter = 0
        return plant


class Shovel(Item):
    """Digs up the plant under a point."""

    bounds = (-40.0, -40.0, 80.0, 80.0)

    def remove_plant(self, pos: Point) -> Plant | None:
        """Remove the topmost plant at ``pos`` and return it, if any."""
        if self.scene is None:
            raise RuntimeError("the shovel is not in a scene")
        for item in self.scene.items_at(pos):
            if item.kind == Kind.PLANT:
                item.remove()
                return item
        return None


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def snap_to_grid(pos: Point) -> Point:
    """Return the centre of the lawn cell that holds ``pos``."""
    x, y = pos
    return (
        float(_trunc_div(int(x) - 249, 82) * 82 + 290),
        float(_trunc_div(int(y) - 81, 98) * 98 + 130),
    )


class Lawn(Item):
    """The planting area: turns drops of cards and the shovel into actions."""

    bounds = (-369.0, -235.0, 738.0, 470.0)

    def __init__(self, shop: Shop, shovel: Shovel, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.shop = shop
        self.shovel = shovel

    def drop(self, text: str, pos: Point) -> Plant | None:
        """Handle a drop of ``text`` at scene point ``pos``.

        Dropping "Shovel" digs up the plant in that cell; any other text
        plants that card there. Returns the plant added or removed.
        """
        if not text:
            return None
        cell = snap_to_grid(pos)
        if text == "Shovel":
            return self.shovel.remove_plant(cell)
        return self.shop.add_plant(text, cell)