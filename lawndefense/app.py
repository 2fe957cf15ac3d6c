"""Entry points: a windowed game and a headless simulation."""

from __future__ import annotations

import argparse
import sys

from .game import Game
from .plants import Plant
from .projectiles import Mower, Pea, Sun
from .scene import TICK_MS, Item
from .shop import Card
from .zombies import Zombie

WINDOW_SIZE = (900, 600)
SCENE_LEFT = 150
TITLE = "植物大战僵尸"


def run_headless(ticks: int, seed: int | None = None) -> Game:
    """Play ``ticks`` ticks without a window and return the resulting game."""
    if ticks < 0:
        raise ValueError("ticks must not be negative")
    game = Game(seed=seed)
    for _ in range(ticks):
        if not game.running:
            break
        game.tick()
    return game


def _summary(game: Game, ticks: int) -> str:
    return "\n".join(
        (
            f"ticks: {ticks}",
            f"sun: {game.shop.sun}",
            f"zombies: {len(game.zombies)}",
            f"result: {'lost' if game.over else 'running'}",
        )
    )


def _card_at(game: Game, point: tuple[float, float]) -> Card | None:
    px, py = point
    for card in game.shop.cards:
        left, top, width, height = card.bounding_rect
        x0 = game.shop.x + card.x + left
        y0 = game.shop.y + card.y + top
        if x0 <= px < x0 + width and y0 <= py < y0 + height:
            return card
    return None


def _handle_click(game: Game, point: tuple[float, float], selected: str | None) -> str | None:
    if game.button.contains(point):
        game.button.press()
        return selected
    if not game.running:
        return selected
    for item in game.scene.items_at(point):
        if isinstance(item, Sun):
            game.shop.sun += item.collect()
            return selected
    card = _card_at(game, point)
    if card is not None:
        return card.text if card.can_pick(game.shop.sun) else None
    if game.shovel.contains(point):
        return "Shovel"
    if selected and game.lawn.contains(point):
        game.lawn.drop(selected, point)
    return None


def _run_window(seed: int | None) -> int:
    import pygame

    pygame.init()
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(TITLE)
    font = pygame.font.SysFont(None, 20)
    big = pygame.font.SysFont(None, 48)
    clock = pygame.time.Clock()
    game = Game(seed=seed)
    selected: str | None = None

    def to_screen(x: float, y: float) -> tuple[int, int]:
        return int(x - SCENE_LEFT), int(y)

    def rect_of(item: Item, dx: float = 0.0, dy: float = 0.0) -> pygame.Rect:
        left, top, width, height = item.bounding_rect
        sx, sy = to_screen(item.x + dx + left, item.y + dy + top)
        return pygame.Rect(sx, sy, int(width), int(height))

    def text(surface_text: str, center: tuple[int, int], colour=(0, 0, 0), use=font) -> None:
        image = use.render(surface_text, True, colour)
        screen.blit(image, image.get_rect(center=center))

    def draw() -> None:
        screen.fill((70, 140, 60))
        lawn = rect_of(game.lawn)
        pygame.draw.rect(screen, (90, 170, 70), lawn)
        for row in range(5):
            for col in range(9):
                cell = pygame.Rect(lawn.x + col * 82, lawn.y + row * 98, 82, 98)
                pygame.draw.rect(screen, (60, 120, 50), cell, 1)
        shop = rect_of(game.shop)
        pygame.draw.rect(screen, (120, 80, 40), shop)
        text(str(game.shop.sun), (shop.x + 50, shop.y + 75), (255, 255, 0))
        for card in game.shop.cards:
            card_rect = rect_of(card, game.shop.x, game.shop.y)
            colour = (230, 220, 170) if card.can_pick(game.shop.sun) else (120, 120, 120)
            if card.text == selected:
                colour = (255, 255, 150)
            pygame.draw.rect(screen, colour, card_rect)
            text(card.text[:6], (card_rect.centerx, card_rect.centery - 8))
            text(f"{card.cost:3d}", (card_rect.centerx, card_rect.centery + 12))
        shovel = rect_of(game.shovel)
        pygame.draw.rect(screen, (255, 255, 150) if selected == "Shovel" else (150, 110, 60), shovel)
        text("Shovel", shovel.center)
        button = rect_of(game.button)
        pygame.draw.rect(screen, (40, 40, 40), button)
        text(game.button.label, button.center, (0, 255, 0))
        for item in game.scene:
            sx, sy = to_screen(item.x, item.y)
            if isinstance(item, Plant):
                pygame.draw.circle(screen, (30, 200, 30), (sx, sy), 30)
                text(item.name[:2], (sx, sy))
            elif isinstance(item, Zombie):
                colour = (120, 160, 220) if item.slowed else (110, 90, 70)
                pygame.draw.rect(screen, colour, pygame.Rect(sx - 25, sy - 90, 50, 120))
                text(str(max(item.hp, 0)), (sx, sy - 100), (255, 255, 255))
            elif isinstance(item, Pea):
                colour = (150, 200, 255) if item.snow else (50, 230, 50)
                pygame.draw.circle(screen, colour, (sx, sy - 16), 10)
            elif isinstance(item, Sun):
                pygame.draw.circle(screen, (255, 220, 0), (sx, sy), 25)
            elif isinstance(item, Mower):
                pygame.draw.rect(screen, (180, 30, 30), pygame.Rect(sx - 30, sy - 30, 60, 60))
        if game.over:
            text("THE ZOMBIES ATE YOUR BRAINS!", (WINDOW_SIZE[0] // 2, WINDOW_SIZE[1] // 2),
                 (255, 40, 40), big)
        pygame.display.flip()

    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    point = (event.pos[0] + SCENE_LEFT, float(event.pos[1]))
                    selected = _handle_click(game, point, selected)
            game.tick()
            draw()
            clock.tick(1000 / TICK_MS)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lawndefense", description="Defend the lawn from zombies.")
    parser.add_argument("--headless", type=int, metavar="TICKS",
                        help="simulate TICKS ticks without a window and print a summary")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.headless is not None:
        if args.headless < 0:
            parser.error("TICKS must not be negative")
        game = run_headless(args.headless, args.seed)
        print(_summary(game, args.headless))
        return 0
    return _run_window(args.seed)


if __name__ == "__main__":
    sys.exit(main())