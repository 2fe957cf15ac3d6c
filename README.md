# lawndefense

A lane-based tower defence game. Zombies walk in from the right across five
lanes of lawn; you spend sun to plant defenders in their way. Let a zombie get
past the house line and the game is over.

## Installing

```
pip install .
```

This installs the `lawndefense` command and its one dependency, pygame.

## Playing

```
lawndefense
```

This opens a 900 × 600 window and runs the game at about 30 ticks per second.
Pass `--seed N` to make the zombie waves and sun drops repeatable.

Everything is played with the left mouse button:

- **Sun** drops from the sky every 7 seconds and Sunflowers make more.
  Click a sun to collect 25. You start with 200.
- **Cards** along the top show each plant's cost. A card is greyed out while it
  recharges or while you cannot afford it. Click a ready card to select it,
  then click a lawn tile to plant there. A tile holds one plant; planting
  restarts that card's recharge.
- **The shovel**: click it, then click a lawn tile to dig up the plant on it.
- **The button** in the top-right corner pauses the game and resumes it.
- **Lawn mowers** guard each lane once: the first zombie to reach one sets it
  off, and it drives across the lane, finishing every zombie it touches.

### Plants

| Plant       | Cost | Does                                                   |
|-------------|-----:|--------------------------------------------------------|
| SunFlower   |   50 | Makes a sun every 10 seconds                           |
| Peashooter  |  100 | Shoots a pea while a zombie is in its lane             |
| CherryBomb  |  150 | Explodes, burning every zombie nearby                  |
| WallNut     |   50 | Soaks up a lot of damage                               |
| SnowPea     |  175 | Shoots frozen peas that slow zombies down              |
| PotatoMine  |   25 | Arms after 15 seconds, then blows up zombies that step close |
| Repeater    |  200 | Shoots two peas at a time                              |

### Zombies

Basic, Cone, Bucket and Screen zombies walk at the same pace but take
increasingly more damage to bring down; Football zombies are both tough and
fast. Zombies come more often as the game goes on.

## Running without a window

```
lawndefense --headless 3000 --seed 1
```

simulates 3000 ticks with no window and prints the tick count, the sun in the
bank, the number of zombies on the lawn and whether the game was lost. No
plants are placed in a headless run.

The same is available from Python:

```python
from lawndefense.app import run_headless

game = run_headless(3000, seed=1)
print(game.shop.sun, len(game.zombies), game.over)
```

`lawndefense.game.Game` holds the scene; `Game.tick()` advances it one step,
spawning zombies and checking once a second whether any has reached the house.
`Game.toggle_pause()` stops and resumes the clock. Plants are made with
`lawndefense.plants.create_plant(name)` and placed on the lawn through
`Shop.add_plant(name, pos)`, or through `Lawn.drop(name, pos)`, which first
snaps the point to the centre of its lawn tile.

## What it does not do

The window draws the game with plain shapes and text: there are no sprite
images, no animated artwork and no music or sound effects.

## Running the tests

```
pip install .[test]
pytest
```