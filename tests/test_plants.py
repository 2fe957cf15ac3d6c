import random

import pytest

from lawndefense.plants import (
    PLANT_TYPES,
    CherryBomb,
    Peashooter,
    Plant,
    PotatoMine,
    Repeater,
    SnowPea,
    SunFlower,
    WallNut,
    create_plant,
)
from lawndefense.projectiles import Pea, Sun
from lawndefense.scene import Scene
from lawndefense.zombies import BasicZombie, State


@pytest.fixture
def scene():
    return Scene(random.Random(7))


def _zombie(scene, x, y):
    return scene.add(BasicZombie(x, y, rng=random.Random(3)))


@pytest.mark.parametrize(
    "name, cls",
    [
        ("SunFlower", SunFlower),
        ("Peashooter", Peashooter),
        ("CherryBomb", CherryBomb),
        ("WallNut", WallNut),
        ("SnowPea", SnowPea),
        ("PotatoMine", PotatoMine),
        ("Repeater", Repeater),
    ],
)
def test_create_plant_builds_named_class(name, cls):
    plant = create_plant(name)
    assert type(plant) is cls
    assert plant.name == name


def test_create_plant_unknown_name():
    with pytest.raises(ValueError):
        create_plant("Cactus")


def test_plant_types_order_matches_created_plants():
    names = [create_plant(name).name for name in PLANT_TYPES]
    assert names == [
        "SunFlower", "Peashooter", "CherryBomb", "WallNut", "SnowPea", "PotatoMine", "Repeater",
    ]


def test_plant_collision_same_lane_only(scene):
    plant = scene.add(Peashooter(290, 130))
    near = BasicZombie(310, 130, rng=random.Random(1))
    other_lane = BasicZombie(310, 228, rng=random.Random(1))
    assert Plant.collides_with(plant, near) is True
    assert Plant.collides_with(plant, other_lane) is False


def test_dead_plant_is_removed(scene):
    plant = scene.add(SunFlower(290, 130))
    plant.hp = 0
    plant.advance()
    assert plant not in scene


def test_set_movie_replaces_animation():
    plant = WallNut()
    plant.set_movie("WallNut1")
    assert plant.movie.name == "WallNut1"
    assert plant.movie.frame == 0


def test_peashooter_fires_when_zombie_in_lane(scene):
    shooter = scene.add(Peashooter(290, 130))
    _zombie(scene, 900, 130)
    for _ in range(shooter.time):
        shooter.advance()
    peas = [item for item in scene if isinstance(item, Pea)]
    assert len(peas) == 1
    assert peas[0].pos == (shooter.x + 32, shooter.y)
    assert peas[0].atk == shooter.atk
    assert peas[0].snow is False
    assert shooter.counter == 0


def test_peashooter_holds_fire_without_target(scene):
    shooter = scene.add(Peashooter(290, 130))
    _zombie(scene, 900, 228)
    for _ in range(shooter.time):
        shooter.advance()
    assert not any(isinstance(item, Pea) for item in scene)
    assert shooter.counter == 0


def test_snow_pea_fires_snow_peas(scene):
    shooter = scene.add(SnowPea(290, 130))
    _zombie(scene, 700, 130)
    for _ in range(shooter.time):
        shooter.advance()
    peas = [item for item in scene if isinstance(item, Pea)]
    assert [pea.snow for pea in peas] == [True]


def test_repeater_fires_two_peas(scene):
    shooter = scene.add(Repeater(290, 130))
    _zombie(scene, 700, 130)
    for _ in range(shooter.time):
        shooter.advance()
    xs = sorted(item.x for item in scene if isinstance(item, Pea))
    assert xs == [shooter.x + 32, shooter.x + 64]


def test_sunflower_makes_sun_near_itself(scene):
    flower = scene.add(SunFlower(372, 228))
    for _ in range(flower.time - 1):
        flower.advance()
    assert not any(isinstance(item, Sun) for item in scene)
    flower.advance()
    suns = [item for item in scene if isinstance(item, Sun)]
    assert len(suns) == 1
    sun = suns[0]
    assert flower.x - 15 <= sun.dest[0] < flower.x + 15
    assert flower.y + 15 <= sun.dest[1] < flower.y + 45
    assert sun.y == flower.y


def test_wallnut_changes_look_with_damage(scene):
    nut = scene.add(WallNut(290, 130))
    nut.advance()
    assert nut.state == 0
    nut.hp = 2000
    nut.advance()
    assert nut.state == 1
    assert nut.movie.name == "WallNut1"
    nut.hp = 1000
    nut.advance()
    assert nut.state == 2
    assert nut.movie.name == "WallNut2"


def test_cherry_bomb_burns_close_zombies(scene):
    bomb = scene.add(CherryBomb(400, 228))
    close = _zombie(scene, 450, 228)
    far = _zombie(scene, 700, 228)
    while not bomb.movie.at_last_frame():
        bomb.movie.advance()
    bomb.advance()
    assert bomb.state == 1
    assert bomb.movie.name == "Boom"
    assert close.hp == BasicZombie.HP - bomb.atk
    assert close.state == State.BURNT
    assert close.movie.name == "Burn"
    assert far.hp == BasicZombie.HP


def test_cherry_bomb_grows_and_vanishes(scene):
    bomb = scene.add(CherryBomb(400, 228))
    assert bomb.bounding_rect == bomb.bounds
    while not bomb.movie.at_last_frame():
        bomb.movie.advance()
    bomb.advance()
    assert bomb.bounding_rect == (-150.0, -150.0, 300.0, 300.0)
    while not bomb.movie.at_last_frame():
        bomb.movie.advance()
    bomb.advance()
    assert bomb not in scene


def test_potato_mine_arms_then_explodes(scene):
    mine = scene.add(PotatoMine(290, 130))
    zombie = _zombie(scene, 320, 130)
    for _ in range(mine.time):
        mine.advance()
    assert mine.state == 1
    assert mine.movie.name == "PotatoMine"
    assert mine.counter == 0
    for _ in range(mine.time):
        mine.advance()
    assert mine.state == 2
    assert mine.movie.name == "PotatoMineBomb"
    assert zombie not in scene
    assert mine.bounding_rect == (-75.0, -75.0, 150.0, 150.0)


def test_armed_mine_waits_for_target(scene):
    mine = scene.add(PotatoMine(290, 130))
    for _ in range(mine.time):
        mine.advance()
    for _ in range(mine.time * 3):
        mine.advance()
    assert mine.state == 1
    assert mine in scene