import pytest

from lawndefense.app import main, run_headless
from lawndefense.scene import Kind


def test_zero_ticks_gives_fresh_game():
    game = run_headless(0, 1)
    assert game.running is True
    assert game.over is False
    assert game.shop.sun == 200
    assert game.zombies == []


def test_negative_ticks_rejected():
    with pytest.raises(ValueError):
        run_headless(-1, 1)


def test_zombies_appear_after_a_while():
    game = run_headless(400, 7)
    assert len(game.zombies) >= 1
    assert all(z.kind == Kind.ZOMBIE for z in game.zombies)
    assert all(z.x < 1028 for z in game.zombies)


def test_headless_run_is_deterministic():
    first = run_headless(900, 11)
    second = run_headless(900, 11)
    assert [(type(z), z.x, z.y) for z in first.zombies] == [
        (type(z), z.x, z.y) for z in second.zombies
    ]


def test_undefended_lawn_is_eventually_lost():
    game = run_headless(20000, 3)
    assert game.over is True
    assert game.running is False


def test_main_headless_prints_summary(capsys):
    assert main(["--headless", "10", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "ticks: 10" in out
    assert "sun: 200" in out
    assert "result: running" in out


def test_main_rejects_negative_ticks():
    with pytest.raises(SystemExit) as info:
        main(["--headless", "-5"])
    assert info.value.code == 2