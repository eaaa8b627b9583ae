from ball_blast.settings import (
    BLOCK_COLOR_BANDS, BLOCK_COLOR_MAX, BLOCK_SIZE, MAX_FALL_SPEED, POWERUP_TYPES,
)
from ball_blast.spawner import Spawner, block_color, fall_speed, speed_multiplier

from .conftest import FixedRandom, make_block


def test_block_color_bands():
    assert block_color(1) == BLOCK_COLOR_BANDS[0][1]
    assert block_color(29) == BLOCK_COLOR_BANDS[0][1]
    assert block_color(30) == BLOCK_COLOR_BANDS[1][1]
    assert block_color(999) == BLOCK_COLOR_BANDS[5][1]
    assert block_color(1000) == BLOCK_COLOR_MAX
    assert len({block_color(hp) for hp in (0, 50, 100, 200, 400, 800, 5000)}) == 7


def test_spawn_wave_fills_columns():
    spawner = Spawner(FixedRandom(0.5))
    blocks = spawner.spawn_wave(1, 800)

    assert len(blocks) == 10
    spacing = (800 - 10 * BLOCK_SIZE) / 11
    assert blocks[0].x == spacing
    assert blocks[-1].x + BLOCK_SIZE <= 800
    for b in blocks:
        # floor(15 + 8 + 0.5 * 15)
        assert b.hp == b.max_hp == 30
        assert b.y == -BLOCK_SIZE - 50
        assert b.color == block_color(30)


def test_spawn_wave_empty_when_every_roll_fails():
    assert Spawner(FixedRandom(0.2)).spawn_wave(3, 800) == []


def test_spawn_wave_skips_some_columns():
    rng = FixedRandom(0.5)
    # column 0 fails, column 1 passes (hp, y), column 2 fails
    rng.queue = [0.1, 0.9, 0.5, 0.5, 0.3]
    blocks = Spawner(rng).spawn_wave(1, 240)
    assert len(blocks) == 1


def test_block_hp_scales_with_level():
    spawner = Spawner(FixedRandom(0.0))
    assert spawner.block_hp(1) == 23
    assert spawner.block_hp(5) == 55
    assert Spawner(FixedRandom(0.99)).block_hp(5) > 55


def test_narrow_canvas_still_gets_a_column():
    blocks = Spawner(FixedRandom(0.5)).spawn_wave(1, 50)
    assert len(blocks) == 1
    assert blocks[0].x == 0


def test_should_advance():
    assert Spawner(FixedRandom(0.9)).should_advance([])

    high = [make_block(y=100), make_block(y=200)]
    assert not Spawner(FixedRandom(0.0)).should_advance(high)

    low = [make_block(y=151), make_block(y=300)]
    assert Spawner(FixedRandom(0.01)).should_advance(low)
    assert not Spawner(FixedRandom(0.5)).should_advance(low)


def test_powerup_drop_chance():
    assert Spawner(FixedRandom(0.5)).roll_powerup(10, 20) is None

    pu = Spawner(FixedRandom(0.05)).roll_powerup(10, 20)
    assert pu is not None
    assert (pu.x, pu.y) == (10, 20)
    assert pu.kind in POWERUP_TYPES


def test_spawn_powerup_kind_is_random_choice():
    pu = Spawner(FixedRandom(pick="coins")).spawn_powerup(0, 0)
    assert pu.kind == "coins"
    assert pu.radius == 15


def test_fall_speed_never_decreases_and_is_capped():
    speeds = [fall_speed(level) for level in range(1, 60)]
    assert speeds == sorted(speeds)
    assert max(speeds) == MAX_FALL_SPEED
    assert speed_multiplier(10) > speed_multiplier(1)
