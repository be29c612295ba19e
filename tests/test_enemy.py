import numpy as np
import pytest

from config import NUM_COLS
from world.enemy import Enemy, enemy_speed_multiplier


def test_speed_multiplier_grows_half_per_level():
    assert enemy_speed_multiplier(1) == 1.0
    assert enemy_speed_multiplier(2) == 1.5
    assert enemy_speed_multiplier(5) == 3.0


def test_moves_right_by_dt_on_level_one():
    enemy = Enemy(x=1.0, y=2)
    enemy.update(0.5, level=1)
    assert enemy.x == pytest.approx(1.5)
    assert enemy.y == 2


def test_speed_follows_current_level():
    enemy = Enemy(x=1.0, y=1)
    enemy.update(0.5, level=3)
    assert enemy.x == pytest.approx(2.0)


def test_last_column_is_not_wrapped_yet():
    enemy = Enemy(x=float(NUM_COLS - 1), y=1)
    enemy.update(0.25, level=1)
    assert enemy.x == pytest.approx(NUM_COLS - 1 + 0.25)


@pytest.mark.parametrize("seed", range(20))
def test_wraps_to_small_negative_column(seed):
    enemy = Enemy(x=NUM_COLS - 0.9, y=3)
    enemy.update(0.1, level=1, rng=np.random.default_rng(seed))
    assert -3 <= enemy.x < 0
    assert enemy.y == 3


def test_wrap_uses_whole_columns():
    rng = np.random.default_rng(7)
    seen = set()
    for _ in range(200):
        enemy = Enemy(x=NUM_COLS + 0.5, y=1)
        enemy.update(0.016, level=1, rng=rng)
        seen.add(enemy.x)
    assert seen == {-3.0, -2.0, -1.0}
