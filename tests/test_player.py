import pytest

from config import NUM_COLS, START_COL, START_ROW, PLAYER_START_LIVES
from world.enemy import Enemy
from world.entity import Entity
from world.player import Player, UP, DOWN, LEFT, RIGHT


def test_starts_alive_on_start_cell():
    player = Player()
    assert (player.x, player.y) == (START_COL, START_ROW) == (3, 4)
    assert player.lives == PLAYER_START_LIVES == 4
    assert player.gems == 0
    assert not player.dead


def test_enemy_on_same_cell_kills_in_same_update():
    player = Player()
    player.update(5000.0, [Enemy(x=3.0, y=4)], [])
    assert player.dead
    assert player.dead_since == 5000.0


@pytest.mark.parametrize("enemy_x", [2.31, 3.0, 3.69])
def test_enemy_closer_than_threshold_kills(enemy_x):
    player = Player()
    player.update(10.0, [Enemy(x=enemy_x, y=4)], [])
    assert player.dead


@pytest.mark.parametrize("enemy_x", [2.3, 3.7, 0.0, 6.0])
def test_enemy_at_or_beyond_threshold_is_harmless(enemy_x):
    player = Player()
    player.update(10.0, [Enemy(x=enemy_x, y=4)], [])
    assert not player.dead


def test_enemy_on_other_row_is_harmless():
    player = Player()
    player.update(10.0, [Enemy(x=3.0, y=3)], [])
    assert not player.dead


def test_dead_player_ignores_input():
    player = Player(x=2, y=2)
    player.die(100.0)
    for direction in (UP, DOWN, LEFT, RIGHT):
        player.handle_input(direction)
    assert (player.x, player.y) == (2, 2)
    assert player.dead


def test_respawn_after_death_pause():
    player = Player(x=5, y=1)
    player.die(1000.0)

    player.update(1999.0, [], [])
    assert player.dead
    assert player.lives == 4

    player.update(2000.0, [], [])
    assert not player.dead
    assert (player.x, player.y) == (START_COL, START_ROW)
    assert player.lives == 3


def test_lives_never_go_negative():
    player = Player(lives=0)
    player.die(0.0)
    player.update(1500.0, [], [])
    assert not player.dead
    assert player.lives == 0


def test_dead_player_does_not_collect_or_die_again():
    player = Player(x=2, y=2)
    player.die(0.0)
    gems = [Entity("g", 3, 4, True)]
    player.update(10.0, [Enemy(x=3.0, y=4)], gems)
    assert len(gems) == 1
    assert player.dead_since == 0.0


def test_picks_up_gem_under_player():
    player = Player(x=2, y=1)
    here = Entity("images/Gem Blue.png", 2, 1, True)
    elsewhere = Entity("images/Gem Green.png", 5, 2, True)
    gems = [here, elsewhere]
    player.update(0.0, [], gems)
    assert gems == [elsewhere]
    assert player.gems == 1


def test_pickup_happens_before_collision():
    player = Player(x=2, y=1)
    gems = [Entity("g", 2, 1, True)]
    player.update(0.0, [Enemy(x=2.0, y=1)], gems)
    assert gems == []
    assert player.gems == 1
    assert player.dead


@pytest.mark.parametrize(
    "start, direction, end",
    [
        ((3, 4), UP, (3, 3)),
        ((3, 4), LEFT, (2, 4)),
        ((3, 4), RIGHT, (4, 4)),
        ((3, 3), DOWN, (3, 4)),
        ((3, 0), UP, (3, 0)),
        ((0, 2), LEFT, (0, 2)),
        ((NUM_COLS - 1, 2), RIGHT, (NUM_COLS - 1, 2)),
        ((3, START_ROW), DOWN, (3, START_ROW)),
        ((3, 2), None, (3, 2)),
        ((3, 2), "jump", (3, 2)),
    ],
)
def test_moves_one_cell_inside_board(start, direction, end):
    player = Player(x=start[0], y=start[1])
    player.handle_input(direction)
    assert (player.x, player.y) == end


def test_render_normal_size_with_scroll_margin(ctx, resources):
    Player().render(ctx, resources, top_margin=40.0)
    (call,) = ctx.calls
    _, img, x, y, w, h = call
    assert img.name == "images/char-boy.png"
    assert (x, y) == (3 * 101, 40.0 + 4 * 83 - 25)
    assert (w, h) == (img.width, img.height)


def test_render_enlarged_while_dead(ctx, resources):
    player = Player()
    player.die(0.0)
    player.render(ctx, resources)
    _, img, x, y, w, h = ctx.calls[0]
    assert (x, y) == (3 * 101 - 10, 4 * 83 - 25)
    assert (w, h) == (img.width + 20, img.height + 20)


def test_render_row_override(ctx, resources):
    Player().render(ctx, resources, row=1)
    assert ctx.calls[0][3] == 1 * 83 - 25
