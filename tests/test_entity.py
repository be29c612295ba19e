from config import OFFSET_X, OFFSET_Y
from world.entity import Entity, grid_to_pixels


def test_grid_to_pixels_lifts_sprite_feet():
    assert grid_to_pixels(2, 3) == (2 * OFFSET_X, 3 * OFFSET_Y - 25)


def test_hidden_entity_draws_nothing(ctx, resources):
    Entity("images/Key.png", 3, 0, False).render(ctx, resources)
    assert ctx.calls == []


def test_visible_entity_draws_at_tile(ctx, resources):
    Entity("images/Gem Blue.png", 4, 2, True).render(ctx, resources)
    (call,) = ctx.calls
    assert call[0] == "draw_image"
    assert call[1].name == "images/Gem Blue.png"
    assert call[2:4] == (4 * 101, 2 * 83 - 25)
    assert call[4:] == (None, None)
