from config import HUD_ORANGE, HUD_BROWN
from ui.overlays import GameOverOverlay, LoadingBanner, banner_colors
from world.world_hud import INSTRUCTIONS, WorldHUD


def test_banner_colours_swap_every_half_second():
    assert banner_colors(0) == (HUD_ORANGE, HUD_BROWN)
    assert banner_colors(499) == (HUD_ORANGE, HUD_BROWN)
    assert banner_colors(500) == (HUD_BROWN, HUD_ORANGE)
    assert banner_colors(1000) == (HUD_ORANGE, HUD_BROWN)


def test_banner_is_filled_and_outlined(ctx):
    LoadingBanner().draw(ctx, 0)
    kinds = [c[0] for c in ctx.calls]
    assert kinds == ["fill_text", "stroke_text"]
    assert ctx.calls[0][4] == "center"


def test_game_over_lines():
    assert GameOverOverlay().lines(4, 12, 61_000) == [
        "Game Over",
        "You reached level 4",
        "You collected 12 gems",
        "Total time 00:01:01.0",
        "Press any key to restart",
    ]


def test_hud_shows_counters_and_instructions(ctx, resources):
    WorldHUD().draw(ctx, resources, lives=2, gems=5, level=3, played_ms=1500)
    texts = ctx.texts()
    assert "x 2" in texts
    assert "x 5" in texts
    assert "3" in texts
    assert "00:00:01.5" in texts
    for line in INSTRUCTIONS:
        assert line in texts
    assert [c[1].name for c in ctx.images()] == ["images/Heart.png", "images/Gem Blue.png"]
    assert len([c for c in ctx.calls if c[0] == "stroke_rect"]) == 4
