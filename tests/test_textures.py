import pytest

try:
    from textures import texture_utils
except Exception as exc:  # no GL library on headless hosts
    pytest.skip(f"OpenGL unavailable: {exc}", allow_module_level=True)


def test_load_image_reports_registered_size(monkeypatch):
    monkeypatch.setitem(texture_utils._TEXTURE_SIZES, 900001, (101, 171))
    monkeypatch.setattr(texture_utils, "load_texture", lambda filename: 900001)
    assert texture_utils.load_image("images/Key.png") == texture_utils.TextureImage(900001, 101, 171)
    assert texture_utils.get_texture_size(900001) == (101, 171)


def test_delete_textures_forgets_sizes(monkeypatch):
    deleted = []
    monkeypatch.setattr(texture_utils, "glDeleteTextures", deleted.extend)
    monkeypatch.setitem(texture_utils._TEXTURE_SIZES, 900002, (10, 5))
    monkeypatch.setitem(texture_utils._TEXTURE_SIZES, 900003, (10, 5))
    texture_utils.delete_textures(iter([900002, 900003]))
    assert deleted == [900002, 900003]
    assert texture_utils.get_texture_size(900002) is None
    assert texture_utils.get_texture_size(900003) is None


def test_delete_nothing_skips_gl(monkeypatch):
    calls = []
    monkeypatch.setattr(texture_utils, "glDeleteTextures", calls.append)
    texture_utils.delete_textures([])
    assert calls == []
