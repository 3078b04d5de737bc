import numpy as np
import pytest

from tilecaster.errors import TextureError
from tilecaster.maps import BRICK_BITMAP, BRICK_PALETTE
from tilecaster.textures import Color, ImageTexture, ProceduralTexture, TextureRegistry
from tilecaster.tile_map import TileMap

from conftest import enclosed_rows, solid_texture


def test_color_has_value_semantics() -> None:
    c = Color(1, 2, 3)
    assert c == (1, 2, 3, 255)
    assert c == Color(1, 2, 3, 255)
    with pytest.raises(AttributeError):
        c.r = 9


def test_procedural_texture_samples_palette_and_wraps() -> None:
    tex = ProceduralTexture(BRICK_BITMAP, BRICK_PALETTE)
    assert (tex.width, tex.height) == (8, 8)
    assert tex.sample(0, 0) == Color(*BRICK_PALETTE[1])
    assert tex.sample(0, 1) == Color(*BRICK_PALETTE[0])
    # Coordinates wrap modulo the texture size.
    assert tex.sample(8 + 3, 16 + 1) == tex.sample(3, 1)
    assert tex.sample(-1, 0) == tex.sample(7, 0)


def test_procedural_texture_rejects_unknown_palette_index() -> None:
    with pytest.raises(TextureError):
        ProceduralTexture([[0, 2]], [(0, 0, 0, 255), (1, 1, 1, 255)])


def test_image_texture_from_flat_colors_is_row_major() -> None:
    colors = [(i, 0, 0, 255) for i in range(6)]
    tex = ImageTexture.from_colors(colors, width=3, height=2)
    assert tex.sample(2, 0) == Color(2, 0, 0)
    assert tex.sample(0, 1) == Color(3, 0, 0)
    with pytest.raises(TextureError):
        ImageTexture.from_colors(colors, width=4, height=2)


def test_rgb_arrays_get_opaque_alpha() -> None:
    tex = ImageTexture(np.zeros((2, 2, 3), dtype=np.uint8))
    assert tex.pixels.shape == (2, 2, 4)
    assert (tex.pixels[:, :, 3] == 255).all()


def test_sample_many_matches_sample() -> None:
    tex = ProceduralTexture(BRICK_BITMAP, BRICK_PALETTE)
    us = np.array([0, 9, 15])
    vs = np.array([1, 3, 22])
    out = tex.sample_many(us, vs)
    for (u, v), row in zip(zip(us, vs), out):
        assert tuple(int(c) for c in row) == tex.sample(u, v)


def test_registry_lookups() -> None:
    red = solid_texture(Color(255, 0, 0))
    blue = solid_texture(Color(0, 0, 255))
    reg = TextureRegistry([red, blue], floors={0: red})
    assert reg.wall(2) is blue
    assert reg.floor(0) is red
    assert reg.floor(1) is None
    with pytest.raises(TextureError):
        reg.wall(3)
    with pytest.raises(TextureError):
        reg.wall(0)


def test_registry_needs_a_wall_texture() -> None:
    with pytest.raises(TextureError):
        TextureRegistry([])


def test_validate_against_textures() -> None:
    rows = enclosed_rows(4, 4, border=3)
    reg = TextureRegistry([solid_texture(Color(1, 1, 1))] * 2)
    with pytest.raises(TextureError, match=r"\[3\]"):
        reg.validate_against_textures(TileMap(rows))
    TextureRegistry([solid_texture(Color(1, 1, 1))] * 3).validate_against_textures(TileMap(rows))
