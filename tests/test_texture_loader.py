import numpy as np
import pygame
import pytest

from tilecaster.errors import TextureError
from tilecaster.maps import MAPS
from tilecaster.texture_loader import load_textures, surface_to_rgba
from tilecaster.textures import Color, ImageTexture, ProceduralTexture


def test_surface_to_rgba_is_row_major_and_opaque() -> None:
    surf = pygame.Surface((3, 2), pygame.SRCALPHA)
    surf.fill((10, 20, 30, 40))
    surf.set_at((2, 1), (200, 0, 0, 0))

    arr = surface_to_rgba(surf)
    assert arr.shape == (2, 3, 4)
    assert arr.dtype == np.uint8
    assert tuple(arr[0, 0]) == (10, 20, 30, 255)
    assert tuple(arr[1, 2]) == (200, 0, 0, 255)

    keep_alpha = surface_to_rgba(surf, opaque=False)
    assert keep_alpha[0, 0, 3] == 40


def test_missing_files_fall_back_to_placeholders(tmp_path) -> None:
    reg = load_textures(tmp_path, MAPS["default"])

    assert isinstance(reg.walls[0], ProceduralTexture)
    assert isinstance(reg.walls[1], ImageTexture)
    assert (reg.walls[1].width, reg.walls[1].height) == (16, 16)
    assert set(reg.floors) == {0}
    assert (reg.background.width, reg.background.height) == (360, 60)


def test_image_files_are_loaded_from_assets_dir(tmp_path) -> None:
    tex_dir = tmp_path / "assets" / "textures"
    tex_dir.mkdir(parents=True)
    surf = pygame.Surface((4, 4))
    surf.fill((1, 2, 3))
    pygame.image.save(surf, str(tex_dir / "stone.png"))

    map_def = {"textures": {"walls": [{"image": "stone.png", "width": 4, "height": 4}]}}
    reg = load_textures(tmp_path, map_def)

    assert reg.walls[0].sample(3, 3) == Color(1, 2, 3)
    assert reg.floors == {}
    assert reg.background is None


def test_unsupported_entry_is_an_error(tmp_path) -> None:
    with pytest.raises(TextureError):
        load_textures(tmp_path, {"textures": {"walls": [42]}})
