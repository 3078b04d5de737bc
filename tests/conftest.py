"""Test configuration.

Make ``src/`` importable even when the package has not been installed, and
provide the small maps and texture tables the tests share.
"""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tilecaster.textures import Color, ImageTexture, TextureRegistry  # noqa: E402
from tilecaster.tile_map import TileMap  # noqa: E402


def enclosed_rows(width: int, height: int, border: int = 1) -> list[list[int]]:
    rows = []
    for y in range(height):
        if y in (0, height - 1):
            rows.append([border] * width)
        else:
            rows.append([border] + [0] * (width - 2) + [border])
    return rows


def solid_texture(color: Color, width: int = 4, height: int = 4) -> ImageTexture:
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[:, :] = color
    return ImageTexture(arr)


@pytest.fixture
def room10() -> TileMap:
    """10x10 room, border id 2, empty interior."""
    return TileMap(enclosed_rows(10, 10, border=2))


@pytest.fixture
def room5() -> TileMap:
    return TileMap(enclosed_rows(5, 5, border=1))


@pytest.fixture
def two_walls() -> TextureRegistry:
    return TextureRegistry(
        walls=[solid_texture(Color(200, 0, 0)), solid_texture(Color(0, 200, 0))],
        floors={0: solid_texture(Color(0, 0, 200))},
        background=solid_texture(Color(10, 10, 10), width=360, height=60),
    )
