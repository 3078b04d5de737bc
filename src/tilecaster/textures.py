# tilecaster/textures.py
# -*- coding: utf-8 -*-
"""
テクスチャと背景の登録簿。

テクスチャは2種類:
  - ProceduralTexture: パレット番号のビットマップ + パレット（手描きの小さな模様）
  - ImageTexture     : 画像から作った RGBA 配列（長さ width*height の色の並び）
どちらも sample(u, v) -> Color と、ベクトル化用の pixels (H, W, 4) を持つ。
画像ファイルの読み込みはここでは行わない（texture_loader の担当）。
"""
from __future__ import annotations

from typing import Mapping, NamedTuple, Sequence

import numpy as np

from tilecaster.errors import TextureError


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


BLACK = Color(0, 0, 0, 255)


def _as_rgba_array(arr) -> np.ndarray:
    """(H, W, 3) / (H, W, 4) を (H, W, 4) uint8 に揃える。RGB なら α=255 を補う。"""
    arr = np.asarray(arr)
    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise TextureError(f"texture pixels must be (H, W, 3|4), got shape {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise TextureError("texture must not be empty")
    if arr.shape[2] == 3:
        alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
        arr = np.concatenate([arr.astype(np.uint8), alpha], axis=2)
    return np.ascontiguousarray(arr, dtype=np.uint8)


class Texture:
    """サンプリング可能な面。座標は幅・高さで折り返す。"""

    pixels: np.ndarray  # (H, W, 4) uint8

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def sample(self, u: int, v: int) -> Color:
        r, g, b, a = self.pixels[int(v) % self.height, int(u) % self.width]
        return Color(int(r), int(g), int(b), int(a))

    def sample_many(self, us: np.ndarray, vs: np.ndarray) -> np.ndarray:
        """整数座標配列をまとめてサンプリング → (N, 4)"""
        return self.pixels[vs % self.height, us % self.width]


class ProceduralTexture(Texture):
    """パレット番号のビットマップ。bitmap[row][col] が palette の添字。"""

    def __init__(self, bitmap: Sequence[Sequence[int]], palette: Sequence[Sequence[int]]):
        idx = np.asarray(bitmap, dtype=np.int64)
        if idx.ndim != 2 or idx.size == 0:
            raise TextureError("bitmap must be a non-empty 2D grid")
        pal = np.asarray([tuple(Color(*c)) for c in palette], dtype=np.uint8)
        if len(pal) == 0:
            raise TextureError("palette must not be empty")
        if idx.min() < 0 or idx.max() >= len(pal):
            raise TextureError(f"bitmap refers to palette index {int(idx.max())} but palette has {len(pal)} colors")
        self.bitmap = idx
        self.palette = [Color(*map(int, c)) for c in pal]
        self.pixels = pal[idx]


class ImageTexture(Texture):
    """画像由来の RGBA 配列。"""

    def __init__(self, pixels: np.ndarray):
        self.pixels = _as_rgba_array(pixels)

    @classmethod
    def from_colors(cls, colors: Sequence[Sequence[int]], width: int, height: int) -> "ImageTexture":
        """長さ width*height の色リスト（行優先）から作る。"""
        if len(colors) != width * height:
            raise TextureError(f"expected {width * height} colors for {width}x{height}, got {len(colors)}")
        arr = np.asarray([tuple(Color(*c)) for c in colors], dtype=np.uint8)
        return cls(arr.reshape(height, width, 4))


class TextureRegistry:
    """
    壁・床・背景の表。
    - walls      : 壁ID n → walls[n - 1]
    - floors     : タイルID → 床テクスチャ（無ければ床は描かない）
    - background : 横長パノラマ（プレイヤーの向きでスクロール）
    """

    def __init__(self, walls: Sequence[Texture], floors: Mapping[int, Texture] | None = None,
                 background: Texture | None = None):
        if not walls:
            # マップ外のレイは壁ID 1 として描くので、最低1枚は必須
            raise TextureError("at least one wall texture is required")
        self.walls = list(walls)
        self.floors = dict(floors or {})
        self.background = background

    def wall(self, wall_id: int) -> Texture:
        if not 1 <= wall_id <= len(self.walls):
            raise TextureError(f"no wall texture for wall id {wall_id} (have {len(self.walls)})")
        return self.walls[wall_id - 1]

    def floor(self, tile_id: int) -> Texture | None:
        return self.floors.get(tile_id)

    def validate_against_textures(self, tile_map) -> None:
        """マップ中の壁IDが全部テクスチャ表に収まっているかを起動前に確認する。"""
        missing = sorted(i for i in tile_map.wall_ids() if i > len(self.walls))
        if missing:
            raise TextureError(f"wall ids {missing} have no texture (have {len(self.walls)} wall textures)")
