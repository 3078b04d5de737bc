# tilecaster/compositor.py
# -*- coding: utf-8 -*-
"""
1列ずつ「背景（空）→ 壁 → 床」の順にフレームバッファへ書き込む。

重要ポイント:
  - 壁の高さは補正後距離に反比例: floor(half_height / distance)
  - 壁の縦方向はテクスチャの行ごとに塗る。継ぎ目が出ないよう各行 +2px はみ出して塗る
  - 床はピクセル単位の逆投影（floorcasting）。テクスチャ座標はワールド座標そのまま
  - 背景はプレイヤーの向き + 列番号でスクロール（距離による変化なし）
"""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from tilecaster.config import ProjectionConfig
from tilecaster.framebuffer import Framebuffer
from tilecaster.game_state import PlayerState
from tilecaster.raycast import RayHit, correct_floor_distance
from tilecaster.textures import Texture, TextureRegistry
from tilecaster.tile_map import TileMap

# 壁テクスチャの各行を塗るときのはみ出し量（px）
WALL_OVERDRAW = 2
# 補正後距離が 0 以下になった場合の下限（0 除算防止）
MIN_DISTANCE = 1e-6


def wall_height(projection: ProjectionConfig, corrected_distance: float) -> int:
    return math.floor(projection.half_height / max(corrected_distance, MIN_DISTANCE))


def wall_texture_column(texture: Texture, hit_x: float, hit_y: float) -> int:
    """当たり位置 (x + y) をテクスチャ横方向に写す。軸平行の壁なので片方は整数付近で安定する。"""
    return math.floor(texture.width * (hit_x + hit_y)) % texture.width


def background_coords(player_angle: float, column: int, row: int, background: Texture) -> tuple[int, int]:
    tx = math.floor((player_angle + column) % background.width)
    ty = math.floor(row % background.height)
    return tx, ty


def floor_distance(row, projection_height: int):
    """
    画面の行 y → 床までの距離（補正前）: height / (2y - height)
    地平線付近で大きく、下へ行くほど小さくなる。numpy 配列もそのまま受け付ける。
    """
    return projection_height / (2 * row - projection_height)


def floor_rows(projection: ProjectionConfig, height: int) -> np.ndarray:
    """
    床を描く行の y（小数のまま）。half_height + height + 1 から 1 ずつ、画面下端の手前まで。
    高さが奇数だと y は 0.5 刻みになる。距離はこの y で求め、書き込み時だけ切り捨てる。
    """
    start = projection.half_height + height + 1
    if start >= projection.height:
        return np.empty(0, dtype=np.float64)
    return start + np.arange(math.ceil(projection.height - start), dtype=np.float64)


def draw_background(fb: Framebuffer, column: int, y1: float, y2: float,
                    player_angle: float, background: Texture) -> None:
    """列 column の [y1, y2) に背景パノラマを描く。"""
    r0 = max(math.floor(y1), 0)
    r1 = min(math.ceil(y2), fb.height)
    if r0 >= r1:
        return
    tx, _ = background_coords(player_angle, column, r0, background)
    rows = np.arange(r0, r1)
    fb.pixels[r0:r1, column] = background.pixels[rows % background.height, tx]


def draw_wall(fb: Framebuffer, projection: ProjectionConfig, column: int, height: int,
              texture: Texture, tex_col: int) -> None:
    y_step = (height * 2) / texture.height
    y = projection.half_height - height

    for i in range(texture.height):
        color = texture.sample(tex_col, i)
        fb.draw_line(column, y, math.floor(y + y_step + WALL_OVERDRAW), color)
        y += y_step


def draw_floor(fb: Framebuffer, projection: ProjectionConfig, column: int, height: int,
               ray_angle: float, player: PlayerState, tile_map: TileMap,
               textures: TextureRegistry) -> None:
    """
    床の逆投影描画（1列分を numpy でまとめて計算）。
    - マップ外の点、床テクスチャの無いタイルは描かない（背景/クリア色が残る）
    """
    ys = floor_rows(projection, height)
    if ys.size == 0 or not textures.floors:
        return

    rows = np.floor(ys).astype(np.int64)
    dist = floor_distance(ys, projection.height)
    # 魚眼補正（床は cos で割る）
    dist = correct_floor_distance(dist, ray_angle, player.angle)

    rad = math.radians(ray_angle)
    world_x = player.x + dist * math.cos(rad)
    world_y = player.y + dist * math.sin(rad)

    ti = np.floor(world_x).astype(np.int64)
    tj = np.floor(world_y).astype(np.int64)

    # マップ範囲内だけを描画対象にするマスク
    inside = (tj >= 0) & (tj < tile_map.height) & (ti >= 0) & (ti < tile_map.width)
    if not inside.any():
        return

    tile_ids = np.full(rows.shape, -1, dtype=np.int64)
    tile_ids[inside] = tile_map.grid[tj[inside], ti[inside]]

    for tile_id, texture in textures.floors.items():
        m = inside & (tile_ids == tile_id)
        if not m.any():
            continue
        # テクスチャ座標はタイル内の相対位置ではなくワールド座標から直接求める
        tx = np.floor(world_x[m] * texture.width).astype(np.int64)
        ty = np.floor(world_y[m] * texture.height).astype(np.int64)
        fb.pixels[rows[m], column] = texture.sample_many(tx, ty)


def draw_column(fb: Framebuffer, projection: ProjectionConfig, hit: RayHit, player: PlayerState,
                tile_map: TileMap, textures: TextureRegistry) -> None:
    height = wall_height(projection, hit.corrected_distance)

    if textures.background is not None:
        draw_background(fb, hit.column, 0, projection.half_height - height,
                        player.angle, textures.background)

    texture = textures.wall(hit.wall_id)
    draw_wall(fb, projection, hit.column, height, texture,
              wall_texture_column(texture, hit.hit_x, hit.hit_y))

    draw_floor(fb, projection, hit.column, height, hit.ray_angle, player, tile_map, textures)


def composite(fb: Framebuffer, projection: ProjectionConfig, hits: Iterable[RayHit],
              player: PlayerState, tile_map: TileMap, textures: TextureRegistry) -> Framebuffer:
    for hit in hits:
        draw_column(fb, projection, hit, player, tile_map, textures)
    return fb
