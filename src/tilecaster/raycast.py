# tilecaster/raycast.py
# -*- coding: utf-8 -*-
"""
壁のレイキャスティング（レイマーチング）と魚眼補正。

DDA ではなく、1/precision ずつの固定ステップで進めて壁タイルに入った地点を当たりとする。
単純さ優先なので遅いが、マップ外周が閉じていれば必ず止まる。
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from tilecaster.config import ProjectionConfig, RayCastConfig
from tilecaster.game_state import PlayerState
from tilecaster.tile_map import EMPTY, TileMap

# マップ外に出たレイは壁ID 1 扱いにして止める（実在の壁ではない）
OUT_OF_BOUNDS_WALL_ID = 1


@dataclass(frozen=True)
class RayHit:
    column: int
    wall_id: int
    hit_x: float
    hit_y: float
    raw_distance: float
    corrected_distance: float
    ray_angle: float      # 度


def correct_wall_distance(raw_distance: float, ray_angle: float, player_angle: float) -> float:
    """魚眼補正（壁）: 斜辺 → 視線方向の隣辺。角度はレイ自身の角度 - プレイヤーの向き。"""
    return raw_distance * math.cos(math.radians(ray_angle - player_angle))


def correct_floor_distance(distance: float, ray_angle: float, player_angle: float) -> float:
    """魚眼補正（床）: 壁とは逆に cos で割る。"""
    return distance / math.cos(math.radians(ray_angle - player_angle))


def march(tile_map: TileMap, x: float, y: float, angle: float, precision: int) -> tuple[int, float, float]:
    """
    (x, y) から angle 方向へ進み、最初の壁タイルの ID と当たり位置を返す。
    マップ外に出たら OUT_OF_BOUNDS_WALL_ID で打ち切る。
    """
    rad = math.radians(angle)
    step_x = math.cos(rad) / precision
    step_y = math.sin(rad) / precision
    grid = tile_map.grid
    w, h = tile_map.width, tile_map.height

    wall = EMPTY
    while wall == EMPTY:
        x += step_x
        y += step_y
        if y < 0 or y >= h or x < 0 or x >= w:
            wall = OUT_OF_BOUNDS_WALL_ID
        else:
            wall = int(grid[int(y), int(x)])
    return wall, x, y


def cast_ray(player: PlayerState, tile_map: TileMap, ray_angle: float, precision: int,
             column: int = 0) -> RayHit:
    wall, hit_x, hit_y = march(tile_map, player.x, player.y, ray_angle, precision)
    raw = math.hypot(player.x - hit_x, player.y - hit_y)
    return RayHit(
        column=column,
        wall_id=wall,
        hit_x=hit_x,
        hit_y=hit_y,
        raw_distance=raw,
        corrected_distance=correct_wall_distance(raw, ray_angle, player.angle),
        ray_angle=ray_angle,
    )


def column_angle(player: PlayerState, raycast: RayCastConfig, column: int) -> float:
    """列 column のレイ角度（左端 = 向き - FOV/2）"""
    return player.angle - player.half_fov + column * raycast.increment_angle


def cast_rays(player: PlayerState, projection: ProjectionConfig, raycast: RayCastConfig,
              tile_map: TileMap) -> list[RayHit]:
    """画面の列ごとに1本ずつ、左から順に projection.width 本のレイを飛ばす。"""
    return [
        cast_ray(player, tile_map, column_angle(player, raycast, col), raycast.precision, column=col)
        for col in range(projection.width)
    ]
