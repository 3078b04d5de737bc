# tilecaster/player.py
# -*- coding: utf-8 -*-
"""
プレイヤー移動と衝突判定のユーティリティ。
- 前後移動: X/Y を軸ごとに別々に判定するので、壁に斜めに当たっても滑って進める
- 回転    : 度で加減算し [0, 360) に正規化
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from tilecaster.config import MovementConfig
from tilecaster.game_state import KeyState, PlayerState
from tilecaster.tile_map import TileMap


def _step(player: PlayerState, tile_map: TileMap, dx: float, dy: float) -> bool:
    """
    (dx, dy) だけ進もうとする。先読みは移動ベクトル × radius。
    Y を先に確定し、X の判定には確定後の Y を使う。
    """
    new_x = player.x + dx
    new_y = player.y + dy
    check_x = math.floor(new_x + dx * player.radius)
    check_y = math.floor(new_y + dy * player.radius)

    moved = False
    # --- Y軸 ---
    if tile_map.is_walkable(math.floor(player.x), check_y):
        player.y = new_y
        moved = True
    # --- X軸 ---
    if tile_map.is_walkable(check_x, math.floor(player.y)):
        player.x = new_x
        moved = True
    return moved


def handle_movement(*, keys: KeyState, player: PlayerState, tile_map: TileMap, speed: float) -> bool:
    """
    前進/後退キーでプレイヤーを動かす。どちらかの軸で位置が変わったら True。
    前後同時押しは両方処理する（打ち消し合う）。
    """
    rad = math.radians(player.angle)
    moved = False

    if keys.forward:
        moved |= _step(player, tile_map, math.cos(rad) * speed, math.sin(rad) * speed)
    if keys.backward:
        moved |= _step(player, tile_map, -math.cos(rad) * speed, -math.sin(rad) * speed)
    return moved


def normalize_degrees(angle: float) -> float:
    """負の値は先に +360 してから 360 で割った余りを取る。"""
    if angle < 0:
        angle += 360.0
    return angle % 360.0


def handle_rotation(*, keys: KeyState, player: PlayerState, rot_per_tick: float) -> bool:
    """左右キーで視点回転。回転が発生したら True。"""
    rotated = False

    # --- 左右回転 ---------------------------------------------------------
    if keys.left:
        player.angle = normalize_degrees(player.angle - rot_per_tick)
        rotated = True
    if keys.right:
        player.angle = normalize_degrees(player.angle + rot_per_tick)
        rotated = True
    return rotated


@dataclass
class MovementController:
    """1 tick に1回 update() を呼ぶ。PlayerState をその場で書き換える。"""
    config: MovementConfig = field(default_factory=MovementConfig)

    def update(self, keys: KeyState, player: PlayerState, tile_map: TileMap) -> None:
        # ① まず移動処理
        handle_movement(keys=keys, player=player, tile_map=tile_map, speed=self.config.movement_speed)
        # ② 次に回転処理
        handle_rotation(keys=keys, player=player, rot_per_tick=self.config.rotation_speed)
