# tilecaster/session.py
# -*- coding: utf-8 -*-
"""
1つのマップを遊ぶ間の状態をまとめて持つ。
tick(keys) が 1フレーム分（クリア → 移動 → レイ → 合成）を最後まで行い、
フレームバッファを返す。タイミング制御は呼び出し側の仕事。
"""
from __future__ import annotations

from pathlib import Path

from tilecaster.compositor import composite
from tilecaster.config import (
    DEV_MODE,
    MovementConfig,
    PLAYER_ANGLE,
    PLAYER_START,
    PRECISION,
    ProjectionConfig,
    RayCastConfig,
    ScreenConfig,
    validate_fov,
)
from tilecaster.errors import MapError
from tilecaster.framebuffer import Framebuffer
from tilecaster.game_state import KeyState, PlayerState
from tilecaster.player import MovementController, normalize_degrees
from tilecaster.raycast import RayHit, cast_rays
from tilecaster.textures import TextureRegistry
from tilecaster.tile_map import TileMap


class Session:
    def __init__(
        self,
        tile_map: TileMap,
        player: PlayerState,
        textures: TextureRegistry,
        projection: ProjectionConfig,
        raycast: RayCastConfig | None = None,
        movement: MovementController | None = None,
    ):
        validate_fov(player.fov)
        player.angle = normalize_degrees(player.angle)
        if not tile_map.is_walkable(int(player.x), int(player.y)):
            raise MapError(f"player start ({player.x}, {player.y}) is not on an empty tile")
        # 壁IDとテクスチャ表の突き合わせ（描画中に落ちないよう、ここで止める）
        textures.validate_against_textures(tile_map)

        self.tile_map = tile_map
        self.player = player
        self.textures = textures
        self.projection = projection
        self.raycast = raycast or RayCastConfig.for_projection(player.fov, projection)
        self.movement = movement or MovementController()
        self.framebuffer = Framebuffer(projection.width, projection.height)
        self.last_hits: list[RayHit] = []

        if DEV_MODE:
            print(f"[MAP] {tile_map!r} projection={projection.width}x{projection.height} "
                  f"precision={self.raycast.precision} step={self.raycast.increment_angle:.4f}deg")

    @classmethod
    def from_map_def(cls, map_def: dict, textures: TextureRegistry, *,
                     screen: ScreenConfig | None = None,
                     precision: int = PRECISION,
                     movement: MovementConfig | None = None) -> "Session":
        """MAPS の1エントリ（layout/start）からセッションを作る。"""
        tile_map = TileMap(map_def["layout"])
        start = map_def.get("start") or {}
        player = PlayerState(
            x=float(start.get("x", PLAYER_START[0])),
            y=float(start.get("y", PLAYER_START[1])),
            angle=float(start.get("angle", PLAYER_ANGLE)),
        )
        projection = ProjectionConfig.from_screen(screen or ScreenConfig())
        return cls(
            tile_map,
            player,
            textures,
            projection,
            raycast=RayCastConfig.for_projection(player.fov, projection, precision),
            movement=MovementController(movement or MovementConfig()),
        )

    @classmethod
    def load(cls, base_dir: Path, map_def: dict, **kwargs) -> "Session":
        """テクスチャ読み込み（pygame）込みで作る。表示側から使う。"""
        from tilecaster.texture_loader import load_textures

        return cls.from_map_def(map_def, load_textures(base_dir, map_def), **kwargs)

    def render(self) -> Framebuffer:
        """移動せずに現在の姿勢で1フレーム描く。"""
        fb = self.framebuffer
        fb.clear()
        self.last_hits = cast_rays(self.player, self.projection, self.raycast, self.tile_map)
        return composite(fb, self.projection, self.last_hits, self.player, self.tile_map, self.textures)

    def tick(self, keys: KeyState) -> Framebuffer:
        self.movement.update(keys, self.player, self.tile_map)
        return self.render()
