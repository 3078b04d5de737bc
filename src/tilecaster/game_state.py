# tilecaster/game_state.py
# -*- coding: utf-8 -*-
"""
プレイヤー状態とキー状態。
以前はモジュール変数で共有していたが、Session が値として持ち回す形にした。
"""
from __future__ import annotations

from dataclasses import dataclass

from tilecaster.config import FOV, PLAYER_ANGLE, PLAYER_RADIUS, PLAYER_START


@dataclass
class PlayerState:
    # プレイヤー座標（タイル単位、連続値）
    x: float = PLAYER_START[0]
    y: float = PLAYER_START[1]
    # 向き（度）。[0, 360) に正規化して持つ
    angle: float = PLAYER_ANGLE
    fov: float = FOV
    radius: float = PLAYER_RADIUS

    @property
    def half_fov(self) -> float:
        return self.fov / 2

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class KeyState:
    """外部（入力収集側）が毎tick作り直して渡す。コアからは読むだけ。"""
    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
