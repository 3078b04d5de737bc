# tilecaster/config.py
# -*- coding: utf-8 -*-
"""
起動時に一度だけ決める設定値。
- モジュール定数: 既定値（画面 640x480 を 1/4 に縮小して描画 など）
- dataclass: 実際にセッションへ渡す設定。生成時に検証し、不正なら ConfigError
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from tilecaster.errors import ConfigError

# --- 画面（表示側のサーフェス） ---
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
SCREEN_SCALE = 4          # プロジェクション解像度 → 画面への拡大率

# --- レイキャスト ---
FOV = 60.0                # 度
PRECISION = 64            # 1タイル進む間のステップ数

# --- プレイヤー ---
PLAYER_START = (2.0, 2.0)
PLAYER_ANGLE = 90.0       # 度（0=+X、90=+Y）
PLAYER_RADIUS = 0.3
MOVEMENT_SPEED = 0.1      # タイル/tick
ROTATION_SPEED = 4.5      # 度/tick

# --- ループ ---
RENDER_DELAY_MS = 30

# --- 開発用 ---
DEV_MODE = os.getenv("DEV_MODE", "0") == "1"   # 環境変数 DEV_MODE=1 の時だけ詳細ログ


@dataclass(frozen=True)
class ScreenConfig:
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    scale: int = SCREEN_SCALE

    def __post_init__(self):
        if not isinstance(self.scale, int) or isinstance(self.scale, bool) or self.scale < 1:
            raise ConfigError(f"scale must be an integer >= 1, got {self.scale!r}")
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"screen size must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class ProjectionConfig:
    """
    縮小描画用の解像度。half_* は生成時に導出する。
    scale は表示側が拡大に使うだけで、コア側の計算には影響しない。
    """
    width: int
    height: int
    scale: int = 1
    half_width: float = field(init=False)
    half_height: float = field(init=False)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"projection size must be positive, got {self.width}x{self.height}")
        if self.scale < 1:
            raise ConfigError(f"scale must be >= 1, got {self.scale!r}")
        # frozen なので object.__setattr__ で導出値を入れる
        object.__setattr__(self, "half_width", self.width / 2)
        object.__setattr__(self, "half_height", self.height / 2)

    @classmethod
    def from_screen(cls, screen: ScreenConfig) -> "ProjectionConfig":
        return cls(
            width=screen.width // screen.scale,
            height=screen.height // screen.scale,
            scale=screen.scale,
        )

    @property
    def buffer_size(self) -> int:
        return 4 * self.width * self.height


@dataclass(frozen=True)
class RayCastConfig:
    precision: int = PRECISION
    increment_angle: float = 0.0

    def __post_init__(self):
        if not isinstance(self.precision, int) or isinstance(self.precision, bool) or self.precision <= 0:
            raise ConfigError(f"precision must be a positive integer, got {self.precision!r}")

    @classmethod
    def for_projection(cls, fov: float, projection: ProjectionConfig,
                       precision: int = PRECISION) -> "RayCastConfig":
        """隣り合う列の角度差 = FOV / 列数"""
        validate_fov(fov)
        return cls(precision=precision, increment_angle=fov / projection.width)


@dataclass(frozen=True)
class MovementConfig:
    movement_speed: float = MOVEMENT_SPEED
    rotation_speed: float = ROTATION_SPEED

    def __post_init__(self):
        if self.movement_speed < 0 or self.rotation_speed < 0:
            raise ConfigError(
                f"speeds must be >= 0, got movement={self.movement_speed} rotation={self.rotation_speed}"
            )


def validate_fov(fov: float) -> None:
    if not (0.0 < fov < 180.0):
        raise ConfigError(f"fov must be in (0, 180) degrees, got {fov!r}")
