# tilecaster/__init__.py
# -*- coding: utf-8 -*-
"""
タイルマップを疑似3Dの一人称視点に投影するレイキャスティングエンジン。
描画はプロジェクション解像度の RGBA バッファに行い、表示側で拡大する。
"""
from tilecaster.errors import TilecasterError, ConfigError, MapError, TextureError
from tilecaster.game_state import KeyState, PlayerState
from tilecaster.session import Session

__all__ = [
    "TilecasterError",
    "ConfigError",
    "MapError",
    "TextureError",
    "KeyState",
    "PlayerState",
    "Session",
]
