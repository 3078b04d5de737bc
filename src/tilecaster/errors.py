# tilecaster/errors.py
# -*- coding: utf-8 -*-
"""
ロード時に検出する致命的エラー。
フレーム中の「マップ外」「床テクスチャ無し」は例外にせず、その場でスキップする。
"""


class TilecasterError(Exception):
    """tilecaster が送出する例外の基底クラス。"""


class ConfigError(TilecasterError, ValueError):
    """解像度・FOV・精度などの設定値が不正（起動前に検出）。"""


class MapError(TilecasterError, ValueError):
    """マップが矩形でない／外周が閉じていない等（起動前に検出）。"""


class TextureError(TilecasterError, ValueError):
    """壁IDに対応するテクスチャが無い、テクスチャ形状が不正など。"""
