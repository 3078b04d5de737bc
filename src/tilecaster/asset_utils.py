# tilecaster/asset_utils.py
# -*- coding: utf-8 -*-
"""
画像が無いときに使う“見やすいプレースホルダー”を生成するユーティリティ。
- 壁テクスチャ用（マゼンタ地に白の対角線）
- 床テクスチャ用（チェッカー）
- 背景用（空っぽいグラデ＋点）
いずれも (H, W, 4) の uint8 ndarray を返す。
"""
from __future__ import annotations

import numpy as np

MAGENTA = (220, 0, 220, 255)   # “素材なし”感が分かりやすい色
WHITE   = (255, 255, 255, 255)
GRAY1   = (180, 180, 180, 255)
GRAY2   = (120, 120, 120, 255)


def make_wall_placeholder_array(width: int = 16, height: int = 16) -> np.ndarray:
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[:, :] = MAGENTA
    # 対角線グリッド
    step = max(4, width // 4)
    ys, xs = np.mgrid[0:height, 0:width]
    arr[(xs + ys) % step == 0] = WHITE
    return arr


def make_floor_placeholder_array(width: int = 16, height: int = 16) -> np.ndarray:
    """チェッカー模様"""
    cell = max(2, width // 4)
    ys, xs = np.mgrid[0:height, 0:width]
    even = ((xs // cell) + (ys // cell)) % 2 == 0
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[even] = GRAY1
    arr[~even] = GRAY2
    return arr


def make_background_placeholder_array(width: int = 360, height: int = 60) -> np.ndarray:
    """
    背景用パターン（上ほど濃い青のグラデ＋点）。
    横方向は 360 で一周するので、点の間隔は width を割り切る値にしておく。
    """
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    base = np.array([90, 140, 220], dtype=np.float32)
    for y in range(height):
        shade = base * (0.6 + 0.4 * (y / max(1, height - 1)))
        arr[y, :, :3] = np.clip(shade, 0, 255).astype(np.uint8)
    arr[:, :, 3] = 255
    # 星っぽい点を少し
    for y in range(2, height // 2, 7):
        for x in range((y * 3) % 15, width, 15):
            arr[y, x] = WHITE
    return arr
