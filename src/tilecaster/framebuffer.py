# tilecaster/framebuffer.py
# -*- coding: utf-8 -*-
"""
プロジェクション解像度の RGBA バッファ。
中身は長さ 4*W*H の uint8 配列（行優先、オフセット = 4*(x + y*W)）。
pixels は同じメモリを (H, W, 4) で見るビュー。
"""
from __future__ import annotations

import math

import numpy as np

from tilecaster.textures import BLACK, Color


class Framebuffer:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.data = np.zeros(4 * width * height, dtype=np.uint8)
        self.pixels = self.data.reshape(height, width, 4)
        self.clear()

    def __len__(self) -> int:
        return len(self.data)

    def offset(self, x: int, y: int) -> int:
        return 4 * (x + y * self.width)

    def clear(self, color: Color = BLACK) -> None:
        """フレーム頭で必ず呼ぶ（描かれなかった床ピクセルに前フレームが残らないように）"""
        self.pixels[:, :] = color

    def draw_pixel(self, x: float, y: float, color: Color) -> None:
        ix, iy = math.floor(x), math.floor(y)
        if 0 <= ix < self.width and 0 <= iy < self.height:
            o = self.offset(ix, iy)
            self.data[o:o + 4] = color

    def draw_line(self, x: float, y1: float, y2: float, color: Color) -> None:
        """
        列 x に縦線を引く。y = y1, y1+1, ... (< y2) の各点を切り捨てた行に打つ。
        画面外の行は捨てる。
        """
        if y2 <= y1:
            return
        ix = math.floor(x)
        if not 0 <= ix < self.width:
            return
        count = math.ceil(y2 - y1)
        top = math.floor(y1)
        r0 = max(top, 0)
        r1 = min(top + count, self.height)
        if r0 < r1:
            self.pixels[r0:r1, ix] = color

    def get_pixel(self, x: int, y: int) -> Color:
        return Color(*(int(c) for c in self.pixels[y, x]))

    def view(self) -> np.ndarray:
        """表示側に渡す読み取り専用ビュー (H, W, 4)"""
        v = self.pixels.view()
        v.flags.writeable = False
        return v

    def to_bytes(self) -> bytes:
        return self.data.tobytes()
