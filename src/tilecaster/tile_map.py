# tilecaster/tile_map.py
# -*- coding: utf-8 -*-
"""
タイルマップ（2次元のタイルID配列）。

- 0   : 空間（歩ける）
- 1以上: 壁。壁テクスチャ表の (id - 1) 番を使う
- マップ外は呼び出し側で「壁扱い」または「描かない」を選ぶ（tile_at は None を返す）
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from tilecaster.errors import MapError

EMPTY = 0


def _assert_rectangular(rows: Sequence[Sequence[int]]) -> None:
    """起動時マップチェック：マップは矩形か？"""
    if not rows or not len(rows[0]):
        raise MapError("Map layout is empty")
    w0 = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != w0:
            # 問題行の中身も併記（デバッグ短縮）
            raise MapError(
                f"Map layout is not rectangular at row {y}: expected {w0}, got {len(row)} -> {list(row)!r}"
            )


def build_tile_grid(rows: Sequence[Sequence[int]]) -> np.ndarray:
    """マップ定義（行のリスト）を (H, W) の整数配列に変換する。"""
    _assert_rectangular(rows)
    try:
        arr = np.array(rows, dtype=np.int64)
    except (TypeError, ValueError) as e:
        raise MapError(f"Map layout must contain integers only: {e}") from e
    if (arr < 0).any():
        y, x = np.argwhere(arr < 0)[0]
        raise MapError(f"Negative tile id {arr[y, x]} at ({x}, {y})")
    return arr


class TileMap:
    """読み込み後は不変のタイルグリッド。grid[y, x] でアクセスする。"""

    def __init__(self, rows: Sequence[Sequence[int]], *, require_enclosed: bool = True):
        grid = build_tile_grid(rows)
        grid.flags.writeable = False
        self.grid = grid
        self.height, self.width = grid.shape
        if require_enclosed:
            self.assert_enclosed()

    def __repr__(self) -> str:
        return f"TileMap({self.width}x{self.height})"

    def in_bounds(self, x: float, y: float) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: float, y: float) -> int | None:
        """ワールド座標 (x, y) を切り捨てたタイルID。マップ外は None。"""
        if not self.in_bounds(x, y):
            return None
        return int(self.grid[int(y), int(x)])

    def is_walkable(self, tx: int, ty: int) -> bool:
        """タイル座標で判定。マップ外は壁扱い。"""
        if 0 <= ty < self.height and 0 <= tx < self.width:
            return self.grid[ty, tx] == EMPTY
        return False

    def wall_ids(self) -> set[int]:
        return {int(v) for v in np.unique(self.grid) if v != EMPTY}

    def assert_enclosed(self) -> None:
        """外周がすべて壁か？（レイやプレイヤーがマップ外へ抜けないことの保証）"""
        g = self.grid
        border = np.concatenate([g[0, :], g[-1, :], g[:, 0], g[:, -1]])
        if (border == EMPTY).any():
            # どこが空いているかを最初の1箇所だけ示す
            for y in range(self.height):
                for x in range(self.width):
                    on_edge = x in (0, self.width - 1) or y in (0, self.height - 1)
                    if on_edge and g[y, x] == EMPTY:
                        raise MapError(f"Map border is not enclosed: empty tile at ({x}, {y})")
