# tilecaster/texture_loader.py
# -*- coding: utf-8 -*-
"""
マップ定義の textures セクションから TextureRegistry を組み立てる。
画像ファイルは pygame で読み込み、RGBA の ndarray に変換してからコアへ渡す。
読み込みに失敗したらプレースホルダーで埋める（起動は止めない）。
"""
from __future__ import annotations

from pathlib import Path

import numpy as np
import pygame

from tilecaster.asset_utils import (
    make_background_placeholder_array,
    make_floor_placeholder_array,
    make_wall_placeholder_array,
)
from tilecaster.errors import TextureError
from tilecaster.textures import ImageTexture, ProceduralTexture, Texture, TextureRegistry


def surface_to_rgba(surf: pygame.Surface, size: tuple[int, int] | None = None,
                    *, opaque: bool = True) -> np.ndarray:
    """
    pygame.Surface → (H, W, 4) の uint8 ndarray。
    - size を渡すとその大きさに縮小/拡大してから変換
    - opaque=True なら α は全面 255（画像の透過は使わない）
    """
    if size is not None and surf.get_size() != tuple(size):
        surf = pygame.transform.smoothscale(surf, size)
    # array3d: (W,H,3) → (H,W,3)
    rgb = pygame.surfarray.array3d(surf).swapaxes(0, 1)
    h, w = rgb.shape[:2]
    if opaque:
        a = np.full((h, w), 255, dtype=np.uint8)
    else:
        try:
            a = pygame.surfarray.array_alpha(surf).swapaxes(0, 1)
        except pygame.error:
            # alphaが取れない場合は全面255扱い
            a = np.full((h, w), 255, dtype=np.uint8)
    out = np.empty((h, w, 4), dtype=np.uint8)
    out[:, :, :3] = rgb
    out[:, :, 3] = a
    return out


def _resolve_path(base_dir: Path, val: str | None) -> Path | None:
    if not val:
        return None
    p = Path(val)
    if p.is_absolute():
        return p
    # "assets/..." はそのまま、ファイル名だけなら assets/textures を補う
    if str(p).startswith("assets/"):
        return (base_dir / p).resolve()
    return (base_dir / "assets" / "textures" / p).resolve()


def _load_surface(base_dir: Path, rel: str | None) -> pygame.Surface | None:
    p = _resolve_path(base_dir, rel)
    if not p:
        return None
    if not p.exists():
        print(f"[WARN] texture not found: {p}")
        return None
    try:
        surf = pygame.image.load(str(p))
    except pygame.error as e:
        print(f"[WARN] texture load failed: {rel} ({e})")
        return None
    # display 初期化後なら現在の表示形式に最適化しておく
    if pygame.display.get_surface() is not None:
        surf = surf.convert_alpha()
    return surf


def _build_texture(base_dir: Path, entry, placeholder) -> Texture:
    """
    entry は以下のどれでもOK:
      - Texture インスタンス
      - (H,W,3|4) ndarray
      - {"bitmap": [[...]], "palette": [(r,g,b,a), ...]}
      - {"image": "file.png", "width": 16, "height": 16}
      - "file.png"
    """
    if isinstance(entry, Texture):
        return entry
    if isinstance(entry, np.ndarray):
        return ImageTexture(entry)
    if isinstance(entry, str):
        entry = {"image": entry}
    if not isinstance(entry, dict):
        raise TextureError(f"unsupported texture entry: {entry!r}")

    if "bitmap" in entry:
        return ProceduralTexture(entry["bitmap"], entry.get("palette") or [])

    w = entry.get("width", 16)
    h = entry.get("height", 16)
    surf = _load_surface(base_dir, entry.get("image"))
    if surf is None:
        return ImageTexture(placeholder(w, h))
    return ImageTexture(surface_to_rgba(surf, (w, h)))


def load_textures(base_dir: Path, map_def: dict) -> TextureRegistry:
    """
    マップ定義から描画用テクスチャ群をロードして返す。
    返却: TextureRegistry(walls=[...], floors={tile_id: ...}, background=...)
    """
    base_dir = Path(base_dir).resolve()
    tex_cfg = (map_def.get("textures") or {})

    # 壁（必須）
    walls = [_build_texture(base_dir, e, make_wall_placeholder_array) for e in tex_cfg.get("walls") or []]
    if not walls:
        print("[WARN] no wall textures configured. using placeholder.")
        walls = [ImageTexture(make_wall_placeholder_array())]

    # 床（None 指定のタイルは描かない）
    floors = {}
    for tile_id, e in (tex_cfg.get("floors") or {}).items():
        if e is None:
            continue
        floors[int(tile_id)] = _build_texture(base_dir, e, make_floor_placeholder_array)

    # 背景
    bg_cfg = tex_cfg.get("background")
    background = None
    if bg_cfg is not None:
        background = _build_texture(base_dir, bg_cfg, make_background_placeholder_array)

    print(f"[TEX] walls={len(walls)} floors={sorted(floors)} background={'yes' if background else 'no'}")
    return TextureRegistry(walls, floors, background)
