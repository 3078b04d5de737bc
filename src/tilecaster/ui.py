# tilecaster/ui.py
# -*- coding: utf-8 -*-
"""
表示側の共通UI部品（コアからは使わない）。
- フォーカスを失ったときの「CLICK TO FOCUS」幕
"""
from __future__ import annotations

from functools import lru_cache

import pygame


@lru_cache(maxsize=8)
def get_font(size: int) -> pygame.font.Font:
    """サイズごとにキャッシュ。pygame.font は初期化済みであること。"""
    return pygame.font.SysFont("lucidaconsole,consolas,monospace", size)


def _render_text_with_outline(text: str, font: pygame.font.Font,
                              color=(255, 255, 255),
                              outline_color=(0, 0, 0),
                              outline_px: int = 2) -> pygame.Surface:
    """テキストにアウトライン（縁取り）を付けたSurfaceを作成する。"""
    text_surf = font.render(text, True, color)
    if outline_px <= 0:
        return text_surf

    # 黒テキストを周囲8方向にずらして重ねる簡易法
    base = font.render(text, True, outline_color)
    w, h = text_surf.get_width() + outline_px * 2, text_surf.get_height() + outline_px * 2
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    offs = [-outline_px, 0, outline_px]
    for ox in offs:
        for oy in offs:
            if ox == 0 and oy == 0:
                continue
            surf.blit(base, (ox + outline_px, oy + outline_px))
    surf.blit(text_surf, (outline_px, outline_px))
    return surf


def draw_focus_lost(screen: pygame.Surface, text: str = "CLICK TO FOCUS",
                    veil_rgba=(0, 0, 0, 128), size: int = 40) -> None:
    """最後に表示したフレームの上に半透明の黒幕と案内文を重ねる。"""
    w, h = screen.get_size()
    veil = pygame.Surface((w, h), pygame.SRCALPHA)
    veil.fill(veil_rgba)
    screen.blit(veil, (0, 0))

    label = _render_text_with_outline(text, get_font(size))
    screen.blit(label, label.get_rect(center=(w // 2, h // 2)))
