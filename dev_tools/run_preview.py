# run_preview.py
# ============================================================
# run_preview.py - テクスチャ確認用スクリプト
# ============================================================
# マップ定義（tilecaster.maps.MAPS）の textures を実際のローダーで読み込み、
# 壁 / 床 / 背景テクスチャを1枚ずつ拡大表示する「プレビュー専用ツール」です。
# 画像が見つからずプレースホルダーになっているものもそのまま表示されます。
#
# 操作方法（キーボード）:
#   - Esc / Q      : 終了
#   - ← / →        : 前 / 次のテクスチャ
#   - ↑ / ↓        : スケール倍率を 1〜32 の範囲で拡大 / 縮小
#   - B            : 背景を暗いグレー / 明るいグレーに切り替え
#
# 使い方:
#   python dev_tools/run_preview.py [map_id]
# ============================================================
import sys
from pathlib import Path

import pygame

# --- 1) src/ を import パスに入れる ---
ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tilecaster.maps import MAPS  # noqa: E402
from tilecaster.texture_loader import load_textures  # noqa: E402

# --- 2) 基本設定 ---
SCREEN_W, SCREEN_H = 800, 600         # プレビュー用の画面サイズ
BASE_SCALE = 8                        # 初期スケール（ピクセル数×倍率）


def collect_entries(registry):
    """[(ラベル, Texture), ...] に並べる"""
    out = [(f"wall {i + 1}", t) for i, t in enumerate(registry.walls)]
    out += [(f"floor tile={tid}", t) for tid, t in sorted(registry.floors.items())]
    if registry.background is not None:
        out.append(("background", registry.background))
    return out


def texture_surface(texture) -> pygame.Surface:
    """Texture の RGBA 配列 → pygame.Surface"""
    return pygame.image.frombuffer(texture.pixels.tobytes(), (texture.width, texture.height), "RGBA")


def main(map_id: str = "default"):
    pygame.init()
    pygame.display.set_caption("tilecaster – Texture Preview")
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    clock = pygame.time.Clock()

    registry = load_textures(SRC_DIR, MAPS[map_id])
    entries = collect_entries(registry)
    idx = 0
    scale = BASE_SCALE
    bg_dark = True
    font = pygame.font.SysFont(None, 22)

    while True:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit()
                return
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit()
                    return
                elif e.key == pygame.K_RIGHT:
                    idx = (idx + 1) % len(entries)
                elif e.key == pygame.K_LEFT:
                    idx = (idx - 1) % len(entries)
                elif e.key == pygame.K_UP:
                    scale = min(32, scale + 1)
                    print(f"Scale: x{scale}")
                elif e.key == pygame.K_DOWN:
                    scale = max(1, scale - 1)
                    print(f"Scale: x{scale}")
                elif e.key == pygame.K_b:
                    bg_dark = not bg_dark

        # 背景
        c = 18 if bg_dark else 60
        screen.fill((c, c, c))

        label, tex = entries[idx]
        img = texture_surface(tex)
        # ドットを保つニアレスト拡大（画面からはみ出す分は縮める）
        fit = max(1, min(scale, SCREEN_W // tex.width, SCREEN_H // tex.height))
        img = pygame.transform.scale(img, (tex.width * fit, tex.height * fit))
        rect = img.get_rect(center=(SCREEN_W // 2, SCREEN_H // 2))
        screen.blit(img, rect)

        # インフォ小表示
        info = f"{idx + 1}/{len(entries)}  {label}  {tex.width}x{tex.height}  Scale:x{fit}"
        screen.blit(font.render(info, True, (200, 200, 200)), (10, 10))

        pygame.display.flip()
        clock.tick(30)


if __name__ == "__main__":
    main(*sys.argv[1:2])
