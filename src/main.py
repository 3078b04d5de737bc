# main.py
"""
tilecaster ─ タイルマップ・レイキャスティング

---

Code licensed under the MIT License.

---

## External Libraries

- pygame
  © 2000–2024 Pygame developers
  Licensed under the LGPL v2.1 License
  https://www.pygame.org/docs/license.html

- NumPy
  © 2005–2025 NumPy Developers. All rights reserved.
  Licensed under the BSD 3-Clause License (NumPy License)
  https://numpy.org

---

操作:
  W / S : 前進 / 後退
  A / D : 左回転 / 右回転
  ウィンドウからフォーカスが外れると一時停止。クリックで再開。
"""

from pathlib import Path
import sys

import pygame

from tilecaster.config import DEV_MODE, RENDER_DELAY_MS, ScreenConfig
from tilecaster.errors import TilecasterError
from tilecaster.game_state import KeyState
from tilecaster.maps import MAPS
from tilecaster.session import Session
from tilecaster.ui import draw_focus_lost

# タスクバーのタイトル
GAME_TITLE: str = "tilecaster"

# --- プロジェクトのルート設定 ---
BASE_DIR = Path(__file__).resolve().parent

# --- キー割り当て（W/S/A/D） ---
KEY_FORWARD = pygame.K_w
KEY_BACKWARD = pygame.K_s
KEY_LEFT = pygame.K_a
KEY_RIGHT = pygame.K_d


def read_keys() -> KeyState:
    """pygame.key.get_pressed() → KeyState（コアが読むのはこれだけ）"""
    keys = pygame.key.get_pressed()
    return KeyState(
        forward=bool(keys[KEY_FORWARD]),
        backward=bool(keys[KEY_BACKWARD]),
        left=bool(keys[KEY_LEFT]),
        right=bool(keys[KEY_RIGHT]),
    )


def present(screen: pygame.Surface, session: Session) -> None:
    """プロジェクション解像度のバッファを画面サイズへニアレスト拡大して表示"""
    fb = session.framebuffer
    frame = pygame.image.frombuffer(fb.to_bytes(), (fb.width, fb.height), "RGBA")
    screen.blit(pygame.transform.scale(frame, screen.get_size()), (0, 0))
    pygame.display.flip()


def main(map_id: str = "default") -> int:
    pygame.init()
    pygame.display.set_caption(GAME_TITLE)

    screen_cfg = ScreenConfig()
    screen = pygame.display.set_mode((screen_cfg.width, screen_cfg.height))

    try:
        session = Session.load(BASE_DIR, MAPS[map_id], screen=screen_cfg)
    except TilecasterError as e:
        # マップ/設定の不備は描画前に止める
        print(f"[ERR] failed to start map={map_id}: {e}")
        pygame.quit()
        return 1

    print(f"[INFO] DEV_MODE = {'ON' if DEV_MODE else 'OFF'}")

    clock = pygame.time.Clock()
    running = True
    paused = False

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.WINDOWFOCUSLOST and not paused:
                # 最後のフレームの上に幕を重ねて止める
                paused = True
                draw_focus_lost(screen)
                pygame.display.flip()
            elif event.type in (pygame.WINDOWFOCUSGAINED, pygame.MOUSEBUTTONDOWN) and paused:
                paused = False

        if paused:
            # tick ごと飛ばす（途中状態は残さない）
            clock.tick(1000 // RENDER_DELAY_MS)
            continue

        session.tick(read_keys())
        present(screen, session)
        clock.tick(1000 // RENDER_DELAY_MS)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
