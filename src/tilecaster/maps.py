# tilecaster/maps.py
# -*- coding: utf-8 -*-
"""
マップ定義。
- layout  : タイルIDの行リスト（0=床、1以上=壁。外周は必ず壁で囲む）
- start   : 開始位置と向き（度）
- textures: 壁は ID 順のリスト。要素は手描きビットマップ（dict）か画像ファイル名
            floors はタイルID → 画像、background は横長パノラマ画像
            画像は width/height に縮小して読み込む（ファイルが無ければプレースホルダー）
"""

# 8x8 のレンガ模様（パレット番号）
BRICK_BITMAP = [
    [1, 1, 1, 1, 1, 1, 1, 1],
    [0, 0, 0, 1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1, 1],
    [0, 1, 0, 0, 0, 1, 0, 0],
    [1, 1, 1, 1, 1, 1, 1, 1],
    [0, 0, 0, 1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1, 1],
    [0, 1, 0, 0, 0, 1, 0, 0],
]
BRICK_PALETTE = [
    (255, 241, 232, 255),
    (194, 195, 199, 255),
]

MAPS = {
    "default": {
        "layout": [
            [2, 2, 2, 2, 2, 2, 2, 2, 2, 2],
            [2, 0, 0, 0, 0, 0, 0, 0, 0, 2],
            [2, 0, 0, 0, 0, 0, 0, 0, 0, 2],
            [2, 0, 0, 2, 2, 0, 2, 0, 0, 2],
            [2, 0, 0, 2, 0, 0, 2, 0, 0, 2],
            [2, 0, 0, 2, 0, 0, 2, 0, 0, 2],
            [2, 0, 0, 2, 0, 2, 2, 0, 0, 2],
            [2, 0, 0, 0, 0, 0, 0, 0, 0, 2],
            [2, 0, 0, 0, 0, 0, 0, 0, 0, 2],
            [2, 2, 2, 2, 2, 2, 2, 2, 2, 2],
        ],
        "start": {"x": 2.0, "y": 2.0, "angle": 90.0},
        "textures": {
            "walls": [
                {"bitmap": BRICK_BITMAP, "palette": BRICK_PALETTE},
                {"image": "texture.png", "width": 16, "height": 16},
            ],
            "floors": {
                0: {"image": "floor-texture.png", "width": 16, "height": 16},
            },
            "background": {"image": "background.png", "width": 360, "height": 60},
        },
    },
}
