import math

import numpy as np
import pytest

from tilecaster.compositor import (
    background_coords,
    draw_background,
    draw_column,
    draw_floor,
    draw_wall,
    floor_distance,
    floor_rows,
    wall_height,
    wall_texture_column,
)
from tilecaster.config import ProjectionConfig
from tilecaster.framebuffer import Framebuffer
from tilecaster.game_state import PlayerState
from tilecaster.raycast import RayHit
from tilecaster.textures import BLACK, Color, ImageTexture, ProceduralTexture, TextureRegistry
from tilecaster.tile_map import TileMap

from conftest import enclosed_rows, solid_texture

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


def test_background_wraps_with_heading() -> None:
    bg = ImageTexture(np.zeros((60, 360, 4), dtype=np.uint8))
    assert background_coords(350.0, 20, 0, bg) == (10, 0)
    assert background_coords(0.0, 5, 65, bg) == (5, 5)


def test_floor_distance_follows_projection_formula() -> None:
    # height / (2y - height): 60 just below the horizon, 1 at y = height.
    assert floor_distance(61, 120) == 60.0
    assert floor_distance(119, 120) == 120 / 118
    assert floor_distance(120, 120) == 1.0
    rows = np.arange(61, 120)
    d = floor_distance(rows, 120)
    assert (np.diff(d) < 0).all()


def test_first_floor_row_starts_below_the_wall() -> None:
    proj = ProjectionConfig(1, 120)
    ys = floor_rows(proj, 8)
    assert ys[0] == 60 + 8 + 1
    assert floor_distance(ys[0], 120) == 120 / (2 * (60 + 8 + 1) - 120)
    assert ys[-1] == 119
    assert floor_rows(proj, 60).size == 0


def test_floor_rows_keep_half_pixel_on_odd_height() -> None:
    proj = ProjectionConfig(1, 121)
    ys = floor_rows(proj, 0)
    assert ys[0] == 61.5
    assert ys[-1] == 120.5
    assert len(ys) == 60
    # The distance uses the fractional row, not the floored buffer row.
    assert floor_distance(ys[0], 121) == 121 / 2


def test_wall_height_is_inverse_of_distance() -> None:
    proj = ProjectionConfig(160, 120)
    assert wall_height(proj, 7.0) == 8
    assert wall_height(proj, 0.5) == 120
    assert wall_height(proj, 2.0) > wall_height(proj, 4.0)
    # Degenerate distances never divide by zero.
    assert wall_height(proj, 0.0) > proj.height
    assert wall_height(proj, -1.0) > proj.height


def test_wall_texture_column_projects_hit_point() -> None:
    tex = solid_texture(RED, width=16, height=16)
    assert wall_texture_column(tex, 2.25, 9.0) == 4
    assert wall_texture_column(tex, 0.999, 3.5) == math.floor(16 * 4.499) % 16


def test_wall_rows_overdraw_by_two_pixels() -> None:
    proj = ProjectionConfig(1, 20)
    fb = Framebuffer(1, 20)
    tex = ProceduralTexture([[0], [1]], [RED, BLUE])
    draw_wall(fb, proj, 0, 5, tex, 0)
    column = [fb.get_pixel(0, y) for y in range(20)]
    assert column[:5] == [BLACK] * 5
    assert column[5:10] == [RED] * 5
    # The second texture row starts at y = 10 and overdraws to y = 16.
    assert column[10:17] == [BLUE] * 7
    assert column[17:] == [BLACK] * 3


def test_background_fills_rows_above_the_wall() -> None:
    fb = Framebuffer(2, 20)
    pixels = np.zeros((4, 360, 4), dtype=np.uint8)
    pixels[:, :, 0] = np.arange(4)[:, None] * 50
    pixels[:, :, 3] = 255
    bg = ImageTexture(pixels)
    draw_background(fb, 1, 0, 5.5, 90.0, bg)
    assert [fb.get_pixel(1, y).r for y in range(7)] == [0, 50, 100, 150, 0, 50, 0]
    assert fb.get_pixel(1, 6) == BLACK
    assert fb.get_pixel(0, 0) == BLACK


def test_floor_skips_walls_and_outside_points() -> None:
    tile_map = TileMap(enclosed_rows(5, 5))
    proj = ProjectionConfig(1, 20)
    fb = Framebuffer(1, 20)
    textures = TextureRegistry([solid_texture(BLUE)], floors={0: solid_texture(RED)})
    player = PlayerState(x=1.5, y=2.5, angle=0.0)

    draw_floor(fb, proj, 0, 0, 0.0, player, tile_map, textures)

    column = [fb.get_pixel(0, y) for y in range(20)]
    # Rows 15..19 land on empty tiles (x = 3.5 .. 2.61).
    assert column[15:] == [RED] * 5
    # Row 14 reaches x = 4.0 (wall id 1, no floor texture); row 12 is outside.
    assert column[12:15] == [BLACK] * 3
    assert column[:12] == [BLACK] * 12


def test_floor_texture_uses_world_coordinates() -> None:
    tile_map = TileMap(enclosed_rows(5, 5))
    proj = ProjectionConfig(1, 20)
    fb = Framebuffer(1, 20)
    stripes = ImageTexture.from_colors([RED, BLUE], width=2, height=1)
    textures = TextureRegistry([solid_texture(BLUE)], floors={0: stripes})
    player = PlayerState(x=1.5, y=2.5, angle=0.0)

    draw_floor(fb, proj, 0, 0, 0.0, player, tile_map, textures)

    # Row 19: x = 2.61 -> floor(5.22) % 2 = 1; row 16: x = 3.1667 -> 6 % 2 = 0.
    assert fb.get_pixel(0, 19) == BLUE
    assert fb.get_pixel(0, 16) == RED
    assert fb.get_pixel(0, 15) == BLUE


def test_floor_stretches_oblique_rays() -> None:
    # Narrow corridor: the east wall sits at x = 4.
    tile_map = TileMap(enclosed_rows(5, 40))
    proj = ProjectionConfig(1, 20)
    textures = TextureRegistry([solid_texture(BLUE)], floors={0: solid_texture(RED)})
    player = PlayerState(x=1.6, y=20.5, angle=0.0)

    straight = Framebuffer(1, 20)
    oblique = Framebuffer(1, 20)
    draw_floor(straight, proj, 0, 0, 0.0, player, tile_map, textures)
    draw_floor(oblique, proj, 0, 0, 25.0, player, tile_map, textures)

    # Dividing by cos(25 deg) keeps the x-extent of the oblique ray equal to
    # the straight one, so both stop drawing at the same row (row 14, x = 4.1).
    assert [straight.get_pixel(0, y) for y in range(20)] == [oblique.get_pixel(0, y) for y in range(20)]
    assert oblique.get_pixel(0, 15) == RED
    assert oblique.get_pixel(0, 14) == BLACK


def test_draw_column_layers() -> None:
    tile_map = TileMap(enclosed_rows(10, 10))
    proj = ProjectionConfig(1, 20)
    fb = Framebuffer(1, 20)
    sky = solid_texture(Color(0, 255, 0), width=360, height=10)
    textures = TextureRegistry([solid_texture(BLUE)], floors={0: solid_texture(RED)}, background=sky)
    player = PlayerState(x=1.5, y=5.5, angle=0.0)
    hit = RayHit(column=0, wall_id=1, hit_x=9.0, hit_y=5.5, raw_distance=5.0,
                 corrected_distance=5.0, ray_angle=0.0)

    draw_column(fb, proj, hit, player, tile_map, textures)

    # wall_height = floor(10 / 5) = 2 -> sky above row 8, wall from row 8.
    assert fb.get_pixel(0, 0) == Color(0, 255, 0)
    assert fb.get_pixel(0, 7) == Color(0, 255, 0)
    assert fb.get_pixel(0, 8) == BLUE
    assert fb.get_pixel(0, 19) == RED


def test_draw_column_rejects_unknown_wall_id() -> None:
    from tilecaster.errors import TextureError

    tile_map = TileMap(enclosed_rows(4, 4))
    textures = TextureRegistry([solid_texture(BLUE)])
    hit = RayHit(column=0, wall_id=5, hit_x=3.0, hit_y=1.5, raw_distance=1.0,
                 corrected_distance=1.0, ray_angle=0.0)
    with pytest.raises(TextureError):
        draw_column(Framebuffer(1, 10), ProjectionConfig(1, 10), hit, PlayerState(x=1.5, y=1.5, angle=0.0),
                    tile_map, textures)
