"""
Tests for the terminal canvas and DDA line rasterizer.
"""

import time

import pytest

from wireframe_cube_renderer.canvas import Canvas, render_cell_ascii, render_cell_braille
from wireframe_cube_renderer.config import RenderConfig
from wireframe_cube_renderer.cube import build_unit_cube
from wireframe_cube_renderer.rasterizer import clip_line, draw_line_dda
from wireframe_cube_renderer.renderer import FrameRenderer


def lit(canvas):
    return {(x, y) for y in range(canvas.h) for x in range(canvas.w)
            if canvas.get_pixel(x, y)}


class TestCanvas:

    def test_set_and_clear(self):
        c = Canvas(8, 8)
        c.set_pixel(3, 5)
        assert lit(c) == {(3, 5)}
        c.clear()
        assert lit(c) == set()

    def test_out_of_range_pixels_are_clipped(self):
        c = Canvas(4, 4)
        for x, y in ((-1, 0), (0, -1), (4, 0), (0, 4)):
            c.set_pixel(x, y)
        assert lit(c) == set()

    def test_rows_braille(self):
        c = Canvas(4, 8)
        c.set_pixel(0, 0)
        rows = c.rows()
        assert len(rows) == 8 // 4 + 1
        assert rows[0][0] == chr(0x2801)
        assert rows[1].strip() == ''

    def test_rows_ascii(self):
        c = Canvas(4, 8)
        c.set_pixel(0, 0)
        c.set_pixel(1, 0)
        assert c.rows(use_braille=False)[0][0] == ':'


class TestCells:

    def test_empty(self):
        assert render_cell_ascii(0) == ' '
        assert render_cell_braille(0) == ' '

    def test_full(self):
        assert render_cell_ascii(0xFF) == '%'
        assert render_cell_braille(0xFF) == chr(0x28FF)


class TestLines:

    def test_horizontal(self):
        c = Canvas(10, 4)
        c.draw_line(1, 2, 6, 2)
        assert lit(c) == {(x, 2) for x in range(1, 7)}

    def test_vertical_reversed(self):
        c = Canvas(4, 10)
        draw_line_dda(c, (2, 8), (2, 3))
        assert lit(c) == {(2, y) for y in range(3, 9)}

    def test_diagonal_hits_both_endpoints(self):
        c = Canvas(20, 20)
        c.draw_line(0, 0, 13, 7)
        pixels = lit(c)
        assert (0, 0) in pixels
        assert (13, 7) in pixels
        assert len(pixels) == 14

    def test_zero_length_plots_one_pixel(self):
        c = Canvas(4, 4)
        c.draw_line(1, 1, 1, 1)
        assert lit(c) == {(1, 1)}

    def test_partially_off_canvas(self):
        c = Canvas(5, 4)
        c.draw_line(-3, 1, 8, 1)
        assert lit(c) == {(x, 1) for x in range(5)}


def test_cube_renders_onto_canvas():
    canvas = Canvas(160, 96)
    renderer = FrameRenderer(build_unit_cube(), RenderConfig(display_width=160,
                                                             display_height=96))
    assert renderer.render(canvas) == 12
    pixels = lit(canvas)
    assert pixels
    # the model-space origin projects to the screen center
    assert (80, 48) in pixels


class TestClipping:

    def test_clip_inside_is_unchanged(self):
        assert clip_line(1, 2, 6, 3, 9, 9) == (1.0, 2.0, 6.0, 3.0)

    def test_clip_to_edges(self):
        assert clip_line(-3, 1, 8, 1, 4, 3) == pytest.approx((0.0, 1.0, 4.0, 1.0))

    def test_clip_fully_outside(self):
        assert clip_line(-10, -5, -1, -1, 4, 3) is None
        assert clip_line(0, 10, 4, 10, 4, 3) is None

    def test_huge_line_is_cheap(self):
        c = Canvas(160, 96)
        start = time.perf_counter()
        c.draw_line(0, 0, 20_000_000, 0)
        c.draw_line(-20_000_000, -9_000_000, -1, -1)
        elapsed = time.perf_counter() - start
        assert elapsed < 0.5
        assert lit(c) == {(x, 0) for x in range(160)}

    def test_cube_just_in_front_of_camera_renders_quickly(self):
        canvas = Canvas(160, 96)
        renderer = FrameRenderer(build_unit_cube(), RenderConfig(
            display_width=160, display_height=96, depth_offset=-0.99999))
        start = time.perf_counter()
        assert renderer.render(canvas) == 12
        assert time.perf_counter() - start < 0.5
