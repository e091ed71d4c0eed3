#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
import time

from .canvas import Canvas
from .color import init_colors
from .config import RenderConfig
from .cube import build_unit_cube
from .renderer import FrameRenderer

logger = logging.getLogger(__name__)

KEY_ESCAPE = 27


class DemoApp:
    """
    Terminal harness around FrameRenderer: polls keys, renders the cube
    onto a Braille canvas, draws a HUD line and paces frames.
    """

    def __init__(self, stdscr, config: RenderConfig, line_rgb=None, bg_rgb=None):
        self.stdscr = stdscr
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        self.config = config
        self.line_pair, self.bg_pair = init_colors(config, line_rgb, bg_rgb)

        # ── Mesh is built once and shared read-only by every frame ──────
        self.mesh = build_unit_cube(limit=config.vector_limit)

        self.canvas = None
        self.renderer = None
        self._size = None

        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    def handle_input(self):
        """Drain pending keys; q or ESC stops the loop."""
        while True:
            try:
                key = self.stdscr.getch()
            except curses.error:
                return
            if key == -1:
                return
            if key in (ord('q'), KEY_ESCAPE):
                self.running = False

    def _ensure_renderer(self, th, tw):
        """(Re)build canvas and renderer when the terminal size changes."""
        if self._size == (th, tw):
            return self.renderer is not None
        self._size = (th, tw)

        W = (tw - 1) * 2
        H = (th - 2) * 4
        if W <= 0 or H <= 0:
            logger.debug("Terminal too small: %dx%d", tw, th)
            self.canvas = self.renderer = None
            return False

        self.canvas = Canvas(W, H)
        self.renderer = FrameRenderer(self.mesh, self.config.with_display(W, H))
        logger.info("Display %dx%d pixels (%dx%d cells)", W, H, tw, th)
        return True

    def draw_frame(self):
        th, tw = self.stdscr.getmaxyx()
        self.stdscr.erase()
        if self.config.use_color and self.bg_pair:
            self.stdscr.bkgd(' ', curses.color_pair(self.bg_pair))

        if not self._ensure_renderer(th, tw):
            return 0

        self.canvas.clear()
        drawn = self.renderer.render(self.canvas)

        attr = curses.color_pair(self.line_pair) if self.config.use_color else 0
        for y, line in enumerate(self.canvas.rows(self.config.use_braille)):
            if y >= th - 2:
                break
            try:
                self.stdscr.addstr(y + 1, 0, line[:tw - 1], attr)
            except curses.error:
                # Writing the bottom-right cell raises even though it succeeds
                pass
        return drawn

    def draw_hud(self, drawn, start_time):
        th, tw = self.stdscr.getmaxyx()
        self.frame_count += 1
        now = time.time()
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_fps_time = now

        ms = (now - start_time) * 1000
        hdr = (f" TRI:{drawn}/{len(self.mesh)}"
               f" | FOV:{self.config.fov:g}"
               f" | FPS:{self.fps}"
               f" | {ms:.1f}ms"
               f" | q/ESC quit ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(max(tw - 1, 0), '=')[:max(tw - 1, 0)],
                               curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        while self.running:
            start_time = time.time()

            self.handle_input()
            if not self.running:
                break

            drawn = self.draw_frame()
            self.draw_hud(drawn, start_time)
            self.stdscr.refresh()

            time.sleep(self.config.frame_interval)


def main(stdscr, config, line_rgb=None, bg_rgb=None):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config, line_rgb, bg_rgb)
    app.run()
