#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging

logger = logging.getLogger(__name__)

LINE_PAIR = 1
BG_PAIR = 2


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# xterm-256: the 6x6x6 color cube occupies indices 16-231,
# the grayscale ramp 232-255 (values 8, 18, ..., 238).
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def rgb_to_nearest_xterm(r, g, b):
    """Nearest xterm-256 index for an (r, g, b) color, searching the
    6x6x6 cube and the grayscale ramp."""

    def _nearest_cube_val(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI color index (0-7), for 8-color terminals."""
    return min(range(8), key=lambda i: (r - _ANSI8[i][0]) ** 2 +
                                       (g - _ANSI8[i][1]) ** 2 +
                                       (b - _ANSI8[i][2]) ** 2)


def init_colors(config, line_rgb=None, bg_rgb=None):
    """
    Initialize the line and background color pairs.
    Color mode cascade:
      1. True color  - can_change_color(): init_color() with exact RGB
      2. xterm-256   - 256+ colors: nearest xterm-256 index
      3. 8-color     - basic ANSI palette approximation
      4. Mono        - no color
    Returns (line_pair, bg_pair); 0 means "use the default pair".
    """
    if not config.use_color:
        return 0, 0

    if line_rgb is None:
        line_rgb = (255, 255, 255)
    if bg_rgb is None:
        bg_rgb = (0, 0, 0)

    try:
        if not curses.has_colors():
            return 0, 0
        curses.start_color()

        use_default_bg = False
        try:
            curses.use_default_colors()
            use_default_bg = bg_rgb == (0, 0, 0)
        except curses.error:
            pass

        num_colors = getattr(curses, 'COLORS', 8)
        try:
            can_redefine = curses.can_change_color()
        except curses.error:
            can_redefine = False

        if can_redefine and num_colors >= 256:
            line_slot, bg_slot = 16, 17
            for slot, (r, g, b) in ((line_slot, line_rgb), (bg_slot, bg_rgb)):
                curses.init_color(slot, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
            mode = "truecolor"
        elif num_colors >= 256:
            line_slot = rgb_to_nearest_xterm(*line_rgb)
            bg_slot = rgb_to_nearest_xterm(*bg_rgb)
            mode = "xterm-256"
        elif num_colors >= 8:
            line_slot = rgb_to_nearest_ansi8(*line_rgb)
            bg_slot = rgb_to_nearest_ansi8(*bg_rgb)
            mode = "ansi-8"
        else:
            return 0, 0

        if use_default_bg:
            bg_slot = -1

        curses.init_pair(LINE_PAIR, line_slot, bg_slot)
        curses.init_pair(BG_PAIR, line_slot, bg_slot)
        logger.debug("Color mode %s: line=%s bg=%s", mode, line_slot, bg_slot)
        return LINE_PAIR, BG_PAIR

    except curses.error as e:
        logger.info("Color setup failed, falling back to mono: %s", e)
        return 0, 0
