#!/usr/bin/env python3
#
# PROJECT: wireframe-cube-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from wireframe_cube_renderer.color import parse_hex_color
from wireframe_cube_renderer.config import RenderConfig
from wireframe_cube_renderer.demo import main as demo_main
from wireframe_cube_renderer.logging_config import hold_console_output, setup_logging


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                    White cube on black, fov 90
  %(prog)s --fov 60 --depth-offset 5          Narrower view, cube further away
  %(prog)s --radians-fov                      Treat --fov as degrees properly
  %(prog)s --ascii --no-color                 Plain ASCII, monochrome
  %(prog)s --log-level DEBUG --log-file r.log Write diagnostics to r.log
"""
    parser = argparse.ArgumentParser(
        description="Perspective wireframe cube in the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--fov", type=float, default=90.0,
                        help="Field of view value fed to tan() (default: 90.0)")
    parser.add_argument("--radians-fov", action="store_true",
                        help="Convert --fov from degrees to radians before tan()")
    parser.add_argument("--near-plane", type=float, default=0.1,
                        help="Near plane distance (default: 0.1)")
    parser.add_argument("--far-plane", type=float, default=1000.0,
                        help="Far plane distance (default: 1000.0)")
    parser.add_argument("--depth-offset", type=float, default=3.0,
                        help="Z distance the cube is pushed back (default: 3.0)")
    parser.add_argument("--fps", type=int, default=60,
                        help="Frames per second (default: 60)")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--line-color", default="#FFFFFF",
                        help="Wireframe color in hex #RRGGBB (default: #FFFFFF)")
    parser.add_argument("--bg-color", default="#000000",
                        help="Background color in hex #RRGGBB (default: #000000)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file",
                        help="Write log records to this file instead of stderr")
    return parser.parse_args(argv)


def build_config(args) -> RenderConfig:
    overrides = dict(
        fov=args.fov,
        convert_fov=args.radians_fov,
        near_plane=args.near_plane,
        far_plane=args.far_plane,
        depth_offset=args.depth_offset,
        fps=args.fps,
    )
    if args.ascii:
        overrides["use_braille"] = False
    if args.no_color:
        overrides["use_color"] = False
    return RenderConfig.detect_terminal(**overrides)


if __name__ == "__main__":
    args = parse_args()
    logger = setup_logging(getattr(logging, args.log_level), args.log_file)
    try:
        config = build_config(args)
        line_rgb = parse_hex_color(args.line_color)
        bg_rgb = parse_hex_color(args.bg_color)
        if line_rgb is None or bg_rgb is None:
            logger.warning("Invalid color value, using defaults")
        logger.info("Starting: %s", config)
        # stderr is the curses tty; hold console records until it is released
        with hold_console_output():
            curses.wrapper(lambda s: demo_main(s, config, line_rgb, bg_rgb))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        # curses.wrapper has already restored the terminal
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
