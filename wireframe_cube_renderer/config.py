#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
import os
import dataclasses
from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Configuration for the projection pipeline and the terminal demo."""
    display_width: float = 800.0
    display_height: float = 600.0
    fov: float = 90.0
    near_plane: float = 0.1
    far_plane: float = 1000.0
    depth_offset: float = 3.0
    vector_limit: int = 50
    convert_fov: bool = False
    fps: int = 60
    use_color: bool = True
    use_braille: bool = True

    def __post_init__(self):
        if self.display_width <= 0 or self.display_height <= 0:
            raise ValueError(
                f"display size must be positive, got "
                f"{self.display_width}x{self.display_height}")
        if self.far_plane == self.near_plane:
            raise ValueError("far_plane and near_plane must differ")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        half_fov = (math.radians(self.fov) if self.convert_fov else self.fov) / 2.0
        if math.tan(half_fov) == 0.0:
            raise ValueError(f"fov {self.fov} gives a zero projection scale divisor")

    @property
    def frame_interval(self) -> float:
        """Seconds to sleep after each presented frame."""
        return 1.0 / self.fps

    def with_display(self, width: float, height: float) -> 'RenderConfig':
        return dataclasses.replace(self, display_width=float(width),
                                   display_height=float(height))

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Guess terminal capabilities from TERM and LANG and return a config.
        Explicit keyword overrides win over the guesses.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        values = dict(
            use_color=not is_dumb,
            # Linux console font often lacks braille
            use_braille=supports_utf8 and not is_linux_console,
        )
        values.update(overrides)
        return cls(**values)
