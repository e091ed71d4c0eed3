#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Vec3, Mat4
from .mesh import Triangle, Mesh, check_size
from .cube import build_unit_cube
from .projection import project, perspective_matrix
from .config import RenderConfig
from .renderer import FrameRenderer
from .canvas import Canvas
from .logging_config import setup_logging
