#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging

from .config import RenderConfig
from .math_utils import Vec3
from .mesh import Mesh, Triangle
from .projection import project, perspective_matrix

logger = logging.getLogger(__name__)


class FrameRenderer:
    """
    Per-frame wireframe pipeline.

    For every triangle of the base mesh, each frame:
      1. copy it and push it back by config.depth_offset on z
      2. project each vertex through the perspective matrix
      3. map x/y from [-1, 1] to [0, width] x [0, height]
      4. draw the edges a->b, b->c, c->a on the surface

    The mesh and the projection matrix are never modified after __init__,
    so render() issues the same draw calls every time it is called.
    No culling, no depth test, no fill.
    """

    def __init__(self, mesh: Mesh, config: RenderConfig):
        self.mesh = mesh
        self.config = config
        self.projection = perspective_matrix(
            config.display_width, config.display_height, config.fov,
            config.near_plane, config.far_plane, config.convert_fov)
        logger.debug("Projection matrix for %.0fx%.0f fov=%s: %r",
                     config.display_width, config.display_height,
                     config.fov, self.projection)

    def translate(self, tri: Triangle) -> Triangle:
        offset = self.config.depth_offset
        return tri.map(lambda v: Vec3(v.x, v.y, v.z + offset))

    def to_screen(self, v: Vec3) -> Vec3:
        """Viewport transform; z keeps its normalized device value."""
        half_w = 0.5 * self.config.display_width
        half_h = 0.5 * self.config.display_height
        return Vec3((v.x + 1.0) * half_w, (v.y + 1.0) * half_h, v.z)

    def transform(self, tri: Triangle) -> Triangle:
        """Model-space triangle -> fresh screen-space triangle."""
        translated = self.translate(tri)
        projected = translated.map(lambda v: project(v, self.projection))
        return projected.map(self.to_screen)

    def screen_triangles(self):
        for tri in self.mesh:
            yield self.transform(tri)

    def render(self, surface) -> int:
        """Draw the whole mesh on surface; returns the number of triangles drawn."""
        count = 0
        for tri in self.screen_triangles():
            tri.draw(surface)
            count += 1
        return count
