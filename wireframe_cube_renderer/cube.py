#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/cube.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Vec3
from .mesh import Mesh, Triangle

# Unit cube, corners (0,0,0)-(1,1,1). Two triangles per face sharing a diagonal.
_CUBE_FACES = [
    # south
    ((0, 0, 0), (0, 1, 0), (1, 1, 0)),
    ((0, 0, 0), (1, 1, 0), (1, 0, 0)),
    # east
    ((1, 0, 0), (1, 1, 0), (1, 1, 1)),
    ((1, 0, 0), (1, 1, 1), (1, 0, 1)),
    # north
    ((1, 0, 1), (1, 1, 1), (0, 1, 1)),
    ((1, 0, 1), (0, 1, 1), (0, 0, 1)),
    # west
    ((0, 0, 1), (0, 1, 1), (0, 1, 0)),
    ((0, 0, 1), (0, 1, 0), (0, 0, 0)),
    # top
    ((0, 1, 0), (0, 1, 1), (1, 1, 1)),
    ((0, 1, 0), (1, 1, 1), (1, 1, 0)),
    # bottom
    ((1, 0, 1), (0, 0, 1), (0, 0, 0)),
    ((1, 0, 1), (0, 0, 0), (1, 0, 0)),
]


def build_unit_cube(limit: int = Mesh.VECTOR_LIMIT) -> Mesh:
    """Build the 12-triangle unit cube mesh.

    The cube is defined in model space only; scaling and depth are applied
    by the frame renderer.
    """
    return Mesh(
        [Triangle(Vec3(*a), Vec3(*b), Vec3(*c)) for a, b, c in _CUBE_FACES],
        limit=limit,
    )
