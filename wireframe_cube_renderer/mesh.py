#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
from typing import Optional

from .math_utils import Vec3

logger = logging.getLogger(__name__)


def check_size(count: int, limit: int) -> Optional[str]:
    """Return a warning message when count exceeds limit, otherwise None."""
    if count > limit:
        return (f"Mesh is too big ({count} triangles, limit {limit}), "
                f"consider splitting it up")
    return None


class Triangle:
    """Three vertices in whatever space the caller is working in."""
    __slots__ = ('a', 'b', 'c')

    def __init__(self, a: Vec3 = None, b: Vec3 = None, c: Vec3 = None):
        self.a = a if a is not None else Vec3()
        self.b = b if b is not None else Vec3()
        self.c = c if c is not None else Vec3()

    def copy(self) -> 'Triangle':
        return Triangle(self.a.copy(), self.b.copy(), self.c.copy())

    def map(self, fn) -> 'Triangle':
        """New triangle with fn applied to each vertex."""
        return Triangle(fn(self.a), fn(self.b), fn(self.c))

    def __iter__(self):
        yield self.a
        yield self.b
        yield self.c

    def __eq__(self, other):
        if isinstance(other, Triangle):
            return self.a == other.a and self.b == other.b and self.c == other.c
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Triangle({self.a!r}, {self.b!r}, {self.c!r})"

    def segments(self):
        """Edges a->b, b->c, c->a as ((x0, y0), (x1, y1)), truncated to ints."""
        pa = (int(self.a.x), int(self.a.y))
        pb = (int(self.b.x), int(self.b.y))
        pc = (int(self.c.x), int(self.c.y))
        return [(pa, pb), (pb, pc), (pc, pa)]

    def draw(self, surface):
        """Issue the three edges to anything with draw_line(x0, y0, x1, y1)."""
        for (x0, y0), (x1, y1) in self.segments():
            surface.draw_line(x0, y0, x1, y1)


class Mesh:
    """Ordered collection of triangles.

    Construction is always size-checked against a soft limit; going over
    logs a warning and nothing else.
    """
    VECTOR_LIMIT = 50

    def __init__(self, triangles=None, limit: int = VECTOR_LIMIT):
        self.triangles = list(triangles) if triangles is not None else []
        self.limit = limit
        self.warning = check_size(len(self.triangles), limit)
        if self.warning:
            logger.warning(self.warning)

    def __len__(self):
        return len(self.triangles)

    def __iter__(self):
        return iter(self.triangles)

    def __getitem__(self, index):
        return self.triangles[index]
