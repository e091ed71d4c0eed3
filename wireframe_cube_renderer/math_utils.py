#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

class Vec3:
    """3-component vector. Treated as a value: copy it, never share and mutate it."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def copy(self) -> 'Vec3':
        return Vec3(self.x, self.y, self.z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __str__(self):
        return f"X: {self.x}\nY: {self.y}\nZ: {self.z}\n"

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")


class Mat4:
    """4x4 matrix stored as m[row][col].

    Row index is the input axis; row 3 is the homogeneous row holding
    translation terms, column 3 holds the perspective (w) terms.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data is None:
            self.m = [[0.0] * 4 for _ in range(4)]
            return
        if len(data) != 4 or any(len(row) != 4 for row in data):
            raise ValueError("Mat4 requires a 4x4 array")
        self.m = [[float(v) for v in row] for row in data]

    @classmethod
    def identity(cls) -> 'Mat4':
        res = cls()
        for i in range(4):
            res.m[i][i] = 1.0
        return res

    def copy(self) -> 'Mat4':
        return Mat4(self.m)

    def __eq__(self, other):
        if isinstance(other, Mat4):
            return self.m == other.m
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(f"{v:.3f}" for v in row) + "]" for row in self.m)
        return f"Mat4([{rows}])"
