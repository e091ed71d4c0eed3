#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math

from .math_utils import Vec3, Mat4


def project(v: Vec3, m: Mat4) -> Vec3:
    """
    Multiply a row vector (v.x, v.y, v.z, 1) by m and do the perspective divide.

    The divide is skipped when w is exactly 0.0: a point on the camera
    plane comes back undivided. Neither v nor m is modified.
    """
    mat = m.m
    x = v.x * mat[0][0] + v.y * mat[1][0] + v.z * mat[2][0] + mat[3][0]
    y = v.x * mat[0][1] + v.y * mat[1][1] + v.z * mat[2][1] + mat[3][1]
    z = v.x * mat[0][2] + v.y * mat[1][2] + v.z * mat[2][2] + mat[3][2]
    w = v.x * mat[0][3] + v.y * mat[1][3] + v.z * mat[2][3] + mat[3][3]

    if w != 0.0:
        return Vec3(x / w, y / w, z / w)
    return Vec3(x, y, z)


def perspective_matrix(width: float, height: float, fov: float,
                       near: float, far: float, convert_fov: bool = False) -> Mat4:
    """
    Build the perspective projection matrix.

    `fov` goes straight into tan() without a degrees-to-radians conversion,
    so fov=90 gives tan(45 rad), not tan(pi/4). Changing it would change the
    rendered field of view; pass convert_fov=True to get the radian-correct
    angle instead.
    """
    aspect = height / width
    half_fov = (math.radians(fov) if convert_fov else fov) / 2.0
    scale = 1.0 / math.tan(half_fov)

    mat = Mat4()
    mat.m[0][0] = aspect * scale
    mat.m[1][1] = scale
    mat.m[2][2] = far / (far - near)
    mat.m[3][2] = (-far * near) / (far - near)
    mat.m[2][3] = 1.0
    mat.m[3][3] = 0.0
    return mat
