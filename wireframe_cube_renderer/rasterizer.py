#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#


def clip_line(x0, y0, x1, y1, x_max, y_max):
    """
    Liang-Barsky clip of the segment (x0, y0)-(x1, y1) to [0, x_max] x [0, y_max].
    Returns the clipped (x0, y0, x1, y1) as floats, or None when nothing is left.
    """
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0), (dx, x_max - x0), (-dy, y0), (dy, y_max - y0)):
        if p == 0:
            # Parallel to this edge: either fully inside it or fully outside
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1: return None
            if t > t0: t0 = t
        else:
            if t < t0: return None
            if t < t1: t1 = t
    return (x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy)


def draw_line_dda(canvas, p1, p2):
    """
    Draws a line from p1 to p2 (integer (x, y) pairs) using the DDA algorithm.
    Both endpoints are plotted; a zero-length line plots a single pixel.
    """
    x1, y1 = int(p1[0]), int(p1[1])
    x2, y2 = int(p2[0]), int(p2[1])

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)

    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)))
        cx += x_inc; cy += y_inc
