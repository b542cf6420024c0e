"""
Численные ядра пересечений (numba, CPU).
"""

import numpy as np
from numba import njit


@njit(cache=False)
def ray_triangles_nearest(origin, direction, triangles):
    """
    Möller–Trumbore по всем треугольникам.

    origin, direction – float64[3] (direction может быть не нормирован,
    тогда t измеряется в его длинах); triangles – float64 (M, 3, 3).
    Возвращает (t, индекс) ближайшего попадания с t > 0 или (inf, -1).
    При равных t побеждает первый треугольник.
    """
    best_t = np.inf
    best_i = -1
    ox, oy, oz = origin[0], origin[1], origin[2]
    dx, dy, dz = direction[0], direction[1], direction[2]

    for i in range(triangles.shape[0]):
        ax, ay, az = triangles[i, 0, 0], triangles[i, 0, 1], triangles[i, 0, 2]
        e1x = triangles[i, 1, 0] - ax
        e1y = triangles[i, 1, 1] - ay
        e1z = triangles[i, 1, 2] - az
        e2x = triangles[i, 2, 0] - ax
        e2y = triangles[i, 2, 1] - ay
        e2z = triangles[i, 2, 2] - az

        # p = d × e2
        px = dy * e2z - dz * e2y
        py = dz * e2x - dx * e2z
        pz = dx * e2y - dy * e2x

        det = e1x * px + e1y * py + e1z * pz
        if abs(det) < 1e-12:
            continue        # луч параллелен плоскости или треугольник вырожден
        inv_det = 1.0 / det

        sx, sy, sz = ox - ax, oy - ay, oz - az
        u = (sx * px + sy * py + sz * pz) * inv_det
        if u < 0.0 or u > 1.0:
            continue

        # q = s × e1
        qx = sy * e1z - sz * e1y
        qy = sz * e1x - sx * e1z
        qz = sx * e1y - sy * e1x

        v = (dx * qx + dy * qy + dz * qz) * inv_det
        if v < 0.0 or u + v > 1.0:
            continue

        t = (e2x * qx + e2y * qy + e2z * qz) * inv_det
        if t > 1e-9 and t < best_t:
            best_t = t
            best_i = i

    return best_t, best_i
