"""
Луч и его пересечения с плоскостью, сферой, OBB и треугольным мешем.

Все тесты возвращают ближайшую точку пересечения (Vec3, мировые
координаты) или ``None``. Вырожденные случаи – просто промах.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from raycast3d.math.vec3 import Vec3
from raycast3d.geometry.kernels import ray_triangles_nearest

_PARALLEL_EPS = 1e-6


def normalized_device_coordinates(x: float, y: float,
                                  width: int, height: int) -> Tuple[float, float]:
    """Пиксель окна (y вниз) → NDC в [-1, 1] (y вверх)."""
    return (2.0 * x / width) - 1.0, 1.0 - (2.0 * y / height)


def _nearest_sphere_t(o, d, centre, radius) -> Optional[float]:
    oc = o - centre
    a = float(np.dot(d, d))
    b = 2.0 * float(np.dot(oc, d))
    c = float(np.dot(oc, oc)) - radius * radius
    disc = b * b - 4.0 * a * c
    if a == 0.0 or disc < 0.0:
        return None
    sq = np.sqrt(disc)
    t0 = (-b - sq) / (2.0 * a)
    t1 = (-b + sq) / (2.0 * a)
    if t0 >= 0.0:
        return float(t0)
    if t1 >= 0.0:
        # начало луча внутри сферы – точка выхода
        return float(t1)
    return None


def _nearest_slab_t(o, d, lo, hi) -> Optional[float]:
    t_min, t_max = -np.inf, np.inf
    for axis in range(3):
        if abs(d[axis]) < 1e-12:
            if o[axis] < lo[axis] or o[axis] > hi[axis]:
                return None
            continue
        t1 = (lo[axis] - o[axis]) / d[axis]
        t2 = (hi[axis] - o[axis]) / d[axis]
        t_min = max(t_min, min(t1, t2))
        t_max = min(t_max, max(t1, t2))
    if t_max < max(t_min, 0.0):
        return None
    # начало луча внутри коробки – точка выхода
    return float(t_min if t_min >= 0.0 else t_max)


class Ray:
    """Луч: ``origin`` + t · ``direction`` (direction нормируется)."""

    __slots__ = ("_o", "_d")

    def __init__(self, origin: Vec3 = None, direction: Vec3 = None):
        self._o = (origin.as_np() if origin is not None else np.zeros(3)).astype(np.float64)
        d = (direction.as_np() if direction is not None
             else np.array([0.0, 0.0, -1.0])).astype(np.float64)
        n = np.linalg.norm(d)
        self._d = d / n if n > 0.0 else np.array([0.0, 0.0, -1.0])

    @staticmethod
    def from_camera(device_coords: Tuple[float, float], camera) -> "Ray":
        """
        Луч из позиции камеры через точку ``device_coords`` (NDC)
        на ближней плоскости.
        """
        world = camera.get_world_matrix().to_np().astype(np.float64)
        inv_proj = np.linalg.inv(camera.get_projection_matrix().to_np().astype(np.float64))

        ndc = np.array([device_coords[0], device_coords[1], -1.0, 1.0])
        view_pt = inv_proj @ ndc
        view_pt = view_pt / view_pt[3]
        world_pt = (world @ view_pt)[:3]

        origin = world[:3, 3]
        return Ray(Vec3(*origin), Vec3(*(world_pt - origin)))

    # -----------------------------------------------------------------
    @property
    def origin(self) -> Vec3:
        return Vec3(*self._o)

    @property
    def direction(self) -> Vec3:
        return Vec3(*self._d)

    def point_at(self, t: float) -> Vec3:
        return Vec3(*(self._o + self._d * t))

    def _to_local(self, world_matrix) -> Tuple[np.ndarray, np.ndarray]:
        """
        Перевести луч в локальное пространство меша. Направление
        не нормируется – параметр t совпадает с мировым.
        """
        m = world_matrix.to_np().astype(np.float64)
        inv = np.linalg.inv(m)
        o = (inv @ np.append(self._o, 1.0))[:3]
        d = inv[:3, :3] @ self._d
        return o, d

    # -----------------------------------------------------------------
    #   Пересечения
    # -----------------------------------------------------------------
    def intersects_plane(self, point: Vec3, normal: Vec3) -> Optional[Vec3]:
        n = normal.as_np().astype(np.float64)
        denom = float(np.dot(n, self._d))
        if abs(denom) < _PARALLEL_EPS:
            return None
        t = float(np.dot(point.as_np() - self._o, n)) / denom
        if t < 0.0:
            return None
        return self.point_at(t)

    def intersects_sphere(self, centre: Vec3, radius: float) -> Optional[Vec3]:
        t = _nearest_sphere_t(self._o, self._d, centre.as_np().astype(np.float64), radius)
        return None if t is None else self.point_at(t)

    def intersects_oriented_bounding_box(self, mesh) -> Optional[Vec3]:
        o, d = self._to_local(mesh.get_world_matrix())
        box = mesh.bounding_box
        t = _nearest_slab_t(o, d, box.min, box.max)
        return None if t is None else self.point_at(t)

    def intersects_bounding_sphere(self, mesh) -> Optional[Vec3]:
        centre, radius = mesh.bounding_sphere
        t = _nearest_sphere_t(self._o, self._d, np.asarray(centre, dtype=np.float64), radius)
        return None if t is None else self.point_at(t)

    def intersects_mesh(self, mesh) -> Optional[Vec3]:
        if mesh.triangle_count == 0:
            return None
        o, d = self._to_local(mesh.get_world_matrix())
        t, _index = ray_triangles_nearest(o, d, np.ascontiguousarray(mesh.triangles()))
        if not np.isfinite(t):
            return None
        return self.point_at(t)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
