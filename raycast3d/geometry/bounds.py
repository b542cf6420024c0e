"""
Ограничивающие объёмы: AABB в локальных координатах меша и сфера.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class BoundingBox:
    min: np.ndarray
    max: np.ndarray

    @staticmethod
    def from_points(points: np.ndarray) -> "BoundingBox":
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        if len(pts) == 0:
            zero = np.zeros(3)
            return BoundingBox(zero, zero.copy())
        return BoundingBox(pts.min(axis=0), pts.max(axis=0))

    @property
    def center(self) -> np.ndarray:
        return (self.min + self.max) * 0.5

    @property
    def size(self) -> np.ndarray:
        return self.max - self.min

    def corners(self) -> np.ndarray:
        """8 вершин коробки, (8, 3); бит 0 → x, бит 1 → y, бит 2 → z."""
        lo, hi = self.min, self.max
        return np.array([
            [hi[0] if i & 1 else lo[0],
             hi[1] if i & 2 else lo[1],
             hi[2] if i & 4 else lo[2]]
            for i in range(8)
        ], dtype=np.float64)

    def contains(self, point, eps: float = 1e-6) -> bool:
        p = np.asarray(point, dtype=np.float64)
        return bool(np.all(p >= self.min - eps) and np.all(p <= self.max + eps))


@dataclass(frozen=True)
class BoundingSphere:
    center: np.ndarray
    radius: float

    @staticmethod
    def from_points(points: np.ndarray) -> "BoundingSphere":
        """Центр – центр AABB, радиус – расстояние до самой дальней вершины."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        box = BoundingBox.from_points(pts)
        if len(pts) == 0:
            return BoundingSphere(box.center, 0.0)
        radius = float(np.linalg.norm(pts - box.center, axis=1).max())
        return BoundingSphere(box.center, radius)

    def contains(self, point, eps: float = 1e-6) -> bool:
        p = np.asarray(point, dtype=np.float64)
        return bool(np.linalg.norm(p - self.center) <= self.radius + eps)
