# raycast3d/math/vec3.py
"""
3‑мерный вектор (float32) – позиции, направления, цвета.
"""

import numpy as np
from typing import Iterable, Tuple


class Vec3:
    """Короткий и быстрый вектор‑3 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    @staticmethod
    def from_iterable(values: Iterable[float]) -> "Vec3":
        x, y, z = (float(v) for v in values)
        return Vec3(x, y, z)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    def set(self, x: float, y: float, z: float) -> "Vec3":
        self._v[:] = (x, y, z)
        return self

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v + other._v))

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v / scalar))

    def __neg__(self) -> "Vec3":
        return Vec3(*(-self._v))

    def __iadd__(self, other: "Vec3") -> "Vec3":
        self._v += other._v
        return self

    def __isub__(self, other: "Vec3") -> "Vec3":
        self._v -= other._v
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение."""
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec3") -> "Vec3":
        """Векторное произведение."""
        return Vec3(*np.cross(self._v, other._v))

    def length(self) -> float:
        """Евклидова длина."""
        return float(np.linalg.norm(self._v))

    def distance_to(self, other: "Vec3") -> float:
        return float(np.linalg.norm(self._v - other._v))

    def normalized(self) -> "Vec3":
        """Нормализованный вектор (нулевой вектор остаётся нулевым)."""
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(*(self._v / n))

    def copy(self) -> "Vec3":
        return Vec3(*self._v)

    def as_np(self) -> np.ndarray:
        """Копия 3‑компонентного ndarray (float32)."""
        return self._v.copy()

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())
