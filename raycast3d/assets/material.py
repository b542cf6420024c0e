# -*- coding: utf-8 -*-
"""
Материалы для фиксированного конвейера OpenGL.

Материал хранит только то, что нужно рендереру: цвет, сторону
отрисовки граней и (для оверлея) режим отображения ограничивающего
объёма. Шейдеров нет – освещение делает GL_LIGHTING.
"""

from __future__ import annotations

from enum import Enum, auto

from raycast3d.math.vec3 import Vec3


class Side(Enum):
    """Какие грани рисовать."""
    FRONT = auto()
    BACK = auto()      # внутренние грани – для skybox
    DOUBLE = auto()


class BoundingVolumeMode(Enum):
    ORIENTED_BOUNDING_BOX = auto()
    BOUNDING_SPHERE = auto()


class Material:
    lit = True

    def __init__(self, color: Vec3 | None = None, side: Side = Side.FRONT):
        self.color = color if color is not None else Vec3(1.0, 1.0, 1.0)
        self.side = side


class PhongMaterial(Material):
    """Освещаемый материал (ambient / diffuse / specular от GL_LIGHT0)."""
    def __init__(self, color: Vec3 | None = None, side: Side = Side.FRONT,
                 shininess: float = 30.0):
        super().__init__(color, side)
        self.shininess = shininess


class UnlitMaterial(Material):
    """Плоский цвет без освещения."""
    lit = False


class BoundingVolumeMaterial(Material):
    """Каркас ограничивающего объёма меша (OBB или сфера)."""
    lit = False

    def __init__(self, mode: BoundingVolumeMode = BoundingVolumeMode.ORIENTED_BOUNDING_BOX,
                 color: Vec3 | None = None):
        super().__init__(color if color is not None else Vec3(1.0, 1.0, 1.0), Side.DOUBLE)
        self.mode = mode
