"""
Базовый узел сцены: трансформация (position / rotation / scale),
видимость и иерархия.
"""

from __future__ import annotations

import math
from typing import Iterator, List, Optional

import numpy as np

from raycast3d.math.vec3 import Vec3
from raycast3d.math.mat4 import Mat4


class Node:
    """
    Узел сцены.

    ``rotation`` – углы Эйлера в градусах (X – pitch, Y – yaw, Z – roll),
    порядок как в ``Mat4.from_euler``. Локальная ось «вперёд» – −Z.
    """
    def __init__(self, name: str = "Node"):
        self.name = name
        self.position = Vec3(0.0, 0.0, 0.0)
        self.rotation = Vec3(0.0, 0.0, 0.0)
        self.scale = Vec3(1.0, 1.0, 1.0)
        self.visible = True
        self.parent: Optional[Node] = None
        self.children: List[Node] = []

    # -----------------------------------------------------------------
    #   Иерархия
    # -----------------------------------------------------------------
    def add_child(self, node: "Node") -> "Node":
        if node.parent is not None:
            node.parent.remove_child(node)
        node.parent = self
        self.children.append(node)
        return node

    def remove_child(self, node: "Node") -> None:
        if node in self.children:
            self.children.remove(node)
            node.parent = None

    def traverse(self) -> Iterator["Node"]:
        """Обход в глубину (pre‑order), включая сам узел."""
        yield self
        for ch in self.children:
            yield from ch.traverse()

    def on_update(self, dt: float) -> None:
        pass

    # -----------------------------------------------------------------
    #   Трансформации
    # -----------------------------------------------------------------
    def get_local_matrix(self) -> Mat4:
        t = Mat4.translate(self.position.x, self.position.y, self.position.z)
        r = Mat4.from_euler(self.rotation.x, self.rotation.y, self.rotation.z)
        s = Mat4.scale(self.scale.x, self.scale.y, self.scale.z)
        return t @ r @ s

    def get_world_matrix(self) -> Mat4:
        local = self.get_local_matrix()
        if self.parent is None:
            return local
        return self.parent.get_world_matrix() @ local

    @property
    def world_position(self) -> Vec3:
        return Vec3(*self.get_world_matrix().transform_point((0.0, 0.0, 0.0)))

    @property
    def forward(self) -> Vec3:
        """Направление локальной оси −Z в мировых координатах."""
        d = self.get_world_matrix().transform_vector((0.0, 0.0, -1.0))
        n = np.linalg.norm(d)
        if n == 0.0:
            return Vec3(0.0, 0.0, -1.0)
        return Vec3(*(d / n))

    def look_at(self, target: Vec3) -> None:
        """
        Повернуть узел так, чтобы −Z смотрела на точку ``target``
        (мировые координаты, крен = 0). Если точка совпадает с позицией,
        ориентация не меняется.
        """
        d = target - self.world_position
        length = d.length()
        if length < 1e-9:
            return
        d = d / length
        pitch = math.degrees(math.asin(max(-1.0, min(1.0, d.y))))
        yaw = math.degrees(math.atan2(-d.x, -d.z))
        self.rotation = Vec3(pitch, yaw, 0.0)

    def translate_forward(self, distance: float) -> None:
        self.position = self.position + self.forward * distance

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
