"""
Треугольный меш и его экземпляр (MeshInstance) с собственным материалом.
"""

from __future__ import annotations

import numpy as np

from raycast3d.scene.node import Node
from raycast3d.math.vec3 import Vec3
from raycast3d.assets.material import Material, PhongMaterial
from raycast3d.geometry.bounds import BoundingBox, BoundingSphere
from raycast3d.utils.loader import load_obj


class Mesh(Node):
    """Треугольный меш; ограничивающие объёмы считаются при создании."""
    def __init__(self,
                 vertices: np.ndarray,
                 normals: np.ndarray = None,
                 indices: np.ndarray = None,
                 material: Material | None = None,
                 name="Mesh"):
        super().__init__(name)

        self.vertices = np.asarray(vertices, dtype=np.float32).reshape((-1, 3))
        self.normals = (np.asarray(normals, dtype=np.float32).reshape((-1, 3))
                        if normals is not None else None)
        if indices is None:
            indices = np.arange(len(self.vertices), dtype=np.uint32)
        self.indices = np.asarray(indices, dtype=np.uint32).ravel()
        if len(self.indices) % 3:
            raise ValueError(f"{name}: index count {len(self.indices)} is not a multiple of 3")

        self.material = material if material is not None else PhongMaterial()
        self.recompute_bounds()

    @classmethod
    def from_obj(cls, path, material: Material | None = None, name: str | None = None) -> "Mesh":
        positions, normals, indices = load_obj(path)
        return cls(positions, normals=normals, indices=indices,
                   material=material, name=name or "Mesh")

    def recompute_bounds(self) -> None:
        """Пересчитать AABB и сферу после изменения вершин."""
        self.bounding_box = BoundingBox.from_points(self.vertices)
        self.local_bounding_sphere = BoundingSphere.from_points(self.vertices)

    @property
    def color(self) -> Vec3:
        return self.material.color

    @color.setter
    def color(self, value: Vec3) -> None:
        self.material.color = value

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangles(self) -> np.ndarray:
        """Локальные треугольники, float64 (M, 3, 3)."""
        return self.vertices[self.indices.reshape(-1, 3)].astype(np.float64)

    @property
    def bounding_sphere(self):
        """(центр, радиус) в мировых координатах."""
        world = self.get_world_matrix()
        centre_world = world.transform_point(self.local_bounding_sphere.center)
        scale = np.linalg.norm(world.to_np()[0:3, 0:3], axis=0).max()
        return centre_world, float(self.local_bounding_sphere.radius * scale)


class MeshInstance(Node):
    """Рисует геометрию другого меша своим материалом, в его трансформации."""
    def __init__(self, mesh: Mesh, material: Material | None = None, name="MeshInstance"):
        super().__init__(name)
        self.mesh = mesh
        self.material = material if material is not None else mesh.material

    def get_world_matrix(self):
        return self.mesh.get_world_matrix() @ self.get_local_matrix()
