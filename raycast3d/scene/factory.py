"""
Генераторы примитивов (куб, сфера).
"""

import math

import numpy as np

from raycast3d.scene.mesh import Mesh

# (нормаль, ось u, ось v) для шести граней куба
_BOX_FACES = (
    ((0, 0, 1), (1, 0, 0), (0, 1, 0)),     # +Z
    ((0, 0, -1), (-1, 0, 0), (0, 1, 0)),   # −Z
    ((1, 0, 0), (0, 0, -1), (0, 1, 0)),    # +X
    ((-1, 0, 0), (0, 0, 1), (0, 1, 0)),    # −X
    ((0, 1, 0), (1, 0, 0), (0, 0, -1)),    # +Y
    ((0, -1, 0), (1, 0, 0), (0, 0, 1)),    # −Y
)


class MeshFactory:
    @staticmethod
    def create_box(width: float = 1.0, height: float = 1.0, depth: float = 1.0,
                   name: str = "Box") -> Mesh:
        """Куб с центром в начале координат; у каждой грани свои 4 вершины."""
        half = np.array([width, height, depth], dtype=np.float32) * 0.5
        verts, normals, indices = [], [], []
        for n, u, v in _BOX_FACES:
            n, u, v = (np.array(a, dtype=np.float32) for a in (n, u, v))
            base = len(verts)
            for su, sv in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
                verts.append((n + su * u + sv * v) * half)
                normals.append(n)
            # против часовой стрелки, если смотреть снаружи
            indices += [base, base + 1, base + 2, base, base + 2, base + 3]
        return Mesh(np.array(verts), normals=np.array(normals),
                    indices=np.array(indices), name=name)

    @staticmethod
    def create_sphere(radius: float = 1.0, segments: int = 16, name: str = "Sphere") -> Mesh:
        """UV‑сфера: ``segments`` по долготе, ``segments // 2`` по широте."""
        stacks = max(2, segments // 2)
        slices = max(3, segments)
        verts, normals, indices = [], [], []
        for i in range(stacks + 1):
            phi = math.pi * i / stacks
            for j in range(slices + 1):
                theta = 2.0 * math.pi * j / slices
                n = (math.sin(phi) * math.sin(theta), math.cos(phi),
                     math.sin(phi) * math.cos(theta))
                normals.append(n)
                verts.append([c * radius for c in n])

        row = slices + 1
        for i in range(stacks):
            for j in range(slices):
                a = i * row + j
                b = a + row
                indices += [a, b, a + 1, a + 1, b, b + 1]
        return Mesh(np.array(verts), normals=np.array(normals),
                    indices=np.array(indices), name=name)
