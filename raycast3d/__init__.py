"""
raycast3d – небольшой 3‑D движок на numpy: граф сцены, камера,
меши с ограничивающими объёмами, лучи и тесты пересечений.

Рендерер (PyOpenGL) импортируется отдельно: ``raycast3d.renderer``,
чтобы геометрию можно было использовать без GL‑контекста.
"""

from raycast3d.utils import logger
from raycast3d.scene import (
    Scene, Camera, PointLight, Mesh, MeshInstance, MeshFactory, Node
)
from raycast3d.math import Vec3, Mat4
from raycast3d.geometry import Ray, BoundingBox, BoundingSphere, normalized_device_coordinates
from raycast3d.assets import (
    PhongMaterial, UnlitMaterial, BoundingVolumeMaterial, BoundingVolumeMode, Side,
)
from raycast3d.core import Timer, InputManager, FirstPersonControls

__version__ = "1.0.0"

__all__ = [
    "Scene",
    "Camera",
    "PointLight",
    "Mesh",
    "MeshInstance",
    "MeshFactory",
    "Node",
    "Vec3",
    "Mat4",
    "Ray",
    "BoundingBox",
    "BoundingSphere",
    "normalized_device_coordinates",
    "PhongMaterial",
    "UnlitMaterial",
    "BoundingVolumeMaterial",
    "BoundingVolumeMode",
    "Side",
    "Timer",
    "InputManager",
    "FirstPersonControls",
]
