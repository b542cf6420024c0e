"""
Математический суб‑пакет: Vec3, Mat4.
"""

from raycast3d.math.vec3 import Vec3
from raycast3d.math.mat4 import Mat4

__all__ = ["Vec3", "Mat4"]
