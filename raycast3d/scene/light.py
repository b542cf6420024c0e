"""
Точечный источник света (фиксированный конвейер OpenGL, GL_LIGHT0).
"""

from raycast3d.scene.node import Node
from raycast3d.math.vec3 import Vec3

class PointLight(Node):
    def __init__(self, name="PointLight"):
        super().__init__(name)
        self.ambient_intensity = Vec3(0.0, 0.0, 0.0)
        self.diffuse_intensity = Vec3(1.0, 1.0, 1.0)
        self.specular_intensity = Vec3(1.0, 1.0, 1.0)
