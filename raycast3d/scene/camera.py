"""
Перспективная камера.
"""

from raycast3d.scene.node import Node
from raycast3d.math.mat4 import Mat4


class Camera(Node):
    """Перспективная камера; смотрит вдоль собственной оси −Z."""
    def __init__(self, fov=60.0, aspect=16.0 / 9.0, near=0.1, far=1000.0, name="Camera"):
        super().__init__(name)
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far

    def set_perspective(self, fov: float, aspect: float, near: float, far: float) -> None:
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far

    def get_view_matrix(self) -> Mat4:
        """Обратная мировая матрица камеры."""
        return self.get_world_matrix().inverse()

    def get_projection_matrix(self, aspect_ratio=None) -> Mat4:
        aspect = self.aspect if aspect_ratio is None else aspect_ratio
        return Mat4.perspective(self.fov, aspect, self.near, self.far)
