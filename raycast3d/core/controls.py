"""
Управление камерой от первого лица: WASD + обзор мышью при зажатой кнопке.
"""

from raycast3d.math.vec3 import Vec3

_UP = Vec3(0.0, 1.0, 0.0)


class FirstPersonControls:
    """
    Меняет только позицию и углы камеры.

    * W/S – вперёд/назад по горизонтали, A/D – вбок,
    * E или Space – вверх, Q или Shift – вниз,
    * мышь при зажатой ``mouse_button`` – yaw/pitch (pitch ограничен ±89°).
    """
    def __init__(self, camera, mouse_button: int = 0,
                 translation_speed: float = 10.0, rotation_speed: float = 0.2):
        self.camera = camera
        self.mouse_button = mouse_button
        self.translation_speed = translation_speed
        self.rotation_speed = rotation_speed      # градусов на пиксель

    def update(self, dt: float, input_manager) -> None:
        self._update_rotation(input_manager)
        self._update_translation(dt, input_manager)

    def _update_rotation(self, im) -> None:
        dx, dy = im.get_mouse_delta()
        if not im.is_button_pressed(self.mouse_button):
            return
        rot = self.camera.rotation
        pitch = rot.x - dy * self.rotation_speed
        pitch = max(-89.0, min(89.0, pitch))
        yaw = (rot.y - dx * self.rotation_speed) % 360.0
        self.camera.rotation = Vec3(pitch, yaw, rot.z)

    def _update_translation(self, dt: float, im) -> None:
        forward = self.camera.forward
        forward = Vec3(forward.x, 0.0, forward.z).normalized()
        right = forward.cross(_UP).normalized()

        move = Vec3()
        if im.is_key_pressed("w"):
            move += forward
        if im.is_key_pressed("s"):
            move -= forward
        if im.is_key_pressed("d"):
            move += right
        if im.is_key_pressed("a"):
            move -= right
        if im.is_key_pressed("e") or im.is_key_pressed("space"):
            move += _UP
        if im.is_key_pressed("q") or im.is_key_pressed("shift"):
            move -= _UP

        if move.length() == 0.0:
            return
        step = move.normalized() * (self.translation_speed * dt)
        self.camera.position = self.camera.position + step
