# raycast3d/math/mat4.py
import numpy as np
from math import radians, tan, sin, cos


class Mat4:
    """4×4 матрица (row‑major, float32). Векторы – столбцы: p' = M @ p."""

    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=np.float32))

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def rotate_x(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[1, 1] = c
        m[1, 2] = -s
        m[2, 1] = s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_y(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_z(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return Mat4(m)

    @staticmethod
    def from_euler(pitch: float, yaw: float, roll: float):
        Rx = Mat4.rotate_x(pitch)
        Ry = Mat4.rotate_y(yaw)
        Rz = Mat4.rotate_z(roll)
        return Ry @ Rx @ Rz

    @staticmethod
    def perspective(fov_deg: float, aspect: float,
                    z_near: float, z_far: float):
        f = 1.0 / tan(radians(fov_deg) / 2.0)
        m = np.zeros((4, 4), dtype=np.float32)
        m[0, 0] = f / aspect
        m[1, 1] = f
        m[2, 2] = (z_far + z_near) / (z_near - z_far)
        m[2, 3] = (2.0 * z_far * z_near) / (z_near - z_far)
        m[3, 2] = -1.0
        return Mat4(m)

    def inverse(self) -> "Mat4":
        return Mat4(np.linalg.inv(self.m.astype(np.float64)))

    def transform_point(self, p) -> np.ndarray:
        """Точка (w = 1) с перспективным делением, результат – float64[3]."""
        h = self.m.astype(np.float64) @ np.append(np.asarray(p, dtype=np.float64), 1.0)
        if h[3] != 0.0 and h[3] != 1.0:
            return h[:3] / h[3]
        return h[:3]

    def transform_vector(self, v) -> np.ndarray:
        """Направление (w = 0): перенос не применяется."""
        return self.m[:3, :3].astype(np.float64) @ np.asarray(v, dtype=np.float64)

    def __matmul__(self, other: "Mat4") -> "Mat4":
        return Mat4(np.dot(self.m, other.m))

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()

    def to_gl(self) -> np.ndarray:
        """Транспонируем для передачи в OpenGL (столбцы‑массив)."""
        return self.m.T.copy()
