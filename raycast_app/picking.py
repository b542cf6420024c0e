# raycast_app/picking.py
"""
Диспетчер пикинга: клик ЛКМ → луч из камеры → тест пересечения
с целью выбранным способом → (если промах) плоскость земли →
обновление индикаторов (отрезок луча + маркер).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from raycast3d.geometry import Ray, normalized_device_coordinates
from raycast3d.math import Vec3
from raycast3d.scene import Mesh, Node
from raycast3d.utils import logger, Profiler

from raycast_app.settings import PickSettings, RaycastMode

PRIMARY_BUTTON = 0
# опускаем начало отрезка, чтобы он не «торчал» из камеры
RAY_VERTICAL_BIAS = 0.05

GROUND_POINT = Vec3(0.0, 0.0, 0.0)
GROUND_NORMAL = Vec3(0.0, 1.0, 0.0)

IntersectionTest = Callable[[Ray, Mesh], Optional[Vec3]]

INTERSECTION_TESTS: Dict[RaycastMode, IntersectionTest] = {
    RaycastMode.BOX: Ray.intersects_oriented_bounding_box,
    RaycastMode.SPHERE: Ray.intersects_bounding_sphere,
    RaycastMode.MESH: Ray.intersects_mesh,
}


def cast_pick_ray(ray: Ray, target: Mesh, mode: RaycastMode) -> Optional[Vec3]:
    """Ближайшая точка пересечения луча с целью (тест по ``mode``) или None."""
    try:
        test = INTERSECTION_TESTS[mode]
    except KeyError:
        raise ValueError(f"Unknown raycast mode: {mode!r}") from None
    return test(ray, target)


def cast_ground_ray(ray: Ray) -> Optional[Vec3]:
    return ray.intersects_plane(GROUND_POINT, GROUND_NORMAL)


@dataclass(frozen=True)
class PickResult:
    hit: Optional[Vec3]
    source: Optional[str]     # "target" | "ground" | None

    @property
    def is_hit(self) -> bool:
        return self.hit is not None


class PickIndicators:
    """
    Отрезок луча и маркер точки попадания. Показываются и скрываются
    только вместе.

    ``ray_segment`` – геометрия единичной длины вдоль локальной Z
    с центром в начале координат.
    """
    def __init__(self, ray_segment: Node, marker: Node):
        self.ray_segment = ray_segment
        self.marker = marker
        self.hide()

    @property
    def visible(self) -> bool:
        return self.ray_segment.visible

    def hide(self) -> None:
        self.ray_segment.visible = False
        self.marker.visible = False

    def show_hit(self, camera_position: Vec3, hit: Vec3) -> None:
        start = camera_position - Vec3(0.0, RAY_VERTICAL_BIAS, 0.0)

        seg = self.ray_segment
        seg.position = start
        seg.scale = Vec3(1.0, 1.0, 1.0)
        seg.look_at(hit)

        distance = start.distance_to(hit)
        seg.translate_forward(distance / 2.0)
        seg.scale = Vec3(1.0, 1.0, distance)

        self.marker.position = hit.copy()

        seg.visible = True
        self.marker.visible = True


class PickDispatcher:
    """Обработчик нажатия кнопки мыши во вьюпорте."""
    def __init__(self, camera, target: Mesh, indicators: PickIndicators):
        self.camera = camera
        self.target = target
        self.indicators = indicators

    def on_mouse_down(self, x: float, y: float, button: int,
                      width: int, height: int,
                      settings: PickSettings) -> Optional[PickResult]:
        """
        ``x``/``y`` – пиксели окна (y вниз), ``button`` – номер кнопки
        (0 – левая). Для остальных кнопок ничего не делает и возвращает None.
        """
        if button != PRIMARY_BUTTON:
            return None

        with Profiler("pick"):
            ndc = normalized_device_coordinates(x, y, width, height)
            ray = Ray.from_camera(ndc, self.camera)

            hit = cast_pick_ray(ray, self.target, settings.raycast_mode)
            source = "target" if hit is not None else None
            if hit is None:
                hit = cast_ground_ray(ray)
                source = "ground" if hit is not None else None

            if hit is None:
                self.indicators.hide()
            else:
                self.indicators.show_hit(self.camera.world_position, hit)

        if hit is None:
            logger.debug(f"[Picking] {settings.raycast_mode.value}: miss at ({x:.0f}, {y:.0f})")
        else:
            logger.debug(f"[Picking] {settings.raycast_mode.value}: {source} hit at {hit}")
        return PickResult(hit, source)
