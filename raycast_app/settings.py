# raycast_app/settings.py
"""
Состояние панели настроек: что рисовать поверх цели и каким тестом
пересекать луч. Значения перечислений – подписи в выпадающих списках.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from raycast3d.assets.material import BoundingVolumeMaterial, BoundingVolumeMode
from raycast3d.utils import logger


class BoundsDisplay(Enum):
    NONE = "None"
    BOX = "Box"
    SPHERE = "Sphere"


class RaycastMode(Enum):
    BOX = "Box"
    SPHERE = "Sphere"
    MESH = "Mesh"


@dataclass
class PickSettings:
    """Читается диспетчером пикинга в момент клика."""
    bounds_display: BoundsDisplay = BoundsDisplay.NONE
    raycast_mode: RaycastMode = RaycastMode.BOX


def apply_bounds_display(overlay, material: BoundingVolumeMaterial,
                         display: BoundsDisplay) -> None:
    """
    Box → OBB и оверлей видим, Sphere → сфера и видим,
    None → оверлей скрыт (режим материала не трогаем).
    """
    if display == BoundsDisplay.BOX:
        material.mode = BoundingVolumeMode.ORIENTED_BOUNDING_BOX
        overlay.visible = True
    elif display == BoundsDisplay.SPHERE:
        material.mode = BoundingVolumeMode.BOUNDING_SPHERE
        overlay.visible = True
    else:
        overlay.visible = False
    logger.debug(f"[Settings] Bounds display → {display.value}")
