"""
Пакет geometry – ограничивающие объёмы, луч и тесты пересечений.
"""

from raycast3d.geometry.bounds import BoundingBox, BoundingSphere
from raycast3d.geometry.ray import Ray, normalized_device_coordinates

__all__ = ["BoundingBox", "BoundingSphere", "Ray", "normalized_device_coordinates"]
