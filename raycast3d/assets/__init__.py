from raycast3d.assets.material import (
    Material, PhongMaterial, UnlitMaterial, BoundingVolumeMaterial,
    BoundingVolumeMode, Side,
)

__all__ = ["Material", "PhongMaterial", "UnlitMaterial", "BoundingVolumeMaterial",
           "BoundingVolumeMode", "Side"]
