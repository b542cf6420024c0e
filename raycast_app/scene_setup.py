# raycast_app/scene_setup.py
"""
Сборка сцены демо: свет, skybox, земля, цель пикинга, оверлей
ограничивающего объёма и индикаторы луча.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from raycast3d.assets import (
    BoundingVolumeMaterial, PhongMaterial, Side, UnlitMaterial,
)
from raycast3d.core import FirstPersonControls
from raycast3d.math import Vec3
from raycast3d.scene import Camera, Mesh, MeshFactory, MeshInstance, PointLight, Scene
from raycast3d.utils import DEFAULT_CONFIG, logger

from raycast_app.picking import PickIndicators

ASSETS_DIR = Path(__file__).resolve().parent / "assets"
DEFAULT_MODEL = ASSETS_DIR / "model.obj"

SKY_COLOR = Vec3(0.749, 0.918, 0.988)
GROUND_COLOR = Vec3(0.0, 0.5, 0.0)
TARGET_COLOR = Vec3(1.0, 0.0, 0.0)
TARGET_POSITION = Vec3(0.0, 1.5, 0.0)


@dataclass
class RayCastScene:
    scene: Scene
    camera: Camera
    controls: FirstPersonControls
    pick_mesh: Mesh
    bounds_mesh: MeshInstance
    bounds_material: BoundingVolumeMaterial
    indicators: PickIndicators


def resolve_model_path(model_path) -> Path:
    """Путь из конфига или встроенная модель, если файла нет."""
    if model_path:
        p = Path(model_path).expanduser()
        if p.is_file():
            return p
        logger.warning(f"[Scene] Model '{p}' not found, using bundled {DEFAULT_MODEL.name}")
    return DEFAULT_MODEL


def _create_camera(cam_cfg: dict) -> Camera:
    camera = Camera(name="MainCamera")
    camera.set_perspective(cam_cfg["fov"], cam_cfg["aspect"], cam_cfg["near"], cam_cfg["far"])
    camera.position = Vec3.from_iterable(cam_cfg["position"])
    return camera


def _create_indicators(ind_cfg: dict) -> PickIndicators:
    thickness = ind_cfg["ray_thickness"]
    ray_mesh = MeshFactory.create_box(thickness, thickness, 1.0, name="PickRay")
    ray_mesh.material = UnlitMaterial(Vec3.from_iterable(ind_cfg["ray_color"]))

    marker = MeshFactory.create_sphere(ind_cfg["marker_radius"], 16, name="PickMarker")
    marker.material = UnlitMaterial(Vec3.from_iterable(ind_cfg["marker_color"]))
    return PickIndicators(ray_mesh, marker)


def build_scene(config=None) -> RayCastScene:
    """
    ``config`` – объект с методами ``section``/``get`` (``Config``) или
    None для значений по‑умолчанию.
    """
    if config is None:
        cam_cfg = dict(DEFAULT_CONFIG["camera"])
        ind_cfg = dict(DEFAULT_CONFIG["indicators"])
        model_path = DEFAULT_CONFIG["model_path"]
    else:
        cam_cfg = config.section("camera")
        ind_cfg = config.section("indicators")
        model_path = config.get("model_path")

    scene = Scene()

    # ---- Камера и управление ---------------------------------------
    camera = _create_camera(cam_cfg)
    scene.add(camera)
    controls = FirstPersonControls(camera,
                                   mouse_button=int(cam_cfg["mouse_button"]),
                                   translation_speed=float(cam_cfg["translation_speed"]))

    # ---- Свет ------------------------------------------------------
    light = PointLight("SceneLight")
    light.ambient_intensity = Vec3(0.25, 0.25, 0.25)
    light.diffuse_intensity = Vec3(1.0, 1.0, 1.0)
    light.specular_intensity = Vec3(1.0, 1.0, 1.0)
    light.position = Vec3(10.0, 10.0, 10.0)
    scene.add(light)

    # ---- Skybox (рисуем внутренние грани) --------------------------
    skybox = MeshFactory.create_box(500.0, 500.0, 500.0, name="Skybox")
    skybox.material = UnlitMaterial(SKY_COLOR.copy(), side=Side.BACK)
    scene.add(skybox)

    # ---- Земля: верхняя грань на y = 0 -----------------------------
    ground = MeshFactory.create_box(500.0, 10.0, 500.0, name="Ground")
    ground.position = Vec3(0.0, -5.0, 0.0)
    ground.material = UnlitMaterial(GROUND_COLOR.copy())
    scene.add(ground)

    # ---- Цель пикинга ----------------------------------------------
    pick_mesh = Mesh.from_obj(resolve_model_path(model_path),
                              material=PhongMaterial(TARGET_COLOR.copy()),
                              name="PickMesh")
    pick_mesh.position = TARGET_POSITION.copy()
    scene.add(pick_mesh)

    # ---- Оверлей ограничивающего объёма ----------------------------
    bounds_material = BoundingVolumeMaterial()
    bounds_mesh = MeshInstance(pick_mesh, bounds_material, name="BoundsOverlay")
    bounds_mesh.visible = False
    scene.add(bounds_mesh)

    # ---- Индикаторы ------------------------------------------------
    indicators = _create_indicators(ind_cfg)
    scene.add(indicators.ray_segment)
    scene.add(indicators.marker)

    logger.info(f"[Scene] Scene assembled: {pick_mesh.triangle_count} target triangles")
    return RayCastScene(scene, camera, controls, pick_mesh,
                        bounds_mesh, bounds_material, indicators)
