# -*- coding: utf-8 -*-
import pytest

from raycast3d.scene import Camera, MeshFactory
from raycast3d.math.vec3 import Vec3
from raycast3d.utils.config import Config

from raycast_app.picking import PickDispatcher
from raycast_app.scene_setup import build_scene
from raycast_app.settings import PickSettings


@pytest.fixture
def camera():
    cam = Camera(fov=60.0, aspect=1920.0 / 1080.0, near=0.1, far=750.0)
    cam.position = Vec3(0.0, 1.5, 2.0)
    return cam


@pytest.fixture
def unit_box():
    return MeshFactory.create_box(1.0, 1.0, 1.0)


@pytest.fixture
def world():
    # сцена по‑умолчанию со встроенной моделью
    return build_scene()


@pytest.fixture
def settings():
    return PickSettings()


@pytest.fixture
def dispatcher(world):
    return PickDispatcher(world.camera, world.pick_mesh, world.indicators)


@pytest.fixture
def config_path(tmp_path):
    Config.reset()
    yield tmp_path / "config.json"
    Config.reset()
