# -*- coding: utf-8 -*-
import math

import numpy as np
import pytest

from raycast3d.geometry import BoundingSphere, Ray, normalized_device_coordinates
from raycast3d.math.vec3 import Vec3
from raycast3d.scene import MeshFactory

from raycast_app.picking import (
    PickIndicators, RAY_VERTICAL_BIAS, cast_ground_ray, cast_pick_ray,
)
from raycast_app.settings import RaycastMode

W, H = 800, 600
CENTRE = (W / 2, H / 2)


def click(dispatcher, settings, x, y, button=0):
    return dispatcher.on_mouse_down(x, y, button, W, H, settings)


# ----------------------------------------------------------------------
#   Попадание по цели во всех режимах
# ----------------------------------------------------------------------
@pytest.mark.parametrize("mode, z", [
    (RaycastMode.BOX, 0.4),                  # передняя грань AABB модели
    (RaycastMode.MESH, 0.4),                 # передняя стена дома
    (RaycastMode.SPHERE, math.sqrt(0.76)),   # сфера: центр (0, 1.6, 0), r² = 0.77
])
def test_centre_click_hits_target(dispatcher, settings, world, mode, z):
    settings.raycast_mode = mode
    result = click(dispatcher, settings, *CENTRE)
    assert result.source == "target"
    assert np.allclose(result.hit.as_np(), [0, 1.5, z], atol=1e-4)
    if mode is RaycastMode.SPHERE:
        centre, radius = world.pick_mesh.bounding_sphere
        assert BoundingSphere(centre, radius).contains(result.hit.as_np(), eps=1e-4)
        assert np.linalg.norm(result.hit.as_np() - centre) == pytest.approx(radius, abs=1e-4)
    else:
        local = world.pick_mesh.get_world_matrix().inverse().transform_point(result.hit.as_np())
        assert world.pick_mesh.bounding_box.contains(local, eps=1e-4)
    assert world.indicators.visible
    assert world.indicators.marker.visible

def test_box_hit_but_mesh_miss_near_roof(world):
    # луч над передней стеной, под коньком крыши: внутри AABB, мимо треугольников
    ray = Ray(Vec3(0.45, 2.15, 5), Vec3(0, 0, -1))
    assert cast_pick_ray(ray, world.pick_mesh, RaycastMode.BOX) is not None
    assert cast_pick_ray(ray, world.pick_mesh, RaycastMode.MESH) is None

def test_unknown_mode_is_rejected(world):
    ray = Ray(Vec3(0, 1.5, 2), Vec3(0, 0, -1))
    with pytest.raises(ValueError):
        cast_pick_ray(ray, world.pick_mesh, "Octree")


# ----------------------------------------------------------------------
#   Земля и промахи
# ----------------------------------------------------------------------
@pytest.mark.parametrize("mode", list(RaycastMode))
def test_miss_falls_back_to_ground(dispatcher, settings, world, mode):
    settings.raycast_mode = mode
    result = click(dispatcher, settings, W / 2, H - 1)
    assert result.source == "ground"

    ray = Ray.from_camera(normalized_device_coordinates(W / 2, H - 1, W, H), world.camera)
    t = -ray.origin.y / ray.direction.y
    expected = (ray.origin + ray.direction * t).as_np()
    assert np.allclose(result.hit.as_np(), expected, atol=1e-4)
    assert np.allclose(world.indicators.marker.position.as_np(), expected, atol=1e-4)
    assert world.indicators.marker.visible

def test_cast_ground_ray_above_horizon():
    assert cast_ground_ray(Ray(Vec3(0, 1, 0), Vec3(0, 1, -1))) is None
    hit = cast_ground_ray(Ray(Vec3(0, 1, 0), Vec3(0, -1, -1)))
    assert np.allclose(hit.as_np(), [0, 0, -1], atol=1e-5)

def test_miss_above_horizon_hides_indicators(dispatcher, settings, world):
    click(dispatcher, settings, *CENTRE)
    assert world.indicators.visible

    result = click(dispatcher, settings, 0, 0)
    assert not result.is_hit
    assert result.source is None
    assert not world.indicators.ray_segment.visible
    assert not world.indicators.marker.visible


# ----------------------------------------------------------------------
#   Прочие кнопки и повторные клики
# ----------------------------------------------------------------------
@pytest.mark.parametrize("button", [1, 2])
def test_other_buttons_change_nothing(dispatcher, settings, world, button):
    click(dispatcher, settings, *CENTRE)
    marker_before = world.indicators.marker.position.copy()
    scale_before = world.indicators.ray_segment.scale.copy()

    assert click(dispatcher, settings, 0, 0, button=button) is None
    assert world.indicators.visible
    assert world.indicators.marker.position == marker_before
    assert world.indicators.ray_segment.scale == scale_before

def test_other_buttons_do_not_reveal_hidden_indicators(dispatcher, settings, world):
    assert click(dispatcher, settings, *CENTRE, button=2) is None
    assert not world.indicators.visible

def test_repeated_click_is_idempotent(dispatcher, settings, world):
    first = click(dispatcher, settings, 300, 250)
    seg = world.indicators.ray_segment
    state = (seg.position.copy(), seg.rotation.copy(), seg.scale.copy())

    second = click(dispatcher, settings, 300, 250)
    assert np.allclose(first.hit.as_np(), second.hit.as_np())
    assert np.allclose(seg.position.as_np(), state[0].as_np(), atol=1e-6)
    assert np.allclose(seg.rotation.as_np(), state[1].as_np(), atol=1e-6)
    assert np.allclose(seg.scale.as_np(), state[2].as_np(), atol=1e-6)


# ----------------------------------------------------------------------
#   Геометрия индикаторов
# ----------------------------------------------------------------------
def test_indicator_segment_spans_eye_to_hit(dispatcher, settings, world):
    result = click(dispatcher, settings, 420, 280)
    hit = result.hit
    start = world.camera.world_position - Vec3(0, RAY_VERTICAL_BIAS, 0)
    seg = world.indicators.ray_segment

    distance = start.distance_to(hit)
    assert seg.scale.z == pytest.approx(distance, rel=1e-5)
    assert np.allclose(seg.position.as_np(), ((start + hit) * 0.5).as_np(), atol=1e-4)
    assert np.allclose(seg.forward.as_np(), (hit - start).normalized().as_np(), atol=1e-4)
    assert world.indicators.marker.position == hit

def test_indicator_ends_match_segment_geometry():
    seg = MeshFactory.create_box(0.01, 0.01, 1.0)
    marker = MeshFactory.create_sphere(0.02, 8)
    indicators = PickIndicators(seg, marker)
    assert not seg.visible and not marker.visible

    start = Vec3(1, 2, 3) + Vec3(0, RAY_VERTICAL_BIAS, 0)
    hit = Vec3(-2, 0, -1)
    indicators.show_hit(start, hit)

    # концы единичного отрезка вдоль локальной Z после трансформации
    world = seg.get_world_matrix()
    ends = [world.transform_point((0, 0, z)) for z in (-0.5, 0.5)]
    expected = [hit.as_np(), Vec3(1, 2, 3).as_np()]
    assert any(np.allclose(ends, e, atol=1e-4) for e in (expected, expected[::-1]))
