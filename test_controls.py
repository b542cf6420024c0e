# -*- coding: utf-8 -*-
import numpy as np
import pytest

from raycast3d.core import FirstPersonControls, InputManager, Timer
from raycast3d.math.vec3 import Vec3


@pytest.fixture
def im():
    return InputManager()


def test_mouse_delta_accumulates_and_resets(im):
    im.mouse_move(10, 10)             # первое событие только запоминает позицию
    im.mouse_move(15, 8)
    im.mouse_move(20, 9)
    assert im.get_mouse_delta() == (10, -1)
    assert im.get_mouse_delta() == (0, 0)

def test_keys_are_case_insensitive(im):
    im.key_event("W", True)
    assert im.is_key_pressed("w")
    im.release_all()
    assert not im.is_key_pressed("w")

def test_release_all_stops_mouse_look(camera, im):
    controls = FirstPersonControls(camera, mouse_button=2, rotation_speed=1.0)
    im.button_event(2, True)
    im.release_all()                  # окно потеряло фокус
    assert not im.is_button_pressed(2)
    im.mouse_move(0, 0)
    im.mouse_move(30, 30)
    controls.update(0.016, im)
    assert camera.rotation == Vec3(0, 0, 0)

def test_forward_moves_along_view(camera, im):
    controls = FirstPersonControls(camera, mouse_button=2, translation_speed=2.0)
    im.key_event("w", True)
    controls.update(0.5, im)
    assert np.allclose(camera.position.as_np(), [0, 1.5, 1.0], atol=1e-6)

def test_forward_stays_horizontal_when_pitched(camera, im):
    camera.rotation = Vec3(-40, 0, 0)
    controls = FirstPersonControls(camera, translation_speed=1.0)
    im.key_event("w", True)
    controls.update(1.0, im)
    assert np.allclose(camera.position.as_np(), [0, 1.5, 1.0], atol=1e-6)

def test_strafe_and_vertical(camera, im):
    controls = FirstPersonControls(camera, translation_speed=1.0)
    im.key_event("d", True)
    controls.update(1.0, im)
    assert np.allclose(camera.position.as_np(), [1, 1.5, 2], atol=1e-6)

    im.release_all()
    im.key_event("space", True)
    controls.update(1.0, im)
    assert np.allclose(camera.position.as_np(), [1, 2.5, 2], atol=1e-6)

def test_diagonal_speed_is_normalized(camera, im):
    controls = FirstPersonControls(camera, translation_speed=1.0)
    im.key_event("w", True)
    im.key_event("d", True)
    controls.update(1.0, im)
    moved = camera.position - Vec3(0, 1.5, 2)
    assert moved.length() == pytest.approx(1.0, abs=1e-6)

def test_look_requires_held_button(camera, im):
    controls = FirstPersonControls(camera, mouse_button=2, rotation_speed=0.5)
    im.mouse_move(0, 0)
    im.mouse_move(20, 0)
    controls.update(0.016, im)
    assert camera.rotation == Vec3(0, 0, 0)

    im.button_event(2, True)
    im.mouse_move(40, 10)
    controls.update(0.016, im)
    assert np.allclose(camera.rotation.as_np(), [-5, 350, 0], atol=1e-5)

def test_pitch_is_clamped(camera, im):
    controls = FirstPersonControls(camera, mouse_button=0, rotation_speed=1.0)
    im.button_event(0, True)
    im.mouse_move(0, 0)
    im.mouse_move(0, -500)
    controls.update(0.016, im)
    assert camera.rotation.x == pytest.approx(89.0)

def test_timer_caps_delta():
    t = Timer(max_delta=0.0)
    assert t.tick() == 0.0
    t = Timer()
    assert 0.0 <= t.tick() <= 0.25
