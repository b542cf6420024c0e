# -*- coding: utf-8 -*-
import numpy as np
from raycast3d.math.vec3 import Vec3
from raycast3d.math.mat4 import Mat4

def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert (-a).as_np().tolist() == [-1, -2, -3]
    assert (a / 2).as_np().tolist() == [0.5, 1, 1.5]

def test_vec3_inplace_ops_mutate():
    a = Vec3(1, 1, 1)
    same = a
    a += Vec3(1, 2, 3)
    assert same is a
    assert a == Vec3(2, 3, 4)

def test_vec3_products_and_length():
    a = Vec3(1, 0, 0)
    b = Vec3(0, 1, 0)
    assert a.dot(b) == 0.0
    assert a.cross(b) == Vec3(0, 0, 1)
    assert Vec3(3, 4, 0).length() == 5.0
    assert Vec3(1, 1, 1).distance_to(Vec3(1, 1, 4)) == 3.0

def test_vec3_normalized_zero_stays_zero():
    assert Vec3().normalized() == Vec3()
    assert np.isclose(Vec3(0, 0, -7).normalized().z, -1.0)

def test_vec3_copy_is_independent():
    a = Vec3(1, 2, 3)
    c = a.copy()
    c.x = 10
    assert a.x == 1.0

def test_mat4_identity():
    I = Mat4.identity()
    assert np.allclose(I.to_np(), np.eye(4, dtype=np.float32))

def test_mat4_translation():
    M = Mat4.translate(1, 2, 3)
    p = np.array([0, 0, 0, 1], dtype=np.float32)
    res = M.to_np() @ p
    assert np.allclose(res, np.array([1, 2, 3, 1], dtype=np.float32))

def test_mat4_rotate_y():
    R = Mat4.rotate_y(90)
    assert np.allclose(R.transform_vector((1, 0, 0)), [0, 0, -1], atol=1e-6)

def test_mat4_inverse():
    M = Mat4.translate(1, -2, 3) @ Mat4.from_euler(30, 45, 10) @ Mat4.scale(2, 2, 2)
    assert np.allclose((M @ M.inverse()).to_np(), np.eye(4), atol=1e-5)

def test_mat4_transform_point_vs_vector():
    M = Mat4.translate(5, 0, 0)
    assert np.allclose(M.transform_point((1, 0, 0)), [6, 0, 0])
    assert np.allclose(M.transform_vector((1, 0, 0)), [1, 0, 0])

def test_perspective_maps_near_plane_to_minus_one():
    P = Mat4.perspective(60, 1.0, 0.1, 100.0)
    assert np.isclose(P.transform_point((0, 0, -0.1))[2], -1.0, atol=1e-5)
    assert np.isclose(P.transform_point((0, 0, -100.0))[2], 1.0, atol=1e-4)
