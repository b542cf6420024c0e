# -*- coding: utf-8 -*-
import numpy as np
import pytest
from raycast3d.scene import Scene, Camera, Mesh, MeshInstance, MeshFactory, Node
from raycast3d.scene.light import PointLight
from raycast3d.math.vec3 import Vec3

def make_simple_mesh():
    verts = np.array([[0,0,0],[1,0,0],[0,1,0]], dtype=np.float32)
    inds = np.array([0,1,2], dtype=np.uint32)
    return Mesh(verts, indices=inds)

def test_scene_traversal():
    scene = Scene()
    cam = Camera()
    scene.add_child(cam)

    light = PointLight()
    scene.add_child(light)

    tri = make_simple_mesh()
    scene.add_child(tri)

    names = [n.name for n in scene.traverse()]
    assert names == ["RootScene", "Camera", "PointLight", "Mesh"]
    assert scene.lights() == [light]

def test_add_child_reparents():
    a, b, c = Node("a"), Node("b"), Node("c")
    a.add_child(c)
    b.add_child(c)
    assert c.parent is b
    assert c not in a.children

def test_scene_update_reaches_every_node():
    calls = []

    class Probe(Node):
        def on_update(self, dt):
            calls.append((self.name, dt))

    scene = Scene()
    parent = scene.add(Probe("p"))
    parent.add_child(Probe("c"))
    scene.update(0.5)
    assert calls == [("p", 0.5), ("c", 0.5)]

def test_world_matrix_composes_parent():
    parent = Node()
    parent.position = Vec3(1, 0, 0)
    parent.rotation = Vec3(0, 90, 0)
    child = parent.add_child(Node())
    child.position = Vec3(0, 0, -1)
    # −Z родителя после поворота на 90° вокруг Y смотрит в −X
    assert np.allclose(child.world_position.as_np(), [0, 0, 0], atol=1e-6)

def test_forward_follows_yaw_and_pitch():
    n = Node()
    assert np.allclose(n.forward.as_np(), [0, 0, -1], atol=1e-6)
    n.rotation = Vec3(0, 90, 0)
    assert np.allclose(n.forward.as_np(), [-1, 0, 0], atol=1e-6)
    n.rotation = Vec3(90, 0, 0)
    assert np.allclose(n.forward.as_np(), [0, 1, 0], atol=1e-6)

@pytest.mark.parametrize("target", [(1, 0, 0), (0, 0, 5), (-2, 3, -1), (0, -4, 0.01)])
def test_look_at_points_forward_to_target(target):
    n = Node()
    n.position = Vec3(0.5, 0.5, 0.5)
    t = Vec3(*target)
    n.look_at(t)
    expected = (t - n.position).normalized()
    assert np.allclose(n.forward.as_np(), expected.as_np(), atol=1e-5)

def test_look_at_own_position_keeps_rotation():
    n = Node()
    n.rotation = Vec3(10, 20, 0)
    n.look_at(Vec3(0, 0, 0))
    assert n.rotation == Vec3(10, 20, 0)

def test_translate_forward():
    n = Node()
    n.rotation = Vec3(0, 90, 0)
    n.translate_forward(2.0)
    assert np.allclose(n.position.as_np(), [-2, 0, 0], atol=1e-6)

def test_camera_view_is_inverse_of_world():
    cam = Camera()
    cam.position = Vec3(1, 2, 3)
    cam.rotation = Vec3(-10, 30, 0)
    prod = cam.get_world_matrix() @ cam.get_view_matrix()
    assert np.allclose(prod.to_np(), np.eye(4), atol=1e-5)

def test_mesh_rejects_partial_triangles():
    verts = np.zeros((4, 3), dtype=np.float32)
    with pytest.raises(ValueError):
        Mesh(verts, indices=[0, 1, 2, 3])

def test_mesh_without_indices_uses_vertex_order():
    mesh = Mesh(np.zeros((6, 3)))
    assert mesh.indices.tolist() == [0, 1, 2, 3, 4, 5]
    assert mesh.triangle_count == 2

def test_mesh_color_aliases_material():
    mesh = make_simple_mesh()
    mesh.color = Vec3(1, 0, 0)
    assert mesh.material.color == Vec3(1, 0, 0)

def test_box_bounds():
    box = MeshFactory.create_box(2.0, 4.0, 6.0)
    assert np.allclose(box.bounding_box.min, [-1, -2, -3])
    assert np.allclose(box.bounding_box.max, [1, 2, 3])
    assert np.isclose(box.local_bounding_sphere.radius, np.sqrt(14.0))

def test_world_bounding_sphere_follows_transform():
    box = MeshFactory.create_box(2.0, 2.0, 2.0)
    box.position = Vec3(0, 3, 0)
    box.scale = Vec3(1, 2, 1)
    centre, radius = box.bounding_sphere
    assert np.allclose(centre, [0, 3, 0])
    assert np.isclose(radius, 2.0 * np.sqrt(3.0), atol=1e-5)

@pytest.mark.parametrize("mesh", [MeshFactory.create_box(1, 2, 3),
                                  MeshFactory.create_sphere(1.5, 12)])
def test_primitive_faces_wind_outwards(mesh):
    tris = mesh.triangles()
    normals = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
    centroids = tris.mean(axis=1)
    area = np.linalg.norm(normals, axis=1)
    live = area > 1e-9          # у полюсов сферы есть вырожденные треугольники
    assert np.all(np.einsum("ij,ij->i", normals[live], centroids[live]) > 0.0)

def test_box_layout():
    box = MeshFactory.create_box()
    assert len(box.vertices) == 24
    assert box.triangle_count == 12

def test_sphere_vertices_on_radius():
    sphere = MeshFactory.create_sphere(0.02, 16)
    assert np.allclose(np.linalg.norm(sphere.vertices, axis=1), 0.02, atol=1e-6)

def test_mesh_instance_follows_mesh():
    box = MeshFactory.create_box()
    inst = MeshInstance(box)
    assert inst.material is box.material
    box.position = Vec3(4, 5, 6)
    box.rotation = Vec3(0, 45, 0)
    assert np.allclose(inst.get_world_matrix().to_np(), box.get_world_matrix().to_np())
