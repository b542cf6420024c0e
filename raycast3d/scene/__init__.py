"""
Пакет scene – узлы сцены (Node), камера, свет, меши, фабрика примитивов.
"""

from raycast3d.scene.node import Node
from raycast3d.scene.camera import Camera
from raycast3d.scene.light import PointLight
from raycast3d.scene.mesh import Mesh, MeshInstance
from raycast3d.scene.factory import MeshFactory
from raycast3d.scene.scene import Scene

__all__ = ["Node", "Camera", "PointLight", "Mesh", "MeshInstance",
           "MeshFactory", "Scene"]
