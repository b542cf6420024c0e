"""
Корневой узел сцены.
"""

from raycast3d.scene.node import Node
from raycast3d.scene.light import PointLight

class Scene(Node):
    """Корневой узел сцены."""
    def __init__(self):
        super().__init__("RootScene")

    def add(self, node: Node) -> Node:
        return self.add_child(node)

    def update(self, dt):
        for node in self.traverse():
            node.on_update(dt)

    def lights(self):
        return [n for n in self.traverse() if isinstance(n, PointLight)]
