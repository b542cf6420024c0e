# ------------------------------------------------------------
# Рендерер на фиксированном конвейере OpenGL (PyOpenGL).
# Требует активный GL‑контекст (его создаёт QOpenGLWidget).
# ------------------------------------------------------------

import math

from OpenGL import GL, GLU

from raycast3d.assets.material import BoundingVolumeMaterial, BoundingVolumeMode, Side
from raycast3d.renderer.base_renderer import BaseRenderer
from raycast3d.scene.light import PointLight
from raycast3d.scene.mesh import Mesh, MeshInstance
from raycast3d.utils.logger import logger

# рёбра коробки: пары углов, отличающиеся ровно одним битом
_BOX_EDGES = [(i, j) for i in range(8) for j in range(i + 1, 8)
              if bin(i ^ j).count("1") == 1]
_MAX_LIGHTS = 8


def gl_check_error(context: str = ""):
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        msg = GLU.gluErrorString(err)
        if isinstance(msg, bytes):
            msg = msg.decode()
        logger.error(f"[Renderer] OpenGL error {msg} [{context}]")


class GLRenderer(BaseRenderer):
    """
    Простой forward‑рендер: один проход, до 8 точечных источников,
    меши – через vertex arrays, оверлей ограничивающих объёмов – линиями.
    """
    def __init__(self, width: int = 800, height: int = 600,
                 background=(0.0, 0.0, 0.0, 1.0)):
        self.width = width
        self.height = height
        self.background = background
        self._initialized = False

    def initialize(self) -> None:
        GL.glEnable(GL.GL_DEPTH_TEST)
        GL.glEnable(GL.GL_NORMALIZE)
        GL.glEnable(GL.GL_COLOR_MATERIAL)
        GL.glColorMaterial(GL.GL_FRONT_AND_BACK, GL.GL_AMBIENT_AND_DIFFUSE)
        GL.glShadeModel(GL.GL_SMOOTH)
        self._initialized = True
        logger.info(f"[Renderer] OpenGL {GL.glGetString(GL.GL_VERSION)!r} initialized")

    def resize(self, w: int, h: int) -> None:
        self.width, self.height = w, max(h, 1)
        GL.glViewport(0, 0, w, self.height)

    # -----------------------------------------------------------------
    def render(self, scene, camera) -> None:
        if not self._initialized:
            self.initialize()

        r, g, b, a = self.background
        GL.glClearColor(r, g, b, a)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

        GL.glMatrixMode(GL.GL_PROJECTION)
        GL.glLoadMatrixf(camera.get_projection_matrix().to_gl())
        GL.glMatrixMode(GL.GL_MODELVIEW)
        GL.glLoadMatrixf(camera.get_view_matrix().to_gl())

        # позиции источников задаются после view‑матрицы → мировые координаты
        self._setup_lights(scene)
        self._draw_node(scene)

        gl_check_error("render")

    def _setup_lights(self, scene) -> None:
        lights = [n for n in scene.traverse() if isinstance(n, PointLight)]
        for i in range(_MAX_LIGHTS):
            GL.glDisable(GL.GL_LIGHT0 + i)
        for i, light in enumerate(lights[:_MAX_LIGHTS]):
            gl_light = GL.GL_LIGHT0 + i
            pos = light.world_position
            GL.glLightfv(gl_light, GL.GL_POSITION, (pos.x, pos.y, pos.z, 1.0))
            GL.glLightfv(gl_light, GL.GL_AMBIENT, (*light.ambient_intensity.to_tuple(), 1.0))
            GL.glLightfv(gl_light, GL.GL_DIFFUSE, (*light.diffuse_intensity.to_tuple(), 1.0))
            GL.glLightfv(gl_light, GL.GL_SPECULAR, (*light.specular_intensity.to_tuple(), 1.0))
            GL.glEnable(gl_light)

    def _draw_node(self, node) -> None:
        if not node.visible:
            return      # невидимый узел скрывает и всё поддерево
        if isinstance(node, Mesh):
            self._draw_mesh(node)
        elif isinstance(node, MeshInstance) and isinstance(node.material, BoundingVolumeMaterial):
            self._draw_bounds(node)
        for child in node.children:
            self._draw_node(child)

    # -----------------------------------------------------------------
    #   Меши
    # -----------------------------------------------------------------
    def _apply_material(self, material) -> None:
        if material.lit:
            GL.glEnable(GL.GL_LIGHTING)
            GL.glMaterialfv(GL.GL_FRONT_AND_BACK, GL.GL_SPECULAR, (0.5, 0.5, 0.5, 1.0))
            GL.glMaterialf(GL.GL_FRONT_AND_BACK, GL.GL_SHININESS,
                           float(getattr(material, "shininess", 30.0)))
        else:
            GL.glDisable(GL.GL_LIGHTING)

        if material.side == Side.DOUBLE:
            GL.glDisable(GL.GL_CULL_FACE)
        else:
            GL.glEnable(GL.GL_CULL_FACE)
            GL.glCullFace(GL.GL_BACK if material.side == Side.FRONT else GL.GL_FRONT)

        c = material.color
        GL.glColor3f(c.x, c.y, c.z)

    def _draw_mesh(self, mesh: Mesh) -> None:
        if mesh.triangle_count == 0:
            return
        self._apply_material(mesh.material)

        GL.glPushMatrix()
        GL.glMultMatrixf(mesh.get_world_matrix().to_gl())

        GL.glEnableClientState(GL.GL_VERTEX_ARRAY)
        GL.glVertexPointer(3, GL.GL_FLOAT, 0, mesh.vertices)
        if mesh.normals is not None:
            GL.glEnableClientState(GL.GL_NORMAL_ARRAY)
            GL.glNormalPointer(GL.GL_FLOAT, 0, mesh.normals)

        GL.glDrawElements(GL.GL_TRIANGLES, len(mesh.indices), GL.GL_UNSIGNED_INT, mesh.indices)

        GL.glDisableClientState(GL.GL_NORMAL_ARRAY)
        GL.glDisableClientState(GL.GL_VERTEX_ARRAY)
        GL.glPopMatrix()

    # -----------------------------------------------------------------
    #   Оверлей ограничивающих объёмов
    # -----------------------------------------------------------------
    def _draw_bounds(self, instance: MeshInstance) -> None:
        material = instance.material
        GL.glPushAttrib(GL.GL_ENABLE_BIT | GL.GL_LINE_BIT)
        GL.glDisable(GL.GL_LIGHTING)
        GL.glDisable(GL.GL_CULL_FACE)
        GL.glLineWidth(1.5)
        c = material.color
        GL.glColor3f(c.x, c.y, c.z)

        if material.mode == BoundingVolumeMode.ORIENTED_BOUNDING_BOX:
            self._draw_box_lines(instance)
        else:
            self._draw_sphere_lines(instance)

        GL.glPopAttrib()

    def _draw_box_lines(self, instance: MeshInstance) -> None:
        corners = instance.mesh.bounding_box.corners()
        GL.glPushMatrix()
        GL.glMultMatrixf(instance.get_world_matrix().to_gl())
        GL.glBegin(GL.GL_LINES)
        for i, j in _BOX_EDGES:
            GL.glVertex3f(*corners[i])
            GL.glVertex3f(*corners[j])
        GL.glEnd()
        GL.glPopMatrix()

    def _draw_sphere_lines(self, instance: MeshInstance, rings: int = 6, steps: int = 48) -> None:
        centre, radius = instance.mesh.bounding_sphere
        cx, cy, cz = (float(v) for v in centre)
        angles = [2.0 * math.pi * k / steps for k in range(steps)]

        # параллели
        for i in range(1, rings):
            phi = math.pi * i / rings
            y = cy + radius * math.cos(phi)
            rr = radius * math.sin(phi)
            GL.glBegin(GL.GL_LINE_LOOP)
            for t in angles:
                GL.glVertex3f(cx + rr * math.cos(t), y, cz + rr * math.sin(t))
            GL.glEnd()

        # меридианы
        for i in range(rings):
            theta = math.pi * i / rings
            dx, dz = math.cos(theta), math.sin(theta)
            GL.glBegin(GL.GL_LINE_LOOP)
            for t in angles:
                h = radius * math.cos(t)
                GL.glVertex3f(cx + h * dx, cy + radius * math.sin(t), cz + h * dz)
            GL.glEnd()
