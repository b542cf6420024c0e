# raycast_app/gl_widget.py
"""
OpenGL‑вьюпорт демо: рендер сцены, управление камерой от первого
лица (ПКМ + WASD) и пикинг левой кнопкой мыши.
"""

from __future__ import annotations

# ───── Qt ───────────────────────────────────────────────────────
from PySide6.QtOpenGLWidgets import QOpenGLWidget
from PySide6.QtGui import QMouseEvent, QKeyEvent
from PySide6.QtCore import Qt, QTimer, Signal

# ───── raycast3d ------------------------------------------------------
from raycast3d.core import InputManager, Timer
from raycast3d.renderer import GLRenderer
from raycast3d.utils import logger

from raycast_app.picking import PickDispatcher
from raycast_app.scene_setup import RayCastScene
from raycast_app.settings import PickSettings

# номера кнопок как в DOM: 0 – левая, 1 – средняя, 2 – правая
_BUTTONS = {
    Qt.LeftButton: 0,
    Qt.MiddleButton: 1,
    Qt.RightButton: 2,
}

_SPECIAL_KEYS = {
    int(Qt.Key_Space): "space",
    int(Qt.Key_Shift): "shift",
}

FRAME_INTERVAL_MS = 16      # ~60 fps


def qt_key_name(event: QKeyEvent) -> str | None:
    """Имя клавиши для InputManager ("w", "space", ...) или None."""
    key = int(event.key())
    if key in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[key]
    if int(Qt.Key_A) <= key <= int(Qt.Key_Z):
        return chr(key).lower()
    return None


class GLWidget(QOpenGLWidget):
    """
    Каждый кадр (QTimer):
      dt → FirstPersonControls.update → repaint (GLRenderer.render).

    Нажатие ЛКМ передаётся в PickDispatcher вместе с текущими
    PickSettings; результат пикинга уходит сигналом ``picked``.
    """
    picked = Signal(object)         # PickResult

    def __init__(self, world: RayCastScene, settings: PickSettings, parent=None):
        super().__init__(parent)
        self.world = world
        self.settings = settings

        self.input = InputManager()
        self.timer = Timer()
        self.dispatcher = PickDispatcher(world.camera, world.pick_mesh, world.indicators)

        self._renderer: GLRenderer | None = None
        self._background_color = (0.0, 0.0, 0.0, 1.0)

        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(True)

        self._frame_timer = QTimer(self)
        self._frame_timer.timeout.connect(self._main_loop)
        self._frame_timer.start(FRAME_INTERVAL_MS)

    # --------------------------------------------------------------
    #   OpenGL‑инициализация
    # --------------------------------------------------------------
    def initializeGL(self):
        self._renderer = GLRenderer(self.width(), self.height(), self._background_color)
        try:
            self._renderer.initialize()
        except Exception as exc:
            raise RuntimeError(f"OpenGL initialisation failed: {exc}") from exc

    def resizeGL(self, w: int, h: int):
        h = max(h, 1)
        self.world.camera.aspect = w / h
        if self._renderer:
            self._renderer.resize(w, h)

    def paintGL(self):
        if not self._renderer:
            return
        self._renderer.render(self.world.scene, self.world.camera)

    # --------------------------------------------------------------
    #   Главный цикл
    # --------------------------------------------------------------
    def _main_loop(self):
        dt = self.timer.tick()
        self.world.controls.update(dt, self.input)
        self.world.scene.update(dt)
        self.update()

    # --------------------------------------------------------------
    #   Обработчики мыши
    # --------------------------------------------------------------
    def mousePressEvent(self, event: QMouseEvent):
        button = _BUTTONS.get(event.button())
        if button is not None:
            self.input.button_event(button, True)
            pos = event.position()
            result = self.dispatcher.on_mouse_down(pos.x(), pos.y(), button,
                                                   self.width(), self.height(),
                                                   self.settings)
            if result is not None:
                self.picked.emit(result)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        button = _BUTTONS.get(event.button())
        if button is not None:
            self.input.button_event(button, False)
        super().mouseReleaseEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        pos = event.position()
        self.input.mouse_move(pos.x(), pos.y())
        super().mouseMoveEvent(event)

    # --------------------------------------------------------------
    #   Клавиатура
    # --------------------------------------------------------------
    def keyPressEvent(self, event: QKeyEvent):
        name = qt_key_name(event)
        if name and not event.isAutoRepeat():
            self.input.key_event(name, True)
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent):
        name = qt_key_name(event)
        if name and not event.isAutoRepeat():
            self.input.key_event(name, False)
        super().keyReleaseEvent(event)

    def focusOutEvent(self, event):
        self.input.release_all()
        logger.debug("[Viewport] Focus lost, input released")
        super().focusOutEvent(event)
