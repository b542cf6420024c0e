# raycast_app/ui.py
"""
Главное окно демо: вьюпорт по центру, справа – панель настроек
(отображение ограничивающего объёма и способ пересечения луча),
внизу – строка состояния с результатом последнего пикинга.
"""

from __future__ import annotations

# ───── Qt ───────────────────────────────────────────────────────
from PySide6.QtWidgets import (
    QMainWindow, QDockWidget, QWidget, QFormLayout, QComboBox,
    QLabel, QStatusBar,
)
from PySide6.QtCore import Qt, QTimer

# ───── raycast3d ------------------------------------------------------
from raycast3d.utils import Config, logger

from raycast_app.gl_widget import GLWidget
from raycast_app.picking import PickResult
from raycast_app.scene_setup import RayCastScene, build_scene
from raycast_app.settings import (
    BoundsDisplay, PickSettings, RaycastMode, apply_bounds_display,
)

PANEL_WIDTH = 200


# ----------------------------------------------------------------------
#   Панель настроек
# ----------------------------------------------------------------------
class SettingsPanel(QDockWidget):
    """Два выпадающих списка: «Bounds» и «Raycast»."""

    def __init__(self, world: RayCastScene, settings: PickSettings, parent=None):
        super().__init__("Settings", parent)
        self.world = world
        self.settings = settings

        body = QWidget()
        body.setFixedWidth(PANEL_WIDTH)
        form = QFormLayout(body)

        self.bounds_combo = QComboBox()
        for item in BoundsDisplay:
            self.bounds_combo.addItem(item.value, item)
        self.bounds_combo.setCurrentIndex(list(BoundsDisplay).index(settings.bounds_display))
        self.bounds_combo.currentIndexChanged.connect(self._on_bounds_changed)
        form.addRow("Bounds", self.bounds_combo)

        self.raycast_combo = QComboBox()
        for item in RaycastMode:
            self.raycast_combo.addItem(item.value, item)
        self.raycast_combo.setCurrentIndex(list(RaycastMode).index(settings.raycast_mode))
        self.raycast_combo.currentIndexChanged.connect(self._on_raycast_changed)
        form.addRow("Raycast", self.raycast_combo)

        self.setWidget(body)
        self.setFeatures(QDockWidget.DockWidgetMovable | QDockWidget.DockWidgetFloatable)

    # ------------------------------------------------------------------
    def _on_bounds_changed(self, index: int):
        display = self.bounds_combo.itemData(index)
        self.settings.bounds_display = display
        apply_bounds_display(self.world.bounds_mesh, self.world.bounds_material, display)

    def _on_raycast_changed(self, index: int):
        mode = self.raycast_combo.itemData(index)
        self.settings.raycast_mode = mode
        logger.debug(f"[Settings] Raycast mode → {mode.value}")


# ----------------------------------------------------------------------
#   Главное окно
# ----------------------------------------------------------------------
class MainWindow(QMainWindow):
    def __init__(self, config: Config | None = None):
        super().__init__()
        self.config = config if config is not None else Config()

        win_cfg = self.config.section("window")
        self.setWindowTitle(win_cfg["title"])
        self.resize(int(win_cfg["width"]), int(win_cfg["height"]))

        # ───── Сцена и состояние пикинга
        self.world = build_scene(self.config)
        self.settings = PickSettings()
        apply_bounds_display(self.world.bounds_mesh, self.world.bounds_material,
                             self.settings.bounds_display)

        # ───── UI
        self.gl_widget = GLWidget(self.world, self.settings, self)
        self.setCentralWidget(self.gl_widget)

        self.settings_panel = SettingsPanel(self.world, self.settings, self)
        self.addDockWidget(Qt.RightDockWidgetArea, self.settings_panel)

        self._create_status_bar()
        self.gl_widget.picked.connect(self._on_picked)

        self._fps_timer = QTimer(self)
        self._fps_timer.timeout.connect(self._update_fps)
        self._fps_timer.start(1000)

        logger.info("[UI] Main window ready")

    # ------------------------------------------------------------------
    #   Строка состояния
    # ------------------------------------------------------------------
    def _create_status_bar(self):
        sb = QStatusBar()
        self.setStatusBar(sb)

        self.pick_lbl = QLabel("Left click to cast a ray")
        sb.addWidget(self.pick_lbl)

        self.fps_lbl = QLabel("FPS: 0")
        sb.addPermanentWidget(self.fps_lbl)

    def _on_picked(self, result: PickResult):
        if result.is_hit:
            h = result.hit
            self.pick_lbl.setText(f"{result.source}: ({h.x:.3f}, {h.y:.3f}, {h.z:.3f})")
        else:
            self.pick_lbl.setText("miss")

    def _update_fps(self):
        self.fps_lbl.setText(f"FPS: {int(self.gl_widget.timer.fps)}")
