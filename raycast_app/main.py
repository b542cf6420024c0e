# raycast_app/main.py
"""
Запуск демо в виде отдельного приложения.

    python -m raycast_app            # через __main__
    raycast-demo                     # консольный скрипт
"""

import sys
from PySide6.QtWidgets import QApplication

from raycast3d.utils import Config, set_level

from raycast_app.ui import MainWindow


def run():
    """Создаёт Qt‑приложение и открывает главное окно."""
    config = Config()
    set_level(config.get("log_level", "INFO"))

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    win = MainWindow(config)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    run()
