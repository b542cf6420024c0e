# raycast_app/__init__.py
"""
Интерактивное демо пикинга лучом на движке raycast3d.

Экспортирует единственную функцию ``run`` – точку входа:

    from raycast_app import run
    run()

Или из командной строки:

    python -m raycast_app

Qt и OpenGL импортируются только при запуске, поэтому логику
пикинга (``raycast_app.picking``) можно использовать без них.
"""


def run():
    from raycast_app.main import run as _run
    _run()


__all__ = ["run"]
