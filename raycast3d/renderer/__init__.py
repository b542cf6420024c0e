"""
Экспорт рендер‑компонентов.
"""

from raycast3d.renderer.base_renderer import BaseRenderer
from raycast3d.renderer.gl_renderer import GLRenderer, gl_check_error

__all__ = ["BaseRenderer", "GLRenderer", "gl_check_error"]
