from raycast3d.core.timer import Timer
from raycast3d.core.input import InputManager
from raycast3d.core.controls import FirstPersonControls

__all__ = ["Timer", "InputManager", "FirstPersonControls"]
