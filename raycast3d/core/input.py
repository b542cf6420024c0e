"""
Состояние клавиатуры и мыши, не привязанное к оконной библиотеке.
Оконный слой (Qt‑виджет) только пересылает сюда события.
"""

class InputManager:
    """Клавиши хранятся по имени в нижнем регистре: "w", "space", "shift"."""
    def __init__(self):
        self.keys = {}
        self.buttons = {}
        self.mouse = {"dx": 0.0, "dy": 0.0, "x": 0.0, "y": 0.0}
        self._has_position = False

    # -----------------------------------------------------------------
    #   События от оконного слоя
    # -----------------------------------------------------------------
    def key_event(self, key: str, pressed: bool) -> None:
        self.keys[key.lower()] = pressed

    def button_event(self, button: int, pressed: bool) -> None:
        self.buttons[button] = pressed

    def mouse_move(self, xpos: float, ypos: float) -> None:
        if self._has_position:
            self.mouse["dx"] += xpos - self.mouse["x"]
            self.mouse["dy"] += ypos - self.mouse["y"]
        self._has_position = True
        self.mouse["x"], self.mouse["y"] = xpos, ypos

    def release_all(self) -> None:
        """Сбросить нажатия (например, при потере фокуса окна)."""
        self.keys.clear()
        self.buttons.clear()

    # -----------------------------------------------------------------
    #   Опрос
    # -----------------------------------------------------------------
    def is_key_pressed(self, key: str) -> bool:
        return self.keys.get(key.lower(), False)

    def is_button_pressed(self, button: int) -> bool:
        return self.buttons.get(button, False)

    def get_mouse_delta(self):
        dx, dy = self.mouse["dx"], self.mouse["dy"]
        self.mouse["dx"], self.mouse["dy"] = 0.0, 0.0
        return dx, dy
