# raycast3d/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер движка. Сообщения помечаются префиксом
# компонента: "[Picking] ...", "[Config] ..." и т.п.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "raycast3d"


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)

logger = init_logger()


def set_level(level) -> None:
    """Принимает имя уровня ("DEBUG", "info", ...) или число."""
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            logger.warning(f"[Logger] Unknown log level '{level}', keeping "
                           f"{logging.getLevelName(logger.level)}")
            return
        level = value
    logger.setLevel(level)
