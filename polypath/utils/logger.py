# polypath/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger(level=logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger("polypath")


logger = init_logger()


def set_level(level) -> None:
    """Сменить уровень логгера (int или имя вроде "DEBUG")."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
