"""
Простой загрузчик/сохранитель настроек парсера в формате JSON.
Если файл не найден – используются настройки по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from polypath.utils.logger import logger

DEFAULT_CONFIG = {
    "parser": {
        "default_name": "default",
        "strict_directives": False,
        "encoding": "utf-8",
    },
    # None – уровень логгера не трогаем
    "log_level": None,
}


class Config:
    """Настройки парсера; без `path` – чистые значения по‑умолчанию."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else None
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if self.path is not None:
            self._load()

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                _check_sections(loaded)
                self.data.update(loaded)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info(f"[Config] No config file at {self.path} – using defaults.")

    def save(self, path=None):
        if path is not None:
            self.path = Path(path)
        if self.path is None:
            raise ValueError("Config.save() needs a path")
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    def __getitem__(self, key):
        value = self.data.get(key, DEFAULT_CONFIG.get(key))
        default = DEFAULT_CONFIG.get(key)
        # вложенные секции дополняем недостающими ключами
        if isinstance(value, dict) and isinstance(default, dict):
            return {**default, **value}
        return value

    def __setitem__(self, key, value):
        self.data[key] = value

    # -----------------------------------------------------------------
    # удобные свойства для парсера
    # -----------------------------------------------------------------
    @property
    def default_name(self) -> str:
        return self["parser"]["default_name"]

    @property
    def strict_directives(self) -> bool:
        return bool(self["parser"]["strict_directives"])

    @property
    def encoding(self) -> str:
        return self["parser"]["encoding"]

    @property
    def log_level(self):
        return self["log_level"]


def _check_sections(loaded) -> None:
    """Файл должен быть объектом, а секции‑словари – словарями."""
    if not isinstance(loaded, dict):
        raise ValueError("top-level JSON value must be an object")
    for key, default in DEFAULT_CONFIG.items():
        if isinstance(default, dict) and key in loaded and not isinstance(loaded[key], dict):
            raise ValueError(f"section '{key}' must be an object")
