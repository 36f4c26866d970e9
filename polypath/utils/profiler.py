"""
Контекст‑менеджер профайлинга – измеряет время разбора.
Результат доступен после блока в `elapsed_ms`.
"""

import time
from polypath.utils.logger import logger


class Profiler:
    """Засекает время блока `with`; итог пишет в DEBUG‑лог."""
    def __init__(self, name: str):
        self.name = name
        self._start = None
        self.elapsed_ms = 0.0

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        status = "failed after" if exc_type is not None else "took"
        logger.debug(f"[Profiler] {self.name} {status} {self.elapsed_ms:.2f} ms")
        return False
