"""
Исключения парсера OBJ.

Все ошибки разбора фатальны: первая же некорректная строка прерывает
разбор, частичный результат не возвращается.
"""


class ObjError(Exception):
    """Базовый класс всех ошибок polypath."""


class ObjIoError(ObjError, OSError):
    """Источник не удалось прочитать (ошибка внешнего коллаборатора)."""


class FormatError(ObjError, ValueError):
    """Некорректная директива: число аргументов, формат числа, размер грани."""

    def __init__(self, message: str, lineno: int = None, line: str = None):
        self.message = message
        self.lineno = lineno
        self.line = line
        super().__init__(self._render())

    def _render(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message} [{self.line}]"


class ObjIndexError(ObjError, IndexError):
    """Индекс атрибута равен нулю или выходит за границы таблицы."""

    def __init__(self, kind: str, index: int, size: int,
                 lineno: int = None, line: str = None):
        self.kind = kind
        self.index = index
        self.size = size
        self.lineno = lineno
        self.line = line
        msg = f"{kind} index {index} out of range (table holds {size})"
        if lineno is not None:
            msg = f"line {lineno}: {msg} [{line}]"
        super().__init__(msg)
