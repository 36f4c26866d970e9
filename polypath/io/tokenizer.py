# -*- coding: utf-8 -*-
"""
Токенизатор строк OBJ: текст → поток записей (директива + аргументы).
Комментарии (`#`) и пустые строки пропускаются; ключевые слова не
проверяются – это дело построителя иерархии.
"""

import re
from typing import Iterable, Iterator, NamedTuple, Tuple, Union

# комментарий – '#' в начале строки или после пробела; "my#1.mtl" – имя
_COMMENT = re.compile(r"(?:^|\s)#")


class Record(NamedTuple):
    lineno: int           # 1‑based номер строки
    keyword: str
    args: Tuple[str, ...]
    raw: str              # исходная строка без '\n'


def _lines(source: Union[str, Iterable[str]]) -> Iterable[str]:
    if isinstance(source, str):
        return source.splitlines()
    return source


def tokenize(source: Union[str, Iterable[str]]) -> Iterator[Record]:
    """Ленивый генератор записей; каждый вызов начинает разбор заново."""
    for lineno, raw in enumerate(_lines(source), start=1):
        raw = raw.rstrip("\r\n")
        text = raw
        comment = _COMMENT.search(text)
        if comment is not None:
            text = text[:comment.start()]
        parts = text.split()
        if not parts:
            continue
        yield Record(lineno, parts[0], tuple(parts[1:]), raw)
