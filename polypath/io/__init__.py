"""
Ввод: токенизатор строк OBJ.
Чтение файлов – в `polypath.io.reader` (импортирует mesh, поэтому
здесь не реэкспортируется).
"""

from polypath.io.tokenizer import Record, tokenize

__all__ = ["Record", "tokenize"]
