# -*- coding: utf-8 -*-
"""
Внешняя граница парсера: текст/файл → ObjObject.
Также `load_obj` – прежний упрощённый загрузчик, теперь поверх модели.
"""

from pathlib import Path

import numpy as np

from polypath.errors import ObjIoError
from polypath.io.tokenizer import tokenize
from polypath.mesh.builder import build
from polypath.mesh.model import ObjObject, to_arrays
from polypath.utils.config import Config
from polypath.utils.logger import logger, set_level
from polypath.utils.profiler import Profiler


def parse(source, config: Config = None) -> ObjObject:
    """Разобрать OBJ из строки или итерируемого набора строк."""
    if config is not None and config.log_level is not None:
        set_level(config.log_level)
    return build(tokenize(source), config)


def read_from_file(path, config: Config = None) -> ObjObject:
    """Прочитать и разобрать .obj; ошибки ОС → ObjIoError."""
    encoding = config.encoding if config is not None else Config().encoding
    path = Path(path)
    with Profiler(f"read {path.name}") as profiler:
        try:
            with path.open("r", encoding=encoding) as f:
                obj = parse(f, config)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(f"[Reader] Cannot read {path}: {exc}")
            raise ObjIoError(getattr(exc, "errno", None), f"cannot read OBJ file: {exc}",
                             str(path)) from exc
    logger.info(f"[Reader] {path.name}: {obj.vert_count()} vertices "
                f"in {profiler.elapsed_ms:.1f} ms.")
    return obj


def load_obj(path):
    """
    Позиции, нормали, texcoords и индексы (uint32) – как раньше.
    Отсутствующие нормали/texcoords заменяются нулями.
    """
    indices, unique, _ = read_from_file(path).vertices_indexed()
    arrays = to_arrays(unique)
    positions = arrays["positions"]
    normals = arrays["normals"]
    if normals is None:
        normals = np.zeros((len(unique), 3), dtype=np.float32)
    texcoords = arrays["texcoords"]
    if texcoords is None:
        texcoords = np.zeros((len(unique), 2), dtype=np.float32)
    else:
        texcoords = texcoords[:, 0:2]
    return positions, normals, texcoords, indices
