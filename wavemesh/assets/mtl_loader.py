# -*- coding: utf-8 -*-
"""
Загрузчик библиотеки материалов Wavefront (.mtl).

Два прохода по файлу:
    1. считаем `newmtl`, чтобы таблица имела точный размер;
    2. заполняем поля материалов.

Парсер «терпимый»: незнакомые директивы и битые числа молча
пропускаются. Ошибкой считается только невозможность открыть файл –
тогда возвращается None.
"""

from __future__ import annotations

from pathlib import Path

from wavemesh.assets.material import Material, MaterialLibrary
from wavemesh.utils.logger import logger
from wavemesh.utils.tokenizer import SkippedDirectives, iter_directives, parse_floats

BUMP_KEYWORDS = ("map_bump", "map_Bump", "bump")


def _new_draft(name: str) -> dict:
    """Черновик материала с документированными значениями по‑умолчанию."""
    return Material(name=name)._asdict()


def _first_float(args: list[str]) -> float | None:
    try:
        return float(args[0])
    except (IndexError, ValueError):
        return None


def count_materials(lines) -> int:
    """Проход 1 – количество объявлений `newmtl`."""
    return sum(1 for d in iter_directives(lines) if d.keyword == "newmtl")


def fill_materials(lines, count: int) -> list[Material]:
    """Проход 2 – заполнить ровно `count` материалов."""
    drafts: list[dict] = [None] * count
    current: dict | None = None
    filled = 0
    skipped = SkippedDirectives("MtlLoader")

    for directive in iter_directives(lines):
        keyword, args = directive.keyword, directive.args

        if keyword == "newmtl":
            if filled >= count:
                # файл изменился между проходами – больше места нет
                break
            current = _new_draft(directive.rest)
            drafts[filled] = current
            filled += 1
            continue

        if current is None:
            # директива до первого newmtl – некуда записывать
            skipped.skip(directive)
            continue

        if keyword in ("Ka", "Kd", "Ks"):
            if not args:
                continue
            rgba = tuple(parse_floats(args, 3)) + (1.0,)
            field = {"Ka": "ambient", "Kd": "diffuse", "Ks": "specular"}[keyword]
            current[field] = rgba
        elif keyword == "Ns":
            value = _first_float(args)
            if value is not None:
                current["shininess"] = value / 1000.0
        elif keyword == "d":
            value = _first_float(args)
            if value is not None:
                current["alpha"] = value
        elif keyword == "Tr":
            # обратная прозрачность: Tr 0.3 == d 0.7
            value = _first_float(args)
            if value is not None:
                current["alpha"] = 1.0 - value
        elif keyword == "illum":
            try:
                illum = int(args[0])
            except (IndexError, ValueError):
                continue
            if illum == 1:
                current["specular"] = (0.0, 0.0, 0.0, 1.0)
        elif keyword == "map_Kd":
            current["color_map"] = directive.rest
        elif keyword in BUMP_KEYWORDS:
            current["bump_map"] = directive.rest
        else:
            skipped.skip(directive)

    return [Material(**d) for d in drafts[:filled]]


def load_material_library(path) -> MaterialLibrary | None:
    """
    Прочитать .mtl‑файл. Возвращает MaterialLibrary или None,
    если файл не открывается.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8", errors="replace") as f:
            count = count_materials(f)
            f.seek(0)
            materials = fill_materials(f, count)
    except OSError as exc:
        logger.warning(f"[MtlLoader] Cannot open material library {p}: {exc}")
        return None

    logger.debug(f"[MtlLoader] Loaded {len(materials)} material(s) from {p}")
    return MaterialLibrary(materials, path=str(p))
