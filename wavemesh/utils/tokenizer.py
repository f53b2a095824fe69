# -*- coding: utf-8 -*-
"""
Построчный токенизатор для OBJ/MTL.

Каждая значимая строка превращается в `Directive`:
    keyword – первое слово строки ("v", "f", "newmtl", ...)
    args    – остальные слова
    rest    – «хвост» строки после keyword без крайних пробелов
              (нужен для имён материалов и путей с пробелами)

Пустые строки и комментарии (#) пропускаются. Длина строки не
ограничена. Что делать с незнакомым keyword – решает вызывающий;
проходы импорта его просто игнорируют.
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

from wavemesh.utils.logger import logger


class Directive(NamedTuple):
    keyword: str
    args: list[str]
    rest: str
    line_no: int


def iter_directives(lines: Iterable[str]) -> Iterator[Directive]:
    """Генератор директив из произвольного итерируемого набора строк."""
    for line_no, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        parts = stripped.split(None, 1)
        keyword = parts[0]
        rest = parts[1].strip() if len(parts) > 1 else ""
        yield Directive(keyword, rest.split(), rest, line_no)


def parse_floats(args: list[str], count: int) -> list[float]:
    """
    Прочитать `count` чисел из args «по‑лучшему»: недостающие или
    битые компоненты становятся 0.0, лишние игнорируются.
    """
    values = []
    for i in range(count):
        try:
            values.append(float(args[i]))
        except (IndexError, ValueError):
            values.append(0.0)
    return values


class SkippedDirectives:
    """
    Учёт проигнорированных директив: каждое незнакомое слово
    логируется один раз за проход.
    """
    def __init__(self, source: str):
        self.source = source
        self.seen: dict[str, int] = {}

    def skip(self, directive: Directive) -> None:
        count = self.seen.get(directive.keyword, 0)
        if count == 0:
            logger.debug(
                f"[{self.source}] Skipping unsupported directive "
                f"'{directive.keyword}' (line {directive.line_no})"
            )
        self.seen[directive.keyword] = count + 1
