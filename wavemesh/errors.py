"""
Исключения конвейера импорта.

Наружу они не выходят: `Model.import_file` ловит `ObjImportError`,
очищает модель и возвращает False.
"""


class ObjImportError(Exception):
    """Базовая ошибка импорта OBJ."""


class MaterialLibraryError(ObjImportError):
    """Файл материалов (mtllib) не удалось открыть."""
    def __init__(self, path):
        super().__init__(f"Material library not found: {path}")
        self.path = path


class FaceReferenceError(ObjImportError):
    """Ссылка грани указывает за пределы уже прочитанных элементов."""
    def __init__(self, kind: str, reference: int, available: int, line_no: int):
        super().__init__(
            f"Face {kind} reference {reference} out of range "
            f"({available} available) on line {line_no}"
        )
        self.kind = kind
        self.reference = reference
        self.available = available
        self.line_no = line_no
