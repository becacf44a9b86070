"""Иерархия ошибок пакетной обработки.

Принципы:
- Каждый класс несёт стабильный `kind`: по нему контроллер помечает неудачный `Outcome`.
- Фатальные ошибки (`ConfigError`, `EnumerationError`) прерывают запуск до обработки файлов,
  остальные относятся к одному файлу и не останавливают пакет.
"""
from __future__ import annotations


class BorderizerError(Exception):
    """Базовая ошибка проекта."""
    kind: str = "BorderizerError"


class ConfigError(BorderizerError):
    """Некорректная конфигурация или входная папка (фатально)."""
    kind = "ConfigError"


class EnumerationError(BorderizerError):
    """Не удалось прочитать входную папку (фатально)."""
    kind = "EnumerationError"


class DecodeError(BorderizerError):
    kind = "DecodeError"


class InvalidDimensions(BorderizerError):
    kind = "InvalidDimensions"


class InvalidConfig(BorderizerError):
    """Внутренняя область холста получилась неположительной."""
    kind = "InvalidConfig"


class CompositionError(BorderizerError):
    """Размещённое изображение выходит за границы холста.

    Не должна возникать при корректной геометрии; если возникла, это дефект расчёта.
    """
    kind = "CompositionError"


class EncodeError(BorderizerError):
    kind = "EncodeError"
