"""Модели пакетного запуска: задача, исход, сводка, отчёт.

Принципы:
- Исход (`Outcome`) и задача (`ImageTask`) неизменяемы и живут одну попытку обработки.
- Сводка (`Summary`) накапливается явно через `add()` и не хранится в глобальном состоянии.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class ImageTask:
    """Один входной файл и путь, куда будет записан результат."""
    input_path: Path
    output_path: Path

    @property
    def name(self) -> str:
        return self.input_path.name


@dataclass(frozen=True)
class Outcome:
    """Исход обработки одного файла.

    Fields:
        name: Имя входного файла.
        duration: Время конвейера decode→encode, с (для неудач тоже замеряется).
        error_kind: `None` при успехе, иначе вид ошибки ("DecodeError", ...).
        message: Текст ошибки для отчёта.
    """
    name: str
    duration: float
    error_kind: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, name: str, duration: float) -> "Outcome":
        return cls(name=name, duration=duration)

    @classmethod
    def failed(cls, name: str, duration: float, error_kind: str, message: str) -> "Outcome":
        return cls(name=name, duration=duration, error_kind=error_kind, message=message)

    @property
    def succeeded(self) -> bool:
        return self.error_kind is None


@dataclass
class Summary:
    """Накопитель статистики запуска.

    Экстремумы обновляются только строгим сравнением, поэтому при равных
    длительностях остаётся файл, встреченный первым.
    """
    succeeded: int = 0
    failed: int = 0
    total_duration: float = 0.0
    fastest: Optional[Tuple[str, float]] = None
    slowest: Optional[Tuple[str, float]] = None

    def add(self, outcome: Outcome) -> None:
        if not outcome.succeeded:
            self.failed += 1
            return

        self.succeeded += 1
        self.total_duration += outcome.duration
        entry = (outcome.name, outcome.duration)
        if self.fastest is None or outcome.duration < self.fastest[1]:
            self.fastest = entry
        if self.slowest is None or outcome.duration > self.slowest[1]:
            self.slowest = entry

    @property
    def processed(self) -> int:
        return self.succeeded + self.failed

    @property
    def average(self) -> Optional[float]:
        """Средняя длительность успешного файла или `None`, если успехов нет."""
        if self.succeeded == 0:
            return None
        return self.total_duration / self.succeeded


@dataclass
class BatchReport:
    """Итог запуска: сводка, исходы в порядке обработки и общее время."""
    summary: Summary = field(default_factory=Summary)
    outcomes: List[Outcome] = field(default_factory=list)
    wall_time: float = 0.0

    def failures(self) -> List[Outcome]:
        return [o for o in self.outcomes if not o.succeeded]
