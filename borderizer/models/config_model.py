"""Конфигурация пакетной обработки.

Принципы:
- SRP: только параметры и их проверка, без ввода/вывода.
- Неизменяемость (`frozen=True`): один экземпляр создаётся при старте и читается всеми задачами.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from borderizer.models.errors import ConfigError

OUTPUT_SUBFOLDER = "subfolder"
OUTPUT_IN_PLACE = "in_place"

DEFAULT_WIDTH = 1080
DEFAULT_HEIGHT = 1080
DEFAULT_LANDSCAPE_VERT = 0.05
DEFAULT_LANDSCAPE_HORIZ = 0.03
DEFAULT_PORTRAIT_VERT = 0.005
DEFAULT_PORTRAIT_HORIZ = 0.18
DEFAULT_QUALITY = 100
DEFAULT_PREFIX = "bordered_"
DEFAULT_SUBFOLDER_NAME = "bordered_images"


@dataclass(frozen=True)
class BorderConfig:
    """Параметры рамки и вывода.

    Fields:
        target_width: Ширина холста, px.
        target_height: Высота холста, px.
        landscape_vert_ratio: Доля высоты под поле сверху и снизу (альбомные).
        landscape_horiz_ratio: Доля ширины под поле слева и справа (альбомные).
        portrait_vert_ratio: То же по вертикали для портретных и квадратных.
        portrait_horiz_ratio: То же по горизонтали для портретных и квадратных.
        encode_quality: Качество JPEG 1–100 (для PNG игнорируется).
        output_mode: "subfolder" | "in_place".
        output_prefix: Префикс имени выходного файла.
        output_subfolder: Имя подпапки для режима "subfolder".
    """
    target_width: int = DEFAULT_WIDTH
    target_height: int = DEFAULT_HEIGHT
    landscape_vert_ratio: float = DEFAULT_LANDSCAPE_VERT
    landscape_horiz_ratio: float = DEFAULT_LANDSCAPE_HORIZ
    portrait_vert_ratio: float = DEFAULT_PORTRAIT_VERT
    portrait_horiz_ratio: float = DEFAULT_PORTRAIT_HORIZ
    encode_quality: int = DEFAULT_QUALITY
    output_mode: str = OUTPUT_SUBFOLDER
    output_prefix: str = DEFAULT_PREFIX
    output_subfolder: str = DEFAULT_SUBFOLDER_NAME

    def validate(self) -> "BorderConfig":
        """Проверяет диапазоны значений и возвращает себя.

        Raises:
            ConfigError: если размер неположителен, доля вне [0, 0.5),
                качество вне 1–100 или неизвестен режим вывода.
        """
        if self.target_width <= 0 or self.target_height <= 0:
            raise ConfigError(
                f"Размер холста должен быть положительным: {self.target_width}x{self.target_height}"
            )
        ratios = {
            "landscape_vert_ratio": self.landscape_vert_ratio,
            "landscape_horiz_ratio": self.landscape_horiz_ratio,
            "portrait_vert_ratio": self.portrait_vert_ratio,
            "portrait_horiz_ratio": self.portrait_horiz_ratio,
        }
        for name, value in ratios.items():
            if not 0.0 <= value < 0.5:
                raise ConfigError(f"{name} должен быть в [0, 0.5): {value}")
        if not 1 <= self.encode_quality <= 100:
            raise ConfigError(f"Качество JPEG должно быть 1–100: {self.encode_quality}")
        if self.output_mode not in (OUTPUT_SUBFOLDER, OUTPUT_IN_PLACE):
            raise ConfigError(f"Неизвестный режим вывода: {self.output_mode!r}")
        return self

    def ratios_for(self, is_landscape: bool) -> Tuple[float, float]:
        """Возвращает пару (vert, horiz) для ориентации."""
        if is_landscape:
            return self.landscape_vert_ratio, self.landscape_horiz_ratio
        return self.portrait_vert_ratio, self.portrait_horiz_ratio

    @property
    def separate_folder(self) -> bool:
        return self.output_mode == OUTPUT_SUBFOLDER

    def resolve_output_folder(self, input_folder: Path) -> Path:
        if self.separate_folder:
            return input_folder / self.output_subfolder
        return input_folder
