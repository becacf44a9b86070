"""Расчёт геометрии рамки: ориентация, масштаб вписывания, центрирующие отступы.

Правила округления фиксированы:
- размеры после масштабирования: встроенный `round()` (половина к чётному);
- отступы: целочисленное деление `//`, при нечётной разнице изображение
  смещено на 1 px вправо/вниз.
"""
from __future__ import annotations

from borderizer.models.config_model import BorderConfig
from borderizer.models.errors import InvalidConfig, InvalidDimensions
from borderizer.models.geometry_model import GeometryResult


def is_landscape(width: int, height: int) -> bool:
    """Альбомная ориентация; квадрат считается портретным."""
    return width > height


def compute_geometry(orig_width: int, orig_height: int, config: BorderConfig) -> GeometryResult:
    """Вписывает источник во внутреннюю область холста с сохранением пропорций.

    Увеличение не ограничивается: маленький источник будет растянут до области.

    Raises:
        InvalidDimensions: если одна из сторон источника равна нулю.
        InvalidConfig: если внутренняя область по какой-либо оси неположительна.
    """
    if orig_width <= 0 or orig_height <= 0:
        raise InvalidDimensions(f"Нулевой размер источника: {orig_width}x{orig_height}")

    landscape = is_landscape(orig_width, orig_height)
    vert_ratio, horiz_ratio = config.ratios_for(landscape)

    available_width = float(config.target_width) * (1.0 - 2.0 * horiz_ratio)
    available_height = float(config.target_height) * (1.0 - 2.0 * vert_ratio)
    if available_width <= 0 or available_height <= 0:
        raise InvalidConfig(
            f"Внутренняя область неположительна: {available_width:.2f}x{available_height:.2f}"
        )

    scale = min(available_width / orig_width, available_height / orig_height)

    scaled_width = round(orig_width * scale)
    scaled_height = round(orig_height * scale)

    offset_x = (config.target_width - scaled_width) // 2
    offset_y = (config.target_height - scaled_height) // 2

    return GeometryResult(
        is_landscape=landscape,
        scale=scale,
        scaled_width=scaled_width,
        scaled_height=scaled_height,
        offset_x=offset_x,
        offset_y=offset_y,
    )
