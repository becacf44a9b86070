from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeometryResult:
    """Результат расчёта размещения источника на холсте.

    Fields:
        is_landscape: Ориентация, по которой выбраны доли рамки.
        scale: Единый коэффициент масштаба по обеим осям.
        scaled_width: Ширина после масштабирования, px.
        scaled_height: Высота после масштабирования, px.
        offset_x: Отступ слева, px.
        offset_y: Отступ сверху, px.
    """
    is_landscape: bool
    scale: float
    scaled_width: int
    scaled_height: int
    offset_x: int
    offset_y: int

    @property
    def is_empty(self) -> bool:
        return self.scaled_width == 0 or self.scaled_height == 0
