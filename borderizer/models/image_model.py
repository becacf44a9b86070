"""Декодированный источник перед расчётом геометрии.

Принципы:
- SRP: только структура данных, без логики обработки.
- Пиксели всегда приведены к RGBA, исходный режим сохраняется для диагностики.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class DecodedImage:
    """Источник в памяти.

    Fields:
        path: Откуда прочитан.
        pil_image: Пиксели в режиме RGBA.
        source_mode: Режим PIL в файле ("RGB", "P", "LA", ...).
        has_alpha: Была ли в файле прозрачность (включая палитровую).
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    source_mode: str
    has_alpha: bool
    size_bytes: Optional[int] = None

    @property
    def width(self) -> int:
        return self.pil_image.width

    @property
    def height(self) -> int:
        return self.pil_image.height