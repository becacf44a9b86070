"""Загрузка изображений с диска и масштабирование.

Принципы:
- SRP: класс отвечает только за декодирование, базовые свойства и ресайз.
- LSP/ISP: возвращает `DecodedImage` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from borderizer.models.errors import CompositionError, DecodeError
from borderizer.models.image_model import DecodedImage

logger = logging.getLogger(__name__)


class ImageService:
    def __init__(self, resample: Image.Resampling = Image.Resampling.LANCZOS) -> None:
        self._resample = resample

    def load_image(self, file_path: str | Path) -> DecodedImage:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `DecodedImage` c пикселями RGBA, исходным режимом, признаком прозрачности и размером файла.

        Raises:
            DecodeError: если файл не существует, не читается или не распознан как изображение.
        """
        path = Path(file_path)
        if not path.is_file():
            raise DecodeError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as opened:
                source_mode = opened.mode
                has_alpha = "A" in opened.getbands() or "transparency" in opened.info
                # convert() форсирует полное декодирование: обрезанный файл падает здесь
                pil_image = opened.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise DecodeError(f"Файл не является изображением: {path}") from exc
        except Image.DecompressionBombError as exc:
            raise DecodeError(f"Слишком большое изображение {path}: {exc}") from exc
        except (OSError, ValueError) as exc:
            raise DecodeError(f"Не удалось декодировать {path}: {exc}") from exc

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.debug(
            "Decoded %s: %dx%d (%s), %s bytes",
            path.name,
            pil_image.width,
            pil_image.height,
            source_mode,
            size_bytes if size_bytes is not None else "?",
        )
        return DecodedImage(
            path=path,
            pil_image=pil_image,
            source_mode=source_mode,
            has_alpha=has_alpha,
            size_bytes=size_bytes,
        )

    def resize(self, image: Image.Image, width: int, height: int) -> Image.Image:
        """Возвращает новое изображение размера width x height; исходное не меняется."""
        if width <= 0 or height <= 0:
            raise CompositionError(f"Недопустимый размер ресайза: {width}x{height}")
        if image.size == (width, height):
            return image.copy()
        try:
            return image.resize((width, height), self._resample)
        except (OSError, ValueError, MemoryError) as exc:
            raise CompositionError(f"Ошибка ресайза до {width}x{height}: {exc}") from exc
