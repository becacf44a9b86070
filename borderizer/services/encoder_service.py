"""Сериализация холста в файл: PNG без потерь, остальное как JPEG."""
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from borderizer.models.errors import EncodeError

logger = logging.getLogger(__name__)

FORMAT_PNG = "PNG"
FORMAT_JPEG = "JPEG"


def format_for(output_path: str | Path) -> str:
    """Кодек выбирается по расширению выходного пути (без учёта регистра)."""
    if Path(output_path).suffix.lower() == ".png":
        return FORMAT_PNG
    return FORMAT_JPEG


class EncoderService:
    def save(self, canvas: Image.Image, output_path: str | Path, quality: int) -> Path:
        """Кодирует холст и записывает его в `output_path`.

        Для JPEG альфа-канал отбрасывается: холст после компоновки уже непрозрачен,
        поэтому это эквивалентно сведению на белый. `quality` для PNG игнорируется.

        Raises:
            EncodeError: при ошибке кодека или записи файла.
        """
        path = Path(output_path)
        fmt = format_for(path)
        try:
            if fmt == FORMAT_PNG:
                canvas.save(path, format=FORMAT_PNG)
            else:
                rgb = canvas if canvas.mode == "RGB" else self._flatten(canvas)
                rgb.save(path, format=FORMAT_JPEG, quality=quality)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeError(f"Не удалось записать {path}: {exc}") from exc
        logger.debug("Encoded %s as %s", path.name, fmt)
        return path

    def _flatten(self, image: Image.Image) -> Image.Image:
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
