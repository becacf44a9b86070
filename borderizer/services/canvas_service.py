from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from borderizer.models.errors import CompositionError
from borderizer.models.geometry_model import GeometryResult

logger = logging.getLogger(__name__)

WHITE_RGBA = (255, 255, 255, 255)


class CanvasService:
    def blank_canvas(self, width: int, height: int) -> np.ndarray:
        """Белый непрозрачный холст формы (height, width, 4), uint8."""
        return np.full((height, width, 4), 255, dtype=np.uint8)

    def compose(
        self,
        resized: Image.Image | None,
        geometry: GeometryResult,
        target_width: int,
        target_height: int,
    ) -> Image.Image:
        """Размещает масштабированный источник на белом холсте по отступам из `geometry`.

        Прозрачные пиксели источника смешиваются с белым фоном, итоговый холст
        полностью непрозрачен. Исходное изображение не мутируется.

        Raises:
            CompositionError: если источник с учётом отступа выходит за холст
                или размер источника не совпадает с расчётным.
        """
        canvas = self.blank_canvas(target_width, target_height)
        if geometry.is_empty or resized is None:
            logger.debug("Empty placement, returning blank %dx%d canvas", target_width, target_height)
            return Image.fromarray(canvas)

        w, h = resized.size
        if (w, h) != (geometry.scaled_width, geometry.scaled_height):
            raise CompositionError(
                f"Размер источника {w}x{h} не совпадает с расчётным "
                f"{geometry.scaled_width}x{geometry.scaled_height}"
            )
        x, y = geometry.offset_x, geometry.offset_y
        if x < 0 or y < 0 or x + w > target_width or y + h > target_height:
            raise CompositionError(
                f"Изображение {w}x{h} со смещением ({x}, {y}) не помещается в холст "
                f"{target_width}x{target_height}"
            )

        src = np.asarray(resized.convert("RGBA"), dtype=np.float32)
        alpha = src[..., 3:4] / 255.0
        region = canvas[y:y + h, x:x + w, :3].astype(np.float32)
        # source-over на белом: out = src * a + bg * (1 - a)
        blended = src[..., :3] * alpha + region * (1.0 - alpha)
        canvas[y:y + h, x:x + w, :3] = np.clip(np.rint(blended), 0, 255).astype(np.uint8)
        canvas[y:y + h, x:x + w, 3] = 255
        return Image.fromarray(canvas)
