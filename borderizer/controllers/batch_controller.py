"""Пакетный контроллер: последовательная обработка задач и сбор статистики.

SOLID:
- SRP: оркестрирует стадии и превращает ошибки стадий в исходы; сами стадии живут в сервисах.
- DIP: сервисы и часы передаются через поля, что позволяет подменять их в тестах.
Clean Code:
- Файлы обрабатываются строго по одному, в порядке списка задач.
- Ошибка одного файла никогда не прерывает пакет.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Type, TypeVar

from PIL import Image

from borderizer.models.batch_model import BatchReport, ImageTask, Outcome, Summary
from borderizer.models.config_model import BorderConfig
from borderizer.models.errors import (
    BorderizerError,
    CompositionError,
    DecodeError,
    EncodeError,
    InvalidConfig,
)
from borderizer.services.canvas_service import CanvasService
from borderizer.services.encoder_service import EncoderService
from borderizer.services.geometry_service import compute_geometry
from borderizer.services.image_service import ImageService

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run_stage(error_cls: Type[BorderizerError], fn: Callable[..., T], *args) -> T:
    """Вызывает стадию; неожиданные ошибки библиотек помечаются видом этой стадии."""
    try:
        return fn(*args)
    except BorderizerError:
        raise
    except (OSError, ValueError, MemoryError) as exc:
        raise error_cls(str(exc)) from exc


@dataclass
class BatchController:
    """Последовательно обрабатывает задачи и накапливает `Summary`.

    Ответственности:
    - Конвейер decode → geometry → resize → compose → encode для каждой задачи.
    - Замер длительности каждой попытки и общего времени запуска.
    - Уведомление подписчика `on_outcome` о каждом исходе (прогресс для CLI/GUI).
    """
    config: BorderConfig
    on_outcome: Optional[Callable[[Outcome], None]] = None
    clock: Callable[[], float] = time.perf_counter

    _image_service: ImageService = field(default_factory=ImageService)
    _canvas_service: CanvasService = field(default_factory=CanvasService)
    _encoder_service: EncoderService = field(default_factory=EncoderService)

    def run(self, tasks: Iterable[ImageTask]) -> BatchReport:
        report = BatchReport(summary=Summary())
        started = self.clock()
        logger.info("Batch started")

        for task in tasks:
            outcome = self.process_one(task)
            report.outcomes.append(outcome)
            report.summary.add(outcome)
            if self.on_outcome:
                self.on_outcome(outcome)

        report.wall_time = self.clock() - started
        logger.info(
            "Batch finished: %d ok, %d failed in %.2fs",
            report.summary.succeeded,
            report.summary.failed,
            report.wall_time,
        )
        return report

    def process_one(self, task: ImageTask) -> Outcome:
        """Обрабатывает одну задачу; любая ошибка стадии превращается в неудачный исход."""
        start = self.clock()
        try:
            self._process(task)
        except BorderizerError as exc:
            duration = self.clock() - start
            logger.warning("Failed %s (%s): %s", task.name, exc.kind, exc)
            return Outcome.failed(task.name, duration, exc.kind, str(exc))
        duration = self.clock() - start
        logger.debug("Processed %s in %.3fs", task.name, duration)
        return Outcome.ok(task.name, duration)

    # ---- Stages ----
    def _process(self, task: ImageTask) -> None:
        cfg = self.config
        source = _run_stage(DecodeError, self._image_service.load_image, task.input_path)
        if source.has_alpha:
            logger.debug("%s has transparency (%s), flattening onto white", task.name, source.source_mode)
        geometry = _run_stage(InvalidConfig, compute_geometry, source.width, source.height, cfg)

        resized: Optional[Image.Image] = None
        if not geometry.is_empty:
            resized = _run_stage(
                CompositionError,
                self._image_service.resize,
                source.pil_image,
                geometry.scaled_width,
                geometry.scaled_height,
            )

        canvas = _run_stage(
            CompositionError,
            self._canvas_service.compose,
            resized,
            geometry,
            cfg.target_width,
            cfg.target_height,
        )
        _run_stage(EncodeError, self._encoder_service.save, canvas, task.output_path, cfg.encode_quality)
