"""Поиск входных файлов и построение задач.

Принципы:
- SRP: только работа с файловой системой до начала обработки.
- Ошибки этого слоя фатальны: без списка файлов запуск бессмыслен.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from borderizer.models.batch_model import ImageTask
from borderizer.models.config_model import BorderConfig
from borderizer.models.errors import ConfigError, EnumerationError

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")


def is_candidate(path: Path) -> bool:
    return path.suffix.lower() in IMAGE_EXTENSIONS


class DiscoveryService:
    def list_candidates(self, input_folder: str | Path) -> List[Path]:
        """Возвращает файлы jpg/jpeg/png из папки (без подпапок), отсортированные по имени.

        Raises:
            ConfigError: если папка не существует или это не папка.
            EnumerationError: если содержимое папки не читается.
        """
        folder = Path(input_folder)
        if not folder.exists():
            raise ConfigError(f"Папка не найдена: {folder}")
        if not folder.is_dir():
            raise ConfigError(f"Не является папкой: {folder}")

        try:
            entries = sorted(folder.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise EnumerationError(f"Не удалось прочитать папку {folder}: {exc}") from exc

        candidates = [p for p in entries if p.is_file() and is_candidate(p)]
        logger.debug("Found %d candidate(s) in %s", len(candidates), folder)
        return candidates

    def build_tasks(self, input_folder: str | Path, config: BorderConfig) -> List[ImageTask]:
        """Строит задачи `<выходная папка>/<префикс><имя файла>` и создаёт подпапку при необходимости."""
        folder = Path(input_folder)
        candidates = self.list_candidates(folder)
        output_folder = config.resolve_output_folder(folder)
        if config.separate_folder:
            try:
                output_folder.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ConfigError(f"Не удалось создать папку вывода {output_folder}: {exc}") from exc

        return [
            ImageTask(input_path=path, output_path=output_folder / f"{config.output_prefix}{path.name}")
            for path in candidates
        ]
