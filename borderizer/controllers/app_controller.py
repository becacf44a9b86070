"""Контроллер настольного приложения: оркестрация UI и пакетной обработки.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки изображений).
- DIP: обработку выполняет `BatchController`, тот же, что и в командной строке.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from tkinter import filedialog, TclError
from typing import Optional

import customtkinter as ctk

from borderizer.controllers.batch_controller import BatchController
from borderizer.models.batch_model import Outcome
from borderizer.models.errors import ConfigError, EnumerationError
from borderizer.services.discovery_service import DiscoveryService
from borderizer.ui.bottom_bar import BottomBar
from borderizer.ui.console import format_config, format_outcome, format_summary
from borderizer.ui.log_panel import LogPanel
from borderizer.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с пакетной обработкой.

    Ответственности:
    - Выбор входной папки.
    - Сбор конфигурации из сайдбара и запуск `BatchController`.
    - Отображение прогресса, исходов и сводки.
    """
    log: LogPanel
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk

    _discovery_service: DiscoveryService = field(default_factory=DiscoveryService)
    _input_folder: Optional[str] = None
    _running: bool = False
    _close_requested: bool = False
    _done: int = 0
    _total: int = 0

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Компоненты UI ничего не знают друг о друге, общаются через контроллер.
        """
        self.sidebar.on_choose_folder = self._handle_choose_folder
        self.sidebar.on_run = self._handle_run
        self.window.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ---- Handlers ----
    def _handle_choose_folder(self) -> None:
        try:
            folder = filedialog.askdirectory(title="Выберите папку с изображениями")
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not folder:
            return

        self._input_folder = folder
        self.sidebar.set_folder(folder)
        self.bottom.set_status("Готово к запуску")

    def _handle_run(self) -> None:
        if self._input_folder is None:
            self.bottom.set_status("Сначала выберите папку")
            return

        try:
            config = self.sidebar.get_config()
            tasks = self._discovery_service.build_tasks(self._input_folder, config)
        except (ConfigError, EnumerationError) as exc:
            logger.error("%s", exc)
            self.bottom.set_status(f"Ошибка: {exc}")
            return

        self.log.clear()
        self.log.append_lines(format_config(config))
        self._done, self._total = 0, len(tasks)
        self.bottom.set_progress(0, self._total)
        self._running = True
        self.sidebar.set_running(True)
        self.bottom.set_status(f"Обработка {self._total} файлов… окно занято до завершения")
        self.window.update()
        try:
            report = BatchController(config=config, on_outcome=self._handle_outcome).run(tasks)
        finally:
            self._running = False
            self.sidebar.set_running(False)

        if self._close_requested:
            self.window.destroy()
            return

        self.log.append_lines(format_summary(report))
        self.bottom.set_status(f"Готово: {report.summary.succeeded} успешно, {report.summary.failed} с ошибками")

    def _handle_close(self) -> None:
        # пакет не прерывается: закрытие откладывается до конца обработки
        if self._running:
            self._close_requested = True
            self.bottom.set_status("Окно закроется после завершения обработки")
            return
        self.window.destroy()

    def _handle_outcome(self, outcome: Outcome) -> None:
        self._done += 1
        self.log.append_line(format_outcome(outcome))
        self.bottom.set_progress(self._done, self._total)
        # обработка идёт в mainloop: между файлами даём Tk обработать события окна
        self.window.update()
