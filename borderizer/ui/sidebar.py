"""Боковая панель: выбор папки, параметры рамки и вывода, запуск.

Принципы:
- SRP: управляет только UI параметров, не содержит алгоритмов.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional

import customtkinter as ctk

from borderizer.models.config_model import OUTPUT_IN_PLACE, OUTPUT_SUBFOLDER, BorderConfig
from borderizer.models.errors import ConfigError

# (поле BorderConfig, подпись, тип)
_FIELDS = (
    ("target_width", "Ширина, px", int),
    ("target_height", "Высота, px", int),
    ("landscape_vert_ratio", "Альбомные: поле по вертикали", float),
    ("landscape_horiz_ratio", "Альбомные: поле по горизонтали", float),
    ("portrait_vert_ratio", "Портретные: поле по вертикали", float),
    ("portrait_horiz_ratio", "Портретные: поле по горизонтали", float),
    ("encode_quality", "Качество JPEG (1–100)", int),
)


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: папка, параметры, вывод, запуск."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=300, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_choose_folder: Optional[Callable[[], None]] = None
        self.on_run: Optional[Callable[[], None]] = None

        # Folder section
        self._title = ctk.CTkLabel(self, text="Папка", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._folder_btn = ctk.CTkButton(self, text="Выбрать папку…", command=self._emit_choose_folder)
        self._folder_btn.grid(row=1, column=0, padx=8, pady=(0, 4), sticky="ew")

        self._folder_val = ctk.StringVar(value="—")
        self._folder_label = ctk.CTkLabel(self, textvariable=self._folder_val, wraplength=270, anchor="w", justify="left")
        self._folder_label.grid(row=2, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Params section
        self._params_title = ctk.CTkLabel(self, text="Параметры", font=ctk.CTkFont(size=16, weight="bold"))
        self._params_title.grid(row=3, column=0, padx=8, pady=(8, 4), sticky="w")

        defaults = BorderConfig()
        self._entries: Dict[str, ctk.CTkEntry] = {}
        row = 4
        for name, label, _kind in _FIELDS:
            ctk.CTkLabel(self, text=label, anchor="w").grid(row=row, column=0, padx=8, pady=(2, 0), sticky="w")
            entry = ctk.CTkEntry(self)
            entry.insert(0, str(getattr(defaults, name)))
            entry.grid(row=row + 1, column=0, padx=8, pady=(0, 2), sticky="ew")
            self._entries[name] = entry
            row += 2

        # Output section
        self._out_title = ctk.CTkLabel(self, text="Вывод", font=ctk.CTkFont(size=16, weight="bold"))
        self._out_title.grid(row=row, column=0, padx=8, pady=(10, 4), sticky="w")

        ctk.CTkLabel(self, text="Префикс имени", anchor="w").grid(row=row + 1, column=0, padx=8, pady=(2, 0), sticky="w")
        self._prefix_entry = ctk.CTkEntry(self)
        self._prefix_entry.insert(0, defaults.output_prefix)
        self._prefix_entry.grid(row=row + 2, column=0, padx=8, pady=(0, 4), sticky="ew")

        self._separate_var = ctk.BooleanVar(value=defaults.separate_folder)
        self._separate_switch = ctk.CTkSwitch(
            self, text=f"Отдельная папка «{defaults.output_subfolder}»", variable=self._separate_var
        )
        self._separate_switch.grid(row=row + 3, column=0, padx=8, pady=(4, 8), sticky="w")

        # filler
        self.grid_rowconfigure(99, weight=1)

        self._run_btn = ctk.CTkButton(self, text="Добавить рамки", command=self._emit_run)
        self._run_btn.grid(row=100, column=0, padx=8, pady=(8, 8), sticky="ew")

    # public API
    def set_folder(self, folder: Optional[str]) -> None:
        self._folder_val.set(folder or "—")

    def set_running(self, running: bool) -> None:
        state = "disabled" if running else "normal"
        self._run_btn.configure(state=state)
        self._folder_btn.configure(state=state)

    def get_config(self) -> BorderConfig:
        """Собирает `BorderConfig` из полей формы.

        Raises:
            ConfigError: если поле не является числом или значения вне диапазонов.
        """
        values = {}
        for name, label, kind in _FIELDS:
            raw = self._entries[name].get().strip().replace(",", ".")
            try:
                values[name] = kind(raw)
            except ValueError as exc:
                raise ConfigError(f"{label}: некорректное значение {raw!r}") from exc
        return BorderConfig(
            output_prefix=self._prefix_entry.get(),
            output_mode=OUTPUT_SUBFOLDER if self._separate_var.get() else OUTPUT_IN_PLACE,
            **values,
        ).validate()

    # events
    def _emit_choose_folder(self) -> None:
        if self.on_choose_folder:
            self.on_choose_folder()

    def _emit_run(self) -> None:
        if self.on_run:
            self.on_run()
