from __future__ import annotations

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=48, **kwargs)

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(1, weight=1)  # progress stretches

        self._progress_label = ctk.CTkLabel(self, text="Прогресс")
        self._progress_label.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        self._progress = ctk.CTkProgressBar(self)
        self._progress.set(0)
        self._progress.grid(row=0, column=1, padx=6, pady=8, sticky="ew")

        self._counter = ctk.StringVar(value="0/0")
        self._counter_label = ctk.CTkLabel(self, textvariable=self._counter, width=64, anchor="w")
        self._counter_label.grid(row=0, column=2, padx=(6, 12), pady=8, sticky="w")

        self._status = ctk.StringVar(value="Выберите папку с изображениями")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status, anchor="w")
        self._status_label.grid(row=0, column=3, padx=(6, 12), pady=8, sticky="w")

    # public API (sync from controller)
    def set_progress(self, done: int, total: int) -> None:
        self._progress.set(done / total if total else 0)
        self._counter.set(f"{done}/{total}")

    def set_status(self, text: str) -> None:
        self._status.set(text)
