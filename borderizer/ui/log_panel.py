"""Журнал запуска: построчный вывод исходов и итоговой сводки."""
from __future__ import annotations

from typing import Iterable

import customtkinter as ctk
import tkinter as tk


class LogPanel(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._text = ctk.CTkTextbox(self, wrap="word", state="disabled")
        self._text.grid(row=0, column=0, sticky="nsew")

    def clear(self) -> None:
        self._text.configure(state="normal")
        self._text.delete("1.0", "end")
        self._text.configure(state="disabled")

    def append_line(self, line: str) -> None:
        self.append_lines([line])

    def append_lines(self, lines: Iterable[str]) -> None:
        self._text.configure(state="normal")
        for line in lines:
            self._text.insert("end", line + "\n")
        self._text.configure(state="disabled")
        # autoscroll
        self._text.see("end")
