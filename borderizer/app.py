import customtkinter as ctk

from borderizer.controllers.app_controller import AppController
from borderizer.ui.log_panel import LogPanel
from borderizer.ui.sidebar import Sidebar
from borderizer.ui.bottom_bar import BottomBar


class BorderizerApp(ctk.CTk):
    def __init__(self) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Borderizer")
        self.minsize(900, 600)

        # root layout: left log, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._log = LogPanel(self)
        self._log.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(log=self._log, sidebar=self._sidebar, bottom=self._bottom, window=self)
        self._controller.bind_events()
