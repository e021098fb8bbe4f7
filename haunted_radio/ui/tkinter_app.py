"""Tkinter control surface for the haunted radio."""
from __future__ import annotations

import tkinter as tk
from tkinter import simpledialog, ttk
from typing import Callable

from ..domain.riddle import RIDDLE_PROMPT, RIDDLE_TITLE
from .common import APP_TITLE, PALETTE, VOLUME_EASING_EXPONENT
from .desktop_types import DesktopApp
from .radio_controller import RadioController


class HauntedRadioApp(DesktopApp):
    """Flat dark window exposing power, tuning, volume and the ghost button."""

    def __init__(
        self,
        *,
        controller: RadioController,
        logger,
        on_close: Callable[[], None] | None = None,
        ask_string: Callable[..., str | None] | None = None,
    ) -> None:
        self.title = APP_TITLE
        self.controller = controller
        self.logger = logger
        self.on_close = on_close
        self.ask_string = ask_string if ask_string is not None else simpledialog.askstring

        self.root: tk.Tk | None = None
        self.tune_var: tk.DoubleVar | None = None
        self.volume_var: tk.DoubleVar | None = None
        self.status_var: tk.StringVar | None = None
        self.power_btn: ttk.Button | None = None
        self.ghost_btn: ttk.Button | None = None

    def launch(self) -> None:
        self._ensure_root()
        assert self.root is not None
        self.root.mainloop()

    def build_for_test(self) -> tk.Tk:
        """Build root/widgets without entering mainloop (for tests)."""
        self._ensure_root()
        assert self.root is not None
        return self.root

    def _ensure_root(self) -> None:
        if self.root is not None:
            return
        root = tk.Tk()
        root.title(APP_TITLE)
        root.geometry("520x320")
        root.minsize(420, 260)
        root.configure(background=PALETTE["bg"])
        self.root = root
        self._configure_theme()
        self._init_tk_variables()
        self._build_layout()
        root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.logger.debug("Tkinter UI wiring complete")

    def _configure_theme(self) -> None:
        assert self.root is not None
        style = ttk.Style(self.root)
        available = set(style.theme_names())
        for theme_name in ("clam", "alt", "default"):
            if theme_name in available:
                style.theme_use(theme_name)
                break
        style.configure("TFrame", background=PALETTE["bg"])
        style.configure("Panel.TFrame", background=PALETTE["panel_bg"])
        style.configure(
            "TLabel", background=PALETTE["panel_bg"], foreground=PALETTE["text_primary"]
        )
        style.configure(
            "Dial.TLabel",
            background=PALETTE["bg"],
            foreground=PALETTE["accent"],
            font=("Courier", 14, "bold"),
        )
        style.configure(
            "TButton", background=PALETTE["button_bg"], foreground=PALETTE["text_primary"]
        )
        style.map("TButton", background=[("active", PALETTE["button_hover"])])
        style.configure("Horizontal.TScale", background=PALETTE["panel_bg"])

    def _init_tk_variables(self) -> None:
        self.tune_var = tk.DoubleVar(value=0.0)
        self.volume_var = tk.DoubleVar(value=self._initial_volume_position())
        self.status_var = tk.StringVar(value=self.controller.status_text())

    def _build_layout(self) -> None:
        assert self.root is not None
        dial = ttk.Label(self.root, textvariable=self.status_var, style="Dial.TLabel", anchor="center")
        dial.pack(fill="x", padx=16, pady=(18, 12))

        panel = ttk.Frame(self.root, style="Panel.TFrame")
        panel.pack(fill="both", expand=True, padx=16, pady=(0, 16))

        self._add_scale(panel, label="Tuning", variable=self.tune_var, command=self._on_tune)
        self._add_scale(panel, label="Volume", variable=self.volume_var, command=self._on_volume)

        buttons = ttk.Frame(panel, style="Panel.TFrame")
        buttons.pack(fill="x", padx=14, pady=(12, 12))
        self.power_btn = ttk.Button(buttons, text="Power", command=self._on_power)
        self.power_btn.pack(side="left")
        self.ghost_btn = ttk.Button(buttons, text="Channel 666", command=self._on_ghost)
        self.ghost_btn.pack(side="right")
        self._sync_controls()

    @staticmethod
    def _add_scale(parent: ttk.Frame, *, label: str, variable: tk.DoubleVar, command) -> ttk.Scale:
        row = ttk.Frame(parent, style="Panel.TFrame")
        row.pack(fill="x", padx=14, pady=(10, 6))
        ttk.Label(row, text=label, width=10, anchor="w").pack(side="left")
        scale = ttk.Scale(row, from_=0.0, to=1.0, variable=variable, command=command)
        scale.pack(side="left", fill="x", expand=True, padx=(12, 0))
        return scale

    def _initial_volume_position(self) -> float:
        volume = max(0.0, min(1.0, float(self.controller.volume)))
        return volume ** (1.0 / VOLUME_EASING_EXPONENT)

    def _on_power(self) -> None:
        self.controller.toggle_power()
        self._after_playback_change()

    def _on_tune(self, value) -> None:
        self.controller.tune_to_position(value)
        self._after_playback_change()

    def _on_volume(self, value) -> None:
        self.controller.set_volume_from_position(value)

    def _on_ghost(self) -> None:
        if self.controller.tune_ghost():
            self._sync_controls()

    def _after_playback_change(self) -> None:
        if self.controller.riddle_pending:
            self._run_on_ui(self._prompt_riddle)
        self._sync_controls()

    def _prompt_riddle(self) -> None:
        if not self.controller.riddle_pending:
            return
        answer = self.ask_string(RIDDLE_TITLE, RIDDLE_PROMPT, parent=self.root)
        if answer is None:
            self.controller.dismiss_riddle()
        elif self.controller.submit_riddle_answer(answer):
            self.logger.info("Riddle solved from the UI")
        self._sync_controls()

    def _sync_controls(self) -> None:
        if self.status_var is not None:
            self.status_var.set(self.controller.status_text())
        if self.power_btn is not None:
            self.power_btn.configure(text="Power off" if self.controller.power_on else "Power on")
        if self.ghost_btn is not None:
            state = "normal" if self.controller.ghost_unlocked else "disabled"
            self.ghost_btn.configure(state=state)

    def _run_on_ui(self, callback: Callable[[], None]) -> None:
        if self.root is None:
            return
        self.root.after(0, callback)

    def _on_close(self) -> None:
        try:
            self.controller.shutdown()
        except Exception:
            self.logger.exception("Failed to stop audio on close")
        if self.on_close is not None:
            self.on_close()
        if self.root is not None:
            self.root.destroy()
            self.root = None


def create_tkinter_app(
    *,
    controller: RadioController,
    logger,
    on_close: Callable[[], None] | None = None,
) -> DesktopApp:
    """Create the Tkinter desktop app instance."""
    return HauntedRadioApp(controller=controller, logger=logger, on_close=on_close)
