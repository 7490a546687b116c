"""Tkinter GUI host for the life-game session."""

import time
import tkinter as tk
from typing import Dict, Optional, Tuple

from ..core.controller import Clear, Command, Randomize, StepOnce, ToggleRunning
from ..core.session import Session, SessionConfig
from ..core.snapshot import BoardSnapshot
from .keymap import build_keymap, command_for_key


class TkinterLifeGameGUI:
    """Tkinter-based GUI for the toroidal Game of Life."""

    def __init__(self, master: tk.Tk, config: Optional[SessionConfig] = None, cell_size: int = 10) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
            config: Session configuration (defaults to an 80x40 board)
            cell_size: Cell edge length in pixels
        """
        self.master = master
        self.master.title("Game of Life")
        self.master.configure(bg="#000000")

        self.session = Session(config)
        self.keymap = build_keymap(self.session.config.randomize_probability)

        # Display parameters
        self.cell_size = cell_size
        self.cols = self.session.board.width
        self.rows = self.session.board.height
        self.frame_delay_ms = 16

        # Canvas objects cache, keyed by cell
        self.cell_objects: Dict[Tuple[int, int], int] = {}
        self.last_tick: Optional[float] = None

        self.setup_ui()
        self.redraw(self.session.snapshot())
        self.master.bind("<KeyPress>", self.on_key)
        self.update_loop()

    def setup_ui(self) -> None:
        """Set up the user interface."""
        control_frame = tk.Frame(self.master, bg="#000000")
        control_frame.pack(pady=5)

        self.start_btn = tk.Button(
            control_frame,
            text="Pause",
            command=lambda: self.apply_command(ToggleRunning()),
            bg="#4CAF50",
            fg="white",
            width=8,
        )
        self.start_btn.pack(side=tk.LEFT, padx=2)

        buttons = [
            ("Step", StepOnce(), "#2196F3"),
            ("Randomize", Randomize(self.session.config.randomize_probability), "#FF9800"),
            ("Clear", Clear(), "#F44336"),
        ]
        for text, command, color in buttons:
            tk.Button(
                control_frame,
                text=text,
                command=lambda c=command: self.apply_command(c),
                bg=color,
                fg="white",
                width=8,
            ).pack(side=tk.LEFT, padx=2)

        self.canvas = tk.Canvas(
            self.master,
            width=max(1, self.cols * self.cell_size),
            height=max(1, self.rows * self.cell_size),
            bg="#000000",
            highlightthickness=0,
        )
        self.canvas.pack(padx=5, pady=5)

        self.status_label = tk.Label(self.master, text="", bg="#000000", fg="#FFFFFF", anchor="w")
        self.status_label.pack(fill=tk.X, padx=5)

    def on_key(self, event: tk.Event) -> None:
        """Dispatch a key press to the bound command, if any."""
        command = command_for_key(event.keysym, self.keymap)
        if command is not None:
            self.apply_command(command)

    def apply_command(self, command: Command) -> None:
        """Run a command and refresh the display immediately."""
        self.session.command(command)
        self.start_btn.config(text="Pause" if self.session.board.running else "Start")
        self.redraw(self.session.snapshot())

    def redraw(self, snapshot: BoardSnapshot) -> None:
        """Redraw all cells on the canvas."""
        self.canvas.delete("all")
        self.cell_objects.clear()

        for x, y in snapshot.alive_cells():
            x1 = x * self.cell_size
            y1 = y * self.cell_size
            self.cell_objects[(x, y)] = self.canvas.create_rectangle(
                x1, y1, x1 + self.cell_size, y1 + self.cell_size, fill="#1E90FF", outline=""
            )

        self.update_status(snapshot)

    def update_status(self, snapshot: BoardSnapshot) -> None:
        state = "Running" if snapshot.running else "Paused"
        self.status_label.config(
            text=f"Generation: {snapshot.generation}   Population: {snapshot.population}   {state}"
        )

    def update_loop(self) -> None:
        """Main update loop."""
        now = time.perf_counter()
        elapsed = 0.0 if self.last_tick is None else now - self.last_tick
        self.last_tick = now

        self.session.update(elapsed)
        snapshot = self.session.draw_due(elapsed)
        if snapshot is not None:
            self.redraw(snapshot)

        self.master.after(self.frame_delay_ms, self.update_loop)


def main() -> None:
    """Main entry point for the Tkinter GUI."""
    root = tk.Tk()
    root.resizable(False, False)
    TkinterLifeGameGUI(root)
    root.mainloop()


if __name__ == "__main__":
    main()
