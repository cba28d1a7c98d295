"""
Scoreboard TicTacToe UI
A graphical interface for the game using Tkinter.

Shows:
- The 3x3 board with each team's marker image
- Both players' names and scores
- Whose turn it is and the round result
- Start round / Reset / Quit buttons
"""

import logging
import tkinter as tk
from tkinter import simpledialog, ttk
from typing import Dict, Optional, Tuple

from PIL import Image, ImageTk, UnidentifiedImageError

from logic.config import GameConfig
from logic.controller import BoardView, GameController
from logic.game import Game
from logic.game_state import GameState
from logic.win_checker import RoundResult

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class. Only draws and forwards clicks; all rules live in
    GameController / Game.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """Initialize the UI."""
        self.config = config or GameConfig()

        # Cache of loaded marker images (None when the file can't be loaded)
        self._images: Dict[str, Optional[ImageTk.PhotoImage]] = {}

        self._create_ui()

        self.controller = GameController(
            Game(self.config),
            name_provider=self._ask_names,
            on_change=self._render
        )
        self._render(self.controller.render_state())

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=self.config.BACKGROUND)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.BACKGROUND)
        style.configure('TLabel', background=self.config.BACKGROUND, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground=self.config.HIGHLIGHT)

        # Scoreboard
        ttk.Label(main_frame, text="🏆 Scores", style='Title.TLabel').pack(pady=(0, 5))
        score_frame = ttk.Frame(main_frame)
        score_frame.pack(pady=5)
        self.player_labels = []
        for slot in range(2):
            label = ttk.Label(score_frame, text="-")
            label.grid(row=0, column=slot, padx=15)
            self.player_labels.append(label)

        # Board grid
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        size = self.config.CELL_SIZE_PX
        # Blank 1x1 image so label width/height are measured in pixels
        self._blank = tk.PhotoImage(width=1, height=1)
        self.board_cells = []
        for row in range(self.config.BOARD_HEIGHT):
            row_cells = []
            for col in range(self.config.BOARD_WIDTH):
                cell = tk.Label(
                    self.board_frame,
                    image=self._blank,
                    text="",
                    compound='center',
                    width=size,
                    height=size,
                    font=('Segoe UI', 24, 'bold'),
                    bg=self.config.CELL_BACKGROUND,
                    fg='white',
                    relief='ridge',
                    borderwidth=2
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                cell.bind("<Button-1>", lambda _event, r=row, c=col: self.controller.on_cell_clicked(r, c))
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        # Game status
        self.status_label = ttk.Label(main_frame, text="Press Start to play", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        self.start_btn = tk.Button(
            control_frame,
            text="▶ Start Round",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=lambda: self.controller.on_start_round_clicked()
        )
        self.start_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=lambda: self.controller.on_reset_clicked()
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _ask_names(self) -> Tuple[str, str]:
        """Prompt for both player names. Cancelled prompts give ""."""
        names = []
        for slot, team_key in enumerate(self.config.TEAM_ORDER):
            team_name = self.config.TEAM_DEFINITIONS[team_key][0]
            name = simpledialog.askstring(
                "Player name",
                f"Name for player {slot + 1} ({team_name}):",
                parent=self.root
            )
            names.append(name or "")
        return names[0], names[1]

    def _load_image(self, path: str) -> Optional[ImageTk.PhotoImage]:
        """Load and scale a marker image, falling back to text if it's missing."""
        if path not in self._images:
            size = self.config.CELL_SIZE_PX
            try:
                with Image.open(path) as image:
                    self._images[path] = ImageTk.PhotoImage(image.convert("RGB").resize((size, size)))
            except (OSError, UnidentifiedImageError) as exc:
                logger.warning("Could not load marker image %s: %s", path, exc)
                self._images[path] = None
        return self._images[path]

    def _render(self, view: BoardView):
        """Redraw everything from a controller snapshot."""
        # Board
        highlight = set(view.winning_line or [])
        for row, row_cells in enumerate(self.board_cells):
            for col, cell in enumerate(row_cells):
                image_path = view.cells[row][col]
                bg = self.config.HIGHLIGHT if (row, col) in highlight else self.config.CELL_BACKGROUND
                if image_path is None:
                    cell.configure(image=self._blank, text="", bg=bg)
                    continue
                photo = self._load_image(image_path)
                if photo is not None:
                    cell.configure(image=photo, text="", bg=bg)
                else:
                    # No image, show the team's initial instead
                    label = self._team_initial(view, image_path)
                    cell.configure(image=self._blank, text=label, bg=bg)

        # Scores
        for slot, label in enumerate(self.player_labels):
            player = view.players[slot]
            if player is None:
                label.configure(text=f"Player {slot + 1}: -")
                continue
            marker = "▶ " if view.state == GameState.IN_PROGRESS and view.active_player_index == slot else ""
            name = player.name or f"Player {slot + 1}"
            label.configure(text=f"{marker}{name} ({player.team_name}): {player.score}")

        self.status_label.configure(text=self._status_text(view))
        self.start_btn.configure(state='disabled' if view.state == GameState.IN_PROGRESS else 'normal')

    @staticmethod
    def _team_initial(view: BoardView, image_path: str) -> str:
        for player in view.players:
            if player is not None and player.image_path == image_path:
                return player.team_name[:1].upper()
        return "?"

    @staticmethod
    def _status_text(view: BoardView) -> str:
        if view.state == GameState.NEW:
            return "Press Start to play"

        if view.state == GameState.IN_PROGRESS:
            player = view.players[view.active_player_index]
            name = player.name if player and player.name else f"Player {view.active_player_index + 1}"
            return f"{name}'s turn"

        if view.result == RoundResult.DRAW:
            return "🤝 It's a DRAW! Start another round."

        winner = view.players[view.result.winner_index]
        name = winner.name if winner and winner.name else f"Player {view.result.winner_index + 1}"
        return f"🏆 {name} WINS! Start another round."

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
