"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board with the cursor, winning line or draw highlight
- Game status, whose turn it is and the move counter
- Who plays X and O (human or a computer strategy)

Keys: WASD / arrows move the cursor, Space / Enter place,
Q / Escape / Backspace abandon the match.
"""

import random
import tkinter as tk
from tkinter import ttk
from typing import Dict, Optional

from logic.ai_player import AIPlayer
from logic.bitboard import coordinates, has_bit, to_masks
from logic.config import GameConfig
from logic.game_state import Cell, GameState, Outcome, Symbol
from logic.match_setup import HUMAN, MatchSetup
from logic.strategies import StrategyKind
from logic.turn_engine import GameInput, InputSource, TurnEngine, new_match

KEY_BINDINGS = {
    "w": GameInput.UP, "Up": GameInput.UP,
    "a": GameInput.LEFT, "Left": GameInput.LEFT,
    "s": GameInput.DOWN, "Down": GameInput.DOWN,
    "d": GameInput.RIGHT, "Right": GameInput.RIGHT,
    "space": GameInput.PLACE, "Return": GameInput.PLACE,
    "q": GameInput.QUIT, "Escape": GameInput.QUIT, "BackSpace": GameInput.QUIT,
}

PLAYER_BUTTONS = [
    ("Human", HUMAN, "#4ade80"),
    ("Random", StrategyKind.RANDOM.value, "#fbbf24"),
    ("Heuristic", StrategyKind.HEURISTIC.value, "#f87171"),
]


def symbol_color(symbol: Optional[Symbol]) -> str:
    if symbol == Symbol.X:
        return GameConfig.X_COLOR
    if symbol == Symbol.O:
        return GameConfig.O_COLOR
    return GameConfig.NEUTRAL_COLOR


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        setup: Optional[MatchSetup] = None,
        fast: bool = False,
        seed: Optional[int] = None
    ):
        """Initialize the UI."""
        self.setup = setup or MatchSetup()
        self.fast = fast
        self.rng = random.Random(seed)
        self.is_running = False

        self.engine: Optional[TurnEngine] = None
        self.sources: Dict[Symbol, InputSource] = {}

        # Bumped on every new match so stale timers do nothing
        self.match_id = 0

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=GameConfig.WINDOW_BG)
        self.root.geometry("760x460")
        self.root.minsize(700, 420)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.WINDOW_BG)
        style.configure('TLabel', background=GameConfig.WINDOW_BG, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 10))

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for y in range(3):
            row_cells = []
            for x in range(3):
                cell = tk.Label(
                    board_frame,
                    text="",
                    font=('Segoe UI', 28, 'bold'),
                    width=3,
                    height=1,
                    bg=GameConfig.CELL_BG,
                    fg='white',
                    relief='ridge',
                    borderwidth=3
                )
                cell.grid(row=y, column=x, padx=3, pady=3)
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        ttk.Label(
            left_frame,
            text="WASD / arrows move   Space / Enter place   Q / Esc quit"
        ).pack(pady=10)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=340)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="Press Start", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(right_frame, text="Turn: -")
        self.turn_label.pack()

        self.moves_label = ttk.Label(right_frame, text="Moves: 0")
        self.moves_label.pack()

        # Player selection
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="Players", style='Title.TLabel').pack()

        self.player_buttons: Dict[Symbol, Dict[str, tk.Button]] = {}
        for symbol in Symbol:
            row = ttk.Frame(right_frame)
            row.pack(pady=4)
            tk.Label(
                row, text=symbol.name, width=2,
                font=('Segoe UI', 12, 'bold'),
                bg=GameConfig.WINDOW_BG, fg=symbol_color(symbol)
            ).pack(side=tk.LEFT)

            buttons = {}
            for text, value, color in PLAYER_BUTTONS:
                btn = tk.Button(
                    row,
                    text=text,
                    font=('Segoe UI', 10, 'bold'),
                    width=8,
                    activebackground=color,
                    command=lambda s=symbol, v=value: self._set_player(s, v)
                )
                btn.pack(side=tk.LEFT, padx=3)
                buttons[value] = btn
            self.player_buttons[symbol] = buttons

        self._update_player_buttons()

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=5)

        self.start_btn = tk.Button(
            control_frame,
            text="Start Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._start_game
        )
        self.start_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            right_frame,
            text="Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        self.root.bind("<Key>", self._on_key)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _set_player(self, symbol: Symbol, value: str):
        """Choose who plays a symbol (only between matches)."""
        if self.is_running:
            return

        if symbol == Symbol.X:
            self.setup = MatchSetup(value, self.setup.o_player)
        else:
            self.setup = MatchSetup(self.setup.x_player, value)

        self._update_player_buttons()
        print(f"{symbol.name} played by: {value}")

    def _update_player_buttons(self):
        colors = {value: color for _, value, color in PLAYER_BUTTONS}
        for symbol, buttons in self.player_buttons.items():
            chosen = self.setup.player_for(symbol)
            for value, btn in buttons.items():
                if value == chosen:
                    btn.configure(bg=colors[value], fg='black')
                else:
                    btn.configure(bg='#2d3748', fg='white')

    def _start_game(self):
        """Start a new match with the selected players."""
        if self.is_running:
            return

        self.match_id += 1
        state = new_match(rng=self.rng)
        self.engine = TurnEngine(state)
        self.engine.update_outcome()

        # Computer players never sleep here; Tk timers pace them instead
        self.sources = self.setup.create_sources(state, rng=self.rng)

        self.is_running = True
        self.start_btn.configure(state='disabled')
        print(f"New match: {self.setup.mode}, {state.turn.name} starts")

        self._refresh()
        self._schedule_agent()

    def _on_key(self, event):
        """Keyboard input for human players."""
        game_input = KEY_BINDINGS.get(event.keysym)
        if game_input is None or not self.is_running:
            return

        if game_input == GameInput.QUIT:
            self._apply(game_input)
            return

        # Ignore keys while a computer player has the turn
        if self.engine.game_state.turn in self.sources:
            return

        self._apply(game_input)

    def _apply(self, game_input: GameInput):
        """Run one round of the match with the given input."""
        keep_going = self.engine.apply_input(game_input)
        self.engine.update_outcome()

        if not keep_going:
            self._stop_match("Match abandoned")
            return

        self._refresh()

        if self.engine.game_state.is_game_over:
            self._finish_match()
        else:
            self._schedule_agent()

    def _agent_delay_ms(self, agent: AIPlayer) -> int:
        """How long the computer player waits before its next action."""
        if self.fast:
            return 1

        if agent.is_thinking:
            delay = GameConfig.THINK_DELAY_MIN + self.rng.random() * GameConfig.THINK_DELAY_SPREAD
        elif agent.goal == self.engine.game_state.selection:
            delay = GameConfig.CONFIRM_DELAY
        else:
            delay = GameConfig.STEP_DELAY_MIN + self.rng.random() * GameConfig.STEP_DELAY_SPREAD
        return int(delay * 1000)

    def _schedule_agent(self):
        """If a computer player has the turn, queue its next action."""
        agent = self.sources.get(self.engine.game_state.turn)
        if agent is None:
            return

        match_id = self.match_id
        self.root.after(self._agent_delay_ms(agent), lambda: self._agent_step(match_id))

    def _agent_step(self, match_id: int):
        if not self.is_running or match_id != self.match_id:
            return

        agent = self.sources[self.engine.game_state.turn]
        self._apply(agent.next_input())

    def _refresh(self, state: Optional[GameState] = None, highlight: Optional[int] = None):
        """Redraw the board and the status labels."""
        if state is None:
            state = self.engine.snapshot()
        if highlight is None:
            highlight = self.engine.detector.get_highlight(state)

        highlight_bg = GameConfig.HIGHLIGHT_BG if state.is_game_over else GameConfig.CURSOR_BG

        for y in range(3):
            for x in range(3):
                content = state.cell(x, y)
                symbol = None
                if content == Cell.X:
                    symbol = Symbol.X
                elif content == Cell.O:
                    symbol = Symbol.O

                self.board_cells[y][x].configure(
                    text=symbol.name if symbol else "",
                    fg=symbol_color(symbol),
                    bg=highlight_bg if has_bit(highlight, (x, y)) else GameConfig.CELL_BG
                )

        self._update_game_info(state)

    def _update_game_info(self, state: GameState):
        """Update game status labels."""
        if state.is_game_over:
            if state.winner:
                player = self.setup.player_for(state.winner)
                self.status_label.configure(text=f"{state.winner.name} ({player}) WINS!")
            else:
                self.status_label.configure(text="It's a DRAW!")
            self.turn_label.configure(text="Game Over")
        else:
            player = self.setup.player_for(state.turn)
            self.turn_label.configure(text=f"Turn: {state.turn.name} ({player})")
            self.status_label.configure(text="Game in progress")

        self.moves_label.configure(text=f"Moves: {state.moves}")

    def _finish_match(self):
        """Show the result; a draw first fills the free cells for show."""
        state = self.engine.snapshot()
        self.is_running = False
        self.start_btn.configure(state='normal')
        print(f"Match over: {state.outcome.value} after {state.moves} moves")

        if state.outcome == Outcome.DRAW:
            free_cells = coordinates(to_masks(state.board).free)
            self.rng.shuffle(free_cells)
            self._animate_fill(state, free_cells, state.turn, self.match_id)

    def _animate_fill(self, state: GameState, cells, turn: Symbol, match_id: int):
        """Fill one remaining cell per tick, alternating symbols."""
        if match_id != self.match_id:
            return
        if not cells:
            masks = to_masks(state.board)
            self._refresh(state, masks.x | masks.o)
            return

        x, y = cells[0]
        state.board[y, x] = turn.cell
        self._refresh(state, 1 << (y * 3 + x))
        self.root.after(
            GameConfig.FILL_ANIMATION_MS,
            lambda: self._animate_fill(state, cells[1:], turn.opposite(), match_id)
        )

    def _stop_match(self, message: str):
        self.is_running = False
        self.match_id += 1
        self.start_btn.configure(state='normal')
        self.status_label.configure(text=message)
        print(message)

    def _reset_game(self):
        """Abandon the current match and clear the board."""
        print("Resetting game...")
        self._stop_match("Press Start")
        self.engine = None
        self.sources = {}

        for y in range(3):
            for x in range(3):
                self.board_cells[y][x].configure(text="", bg=GameConfig.CELL_BG)

        self.turn_label.configure(text="Turn: -")
        self.moves_label.configure(text="Moves: 0")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.is_running = False
        self.match_id += 1
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument("--fast", action="store_true", help="No pauses for computer players")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    ui = TicTacToeUI(fast=args.fast, seed=args.seed)
    ui.run()


if __name__ == "__main__":
    main()
