"""
Game configuration for TicTacToe.
Pacing of the computer players, key bindings and colours.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Front ends read these; the logic itself only needs the delays.
    """

    # ==================== AI PACING (seconds) ====================
    # The computer "walks" the cursor like a person would.
    # Thinking delay is random in [MIN, MIN + SPREAD).
    THINK_DELAY_MIN = 0.300
    THINK_DELAY_SPREAD = 0.300

    # Delay between cursor steps
    STEP_DELAY_MIN = 0.100
    STEP_DELAY_SPREAD = 0.050

    # Pause on the target cell before placing
    CONFIRM_DELAY = 0.225

    # ==================== CONSOLE KEYS ====================
    KEY_UP = "w"
    KEY_LEFT = "a"
    KEY_DOWN = "s"
    KEY_RIGHT = "d"
    KEY_PLACE = "e"
    KEY_QUIT = "q"

    # ==================== UI COLOURS ====================
    X_COLOR = "#ff3388"
    O_COLOR = "#40ccff"
    NEUTRAL_COLOR = "#b252da"   # Draw / nobody

    CELL_BG = "#16213e"
    CURSOR_BG = "#2d3a6b"
    HIGHLIGHT_BG = "#3b1d4a"
    WINDOW_BG = "#1a1a2e"

    # Draw fill animation (milliseconds, UI only)
    FILL_ANIMATION_MS = 250

    @classmethod
    def agent_delays(cls) -> dict:
        """Keyword arguments for AIPlayer with the standard pacing."""
        return {
            "think_delay": (cls.THINK_DELAY_MIN, cls.THINK_DELAY_SPREAD),
            "step_delay": (cls.STEP_DELAY_MIN, cls.STEP_DELAY_SPREAD),
            "confirm_delay": cls.CONFIRM_DELAY,
        }
