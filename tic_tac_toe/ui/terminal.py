# ruff: noqa: T201

from tic_tac_toe.event_bus.event_bus import EnableInput, EventBus, InputError, MoveRequested, StateUpdated, UiReady
from tic_tac_toe.game.board_utils import CELL_COUNT
from tic_tac_toe.game.game_state import Player
from tic_tac_toe.ui.ui import Ui, describe_outcome, describe_rejection


class TerminalUi(Ui):
    def __init__(self, event_bus: EventBus) -> None:
        super().__init__(event_bus)

        self._current_player: Player | None = None
        self._game_running = False
        self._input_enabled = False

    def start(self) -> None:  # noqa: D102
        print("Welcome to Tic Tac Toe", flush=True)
        self._game_running = True
        self._started = True
        self._event_bus.publish(UiReady())
        self._input_loop()

    def stop(self) -> None:  # noqa: D102
        self._game_running = False
        self._disable_input()
        super().stop()

    def _input_loop(self) -> None:
        while self._game_running:
            self._get_input()

    def _enable_input(self, event: EnableInput) -> None:
        self._current_player = event.player
        self._input_enabled = True
        self._ask_for_move()

    def _disable_input(self) -> None:
        self._input_enabled = False

    def _get_input(self) -> None:
        try:
            input_str = input().strip()
        except (KeyboardInterrupt, EOFError):
            print(flush=True)
            self.stop()
            return

        if input_str == "exit":
            self.stop()
            return

        if not self._input_enabled or self._current_player is None:
            return

        try:
            board_position = int(input_str)
        except ValueError:
            print("That's not a valid number, please try again")
            self._ask_for_move()
            return

        self._disable_input()
        self._event_bus.publish(MoveRequested(self._current_player, board_position))

    # -----------------------------
    # Rendering
    # -----------------------------

    def _ask_for_move(self) -> None:
        print(f"It is {self._current_player}'s turn to play")
        print(f"{self._current_player}, input number 1 - {CELL_COUNT} to make your move: ", end="", flush=True)

    # -----------------------------
    # Event handling
    # -----------------------------

    def _on_state_updated(self, event: StateUpdated) -> None:
        self._current_player = event.player

        print(f"\nCurrent game:\n{event.rendered}\n", flush=True)

        if event.outcome is not None:
            self._show_end_message(describe_outcome(event.outcome))

    def _show_end_message(self, msg: str) -> None:
        print(msg, flush=True)
        self.stop()

    def _on_input_error(self, event: InputError) -> None:
        print(describe_rejection(event.rejection, event.position), flush=True)
