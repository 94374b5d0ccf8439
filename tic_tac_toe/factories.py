"""Factory functions for creating game components.

Provides factories for creating:
- Players (local humans)
- Game engines
- UIs (terminal, pygame)
"""

from typing import Literal, TypeAlias

from tic_tac_toe.event_bus.event_bus import EventBus
from tic_tac_toe.game.game_state import GameState, Player
from tic_tac_toe.game_engine.game_engine import GameEngine
from tic_tac_toe.player.local_player import LocalPlayer
from tic_tac_toe.ui.terminal import TerminalUi
from tic_tac_toe.ui.ui import Ui

UiChoice: TypeAlias = Literal["terminal", "pygame"]

UI_CHOICES: tuple[UiChoice, ...] = ("terminal", "pygame")


def create_local_players(event_bus: EventBus) -> tuple[LocalPlayer, LocalPlayer]:  # noqa: D103
    return LocalPlayer(event_bus, Player.X), LocalPlayer(event_bus, Player.O)


def create_game_engine(
    event_bus: EventBus,
    first_player: Player = GameState.DEFAULT_FIRST_PLAYER,
) -> GameEngine:  # noqa: D103
    return GameEngine(event_bus, first_player)


def create_ui(ui_type: UiChoice, event_bus: EventBus) -> Ui:
    """Build the requested front end. Pygame is only imported when asked for."""
    match ui_type:
        case "terminal":
            return TerminalUi(event_bus)
        case "pygame":
            from tic_tac_toe.ui.pygame import PygameUi  # noqa: PLC0415

            return PygameUi(event_bus)
        case _:
            msg = f"Unknown UI type: {ui_type}. Choose from {', '.join(UI_CHOICES)}."
            raise ValueError(msg)
