from abc import ABC, abstractmethod

from tic_tac_toe.event_bus.event_bus import EventBus, StartTurn
from tic_tac_toe.game.game_state import Player as PlayerSymbol


class Player(ABC):
    def __init__(self, event_bus: EventBus, symbol: PlayerSymbol) -> None:
        self._symbol = symbol
        self._event_bus = event_bus
        self._event_bus.subscribe(StartTurn, self._on_start_turn)

    @property
    def symbol(self) -> PlayerSymbol:  # noqa: D102
        return self._symbol

    @abstractmethod
    def _on_start_turn(self, event: StartTurn) -> None:
        pass
