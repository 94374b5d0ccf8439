from tic_tac_toe.event_bus.event_bus import EnableInput, EventBus, InputError, InvalidMove, StartTurn
from tic_tac_toe.game.game_state import Player as PlayerSymbol
from tic_tac_toe.player.player import Player


class LocalPlayer(Player):
    """A human taking turns at the local UI."""

    def __init__(self, event_bus: EventBus, symbol: PlayerSymbol) -> None:
        super().__init__(event_bus, symbol)
        self._event_bus.subscribe(InvalidMove, self._on_invalid_move)

    def _on_start_turn(self, event: StartTurn) -> None:
        if self._symbol != event.player:
            return

        self._event_bus.publish(EnableInput(self._symbol))

    def _on_invalid_move(self, event: InvalidMove) -> None:
        if self._symbol != event.player:
            return

        self._event_bus.publish(InputError(event.player, event.position, event.rejection))
