import logging

from tic_tac_toe.event_bus.event_bus import (
    EventBus,
    InvalidMove,
    MoveRequested,
    StartTurn,
    StateUpdated,
    UiReady,
)
from tic_tac_toe.game.board_utils import position_to_index
from tic_tac_toe.game.game_state import GameState, Player
from tic_tac_toe.util.errors import InvalidMoveError, LogicError

logger = logging.getLogger(__name__)


class GameEngine:
    def __init__(self, event_bus: EventBus, first_player: Player = GameState.DEFAULT_FIRST_PLAYER) -> None:
        self._game = GameState(first_player)
        self._event_bus = event_bus
        self._event_bus.subscribe(UiReady, self._on_ui_ready)
        self._event_bus.subscribe(MoveRequested, self._on_move_requested)

    @property
    def game(self) -> GameState:  # noqa: D102
        return self._game

    def start(self) -> None:  # noqa: D102
        logger.info("Starting game, %s plays first", self._game.active_player)
        self._publish_state_updated()
        self._publish_start_turn()

    def _on_ui_ready(self, _event: UiReady) -> None:
        self.start()

    def _on_move_requested(self, event: MoveRequested) -> None:
        if not self._game.is_over and event.player != self._game.active_player:
            msg = f"Move requested by {event.player} during {self._game.active_player}'s turn"
            raise LogicError(msg)

        try:
            result = self._game.apply_move(position_to_index(event.position))
        except InvalidMoveError as e:
            logger.info("Rejected move by %s at position %s: %s", event.player, event.position, e.rejection.value)
            self._event_bus.publish(InvalidMove(event.player, event.position, e.rejection))
            self._publish_start_turn()  # Invalid move: request move again without switching player
            return

        logger.debug("%s claimed position %s", event.player, event.position)
        self._publish_state_updated()  # State updated after successful move
        if result.game_over:
            logger.info("Game over: %s", result.outcome)
        self._publish_start_turn()  # Start next turn: active player will do its job

    def _publish_state_updated(self) -> None:
        self._event_bus.publish(
            StateUpdated(
                player=self._game.active_player,
                cells=self._game.occupancies,
                rendered=self._game.render(),
                outcome=self._game.outcome,
            ),
        )

    def _publish_start_turn(self) -> None:
        if not self._game.is_over:
            self._event_bus.publish(StartTurn(self._game.active_player))
