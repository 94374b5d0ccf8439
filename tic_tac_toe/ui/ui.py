from abc import ABC, abstractmethod

from tic_tac_toe.event_bus.event_bus import EnableInput, EventBus, InputError, StateUpdated
from tic_tac_toe.game.board_utils import CELL_COUNT
from tic_tac_toe.game.game_state import Decisive, Draw, MoveRejection, Outcome


def describe_rejection(rejection: MoveRejection, position: int) -> str:
    """User-facing explanation of why a move was refused."""
    match rejection:
        case MoveRejection.GAME_ALREADY_OVER:
            return "The game is already over"
        case MoveRejection.INVALID_POSITION:
            return f"{position} is not a valid position, choose a number between 1 and {CELL_COUNT}"
        case MoveRejection.CELL_OCCUPIED:
            return "That cell is already occupied, choose another move"


def describe_outcome(outcome: Outcome) -> str:  # noqa: D103
    match outcome:
        case Decisive(winner=winner):
            return f"{winner} won! Congratulations"
        case Draw():
            return "Game ended in a draw"


class Ui(ABC):
    def __init__(self, event_bus: EventBus) -> None:
        self._event_bus = event_bus
        self._event_bus.subscribe(StateUpdated, self._on_state_updated)
        self._event_bus.subscribe(InputError, self._on_input_error)
        self._event_bus.subscribe(EnableInput, self._enable_input)
        self._started = False

    @abstractmethod
    def start(self) -> None:  # noqa: D102
        pass

    def stop(self) -> None:
        """Detach from the event bus. Further events are ignored."""
        self._event_bus.unsubscribe(StateUpdated, self._on_state_updated)
        self._event_bus.unsubscribe(InputError, self._on_input_error)
        self._event_bus.unsubscribe(EnableInput, self._enable_input)
        self._started = False

    @property
    def started(self) -> bool:  # noqa: D102
        return self._started

    @abstractmethod
    def _enable_input(self, event: EnableInput) -> None:
        pass

    @abstractmethod
    def _on_state_updated(self, event: StateUpdated) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, event: InputError) -> None:
        pass
