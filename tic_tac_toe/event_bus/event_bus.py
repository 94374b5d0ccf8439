import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar, cast

from tic_tac_toe.game.game_state import CellOccupancy, MoveRejection, Outcome, Player

logger = logging.getLogger(__name__)


class Event:
    pass


@dataclass(frozen=True)
class UiReady(Event):
    pass


@dataclass(frozen=True)
class StateUpdated(Event):
    player: Player
    cells: tuple[CellOccupancy, ...]
    rendered: str
    outcome: Outcome | None


@dataclass(frozen=True)
class StartTurn(Event):
    player: Player


@dataclass(frozen=True)
class EnableInput(Event):
    player: Player


@dataclass(frozen=True)
class MoveRequested(Event):
    player: Player
    position: int


@dataclass(frozen=True)
class InvalidMove(Event):
    player: Player
    position: int
    rejection: MoveRejection


@dataclass(frozen=True)
class InputError(Event):
    player: Player
    position: int
    rejection: MoveRejection


E = TypeVar("E", bound=Event)


class EventBus:
    def __init__(self) -> None:
        self._handlers: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:  # noqa: D102
        self._handlers.setdefault(event_type, []).append(cast("Callable[[Event], None]", handler))

    def unsubscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:  # noqa: D102
        handlers = self._handlers.get(event_type)
        if not handlers:
            return
        try:
            handlers.remove(cast("Callable[[Event], None]", handler))
        except ValueError:
            return
        if not handlers:
            self._handlers.pop(event_type, None)

    def publish(self, event: Event) -> None:
        """Publish event synchronously (immediate delivery, blocking)."""
        handlers = self._handlers.get(type(event), []).copy()
        logger.debug("Publishing %s to %d handler(s)", type(event).__name__, len(handlers))
        for handler in handlers:
            handler(event)

    def close(self) -> None:  # noqa: D102
        self._handlers.clear()
