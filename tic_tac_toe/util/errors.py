from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tic_tac_toe.game.game_state import MoveRejection


class GameError(Exception):
    pass


class LogicError(GameError):
    pass


class InvalidMoveError(GameError):
    def __init__(self, rejection: "MoveRejection", index: object) -> None:
        super().__init__(f"{rejection.value}: {index!r}")
        self.rejection = rejection
        self.index = index


class GameAlreadyOverError(InvalidMoveError):
    pass


class InvalidPositionError(InvalidMoveError):
    pass


class CellOccupiedError(InvalidMoveError):
    pass
