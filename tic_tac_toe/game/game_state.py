from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Final, TypeAlias

from tic_tac_toe.game.board_utils import BOARD_SIZE, CELL_COUNT, get_winner, is_board_full
from tic_tac_toe.util.errors import (
    CellOccupiedError,
    GameAlreadyOverError,
    InvalidMoveError,
    InvalidPositionError,
)


class Player(StrEnum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def other(self) -> "Player":  # noqa: D102
        return Player.O if self is Player.X else Player.X


# -----------------------------
# Cell occupancy
# -----------------------------


@dataclass(frozen=True, slots=True)
class Empty:
    @property
    def player(self) -> None:  # noqa: D102
        return None

    @property
    def label(self) -> str:  # noqa: D102
        return " "


@dataclass(frozen=True, slots=True)
class Occupied:
    player: Player

    @property
    def label(self) -> str:  # noqa: D102
        return str(self.player)


CellOccupancy: TypeAlias = Empty | Occupied

EMPTY: Final = Empty()


@dataclass(frozen=True, slots=True)
class Cell:
    position: int
    occupancy: CellOccupancy = EMPTY


# -----------------------------
# Outcome
# -----------------------------


@dataclass(frozen=True, slots=True)
class Draw:
    pass


@dataclass(frozen=True, slots=True)
class Decisive:
    winner: Player


Outcome: TypeAlias = Draw | Decisive


# -----------------------------
# Move results
# -----------------------------


class MoveRejection(Enum):
    GAME_ALREADY_OVER = "Game already over"
    INVALID_POSITION = "Invalid position"
    CELL_OCCUPIED = "Cell occupied"


_REJECTION_ERRORS: Final[dict[MoveRejection, type[InvalidMoveError]]] = {
    MoveRejection.GAME_ALREADY_OVER: GameAlreadyOverError,
    MoveRejection.INVALID_POSITION: InvalidPositionError,
    MoveRejection.CELL_OCCUPIED: CellOccupiedError,
}


@dataclass(frozen=True, slots=True)
class MoveResult:
    index: object
    rejection: MoveRejection | None = None
    outcome: Outcome | None = None

    @property
    def accepted(self) -> bool:  # noqa: D102
        return self.rejection is None

    @property
    def game_over(self) -> bool:  # noqa: D102
        return self.outcome is not None

    def raise_for_rejection(self) -> None:
        """Raise the matching InvalidMoveError if the move was rejected."""
        if self.rejection is not None:
            raise _REJECTION_ERRORS[self.rejection](self.rejection, self.index)


# -----------------------------
# Game state
# -----------------------------


class GameState:
    """A single game of tic-tac-toe.

    The board is only ever changed through attempt_move(), which validates the
    move, claims the cell for the active player, hands the turn over and then
    evaluates whether the game has ended.
    """

    DEFAULT_FIRST_PLAYER: Final = Player.O

    def __init__(self, first_player: Player = DEFAULT_FIRST_PLAYER) -> None:
        self._cells: list[Cell] = [Cell(position) for position in range(CELL_COUNT)]
        self._active_player = first_player
        self._outcome: Outcome | None = None

    @property
    def cells(self) -> tuple[Cell, ...]:  # noqa: D102
        return tuple(self._cells)

    @property
    def occupancies(self) -> tuple[CellOccupancy, ...]:  # noqa: D102
        return tuple(cell.occupancy for cell in self._cells)

    @property
    def active_player(self) -> Player:  # noqa: D102
        return self._active_player

    @property
    def outcome(self) -> Outcome | None:  # noqa: D102
        return self._outcome

    @property
    def is_over(self) -> bool:  # noqa: D102
        return self._outcome is not None

    @property
    def is_won(self) -> bool:  # noqa: D102
        return isinstance(self._outcome, Decisive)

    @property
    def is_drawn(self) -> bool:  # noqa: D102
        return isinstance(self._outcome, Draw)

    @property
    def winner(self) -> Player | None:  # noqa: D102
        match self._outcome:
            case Decisive(winner=winner):
                return winner
            case _:
                return None

    def attempt_move(self, index: int) -> MoveResult:
        """Claim the cell at a 0-based index for the active player.

        Returns a rejected MoveResult, leaving the state untouched, when the game
        is already over, the index is not on the board or the cell is taken.
        """
        if self._outcome is not None:
            return MoveResult(index, rejection=MoveRejection.GAME_ALREADY_OVER, outcome=self._outcome)

        if not self._is_valid_index(index):
            return MoveResult(index, rejection=MoveRejection.INVALID_POSITION)

        if self._cells[index].occupancy != EMPTY:
            return MoveResult(index, rejection=MoveRejection.CELL_OCCUPIED)

        self._cells[index] = Cell(index, Occupied(self._active_player))
        self._active_player = self._active_player.other
        self._outcome = self._evaluate_outcome()
        return MoveResult(index, outcome=self._outcome)

    def apply_move(self, index: int) -> MoveResult:
        """Like attempt_move(), but raise an InvalidMoveError on rejection."""
        result = self.attempt_move(index)
        result.raise_for_rejection()
        return result

    def render(self) -> str:  # noqa: D102
        rows = []
        for start in range(0, CELL_COUNT, BOARD_SIZE):
            rows.append("|".join(cell.occupancy.label for cell in self._cells[start : start + BOARD_SIZE]))
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()

    def _evaluate_outcome(self) -> Outcome | None:
        # A completed triple wins even when the same move filled the board.
        occupancies = self.occupancies
        winner = get_winner(occupancies)
        if winner is not None:
            return Decisive(winner)
        if is_board_full(occupancies):
            return Draw()
        return None

    @staticmethod
    def _is_valid_index(index: object) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < CELL_COUNT
