from collections.abc import Sequence
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from tic_tac_toe.game.game_state import CellOccupancy, Player

BOARD_SIZE: Final = 3
CELL_COUNT: Final = BOARD_SIZE * BOARD_SIZE

WINNING_TRIPLES: Final[tuple[tuple[int, int, int], ...]] = (
    (0, 1, 2),  # Rows
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),  # Columns
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),  # Diagonals
    (2, 4, 6),
)


def position_to_index(position: int) -> int:
    """Translate a 1-based position typed by a user into a 0-based cell index."""
    return position - 1


def index_to_row_col(index: int) -> tuple[int, int]:  # noqa: D103
    return divmod(index, BOARD_SIZE)


def is_board_full(occupancies: Sequence["CellOccupancy"]) -> bool:  # noqa: D103
    return all(occupancy.player is not None for occupancy in occupancies)


def get_winner(occupancies: Sequence["CellOccupancy"]) -> "Player | None":
    """Return the owner of the first completed triple, if any."""
    for triple in WINNING_TRIPLES:
        first = occupancies[triple[0]].player
        if first is not None and all(occupancies[i].player == first for i in triple[1:]):
            return first
    return None
