import argparse
import logging

from tic_tac_toe.event_bus.event_bus import EventBus
from tic_tac_toe.factories import UI_CHOICES, create_game_engine, create_local_players, create_ui
from tic_tac_toe.game.game_state import GameState, Player

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:  # noqa: D103
    args = _parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    logger.debug("Parsed arguments: %s", args)

    # Build game components
    event_bus = EventBus()
    create_game_engine(event_bus, Player(args.first_player))
    create_local_players(event_bus)
    ui = create_ui(args.ui, event_bus)

    try:
        ui.start()
    finally:
        event_bus.close()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tic-tac-toe", description="Two-player tic-tac-toe.")

    parser.add_argument("--ui", choices=UI_CHOICES, default="terminal")
    parser.add_argument(
        "--first-player",
        choices=[player.value for player in Player],
        default=GameState.DEFAULT_FIRST_PLAYER.value,
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
