from typing import Final

import pygame

from tic_tac_toe.event_bus.event_bus import EnableInput, EventBus, InputError, MoveRequested, StateUpdated, UiReady
from tic_tac_toe.game.board_utils import BOARD_SIZE, index_to_row_col
from tic_tac_toe.game.game_state import CellOccupancy, Player
from tic_tac_toe.ui.ui import Ui, describe_outcome, describe_rejection


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    CELL_SIZE: Final = WINDOW_SIZE // BOARD_SIZE
    LINE_WIDTH: Final = 4
    FPS: Final = 60

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, event_bus: EventBus) -> None:
        super().__init__(event_bus)

        self._cells: tuple[CellOccupancy, ...] = ()
        self._current_player: Player | None = None
        self._input_enabled = False
        self._game_running = False
        self._loop_running = False
        self._end_message = ""
        self._status_message = ""

    def start(self) -> None:  # noqa: D102
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._small_font = pygame.font.SysFont(None, 48)
        self._click_font = pygame.font.SysFont(None, 24)

        self._game_running = True
        self._loop_running = True
        self._started = True
        self._event_bus.publish(UiReady())
        self._main_loop()

    def stop(self) -> None:  # noqa: D102
        self._loop_running = False
        self._disable_input()
        super().stop()

    def _enable_input(self, event: EnableInput) -> None:
        self._current_player = event.player
        self._input_enabled = True

    def _disable_input(self) -> None:
        self._input_enabled = False

    @property
    def _title(self) -> str:
        if self._input_enabled and self._current_player is not None:
            return f"{self.TITLE} - Player {self._current_player}"
        return self.TITLE

    # -----------------------------
    # Main loop
    # -----------------------------

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()

        while self._loop_running:
            clock.tick(self.FPS)
            pygame.display.set_caption(self._title)
            self._handle_events()
            if self._loop_running:
                self._render()

        pygame.quit()

    # -----------------------------
    # Rendering
    # -----------------------------

    def _render(self) -> None:
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_status_message()
        self._draw_end_message()
        pygame.display.flip()

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.WINDOW_SIZE, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.WINDOW_SIZE),
                self.LINE_WIDTH,
            )

    def _draw_marks(self) -> None:
        for index, occupancy in enumerate(self._cells):
            if occupancy.player is None:
                continue

            row, col = index_to_row_col(index)
            color = self.X_COLOR if occupancy.player is Player.X else self.O_COLOR
            text = self._font.render(occupancy.label, True, color)  # noqa: FBT003
            rect = text.get_rect(
                center=(col * self.CELL_SIZE + self.CELL_SIZE // 2, row * self.CELL_SIZE + self.CELL_SIZE // 2),
            )
            self._screen.blit(text, rect)

    def _draw_status_message(self) -> None:
        if not self._status_message or self._end_message:
            return

        text = self._click_font.render(self._status_message, True, self.TEXT_COLOR)  # noqa: FBT003
        self._screen.blit(text, text.get_rect(midbottom=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE - 8)))

    def _draw_end_message(self) -> None:
        if not self._end_message:
            return

        main_text = self._small_font.render(self._end_message, True, self.TEXT_COLOR)  # noqa: FBT003
        click_text = self._click_font.render("Click anywhere to exit", True, self.TEXT_COLOR)  # noqa: FBT003
        main_rect = main_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 - 20))
        click_rect = click_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 + 20))
        self._screen.blit(main_text, main_rect)
        self._screen.blit(click_text, click_rect)

    # -----------------------------
    # Event handling
    # -----------------------------

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
                return

            if event.type == pygame.MOUSEBUTTONDOWN:
                if not self._game_running:
                    self.stop()
                    return
                self._on_click(event.pos)

    def _position_at(self, pos: tuple[int, int]) -> int | None:
        x, y = pos
        col = x // self.CELL_SIZE
        row = y // self.CELL_SIZE

        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return None
        return row * BOARD_SIZE + col + 1

    def _on_click(self, pos: tuple[int, int]) -> None:
        if not self._input_enabled or self._current_player is None:
            return

        position = self._position_at(pos)
        if position is None:
            return

        self._disable_input()
        self._status_message = ""
        self._event_bus.publish(MoveRequested(self._current_player, position))

    def _on_state_updated(self, event: StateUpdated) -> None:
        self._current_player = event.player
        self._cells = event.cells

        if event.outcome is not None:
            self._show_end_message(describe_outcome(event.outcome))

    def _show_end_message(self, msg: str) -> None:
        self._game_running = False
        self._disable_input()
        self._end_message = msg

    def _on_input_error(self, event: InputError) -> None:
        self._status_message = describe_rejection(event.rejection, event.position)
