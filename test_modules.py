"""
Tests for the TicTacToe building blocks: config, teams, board and win checker.

Run with: pytest
"""

import logging

import pytest

from logic.board import Axis, Board
from logic.config import GameConfig
from logic.errors import IllegalMoveError, OccupiedError, OutOfRangeError
from logic.log import configure_logging
from logic.players import TEAMS, Marker, Player, Score, Team, team_order
from logic.win_checker import RoundResult, WinChecker

A = Marker("A", "images/a.jpg")
B = Marker("B", "images/b.jpg")

# A known full board with no line
DRAW_LAYOUT = [
    [A, B, A],
    [A, B, B],
    [B, A, A],
]


def fill(board, layout):
    for row, markers in enumerate(layout):
        for col, marker in enumerate(markers):
            if marker is not None:
                board.place_at(row, col, marker)


# ==================== CONFIG & TEAMS ====================

def test_default_config():
    config = GameConfig()
    assert (config.BOARD_WIDTH, config.BOARD_HEIGHT) == (3, 3)
    assert config.RESET_TURN_EACH_ROUND is False
    assert config.image_path("neil.jpg") == "images/neil.jpg"


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        configure_logging("WARNING")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_team_registry():
    assert TEAMS["NEIL"].name == "Neilts"
    assert TEAMS["NEIL"].marker == Marker("Neilts", "images/neil.jpg")
    assert TEAMS["GUS"].marker.image_path == "images/gus.jpg"
    assert [t.name for t in team_order()] == ["Neilts", "Gusses"]


def test_team_marker_is_immutable():
    team = Team.create("Reds", "images/red.png")
    with pytest.raises(AttributeError):
        team.marker.id = "Blues"


def test_score_only_goes_up():
    score = Score()
    assert score.value == 0
    assert score.increment() == 1
    assert score.increment() == 2


def test_player_reads_through_team():
    player = Player("Ann", TEAMS["GUS"])
    assert player.team_name == "Gusses"
    assert player.marker is TEAMS["GUS"].marker
    assert player.score_value == 0
    player.increment_score()
    assert player.score_value == 1


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert (board.width, board.height) == (3, 3)
    assert all(board.is_empty_at(r, c) for r in range(3) for c in range(3))
    assert not board.is_full()
    assert len(board.get_empty_cells()) == 9


def test_place_and_read():
    board = Board()
    board.place_at(1, 2, A)
    assert board.marker_at(1, 2) == A
    assert not board.is_empty_at(1, 2)
    assert board.get_empty_cells().count((1, 2)) == 0
    # Only the cell we set is filled
    assert len(board.get_empty_cells()) == 8


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_out_of_range_raises(row, col):
    board = Board()
    with pytest.raises(OutOfRangeError):
        board.place_at(row, col, A)
    with pytest.raises(OutOfRangeError):
        board.marker_at(row, col)
    with pytest.raises(OutOfRangeError):
        board.is_empty_at(row, col)


def test_out_of_range_is_index_error():
    with pytest.raises(IndexError):
        Board().marker_at(3, 3)


def test_occupied_cell_is_not_overwritten():
    board = Board()
    board.place_at(0, 0, A)
    with pytest.raises(OccupiedError) as excinfo:
        board.place_at(0, 0, B)
    assert isinstance(excinfo.value, IllegalMoveError)
    assert board.marker_at(0, 0) == A


def test_is_full_matches_empty_cells():
    board = Board()
    for row, col in [(r, c) for r in range(3) for c in range(3)]:
        full = board.is_full()
        has_empty = any(board.is_empty_at(r, c) for r in range(3) for c in range(3))
        assert full == (not has_empty)
        board.place_at(row, col, A)
    assert board.is_full()
    assert not any(board.is_empty_at(r, c) for r in range(3) for c in range(3))


def test_clear_empties_board():
    board = Board()
    fill(board, DRAW_LAYOUT)
    assert board.is_full()
    board.clear()
    assert not board.is_full()
    assert len(board.get_empty_cells()) == 9


def test_clear_single_cell_board():
    board = Board(1, 1)
    board.place_at(0, 0, A)
    assert board.is_full()
    board.clear()
    assert not board.is_full()


def test_lines_and_diagonals():
    board = Board()
    fill(board, DRAW_LAYOUT)
    assert board.line(Axis.ROW, 1) == [A, B, B]
    assert board.line(Axis.COLUMN, 0) == [A, A, B]
    assert board.diagonal() == [A, B, A]
    assert board.anti_diagonal() == [A, B, B]


def test_rectangular_board():
    board = Board(width=4, height=2)
    assert not board.is_square
    board.place_at(1, 3, A)
    with pytest.raises(OutOfRangeError):
        board.place_at(3, 1, A)


def test_copy_is_independent():
    board = Board()
    board.place_at(0, 0, A)
    clone = board.copy()
    clone.place_at(1, 1, B)
    assert board.is_empty_at(1, 1)
    assert clone.marker_at(0, 0) == A


def test_to_text_shows_initials():
    board = Board()
    board.place_at(0, 0, A)
    board.place_at(2, 1, B)
    text = board.to_text()
    assert "0 | A |   |   |" in text
    assert "2 |   | B |   |" in text


# ==================== WIN CHECKER ====================

def place_sequence(board, cells, marker):
    for row, col in cells:
        board.place_at(row, col, marker)


def test_row_win_on_third_placement():
    board = Board()
    checker = WinChecker()
    board.place_at(0, 0, A)
    assert checker.evaluate(board, 0, 0, A, 0) == RoundResult.IN_PROGRESS
    board.place_at(0, 1, A)
    assert checker.evaluate(board, 0, 1, A, 0) == RoundResult.IN_PROGRESS
    board.place_at(0, 2, A)
    assert checker.evaluate(board, 0, 2, A, 0) == RoundResult.WIN_A
    assert checker.winning_line(board, 0, 2, A) == [(0, 0), (0, 1), (0, 2)]


def test_column_win():
    board = Board()
    place_sequence(board, [(0, 1), (1, 1), (2, 1)], B)
    checker = WinChecker()
    assert checker.check_line(board, Axis.COLUMN, 1, B)
    assert checker.evaluate(board, 2, 1, B, 1) == RoundResult.WIN_B


def test_diagonal_win():
    board = Board()
    place_sequence(board, [(0, 0), (1, 1), (2, 2)], A)
    assert WinChecker().evaluate(board, 2, 2, A, 0) == RoundResult.WIN_A


def test_anti_diagonal_win():
    board = Board()
    place_sequence(board, [(0, 2), (1, 1), (2, 0)], A)
    checker = WinChecker()
    assert checker.evaluate(board, 2, 0, A, 1) == RoundResult.WIN_B
    assert checker.winning_line(board, 2, 0, A) == [(0, 2), (1, 1), (2, 0)]


def test_win_goes_to_active_player_index():
    board = Board()
    place_sequence(board, [(2, 0), (2, 1), (2, 2)], B)
    checker = WinChecker()
    assert checker.evaluate(board, 2, 2, B, 0) == RoundResult.WIN_A
    assert checker.evaluate(board, 2, 2, B, 1) == RoundResult.WIN_B


def test_mixed_line_is_not_a_win():
    board = Board()
    place_sequence(board, [(0, 0), (0, 1)], A)
    board.place_at(0, 2, B)
    assert WinChecker().evaluate(board, 0, 2, B, 1) == RoundResult.IN_PROGRESS


def test_draw():
    board = Board()
    fill(board, DRAW_LAYOUT)
    assert WinChecker().evaluate(board, 2, 2, A, 0) == RoundResult.DRAW


def test_win_beats_draw_on_full_board():
    board = Board()
    fill(board, [
        [A, B, A],
        [B, A, B],
        [B, A, A],
    ])
    assert board.is_full()
    assert WinChecker().evaluate(board, 2, 2, A, 0) == RoundResult.WIN_A


def test_no_diagonal_on_rectangular_board():
    board = Board(width=3, height=2)
    board.place_at(0, 0, A)
    board.place_at(1, 1, A)
    assert WinChecker().evaluate(board, 1, 1, A, 0) == RoundResult.IN_PROGRESS


def test_round_result_helpers():
    assert RoundResult.WIN_A.winner_index == 0
    assert RoundResult.WIN_B.winner_index == 1
    assert RoundResult.DRAW.winner_index is None
    assert RoundResult.DRAW.is_terminal
    assert not RoundResult.IN_PROGRESS.is_terminal
    assert RoundResult.win_for(1) == RoundResult.WIN_B
