"""Tests for the Gomoku board model."""

import numpy as np
import pytest

from src.games.gomoku import (
    BLACK,
    BOARD_SIZE,
    WHITE,
    check_winner,
    count_neighbors,
    create_empty_board,
    is_board_full,
    is_empty_board,
    place,
    replay_moves,
    trial_placement,
)


def _no_five_pattern() -> np.ndarray:
    """Fully occupied board without any run longer than two."""
    board = create_empty_board()
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            board[r, c] = BLACK if (c + 2 * r) % 4 < 2 else WHITE
    return board


def test_create_empty_board():
    board = create_empty_board()
    assert board.shape == (15, 15)
    assert board.dtype == np.int8
    assert np.all(board == 0)
    assert is_empty_board(board)


def test_place_and_contract_violations():
    board = create_empty_board()
    place(board, 7, 7, BLACK)
    assert board[7, 7] == BLACK
    assert not is_empty_board(board)

    with pytest.raises(ValueError):
        place(board, 7, 7, WHITE)
    with pytest.raises(ValueError):
        place(board, 15, 0, WHITE)
    with pytest.raises(ValueError):
        place(board, 0, -1, WHITE)
    with pytest.raises(ValueError):
        place(board, 0, 0, 2)
    assert board[7, 7] == BLACK


@pytest.mark.parametrize(
    "start, direction",
    [
        ((5, 5), (0, 1)),
        ((5, 5), (1, 0)),
        ((5, 5), (1, 1)),
        ((5, 9), (1, -1)),
    ],
)
def test_check_winner_all_axes(start, direction):
    board = create_empty_board()
    cells = [(start[0] + direction[0] * i, start[1] + direction[1] * i) for i in range(5)]
    for r, c in cells:
        board[r, c] = WHITE

    last = cells[2]
    result = check_winner(board, last[0], last[1], WHITE)
    assert result is not None
    assert result.winner == WHITE
    assert result.line[0] == last
    assert sorted(result.line) == sorted(cells)


def test_check_winner_line_order():
    board = create_empty_board()
    for c in range(3, 8):
        board[7, c] = BLACK

    result = check_winner(board, 7, 5, BLACK)
    assert result.line == [(7, 5), (7, 6), (7, 7), (7, 4), (7, 3)]


def test_check_winner_four_is_not_enough():
    board = create_empty_board()
    for c in range(4):
        board[0, c] = BLACK
    assert check_winner(board, 0, 3, BLACK) is None


def test_check_winner_ignores_opponent_stones():
    board = create_empty_board()
    for c in range(4):
        board[3, c] = BLACK
    board[3, 4] = WHITE
    board[3, 5] = BLACK
    assert check_winner(board, 3, 3, BLACK) is None
    assert check_winner(board, 3, 5, BLACK) is None


def test_check_winner_horizontal_checked_first():
    board = create_empty_board()
    for i in range(3, 8):
        board[7, i] = BLACK
        board[i, 7] = BLACK

    result = check_winner(board, 7, 7, BLACK)
    assert result is not None
    assert all(r == 7 for r, _ in result.line)


def test_check_winner_run_of_six():
    board = create_empty_board()
    cells = [(i, i) for i in range(2, 8)]
    for r, c in cells:
        board[r, c] = BLACK

    result = check_winner(board, 4, 4, BLACK)
    assert result is not None
    assert len(result.line) == 6
    assert (4, 4) in result.line
    assert set(result.line) == set(cells)


def test_is_board_full():
    board = _no_five_pattern()
    assert is_board_full(board)

    board[14, 14] = 0
    assert not is_board_full(board)
    assert not is_board_full(create_empty_board())


def test_no_five_pattern_has_no_winner():
    board = _no_five_pattern()
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            assert check_winner(board, r, c, int(board[r, c])) is None


def test_count_neighbors():
    board = create_empty_board()
    assert count_neighbors(board, 7, 7) == 0

    board[6, 6] = BLACK
    board[8, 8] = WHITE
    board[7, 9] = BLACK
    assert count_neighbors(board, 7, 7) == 2
    assert count_neighbors(board, 7, 7, radius=2) == 3

    # the centre stone itself does not count
    board[7, 7] = WHITE
    assert count_neighbors(board, 7, 7) == 2


def test_count_neighbors_clipped_at_corner():
    board = create_empty_board()
    board[0, 1] = BLACK
    board[1, 1] = WHITE
    assert count_neighbors(board, 0, 0) == 2
    assert count_neighbors(board, 14, 14, radius=2) == 0


def test_trial_placement_reverts():
    board = create_empty_board()
    with trial_placement(board, 3, 3, BLACK):
        assert board[3, 3] == BLACK
    assert board[3, 3] == 0

    with pytest.raises(RuntimeError):
        with trial_placement(board, 4, 4, WHITE):
            raise RuntimeError("evaluation failed")
    assert is_empty_board(board)


def test_trial_placement_rejects_occupied_cell():
    board = create_empty_board()
    board[3, 3] = BLACK
    with pytest.raises(ValueError):
        with trial_placement(board, 3, 3, WHITE):
            pass
    assert board[3, 3] == BLACK


def test_replay_moves_matches_direct_placement():
    moves = [(7, 7, BLACK), (7, 8, WHITE), (8, 7, BLACK)]
    replayed = replay_moves(moves)

    direct = create_empty_board()
    direct[7, 7] = BLACK
    direct[7, 8] = WHITE
    direct[8, 7] = BLACK

    assert np.array_equal(replayed, direct)
    assert np.array_equal(replay_moves(moves), replayed)


def test_replay_moves_rejects_occupied_cell():
    with pytest.raises(ValueError):
        replay_moves([(7, 7, BLACK), (7, 7, WHITE)])
