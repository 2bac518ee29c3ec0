"""Tests for the immutable Gomoku rules object."""

import numpy as np
import pytest

from src.games.gomoku import (
    BLACK,
    BOARD_SIZE,
    WHITE,
    GomokuGame,
    GomokuState,
    Move,
    create_empty_board,
    place,
    replay_moves,
)


def test_initial_state():
    game = GomokuGame()
    state = game.initial_state()
    assert state.board.shape == (BOARD_SIZE, BOARD_SIZE)
    assert np.all(state.board == 0)
    assert game.current_player(state) == BLACK
    assert not game.is_terminal(state)
    assert game.winner(state) is None
    assert len(game.legal_actions(state)) == BOARD_SIZE * BOARD_SIZE
    assert game.legal_actions(state)[0] == Move(0, 0)


def test_apply_action_alternates_and_copies():
    game = GomokuGame()
    state = game.initial_state()

    next_state = game.apply_action(state, Move(7, 7))
    assert state.board[7, 7] == 0
    assert next_state.board[7, 7] == BLACK
    assert next_state.last_move == Move(7, 7)
    assert game.current_player(next_state) == WHITE

    third = game.apply_action(next_state, Move(7, 8))
    assert third.board[7, 8] == WHITE
    assert game.current_player(third) == BLACK
    assert Move(7, 7) not in game.legal_actions(third)


def test_apply_action_rejects_illegal_moves():
    game = GomokuGame()
    state = game.apply_action(game.initial_state(), Move(7, 7))

    with pytest.raises(ValueError):
        game.apply_action(state, Move(7, 7))
    with pytest.raises(ValueError):
        game.apply_action(state, Move(15, 3))
    with pytest.raises(ValueError):
        game.apply_action(state, Move(-1, 3))


def test_win_ends_the_game():
    game = GomokuGame()
    moves = [
        Move(7, 0), Move(0, 0),
        Move(7, 1), Move(0, 1),
        Move(7, 2), Move(0, 2),
        Move(7, 3), Move(0, 3),
        Move(7, 4),
    ]
    state = game.replay(moves)

    assert game.is_terminal(state)
    assert game.winner(state) == BLACK
    assert sorted(state.win_line) == [(7, c) for c in range(5)]
    assert game.legal_actions(state) == []
    with pytest.raises(ValueError):
        game.apply_action(state, Move(14, 14))


def test_draw_on_full_board():
    game = GomokuGame()
    board = create_empty_board()
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            board[r, c] = BLACK if (c + 2 * r) % 4 < 2 else WHITE
    board[14, 14] = 0

    state = GomokuState(board=board, current_player_index=1, winner=None, done=False)
    final = game.apply_action(state, Move(14, 14))

    assert final.done
    assert final.winner == 0
    assert final.win_line == []


def test_replay_matches_direct_placement():
    game = GomokuGame()
    state = game.replay([Move(7, 7), Move(7, 8), Move(8, 7)])

    direct = create_empty_board()
    place(direct, 7, 7, BLACK)
    place(direct, 7, 8, WHITE)
    place(direct, 8, 7, BLACK)

    assert np.array_equal(state.board, direct)
    assert np.array_equal(state.board, replay_moves([(7, 7, BLACK), (7, 8, WHITE), (8, 7, BLACK)]))
    assert game.current_player(state) == WHITE
