import pytest

from tetris_audio import Cue
from tetris_board import collide, new_board
from tetris_controller import PieceController
from tetris_piece import CCW, CW, COLS, ROWS, Piece, create_shape, rotate_cw


class FixedRng:
    def __init__(self, *types):
        self.types = list(types)

    def next_piece(self):
        return self.types.pop(0) if self.types else 6


@pytest.fixture
def ctl(board, audio):
    c = PieceController(board, FixedRng(6, 1, 4), audio)
    assert c.spawn()
    return c


def vertical_i(x, y):
    return Piece(1, rotate_cw(create_shape(1)), x, y)


def test_spawn_promotes_next(ctl):
    assert ctl.current.t == 6
    assert (ctl.current.x, ctl.current.y) == (4, 0)
    assert ctl.next_type == 1
    ctl.spawn()
    assert ctl.current.t == 1
    assert ctl.next_type == 4


def test_spawn_blocked(board, audio):
    board[1][5] = 3
    c = PieceController(board, FixedRng(6), audio)
    assert not c.spawn()
    assert audio.cues == [Cue.GAME_OVER]


def test_move(ctl, audio):
    assert ctl.move(-1)
    assert ctl.current.x == 3
    assert audio.cues == [Cue.MOVE]


def test_move_into_wall_is_rejected(ctl, audio):
    ctl.current.x = 0
    assert not ctl.move(-1)
    assert ctl.current.x == 0
    ctl.current.x = COLS - 3
    assert not ctl.move(1)
    assert audio.cues == []


def test_move_into_block_is_rejected(ctl, board):
    board[1][3] = 2
    assert not ctl.move(-1)
    assert ctl.current.x == 4


def test_move_bad_direction(ctl):
    with pytest.raises(AssertionError):
        ctl.move(2)


def test_rotate_in_open_space(ctl, audio):
    assert ctl.rotate(CW)
    assert ctl.current.shape == [[0, 6, 0], [0, 6, 6], [0, 6, 0]]
    assert ctl.current.x == 4
    assert audio.cues == [Cue.ROTATE]


def test_rotate_four_times_restores_shape(ctl):
    start = [r[:] for r in ctl.current.shape]
    for _ in range(4):
        assert ctl.rotate(CCW)
    assert ctl.current.shape == start


def test_rotate_wall_kick(ctl):
    # vertical I hugging the left wall; flat I needs x >= 0
    ctl.current = vertical_i(-2, 5)
    assert ctl.rotate(CW)
    assert ctl.current.x == 0
    assert ctl.current.shape[2] == [1, 1, 1, 1]


def test_rotate_wall_kick_right_wall(ctl):
    # +1 still hits the wall, -2 is the first free slot
    ctl.current = vertical_i(COLS - 3, 5)
    assert ctl.rotate(CW)
    assert ctl.current.x == COLS - 4
    assert ctl.current.shape[2] == [1, 1, 1, 1]


def test_rotate_gives_up_before_testing_last_step(ctl, board):
    # T at x=4: x+1, x-1 and x+2 are blocked; x-2 would fit but the
    # search stops once the next offset outgrows the shape width
    free = {(5, 10), (4, 11), (5, 11), (6, 11), (3, 10), (3, 11), (3, 12)}
    for y in (10, 11, 12):
        for x in range(COLS):
            if (x, y) not in free:
                board[y][x] = 2
    ctl.current = before = Piece(6, create_shape(6), 4, 10)
    assert not collide(board, before)
    assert not collide(board, Piece(6, rotate_cw(before.shape), 2, 10))
    assert not ctl.rotate(CW)
    assert ctl.current is before
    assert ctl.current.x == 4


def test_rotate_reverts_when_no_kick_fits(ctl, board, audio):
    for y in range(5, ROWS):
        for x in range(COLS):
            if x != 4:
                board[y][x] = 2
    ctl.current = before = vertical_i(2, 10)
    shape = [r[:] for r in before.shape]
    assert not ctl.rotate(CW)
    assert ctl.current is before
    assert ctl.current.shape == shape
    assert ctl.current.x == 2
    assert Cue.ROTATE not in audio.cues


def test_soft_drop_moves_down(ctl, board):
    assert not ctl.soft_drop()
    assert ctl.current.y == 1
    assert not any(v for r in board for v in r)


def test_soft_drop_locks_on_floor(ctl, board, audio):
    ctl.current = Piece(4, create_shape(4), 4, ROWS - 2)
    assert ctl.soft_drop()
    assert ctl.current.y == ROWS - 2
    assert board[ROWS - 2][4:6] == [4, 4]
    assert board[ROWS - 1][4:6] == [4, 4]
    assert audio.cues == [Cue.LOCK]


def test_hard_drop_lands_on_lowest_free_row(ctl, board):
    board[15][4] = 1
    assert ctl.ghost_y() == 13
    assert ctl.hard_drop() == 13
    assert board[13][5] == 6
    assert board[14][4:7] == [6, 6, 6]


def test_hard_drop_on_empty_board(ctl, board):
    ctl.current = Piece(4, create_shape(4), 0, 0)
    assert ctl.hard_drop() == ROWS - 2
    assert board[ROWS - 1][0:2] == [4, 4]
