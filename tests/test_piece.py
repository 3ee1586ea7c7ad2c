import pytest

from tetris_piece import CCW, CW, COLORS, PIECE_IDS, Piece, create_shape, rotate_ccw, rotate_cw, rotated


@pytest.mark.parametrize("t", PIECE_IDS)
def test_shapes_are_square_and_single_valued(t):
    s = create_shape(t)
    assert all(len(r) == len(s) for r in s)
    assert {v for r in s for v in r} - {0} == {t}
    assert sum(1 for r in s for v in r if v) == 4
    assert t in COLORS


def test_create_shape_rejects_bad_ids():
    with pytest.raises(AssertionError):
        create_shape(0)
    with pytest.raises(AssertionError):
        create_shape(8)


def test_create_shape_returns_copy():
    s = create_shape(6)
    s[0][0] = 9
    assert create_shape(6)[0][0] == 0


def test_rotate_cw_t():
    assert rotate_cw(create_shape(6)) == [[0, 6, 0], [0, 6, 6], [0, 6, 0]]


def test_rotate_ccw_undoes_cw():
    for t in PIECE_IDS:
        s = create_shape(t)
        assert rotate_ccw(rotate_cw(s)) == s


@pytest.mark.parametrize("t", PIECE_IDS)
@pytest.mark.parametrize("d", [CW, CCW])
def test_four_rotations_cycle(t, d):
    s = create_shape(t)
    r = s
    for _ in range(4):
        r = rotated(r, d)
    assert r == s


def test_rotated_leaves_input_alone():
    s = create_shape(2)
    rotated(s, CW)
    assert s == create_shape(2)


def test_rotated_rejects_bad_direction():
    with pytest.raises(AssertionError):
        rotated(create_shape(1), 2)


def test_spawn_centres_piece():
    assert (Piece.spawn(1).x, Piece.spawn(1).y) == (3, 0)
    assert Piece.spawn(4).x == 4
    assert Piece.spawn(6).x == 4
