import random

import pytest

from ttt_banter import board as b
from ttt_banter import commentary as cm
from ttt_banter.commentary import Category, CommentContext, classify, candidates, select_comment
from ttt_banter.session import Mode
from conftest import board_from


def ctx(text=None, last=None, mode=Mode.TWO_PLAYER, winner=None, draw=False):
    cells = board_from(text) if text else b.new_board()
    return CommentContext(board=tuple(cells), last_move=last, mode=mode, winner=winner, is_draw=draw)


def test_start_pool_depends_on_mode():
    assert classify(ctx()) is Category.START
    assert candidates(ctx()) == list(cm.START_LINES[Mode.TWO_PLAYER])
    assert candidates(ctx(mode=Mode.VS_OPPONENT)) == list(cm.START_LINES[Mode.VS_OPPONENT])
    assert len(cm.START_LINES[Mode.TWO_PLAYER]) == 2
    assert len(cm.START_LINES[Mode.VS_OPPONENT]) == 2


def test_empty_board_with_last_move_is_not_start():
    assert classify(ctx(last=4)) is Category.FALLBACK


def test_win_pools():
    won = "XXX OO_ ___"
    assert classify(ctx(won, last=2, winner=b.X)) is Category.WIN
    assert candidates(ctx(won, last=2, winner=b.X)) == list(cm.WIN_LINES[b.X])
    o_won = "OOO XX_ X__"
    assert candidates(ctx(o_won, last=2, winner=b.O)) == list(cm.WIN_LINES[b.O])
    vs = candidates(ctx(o_won, last=2, winner=b.O, mode=Mode.VS_OPPONENT))
    assert vs == list(cm.OPPONENT_WIN_LINES)
    assert set(vs).isdisjoint(cm.WIN_LINES[b.O])
    # the human winning against the AI uses the plain X pool
    assert candidates(ctx(won, last=2, winner=b.X, mode=Mode.VS_OPPONENT)) == list(cm.WIN_LINES[b.X])


def test_draw_pool():
    c = ctx("XXO OOX XOX", last=8, draw=True)
    assert classify(c) is Category.DRAW
    assert candidates(c) == list(cm.DRAW_LINES)
    assert len(cm.DRAW_LINES) == 3


def test_move_templates_use_one_based_coords():
    c = ctx("___ __X ___", last=5)
    assert classify(c) is Category.MOVE
    pool = candidates(c)
    assert "X goes to row 2, column 3." in pool
    assert "X plants a flag at (2, 3)." in pool
    assert all("{" not in line for line in pool)


def test_opponent_move_adds_two_lines():
    two = candidates(ctx("X__ _O_ ___", last=4))
    vs = candidates(ctx("X__ _O_ ___", last=4, mode=Mode.VS_OPPONENT))
    assert len(vs) == len(two) + 2
    assert vs[:len(two)] == two
    assert "The AI hums quietly and picks (2, 2)." in vs
    # X moves are not affected by the mode
    assert candidates(ctx("X__ ___ ___", last=0, mode=Mode.VS_OPPONENT)) == \
        candidates(ctx("X__ ___ ___", last=0))


def test_fallback_when_last_move_cell_is_empty():
    c = ctx("X__ ___ ___", last=4)
    assert classify(c) is Category.FALLBACK
    assert candidates(c) == list(cm.FALLBACK_LINES)


def test_winner_beats_draw():
    c = ctx("XXX OOX OXO", last=2, winner=b.X, draw=True)
    assert classify(c) is Category.WIN


def test_fixed_pick_is_deterministic():
    c = ctx("X__ ___ ___", last=0)
    assert select_comment(c, lambda n: 0) == "X goes to row 1, column 1."
    assert select_comment(c, lambda n: n - 1) == candidates(c)[-1]


def test_seeded_pick_repeats():
    c = ctx("X__ _O_ ___", last=4, mode=Mode.VS_OPPONENT)
    first = [select_comment(c, random.Random(7).randrange) for _ in range(3)]
    assert len(set(first)) == 1


def test_bad_pick_raises():
    with pytest.raises(IndexError):
        select_comment(ctx(), lambda n: n)


@pytest.mark.parametrize("seed", range(5))
def test_always_non_empty_over_a_game(seed):
    rng = random.Random(seed)
    cells = b.new_board()
    marker = b.X
    assert select_comment(ctx(), rng.randrange)
    while True:
        idx = rng.choice(b.empty_cells(cells))
        cells[idx] = marker
        result = b.winner(cells)
        c = CommentContext(tuple(cells), idx, Mode.VS_OPPONENT,
                           result.marker if result else None, b.is_draw(cells))
        assert select_comment(c, rng.randrange).strip()
        if result or b.is_full(cells):
            break
        marker = b.other(marker)
