"""
scripted opponent: take a win, else block, else play anywhere
"""
import logging
import random

from . import board as b

logger = logging.getLogger(__name__)


def choose_move(board, own=b.O, rng=random):
    """
    one-ply lookahead, beatable on purpose (no fork detection)
    returns: cell index, or None when the board is full
    """
    empties = b.empty_cells(board)
    if not empties:
        return None
    # own marker first (win), then the other side's (block)
    for marker in (own, b.other(own)):
        for idx in empties:
            trial = list(board)
            trial[idx] = marker
            result = b.winner(trial)
            if result is not None and result.marker == marker:
                return idx
    return rng.choice(empties)


class Opponent:
    """
    holds the marker and random source the controller plays with
    """
    def __init__(self, marker=b.O, rng=None):
        self.marker = marker
        self.rng = rng or random.Random()

    def choose_move(self, board):
        idx = choose_move(board, self.marker, self.rng)
        logger.debug("opponent %s picks %s", self.marker, idx)
        return idx
