import os

import pytest

from ttt_banter.game_logic import GameController
from ttt_banter.opponent import Opponent
from ttt_banter.scheduler import ManualScheduler

# widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FixedRng:
    """choice() always returns the first candidate"""
    def choice(self, seq):
        return seq[0]


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def controller(scheduler):
    return GameController(scheduler, opponent=Opponent(rng=FixedRng()), pick=lambda n: 0)


def board_from(text):
    """'XO_ _X_ _O_' -> list of 9 cells; spaces ignored, _ is empty"""
    cells = [c for c in text if c != ' ']
    assert len(cells) == 9
    return ['' if c == '_' else c for c in cells]
