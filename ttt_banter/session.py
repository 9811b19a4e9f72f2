"""
mutable state of one game plus the read-only snapshot handed to front ends
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from . import board as b


class Mode(Enum):
    """who drives the O side"""
    TWO_PLAYER = "two-player"
    VS_OPPONENT = "vs-ai"


class GameState(Enum):
    ONGOING = "ongoing"
    WON = "won"
    DRAWN = "drawn"


# in VS_OPPONENT the human always has X
HUMAN = b.X
OPPONENT = b.O


@dataclass
class Session:
    """
    one game from the first move to a win, a draw or a reset
    """
    mode: Mode = Mode.TWO_PLAYER
    board: list = field(default_factory=b.new_board)
    turn: str = b.X
    active: bool = True
    last_move: Optional[int] = None

    @property
    def winner(self):
        return b.winner(self.board)

    @property
    def is_draw(self):
        return b.is_draw(self.board)

    @property
    def state(self):
        if self.winner is not None:
            return GameState.WON
        if self.is_draw:
            return GameState.DRAWN
        return GameState.ONGOING

    def opponent_to_move(self):
        """true when the scripted side should play next"""
        return self.mode is Mode.VS_OPPONENT and self.turn == OPPONENT and self.active


@dataclass(frozen=True)
class Snapshot:
    """what a front end needs to draw one frame"""
    board: Tuple[str, ...]
    turn: str
    mode: Mode
    active: bool
    winner: Optional[b.WinResult]
    is_draw: bool
    comment: str
    history: Tuple[str, ...] = ()
    compact: bool = False
    thinking: bool = False

    @property
    def winning_line(self):
        return self.winner.line if self.winner else ()

    @property
    def status(self):
        if self.winner:
            return f"Winner: {self.winner.marker}"
        if self.is_draw:
            return "It's a draw!"
        return f"Next move: {self.turn}"
