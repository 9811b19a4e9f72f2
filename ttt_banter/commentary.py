"""
flavor text for the commentary panel

Lines live in fixed, ordered pools, one per category. The selector works
out which category the current position falls into, builds the candidate
list for it and lets an injected ``pick(n)`` choose an index. With a
seeded or fixed ``pick`` the result is fully deterministic.

Repeats are allowed here; the controller drops a line that equals the one
already on screen.
"""
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from . import board as b
from .session import Mode, OPPONENT


class Category(Enum):
    START = "start"
    WIN = "win"
    DRAW = "draw"
    MOVE = "move"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CommentContext:
    board: Sequence[str]
    last_move: Optional[int]
    mode: Mode
    winner: Optional[str] = None      # winning marker
    is_draw: bool = False


START_LINES = {
    Mode.VS_OPPONENT: (
        "The machine cracks its knuckles. You have X, good luck.",
        "Human versus silicon. X opens, the AI is watching.",
    ),
    Mode.TWO_PLAYER: (
        "Two players, nine squares, one winner. X to start.",
        "Fresh board! Decide who's X and let's go.",
    ),
}

WIN_LINES = {
    b.X: (
        "X completes the line. Textbook!",
        "Three X's in a row, and the crowd goes wild.",
        "X takes it! Nobody saw that coming. Well, maybe O did.",
    ),
    b.O: (
        "O seals the deal. What a finish!",
        "Three O's lined up like ducks. O wins!",
        "O takes the game with style.",
    ),
}

# O winning when O is the AI
OPPONENT_WIN_LINES = (
    "The AI wins. It will be insufferable about this.",
    "Beaten by a script with one move of lookahead. Ouch.",
    "Machine 1, human 0. Rematch?",
)

DRAW_LINES = (
    "A draw. Perfectly balanced, as all things should be.",
    "Nobody wins, nobody loses. Classic tic-tac-toe.",
    "Board's full and no line in sight. It's a draw!",
)

MOVE_LINES = {
    b.X: (
        "X goes to row {row}, column {col}.",
        "X plants a flag at ({row}, {col}).",
        "Bold move from X.",
        "X is building something here...",
    ),
    b.O: (
        "O answers at row {row}, column {col}.",
        "O slides into ({row}, {col}).",
        "O is not backing down.",
        "Interesting choice by O.",
    ),
}

# appended to the O pool when O is the AI
OPPONENT_MOVE_LINES = (
    "The AI hums quietly and picks ({row}, {col}).",
    "Calculating... calculating... done.",
)

FALLBACK_LINES = (
    "The tension is unbearable.",
    "Anything can still happen.",
    "Nine squares of pure drama.",
)


def classify(context):
    """first matching category, in priority order"""
    board = context.board
    if context.last_move is None and all(cell == b.EMPTY for cell in board):
        return Category.START
    if context.winner:
        return Category.WIN
    if context.is_draw:
        return Category.DRAW
    if context.last_move is not None and 0 <= context.last_move < len(board) \
            and board[context.last_move] != b.EMPTY:
        return Category.MOVE
    return Category.FALLBACK


def candidates(context):
    """the pool for the context's category, templates already filled in"""
    category = classify(context)
    if category is Category.START:
        return list(START_LINES[context.mode])
    if category is Category.WIN:
        if context.winner == OPPONENT and context.mode is Mode.VS_OPPONENT:
            return list(OPPONENT_WIN_LINES)
        return list(WIN_LINES[context.winner])
    if category is Category.DRAW:
        return list(DRAW_LINES)
    if category is Category.MOVE:
        marker = context.board[context.last_move]
        pool = list(MOVE_LINES[marker])
        if marker == OPPONENT and context.mode is Mode.VS_OPPONENT:
            pool.extend(OPPONENT_MOVE_LINES)
        row, col = b.coords(context.last_move)
        return [line.format(row=row, col=col) for line in pool]
    return list(FALLBACK_LINES)


def select_comment(context, pick=random.randrange):
    """
    one line for the given context
    pick: callable(n) -> index in range(n)
    """
    pool = candidates(context)
    idx = pick(len(pool))
    if not 0 <= idx < len(pool):
        raise IndexError(f"pick returned {idx} for a pool of {len(pool)}")
    return pool[idx]
