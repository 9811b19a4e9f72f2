"""
tic-tac-toe board: 9 cells, row-major, index = row*3 + col
"""
from collections import namedtuple

EMPTY = ''
X = 'X'
O = 'O'
SIZE = 3

# scan order decides which line is reported when more than one is complete
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),   # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),   # cols
    (0, 4, 8), (2, 4, 6),              # diags
)

WinResult = namedtuple("WinResult", ["marker", "line"])


def new_board():
    """fresh list of 9 empty cells"""
    return [EMPTY] * (SIZE * SIZE)


def other(marker):
    """the marker of the other side"""
    if marker == X:
        return O
    if marker == O:
        return X
    raise ValueError(f"not a marker: {marker!r}")


def winner(board):
    """
    first line whose three cells hold the same marker
    returns: WinResult(marker, line) or None
    """
    for a, b, c in LINES:
        if board[a] and board[a] == board[b] == board[c]:
            return WinResult(board[a], (a, b, c))
    return None


def empty_cells(board):
    """indices of empty cells, ascending"""
    return [i for i, cell in enumerate(board) if cell == EMPTY]


def is_full(board):
    return all(cell != EMPTY for cell in board)


def is_draw(board):
    """full board and nobody has three in a row"""
    return is_full(board) and winner(board) is None


def coords(index):
    """1-based (row, col) for display"""
    return index // SIZE + 1, index % SIZE + 1
