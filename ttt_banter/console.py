"""
terminal front end driving the same controller as the window
"""
import logging
import time

from . import board as b
from .game_logic import GameController
from .scheduler import ManualScheduler
from .session import Mode

logger = logging.getLogger(__name__)

HELP = "Enter a cell 0-8 or row,col (1-3), 'r' to reset, 'm' to switch mode, 'q' to quit."


def format_board(cells):
    """board as text, empty cells show their index"""
    rows = []
    for r in range(b.SIZE):
        row = cells[r * b.SIZE:(r + 1) * b.SIZE]
        rows.append(" " + " | ".join(
            cell if cell != b.EMPTY else str(r * b.SIZE + c) for c, cell in enumerate(row)))
    return "\n-----------\n".join(rows)


def parse_cell(text):
    """
    '4' or '2,2' -> 4; None if it is not a cell
    """
    text = text.strip()
    if ',' in text:
        parts = text.split(',')
        if len(parts) != 2:
            return None
        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            return None
        if 1 <= row <= b.SIZE and 1 <= col <= b.SIZE:
            return (row - 1) * b.SIZE + (col - 1)
        return None
    try:
        idx = int(text)
    except ValueError:
        return None
    return idx if 0 <= idx < b.SIZE * b.SIZE else None


class ConsoleGame:
    """
    read-eval-print loop over a GameController
    input_fn/output_fn/sleep_fn are swappable for tests
    """
    def __init__(self, controller=None, input_fn=input, output_fn=print, sleep_fn=time.sleep):
        if controller is None:
            controller = GameController(ManualScheduler())
        # opponent moves only run if this is a ManualScheduler
        self.controller = controller
        self.scheduler = controller.scheduler
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.sleep_fn = sleep_fn

    def render(self, snap):
        out = self.output_fn
        out("")
        out(format_board(snap.board))
        out("")
        out(f"[{'vs AI' if snap.mode is Mode.VS_OPPONENT else '2 players'}] {snap.status}")
        if snap.winner:
            out(f"Winning line: {', '.join(str(i) for i in snap.winner.line)}")
        out(f">> {snap.comment}")

    def _run_opponent(self):
        # the window waits on a QTimer, here we just sleep it off
        delay = self.scheduler.next_delay_ms()
        if delay is None:
            return
        self.output_fn("AI is thinking...")
        self.sleep_fn(delay / 1000.0)
        self.scheduler.run_pending()
        self.render(self.controller.snapshot())

    def handle(self, line):
        """
        one line of input
        returns: False when the user wants to quit
        """
        cmd = line.strip().lower()
        c = self.controller
        if cmd in ('q', 'quit', 'exit'):
            return False
        if cmd in ('r', 'reset'):
            c.reset_requested()
            self.render(c.snapshot())
            return True
        if cmd in ('m', 'mode'):
            mode = Mode.TWO_PLAYER if c.session.mode is Mode.VS_OPPONENT else Mode.VS_OPPONENT
            c.mode_selected(mode)
            self.render(c.snapshot())
            return True
        idx = parse_cell(cmd)
        if idx is None:
            self.output_fn("!! " + HELP)
            return True
        if not c.session.active:
            self.output_fn("!! Game over. 'r' for a new game.")
            return True
        if not c.cell_clicked(idx):
            self.output_fn("!! Cell already taken. Try again.")
            return True
        self.render(c.snapshot())
        self._run_opponent()
        return True

    def run(self):
        self.output_fn("--- Tic Tac Toe ---")
        self.output_fn(HELP)
        self.render(self.controller.snapshot())
        while True:
            try:
                line = self.input_fn("> ")
            except (EOFError, KeyboardInterrupt):
                self.output_fn("")
                break
            if not self.handle(line):
                break
        self.output_fn("Exiting.")
