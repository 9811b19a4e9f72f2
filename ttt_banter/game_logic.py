"""
game controller: owns the session, applies moves, drives the opponent
and the commentary
"""
import logging
import random

from . import board as b
from . import config
from .commentary import CommentContext, select_comment
from .opponent import Opponent
from .session import Mode, OPPONENT, Session, Snapshot

logger = logging.getLogger(__name__)


class GameController:
    """
    tic-tac-toe rules and state

    Every change goes through new_game() or apply_move(). Invalid requests
    (occupied cell, game over, wrong side) are ignored and return False.
    Listeners get a fresh Snapshot after each change.
    """
    def __init__(self, scheduler, mode=Mode.TWO_PLAYER, opponent=None, pick=None,
                 ai_delay_ms=config.AI_DELAY_MS, history_size=config.HISTORY_SIZE):
        """
        scheduler: object with call_later(delay_ms, cb) and cancel(handle)
        pick: random index source for the commentary, callable(n) -> int
        """
        self.scheduler = scheduler
        self.opponent = opponent or Opponent(OPPONENT)
        self.pick = pick or random.randrange
        self.ai_delay_ms = ai_delay_ms
        self.history_size = max(1, history_size)
        self.compact = False
        self.history = []
        self._listeners = []
        self._pending = None          # handle of the armed opponent move
        self.session = Session(mode=mode)
        self.new_game(mode)

    # --- listeners ---------------------------------------------------------

    def subscribe(self, listener):
        """listener(snapshot) is called after every state change"""
        self._listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # --- transitions -------------------------------------------------------

    def new_game(self, mode=None):
        """
        start over: empty board, X to move; always allowed
        """
        if mode is None:
            mode = self.session.mode
        if not isinstance(mode, Mode):
            raise ValueError(f"unknown mode: {mode!r}")
        self._disarm_opponent()
        self.session = Session(mode=mode)
        self.history = []
        logger.info("new game, mode=%s", mode.value)
        self._refresh_comment()
        self._notify()

    def apply_move(self, index, marker=None):
        """
        place the side-to-move's marker on index
        marker: if given, must match the side to move
        returns: True if the move was applied
        """
        s = self.session
        if not s.active:
            logger.debug("ignored move %r: game over", index)
            return False
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(s.board):
            logger.debug("ignored move %r: out of range", index)
            return False
        if s.board[index] != b.EMPTY:
            logger.debug("ignored move %r: cell taken", index)
            return False
        if marker is not None and marker != s.turn:
            logger.debug("ignored move %r: not %s's turn", index, marker)
            return False

        mover = s.turn
        s.board[index] = mover
        s.turn = b.other(mover)
        s.last_move = index
        logger.debug("%s -> %d", mover, index)

        # board queries after every move decide whether the game is over
        result = s.winner
        if result is not None:
            s.active = False
            logger.info("%s wins on %s", result.marker, result.line)
        elif b.is_full(s.board):
            s.active = False
            logger.info("draw")

        self._disarm_opponent()
        self._refresh_comment()
        if s.opponent_to_move():
            self._arm_opponent()
        self._notify()
        return True

    # --- inbound events ----------------------------------------------------

    def cell_clicked(self, index):
        """human click; the opponent's cells are not clickable on its turn"""
        if self.session.opponent_to_move():
            logger.debug("ignored click %r: opponent's turn", index)
            return False
        return self.apply_move(index)

    def mode_selected(self, mode):
        self.new_game(mode)

    def reset_requested(self):
        self.new_game()

    def viewport_changed(self, width):
        """layout hint only, no game effect"""
        compact = width < config.COMPACT_WIDTH
        if compact != self.compact:
            self.compact = compact
            self._notify()

    # --- opponent ----------------------------------------------------------

    @property
    def thinking(self):
        return self._pending is not None

    def _arm_opponent(self):
        session = self.session
        self._pending = self.scheduler.call_later(
            self.ai_delay_ms, lambda: self._play_opponent(session))

    def stop(self):
        """cancel a pending opponent move, e.g. when the window closes"""
        self._disarm_opponent()

    def _disarm_opponent(self):
        if self._pending is not None:
            self.scheduler.cancel(self._pending)
            self._pending = None

    def _play_opponent(self, session):
        # a reset replaces the session, so a late timer finds a stale one
        if session is not self.session:
            return
        self._pending = None
        if not session.opponent_to_move():
            return
        idx = self.opponent.choose_move(session.board)
        if idx is None:
            return
        self.apply_move(idx, OPPONENT)

    # --- outbound ----------------------------------------------------------

    def _refresh_comment(self):
        s = self.session
        result = s.winner
        context = CommentContext(
            board=tuple(s.board), last_move=s.last_move, mode=s.mode,
            winner=result.marker if result else None, is_draw=s.is_draw)
        line = select_comment(context, self.pick)
        # only an exact repeat of the last shown line is dropped
        if not self.history or self.history[-1] != line:
            self.history.append(line)
            del self.history[:-self.history_size]

    @property
    def comment(self):
        return self.history[-1] if self.history else ""

    def snapshot(self):
        s = self.session
        return Snapshot(
            board=tuple(s.board), turn=s.turn, mode=s.mode, active=s.active,
            winner=s.winner, is_draw=s.is_draw, comment=self.comment,
            history=tuple(self.history), compact=self.compact,
            thinking=self.thinking)
