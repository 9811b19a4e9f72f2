import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtWidgets import QApplication

from ttt_banter import board as b
from ttt_banter.game_logic import GameController
from ttt_banter.opponent import Opponent
from ttt_banter.scheduler import ManualScheduler
from ttt_banter.session import Mode
from ttt_banter.ui.board_widget import BoardWidget
from ttt_banter.ui.main_window import TicTacToeWindow
from conftest import FixedRng


@pytest.fixture(scope="module")
def app():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window(app, scheduler):
    controller = GameController(scheduler, opponent=Opponent(rng=FixedRng()), pick=lambda n: 0)
    w = TicTacToeWindow(controller)
    yield w
    w.close()


def test_clicks_reach_the_controller(window):
    window.board_widget.cell_clicked.emit(4)
    assert window.controller.session.board[4] == b.X
    assert window.status_label.text() == "Next move: O"
    assert window.board_widget.cells[4] == b.X


def test_win_is_highlighted_and_board_locked(window):
    for idx in (0, 4, 1, 5, 2):
        window.board_widget.cell_clicked.emit(idx)
    assert window.status_label.text() == "Winner: X"
    assert window.board_widget.winning_line == (0, 1, 2)
    assert not window.board_widget._accept_clicks
    # game over: current mode's button is usable again
    assert window.two_player_button.isEnabled()


def test_mode_buttons(window, scheduler):
    assert not window.two_player_button.isEnabled()
    window.vs_ai_button.click()
    assert window.controller.session.mode is Mode.VS_OPPONENT
    assert not window.vs_ai_button.isEnabled()
    window.board_widget.cell_clicked.emit(0)
    assert "thinking" in window.status_label.text()
    assert not window.board_widget._accept_clicks
    scheduler.run_pending()
    assert window.controller.session.board.count(b.O) == 1
    window.reset_button.click()
    assert window.controller.session.board == [''] * 9


def test_commentary_panel_tracks_history(window):
    first = window.comment_label.text()
    assert first
    window.board_widget.cell_clicked.emit(4)
    assert window.comment_label.text() != first
    assert window.history_label.text() == first


def test_compact_layout_hides_footer(window):
    window.controller.viewport_changed(300)
    assert window.footer_label.isHidden()
    window.controller.viewport_changed(900)
    assert not window.footer_label.isHidden()


def test_cell_at_maps_coordinates(app):
    w = BoardWidget()
    w.resize(300, 300)
    assert w.cell_at(10, 10) == 0
    assert w.cell_at(150, 150) == 4
    assert w.cell_at(299, 299) == 8
    assert w.cell_at(301, 10) is None


def test_closing_cancels_pending_move(window, scheduler):
    window.controller.mode_selected(Mode.VS_OPPONENT)
    window.board_widget.cell_clicked.emit(0)
    handle = scheduler.pending[0]
    window.close()
    assert handle.cancelled


def test_qt_scheduler_fires_and_cancels(app):
    from PySide6.QtTest import QTest
    from ttt_banter.ui.qt_scheduler import QtScheduler

    sched = QtScheduler()
    fired = []
    sched.call_later(10, lambda: fired.append("a"))
    dropped = sched.call_later(10, lambda: fired.append("b"))
    sched.cancel(dropped)
    assert sched.pending == 1
    QTest.qWait(100)
    assert fired == ["a"]
    assert sched.pending == 0


def test_menu_mode_entries_follow_buttons(window):
    assert not window.two_player_action.isEnabled()
    assert window.vs_ai_action.isEnabled()
    window.vs_ai_action.trigger()
    assert window.controller.session.mode is Mode.VS_OPPONENT
    assert window.two_player_action.isEnabled()
    assert not window.vs_ai_action.isEnabled()
