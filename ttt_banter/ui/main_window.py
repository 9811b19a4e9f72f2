import logging

from ..game_logic import GameController
from ..session import Mode
from .. import config
from .board_widget import BoardWidget
from .qt_scheduler import QtScheduler

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: forwards clicks to the controller, redraws from snapshots
    """
    def __init__(self, controller=None, mode=Mode.TWO_PLAYER):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        if controller is None:
            controller = GameController(QtScheduler(self), mode=mode)
        self.controller = controller
        self.board_widget = BoardWidget(parent=self)
        self._setup_ui()
        self.controller.subscribe(self._on_snapshot)
        self._on_snapshot(self.controller.snapshot())

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.resize(460, 640)
        self.setStyleSheet(f"""
            QMainWindow {{ background-color: {config.WINDOW_COLOR}; }}
            QPushButton {{ padding: 6px 12px; border-radius: 6px; }}
            QPushButton:disabled {{ color: {config.SECONDARY}; }}
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title, mode buttons, status
        self.main_layout.addWidget(self.header_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self._create_commentary()          # flavor text panel
        self.main_layout.addWidget(self.commentary_widget)
        self._create_footer()
        self.main_layout.addWidget(self.footer_label)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self._on_reset)
        self.two_player_action = two_action = QAction("2 Players", self)
        two_action.triggered.connect(lambda: self._on_mode(Mode.TWO_PLAYER))
        self.vs_ai_action = ai_action = QAction("Play vs AI", self)
        ai_action.triggered.connect(lambda: self._on_mode(Mode.VS_OPPONENT))
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, two_action, ai_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        '''title, mode/reset buttons, status line'''
        self.header_widget = QWidget()
        vl = QVBoxLayout(self.header_widget)
        vl.setContentsMargins(0, 0, 0, 0)
        self.title_label = QLabel("Tic Tac Toe")
        self.title_label.setAlignment(Qt.AlignCenter)
        vl.addWidget(self.title_label)

        hl = QHBoxLayout()
        self.mode_label = QLabel("Mode:")
        self.two_player_button = QPushButton("2 Players")
        self.two_player_button.clicked.connect(lambda: self._on_mode(Mode.TWO_PLAYER))
        self.vs_ai_button = QPushButton("Play vs AI")
        self.vs_ai_button.clicked.connect(lambda: self._on_mode(Mode.VS_OPPONENT))
        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self._on_reset)
        self.reset_button.setStyleSheet(f"background: #eee; color: {config.PRIMARY};")
        for w in (None, self.mode_label, self.two_player_button, self.vs_ai_button,
                  self.reset_button, None):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)
        vl.addLayout(hl)

        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        f = QFont(); f.setPointSize(13); self.status_label.setFont(f)
        vl.addWidget(self.status_label)

    def _create_commentary(self):
        '''current comment in bold, older ones faded below'''
        self.commentary_widget = QWidget()
        vl = QVBoxLayout(self.commentary_widget)
        vl.setContentsMargins(4, 4, 4, 4)
        self.comment_label = QLabel("")
        self.comment_label.setWordWrap(True)
        self.comment_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        f = QFont(); f.setPointSize(11); f.setBold(True); self.comment_label.setFont(f)
        self.history_label = QLabel("")
        self.history_label.setWordWrap(True)
        self.history_label.setStyleSheet(f"color: {config.MUTED_TEXT_COLOR};")
        vl.addWidget(self.comment_label)
        vl.addWidget(self.history_label)

    def _create_footer(self):
        self.footer_label = QLabel(
            f'<span style="color:{config.PRIMARY}">X</span> vs '
            f'<span style="color:{config.ACCENT}">O</span> &bull; Play again anytime!')
        self.footer_label.setAlignment(Qt.AlignCenter)
        self.footer_label.setStyleSheet(f"color: {config.MUTED_TEXT_COLOR}; font-size: 13px;")

    def _on_snapshot(self, snap):
        # full redraw from controller state
        self.board_widget.set_snapshot(snap)
        self._update_status(snap)
        self._update_mode_buttons(snap)
        self.comment_label.setText(snap.comment)
        self.history_label.setText("\n".join(reversed(snap.history[:-1])))
        self._apply_density(snap.compact)

    def _update_status(self, snap):
        # set status text + color
        if snap.winner:
            color = config.ACCENT
        elif snap.is_draw:
            color = config.WINDOW_TEXT_COLOR
        else:
            color = config.PRIMARY if snap.turn == 'X' else config.ACCENT
        text = snap.status
        if snap.thinking:
            text += " (AI is thinking...)"
        self.status_label.setStyleSheet(f"color: {color}; font-weight: bold;")
        self.status_label.setText(text)

    def _update_mode_buttons(self, snap):
        # the current mode's button and menu entry are inert while its game is running
        for button, action, mode, color in (
                (self.two_player_button, self.two_player_action, Mode.TWO_PLAYER, config.PRIMARY),
                (self.vs_ai_button, self.vs_ai_action, Mode.VS_OPPONENT, config.ACCENT)):
            current = snap.mode is mode
            enabled = not (current and snap.active)
            button.setEnabled(enabled)
            action.setEnabled(enabled)
            button.setStyleSheet(f"background: {color};" if current else "")

    def _apply_density(self, compact):
        self.footer_label.setVisible(not compact)
        self.mode_label.setVisible(not compact)
        f = QFont(); f.setPointSize(16 if compact else 22); f.setBold(True)
        self.title_label.setFont(f)

    @Slot(int)
    def _on_cell_clicked(self, idx):
        self.controller.cell_clicked(idx)

    def _on_mode(self, mode):
        logger.debug("mode selected: %s", mode.value)
        self.controller.mode_selected(mode)

    @Slot()
    def _on_reset(self):
        self.controller.reset_requested()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.controller.viewport_changed(event.size().width())

    def closeEvent(self, event):
        # drop the pending opponent move with the window
        self.controller.unsubscribe(self._on_snapshot)
        self.controller.stop()
        event.accept()
