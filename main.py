import argparse
import logging
import random
import sys

from ttt_banter import config
from ttt_banter.session import Mode

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic Tac Toe with running commentary")
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.TWO_PLAYER.value,
                        help="start in this mode (default: two-player)")
    parser.add_argument("--ai-delay", type=int, default=config.AI_DELAY_MS, metavar="MS",
                        help="how long the AI 'thinks' before moving")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed the AI and the commentary for repeatable games")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--console", action="store_true",
                        help="play in the terminal instead of a window")
    args = parser.parse_args(argv)
    if args.ai_delay < 0:
        parser.error("--ai-delay must be >= 0")
    return args


def build_controller(args, scheduler):
    from ttt_banter.game_logic import GameController
    from ttt_banter.opponent import Opponent
    from ttt_banter.session import OPPONENT

    rng = random.Random(args.seed)
    return GameController(
        scheduler, mode=Mode(args.mode), opponent=Opponent(OPPONENT, rng),
        pick=rng.randrange, ai_delay_ms=args.ai_delay)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app):
    """
    Apply the fixed light palette from config.
    """
    from PySide6.QtGui import QPalette, QColor

    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(config.WINDOW_COLOR))
    palette.setColor(QPalette.WindowText, QColor(config.WINDOW_TEXT_COLOR))
    palette.setColor(QPalette.Base, QColor(config.BASE_COLOR))
    palette.setColor(QPalette.AlternateBase, QColor(config.ALT_BASE_COLOR))
    palette.setColor(QPalette.Text, QColor(config.WINDOW_TEXT_COLOR))
    palette.setColor(QPalette.Button, QColor(config.BUTTON_COLOR))
    palette.setColor(QPalette.ButtonText, QColor(config.BUTTON_TEXT_COLOR))
    palette.setColor(QPalette.Highlight, QColor(config.HIGHLIGHT_COLOR))
    palette.setColor(QPalette.HighlightedText, QColor(config.HIGHLIGHTED_TEXT_COLOR))
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, QColor(config.DISABLED_TEXT_COLOR))
    palette.setColor(QPalette.Disabled, QPalette.WindowText, QColor(config.DISABLED_TEXT_COLOR))
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run_console(args):
    from ttt_banter.console import ConsoleGame
    from ttt_banter.scheduler import ManualScheduler

    ConsoleGame(build_controller(args, ManualScheduler())).run()
    return 0


def run_window(args):
    from PySide6.QtWidgets import QApplication
    from ttt_banter.ui.main_window import TicTacToeWindow
    from ttt_banter.ui.qt_scheduler import QtScheduler

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    scheduler = QtScheduler(app)
    window = TicTacToeWindow(build_controller(args, scheduler))
    window.show()
    return app.exec()


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)
    logging.getLogger(__name__).info("starting, mode=%s console=%s", args.mode, args.console)
    if args.console:
        return run_console(args)
    return run_window(args)


if __name__ == '__main__':
    sys.exit(run())
