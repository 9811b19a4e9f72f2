import pytest

from main import build_controller, parse_args
from ttt_banter import config
from ttt_banter.scheduler import ManualScheduler
from ttt_banter.session import Mode


def test_defaults():
    args = parse_args([])
    assert Mode(args.mode) is Mode.TWO_PLAYER
    assert args.ai_delay == config.AI_DELAY_MS
    assert args.seed is None and not args.console


def test_mode_value_maps_to_mode():
    args = parse_args(["--mode", "vs-ai", "--ai-delay", "0"])
    c = build_controller(args, ManualScheduler())
    assert c.session.mode is Mode.VS_OPPONENT
    assert c.ai_delay_ms == 0


@pytest.mark.parametrize("argv", [["--ai-delay", "-1"], ["--mode", "solo"]])
def test_bad_options_exit(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def _seeded_game(human_moves):
    scheduler = ManualScheduler()
    c = build_controller(parse_args(["--mode", "vs-ai", "--seed", "3", "--ai-delay", "0"]), scheduler)
    for idx in human_moves:
        # skip cells the AI already took
        if c.session.active and c.session.board[idx] == '':
            c.cell_clicked(idx)
            scheduler.run_pending()
    return c


def test_seed_repeats_the_whole_game():
    moves = [4, 0, 8, 2, 6, 1, 3, 5, 7]
    first, second = _seeded_game(moves), _seeded_game(moves)
    assert first.session.board == second.session.board
    assert first.history == second.history
    assert first.session.board.count('O') >= 1
