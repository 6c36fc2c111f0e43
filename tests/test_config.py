import pytest

from mjbase.config import Config
from mjbase.ini import Ini

CONFIG = """[Socket]
UseSocket=1
[MCTS]
TotalSampleCount=1000
SampleCountPerRound=4
UseTime=0
TimeLimitMs=900
TTWinRateWeight=0.25
UseMoveOrdering=1
[Sgf]
LogTreeSgf=1
"""


@pytest.fixture
def ini(tmp_path):
    (tmp_path / "config.ini").write_text(CONFIG)
    return Ini(base_dir=tmp_path)


def test_defaults():
    config = Config()
    assert config.time_limit_ms == 2500
    assert config.sample_count_per_round == 1
    assert config.merge_alone_tile is True
    assert config.tt_size == 21


def test_from_ini_reads_values(ini):
    config = Config.from_ini(ini)
    assert config.use_socket is True
    assert config.sample_count == 1000
    assert config.sample_count_per_round == 4
    assert config.time_limit_ms == 900
    assert config.tt_win_rate_weight == pytest.approx(0.25)
    assert config.use_move_ordering is True
    assert config.log_tree_sgf is True


def test_zero_flag_is_false(ini):
    assert Config.from_ini(ini).use_time is False


def test_missing_keys_read_as_zero(ini):
    config = Config.from_ini(ini)
    assert config.merge_alone_tile is False
    assert config.tt_size == 0
    assert config.ucb_formula_type == 0


def test_exploration_term_is_not_loaded(ini):
    assert Config.from_ini(ini).exploration_term == Config().exploration_term