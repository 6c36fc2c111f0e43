"""Program settings read from the INI configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mjbase.ini import Ini

# (attribute, config name, kind) where kind is "flag", "int" or "float".
_SOURCES = (
    ("use_socket", "Socket.UseSocket", "flag"),
    ("sample_count", "MCTS.TotalSampleCount", "int"),
    ("sample_count_per_round", "MCTS.SampleCountPerRound", "int"),
    ("use_time", "MCTS.UseTime", "flag"),
    ("time_limit_ms", "MCTS.TimeLimitMs", "int"),
    ("use_importance_sampling", "MCTS.UseImportanceSampling", "flag"),
    ("use_pruning", "MCTS.UsePruning", "flag"),
    ("merge_alone_tile", "MCTS.MergeAloneTile", "flag"),
    ("use_tt", "MCTS.UseTT", "flag"),
    ("tt_type", "MCTS.TTType", "int"),
    ("tt_size", "MCTS.TTSize", "int"),
    ("keep_selection_down_through_tt_node", "MCTS.KeepSelectionDownThroughTTNode", "flag"),
    ("update_deeper_tt_node", "MCTS.UpdateDeeperTTNode", "flag"),
    ("dynamic_train_exploration_term", "MCTS.DynamicTrainExplorationTermTable", "flag"),
    ("mcts_thread_count", "MCTS.ThreadNum", "int"),
    ("wait_release_tree", "MCTS.WaitReleaseTree", "flag"),
    ("select_best_win_rate_candidate", "MCTS.SelectBestWinRateCandidate", "flag"),
    ("ucb_formula_type", "MCTS.UcbFormulaType", "int"),
    ("tt_win_rate_weight", "MCTS.TTWinRateWeight", "float"),
    ("consider_meld_factor", "MCTS.ConsiderMeldFactor", "flag"),
    ("use_flat_mc_meld", "MCTS.UseFlatMCMeld", "flag"),
    ("use_move_ordering", "MCTS.UseMoveOrdering", "flag"),
    ("more_useful_chance", "MCTS.MoreUsefulChance", "flag"),
    ("log_tree_sgf", "Sgf.LogTreeSgf", "flag"),
)


@dataclass
class Config:
    """Communication, search and logging settings; the defaults apply until loaded."""

    use_socket: bool = False
    sample_count: int = 0
    sample_count_per_round: int = 1
    use_time: bool = False
    time_limit_ms: int = 2500
    exploration_term: float = 0.1
    use_importance_sampling: bool = False
    use_pruning: bool = False
    merge_alone_tile: bool = True
    use_tt: bool = False
    tt_type: int = 1
    tt_size: int = 21
    keep_selection_down_through_tt_node: bool = False
    update_deeper_tt_node: bool = False
    dynamic_train_exploration_term: bool = False
    mcts_thread_count: int = 0
    wait_release_tree: bool = False
    select_best_win_rate_candidate: bool = False
    consider_meld_factor: bool = True
    ucb_formula_type: int = 1
    tt_win_rate_weight: float = 0.1
    use_flat_mc_meld: bool = False
    use_move_ordering: bool = True
    log_tree_sgf: bool = False
    more_useful_chance: bool = False

    @classmethod
    def from_ini(cls, ini: Optional[Ini] = None) -> "Config":
        """Load every setting from ``ini`` (the shared one by default).

        The exploration term is not read; it keeps its default.
        """
        source = ini if ini is not None else Ini.instance()
        values = {}
        for attribute, name, kind in _SOURCES:
            if kind == "flag":
                values[attribute] = source.get_int(name) > 0
            elif kind == "int":
                values[attribute] = source.get_int(name)
            else:
                values[attribute] = source.get_float(name)
        return cls(**values)