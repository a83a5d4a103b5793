# Bowl Standings
# Copyright (C) 2025  Bowl Standings developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
SNAPSHOT_FILE_EXTENSION = ".json"

# Match win-share credit
WIN_SHARE = 1.0
DRAW_SHARE = 0.5
LOSS_SHARE = 0.0

# Judge vote units
FULL_VOTE = 1.0
SPLIT_VOTE = 0.5  # Judge declared a tie, each side gets half a vote

# Judge panel
DEFAULT_PANEL_SIZE = 3
TWO_JUDGE_PANEL = 2  # Panel size that triggers the simulated third judge
SIMULATED_JUDGE_ID = "simulated"

# Decimal places used when comparing summed scores for ties
SCORE_PRECISION = 6

# Ranking keys
TB_WIN_SHARE = "win_share"  # Primary key, not a tiebreak
TB_HEAD_TO_HEAD = "head_to_head"
TB_SCORE_DIFFERENTIAL = "score_differential"
TB_VOTES = "votes"
TB_COIN_FLIP = "coin_flip"  # Always the last resort

# Display names
TIEBREAK_NAMES = {
    TB_WIN_SHARE: "Wins",
    TB_HEAD_TO_HEAD: "Head-to-Head",
    TB_SCORE_DIFFERENTIAL: "Score Differential",
    TB_VOTES: "Judge Votes",
    TB_COIN_FLIP: "Coin Flip",
}

# Deterministic tiebreaks a host may reorder
CONFIGURABLE_TIEBREAKS = (TB_HEAD_TO_HEAD, TB_SCORE_DIFFERENTIAL, TB_VOTES)

DEFAULT_TIEBREAK_ORDER = [
    TB_HEAD_TO_HEAD,
    TB_SCORE_DIFFERENTIAL,
    TB_VOTES,
]
