"""Match outcome data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from bowlstandings.constants import DRAW_SHARE


@dataclass(frozen=True)
class MatchOutcome:
    """Resolved result of a completed match.

    Attributes
    ----------
    match_id : str
        Match the outcome was derived from.
    round_number : int
        Round of the match.
    team_a_id : str
        Team labelled A.
    team_b_id : str
        Team labelled B.
    win_share_a : float
        Win credit for A (1.0, 0.5 or 0.0).
    score_a : float
        Sum of the judges' scores for A.
    score_b : float
        Sum of the judges' scores for B.
    votes_a : float
        Judge votes for A.
    votes_b : float
        Judge votes for B.
    simulated_ballot : bool
        Whether a simulated third judge contributed.
    """

    match_id: str
    round_number: int
    team_a_id: str
    team_b_id: str
    win_share_a: float
    score_a: float
    score_b: float
    votes_a: float
    votes_b: float
    simulated_ballot: bool = False

    @property
    def win_share_b(self) -> float:
        """Calculate B's win share from A's."""
        return 1.0 - self.win_share_a

    @property
    def score_differential(self) -> float:
        """Signed score differential from A's point of view."""
        return self.score_a - self.score_b

    @property
    def is_draw(self) -> bool:
        return self.win_share_a == DRAW_SHARE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize outcome to dictionary."""
        return {
            "match_id": self.match_id,
            "round_number": self.round_number,
            "team_a_id": self.team_a_id,
            "team_b_id": self.team_b_id,
            "win_share_a": self.win_share_a,
            "win_share_b": self.win_share_b,
            "score_a": self.score_a,
            "score_b": self.score_b,
            "score_differential": self.score_differential,
            "votes_a": self.votes_a,
            "votes_b": self.votes_b,
            "simulated_ballot": self.simulated_ballot,
        }
