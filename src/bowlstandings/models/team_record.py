"""Team record data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .team import Team


@dataclass(frozen=True)
class OpponentResult:
    """A team's result against one opponent in one match."""

    opponent_id: str
    win_share: float
    match_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "opponent_id": self.opponent_id,
            "win_share": self.win_share,
            "match_id": self.match_id,
        }


@dataclass
class TeamRecord:
    """Running totals for one team across the matches it played.

    Attributes
    ----------
    team : Team
        The team the record belongs to.
    matches_played : int
        Completed matches counted.
    win_share : float
        Total win credit.
    score_differential : float
        Total signed score differential.
    votes : float
        Total judge votes won.
    opponent_results : list of OpponentResult
        One entry per match actually played, for head-to-head checks.
    """

    team: Team
    matches_played: int = 0
    win_share: float = 0.0
    score_differential: float = 0.0
    votes: float = 0.0
    opponent_results: List[OpponentResult] = field(default_factory=list)

    @property
    def team_id(self) -> str:
        return self.team.team_id

    def add_result(
        self,
        opponent_id: str,
        match_id: str,
        win_share: float,
        score_differential: float,
        votes: float,
    ) -> None:
        """Fold one match into the record."""
        self.matches_played += 1
        self.win_share += win_share
        self.score_differential += score_differential
        self.votes += votes
        self.opponent_results.append(
            OpponentResult(opponent_id=opponent_id, win_share=win_share, match_id=match_id)
        )

    def results_against(self, opponent_id: str) -> List[OpponentResult]:
        """All results of this team against one opponent."""
        return [r for r in self.opponent_results if r.opponent_id == opponent_id]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize record to dictionary."""
        return {
            "team": self.team.to_dict(),
            "matches_played": self.matches_played,
            "win_share": self.win_share,
            "score_differential": self.score_differential,
            "votes": self.votes,
            "opponent_results": [r.to_dict() for r in self.opponent_results],
        }
