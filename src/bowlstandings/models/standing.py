"""Standings output data classes."""

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
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .match_outcome import MatchOutcome
from .team import Team
from .team_record import TeamRecord


@dataclass(frozen=True)
class Standing:
    """A team's final place.

    Attributes
    ----------
    rank : int
        1-based place; ranks are unique.
    record : TeamRecord
        The record the place was derived from.
    separated_by : str or None
        Ranking key that put this team below the team ranked directly
        above it. None for the first place.
    tied_on_win_share : bool
        Whether the team shared its win share with another team.
    """

    rank: int
    record: TeamRecord
    separated_by: Optional[str] = None
    tied_on_win_share: bool = False

    @property
    def team(self) -> Team:
        return self.record.team

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "rank": self.rank,
            "team_id": self.team.team_id,
            "team_name": self.team.name,
            "matches_played": self.record.matches_played,
            "win_share": self.record.win_share,
            "score_differential": self.record.score_differential,
            "votes": self.record.votes,
            "separated_by": self.separated_by,
            "tied_on_win_share": self.tied_on_win_share,
        }


@dataclass(frozen=True)
class CoinFlipDraw:
    """Audit entry for one coin flip.

    Attributes
    ----------
    team_ids : tuple of str
        The tied teams in the canonical order the draw started from.
    order : tuple of str
        The resulting order, best first.
    seed : int or None
        Seed of the random source, when known. Replaying the draw with
        the same seed reproduces ``order``.
    """

    team_ids: Tuple[str, ...]
    order: Tuple[str, ...]
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_ids": list(self.team_ids),
            "order": list(self.order),
            "seed": self.seed,
        }


@dataclass(frozen=True)
class ExcludedMatch:
    """A completed match left out of the standings and why."""

    match_id: str
    round_number: int
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "match_id": self.match_id,
            "round_number": self.round_number,
            "reason": self.reason,
        }


@dataclass
class RoundSummary:
    """Match counts for a single round."""

    round_number: int
    total_matches: int = 0
    completed_matches: int = 0
    matches_used: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round_number": self.round_number,
            "total_matches": self.total_matches,
            "completed_matches": self.completed_matches,
            "matches_used": self.matches_used,
        }


@dataclass
class StandingsReport:
    """Everything a standings computation produced.

    Attributes
    ----------
    tournament_id : str
        Tournament the standings belong to.
    through_round : int or None
        Last round included, or None for all rounds.
    standings : list of Standing
        Teams in rank order.
    excluded_matches : list of ExcludedMatch
        Completed matches that could not be used.
    coin_flips : list of CoinFlipDraw
        Every random draw made while ranking.
    matches_used : int
        Number of match outcomes that went into the standings.
    round_summaries : list of RoundSummary
        Per-round match counts.
    match_results : list of MatchOutcome
        Resolved outcome of every match used, in round order.
    computed_at : datetime
        When the report was produced.
    """

    tournament_id: str
    through_round: Optional[int] = None
    standings: List[Standing] = field(default_factory=list)
    excluded_matches: List[ExcludedMatch] = field(default_factory=list)
    coin_flips: List[CoinFlipDraw] = field(default_factory=list)
    matches_used: int = 0
    round_summaries: List[RoundSummary] = field(default_factory=list)
    match_results: List[MatchOutcome] = field(default_factory=list)
    computed_at: datetime = field(default_factory=datetime.now)

    @property
    def is_complete(self) -> bool:
        """True when no completed match had to be excluded."""
        return not self.excluded_matches

    def standing_for(self, team_id: str) -> Optional[Standing]:
        """Find the standing of one team."""
        for standing in self.standings:
            if standing.team.team_id == team_id:
                return standing
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize report to dictionary."""
        return {
            "tournament_id": self.tournament_id,
            "through_round": self.through_round,
            "standings": [s.to_dict() for s in self.standings],
            "excluded_matches": [m.to_dict() for m in self.excluded_matches],
            "coin_flips": [d.to_dict() for d in self.coin_flips],
            "matches_used": self.matches_used,
            "round_summaries": [r.to_dict() for r in self.round_summaries],
            "match_results": [o.to_dict() for o in self.match_results],
            "computed_at": self.computed_at.isoformat(),
        }
