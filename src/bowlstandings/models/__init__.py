"""Data models for Bowl Standings."""

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

from .match import Ballot, Match, MatchStatus, ScoreSheet
from .match_outcome import MatchOutcome
from .snapshot import TournamentSnapshot
from .standing import (
    CoinFlipDraw,
    ExcludedMatch,
    RoundSummary,
    Standing,
    StandingsReport,
)
from .standings_config import StandingsConfig
from .team import Team
from .team_record import OpponentResult, TeamRecord

__all__ = [
    "Ballot",
    "CoinFlipDraw",
    "ExcludedMatch",
    "Match",
    "MatchOutcome",
    "MatchStatus",
    "OpponentResult",
    "RoundSummary",
    "ScoreSheet",
    "Standing",
    "StandingsConfig",
    "StandingsReport",
    "Team",
    "TeamRecord",
    "TournamentSnapshot",
]
