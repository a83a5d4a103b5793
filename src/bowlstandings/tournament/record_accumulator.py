"""Team record accumulation.

This module folds match outcomes into one running record per team.
"""

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

from typing import Iterable, Optional

from bowlstandings.exceptions import DuplicateTeamException, UnknownTeamException
from bowlstandings.models import MatchOutcome, Team, TeamRecord
from bowlstandings.type_hints import TeamRecords
from bowlstandings.utils import setup_logger

logger = setup_logger(__name__)


class RecordAccumulator:
    """Builds a TeamRecord for every team of a tournament.

    Teams that have not completed a match keep an all-zero record; on a
    partial schedule they still belong in the standings.
    """

    def accumulate(
        self,
        teams: Iterable[Team],
        outcomes: Iterable[MatchOutcome],
        through_round: Optional[int] = None,
    ) -> TeamRecords:
        """Fold outcomes into team records.

        Args:
            teams: Every team of the tournament
            outcomes: Resolved match outcomes
            through_round: Ignore outcomes from later rounds when given

        Returns:
            Dictionary of team id -> TeamRecord, one entry per team

        Raises:
            DuplicateTeamException: If two teams share an id
            UnknownTeamException: If an outcome names a team that is not listed
        """
        records: TeamRecords = {}
        for team in teams:
            if team.team_id in records:
                raise DuplicateTeamException(f"Team {team.team_id} is listed more than once")
            records[team.team_id] = TeamRecord(team=team)

        for outcome in outcomes:
            if through_round is not None and outcome.round_number > through_round:
                continue
            self.add_outcome(records, outcome)

        logger.debug(
            "Accumulated records for %d teams (%d with matches)",
            len(records),
            sum(1 for r in records.values() if r.matches_played),
        )
        return records

    def add_outcome(self, records: TeamRecords, outcome: MatchOutcome) -> None:
        """Add one outcome to both teams' records.

        Raises:
            UnknownTeamException: If either team has no record
        """
        for team_id in (outcome.team_a_id, outcome.team_b_id):
            if team_id not in records:
                raise UnknownTeamException(
                    f"Match {outcome.match_id} references unknown team {team_id}"
                )

        records[outcome.team_a_id].add_result(
            opponent_id=outcome.team_b_id,
            match_id=outcome.match_id,
            win_share=outcome.win_share_a,
            score_differential=outcome.score_differential,
            votes=outcome.votes_a,
        )
        records[outcome.team_b_id].add_result(
            opponent_id=outcome.team_a_id,
            match_id=outcome.match_id,
            win_share=outcome.win_share_b,
            score_differential=-outcome.score_differential,
            votes=outcome.votes_b,
        )
