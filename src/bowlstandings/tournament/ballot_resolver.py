"""Ballot resolution for completed matches.

This module turns a match's judge ballots into a match outcome with proper
validation and error checking.
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

from typing import List, Tuple

from bowlstandings.constants import (
    DRAW_SHARE,
    FULL_VOTE,
    LOSS_SHARE,
    SIMULATED_JUDGE_ID,
    SPLIT_VOTE,
    TWO_JUDGE_PANEL,
    WIN_SHARE,
)
from bowlstandings.exceptions import (
    DataIntegrityException,
    IncompleteBallotSetException,
    MatchNotCompletedException,
    PendingBallotException,
)
from bowlstandings.models import Ballot, Match, MatchOutcome
from bowlstandings.utils import setup_logger
from bowlstandings.utils.validation import validate_panel_size_strict, validate_score

logger = setup_logger(__name__)


class BallotResolver:
    """Resolves a completed match's ballots into a MatchOutcome.

    This class is responsible for:
    - Checking the match is completed and its ballot set is whole
    - Tallying judge votes, splitting declared ties
    - Deciding the win share split
    - Summing the judges' scores into a score differential

    Resolution is a pure function of the match; nothing is written back.
    """

    def __init__(self, panel_size: int, simulate_third_judge: bool = False) -> None:
        """Initialize the resolver.

        Args
        ----
        panel_size: Number of judges expected on every match
        simulate_third_judge: Add a simulated third ballot to two-judge panels
        """
        self.panel_size = validate_panel_size_strict(panel_size)
        self.simulate_third_judge = simulate_third_judge

    @property
    def uses_simulated_judge(self) -> bool:
        """Will matches get a simulated third ballot?"""
        return self.simulate_third_judge and self.panel_size == TWO_JUDGE_PANEL

    def resolve(self, match: Match) -> MatchOutcome:
        """Resolve one match.

        Args:
            match: A completed match with its ballots

        Returns:
            The match outcome

        Raises:
            MatchNotCompletedException: If the match is not completed
            PendingBallotException: If a ballot is not finalized
            IncompleteBallotSetException: If the ballot count differs from the panel size
            DataIntegrityException: If a ballot does not fit the match
        """
        if not match.is_completed:
            raise MatchNotCompletedException(
                f"Match {match.match_id} is {match.status.value}, not completed"
            )

        ballots = self._validate_ballots(match)
        simulated = False
        if self.uses_simulated_judge:
            ballots.append(self._simulated_ballot(match, ballots))
            simulated = True

        votes_a, votes_b, score_a, score_b = self._tally(match, ballots)
        win_share_a = self._win_share(votes_a, votes_b)

        outcome = MatchOutcome(
            match_id=match.match_id,
            round_number=match.round_number,
            team_a_id=match.team_a_id,
            team_b_id=match.team_b_id,
            win_share_a=win_share_a,
            score_a=score_a,
            score_b=score_b,
            votes_a=votes_a,
            votes_b=votes_b,
            simulated_ballot=simulated,
        )

        logger.debug(
            "Resolved match %s (round %d): %s %s-%s %s, differential %+.2f",
            match.match_id,
            match.round_number,
            match.team_a_id,
            votes_a,
            votes_b,
            match.team_b_id,
            outcome.score_differential,
        )
        return outcome

    def _validate_ballots(self, match: Match) -> List[Ballot]:
        """Check the ballot set before tallying.

        Returns:
            The ballots as a new list
        """
        if match.team_a_id == match.team_b_id:
            raise DataIntegrityException(
                f"Match {match.match_id} pits team {match.team_a_id} against itself"
            )

        pending = [b.judge_id for b in match.ballots if not b.is_submitted]
        if pending:
            raise PendingBallotException(
                f"Match {match.match_id} has ballots that are not finalized "
                f"(judges: {', '.join(pending)})"
            )

        if len(match.ballots) != self.panel_size:
            raise IncompleteBallotSetException(
                f"Match {match.match_id} has {len(match.ballots)} ballots, "
                f"expected {self.panel_size}"
            )

        seen_judges = set()
        for ballot in match.ballots:
            if ballot.judge_id in seen_judges:
                raise DataIntegrityException(
                    f"Judge {ballot.judge_id} submitted more than one ballot "
                    f"for match {match.match_id}"
                )
            seen_judges.add(ballot.judge_id)

            if ballot.favored_team_id is not None and ballot.favored_team_id not in (
                match.team_a_id,
                match.team_b_id,
            ):
                raise DataIntegrityException(
                    f"Ballot from judge {ballot.judge_id} favors team "
                    f"{ballot.favored_team_id}, which is not in match {match.match_id}"
                )

            for score in (ballot.score_a, ballot.score_b):
                result = validate_score(score)
                if not result:
                    raise DataIntegrityException(
                        f"Ballot from judge {ballot.judge_id} in match "
                        f"{match.match_id}: {result.error_message}"
                    )

        return list(match.ballots)

    def _simulated_ballot(self, match: Match, ballots: List[Ballot]) -> Ballot:
        """Build the third ballot of a two-judge panel from the two real ones.

        Its scores are the means of the real judges' scores and its vote goes
        to the higher mean.
        """
        mean_a = sum(float(b.score_a) for b in ballots) / len(ballots)
        mean_b = sum(float(b.score_b) for b in ballots) / len(ballots)
        if mean_a > mean_b:
            favored = match.team_a_id
        elif mean_b > mean_a:
            favored = match.team_b_id
        else:
            favored = None

        logger.debug(
            "Simulated third judge for match %s: %.2f vs %.2f",
            match.match_id,
            mean_a,
            mean_b,
        )
        return Ballot(
            judge_id=SIMULATED_JUDGE_ID,
            favored_team_id=favored,
            score_a=mean_a,
            score_b=mean_b,
        )

    def _tally(
        self, match: Match, ballots: List[Ballot]
    ) -> Tuple[float, float, float, float]:
        """Sum votes and scores for both sides.

        Returns:
            Tuple of (votes_a, votes_b, score_a, score_b)
        """
        votes_a = 0.0
        votes_b = 0.0
        score_a = 0.0
        score_b = 0.0

        for ballot in ballots:
            score_a += float(ballot.score_a)
            score_b += float(ballot.score_b)
            if ballot.is_tie:
                votes_a += SPLIT_VOTE
                votes_b += SPLIT_VOTE
            elif ballot.favored_team_id == match.team_a_id:
                votes_a += FULL_VOTE
            else:
                votes_b += FULL_VOTE

        return votes_a, votes_b, score_a, score_b

    @staticmethod
    def _win_share(votes_a: float, votes_b: float) -> float:
        """Win share for A: the side with more votes takes the match."""
        if votes_a > votes_b:
            return WIN_SHARE
        if votes_a < votes_b:
            return LOSS_SHARE
        return DRAW_SHARE
