"""Random Tournament Generator (RTG) - internal testing system for standings.

This module generates partial round-robin tournaments with full judge ballot
sets, for exercising the standings engine on realistic data.
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

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from bowlstandings.constants import DEFAULT_PANEL_SIZE
from bowlstandings.models import (
    Ballot,
    Match,
    MatchStatus,
    ScoreSheet,
    Team,
    TournamentSnapshot,
)
from bowlstandings.utils import setup_logger

logger = setup_logger(__name__)


class BallotPattern(Enum):
    """How judges lean between two teams."""

    REALISTIC = "realistic"  # Stronger teams usually win
    RANDOM = "random"  # Coin toss per judge
    SPLIT = "split"  # Many declared ties


@dataclass
class RTGConfig:
    """Configuration for Random Tournament Generator."""

    num_teams: int
    num_rounds: int
    panel_size: int = DEFAULT_PANEL_SIZE
    ballot_pattern: BallotPattern = BallotPattern.REALISTIC
    seed: Optional[int] = None
    criteria: Tuple[str, ...] = ("clarity", "depth", "response", "respect")
    criterion_max: int = 10
    judge_questions: int = 2
    tie_rate: float = 0.05
    incomplete_round: Optional[int] = None  # Round left unfinished, if any


class TeamFactory:
    """Creates teams with a hidden strength used by the ballot simulator."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def create_teams(self) -> Tuple[List[Team], Dict[str, float]]:
        """Create teams and their strengths."""
        teams = []
        strengths = {}
        for i in range(self.config.num_teams):
            team = Team(team_id=f"T{i + 1:02d}", name=f"Team {i + 1:02d}")
            teams.append(team)
            strengths[team.team_id] = self.random.gauss(0.0, 1.0)

        logger.info("Created %s teams", len(teams))
        return teams, strengths


class BallotSimulator:
    """Simulates judge score sheets for a match."""

    def __init__(self, config: RTGConfig, strengths: Dict[str, float]):
        self.config = config
        self.strengths = strengths
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def simulate_ballots(self, team_a_id: str, team_b_id: str) -> List[Ballot]:
        """One finalized ballot per judge on the panel."""
        return [
            self._simulate_ballot(f"J{judge + 1}", team_a_id, team_b_id)
            for judge in range(self.config.panel_size)
        ]

    def _simulate_ballot(self, judge_id: str, team_a_id: str, team_b_id: str) -> Ballot:
        if self.random.random() < self._tie_probability():
            sheet = self._score_sheet(0.5)
            return Ballot.from_score_sheets(judge_id, team_a_id, team_b_id, sheet, sheet)

        expected_a = self._expected_a(team_a_id, team_b_id)
        sheet_a = self._score_sheet(expected_a)
        sheet_b = self._score_sheet(1.0 - expected_a)
        return Ballot.from_score_sheets(judge_id, team_a_id, team_b_id, sheet_a, sheet_b)

    def _tie_probability(self) -> float:
        if self.config.ballot_pattern == BallotPattern.SPLIT:
            return max(self.config.tie_rate, 0.3)
        return self.config.tie_rate

    def _expected_a(self, team_a_id: str, team_b_id: str) -> float:
        if self.config.ballot_pattern == BallotPattern.RANDOM:
            return 0.5
        diff = self.strengths[team_a_id] - self.strengths[team_b_id]
        return 1.0 / (1.0 + math.exp(-diff))

    def _score_sheet(self, quality: float) -> ScoreSheet:
        """Marks centred on ``quality`` times the criterion maximum."""
        top = self.config.criterion_max
        criteria = {
            name: max(0, min(top, round(self.random.gauss(quality * top, 1.5))))
            for name in self.config.criteria
        }
        comments = tuple(
            max(0, min(top, round(self.random.gauss(quality * top, 1.5))))
            for _ in range(self.config.judge_questions)
        )
        return ScoreSheet(criteria_scores=criteria, comment_scores=comments)


class RandomTournamentGenerator:
    """Generates a complete tournament snapshot.

    Each round teams are shuffled and paired off; with an odd number of
    teams one team sits the round out. Rematches are allowed, so teams end
    up with different opponent sets as on a real partial schedule.
    """

    def __init__(self, config: RTGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def generate_tournament(self, tournament_id: str = "rtg") -> TournamentSnapshot:
        teams, strengths = TeamFactory(self.config).create_teams()
        simulator = BallotSimulator(self.config, strengths)
        matches: List[Match] = []

        for round_number in range(1, self.config.num_rounds + 1):
            order = [t.team_id for t in teams]
            self.random.shuffle(order)
            for board in range(len(order) // 2):
                team_a_id, team_b_id = order[2 * board], order[2 * board + 1]
                match_id = f"R{round_number}M{board + 1}"
                if round_number == self.config.incomplete_round:
                    matches.append(
                        Match(
                            match_id=match_id,
                            round_number=round_number,
                            team_a_id=team_a_id,
                            team_b_id=team_b_id,
                            status=MatchStatus.IN_PROGRESS,
                        )
                    )
                    continue
                matches.append(
                    Match(
                        match_id=match_id,
                        round_number=round_number,
                        team_a_id=team_a_id,
                        team_b_id=team_b_id,
                        status=MatchStatus.COMPLETED,
                        ballots=tuple(simulator.simulate_ballots(team_a_id, team_b_id)),
                    )
                )

        logger.info(
            "Generated tournament %s: %d teams, %d rounds, %d matches",
            tournament_id,
            len(teams),
            self.config.num_rounds,
            len(matches),
        )
        return TournamentSnapshot(
            tournament_id=tournament_id,
            teams=tuple(teams),
            matches=tuple(matches),
            panel_size=self.config.panel_size,
            name=f"Random tournament {tournament_id}",
        )
