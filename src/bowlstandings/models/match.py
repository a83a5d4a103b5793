"""Match, ballot and score sheet data classes."""

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
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from bowlstandings.type_hints import Verdict


class MatchStatus(Enum):
    """Lifecycle states a host reports for a match.

    Only COMPLETED matches are eligible for standings.
    """

    DRAFT = "draft"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ScoreSheet:
    """One judge's marks for one team.

    Attributes
    ----------
    criteria_scores : dict of str to float
        Marks per scoring criterion.
    comment_scores : list of float
        Marks for each judge question; averaged into the total.
    """

    criteria_scores: Dict[str, float] = field(default_factory=dict)
    comment_scores: Tuple[float, ...] = ()

    @property
    def total(self) -> float:
        """Sum of criteria marks plus the mean judge-question mark."""
        total = sum(value or 0.0 for value in self.criteria_scores.values())
        if self.comment_scores:
            total += sum(value or 0.0 for value in self.comment_scores) / len(
                self.comment_scores
            )
        return total

    def to_dict(self) -> Dict[str, Any]:
        """Serialize score sheet to dictionary."""
        return {
            "criteria_scores": dict(self.criteria_scores),
            "comment_scores": list(self.comment_scores),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreSheet":
        """Deserialize score sheet from dictionary."""
        return cls(
            criteria_scores=dict(data.get("criteria_scores", {})),
            comment_scores=tuple(data.get("comment_scores", ())),
        )


@dataclass(frozen=True)
class Ballot:
    """One judge's verdict on a match.

    Attributes
    ----------
    judge_id : str
        Judge who submitted the ballot.
    favored_team_id : str or None
        Team the judge voted for, or None for a declared tie.
    score_a : float
        Judge's total score for team A.
    score_b : float
        Judge's total score for team B.
    is_submitted : bool
        Whether the ballot has been finalized.
    """

    judge_id: str
    favored_team_id: Verdict
    score_a: float
    score_b: float
    is_submitted: bool = True

    @property
    def is_tie(self) -> bool:
        """Did the judge declare a tie?"""
        return self.favored_team_id is None

    @classmethod
    def from_score_sheets(
        cls,
        judge_id: str,
        team_a_id: str,
        team_b_id: str,
        sheet_a: ScoreSheet,
        sheet_b: ScoreSheet,
        is_submitted: bool = True,
    ) -> "Ballot":
        """Build a ballot from a judge's two score sheets.

        The vote goes to the team with the higher total; equal totals
        are a declared tie.
        """
        total_a = sheet_a.total
        total_b = sheet_b.total
        if total_a > total_b:
            favored = team_a_id
        elif total_b > total_a:
            favored = team_b_id
        else:
            favored = None
        return cls(
            judge_id=judge_id,
            favored_team_id=favored,
            score_a=total_a,
            score_b=total_b,
            is_submitted=is_submitted,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ballot to dictionary."""
        return {
            "judge_id": self.judge_id,
            "favored_team_id": self.favored_team_id,
            "score_a": self.score_a,
            "score_b": self.score_b,
            "is_submitted": self.is_submitted,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        team_a_id: Optional[str] = None,
        team_b_id: Optional[str] = None,
    ) -> "Ballot":
        """Deserialize ballot from dictionary.

        Ballots stored as raw score sheets (``sheet_a``/``sheet_b``) need
        the match's team ids to derive the verdict.
        """
        if "sheet_a" in data and "sheet_b" in data:
            if team_a_id is None or team_b_id is None:
                raise ValueError("Team ids are required to read score sheet ballots")
            return cls.from_score_sheets(
                judge_id=str(data["judge_id"]),
                team_a_id=team_a_id,
                team_b_id=team_b_id,
                sheet_a=ScoreSheet.from_dict(data["sheet_a"]),
                sheet_b=ScoreSheet.from_dict(data["sheet_b"]),
                is_submitted=data.get("is_submitted", True),
            )

        # A declared tie is an explicit null, never a missing key
        favored = data["favored_team_id"]
        return cls(
            judge_id=str(data["judge_id"]),
            favored_team_id=str(favored) if favored is not None else None,
            score_a=data["score_a"],
            score_b=data["score_b"],
            is_submitted=data.get("is_submitted", True),
        )


@dataclass(frozen=True)
class Match:
    """A match between two teams as reported by the host.

    Attributes
    ----------
    match_id : str
        Match identifier.
    round_number : int
        Round the match belongs to (1-indexed).
    team_a_id : str
        Team labelled A.
    team_b_id : str
        Team labelled B.
    status : MatchStatus
        Lifecycle state.
    ballots : tuple of Ballot
        Ballots submitted so far.
    panel_size : int, optional
        Number of judges assigned to this match, when the host records it.
    """

    match_id: str
    round_number: int
    team_a_id: str
    team_b_id: str
    status: MatchStatus = MatchStatus.COMPLETED
    ballots: Tuple[Ballot, ...] = ()
    panel_size: Optional[int] = None

    @property
    def is_completed(self) -> bool:
        """Is the match in its terminal completed state?"""
        return self.status == MatchStatus.COMPLETED

    @property
    def team_ids(self) -> Tuple[str, str]:
        """Team ids as (A, B)."""
        return self.team_a_id, self.team_b_id

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "match_id": self.match_id,
            "round_number": self.round_number,
            "team_a_id": self.team_a_id,
            "team_b_id": self.team_b_id,
            "status": self.status.value,
            "ballots": [b.to_dict() for b in self.ballots],
            "panel_size": self.panel_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        team_a_id = str(data["team_a_id"])
        team_b_id = str(data["team_b_id"])
        ballots: List[Ballot] = [
            Ballot.from_dict(b, team_a_id=team_a_id, team_b_id=team_b_id)
            for b in data.get("ballots", [])
        ]
        panel_size = data.get("panel_size")
        return cls(
            match_id=str(data["match_id"]),
            round_number=int(data["round_number"]),
            team_a_id=team_a_id,
            team_b_id=team_b_id,
            status=MatchStatus(data.get("status", MatchStatus.COMPLETED.value)),
            ballots=tuple(ballots),
            panel_size=int(panel_size) if panel_size is not None else None,
        )
