"""Ranking and tiebreak calculation for tournaments.

Teams are ranked by win share. Teams sharing a win share form a tie group,
which is split by the tiebreaks in their configured order:

- Head-to-Head: only for two teams that met exactly once without a draw
- Score Differential: cumulative judges' score differential
- Judge Votes: cumulative judge votes won
- Coin Flip: uniformly random order, always last

Each tiebreak splits the whole (sub-)group at once. A sub-group it leaves
tied moves on to the next tiebreak; earlier tiebreaks are not retried.
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

from itertools import groupby
from typing import Callable, Iterable, List, Optional, Tuple

from bowlstandings.constants import (
    DEFAULT_TIEBREAK_ORDER,
    LOSS_SHARE,
    SCORE_PRECISION,
    TB_COIN_FLIP,
    TB_HEAD_TO_HEAD,
    TB_SCORE_DIFFERENTIAL,
    TB_VOTES,
    TB_WIN_SHARE,
    WIN_SHARE,
)
from bowlstandings.models import Standing, TeamRecord
from bowlstandings.type_hints import TiebreakOrder
from bowlstandings.utils import setup_logger
from bowlstandings.utils.validation import validate_tiebreak_order_strict

from .coin_flip import CoinFlipResolver

logger = setup_logger(__name__)

# A ranked team and the key that separated it from the team above
RankedEntry = Tuple[TeamRecord, Optional[str]]


class TiebreakLadder:
    """Orders team records into standings.

    Ranking is deterministic up to the coin flip: the same records always
    produce the same order, and the coin flip only ever sees teams that
    every configured tiebreak left level.
    """

    def __init__(
        self,
        tiebreak_order: Optional[TiebreakOrder] = None,
        coin_flip: Optional[CoinFlipResolver] = None,
        score_precision: int = SCORE_PRECISION,
    ) -> None:
        """Initialize the ladder.

        Args
        ----
        tiebreak_order: Deterministic tiebreaks in priority order
        coin_flip: Resolver for the last resort; a fresh one by default
        score_precision: Decimal places kept when comparing summed scores
        """
        if tiebreak_order is None:
            tiebreak_order = list(DEFAULT_TIEBREAK_ORDER)
        self.tiebreak_order = validate_tiebreak_order_strict(tiebreak_order)
        self.coin_flip = coin_flip if coin_flip is not None else CoinFlipResolver()
        self.score_precision = score_precision

    # ========== Ranking ==========

    def rank(self, records: Iterable[TeamRecord]) -> List[Standing]:
        """Rank team records.

        Args:
            records: One record per team

        Returns:
            Standings in rank order, ranks 1..n with no ties
        """
        entries: List[RankedEntry] = []
        tied_ids = set()

        for index, group in enumerate(self.tie_groups(records)):
            if len(group) > 1:
                tied_ids.update(r.team_id for r in group)
                logger.debug(
                    "Tie on win share %.1f: %s",
                    group[0].win_share,
                    ", ".join(r.team_id for r in group),
                )
            ordered = self._resolve(group, 0)
            if index > 0:
                ordered[0] = (ordered[0][0], TB_WIN_SHARE)
            entries.extend(ordered)

        return [
            Standing(
                rank=position,
                record=record,
                separated_by=separated_by,
                tied_on_win_share=record.team_id in tied_ids,
            )
            for position, (record, separated_by) in enumerate(entries, start=1)
        ]

    def tie_groups(self, records: Iterable[TeamRecord]) -> List[List[TeamRecord]]:
        """Group records by win share, best first.

        Within a group records are ordered by team id.
        """
        ordered = sorted(records, key=lambda r: r.team_id)
        return self._group_by(ordered, lambda r: r.win_share)

    def _resolve(self, group: List[TeamRecord], stage: int) -> List[RankedEntry]:
        """Order a tied group starting at the given tiebreak."""
        if len(group) == 1:
            return [(group[0], None)]

        if stage >= len(self.tiebreak_order):
            return self._flip(group)

        key = self.tiebreak_order[stage]
        subgroups = self._split(key, group)
        if len(subgroups) == 1:
            logger.debug(
                "%s leaves %s tied", key, ", ".join(r.team_id for r in group)
            )
            return self._resolve(group, stage + 1)

        resolved: List[RankedEntry] = []
        for index, subgroup in enumerate(subgroups):
            ordered = self._resolve(subgroup, stage + 1)
            if index > 0:
                ordered[0] = (ordered[0][0], key)
            resolved.extend(ordered)
        return resolved

    def _flip(self, group: List[TeamRecord]) -> List[RankedEntry]:
        """Last resort: order the group by coin flip."""
        by_id = {r.team_id: r for r in group}
        order = self.coin_flip.order(by_id)
        return [
            (by_id[team_id], TB_COIN_FLIP if index > 0 else None)
            for index, team_id in enumerate(order)
        ]

    # ========== Tiebreaks ==========

    def _split(self, key: str, group: List[TeamRecord]) -> List[List[TeamRecord]]:
        """Split a tied group with one tiebreak, best sub-group first."""
        if key == TB_HEAD_TO_HEAD:
            return self._split_head_to_head(group)
        if key == TB_SCORE_DIFFERENTIAL:
            return self._group_by(group, lambda r: r.score_differential)
        if key == TB_VOTES:
            return self._group_by(group, lambda r: r.votes)
        raise ValueError(f"Unknown tiebreak: {key}")

    def _split_head_to_head(self, group: List[TeamRecord]) -> List[List[TeamRecord]]:
        """Apply head-to-head; it only decides between exactly two teams."""
        if len(group) != 2:
            return [group]

        first, second = group
        winner = self.head_to_head_winner(first, second)
        if winner is None:
            return [group]
        if winner is first:
            return [[first], [second]]
        return [[second], [first]]

    def head_to_head_winner(
        self, first: TeamRecord, second: TeamRecord
    ) -> Optional[TeamRecord]:
        """Winner of the single match between two teams.

        Args:
            first: One team's record
            second: The other team's record

        Returns:
            The winning record, or None when the teams never met, met more
            than once, or drew their only meeting
        """
        meetings = first.results_against(second.team_id)
        if len(meetings) != 1:
            return None

        share = meetings[0].win_share
        if share == WIN_SHARE:
            return first
        if share == LOSS_SHARE:
            return second
        return None

    def _group_by(
        self, records: List[TeamRecord], value: Callable[[TeamRecord], float]
    ) -> List[List[TeamRecord]]:
        """Group records on a rounded value, highest first.

        The sort is stable, so records keep their relative order inside
        each group.
        """
        def key(record: TeamRecord) -> float:
            return round(value(record), self.score_precision)

        ordered = sorted(records, key=key, reverse=True)
        return [list(group) for _, group in groupby(ordered, key=key)]
