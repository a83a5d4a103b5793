"""Standings computation - the entry point hosts call.

This module coordinates the ballot resolver, the record accumulator and the
tiebreak ladder into a single pure computation over a tournament snapshot.
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

import random
from typing import Dict, List, Optional

from bowlstandings.exceptions import (
    DataIntegrityException,
    InvalidConfigurationException,
)
from bowlstandings.models import (
    ExcludedMatch,
    Match,
    MatchOutcome,
    RoundSummary,
    StandingsConfig,
    StandingsReport,
    TournamentSnapshot,
)
from bowlstandings.store import MatchStore
from bowlstandings.type_hints import StandingsListener
from bowlstandings.utils import setup_logger
from bowlstandings.utils.validation import validate_panel_size_strict

from .ballot_resolver import BallotResolver
from .coin_flip import CoinFlipResolver
from .record_accumulator import RecordAccumulator
from .tiebreak_ladder import TiebreakLadder

logger = setup_logger(__name__)


def compute_standings(
    snapshot: TournamentSnapshot,
    config: Optional[StandingsConfig] = None,
    through_round: Optional[int] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> StandingsReport:
    """Compute standings for one tournament snapshot.

    Completed matches are resolved and folded into team records, then
    ranked. A completed match that fails an integrity check is left out
    and listed in the report; a configuration problem stops the whole
    computation.

    Args:
        snapshot: Teams and matches as supplied by the host
        config: Computation settings, defaults when omitted
        through_round: Only use matches up to and including this round
        rng: Random source for coin flips
        seed: Seed for the coin flip random source

    Returns:
        The standings report

    Raises:
        ConfigurationException: If the panel size or tiebreak order is
            missing, invalid or inconsistent
        DuplicateTeamException: If the snapshot lists a team id twice
    """
    if config is None:
        config = StandingsConfig()
    config.validate()
    if through_round is not None and through_round < 1:
        raise InvalidConfigurationException(
            f"Round bound must be at least 1, got {through_round}"
        )

    panel_size = config.resolve_panel_size(snapshot.panel_size)
    eligible = _eligible_matches(snapshot.matches, through_round)
    _check_panel_consistency(eligible, panel_size)

    resolver = BallotResolver(panel_size, simulate_third_judge=config.simulate_third_judge)
    accumulator = RecordAccumulator()
    coin_flip = CoinFlipResolver(rng=rng, seed=seed)
    ladder = TiebreakLadder(
        tiebreak_order=config.tiebreak_order,
        coin_flip=coin_flip,
        score_precision=config.score_precision,
    )

    records = accumulator.accumulate(snapshot.teams, [])
    outcomes: List[MatchOutcome] = []
    excluded: List[ExcludedMatch] = []

    for match in eligible:
        try:
            outcome = resolver.resolve(match)
            accumulator.add_outcome(records, outcome)
        except DataIntegrityException as e:
            logger.warning("Excluding match %s from standings: %s", match.match_id, e)
            excluded.append(
                ExcludedMatch(
                    match_id=match.match_id,
                    round_number=match.round_number,
                    reason=str(e),
                )
            )
            continue
        outcomes.append(outcome)

    standings = ladder.rank(records.values())

    report = StandingsReport(
        tournament_id=snapshot.tournament_id,
        through_round=through_round,
        standings=standings,
        excluded_matches=excluded,
        coin_flips=list(coin_flip.draws),
        matches_used=len(outcomes),
        round_summaries=_summarize_rounds(snapshot.matches, outcomes, through_round),
        match_results=outcomes,
    )

    logger.info(
        "Computed standings for %s: %d teams, %d matches used, %d excluded, %d coin flips",
        snapshot.tournament_id,
        len(standings),
        report.matches_used,
        len(excluded),
        len(report.coin_flips),
    )
    return report


def _eligible_matches(
    matches: List[Match], through_round: Optional[int]
) -> List[Match]:
    """Completed matches within the round bound, in round order."""
    eligible = [
        m
        for m in matches
        if m.is_completed and (through_round is None or m.round_number <= through_round)
    ]
    skipped = len(matches) - len(eligible)
    if skipped:
        logger.debug("Skipping %d matches that are not completed or out of range", skipped)
    return sorted(eligible, key=lambda m: (m.round_number, m.match_id))


def _check_panel_consistency(matches: List[Match], panel_size: int) -> None:
    """Every match that records its own panel size must agree with the tournament.

    Raises:
        InvalidConfigurationException: On the first disagreement
    """
    for match in matches:
        if match.panel_size is None:
            continue
        assigned = validate_panel_size_strict(match.panel_size)
        if assigned != panel_size:
            raise InvalidConfigurationException(
                f"Match {match.match_id} has {assigned} judges assigned, "
                f"but the tournament panel size is {panel_size}"
            )


def _summarize_rounds(
    matches: List[Match], outcomes: List[MatchOutcome], through_round: Optional[int]
) -> List[RoundSummary]:
    """Per-round match counts, in round order."""
    summaries: Dict[int, RoundSummary] = {}
    for match in matches:
        if through_round is not None and match.round_number > through_round:
            continue
        summary = summaries.setdefault(
            match.round_number, RoundSummary(round_number=match.round_number)
        )
        summary.total_matches += 1
        if match.is_completed:
            summary.completed_matches += 1
    for outcome in outcomes:
        summaries[outcome.round_number].matches_used += 1
    return [summaries[number] for number in sorted(summaries)]


class StandingsService:
    """Host-facing standings operation.

    The service reads snapshots from a match store and recomputes the
    standings from scratch on every call; it keeps no state between calls
    apart from its listeners. Listeners receive every computed report, which
    is where a host attaches its broadcast layer.
    """

    def __init__(
        self,
        store: MatchStore,
        config: Optional[StandingsConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize the service.

        Args
        ----
        store: Source of tournament snapshots
        config: Computation settings, defaults when omitted
        rng: Random source for coin flips, shared by all computations
        """
        self.store = store
        self.config = config if config is not None else StandingsConfig()
        self.rng = rng
        self._listeners: List[StandingsListener] = []

    def add_listener(self, listener: StandingsListener) -> None:
        """Register a callback for computed reports."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StandingsListener) -> bool:
        """Unregister a callback.

        Returns:
            True if removed, False if it was not registered
        """
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    def compute_standings(
        self,
        tournament_id: str,
        through_round: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> StandingsReport:
        """Compute the standings of one tournament.

        Args:
            tournament_id: Tournament to rank
            through_round: Only use matches up to and including this round
            seed: Seed for the coin flips of this computation

        Returns:
            The standings report

        Raises:
            TournamentNotFoundException: If the store has no such tournament
            ConfigurationException: If the configuration is missing or inconsistent
        """
        snapshot = self.store.get_snapshot(tournament_id)
        report = compute_standings(
            snapshot,
            config=self.config,
            through_round=through_round,
            rng=self.rng,
            seed=seed,
        )
        self._notify(report)
        return report

    def _notify(self, report: StandingsReport) -> None:
        for listener in list(self._listeners):
            try:
                listener(report)
            except Exception as e:
                logger.error(
                    "Standings listener %r failed for %s: %s",
                    listener,
                    report.tournament_id,
                    e,
                    exc_info=True,
                )
