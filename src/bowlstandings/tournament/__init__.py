"""Standings engine for Bowl Standings.

This package turns completed matches and their judge ballots into ranked
standings, with each step in its own module.
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

from bowlstandings.tournament.ballot_resolver import BallotResolver
from bowlstandings.tournament.coin_flip import CoinFlipResolver
from bowlstandings.tournament.record_accumulator import RecordAccumulator
from bowlstandings.tournament.standings import StandingsService, compute_standings
from bowlstandings.tournament.tiebreak_ladder import TiebreakLadder

__all__ = [
    "BallotResolver",
    "CoinFlipResolver",
    "RecordAccumulator",
    "StandingsService",
    "TiebreakLadder",
    "compute_standings",
]
