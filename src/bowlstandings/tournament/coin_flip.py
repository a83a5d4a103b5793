"""Coin flip resolution for teams no tiebreak can separate."""

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
from typing import Iterable, List, Optional

from bowlstandings.models import CoinFlipDraw
from bowlstandings.utils import setup_logger

logger = setup_logger(__name__)

SEED_BITS = 32


class CoinFlipResolver:
    """Puts a group of tied teams into a uniformly random order.

    Every draw is kept in ``draws`` so the host can log or replay it. The
    random source can be injected; without one a seed is drawn from the
    operating system and recorded. Rerunning a computation with
    ``CoinFlipResolver(seed=draw.seed)`` replays all of its draws.
    """

    def __init__(
        self, rng: Optional[random.Random] = None, seed: Optional[int] = None
    ) -> None:
        if rng is not None:
            self.random = rng
            self.seed = seed
        else:
            if seed is None:
                seed = random.SystemRandom().getrandbits(SEED_BITS)
            self.random = random.Random(seed)
            self.seed = seed
        self.draws: List[CoinFlipDraw] = []

    def order(self, team_ids: Iterable[str]) -> List[str]:
        """Draw an order for the tied teams.

        The group is sorted by team id before shuffling so the result only
        depends on the random source, never on the input order.

        Args:
            team_ids: Ids of the tied teams

        Returns:
            The team ids, best first
        """
        canonical = sorted(team_ids)
        drawn = list(canonical)
        self.random.shuffle(drawn)

        draw = CoinFlipDraw(team_ids=tuple(canonical), order=tuple(drawn), seed=self.seed)
        self.draws.append(draw)

        logger.info(
            "Coin flip among %s: %s (seed %s)",
            ", ".join(canonical),
            " > ".join(drawn),
            self.seed,
        )
        return drawn
