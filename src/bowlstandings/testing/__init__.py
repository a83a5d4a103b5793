"""Testing helpers for Bowl Standings."""

from bowlstandings.testing.rtg import (
    BallotPattern,
    RandomTournamentGenerator,
    RTGConfig,
)

__all__ = ["BallotPattern", "RandomTournamentGenerator", "RTGConfig"]
