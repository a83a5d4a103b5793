"""Tournament snapshot data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .match import Match
from .team import Team


@dataclass(frozen=True)
class TournamentSnapshot:
    """Immutable view of one tournament handed over by the host.

    Attributes
    ----------
    tournament_id : str
        Tournament identifier.
    teams : tuple of Team
        Every registered team, including teams without matches.
    matches : tuple of Match
        Matches in any state; only completed ones are used.
    panel_size : int, optional
        Judges per match as configured for the tournament.
    name : str
        Display name.
    """

    tournament_id: str
    teams: Tuple[Team, ...] = ()
    matches: Tuple[Match, ...] = ()
    panel_size: Optional[int] = None
    name: str = "Untitled Tournament"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize snapshot to dictionary."""
        return {
            "tournament_id": self.tournament_id,
            "name": self.name,
            "panel_size": self.panel_size,
            "teams": [t.to_dict() for t in self.teams],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSnapshot":
        """Deserialize snapshot from dictionary."""
        return cls(
            tournament_id=str(data["tournament_id"]),
            name=data.get("name", "Untitled Tournament"),
            panel_size=data.get("panel_size"),
            teams=tuple(Team.from_dict(t) for t in data.get("teams", [])),
            matches=tuple(Match.from_dict(m) for m in data.get("matches", [])),
        )
