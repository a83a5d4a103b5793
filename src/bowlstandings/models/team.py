"""Team data class."""

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
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Team:
    """A competing team.

    Teams are owned by the host tournament and never change once the
    tournament has started.

    Attributes
    ----------
    team_id : str
        Stable team identifier.
    name : str
        Display name.
    school : str, optional
        Institution the team represents.
    """

    team_id: str
    name: str
    school: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {"team_id": self.team_id, "name": self.name, "school": self.school}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary.

        Raises:
            KeyError: If the data carries neither ``team_id`` nor ``id``
        """
        team_id = data.get("team_id", data.get("id"))
        if team_id is None:
            raise KeyError("team_id")
        team_id = str(team_id)
        return cls(
            team_id=team_id,
            name=data.get("name", team_id),
            school=data.get("school"),
        )
