"""Match store boundary.

The host owns teams, matches and ballots. Stores hand the standings engine an
immutable snapshot of one tournament and are never written to by it.
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

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Union

from bowlstandings.constants import SNAPSHOT_FILE_EXTENSION
from bowlstandings.exceptions import FileLoadException, TournamentNotFoundException
from bowlstandings.models import TournamentSnapshot
from bowlstandings.utils import setup_logger

logger = setup_logger(__name__)


class MatchStore(ABC):
    """Source of tournament snapshots."""

    @abstractmethod
    def get_snapshot(self, tournament_id: str) -> TournamentSnapshot:
        """Return the current snapshot of a tournament.

        Raises:
            TournamentNotFoundException: If the tournament is unknown
        """
        pass


class InMemoryMatchStore(MatchStore):
    """Keeps snapshots in a dictionary; hosts replace a snapshot when it changes."""

    def __init__(self, snapshots: Iterable[TournamentSnapshot] = ()) -> None:
        self._snapshots: Dict[str, TournamentSnapshot] = {
            s.tournament_id: s for s in snapshots
        }

    def put_snapshot(self, snapshot: TournamentSnapshot) -> None:
        self._snapshots[snapshot.tournament_id] = snapshot

    def get_snapshot(self, tournament_id: str) -> TournamentSnapshot:
        try:
            return self._snapshots[tournament_id]
        except KeyError:
            raise TournamentNotFoundException(
                f"Tournament not found: {tournament_id}"
            ) from None


class JsonMatchStore(MatchStore):
    """Reads snapshots from ``<directory>/<tournament_id>.json`` files."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def get_snapshot(self, tournament_id: str) -> TournamentSnapshot:
        path = self.directory / f"{tournament_id}{SNAPSHOT_FILE_EXTENSION}"
        if not path.exists():
            raise TournamentNotFoundException(f"Tournament not found: {tournament_id}")
        snapshot = load_snapshot(path)
        if snapshot.tournament_id != tournament_id:
            raise FileLoadException(
                f"{path} holds tournament {snapshot.tournament_id}, "
                f"expected {tournament_id}"
            )
        return snapshot


def load_snapshot(path: Union[str, Path]) -> TournamentSnapshot:
    """Load a tournament snapshot from a JSON file.

    Args:
        path: Path to the snapshot file

    Returns:
        The snapshot

    Raises:
        FileLoadException: If the file cannot be read or parsed
    """
    snapshot_path = Path(path)
    try:
        with open(snapshot_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Failed to load snapshot {snapshot_path}: {e}") from e

    try:
        snapshot = TournamentSnapshot.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise FileLoadException(f"Invalid snapshot {snapshot_path}: {e}") from e

    logger.info(
        "Loaded snapshot %s: %d teams, %d matches",
        snapshot.tournament_id,
        len(snapshot.teams),
        len(snapshot.matches),
    )
    return snapshot


def save_snapshot(snapshot: TournamentSnapshot, path: Union[str, Path]) -> None:
    """Write a tournament snapshot to a JSON file."""
    snapshot_path = Path(path)
    with open(snapshot_path, "w", encoding="utf-8") as f:
        json.dump(snapshot.to_dict(), f, indent=2)
    logger.debug("Saved snapshot %s to %s", snapshot.tournament_id, snapshot_path)
