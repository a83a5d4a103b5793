"""StandingsConfig data class."""

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
from typing import Any, Dict, List, Optional

from bowlstandings.constants import DEFAULT_TIEBREAK_ORDER, SCORE_PRECISION
from bowlstandings.exceptions import InvalidConfigurationException
from bowlstandings.utils.validation import (
    validate_panel_size_strict,
    validate_tiebreak_order_strict,
)


@dataclass
class StandingsConfig:
    """Standings computation settings.

    Attributes
    ----------
    panel_size : int, optional
        Number of judges per match. When None the tournament snapshot
        must supply it.
    simulate_third_judge : bool
        Add a simulated third ballot (the mean of both judges) to matches
        judged by a two-judge panel.
    tiebreak_order : list of str
        Deterministic tiebreaks in priority order. The coin flip always
        follows them.
    score_precision : int
        Decimal places kept when comparing summed scores.
    """

    panel_size: Optional[int] = None
    simulate_third_judge: bool = False
    tiebreak_order: List[str] = field(
        default_factory=lambda: list(DEFAULT_TIEBREAK_ORDER)
    )
    score_precision: int = SCORE_PRECISION

    def validate(self) -> None:
        """Check the settings that do not depend on the tournament.

        Raises:
            InvalidConfigurationException: If any setting is invalid
        """
        if self.panel_size is not None:
            validate_panel_size_strict(self.panel_size)
        validate_tiebreak_order_strict(self.tiebreak_order)
        if not isinstance(self.simulate_third_judge, bool):
            raise InvalidConfigurationException(
                f"simulate_third_judge must be true or false, got {self.simulate_third_judge!r}"
            )
        if (
            isinstance(self.score_precision, bool)
            or not isinstance(self.score_precision, int)
            or self.score_precision < 0
        ):
            raise InvalidConfigurationException(
                f"Score precision must be a non-negative integer, got {self.score_precision!r}"
            )

    def resolve_panel_size(self, snapshot_panel_size: Optional[int]) -> int:
        """Settle the panel size for one tournament.

        Args:
            snapshot_panel_size: Panel size recorded with the tournament

        Returns:
            The panel size to use

        Raises:
            MissingConfigurationException: If neither source gives a size
            InvalidConfigurationException: If the two sources disagree
        """
        if self.panel_size is None:
            return validate_panel_size_strict(snapshot_panel_size)

        configured = validate_panel_size_strict(self.panel_size)
        if snapshot_panel_size is not None:
            recorded = validate_panel_size_strict(snapshot_panel_size)
            if recorded != configured:
                raise InvalidConfigurationException(
                    f"Configured panel size {configured} does not match the "
                    f"tournament's panel size {recorded}"
                )
        return configured

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "panel_size": self.panel_size,
            "simulate_third_judge": self.simulate_third_judge,
            "tiebreak_order": self.tiebreak_order,
            "score_precision": self.score_precision,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StandingsConfig":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: If the data is not a mapping
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Configuration must be a JSON object, got {type(data).__name__}"
            )
        return cls(
            panel_size=data.get("panel_size"),
            simulate_third_judge=data.get("simulate_third_judge", False),
            tiebreak_order=data.get("tiebreak_order", list(DEFAULT_TIEBREAK_ORDER)),
            score_precision=data.get("score_precision", SCORE_PRECISION),
        )
