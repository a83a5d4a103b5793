"""Validation utilities for Bowl Standings.

This module provides reusable validation functions with consistent error handling.
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

import math
from typing import Any, Iterable, List, Optional

from bowlstandings.constants import CONFIGURABLE_TIEBREAKS, TB_COIN_FLIP
from bowlstandings.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Panel Size Validation ==========


def validate_panel_size(panel_size: Any) -> ValidationResult:
    """Validate a judge panel size.

    Accepts positive integers and integral strings ("3").

    Args:
        panel_size: Panel size to validate

    Returns:
        ValidationResult with the panel size as an int
    """
    if panel_size is None or (isinstance(panel_size, str) and not panel_size.strip()):
        return ValidationResult(
            is_valid=False,
            error_message="Judge panel size is required",
        )

    if isinstance(panel_size, bool):
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid judge panel size: {panel_size!r}",
        )

    try:
        value = int(str(panel_size).strip())
    except ValueError:
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid judge panel size: {panel_size!r}",
        )

    if value < 1:
        return ValidationResult(
            is_valid=False,
            error_message=f"Judge panel size must be at least 1, got {value}",
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_panel_size_strict(panel_size: Any) -> int:
    """Validate a panel size and raise if invalid.

    Args:
        panel_size: Panel size to validate

    Returns:
        The panel size as an int

    Raises:
        MissingConfigurationException: If no panel size was given
        InvalidConfigurationException: If the panel size is not a positive integer
    """
    result = validate_panel_size(panel_size)
    if result.is_valid:
        return result.sanitized_value
    if panel_size is None or (isinstance(panel_size, str) and not panel_size.strip()):
        raise MissingConfigurationException(result.error_message)
    raise InvalidConfigurationException(result.error_message)


# ========== Score Validation ==========


def validate_score(score: Any) -> ValidationResult:
    """Validate a judge's numeric score.

    Scores are opaque real numbers; only NaN, infinities and
    non-numeric values are rejected.
    """
    if isinstance(score, bool):
        return ValidationResult(is_valid=False, error_message=f"Invalid score: {score!r}")

    try:
        value = float(score)
    except (TypeError, ValueError):
        return ValidationResult(is_valid=False, error_message=f"Invalid score: {score!r}")

    if not math.isfinite(value):
        return ValidationResult(
            is_valid=False, error_message=f"Score must be finite, got {score!r}"
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


# ========== Tiebreak Order Validation ==========


def validate_tiebreak_order(order: Optional[Iterable[str]]) -> ValidationResult:
    """Validate a configured tiebreak order.

    The order may contain each deterministic tiebreak at most once. The coin
    flip is implicit and always runs last, so it may not appear.

    Args:
        order: Tiebreak keys in priority order

    Returns:
        ValidationResult with the order as a list
    """
    if order is None:
        return ValidationResult(
            is_valid=False, error_message="Tiebreak order is required"
        )

    if isinstance(order, str):
        return ValidationResult(
            is_valid=False,
            error_message=f"Tiebreak order must be a list of keys, got {order!r}",
        )

    try:
        keys: List[str] = list(order)
    except TypeError:
        return ValidationResult(
            is_valid=False,
            error_message=f"Tiebreak order must be a list of keys, got {order!r}",
        )

    for key in keys:
        if key == TB_COIN_FLIP:
            return ValidationResult(
                is_valid=False,
                error_message="The coin flip is always the last tiebreak and cannot be configured",
            )
        if key not in CONFIGURABLE_TIEBREAKS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Unknown tiebreak: {key!r}",
            )

    duplicates = sorted({key for key in keys if keys.count(key) > 1})
    if duplicates:
        return ValidationResult(
            is_valid=False,
            error_message=f"Duplicate tiebreaks: {', '.join(duplicates)}",
        )

    return ValidationResult(is_valid=True, sanitized_value=keys)


def validate_tiebreak_order_strict(order: Optional[Iterable[str]]) -> List[str]:
    """Validate a tiebreak order and raise if invalid.

    Raises:
        InvalidConfigurationException: If the order is invalid
    """
    result = validate_tiebreak_order(order)
    if not result.is_valid:
        raise InvalidConfigurationException(result.error_message)
    return result.sanitized_value
