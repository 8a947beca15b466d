"""Aggregation models.

This module defines the bucket key (Code) and the per-bucket accumulator
(SumLine) produced by the summary aggregator.
"""

import datetime as dt
from fractions import Fraction
from typing import List, Optional, Tuple

from pydantic import ConfigDict, Field

from tabtimetrack.calculators.time_utils import duration_to_hours, round_half_even
from tabtimetrack.models.base import BaseDataModel

# Hours are billed to the cent.
HOURS_PRECISION = 2


class Code(BaseDataModel):
    """Composite key identifying one aggregation bucket.

    Two codes are equal when both the type tag and the value match. Codes
    are frozen and therefore hashable, so they can key a dict.

    Attributes:
        type: Small integer tag (day, week, month, year, all, breakout, ...)
        value: Bucket value within the type (e.g. 20230801 for a day)

    Example:
        >>> Code(type=1, value=20230801) == Code(type=1, value=20230801)
        True
    """

    model_config = ConfigDict(frozen=True)

    type: int
    value: int

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Ordering key: (type, value)."""
        return (self.type, self.value)


class SumLine(BaseDataModel):
    """Mutable accumulator for one bucket.

    Created on the first contribution to its code, updated by every further
    contributing line, then finalized (references and descriptions sorted
    and de-duplicated) once all lines are processed. Hours and amount are
    only computed on demand.

    Attributes:
        code: Bucket key
        name: Human label from the coder
        duration: Running total duration
        hours: Rounded hours, set by compute_hours()
        amount: Billing amount, set by compute_amount()
        reference: Task references seen in this bucket
        description: Task descriptions seen in this bucket
    """

    code: Code
    name: str = ""
    duration: dt.timedelta = dt.timedelta(0)
    hours: Optional[Fraction] = None
    amount: Optional[Fraction] = None
    reference: List[str] = Field(default_factory=list)
    description: List[str] = Field(default_factory=list)

    def compute_hours(self) -> Fraction:
        """Convert the accumulated duration to hours.

        The exact hour count is rounded to two decimal places using
        round-half-to-even.

        Returns:
            The rounded hours, also stored on ``hours``

        Example:
            >>> line = SumLine(
            ...     code=Code(type=5, value=0),
            ...     duration=dt.timedelta(hours=1, minutes=30),
            ... )
            >>> line.compute_hours()
            Fraction(3, 2)
        """
        self.hours = round_half_even(
            duration_to_hours(self.duration), HOURS_PRECISION
        )
        return self.hours

    def compute_amount(self, rate: Fraction) -> Fraction:
        """Multiply the hourly rate by the rounded hours.

        Hours are computed first when they have not been computed yet. The
        result is exact and not rounded again.

        Args:
            rate: Hourly rate

        Returns:
            The amount, also stored on ``amount``
        """
        if self.hours is None:
            self.compute_hours()
        self.amount = rate * self.hours
        return self.amount
