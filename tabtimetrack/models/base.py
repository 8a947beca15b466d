"""Base model for all data models in tabtimetrack.

This module provides a base Pydantic model with the configuration shared
by the parsed timesheet records and the aggregation results.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Arbitrary types support for Fraction rates and amounts
    - Rejection of unknown fields

    Subclasses that must not change after creation (parsed lines, tasks,
    bucket codes) set ``frozen=True`` in their own ``model_config``.

    Example:
        >>> class Entry(BaseDataModel):
        ...     name: str
        ...     minutes: int
        >>> entry = Entry(name="review", minutes=30)
        >>> entry.model_dump()
        {'name': 'review', 'minutes': 30}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Fraction
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        extra="forbid",
        frozen=False,
    )
