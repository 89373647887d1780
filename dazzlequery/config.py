"""Configuration for DazzleQuery searches.

This module defines how callers specify what a guarded depth-first search
should do: whether to descend into children, how many results to stop at,
and whether to protect against revisiting nodes.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Optional


# Sentinel accepted anywhere a limit is expected
UNLIMITED = math.inf


class SearchConfigError(ValueError):
    """Raised when search arguments are inconsistent or of the wrong type."""
    pass


@dataclass
class SearchConfig:
    """Complete configuration for a guarded depth-first search.

    The front-ends in dazzlequery.api build one of these from their
    arguments and validate it before any node is touched.
    """

    recurse: bool = True               # Descend into children
    limit: Optional[Any] = None        # Max results (None/inf = unbounded)
    guard_revisits: bool = True        # Track expanded nodes per call

    def __post_init__(self):
        # Normalise infinity so the engine only has to check for None
        if isinstance(self.limit, float) and self.limit == UNLIMITED:
            self.limit = None

    def is_unbounded(self) -> bool:
        """Check if no result limit is set."""
        return self.limit is None

    def exhausted(self) -> bool:
        """Check if the limit leaves no room for any result.

        A search with an exhausted limit returns nothing without
        evaluating a single predicate.
        """
        return self.limit is not None and self.limit <= 0

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.recurse, bool):
            errors.append(f"recurse must be a bool, got {type(self.recurse).__name__}")

        if not isinstance(self.guard_revisits, bool):
            errors.append(
                f"guard_revisits must be a bool, got {type(self.guard_revisits).__name__}"
            )

        # bool is an int subclass but True as a limit is almost certainly a
        # swapped argument
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                errors.append(
                    f"limit must be an int, None or math.inf, got {self.limit!r}"
                )

        return errors

    def raise_if_invalid(self) -> None:
        """Raise SearchConfigError listing every validation problem."""
        errors = self.validate()
        if errors:
            raise SearchConfigError(f"Invalid search configuration: {'; '.join(errors)}")
