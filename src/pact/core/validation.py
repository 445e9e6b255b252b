"""Argument checks run before calling the API.

Every rule raises `InvalidArgumentError` with a readable message; no
request is sent once a rule fails.
"""

from __future__ import annotations

from pact.core.domain.models import SortDirection
from pact.core.errors import InvalidArgumentError


class Validator:
    """Primitive rules shared by the services."""

    def check(self, condition: bool, message: str) -> None:
        """Fail with `message` when `condition` holds."""

        if condition:
            raise InvalidArgumentError(message)

    def not_empty(self, value: str, message: str) -> None:
        self.check(len(value) == 0, message)

    def between(self, value: int | None, low: int, high: int, name: str = "Value") -> None:
        """Accept `None` (optional parameter); otherwise require an int in `[low, high]`."""

        if value is None:
            return
        self.check(
            isinstance(value, bool) or not isinstance(value, int),
            f"{name} must be an integer, got {value!r}",
        )
        self.check(
            value < low or value > high,
            f"{name} must be between {low} and {high}, got {value}",
        )

    def sort(self, value: str | SortDirection | None) -> None:
        if value is None:
            return
        raw = value.value if isinstance(value, SortDirection) else value
        allowed = SortDirection.values()
        self.check(
            raw not in allowed,
            f"Sort direction must be one of: {', '.join(allowed)}; got '{raw}'",
        )
