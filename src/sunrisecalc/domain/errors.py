# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Error types raised by sunrise/sunset computation.

Polar day and polar night are results, not errors; see DiurnalResult.
"""


class OutOfRangeError(ValueError):
    """Raised when a latitude or longitude falls outside its valid range."""

    def __init__(self, field: str, value: float, minimum: float, maximum: float):
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{field} {value} is out of valid range [{minimum}, {maximum}]"
        )


class TimezoneLookupError(LookupError):
    """Raised when a timezone identifier cannot be resolved."""

    def __init__(self, timezone_name: str, reason: str = ""):
        self.timezone_name = timezone_name
        message = f"Unknown timezone '{timezone_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
