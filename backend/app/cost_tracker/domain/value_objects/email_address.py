"""EmailAddress value object for notification targets."""

import re
from dataclasses import dataclass


_EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)


@dataclass(frozen=True)
class EmailAddress:
    """Immutable value object representing a validated email address.

    Attributes:
        value: The validated email address string.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format after initialization."""
        if not isinstance(self.value, str) or not _EMAIL_PATTERN.match(self.value.strip()):
            raise ValueError(f"Invalid email address: {self.value}")

    def __str__(self) -> str:
        return self.value.strip()
