"""Domain exceptions."""

from __future__ import annotations


class InvalidColorError(ValueError):
    """Raised when a color string is not a valid hex color."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class IncompleteConfigurationError(ValueError):
    """Raised when share state lacks fields needed for a full configuration.

    Attributes:
        fields: Names (wire keys) of the missing or unrecognised fields.
    """

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(
            f"Incomplete design configuration: {', '.join(fields)}"
        )
