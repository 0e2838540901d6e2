"""Exceptions raised by the datesugar API."""


class InvalidArgumentError(ValueError):
    """Raised when a relative offset is not a positive integer."""

    def __init__(self, message: str = "Number should be greater or equal than 1") -> None:
        super().__init__(message)
