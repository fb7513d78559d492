"""Exceptions raised by the case converters."""


class InvalidArgumentError(TypeError):
    """Raised when a converter receives a value that is not a string."""

    def __init__(self, message: str = "Input must be a string"):
        super().__init__(message)
