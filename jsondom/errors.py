"""Exception types raised by the JSON DOM library."""


class JsonDomError(Exception):
    """Base class of all errors raised by this library."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MalformedJsonError(JsonDomError, ValueError):
    """Raised when unexpected characters are met while parsing JSON."""


class UnexpectedValueType(JsonDomError, TypeError):
    """Raised when a JSON value is accessed as a type it does not hold."""