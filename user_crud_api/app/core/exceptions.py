"""Domain errors raised by the service layer."""


class UserNotFoundError(LookupError):
    """Raised when an id or name does not reference a stored user.

    The message is returned to HTTP clients verbatim with status 404.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
