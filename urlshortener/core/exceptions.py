class ShortenerError(Exception):
    """Base class for errors the transport layer maps to an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ShortenerError):
    status_code = 400


class Conflict(ShortenerError):
    status_code = 409


class NotFound(ShortenerError):
    status_code = 404


class Gone(ShortenerError):
    status_code = 410
