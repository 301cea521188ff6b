"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class CommentSourceError(AdapterError):
    """Comment source request failed or returned an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class NetworkError(CommentSourceError):
    """Timeout or connection failure talking to the AppView."""

    pass


class AuthenticationError(CommentSourceError):
    """AppView rejected the credentials (401)."""

    def __init__(self, message: str):
        super().__init__(message, status_code=401)


class ServerError(CommentSourceError):
    """AppView failed with a 5xx status."""

    pass
