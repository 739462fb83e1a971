class AdminError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(AdminError):
    """Requested resource does not exist."""


class UpstreamError(AdminError):
    """The backend answered with a non-2xx status or could not be reached."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(message)
