class JoblyError(Exception):
    """Base class for errors the API turns into client responses."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JoblyError):
    """Caller supplied structurally invalid input. Never retried."""

    status_code = 400


class NotFoundError(JoblyError):
    status_code = 404
