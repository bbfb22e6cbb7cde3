class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str = "Resource", id: str = ""):
        super().__init__(f"{resource} not found: {id}" if id else f"{resource} not found")


class ConflictError(AppError):
    """Raised when a write would duplicate a unique value."""

    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message)


class BadRequestError(AppError):
    """Raised when the request cannot be applied to the current state."""

    def __init__(self, message: str = "Bad request"):
        super().__init__(message)


class AuthenticationError(BadRequestError):
    """Raised when credentials are invalid."""

    def __init__(
        self,
        message: str = (
            "Sorry, your username or password was incorrect. "
            "Please double-check your credentials"
        ),
    ):
        super().__init__(message)
