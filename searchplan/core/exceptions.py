__all__ = [
    "BaseError",
    "BadRequestError",
    "DuplicateFieldError",
    "NotFoundError",
    "NotSupportedError",
    "RequestFinalizedError",
    "SemanticCheckError",
]


class BaseError(Exception):
    status_code: int


class BadRequestError(BaseError):
    status_code = 400


class NotFoundError(BaseError):
    status_code = 404


class NotSupportedError(BaseError):
    status_code = 415


class SemanticCheckError(BadRequestError):
    """Query is well formed but cannot be compiled into a request."""


class DuplicateFieldError(SemanticCheckError):
    """Field registered twice where the backend requires unique fields."""

    field: str

    def __init__(self, field: str, section: str):
        self.field = field
        super().__init__(f"Duplicate field {field} in {section}")


class RequestFinalizedError(BadRequestError):
    """Push-down attempted after the request was built."""
