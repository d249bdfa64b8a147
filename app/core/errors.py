import enum


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INVALID_RANGE = "invalid_range"
    INTERNAL = "internal"


CLIENT_KINDS = {ErrorKind.VALIDATION, ErrorKind.NOT_FOUND, ErrorKind.INVALID_RANGE}


class AppError(Exception):
    """Domain failure carrying a kind the error translator maps to a status code."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INTERNAL):
        super().__init__(message)
        self.message = message
        self.kind = kind

    @property
    def is_client_error(self) -> bool:
        return self.kind in CLIENT_KINDS


class ClientError(AppError):
    def __init__(self, message: str, kind: ErrorKind = ErrorKind.VALIDATION):
        super().__init__(message, kind)


class NotFoundError(ClientError):
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.NOT_FOUND)


class InvalidRangeError(ClientError):
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INVALID_RANGE)
