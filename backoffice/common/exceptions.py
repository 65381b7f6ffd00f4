from typing import Optional


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class MissingParameterError(AppError):
    """A required query parameter was not supplied."""
    def __init__(self, message: str):
        super().__init__(message)

class InvalidDateError(AppError):
    """A query parameter is present but is not a valid calendar date."""
    def __init__(self, parameter: str, value: str):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid date format provided for {parameter}: '{value}'. Expected YYYY-MM-DD.")

class DataAccessError(AppError):
    """
    The data store could not be reached, a query failed, or a query
    returned a result that could not be interpreted.

    Attributes:
        message: Client-facing description of the failed operation
        cause: The underlying exception
    """
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)

    @property
    def detail(self) -> str:
        return str(self.cause) if self.cause is not None else self.message
