"""
Errors.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict

from pydantic import BaseModel


class ErrorCode(int, Enum):
    """
    Error codes.
    """

    UNKNOWN_ERROR = 0
    INVALID_STATE = 1
    EMPTY_FROM_CLAUSE = 2
    NOT_A_JOIN = 3
    CROSS_JOIN_CONDITION = 4


class SQLBuilderError(BaseModel):
    """
    An error.
    """

    code: ErrorCode
    message: str
    debug: Optional[Dict[str, Any]] = None
    context: str = ""

    def __str__(self) -> str:
        """
        Format the error nicely.
        """
        context = f" from `{self.context}`" if self.context else ""
        return f"{self.message}{context} (error code: {int(self.code)})"


class ExceptionDict(TypedDict):
    """
    A serializable dictionary describing an exception.
    """

    message: str
    errors: List[Dict[str, Any]]


class SQLBuilderException(Exception):
    """
    Base class for errors.
    """

    message: str = "An unknown error occurred"
    errors: List[SQLBuilderError]

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[SQLBuilderError]] = None,
    ):
        self.errors = errors or []
        self.message = message or "\n".join(error.message for error in self.errors)

        super().__init__(self.message)

    def to_dict(self) -> ExceptionDict:
        """
        Convert to dict.
        """
        return {
            "message": self.message,
            "errors": [error.model_dump() for error in self.errors],
        }

    def __str__(self) -> str:
        """
        Format the exception nicely.
        """
        return self.message


class SQLBuilderInvalidStateException(SQLBuilderException):
    """
    Raised when a builder operation is not valid for the statement's current state.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        code: ErrorCode = ErrorCode.INVALID_STATE,
        context: str = "",
    ):
        errors = [
            SQLBuilderError(code=code, message=message or self.message, context=context),
        ]
        super().__init__(message=message, errors=errors)
