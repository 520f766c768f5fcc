"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    NotFoundError,
    ValidationError,
    ExternalServiceError,
    DatabaseError,

    # Container tracking
    ContainerNotFoundError,
    InvalidSearchTypeError,
)

__all__ = [
    # Base
    "AppError",
    "NotFoundError",
    "ValidationError",
    "ExternalServiceError",
    "DatabaseError",

    # Container tracking
    "ContainerNotFoundError",
    "InvalidSearchTypeError",
]
