"""
Custom Exception Hierarchy for Sinabro
======================================

Provides specific exceptions for different error scenarios,
replacing generic Exception catches for better error handling.

Usage:
    from sinabro.common.exceptions import (
        DatabaseError,
        NotFoundError,
        SchemaValidationError
    )

    try:
        place = repository.get_by_id(place_id)
    except SQLAlchemyError as e:
        raise DatabaseError("Failed to fetch place") from e
"""


class SinabroError(Exception):
    """
    Base exception for all Sinabro errors.

    Attributes:
        message: Human-readable error message
        code: Error code for API responses
        details: Additional error details
    """

    def __init__(self, message: str, code: str = "SB000", details: dict = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


# ============================================
# Database Exceptions
# ============================================

class DatabaseError(SinabroError):
    """Base exception for database-related errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="DB001", details=details)


# ============================================
# Validation Exceptions
# ============================================

class ValidationError(SinabroError):
    """Input validation failed."""

    def __init__(self, message: str, field: str = None, details: dict = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, code="VAL001", details=details)


class SchemaValidationError(ValidationError):
    """Request body does not match the expected schema."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, details=details)
        self.code = "VAL002"


# ============================================
# Resource Exceptions
# ============================================

class NotFoundError(SinabroError):
    """Resource not found."""

    def __init__(self, resource: str, identifier: str = None, details: dict = None):
        message = f"{resource} not found"
        if identifier:
            message = f"{resource} with id '{identifier}' not found"
        details = details or {}
        details["resource"] = resource
        if identifier:
            details["identifier"] = identifier
        super().__init__(message, code="NF001", details=details)
