"""
Middleware package for Flask request/response interceptors.
"""

from .validation_middleware import (
    get_json_or_error,
    parse_body,
    validate_body
)

__all__ = [
    'get_json_or_error',
    'parse_body',
    'validate_body'
]
