"""
Validation middleware for Flask request data validation.
"""
from functools import wraps

from flask import request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..common.exceptions import SchemaValidationError
from ..utils.response_helpers import build_error_response


def get_json_or_error(request):
    """
    Get JSON from request or return error response.

    Args:
        request: Flask request object

    Returns:
        tuple: (data, error_response) where error_response is None if successful
    """
    data = request.get_json(silent=True)
    if data is None:
        return None, build_error_response(
            "Invalid JSON data.",
            "JSON 데이터가 올바르지 않습니다.",
            "INVALID_JSON",
            400
        )
    return data, None


def parse_body(schema: type[BaseModel], data):
    """
    Validate request data against a pydantic schema.

    Raises:
        SchemaValidationError: with one entry per offending field
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "body",
                "message": err["msg"]
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Invalid {schema.__name__} payload",
            details={"errors": errors}
        ) from e


def validate_body(schema: type[BaseModel]):
    """
    Decorator that parses the JSON body into ``schema`` and passes it to the
    view as the ``payload`` keyword argument.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            data, error_response = get_json_or_error(request)
            if error_response:
                return error_response

            kwargs["payload"] = parse_body(schema, data)
            return func(*args, **kwargs)
        return wrapper
    return decorator
