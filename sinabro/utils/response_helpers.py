"""
Response helper functions.

Pure utility functions for building standardized API responses.
These functions don't depend on Flask request context and can be used anywhere.
"""
from flask import jsonify


def build_error_response(message_en, message_ko, result_code, status_code=400, details=None):
    """
    Build standardized error response.

    Args:
        message_en: English error message
        message_ko: Korean error message
        result_code: Application result code
        status_code: HTTP status code (default 400)
        details: Optional dict with extra error information

    Returns:
        tuple: (json_response, status_code)

    Example:
        return build_error_response(
            "Invalid JSON data.",
            "JSON 데이터가 올바르지 않습니다.",
            "INVALID_JSON",
            400
        )
    """
    response = {
        "resultMessage": {
            "en": message_en,
            "ko": message_ko
        },
        "resultCode": result_code
    }
    if details:
        response["details"] = details
    return jsonify(response), status_code
