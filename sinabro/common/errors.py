"""
Application-wide error handler.

Registered on the Flask app for ``Exception`` so every error leaving a view
is turned into the standard error envelope.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .exceptions import SinabroError, ValidationError, NotFoundError, DatabaseError
from ..utils.response_helpers import build_error_response

logger = logging.getLogger(__name__)

_HTTP_MESSAGES_KO = {
    400: "잘못된 요청입니다.",
    404: "요청한 리소스를 찾을 수 없습니다.",
    405: "허용되지 않은 메서드입니다.",
    415: "지원하지 않는 미디어 타입입니다.",
}


def _status_for(error: SinabroError) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    return 500


def handle_exception(e):
    if isinstance(e, SinabroError):
        status_code = _status_for(e)
        if isinstance(e, DatabaseError):
            logger.error(f"[DB] {e.code}: {e.message}")
        else:
            logger.info(f"[REQUEST] {e.code}: {e.message}")
        return build_error_response(
            e.message,
            e.message,
            e.code,
            status_code,
            details=e.details
        )

    if isinstance(e, SQLAlchemyError):
        logger.error(f"[DB] Database operation failed: {str(e)}")
        return build_error_response(
            "A database error occurred.",
            "데이터베이스 오류가 발생했습니다.",
            "DATABASE_ERROR",
            500
        )

    if isinstance(e, HTTPException):
        response, status_code = build_error_response(
            e.description or e.name,
            _HTTP_MESSAGES_KO.get(e.code, "요청을 처리할 수 없습니다."),
            e.name.upper().replace(" ", "_"),
            e.code or 500
        )
        # Keep werkzeug's extra headers (e.g. Allow on 405)
        for name, value in e.get_headers():
            if name.lower() != "content-type":
                response.headers[name] = value
        return response, status_code

    logger.exception(f"Unhandled exception: {str(e)}")
    return build_error_response(
        "Internal server error.",
        "서버 내부 오류가 발생했습니다.",
        "INTERNAL_SERVER_ERROR",
        500
    )
