# Shared API response utilities for Lambda handlers
import logging
from http import HTTPStatus
from typing import Dict, Optional


def api_response(status_code: int, body: str = "", headers: Optional[Dict[str, str]] = None) -> dict:
    response = {
        "statusCode": int(status_code),
        "body": body,
    }
    if headers:
        response["headers"] = headers
    return response


def status_response(status_code: int) -> dict:
    """Response whose body is just the reason phrase, e.g. "Not Found"."""
    return api_response(status_code, HTTPStatus(status_code).phrase)


def client_error(status_code: int) -> dict:
    return status_response(status_code)


def server_error(cause: BaseException, logger: logging.Logger) -> dict:
    """Log the cause and answer with a bare 500; the cause is never sent back."""
    logger.error(f"{type(cause).__name__}: {cause}")
    return status_response(HTTPStatus.INTERNAL_SERVER_ERROR)
