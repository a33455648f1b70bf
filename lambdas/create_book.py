import logging
from http import HTTPStatus

from services.storage import BookStore, StorageError
from settings import AppConfig
from shared.books import BookParseError, has_required_fields, is_valid_isbn, parse_book
from shared.events import ApiRequest, EventDecodeError
from shared.responses import api_response, client_error, server_error

logger = logging.getLogger("bookstore-lambda")


def create(request: ApiRequest, store: BookStore, log: logging.Logger = logger) -> dict:
    # Exact match only, parameters such as "; charset=utf-8" are refused
    if request.headers.get("Content-Type") != "application/json":
        return client_error(HTTPStatus.NOT_ACCEPTABLE)

    try:
        body = request.decoded_body()
    except EventDecodeError:
        return client_error(HTTPStatus.BAD_REQUEST)

    try:
        book = parse_book(body)
    except BookParseError as e:
        log.info(str(e))
        return client_error(HTTPStatus.UNPROCESSABLE_ENTITY)

    if not is_valid_isbn(book.isbn, strict=AppConfig.get_bool("strict_isbn")):
        return client_error(HTTPStatus.BAD_REQUEST)
    if not has_required_fields(book):
        return client_error(HTTPStatus.BAD_REQUEST)

    try:
        store.store(book)
    except StorageError as e:
        return server_error(e, log)

    return api_response(
        HTTPStatus.CREATED,
        headers={"Location": f"/books?isbn={book.isbn}"},
    )
