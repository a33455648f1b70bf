import logging
from http import HTTPStatus

from services.storage import BookStore, StorageError
from settings import AppConfig
from shared.books import SerializationError, is_valid_isbn, serialize_book
from shared.events import ApiRequest
from shared.responses import api_response, client_error, server_error

logger = logging.getLogger("bookstore-lambda")


def show(request: ApiRequest, store: BookStore, log: logging.Logger = logger) -> dict:
    isbn = request.query_parameters.get("isbn", "")
    if not is_valid_isbn(isbn, strict=AppConfig.get_bool("strict_isbn")):
        log.info(f"Rejected lookup with malformed isbn {isbn!r}")
        return client_error(HTTPStatus.BAD_REQUEST)

    try:
        book = store.fetch(isbn)
    except StorageError as e:
        return server_error(e, log)
    if book is None:
        return client_error(HTTPStatus.NOT_FOUND)

    try:
        body = serialize_book(book)
    except SerializationError as e:
        return server_error(e, log)
    return api_response(HTTPStatus.OK, body)
