import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

from dotenv import load_dotenv

load_dotenv()

from http import HTTPStatus

from pydantic import ValidationError

from lambdas.create_book import create
from lambdas.get_book import show
from services.storage import BookStore, get_book_store
from settings import AppConfig
from shared.events import ApiRequest
from shared.responses import client_error, server_error
from utils.monitoring import MetricsCollector

logger = logging.getLogger("bookstore-lambda")
logger.setLevel(AppConfig.get_log_level())


def router(request: ApiRequest, store: BookStore, log: logging.Logger = logger) -> dict:
    """Dispatch on the HTTP method alone; the path is not consulted."""
    try:
        if request.method == "GET":
            return show(request, store, log)
        if request.method == "POST":
            return create(request, store, log)
        return client_error(HTTPStatus.METHOD_NOT_ALLOWED)
    except Exception as e:
        return server_error(e, log)


def lambda_handler(event, context):
    request_id = getattr(context, "aws_request_id", None) or "local"

    try:
        request = ApiRequest.from_event(event)
    except ValidationError:
        logger.info(f"[{request_id}] Rejected malformed proxy event")
        return client_error(HTTPStatus.BAD_REQUEST)

    metrics = MetricsCollector(request_id, request.method)
    try:
        store = get_book_store()
    except Exception as e:
        response = server_error(e, logger)
    else:
        with metrics.timer("route"):
            response = router(request, store)

    metrics.record_response(response)
    metrics.log_summary()
    return response
