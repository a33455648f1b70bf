import base64
import binascii
import logging
from typing import Any, Dict

from pydantic import BaseModel, Field

logger = logging.getLogger("bookstore-lambda")


class EventDecodeError(ValueError):
    """The proxy event carries a body we cannot decode."""


class ApiRequest(BaseModel):
    """The parts of an API Gateway proxy event the handlers look at"""

    method: str = ""
    query_parameters: Dict[str, str] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""
    is_base64_encoded: bool = False

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "ApiRequest":
        """Build a request from a Lambda proxy event; null sections become empty."""
        return cls(
            method=event.get("httpMethod") or "",
            query_parameters=event.get("queryStringParameters") or {},
            headers=event.get("headers") or {},
            body=event.get("body") or "",
            is_base64_encoded=bool(event.get("isBase64Encoded", False)),
        )

    def decoded_body(self) -> str:
        """The body as text, base64-decoded when API Gateway encoded it."""
        if not (self.body and self.is_base64_encoded):
            return self.body
        try:
            return base64.b64decode(self.body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            logger.warning(f"Failed to decode base64 body: {str(e)}")
            raise EventDecodeError("Invalid base64 encoding in request body") from e
