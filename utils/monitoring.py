import time
import logging
import contextlib
from typing import Dict, Any, Optional

logger = logging.getLogger("bookstore-lambda")

class MetricsCollector:
    """Timings and outcome of a single Lambda invocation"""

    def __init__(self, request_id: str, method: str = ""):
        self.request_id = request_id
        self.method = method
        self.timings: Dict[str, float] = {}
        self.status_code: Optional[int] = None
        self.start_time = time.time()

    @contextlib.contextmanager
    def timer(self, operation_name: str):
        """Context manager for timing operations"""
        start_time = time.time()
        try:
            yield
        finally:
            elapsed = time.time() - start_time
            self.timings[operation_name] = round(elapsed, 3)
            logger.debug(f"[{self.request_id}] {operation_name} completed in {elapsed:.3f}s")

    def record_response(self, response: Dict[str, Any]) -> Dict[str, Any]:
        """Remember the status of the response and hand it back unchanged"""
        self.status_code = response.get("statusCode")
        return response

    def summary(self) -> Dict[str, Any]:
        result = {
            "request_id": self.request_id,
            "method": self.method,
            "status_code": self.status_code,
            "total_elapsed": round(time.time() - self.start_time, 3),
        }
        for operation_name, elapsed in self.timings.items():
            result[f"{operation_name}_time"] = elapsed
        return result

    def log_summary(self) -> None:
        """One INFO line per invocation: method, status and elapsed time"""
        summary = self.summary()
        logger.info(
            f"[{self.request_id}] {self.method or '-'} -> {self.status_code} "
            f"in {summary['total_elapsed']:.3f}s"
        )
