from __future__ import annotations
import logging
from typing import Any, Dict


class StructuredLogger:
    def __init__(self, name: str = "artofest.service"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        request_id: str | None = None,
        extra: Dict[str, Any] | None = None,
    ) -> None:
        """Logs an API request with structured fields."""
        log_data = {
            "type": "api_request",
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 2),
            "request_id": request_id,
        }
        if extra:
            log_data.update(extra)
        self.logger.info(f"Structured log: {log_data}")

    def log_query(
        self,
        filters: Dict[str, Any],
        row_count: int,
        request_id: str | None = None,
    ) -> None:
        """Logs a festival store query with the filters that were applied."""
        log_data = {
            "type": "festival_query",
            "filters": filters,
            "rows": row_count,
            "request_id": request_id,
        }
        self.logger.info(f"Structured log: {log_data}")

    def log_error(
        self,
        message: str,
        error: BaseException | None = None,
        request_id: str | None = None,
        extra: Dict[str, Any] | None = None,
    ) -> None:
        """Logs an error server-side, with traceback when an exception is given."""
        log_data = {
            "type": "api_error",
            "message": message,
            "request_id": request_id,
            "error_type": type(error).__name__ if error else None,
            "error": str(error) if error else None,
        }
        if extra:
            log_data.update(extra)
        self.logger.error(f"Structured error: {log_data}", exc_info=error)


service_logger = StructuredLogger()
