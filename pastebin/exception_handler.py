import logging
from collections import Counter, deque
from typing import Any, Deque, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .snippet.errors import SnippetStoreError


class ErrorHandler:
    """Centralized error handling and logging for the pastebin service."""

    def __init__(self, log_level: str = "INFO", max_recent: int = 100):
        self.logger = self._setup_logging(log_level)
        self.errors: Deque[Dict[str, Any]] = deque(maxlen=max_recent)
        self.error_counts: Counter[str] = Counter()

    def _setup_logging(self, level: str) -> logging.Logger:
        """Configure structured logging."""
        logger = logging.getLogger("pastebin")
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def set_level(self, level: str) -> None:
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    def handle_error(self, error: Exception, context: Dict[str, Any]) -> Dict[str, Any]:
        """Log an error with context and record it for aggregation."""
        error_info = {
            "type": type(error).__name__,
            "message": str(error),
            "context": context,
        }

        self.logger.info(
            "%s: %s | Context: %s", error_info["type"], error_info["message"], context
        )

        self.errors.append(error_info)
        self.error_counts[error_info["type"]] += 1
        return error_info

    def collect_request_error(self, error: Exception, request: Request) -> Dict[str, Any]:
        context = {
            "method": request.method,
            "path": request.url.path,
        }
        return self.handle_error(error, context)

    def get_error_summary(self) -> Dict[str, Any]:
        """Counts cover every handled error; ``errors`` keeps only the most recent."""
        return {
            "total_errors": sum(self.error_counts.values()),
            "error_types": dict(self.error_counts),
        }

    def clear_errors(self):
        """Clear collected errors."""
        self.errors.clear()
        self.error_counts.clear()

    def install(self, app: FastAPI) -> None:
        """Register JSON error responses shaped as ``{"error": message}``."""

        async def _store_error(request: Request, exc: SnippetStoreError) -> JSONResponse:
            self.collect_request_error(exc, request)
            return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

        async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
            self.collect_request_error(exc, request)
            return JSONResponse(status_code=400, content={"error": _describe_validation(exc)})

        app.add_exception_handler(SnippetStoreError, _store_error)
        app.add_exception_handler(RequestValidationError, _validation_error)


def _describe_validation(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        problems.append(f"{location}: {message}" if location else message)
    return "Invalid request: " + "; ".join(problems) if problems else "Invalid request"


# Global error handler instance
error_handler = ErrorHandler()
