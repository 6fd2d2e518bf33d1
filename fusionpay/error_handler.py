"""Exceptions raised by the FusionPay clients and a helper to serialise them."""
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while talking to MoneyFusion."


class FusionPayError(RuntimeError):
    """Base class for every error raised by this package."""


class FusionPayConfigError(FusionPayError):
    pass


class FusionPayRequestError(FusionPayError):
    """The request never got an HTTP response (DNS, connect, timeout...)."""


class FusionPayHTTPError(FusionPayError):
    def __init__(self, message: str, *, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class FusionPayResponseError(FusionPayError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload if payload is not None else {}


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        if isinstance(exc, FusionPayError):
            logger.error("MoneyFusion call failed: %s", exc)
            message = str(exc) or UNKNOWN_ERROR_MESSAGE
        else:
            logger.error("Unhandled exception in FusionPay client: %s", exc, exc_info=True)
            message = UNKNOWN_ERROR_MESSAGE

        metadata: Dict[str, Any] = {"error": str(exc), "context": context or {}}
        if isinstance(exc, FusionPayHTTPError):
            metadata["body"] = exc.body
        if isinstance(exc, FusionPayResponseError):
            metadata["payload"] = exc.payload

        return {
            "message": message,
            "error_type": type(exc).__name__,
            "status_code": getattr(exc, "status_code", None),
            "metadata": metadata,
        }
