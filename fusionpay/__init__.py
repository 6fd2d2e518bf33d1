"""
FusionPay: client library for the MoneyFusion payment gateway.

- Build a payment with the fluent builder and POST it with make_payment()
- Verify it later with check_payment_status(token)

FusionPay is synchronous; AsyncFusionPay exposes the same API as coroutines.
"""

from .clients import AsyncFusionPay, FusionPay, PaymentBuilder
from .contracts import (
    PaymentPayload,
    PaymentResponse,
    PaymentStatus,
    PaymentVerificationData,
    PaymentVerificationResponse,
    is_terminal_status,
)
from .error_handler import (
    ErrorHandler,
    FusionPayConfigError,
    FusionPayError,
    FusionPayHTTPError,
    FusionPayRequestError,
    FusionPayResponseError,
)
from .utils import DEFAULT_STATUS_URL, FusionPayConfig, load_config

__all__ = [
    # clients
    "AsyncFusionPay", "FusionPay", "PaymentBuilder",
    # contracts
    "PaymentPayload", "PaymentResponse", "PaymentStatus",
    "PaymentVerificationData", "PaymentVerificationResponse", "is_terminal_status",
    # errors
    "ErrorHandler", "FusionPayConfigError", "FusionPayError", "FusionPayHTTPError",
    "FusionPayRequestError", "FusionPayResponseError",
    # config
    "DEFAULT_STATUS_URL", "FusionPayConfig", "load_config",
]
