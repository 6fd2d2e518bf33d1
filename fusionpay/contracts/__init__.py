"""
Contracts (data models).

Request and response shapes exchanged with the MoneyFusion gateway.
Both the sync and the async client build and return these, so callers
never handle raw dicts.
"""

from .payments import PaymentPayload, PaymentStatus, is_terminal_status, map_payment_status
from .responses import (
    PaymentResponse,
    PaymentVerificationData,
    PaymentVerificationResponse,
    normalize_payment_response,
    normalize_verification_response,
)

__all__ = [
    "PaymentPayload", "PaymentStatus", "is_terminal_status", "map_payment_status",
    "PaymentResponse", "PaymentVerificationData", "PaymentVerificationResponse",
    "normalize_payment_response", "normalize_verification_response",
]
