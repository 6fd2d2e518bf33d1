from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

"""
Payment contracts.

Request-side shapes for the MoneyFusion gateway:
- the payment payload assembled by the fluent builder
- the payment status values reported by the status endpoint

Wire key names (totalPrice, nomclient, numeroSend, personal_Info...) are
dictated by MoneyFusion and must not be renamed.
"""


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


# Spellings seen from the status endpoint, mapped onto the three states above.
_STATUS_ALIASES: Dict[str, PaymentStatus] = {
    "pending": PaymentStatus.PENDING,
    "paid": PaymentStatus.PAID,
    "failed": PaymentStatus.FAILED,
    "failure": PaymentStatus.FAILED,
    "no paid": PaymentStatus.FAILED,
}


@dataclass
class PaymentPayload:
    total_price: Optional[float] = None
    articles: List[Dict[str, float]] = field(default_factory=list)
    personal_info: List[Dict[str, Any]] = field(default_factory=list)
    client_number: Optional[str] = None
    client_name: Optional[str] = None
    return_url: Optional[str] = None
    webhook_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON body; scalars that were never set are left out."""
        body: Dict[str, Any] = {
            "totalPrice": self.total_price,
            "article": [dict(item) for item in self.articles],
            "personal_Info": [dict(item) for item in self.personal_info],
            "numeroSend": self.client_number,
            "nomclient": self.client_name,
            "return_url": self.return_url,
            "webhook_url": self.webhook_url,
        }
        return {key: value for key, value in body.items() if value is not None}


def map_payment_status(raw_status: Any) -> PaymentStatus:
    if isinstance(raw_status, PaymentStatus):
        return raw_status
    value = str(raw_status or "").strip().lower()
    if value not in _STATUS_ALIASES:
        raise ValueError(f"Unsupported payment status '{value}'.")
    return _STATUS_ALIASES[value]


def is_terminal_status(status: PaymentStatus) -> bool:
    """Return True if the payment has reached a final, non-changeable state."""
    return status in {PaymentStatus.PAID, PaymentStatus.FAILED}
