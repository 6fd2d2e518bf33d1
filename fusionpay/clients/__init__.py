"""
MoneyFusion HTTP clients.

FusionPay is the blocking client, AsyncFusionPay the asyncio one. Both share
PaymentBuilder, so a payload built for one is identical for the other.
"""

from .async_client import AsyncFusionPay
from .base import PaymentBuilder
from .sync_client import FusionPay

__all__ = ["AsyncFusionPay", "FusionPay", "PaymentBuilder"]
