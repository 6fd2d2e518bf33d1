"""
Asynchronous MoneyFusion client.

Same builder and error translation as ``FusionPay``; the two calls are
coroutines backed by ``httpx.AsyncClient``.
"""

import logging
from typing import Any, Optional

import httpx

from fusionpay.clients.base import PaymentBuilder
from fusionpay.contracts.responses import (
    PaymentResponse,
    PaymentVerificationResponse,
    normalize_payment_response,
    normalize_verification_response,
)
from fusionpay.error_handler import FusionPayRequestError
from fusionpay.utils.config_loader import FusionPayConfig

logger = logging.getLogger(__name__)


class AsyncFusionPay(PaymentBuilder):
    def __init__(
        self,
        api_url: Optional[str] = None,
        *,
        status_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        config: Optional[FusionPayConfig] = None,
    ) -> None:
        super().__init__(api_url, status_url=status_url, timeout_seconds=timeout_seconds, config=config)
        self._http_client = http_client

    async def make_payment(self) -> PaymentResponse:
        url = self._require_api_url()
        payload = self.payment_data()
        logger.debug("Payment payload: %s", payload)
        response = await self._send("POST", url, json=payload, headers=self.headers)
        result = normalize_payment_response(self._read_body(response))
        logger.info("Payment initiated: statut=%s token=%s", result.status, result.token)
        return result

    async def check_payment_status(self, token: str) -> PaymentVerificationResponse:
        response = await self._send("GET", self._status_endpoint(token))
        return normalize_verification_response(self._read_body(response))

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        logger.info("MoneyFusion %s %s", method, url)
        try:
            if self._http_client is not None:
                return await self._http_client.request(method, url, **kwargs)
            async with httpx.AsyncClient(timeout=self.timeout_seconds, follow_redirects=True) as client:
                return await client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to MoneyFusion: {e}")
            raise FusionPayRequestError(f"MoneyFusion request failed: {e}") from e
