"""
Synchronous MoneyFusion client.

Usage:
    payment = (
        FusionPay("https://www.pay.moneyfusion.net/<merchant>/<key>/pay/")
        .total_price(200)
        .add_article("sac", 100)
        .add_article("chaussure", 100)
        .client_name("M. Yaya")
        .client_number("01010101")
        .return_url("https://my_call_back_link.com")
        .make_payment()
    )
    status = FusionPay().check_payment_status(payment.token)
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


class FusionPay(PaymentBuilder):
    def __init__(
        self,
        api_url: Optional[str] = None,
        *,
        status_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
        config: Optional[FusionPayConfig] = None,
    ) -> None:
        super().__init__(api_url, status_url=status_url, timeout_seconds=timeout_seconds, config=config)
        self._http_client = http_client

    def make_payment(self) -> PaymentResponse:
        url = self._require_api_url()
        payload = self.payment_data()
        logger.debug("Payment payload: %s", payload)
        response = self._send("POST", url, json=payload, headers=self.headers)
        result = normalize_payment_response(self._read_body(response))
        logger.info("Payment initiated: statut=%s token=%s", result.status, result.token)
        return result

    def check_payment_status(self, token: str) -> PaymentVerificationResponse:
        response = self._send("GET", self._status_endpoint(token))
        return normalize_verification_response(self._read_body(response))

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        logger.info("MoneyFusion %s %s", method, url)
        try:
            if self._http_client is not None:
                return self._http_client.request(method, url, **kwargs)
            with httpx.Client(timeout=self.timeout_seconds, follow_redirects=True) as client:
                return client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to MoneyFusion: {e}")
            raise FusionPayRequestError(f"MoneyFusion request failed: {e}") from e
