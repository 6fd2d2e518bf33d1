"""
Fluent payment builder shared by the sync and async MoneyFusion clients.

The builder only assembles the payload; the subclasses own the transport.
Response handling (status check, JSON decoding) lives here so both clients
translate failures the same way.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from fusionpay.contracts.payments import PaymentPayload
from fusionpay.error_handler import FusionPayConfigError, FusionPayHTTPError, FusionPayResponseError
from fusionpay.utils.config_loader import FusionPayConfig, load_config

logger = logging.getLogger(__name__)


class PaymentBuilder:
    def __init__(
        self,
        api_url: Optional[str] = None,
        *,
        status_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        config: Optional[FusionPayConfig] = None,
    ) -> None:
        if config is None and (not api_url or not status_url or timeout_seconds is None):
            config = load_config()
        config = config or FusionPayConfig()
        self.api_url = api_url or config.api_url
        self.status_url = status_url or config.status_url
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else config.timeout_seconds
        self.headers: Dict[str, str] = {"Content-Type": "application/json"}
        self._payload = PaymentPayload()

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------

    def total_price(self, amount: float) -> PaymentBuilder:
        self._payload.total_price = amount
        return self

    def add_article(self, name: str, value: float) -> PaymentBuilder:
        self._payload.articles.append({name: value})
        return self

    def add_info(self, data: Union[Mapping[str, Any], BaseModel]) -> PaymentBuilder:
        """Attach custom data; MoneyFusion echoes it back in ``personal_Info``."""
        if isinstance(data, BaseModel):
            info = data.model_dump(mode="json")
        else:
            info = dict(data)
        self._payload.personal_info.append(info)
        return self

    def client_name(self, name: str) -> PaymentBuilder:
        self._payload.client_name = name
        return self

    def client_number(self, number: str) -> PaymentBuilder:
        self._payload.client_number = number
        return self

    def return_url(self, url: str) -> PaymentBuilder:
        """The gateway appends the payment token to this URL when redirecting back."""
        self._payload.return_url = url
        return self

    def webhook_url(self, url: str) -> PaymentBuilder:
        self._payload.webhook_url = url
        return self

    def payment_data(self) -> Dict[str, Any]:
        return self._payload.to_dict()

    # ------------------------------------------------------------------
    # Request/response helpers
    # ------------------------------------------------------------------

    def _require_api_url(self) -> str:
        if not self.api_url:
            raise FusionPayConfigError("FUSIONPAY_API_URL is not configured.")
        return self.api_url

    def _status_endpoint(self, token: str) -> str:
        quoted = quote(str(token), safe="")
        if "{token}" in self.status_url:
            return self.status_url.replace("{token}", quoted)
        return f"{self.status_url.rstrip('/')}/{quoted}"

    def _read_body(self, response: httpx.Response) -> Any:
        if not response.is_success:
            logger.error("MoneyFusion HTTP %s from %s: %s", response.status_code, response.request.url, response.text)
            raise FusionPayHTTPError(
                response.text or f"MoneyFusion HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise FusionPayResponseError(
                f"MoneyFusion returned non-JSON (HTTP {response.status_code})",
                payload={"body": response.text},
            ) from exc

        logger.debug("MoneyFusion response: %s", data)
        return data
