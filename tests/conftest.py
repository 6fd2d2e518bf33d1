"""Pytest fixtures for the MoneyFusion client tests."""

import json

import httpx
import pytest

from fusionpay.utils.config_loader import ENV_OVERRIDES

API_URL = "https://www.pay.moneyfusion.net/merchant/abc123/pay/"

PAYMENT_OK = {
    "statut": True,
    "token": "5d58823b084564",
    "message": "paiement en cours",
    "url": "https://payin.moneyfusion.net/payment/5d58823b084564/200/John Doe",
}

VERIFICATION_PAID = {
    "statut": True,
    "data": {
        "_id": "6748d365967cb4766fdb3d4a",
        "tokenPay": "5d58823b084564",
        "numeroSend": "01010101",
        "nomclient": "John Doe",
        "personal_Info": [{"userId": 1, "orderId": 123}],
        "numeroTransaction": "0708889205",
        "Montant": 200,
        "frais": 5,
        "statut": "paid",
        "moyen": "orange",
        "return_url": "https://my_call_back_link.com",
        "createdAt": "2024-11-28T20:29:57.553Z",
    },
    "message": "details paiement",
}


class RecordingHandler:
    """MockTransport handler that replays one canned response and keeps the requests."""

    def __init__(self, status_code=200, json_body=None, text=None, exc=None):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(f"{self.exc.__name__} for {request.url}", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for env_name in ENV_OVERRIDES.values():
        monkeypatch.delenv(env_name, raising=False)


@pytest.fixture
def handler():
    return RecordingHandler(json_body=PAYMENT_OK)


@pytest.fixture
def http_client(handler):
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest.fixture
def api_url():
    return API_URL


@pytest.fixture
def payment_ok():
    return dict(PAYMENT_OK)


@pytest.fixture
def verification_paid():
    return json.loads(json.dumps(VERIFICATION_PAID))
