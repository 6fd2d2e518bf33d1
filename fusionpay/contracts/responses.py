from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from fusionpay.contracts.payments import PaymentStatus, map_payment_status
from fusionpay.error_handler import FusionPayResponseError

InfoModel = TypeVar("InfoModel", bound=BaseModel)


class _GatewayModel(BaseModel):
    # Vendor spellings are the aliases; unknown vendor fields are kept.
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        # A JSON null falls back to the field default; raw keeps the original.
        if isinstance(values, dict):
            return {key: value for key, value in values.items() if value is not None}
        return values


class PaymentResponse(_GatewayModel):
    status: bool = Field(alias="statut")
    token: str = ""
    message: str = ""
    url: str = ""
    raw: Dict[str, Any] = Field(default_factory=dict, exclude=True)


class PaymentVerificationData(_GatewayModel):
    id: str = Field(default="", alias="_id")
    token_pay: str = Field(default="", alias="tokenPay")
    client_number: str = Field(default="", alias="numeroSend")
    client_name: str = Field(default="", alias="nomclient")
    personal_info: List[Dict[str, Any]] = Field(default_factory=list, alias="personal_Info")
    transaction_number: str = Field(default="", alias="numeroTransaction")
    amount: float = Field(default=0.0, alias="Montant")
    fees: float = Field(default=0.0, alias="frais")
    status: PaymentStatus = Field(alias="statut")
    payment_method: str = Field(default="", alias="moyen")
    return_url: str = ""
    created_at: str = Field(default="", alias="createdAt")

    @field_validator("status", mode="before")
    @classmethod
    def _map_status(cls, value: Any) -> PaymentStatus:
        return map_payment_status(value)

    def personal_info_as(self, model_type: Type[InfoModel]) -> List[InfoModel]:
        """Parse the custom data echoed back by the gateway into ``model_type``."""
        return [model_type.model_validate(item) for item in self.personal_info]


class PaymentVerificationResponse(_GatewayModel):
    status: bool = Field(alias="statut")
    data: Optional[PaymentVerificationData] = None
    message: str = ""
    raw: Dict[str, Any] = Field(default_factory=dict, exclude=True)


def normalize_payment_response(raw: Any) -> PaymentResponse:
    return _build_model(PaymentResponse, raw)


def normalize_verification_response(raw: Any) -> PaymentVerificationResponse:
    return _build_model(PaymentVerificationResponse, raw)


def _build_model(model_type, raw: Any):
    if not isinstance(raw, dict):
        raise FusionPayResponseError(
            f"Expected a JSON object from MoneyFusion, got {type(raw).__name__}.",
            payload=raw,
        )
    payload = {key: value for key, value in raw.items() if key != "raw"}
    try:
        return model_type.model_validate({**payload, "raw": raw})
    except ValidationError as exc:
        raise FusionPayResponseError(f"Response validation failed: {exc}", payload=raw) from exc
