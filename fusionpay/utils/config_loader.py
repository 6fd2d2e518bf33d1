"""
Configuration loader for the FusionPay clients
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
import logging

from fusionpay.error_handler import FusionPayConfigError

logger = logging.getLogger(__name__)

DEFAULT_STATUS_URL = "https://www.pay.moneyfusion.net/paiementNotif/{token}"
DEFAULT_TIMEOUT_SECONDS = 20.0

ENV_OVERRIDES = {
    "api_url": "FUSIONPAY_API_URL",
    "status_url": "FUSIONPAY_STATUS_URL",
    "timeout_seconds": "FUSIONPAY_TIMEOUT_SECONDS",
}


class FusionPayConfig(BaseModel):
    """MoneyFusion gateway settings"""

    api_url: Optional[str] = None
    status_url: str = DEFAULT_STATUS_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)


def load_config(config_path: Optional[Path] = None) -> FusionPayConfig:
    """
    Load FusionPay configuration from an optional YAML file and the environment

    Environment variables (a .env file is honoured) win over the file.

    Args:
        config_path: Optional YAML file, either with a top-level ``fusionpay``
            section or with the keys at the top level

    Returns:
        Validated FusionPayConfig object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        FusionPayConfigError: If the values don't match the schema
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            file_data = yaml.safe_load(f) or {}

        if not isinstance(file_data, dict):
            raise FusionPayConfigError(f"Config file {config_path} must contain a mapping")
        section = file_data.get("fusionpay", file_data)
        if not isinstance(section, dict):
            raise FusionPayConfigError(f"'fusionpay' section in {config_path} must be a mapping")
        data.update(section)
        logger.debug("Loaded FusionPay config from %s", config_path)

    for field_name, env_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[field_name] = value

    try:
        return FusionPayConfig(**data)
    except ValidationError as exc:
        raise FusionPayConfigError(f"Invalid FusionPay configuration: {exc}") from exc
