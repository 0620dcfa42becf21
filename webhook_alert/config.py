from typing import Any, Dict, Mapping, Optional
import json
import os

from dotenv import load_dotenv

from webhook_alert.adapters.custom_provider import CustomAlertConfig
from webhook_alert.adapters.http_client import DEFAULT_TIMEOUT_SECONDS, ClientConfig
from webhook_alert.errors import ConfigurationError

# .env 읽어오기
load_dotenv()

# Custom alert provider
CUSTOM_ALERT_URL = os.getenv("CUSTOM_ALERT_URL", "")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Environment
ENV = os.getenv("ENV", "development")

# Production 환경 검증
if ENV == "production":
    if not CUSTOM_ALERT_URL:
        raise RuntimeError("CUSTOM_ALERT_URL is not set")


_TRUE_VALUES = {"1", "true", "yes"}


def _parse_json_object(name: str, raw: str) -> Dict[str, Any]:
    if not raw.strip():
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{name} is not valid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise ConfigurationError(f"{name} must be a JSON object")
    return value


def _parse_timeout(raw: str) -> float:
    if not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"CUSTOM_ALERT_TIMEOUT must be a number: {raw!r}") from exc


def build_provider_config(env: Optional[Mapping[str, str]] = None) -> CustomAlertConfig:
    """
    환경변수로 CustomAlertConfig 생성

    - CUSTOM_ALERT_HEADERS: {"Header-Name": "value template"} 형태의 JSON
    - CUSTOM_ALERT_PLACEHOLDERS: {"ALERT_TRIGGERED_OR_RESOLVED": {"RESOLVED": "..."}} 형태의 JSON

    Args:
        env: 환경변수 매핑 (None 이면 os.environ)

    Raises:
        ConfigurationError: JSON/숫자 값이 잘못된 경우
    """
    if env is None:
        env = os.environ

    headers = _parse_json_object("CUSTOM_ALERT_HEADERS", env.get("CUSTOM_ALERT_HEADERS", ""))
    placeholders = _parse_json_object(
        "CUSTOM_ALERT_PLACEHOLDERS", env.get("CUSTOM_ALERT_PLACEHOLDERS", "")
    )

    client = ClientConfig(
        timeout=_parse_timeout(env.get("CUSTOM_ALERT_TIMEOUT", "")),
        insecure=env.get("CUSTOM_ALERT_INSECURE", "").strip().lower() in _TRUE_VALUES,
    )

    try:
        return CustomAlertConfig(
            url=env.get("CUSTOM_ALERT_URL", ""),
            method=env.get("CUSTOM_ALERT_METHOD", ""),
            body=env.get("CUSTOM_ALERT_BODY", ""),
            headers=headers,
            placeholders=placeholders,
            client=client,
        )
    except ValueError as exc:
        # pydantic.ValidationError 는 ValueError 하위 클래스
        raise ConfigurationError(f"invalid custom alert configuration: {exc}") from exc
