# webhook_alert/container.py
"""
의존성 조립 (Dependency Assembly)
"""
from typing import Optional
import logging

import httpx

from webhook_alert.adapters.custom_provider import CustomAlertConfig, CustomAlertProvider
from webhook_alert.adapters.http_client import build_http_client
from webhook_alert.application.ports.alert_provider import AlertProvider
from webhook_alert.config import build_provider_config
from webhook_alert.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    서비스 컨테이너

    provider 설정 기본값 채우기(client 설정)는 여기서 한 번만 하고,
    이후 send 는 읽기만 한다.
    """

    def __init__(
        self,
        config: Optional[CustomAlertConfig] = None,
        http_client: Optional[httpx.Client] = None,
        strict: bool = False,
    ):
        """
        Args:
            config: provider 설정 (None 이면 환경변수에서 읽음)
            http_client: 주입할 httpx.Client (None 이면 config.client 로 생성)
            strict: True 면 설정이 유효하지 않을 때 ConfigurationError
        """
        if config is None:
            config = build_provider_config()
        config = config.with_defaults()

        self._provider_valid = config.is_valid()
        if not self._provider_valid:
            if strict:
                raise ConfigurationError("custom alert provider requires a non-empty url")
            logger.warning("Custom alert provider is not configured (CUSTOM_ALERT_URL is empty).")

        # 직접 만든 클라이언트만 close 한다
        self._owns_http_client = http_client is None
        self._http_client = http_client or build_http_client(config.client)

        self._provider = CustomAlertProvider(config, http_client=self._http_client)

    @property
    def provider(self) -> AlertProvider:
        """AlertProvider 인스턴스"""
        return self._provider

    @property
    def provider_valid(self) -> bool:
        return self._provider_valid

    def close(self) -> None:
        if self._owns_http_client:
            self._http_client.close()


# 전역 컨테이너 인스턴스
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """
    ServiceContainer 싱글톤 인스턴스 반환

    Returns:
        ServiceContainer 인스턴스
    """
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def init_container(container: Optional[ServiceContainer] = None) -> ServiceContainer:
    """
    ServiceContainer 초기화

    애플리케이션 시작 시 명시적으로 호출합니다.
    테스트에서는 미리 만든 container 를 넘길 수 있습니다.

    Returns:
        ServiceContainer 인스턴스
    """
    global _container
    _container = container or ServiceContainer()
    logger.info("✅ Service container initialized")
    return _container


def close_container() -> None:
    global _container
    if _container is not None:
        _container.close()
        _container = None
