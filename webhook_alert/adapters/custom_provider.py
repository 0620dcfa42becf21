# webhook_alert/adapters/custom_provider.py
"""
Custom HTTP 알림 provider

설정된 URL / method / body / headers 템플릿에 placeholder 를 치환해서
HTTP 요청 하나를 보내고, 응답 코드로 성공/실패를 판단한다.
재시도는 하지 않는다.
"""
from __future__ import annotations

from typing import Dict, Optional
import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field

from webhook_alert.adapters.http_client import (
    ClientConfig,
    build_http_client,
    get_default_client_config,
)
from webhook_alert.domain.alert import Alert
from webhook_alert.domain.endpoint import Endpoint, Result
from webhook_alert.domain.placeholders import RenderedRequest, render
from webhook_alert.errors import AlertProviderError

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "GET"


class CustomAlertConfig(BaseModel):
    """
    custom provider 설정

    YAML 스타일 키("default-alert")와 필드명("default_alert") 둘 다 받는다.
    """

    model_config = ConfigDict(populate_by_name=True)

    url: str = ""
    method: str = ""
    body: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    placeholders: Dict[str, Dict[str, str]] = Field(default_factory=dict)

    client: Optional[ClientConfig] = None
    default_alert: Optional[Alert] = Field(default=None, alias="default-alert")

    def is_valid(self) -> bool:
        """
        설정 유효성 검사

        client 설정이 없으면 기본값을 채운다 (한 번만, 이후 호출은 no-op).
        동시 send 와 경합하지 않도록 시작 시점에 한 번 부르거나
        with_defaults() 를 쓸 것.
        """
        if self.client is None:
            self.client = get_default_client_config()
        return len(self.url) > 0 and self.client is not None

    def with_defaults(self) -> "CustomAlertConfig":
        """client 기본값이 채워진 복사본 반환 (원본은 건드리지 않음)"""
        return self.model_copy(
            update={"client": self.client or get_default_client_config()}
        )

    def get_default_alert(self) -> Optional[Alert]:
        return self.default_alert


class CustomAlertProvider:
    """
    Custom HTTP 알림 전송

    http_client 를 주입하면 그 클라이언트로 보내고 (close 는 주입한 쪽 책임),
    없으면 send 마다 config.client 설정으로 클라이언트를 열고 닫는다.
    """

    def __init__(self, config: CustomAlertConfig, http_client: Optional[httpx.Client] = None):
        """
        Args:
            config: provider 설정
            http_client: 전송에 사용할 httpx.Client (선택)
        """
        self.config = config
        self._http_client = http_client

    def is_valid(self) -> bool:
        return self.config.is_valid()

    def get_default_alert(self) -> Optional[Alert]:
        return self.config.get_default_alert()

    def render_request(self, endpoint: Endpoint, alert: Alert, resolved: bool) -> RenderedRequest:
        """설정 템플릿을 복사해서 placeholder 를 치환한 결과 반환"""
        template = RenderedRequest(
            url=self.config.url,
            method=self.config.method,
            body=self.config.body,
            headers=dict(self.config.headers),
        )
        return render(template, endpoint, alert, resolved, self.config.placeholders)

    def build_request(self, endpoint: Endpoint, alert: Alert, resolved: bool) -> httpx.Request:
        """
        전송할 httpx.Request 생성

        method 가 비어 있으면 GET. 잘못된 URL 은 여기서 httpx 가 예외를 올린다.
        """
        rendered = self.render_request(endpoint, alert, resolved)
        method = rendered.method or DEFAULT_METHOD
        # header 값도 body 와 같이 UTF-8 bytes 로 (str 이면 httpx 가 ASCII 로만 인코딩)
        headers = {name: value.encode("utf-8") for name, value in rendered.headers.items()}
        return httpx.Request(
            method,
            rendered.url,
            content=rendered.body.encode("utf-8"),
            headers=headers,
        )

    def send(self, endpoint: Endpoint, alert: Alert, result: Result, resolved: bool) -> None:
        """
        알림 전송

        Raises:
            AlertProviderError: 응답 코드가 400 이상
            httpx.TransportError: 연결/타임아웃 등 전송 실패 (그대로 전파)
            httpx.InvalidURL: 치환 후 URL 이 잘못된 경우 (그대로 전파)
        """
        request = self.build_request(endpoint, alert, resolved)

        if self._http_client is not None:
            self._dispatch(self._http_client, request, endpoint)
            return

        if self.config.client is None:
            self.config.is_valid()
        with build_http_client(self.config.client) as client:
            self._dispatch(client, request, endpoint)

    def _dispatch(self, client: httpx.Client, request: httpx.Request, endpoint: Endpoint) -> None:
        response = client.send(request, stream=True)
        try:
            # 성공/실패 상관없이 body 는 끝까지 읽고 닫는다
            response.read()
            if response.status_code > 399:
                error = AlertProviderError(response.status_code, response.content)
                logger.error(
                    "Custom alert for %s rejected. status=%s body=%s",
                    endpoint.key(),
                    response.status_code,
                    error.body[:200],
                )
                raise error

            logger.debug(
                "Custom alert for %s sent. status=%s",
                endpoint.key(),
                response.status_code,
            )
        finally:
            response.close()
