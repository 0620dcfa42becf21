"""
알림 전송용 HTTP 클라이언트 설정 / 생성
"""
from typing import Optional

import httpx
from pydantic import BaseModel


DEFAULT_TIMEOUT_SECONDS = 10.0


class ClientConfig(BaseModel):
    """
    HTTP 클라이언트 설정

    - timeout: 요청 전체 타임아웃 (초)
    - insecure: True 면 TLS 인증서 검증을 끈다 (사내/스테이징 self-signed 용)
    - follow_redirects: 3xx 를 따라갈지
    """

    timeout: float = DEFAULT_TIMEOUT_SECONDS
    insecure: bool = False
    follow_redirects: bool = False


def get_default_client_config() -> ClientConfig:
    """기본 ClientConfig (호출마다 새 인스턴스)"""
    return ClientConfig()


def build_http_client(
    config: Optional[ClientConfig] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """
    ClientConfig 로 httpx.Client 생성

    Args:
        config: 클라이언트 설정 (None 이면 기본값)
        transport: 테스트 등에서 주입할 transport (예: httpx.MockTransport)

    Returns:
        httpx.Client (close 는 호출한 쪽 책임)
    """
    config = config or get_default_client_config()
    return httpx.Client(
        timeout=config.timeout,
        verify=not config.insecure,
        follow_redirects=config.follow_redirects,
        transport=transport,
    )
