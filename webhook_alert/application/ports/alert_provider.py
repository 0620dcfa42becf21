# webhook_alert/application/ports/alert_provider.py
"""
알림 provider 포트 (인터페이스)

Secondary Port: 알림 발송 오케스트레이터가 provider 를 사용하기 위한 인터페이스
"""
from typing import Optional, Protocol

from webhook_alert.domain.alert import Alert
from webhook_alert.domain.endpoint import Endpoint, Result


class AlertProvider(Protocol):
    """
    알림 provider 인터페이스

    이 Protocol 을 구현하는 어댑터:
    - CustomAlertProvider (adapters/custom_provider.py)
    """

    def is_valid(self) -> bool:
        """설정이 유효한지 (URL 등 필수 값 존재 여부)"""
        ...

    def send(self, endpoint: Endpoint, alert: Alert, result: Result, resolved: bool) -> None:
        """
        알림 전송

        Args:
            endpoint: 알림 대상 엔드포인트
            alert: 알림 설정/설명
            result: 엔드포인트 평가 결과
            resolved: True 면 해제 알림, False 면 트리거 알림

        Raises:
            실패 시 예외 (성공하면 None 반환)
        """
        ...

    def get_default_alert(self) -> Optional[Alert]:
        """provider 기본 알림 설정 (없으면 None)"""
        ...
