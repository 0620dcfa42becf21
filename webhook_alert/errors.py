# webhook_alert/errors.py
"""
에러 정의

전송 계층 에러(DNS, 연결, 타임아웃 등)는 httpx 예외를 그대로 올린다.
여기에는 우리 쪽에서 판단하는 에러만 둔다.
"""


class WebhookAlertError(Exception):
    """webhook_alert 공통 베이스 예외"""


class ConfigurationError(WebhookAlertError):
    """환경변수/설정 값이 잘못된 경우"""


class AlertProviderError(WebhookAlertError):
    """
    알림 대상 서버가 4xx/5xx 로 응답한 경우

    Attributes:
        status_code: HTTP 상태 코드
        raw_body: 응답 body 원본 bytes
        body: raw_body 를 UTF-8 로 디코딩한 문자열 (깨진 바이트는 U+FFFD)
    """

    def __init__(self, status_code: int, raw_body: bytes):
        self.status_code = status_code
        self.raw_body = raw_body
        self.body = raw_body.decode("utf-8", errors="replace")
        super().__init__(
            f"call to provider alert returned status code {status_code}: {self.body}"
        )
