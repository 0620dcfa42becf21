# webhook_alert/domain/placeholders.py
"""
알림 템플릿 placeholder 치환

URL / body / header 값에 들어있는 대괄호 토큰을 이벤트 데이터로 바꾼다.
정규식 없이 문자열 그대로(literal) 치환한다.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from webhook_alert.domain.alert import Alert
from webhook_alert.domain.endpoint import Endpoint


ALERT_DESCRIPTION = "[ALERT_DESCRIPTION]"
ENDPOINT_NAME = "[ENDPOINT_NAME]"
ENDPOINT_GROUP = "[ENDPOINT_GROUP]"
ENDPOINT_URL = "[ENDPOINT_URL]"
ALERT_TRIGGERED_OR_RESOLVED = "[ALERT_TRIGGERED_OR_RESOLVED]"

# remap 테이블의 key 는 대괄호 없는 이름
ALERT_STATE_PLACEHOLDER_NAME = "ALERT_TRIGGERED_OR_RESOLVED"

TRIGGERED = "TRIGGERED"
RESOLVED = "RESOLVED"

PlaceholderRemap = Mapping[str, Mapping[str, str]]


@dataclass
class RenderedRequest:
    """
    치환 중/치환 완료된 요청 문자열 묶음.

    send 한 번마다 새로 만들고 버린다. 설정 객체와 공유하지 않도록
    headers 는 항상 복사본을 넘겨야 한다.
    """

    url: str
    method: str = ""
    body: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    def replace_placeholder(self, placeholder: str, content: str) -> None:
        """body, url, 모든 header 값에서 placeholder 를 content 로 치환 (header 이름은 그대로)"""
        self.body = self.body.replace(placeholder, content)
        self.url = self.url.replace(placeholder, content)
        for name, value in self.headers.items():
            self.headers[name] = value.replace(placeholder, content)


def resolve_alert_state(resolved: bool, placeholders: Optional[PlaceholderRemap] = None) -> str:
    """
    [ALERT_TRIGGERED_OR_RESOLVED] 에 들어갈 값 반환

    기본값은 "RESOLVED" / "TRIGGERED".
    remap 테이블에 해당 값이 있으면 그 값을 쓴다.
    예: {"ALERT_TRIGGERED_OR_RESOLVED": {"RESOLVED": "fixed"}} -> "fixed"
    """
    status = RESOLVED if resolved else TRIGGERED
    overrides = (placeholders or {}).get(ALERT_STATE_PLACEHOLDER_NAME)
    if overrides and status in overrides:
        return overrides[status]
    return status


def render(
    template: RenderedRequest,
    endpoint: Endpoint,
    alert: Alert,
    resolved: bool,
    placeholders: Optional[PlaceholderRemap] = None,
) -> RenderedRequest:
    # 순서 고정: description -> name -> group -> url -> triggered/resolved
    # 앞 단계 치환값 안에 뒤 토큰이 있으면 그것도 치환된다 (의도적으로 그대로 둠)
    template.replace_placeholder(ALERT_DESCRIPTION, alert.get_description())
    template.replace_placeholder(ENDPOINT_NAME, endpoint.name)
    template.replace_placeholder(ENDPOINT_GROUP, endpoint.group)
    template.replace_placeholder(ENDPOINT_URL, endpoint.url)
    template.replace_placeholder(
        ALERT_TRIGGERED_OR_RESOLVED,
        resolve_alert_state(resolved, placeholders),
    )
    return template
