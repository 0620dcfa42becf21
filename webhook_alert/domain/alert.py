# webhook_alert/domain/alert.py
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AlertType(str, Enum):
    """알림 provider 종류. 지금은 custom(HTTP 템플릿) 하나뿐이다."""

    CUSTOM = "custom"


class Alert(BaseModel):
    """
    엔드포인트에 걸린 알림 설정 + 현재 상태.

    - failure_threshold: 연속 실패 몇 번에 트리거할지
    - success_threshold: 연속 성공 몇 번에 해제(resolve)할지
    - send_on_resolved: 해제 시에도 알림을 보낼지
    """

    model_config = ConfigDict(populate_by_name=True)

    type: AlertType = AlertType.CUSTOM
    enabled: bool = True
    failure_threshold: int = Field(default=3, alias="failure-threshold")
    success_threshold: int = Field(default=2, alias="success-threshold")
    description: Optional[str] = None
    send_on_resolved: bool = Field(default=False, alias="send-on-resolved")
    triggered: bool = False

    def get_description(self) -> str:
        if self.description is None:
            return ""
        return self.description
