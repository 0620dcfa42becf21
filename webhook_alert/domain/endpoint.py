# webhook_alert/domain/endpoint.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


_KEY_REPLACEMENTS = (" ", "/", "_", ",", ".", "#")


def _sanitize_key_part(value: str) -> str:
    value = value.lower()
    for ch in _KEY_REPLACEMENTS:
        value = value.replace(ch, "-")
    return value


class Endpoint(BaseModel):
    """
    모니터링 대상 (알림의 target).

    알림 템플릿에서는 name / group / url 세 필드만 사용한다.
    """

    name: str
    group: str = ""
    url: str = ""

    def key(self) -> str:
        """로그 식별용 키: '<group>_<name>' (소문자, 구분자는 '-')"""
        return f"{_sanitize_key_part(self.group)}_{_sanitize_key_part(self.name)}"


class ConditionResult(BaseModel):
    condition: str
    success: bool


class Result(BaseModel):
    """
    엔드포인트 평가 결과.
    custom provider 는 이 값을 템플릿에 쓰지 않지만, 다른 provider 와
    send() 시그니처를 맞추기 위해 그대로 전달받는다.
    """

    success: bool = False
    condition_results: List[ConditionResult] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
