# webhook_alert/main.py
from fastapi import FastAPI, HTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging

import httpx
from pydantic import BaseModel

from webhook_alert.config import LOG_LEVEL
from webhook_alert.container import close_container, get_container, init_container
from webhook_alert.domain.alert import Alert
from webhook_alert.domain.endpoint import Endpoint, Result
from webhook_alert.errors import AlertProviderError
from webhook_alert.logging_config import setup_logging

logger = logging.getLogger(__name__)

TEST_ENDPOINT = Endpoint(name="test-endpoint", group="debug")
TEST_ALERT_DESCRIPTION = "This is a test alert"


class AlertTestRequest(BaseModel):
    resolved: bool = False
    description: Optional[str] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 실행"""
    # 0. 로깅 설정
    setup_logging(LOG_LEVEL)

    logger.info("=" * 80)
    logger.info("🚀 Starting Webhook Alert Server")
    logger.info("=" * 80)

    # 1. 의존성 컨테이너 초기화 (테스트에서 미리 넣어둔 게 있으면 그대로 사용)
    init_container(get_container())

    yield

    # Shutdown
    close_container()

    logger.info("=" * 80)
    logger.info("👋 Shutting down Webhook Alert Server")
    logger.info("=" * 80)


app = FastAPI(
    title="Webhook Alert Server",
    lifespan=lifespan
)


@app.get("/health")
def health():
    """헬스체크 엔드포인트"""
    container = get_container()

    return {
        "status": "ok",
        "provider_valid": container.provider_valid,
    }


@app.post("/debug/test-alert")
def send_test_alert(payload: AlertTestRequest):
    """
    설정된 provider 로 테스트 알림 전송 (디버깅용)

    provider 기본 알림 설정이 있으면 그걸 바탕으로 description 만 바꿔서 보낸다.
    """
    container = get_container()
    if not container.provider_valid:
        raise HTTPException(status_code=503, detail="custom alert provider is not configured")

    provider = container.provider
    base_alert = provider.get_default_alert() or Alert()
    alert = base_alert.model_copy(
        update={"description": payload.description or TEST_ALERT_DESCRIPTION}
    )

    try:
        provider.send(TEST_ENDPOINT, alert, Result(), payload.resolved)
    except AlertProviderError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        # 전송 실패 / 치환 후 URL 이 잘못된 경우
        logger.error("Test alert request error: %s", exc)
        raise HTTPException(status_code=502, detail=f"request error: {exc}") from exc

    return {"status": "sent"}
