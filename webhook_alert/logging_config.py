"""
로깅 설정
"""
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# httpx/httpcore 는 INFO 로 요청마다 한 줄씩 남겨서 알림 로그를 덮는다
NOISY_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: str) -> int:
    """'debug' / 'INFO' 같은 문자열을 logging 레벨로. 모르는 값이면 INFO"""
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str = "INFO") -> int:
    """
    루트 로거를 stdout 핸들러 하나로 재설정

    Args:
        level: LOG_LEVEL 환경변수 값

    Returns:
        적용된 레벨 (int)
    """
    log_level = _resolve_level(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # DEBUG 로 켰을 때만 HTTP 클라이언트 내부 로그도 보인다
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(log_level if log_level <= logging.DEBUG else logging.WARNING)

    return log_level
