import logging
import sys

from career_guide.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Настройка корневого логгера (вызывается при старте приложения)"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    # httpx пишет каждый запрос к Groq на INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
