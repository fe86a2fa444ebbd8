import logging
from typing import Optional

from fastapi.responses import JSONResponse

from career_guide.services.llm_client import LLMError

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    """Единый формат ошибки: {"error": ..., "details": ...}"""
    content = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def generation_error_response(exc: Exception, fallback_error: str) -> JSONResponse:
    """
    Ошибка генерации -> JSON ответ.

    Ошибки LLM сохраняют свой статус (например 429 от Groq),
    всё остальное (битый JSON модели и т.п.) - 500 с текстом исключения.
    """
    if isinstance(exc, LLMError):
        return error_response(exc.status_code, exc.message, exc.details)

    logger.exception(fallback_error)
    return error_response(500, fallback_error, str(exc) or exc.__class__.__name__)
