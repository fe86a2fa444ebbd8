"""
Клиент для LLM (Groq через OpenAI-совместимый API)

Все генераторы (тест, дорожная карта, карьерное дерево) ходят в модель
через LLMClient.complete(), ошибки транспорта приводятся к LLMError.
"""
import logging
from typing import Optional

import openai
from openai import AsyncOpenAI

from career_guide.core.config import settings

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Базовая ошибка LLM слоя"""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class LLMNotConfiguredError(LLMError):
    """Нет API ключа"""
    status_code = 500


class LLMUpstreamError(LLMError):
    """Модель ответила не-2xx статусом (или недоступна)"""

    def __init__(self, status_code: int, details: Optional[str] = None):
        super().__init__(f"Groq API error: {status_code}", details)
        self.status_code = status_code


class LLMEmptyResponseError(LLMError):
    """В ответе нет текста"""
    status_code = 502


class LLMClient:
    """Тонкая обёртка над AsyncOpenAI.chat.completions"""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: Optional[str] = None,
        max_tokens: int = 4096,
        timeout: float = 60.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise LLMNotConfiguredError("GROQ_API_KEY is not configured")
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    async def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float = 0.5,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Один запрос system + user, возвращает текст ответа модели.

        Raises:
            LLMNotConfiguredError: нет ключа
            LLMUpstreamError: не-2xx ответ или сетевая ошибка
            LLMEmptyResponseError: пустой content
        """
        client = self.client

        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                temperature=temperature,
                max_tokens=max_tokens or self.max_tokens,
            )
        except openai.APIStatusError as e:
            logger.warning("LLM upstream error %s", e.status_code)
            raise LLMUpstreamError(e.status_code, e.response.text) from e
        except openai.APIConnectionError as e:
            # Таймауты тоже сюда (APITimeoutError наследник)
            logger.warning("LLM connection error: %s", e)
            raise LLMUpstreamError(502, str(e)) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise LLMEmptyResponseError("No content in Groq response")
        return content

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model!r})"


class AIComponents:
    _llm_client = None

    @classmethod
    def get_llm(cls) -> LLMClient:
        if cls._llm_client is None:
            cls._llm_client = LLMClient(
                api_key=settings.GROQ_API_KEY,
                model=settings.GROQ_MODEL,
                base_url=settings.GROQ_BASE_URL,
                max_tokens=settings.LLM_MAX_TOKENS,
                timeout=settings.LLM_TIMEOUT_SECONDS,
            )
        return cls._llm_client


def get_llm_client() -> LLMClient:
    return AIComponents.get_llm()
