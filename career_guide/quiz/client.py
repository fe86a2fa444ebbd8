"""
HTTP клиент для /api/career-quiz
"""
import logging
from typing import List, Optional, Sequence, Tuple

import httpx
from pydantic import ValidationError

from career_guide.schemas.quiz import (
    CareerResult,
    GenerateQuestionsResponse,
    GenerateResultsResponse,
    QuizAnswer,
    QuizQuestion,
)

logger = logging.getLogger(__name__)

QUIZ_PATH = "/api/career-quiz"


class QuizApiError(Exception):
    """Ошибка вызова сервиса рекомендаций (текст годится для показа пользователю)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CareerQuizClient:
    """
    Обёртка над httpx.AsyncClient.

    Args:
        http: готовый клиент (base_url, токен в заголовках, transport в тестах)
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    @classmethod
    def connect(cls, base_url: str, token: Optional[str] = None, timeout: float = 120.0) -> "CareerQuizClient":
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        return cls(httpx.AsyncClient(base_url=base_url, headers=headers, timeout=timeout))

    async def aclose(self) -> None:
        await self.http.aclose()

    async def generate_questions(
        self, phase1_answers: Sequence[QuizAnswer]
    ) -> Tuple[List[QuizQuestion], Optional[str]]:
        data = await self._post(
            {
                "action": "generate-questions",
                "phase1Answers": [a.model_dump(by_alias=True) for a in phase1_answers],
            },
            fallback_error="Failed to generate questions",
        )
        try:
            parsed = GenerateQuestionsResponse.model_validate(data)
        except ValidationError as e:
            raise QuizApiError("Failed to generate questions") from e
        return parsed.questions, parsed.session_id

    async def generate_results(
        self,
        all_answers: Sequence[QuizAnswer],
        phase1_answers: Sequence[QuizAnswer],
        session_id: Optional[str] = None,
    ) -> List[CareerResult]:
        data = await self._post(
            {
                "action": "generate-results",
                "allAnswers": [a.model_dump(by_alias=True) for a in all_answers],
                "phase1Answers": [a.model_dump(by_alias=True) for a in phase1_answers],
                "sessionId": session_id,
            },
            fallback_error="Failed to generate results",
        )
        try:
            parsed = GenerateResultsResponse.model_validate(data)
        except ValidationError as e:
            raise QuizApiError("Failed to generate results") from e
        return parsed.results

    async def _post(self, payload: dict, fallback_error: str) -> dict:
        try:
            response = await self.http.post(QUIZ_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.warning("Quiz API request failed: %s", e)
            raise QuizApiError(fallback_error) from e

        try:
            data = response.json()
        except ValueError:
            if response.is_error:
                logger.warning("Quiz API returned %s with a non-JSON body", response.status_code)
            data = {}

        if response.is_error:
            message = data.get("error") if isinstance(data, dict) else None
            raise QuizApiError(message or fallback_error, status_code=response.status_code)
        return data
