"""
Сервис карьерного теста

Два шага без состояния:
1. generate_questions - 5 базовых ответов -> 10 персональных вопросов
2. generate_results - все 15 ответов -> 3-5 профессий с оценкой совпадения

Ответ модели никогда не уходит дальше как есть: всё проходит через
_parse_question / _parse_result.
"""
import logging
from typing import Any, List, Optional, Sequence, Tuple

from career_guide.schemas.quiz import CareerResult, QuizAnswer, QuizOption, QuizQuestion
from career_guide.services.llm_client import LLMClient
from career_guide.services.llm_json import as_number, as_score, as_str, as_str_list, extract_json_array
from career_guide.services.prompts import (
    QUESTIONS_SYSTEM_PROMPT,
    RESULTS_SYSTEM_PROMPT,
    format_questions_prompt,
    format_results_prompt,
)
from career_guide.services.quiz_store import QuizSessionStore, persist_safely

logger = logging.getLogger(__name__)

PHASE1_QUESTION_COUNT = 5


def _dump(items: Sequence[Any]) -> list[dict]:
    return [item.model_dump(by_alias=True) for item in items]


class CareerQuizService:

    QUESTIONS_TEMPERATURE = 0.5
    RESULTS_TEMPERATURE = 0.4

    def __init__(self, llm: LLMClient, store: Optional[QuizSessionStore] = None):
        self.llm = llm
        self.store = store

    async def generate_questions(
        self,
        phase1_answers: Sequence[QuizAnswer],
        user_id: Optional[int] = None,
    ) -> Tuple[List[QuizQuestion], Optional[str]]:
        """Фаза 1 -> вопросы фазы 2 и id сохранённой сессии (или None)"""
        raw = await self.llm.complete(
            QUESTIONS_SYSTEM_PROMPT,
            format_questions_prompt(phase1_answers),
            temperature=self.QUESTIONS_TEMPERATURE,
        )
        questions = self.parse_questions(extract_json_array(raw))

        session_id = None
        if user_id is not None and self.store is not None:
            saved = await persist_safely(
                self.store.create_session(
                    user_id,
                    phase1_answers=_dump(phase1_answers),
                    phase2_questions=_dump(questions),
                )
            )
            session_id = saved.session_id
            if saved.ok:
                logger.info("Phase 1 saved for user %s, session %s", user_id, session_id)
        else:
            logger.info("Skipping phase 1 save, no user")

        return questions, session_id

    async def generate_results(
        self,
        all_answers: Sequence[QuizAnswer],
        phase1_answers: Optional[Sequence[QuizAnswer]] = None,
        session_id: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> List[CareerResult]:
        """Все ответы -> профессии, отсортированные моделью по matchScore"""
        raw = await self.llm.complete(
            RESULTS_SYSTEM_PROMPT,
            format_results_prompt(all_answers),
            temperature=self.RESULTS_TEMPERATURE,
        )
        results = self.parse_results(extract_json_array(raw))

        if user_id is None or self.store is None:
            logger.info("Skipping results save, no user")
            return results

        phase2_answers = [a for a in all_answers if a.question_index >= PHASE1_QUESTION_COUNT]
        if session_id:
            saved = await persist_safely(
                self.store.update_session(
                    session_id,
                    user_id,
                    phase2_answers=_dump(phase2_answers),
                    results=_dump(results),
                )
            )
        else:
            # Фаза 1 не сохранилась (или пользователь вошёл позже) - пишем всё разом
            if phase1_answers is None:
                phase1_answers = [a for a in all_answers if a.question_index < PHASE1_QUESTION_COUNT]
            saved = await persist_safely(
                self.store.create_session(
                    user_id,
                    phase1_answers=_dump(phase1_answers),
                    phase2_answers=_dump(phase2_answers),
                    results=_dump(results),
                )
            )
        if saved.ok:
            logger.info("Results saved for user %s, session %s", user_id, saved.session_id)

        return results

    # ============ РАЗБОР ОТВЕТА МОДЕЛИ ============

    @classmethod
    def parse_questions(cls, items: list) -> List[QuizQuestion]:
        return [
            cls._parse_question(item, index)
            for index, item in enumerate(items)
            if isinstance(item, dict)
        ]

    @staticmethod
    def _parse_question(data: dict, index: int) -> QuizQuestion:
        raw_options = data.get("options")
        options = []
        if isinstance(raw_options, list):
            options = [
                QuizOption(value=as_str(o.get("value")), label=as_str(o.get("label")))
                for o in raw_options
                if isinstance(o, dict)
            ]
        return QuizQuestion(
            question=as_str(data.get("question"), default=f"Question {index + 1}"),
            type="single",
            options=options,
        )

    @classmethod
    def parse_results(cls, items: list) -> List[CareerResult]:
        return [cls._parse_result(item) for item in items if isinstance(item, dict)]

    @staticmethod
    def _parse_result(data: dict) -> CareerResult:
        return CareerResult(
            id=as_str(data.get("id")),
            title=as_str(data.get("title")),
            summary=as_str(data.get("summary")),
            salary_min=max(as_number(data.get("salaryMin")), 0.0),
            salary_max=max(as_number(data.get("salaryMax")), 0.0),
            education=as_str(data.get("education")),
            skills=as_str_list(data.get("skills")),
            match_score=as_score(data.get("matchScore")),
        )
