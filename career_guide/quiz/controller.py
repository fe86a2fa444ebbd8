"""
Контроллер карьерного теста (машина состояний)

Держит фазу, номер шага, ответы, id сессии и последнюю ошибку.
Два перехода ходят в сервис рекомендаций:
- конец фазы 1 (шаг 4) -> вопросы фазы 2
- последний вопрос фазы 2 -> результаты
При ошибке фаза откатывается назад, ответы сохраняются, можно повторить.
"""
import asyncio
import logging
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from career_guide.quiz.client import QuizApiError
from career_guide.quiz.phases import (
    FollowupCache,
    LoadingPhase2,
    LoadingResults,
    Phase1,
    Phase2,
    QuizPhase,
    Results,
)
from career_guide.quiz.questions import PHASE1_QUESTIONS, TOTAL_PHASE1, TOTAL_QUESTIONS
from career_guide.schemas.quiz import CareerResult, QuizAnswer, QuizQuestion

logger = logging.getLogger(__name__)


class CareerQuizApi(Protocol):
    async def generate_questions(
        self, phase1_answers: Sequence[QuizAnswer]
    ) -> Tuple[List[QuizQuestion], Optional[str]]: ...

    async def generate_results(
        self,
        all_answers: Sequence[QuizAnswer],
        phase1_answers: Sequence[QuizAnswer],
        session_id: Optional[str] = None,
    ) -> List[CareerResult]: ...


def _failure_message(exc: Exception, fallback: str) -> str:
    if isinstance(exc, QuizApiError):
        return exc.message
    return str(exc) or fallback


def resolve_answer(question: QuizQuestion, value: Optional[str]) -> str:
    """Значение варианта -> подпись; если не нашли, само значение или пустая строка"""
    for option in question.options:
        if option.value == value:
            return option.label
    return value if value is not None else ""


class QuizController:

    def __init__(self, api: CareerQuizApi):
        self.api = api
        self._generation = 0
        self._reset()

    def _reset(self) -> None:
        self.phase: QuizPhase = Phase1()
        self.step = 0
        self.answers: Dict[int, str] = {}
        self.session_id: Optional[str] = None
        self.error: Optional[str] = None
        # Меняется при retake(), чтобы запоздавший ответ не испортил новый заход
        self._generation += 1

    # ============ ПРОИЗВОДНЫЕ ЗНАЧЕНИЯ ============

    @property
    def phase2_questions(self) -> Tuple[QuizQuestion, ...]:
        return getattr(self.phase, "questions", ())

    @property
    def results(self) -> Tuple[CareerResult, ...]:
        return self.phase.results if isinstance(self.phase, Results) else ()

    @property
    def all_questions(self) -> Tuple[QuizQuestion, ...]:
        return PHASE1_QUESTIONS + self.phase2_questions

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        questions = self.all_questions
        return questions[self.step] if self.step < len(questions) else None

    @property
    def total_questions(self) -> int:
        if isinstance(self.phase, (Phase1, LoadingPhase2)):
            return TOTAL_PHASE1
        return TOTAL_QUESTIONS

    @property
    def progress(self) -> float:
        if isinstance(self.phase, (LoadingResults, Results)):
            return 100.0
        return min((self.step + 1) / self.total_questions * 100, 100.0)

    @property
    def can_proceed(self) -> bool:
        return self.step in self.answers

    @property
    def is_loading(self) -> bool:
        return isinstance(self.phase, (LoadingPhase2, LoadingResults))

    @property
    def is_last_question(self) -> bool:
        if isinstance(self.phase, Phase1):
            return self.step == TOTAL_PHASE1 - 1
        if isinstance(self.phase, Phase2):
            return self.step == TOTAL_PHASE1 + len(self.phase.questions) - 1
        return False

    # ============ ОПЕРАЦИИ ============

    def submit_answer(self, value: str) -> None:
        """Записать ответ на текущий вопрос (шаг не меняется)"""
        if self.is_loading or isinstance(self.phase, Results):
            return
        self.answers[self.step] = value

    def go_back(self) -> None:
        if self.step == 0 or self.is_loading or isinstance(self.phase, Results):
            return

        if isinstance(self.phase, Phase2) and self.step == TOTAL_PHASE1:
            # Вопросы запоминаем: если ответы фазы 1 не поменяются, второй запрос не нужен
            self.phase = Phase1(followup=FollowupCache(self.phase.questions, self.phase.basis))
        self.step -= 1

    async def go_next(self) -> None:
        # Запрос уже в полёте
        if self.is_loading or isinstance(self.phase, Results):
            return

        self.error = None

        if isinstance(self.phase, Phase1) and self.step == TOTAL_PHASE1 - 1:
            await self._load_phase2()
            return

        if isinstance(self.phase, Phase2) and self.is_last_question:
            await self._load_results()
            return

        self.step += 1

    def retake(self) -> None:
        self._reset()

    # ============ ПЕРЕХОДЫ С ЗАПРОСАМИ ============

    def _phase1_basis(self) -> Tuple[Optional[str], ...]:
        return tuple(self.answers.get(i) for i in range(TOTAL_PHASE1))

    def _build_answers(self, questions: Sequence[QuizQuestion]) -> List[QuizAnswer]:
        return [
            QuizAnswer(
                question_index=i,
                question=q.question,
                answer=resolve_answer(q, self.answers.get(i)),
            )
            for i, q in enumerate(questions)
        ]

    async def _load_phase2(self) -> None:
        basis = self._phase1_basis()
        cached = self.phase.followup if isinstance(self.phase, Phase1) else None
        if cached is not None and cached.basis == basis:
            self.phase = Phase2(questions=cached.questions, basis=basis)
            self.step = TOTAL_PHASE1
            return

        generation = self._generation
        self.phase = LoadingPhase2()
        try:
            questions, session_id = await self.api.generate_questions(
                self._build_answers(PHASE1_QUESTIONS)
            )
            if not questions:
                raise QuizApiError("No follow-up questions were generated")
        except asyncio.CancelledError:
            if generation == self._generation:
                self.phase = Phase1()
            raise
        except Exception as e:
            if generation == self._generation:
                self.error = _failure_message(e, "Failed to generate questions")
                logger.warning("Follow-up questions failed: %s", self.error)
                self.phase = Phase1()
            return

        if generation != self._generation:
            return
        if session_id:
            self.session_id = session_id
        self.phase = Phase2(questions=tuple(questions), basis=basis)
        self.step = TOTAL_PHASE1

    async def _load_results(self) -> None:
        phase2 = self.phase
        generation = self._generation
        self.phase = LoadingResults(questions=phase2.questions, basis=phase2.basis)
        try:
            results = await self.api.generate_results(
                self._build_answers(PHASE1_QUESTIONS + phase2.questions),
                self._build_answers(PHASE1_QUESTIONS),
                session_id=self.session_id,
            )
        except asyncio.CancelledError:
            if generation == self._generation:
                self.phase = phase2
            raise
        except Exception as e:
            if generation == self._generation:
                self.error = _failure_message(e, "Failed to generate results")
                logger.warning("Results failed: %s", self.error)
                self.phase = phase2
            return

        if generation != self._generation:
            return
        self.phase = Results(questions=phase2.questions, results=tuple(results))
