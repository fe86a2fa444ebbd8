"""
Фазы карьерного теста

phase1 -> loading-phase2 -> phase2 -> loading-results -> results

Каждая фаза хранит только свои данные: вопросы фазы 2 существуют
начиная с Phase2, результаты - только в Results.
"""
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

from career_guide.schemas.quiz import CareerResult, QuizQuestion


@dataclass(frozen=True)
class FollowupCache:
    """Вопросы фазы 2, полученные для конкретного набора ответов фазы 1"""
    questions: Tuple[QuizQuestion, ...]
    basis: Tuple[Optional[str], ...]


@dataclass(frozen=True)
class Phase1:
    name: ClassVar[str] = "phase1"
    # Заполнено, если пользователь вернулся назад из фазы 2
    followup: Optional[FollowupCache] = None


@dataclass(frozen=True)
class LoadingPhase2:
    name: ClassVar[str] = "loading-phase2"


@dataclass(frozen=True)
class Phase2:
    name: ClassVar[str] = "phase2"
    questions: Tuple[QuizQuestion, ...]
    basis: Tuple[Optional[str], ...] = ()


@dataclass(frozen=True)
class LoadingResults:
    name: ClassVar[str] = "loading-results"
    questions: Tuple[QuizQuestion, ...]
    basis: Tuple[Optional[str], ...] = ()


@dataclass(frozen=True)
class Results:
    name: ClassVar[str] = "results"
    questions: Tuple[QuizQuestion, ...]
    results: Tuple[CareerResult, ...]


QuizPhase = Union[Phase1, LoadingPhase2, Phase2, LoadingResults, Results]
