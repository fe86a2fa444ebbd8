from datetime import datetime
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field

from career_guide.schemas.base import CamelModel


class QuizOption(CamelModel):
    value: str
    label: str


class QuizQuestion(CamelModel):
    question: str
    type: Literal["single"] = "single"
    options: List[QuizOption] = []


class QuizAnswer(CamelModel):
    question_index: int = Field(..., ge=0)
    question: str
    answer: str


class CareerResult(CamelModel):
    id: str
    title: str
    summary: str
    salary_min: float = Field(0, ge=0)
    salary_max: float = Field(0, ge=0)
    education: str
    skills: List[str] = []
    match_score: int = Field(0, ge=0, le=100)


# --- Запрос /api/career-quiz ---
# action и списки не обязательны на уровне схемы: роутер сам отвечает 400
class CareerQuizRequest(CamelModel):
    action: Optional[str] = None
    phase1_answers: Optional[List[QuizAnswer]] = Field(None, alias="phase1Answers")
    all_answers: Optional[List[QuizAnswer]] = None
    session_id: Optional[str] = None


class GenerateQuestionsResponse(CamelModel):
    questions: List[QuizQuestion]
    session_id: Optional[str] = None


class GenerateResultsResponse(CamelModel):
    results: List[CareerResult]


# --- История ---
class QuizSessionResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: Optional[datetime] = None
    phase1_answers: Optional[List[QuizAnswer]] = Field(None, alias="phase1Answers")
    phase2_questions: Optional[List[QuizQuestion]] = Field(None, alias="phase2Questions")
    phase2_answers: Optional[List[QuizAnswer]] = Field(None, alias="phase2Answers")
    results: Optional[List[CareerResult]] = None
