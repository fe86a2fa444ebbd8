# career_guide/routers/career_quiz.py
import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from career_guide.core.errors import error_response, generation_error_response
from career_guide.db.database import get_db
from career_guide.db.models import QuizSession, User
from career_guide.dependencies import get_current_user, get_llm, get_optional_user
from career_guide.schemas.base import ErrorResponse
from career_guide.schemas.quiz import (
    CareerQuizRequest,
    GenerateQuestionsResponse,
    GenerateResultsResponse,
    QuizSessionResponse,
)
from career_guide.services.career_quiz_service import CareerQuizService
from career_guide.services.llm_client import LLMClient
from career_guide.services.quiz_store import SqlQuizSessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/career-quiz", tags=["Career Quiz"])

GENERATE_QUESTIONS = "generate-questions"
GENERATE_RESULTS = "generate-results"
INVALID_ACTION_MESSAGE = 'Invalid action. Use "generate-questions" or "generate-results".'
PROCESSING_FAILED_MESSAGE = "Failed to process quiz request"


@router.post(
    "",
    response_model=Union[GenerateQuestionsResponse, GenerateResultsResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def career_quiz(
    request: CareerQuizRequest,
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
    llm: LLMClient = Depends(get_llm),
):
    """
    Карьерный тест, два действия:
    - generate-questions: 5 базовых ответов -> 10 AI вопросов (+ sessionId)
    - generate-results: 15 ответов -> 3-5 профессий
    """
    user_id = current_user.id if current_user else None
    logger.info("Career quiz action=%s user=%s", request.action, user_id if user_id is not None else "NONE")

    service = CareerQuizService(llm=llm, store=SqlQuizSessionStore(db))

    try:
        if request.action == GENERATE_QUESTIONS:
            if not request.phase1_answers:
                return error_response(400, "phase1Answers are required")

            questions, session_id = await service.generate_questions(
                request.phase1_answers, user_id=user_id
            )
            return GenerateQuestionsResponse(questions=questions, session_id=session_id)

        if request.action == GENERATE_RESULTS:
            if not request.all_answers:
                return error_response(400, "allAnswers are required")

            results = await service.generate_results(
                request.all_answers,
                phase1_answers=request.phase1_answers,
                session_id=request.session_id,
                user_id=user_id,
            )
            return GenerateResultsResponse(results=results)

    except Exception as e:
        return generation_error_response(e, PROCESSING_FAILED_MESSAGE)

    return error_response(400, INVALID_ACTION_MESSAGE)


@router.get("/history", response_model=List[QuizSessionResponse])
async def quiz_history(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """История пройденных тестов (новые сверху)"""
    result = await db.execute(
        select(QuizSession)
        .where(QuizSession.user_id == current_user.id)
        .order_by(QuizSession.created_at.desc())
    )
    return [QuizSessionResponse.model_validate(s) for s in result.scalars().all()]


@router.delete("/history/{session_id}", status_code=204)
async def delete_quiz_session(
    session_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    session = await db.get(QuizSession, session_id)
    if not session or session.user_id != current_user.id:
        raise HTTPException(404, "Quiz session not found")

    await db.delete(session)
    await db.commit()
