# career_guide/routers/roadmap.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from career_guide.core.errors import error_response, generation_error_response
from career_guide.db.database import get_db
from career_guide.db.models import Roadmap, User
from career_guide.dependencies import get_current_user, get_llm, get_optional_user
from career_guide.schemas.base import ErrorResponse
from career_guide.schemas.roadmap import RoadmapHistoryItem, RoadmapRequest, RoadmapResponse
from career_guide.services.generator_service import RoadmapService
from career_guide.services.llm_client import LLMClient

router = APIRouter(prefix="/api/roadmap", tags=["AI Roadmap"])


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


@router.post("", response_model=RoadmapResponse, responses={400: {"model": ErrorResponse}})
async def generate_roadmap(
    request: RoadmapRequest,
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
    llm: LLMClient = Depends(get_llm),
):
    """Пошаговая дорожная карта к цели (5-7 этапов)"""
    career_goal = _clean(request.career_goal)
    if not career_goal:
        return error_response(400, "careerGoal is required")

    try:
        stages = await RoadmapService(llm).generate(
            career_goal=career_goal,
            current_stage=_clean(request.current_stage),
            timeline=_clean(request.timeline),
            experience=_clean(request.experience),
            interests=_clean(request.interests),
        )
    except Exception as e:
        return generation_error_response(e, "Failed to generate roadmap")

    # Сохраняем только для авторизованных, ошибка записи не ломает ответ
    if current_user:
        await RoadmapService.save(db, current_user.id, career_goal, stages)

    return RoadmapResponse(stages=stages)


@router.get("/history", response_model=List[RoadmapHistoryItem])
async def roadmap_history(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    result = await db.execute(
        select(Roadmap)
        .where(Roadmap.user_id == current_user.id)
        .order_by(Roadmap.created_at.desc())
    )
    return [RoadmapHistoryItem.model_validate(r) for r in result.scalars().all()]
