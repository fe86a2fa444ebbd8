# career_guide/routers/career_tree.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from career_guide.core.errors import error_response, generation_error_response
from career_guide.db.database import get_db
from career_guide.db.models import CareerTree, User
from career_guide.dependencies import get_current_user, get_llm, get_optional_user
from career_guide.schemas.base import ErrorResponse
from career_guide.schemas.career_tree import CareerTreeHistoryItem, CareerTreeRequest, CareerTreeResponse
from career_guide.services.generator_service import CareerTreeService
from career_guide.services.llm_client import LLMClient

router = APIRouter(prefix="/api/career-tree", tags=["Career Tree"])


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


@router.post("", response_model=CareerTreeResponse, responses={400: {"model": ErrorResponse}})
async def generate_career_tree(
    request: CareerTreeRequest,
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
    llm: LLMClient = Depends(get_llm),
):
    """
    Карьерное дерево: корень (текущая позиция) и 3 ветки по 4 этапа
    """
    skills, passions = _clean(request.skills), _clean(request.passions)
    short_term_goal, long_term_goal = _clean(request.short_term_goal), _clean(request.long_term_goal)

    if not skills or not passions:
        return error_response(400, "skills and passions are required")
    if not short_term_goal or not long_term_goal:
        return error_response(400, "shortTermGoal and longTermGoal are required")

    try:
        tree = await CareerTreeService(llm).generate(
            skills=skills,
            passions=passions,
            short_term_goal=short_term_goal,
            long_term_goal=long_term_goal,
            target_roles=_clean(request.target_roles),
            current_stage=_clean(request.current_stage),
        )
    except Exception as e:
        return generation_error_response(e, "Failed to generate career tree")

    if current_user:
        await CareerTreeService.save(
            db, current_user.id, request.model_dump(by_alias=True), tree
        )

    return CareerTreeResponse(tree=tree)


@router.get("/history", response_model=List[CareerTreeHistoryItem])
async def career_tree_history(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    result = await db.execute(
        select(CareerTree)
        .where(CareerTree.user_id == current_user.id)
        .order_by(CareerTree.created_at.desc())
    )
    return [CareerTreeHistoryItem.model_validate(t) for t in result.scalars().all()]
