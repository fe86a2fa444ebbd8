"""
Генераторы дорожной карты и карьерного дерева

Та же схема, что и в тесте: промпт -> LLM -> extract_json_* -> приведение
типов -> best-effort сохранение для авторизованного пользователя.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from career_guide.db.models import CareerTree, Roadmap
from career_guide.schemas.career_tree import (
    CareerBranch,
    CareerMilestone,
    CareerTreeData,
    CareerTreeRoot,
)
from career_guide.schemas.roadmap import RoadmapStage
from career_guide.services.llm_client import LLMClient
from career_guide.services.llm_json import (
    JSONExtractionError,
    as_str,
    as_str_list,
    extract_json_array,
    extract_json_object,
)
from career_guide.services.prompts import (
    CAREER_TREE_SYSTEM_PROMPT,
    ROADMAP_SYSTEM_PROMPT,
    format_career_tree_prompt,
    format_roadmap_prompt,
)

logger = logging.getLogger(__name__)

BRANCH_COLORS = ["#2563eb", "#0d9488", "#7c3aed"]


async def _save_best_effort(db: Optional[AsyncSession], record) -> bool:
    if db is None:
        return False
    db.add(record)
    try:
        await db.commit()
    except SQLAlchemyError:
        logger.exception("Failed to save %s", record.__class__.__name__)
        await db.rollback()
        return False
    return True


class RoadmapService:

    TEMPERATURE = 0.4

    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def generate(
        self,
        career_goal: str,
        current_stage: str = "",
        timeline: str = "",
        experience: str = "",
        interests: str = "",
    ) -> List[RoadmapStage]:
        raw = await self.llm.complete(
            ROADMAP_SYSTEM_PROMPT,
            format_roadmap_prompt(career_goal, current_stage, timeline, experience, interests),
            temperature=self.TEMPERATURE,
        )
        return [
            RoadmapStage(
                title=as_str(s.get("title")),
                description=as_str(s.get("description")),
                time_range=as_str(s.get("timeRange")),
                actions=as_str_list(s.get("actions")),
                resources=as_str_list(s.get("resources")),
            )
            for s in extract_json_array(raw)
            if isinstance(s, dict)
        ]

    @staticmethod
    async def save(db: Optional[AsyncSession], user_id: int, career_goal: str, stages: List[RoadmapStage]) -> bool:
        record = Roadmap(
            user_id=user_id,
            career_goal=career_goal,
            stages=[s.model_dump(by_alias=True) for s in stages],
        )
        return await _save_best_effort(db, record)


class CareerTreeService:

    TEMPERATURE = 0.5

    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def generate(
        self,
        skills: str,
        passions: str,
        short_term_goal: str,
        long_term_goal: str,
        target_roles: str = "",
        current_stage: str = "",
    ) -> CareerTreeData:
        raw = await self.llm.complete(
            CAREER_TREE_SYSTEM_PROMPT,
            format_career_tree_prompt(
                skills, passions, target_roles, current_stage, short_term_goal, long_term_goal
            ),
            temperature=self.TEMPERATURE,
        )
        data = extract_json_object(raw, required=("root", "branches"))
        return self.parse_tree(data)

    @classmethod
    def parse_tree(cls, data: dict) -> CareerTreeData:
        root = data.get("root")
        branches = data.get("branches")
        if not isinstance(root, dict) or not isinstance(branches, list):
            raise JSONExtractionError("Invalid career tree structure")

        return CareerTreeData(
            root=CareerTreeRoot(
                title=as_str(root.get("title")),
                description=as_str(root.get("description")),
                skills=as_str_list(root.get("skills")),
            ),
            branches=[
                cls._parse_branch(branch, i)
                for i, branch in enumerate(b for b in branches if isinstance(b, dict))
            ],
        )

    @staticmethod
    def _parse_branch(data: dict, index: int) -> CareerBranch:
        milestones = data.get("milestones")
        return CareerBranch(
            id=as_str(data.get("id"), default=f"branch-{index + 1}"),
            title=as_str(data.get("title")),
            # Цвет назначаем сами, по кругу
            color=BRANCH_COLORS[index % len(BRANCH_COLORS)],
            description=as_str(data.get("description")),
            short_term_alignment=as_str(data.get("shortTermAlignment")),
            long_term_alignment=as_str(data.get("longTermAlignment")),
            milestones=[
                CareerMilestone(
                    title=as_str(m.get("title")),
                    timeframe=as_str(m.get("timeframe")),
                    skills=as_str_list(m.get("skills")),
                    actions=as_str_list(m.get("actions")),
                )
                for m in (milestones if isinstance(milestones, list) else [])
                if isinstance(m, dict)
            ],
        )

    @staticmethod
    async def save(db: Optional[AsyncSession], user_id: int, form_input: dict, tree: CareerTreeData) -> bool:
        record = CareerTree(
            user_id=user_id,
            root_title=tree.root.title,
            form_input=form_input,
            tree_data=tree.model_dump(by_alias=True),
        )
        return await _save_best_effort(db, record)
