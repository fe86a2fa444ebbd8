from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict

from career_guide.schemas.base import CamelModel


class CareerTreeRequest(CamelModel):
    skills: Optional[str] = None
    passions: Optional[str] = None
    target_roles: Optional[str] = None
    current_stage: Optional[str] = None
    short_term_goal: Optional[str] = None
    long_term_goal: Optional[str] = None


class CareerMilestone(CamelModel):
    title: str
    timeframe: str
    skills: List[str] = []
    actions: List[str] = []


class CareerBranch(CamelModel):
    id: str
    title: str
    color: str
    description: str
    short_term_alignment: str
    long_term_alignment: str
    milestones: List[CareerMilestone] = []


class CareerTreeRoot(CamelModel):
    title: str
    description: str
    skills: List[str] = []


class CareerTreeData(CamelModel):
    root: CareerTreeRoot
    branches: List[CareerBranch]


class CareerTreeResponse(CamelModel):
    tree: CareerTreeData


class CareerTreeHistoryItem(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    root_title: str
    form_input: Optional[Dict[str, Any]] = None
    tree_data: CareerTreeData
    created_at: Optional[datetime] = None
